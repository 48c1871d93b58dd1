"""Core Module - shot geometry and ranking.

This module provides the solver and the value types it exchanges:
- Table geometry and standard table constants
- Shot requests, candidates and path segments
- Direct, single-cushion and double-cushion shot enumeration
- Difficulty scoring and presentation helpers
"""

from .analysis import (
    ShotSolver,
    best_shot,
    filter_by_difficulty,
    group_by_pocket,
    top_shots,
)
from .models import (
    Difficulty,
    PathSegment,
    Point,
    Rail,
    ShotCandidate,
    ShotRequest,
    ShotType,
    TableGeometry,
)
from .rack import RackBall, create_synthetic_rack
from .validation import BankShotError, ShotRequestError

__all__ = [
    "ShotSolver",
    "best_shot",
    "filter_by_difficulty",
    "group_by_pocket",
    "top_shots",
    "Difficulty",
    "PathSegment",
    "Point",
    "Rail",
    "ShotCandidate",
    "ShotRequest",
    "ShotType",
    "TableGeometry",
    "RackBall",
    "create_synthetic_rack",
    "BankShotError",
    "ShotRequestError",
]
