"""Analysis module exports."""

from .bank_shot import RAIL_PAIRS, ShotSolver
from .ranking import best_shot, filter_by_difficulty, group_by_pocket, top_shots

__all__ = [
    "RAIL_PAIRS",
    "ShotSolver",
    "best_shot",
    "filter_by_difficulty",
    "group_by_pocket",
    "top_shots",
]
