"""Core utility functions for the shot solver."""

from .geometry import (
    direction_between,
    distance,
    ghost_ball_point,
    line_rail_intersection,
    mirror_point,
    normalize_vector,
    path_length,
)

__all__ = [
    "direction_between",
    "distance",
    "ghost_ball_point",
    "line_rail_intersection",
    "mirror_point",
    "normalize_vector",
    "path_length",
]
