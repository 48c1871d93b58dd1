"""Geometric utility functions for shot calculations.

All positions are (x, y) tuples in table millimeters. Rails are axis-aligned,
so mirroring and intersection reduce to a branch on the rail's axis.
"""

import math
from typing import Optional

from ..constants import DIRECTION_EPSILON
from ..models import Point, Rail


def distance(p1: Point, p2: Point) -> float:
    """Calculate Euclidean distance between two points.

    Args:
        p1: First point (x, y) in mm
        p2: Second point (x, y) in mm

    Returns:
        Distance in mm
    """
    return math.hypot(p2[0] - p1[0], p2[1] - p1[1])


def normalize_vector(x: float, y: float) -> Optional[tuple[float, float]]:
    """Normalize a 2D vector.

    Args:
        x: X component of vector
        y: Y component of vector

    Returns:
        Unit vector, or None when the magnitude is too small to define a direction
    """
    magnitude = math.hypot(x, y)
    if magnitude < DIRECTION_EPSILON:
        return None
    return (x / magnitude, y / magnitude)


def direction_between(start: Point, end: Point) -> Optional[tuple[float, float]]:
    """Unit vector pointing from start to end, or None if they coincide."""
    return normalize_vector(end[0] - start[0], end[1] - start[1])


def mirror_point(point: Point, rail: Rail, rail_position: float) -> Point:
    """Reflect a point across a rail line.

    Args:
        point: Point to reflect
        rail: Rail to reflect across
        rail_position: Constant coordinate of the rail line (x for vertical
            rails, y for horizontal ones)

    Returns:
        The mirrored point
    """
    x, y = point
    if rail.is_vertical:
        return (2.0 * rail_position - x, y)
    return (x, 2.0 * rail_position - y)


def line_rail_intersection(
    start: Point, through: Point, rail: Rail, rail_position: float
) -> Optional[Point]:
    """Intersect the ray start -> through with a rail line.

    The ray is parameterized as ``start + t * (through - start)``. Only
    forward intersections (t >= 0) count.

    Returns:
        Intersection point, or None if the ray is parallel to the rail or the
        crossing lies behind start
    """
    x1, y1 = start
    dx = through[0] - x1
    dy = through[1] - y1

    if rail.is_vertical:
        if abs(dx) < DIRECTION_EPSILON:
            return None
        t = (rail_position - x1) / dx
    else:
        if abs(dy) < DIRECTION_EPSILON:
            return None
        t = (rail_position - y1) / dy

    if t < 0:
        return None
    return (x1 + t * dx, y1 + t * dy)


def ghost_ball_point(
    object_position: Point, direction: tuple[float, float], ball_radius: float
) -> Optional[Point]:
    """Calculate where the cue ball center must be at contact.

    The cue ball sits one ball diameter behind the object ball along the
    direction the object ball has to travel.

    Args:
        object_position: Object ball center
        direction: Intended travel direction of the object ball (need not be unit)
        ball_radius: Ball radius in mm

    Returns:
        Ghost ball center, or None for a degenerate direction
    """
    unit = normalize_vector(direction[0], direction[1])
    if unit is None:
        return None
    offset = 2.0 * ball_radius
    return (object_position[0] - unit[0] * offset, object_position[1] - unit[1] * offset)


def path_length(points: list[Point]) -> float:
    """Total length of the polyline through points."""
    return sum(distance(a, b) for a, b in zip(points, points[1:]))


__all__ = [
    "distance",
    "normalize_vector",
    "direction_between",
    "mirror_point",
    "line_rail_intersection",
    "ghost_ball_point",
    "path_length",
]
