"""Selection helpers for presenting ranked shots.

The solver returns every feasible candidate. Renderers typically show a
handful, easiest first and most prominent, and often group by pocket.
"""

from collections import OrderedDict
from typing import Optional, Sequence

from ..constants import DEFAULT_DISPLAY_SHOTS
from ..models import Difficulty, ShotCandidate


def best_shot(shots: Sequence[ShotCandidate]) -> Optional[ShotCandidate]:
    """Return the easiest shot, or None when nothing is feasible."""
    return shots[0] if shots else None


def top_shots(
    shots: Sequence[ShotCandidate], limit: int = DEFAULT_DISPLAY_SHOTS
) -> list[ShotCandidate]:
    """Return at most ``limit`` shots, keeping ranking order.

    Raises:
        ValueError: If limit is negative
    """
    if limit < 0:
        raise ValueError("limit must be non-negative")
    return list(shots[:limit])


def group_by_pocket(
    shots: Sequence[ShotCandidate],
) -> "OrderedDict[str, list[ShotCandidate]]":
    """Group shots by pocket name.

    Groups appear in the order their first (easiest) shot appears, and shots
    within a group keep their ranking order.
    """
    groups: OrderedDict[str, list[ShotCandidate]] = OrderedDict()
    for shot in shots:
        groups.setdefault(shot.pocket_name, []).append(shot)
    return groups


def filter_by_difficulty(
    shots: Sequence[ShotCandidate], max_difficulty: Difficulty
) -> list[ShotCandidate]:
    """Keep shots whose category is at or below max_difficulty."""
    return [shot for shot in shots if shot.difficulty.rank <= max_difficulty.rank]


__all__ = ["best_shot", "top_shots", "group_by_pocket", "filter_by_difficulty"]
