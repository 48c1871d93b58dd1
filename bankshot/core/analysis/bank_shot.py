"""Direct and bank shot solver.

Finds every geometrically plausible way to pot an object ball: straight in,
off one cushion, or off two cushions. Cushion paths use the mirror method:
reflecting the pocket across a rail turns the bent path into a straight line,
and where that line crosses the real rail is the contact point. The model is
ideal specular reflection; spin and throw are ignored.
"""

import logging
from itertools import permutations
from typing import TYPE_CHECKING, Optional, Sequence

from ..constants import (
    CUSHION_PENALTY,
    DISTANCE_EPSILON,
    DISTANCE_WEIGHT,
    MAX_DIFFICULTY_SCORE,
)
from ..models import (
    Difficulty,
    PathSegment,
    Point,
    Rail,
    ShotCandidate,
    ShotRequest,
    TableGeometry,
    as_point,
)
from ..utils.geometry import (
    direction_between,
    distance,
    ghost_ball_point,
    line_rail_intersection,
    mirror_point,
    path_length,
)
from ..validation import ShotRequestError

if TYPE_CHECKING:
    from bankshot.config import Config

logger = logging.getLogger(__name__)

# Ordered pairs of distinct rails; a ball cannot bank twice in a row off one cushion
RAIL_PAIRS: tuple[tuple[Rail, Rail], ...] = tuple(permutations(Rail, 2))


def _coerce_position(value: Sequence[float], field: str) -> Point:
    try:
        return as_point(value)
    except (TypeError, ValueError) as e:
        raise ShotRequestError(
            f"{field} must be an (x, y) pair of finite numbers, got {value!r}",
            field=field,
            value=value,
        ) from e


class ShotSolver:
    """Enumerates and ranks shots for a cue ball / object ball / pocket triple.

    The solver is stateless: it only holds the immutable table geometry, so a
    single instance can be shared freely and every call is reproducible from
    its inputs.

    Example:
        solver = ShotSolver()
        shots = solver.solve((300, 1000), (500, 500), "bottom_right", 2)
        best = shots[0] if shots else None
    """

    def __init__(self, table: Optional[TableGeometry] = None):
        self.table = table or TableGeometry.standard()

    @classmethod
    def from_config(cls, config: "Config") -> "ShotSolver":
        """Build a solver for the table described by the configuration."""
        settings = config.settings()
        return cls(TableGeometry.from_settings(settings.table))

    def solve(
        self,
        cue_position: Sequence[float],
        object_position: Sequence[float],
        pocket: Optional[str] = None,
        max_cushions: int = 2,
    ) -> list[ShotCandidate]:
        """Find all viable shots, easiest first.

        Args:
            cue_position: Cue ball center (x, y) in mm
            object_position: Object ball center (x, y) in mm
            pocket: Pocket name, or None to consider all six pockets
            max_cushions: 0 for direct only, 1 adds single-cushion shots,
                2 adds double-cushion shots

        Returns:
            Feasible candidates sorted by ascending difficulty score. An empty
            list means no shot is feasible under these constraints.

        Raises:
            ShotRequestError: If the pocket is unknown or max_cushions is not
                0, 1 or 2
        """
        request = ShotRequest(
            cue_position=_coerce_position(cue_position, "cue_position"),
            object_position=_coerce_position(object_position, "object_position"),
            pocket=pocket,
            max_cushions=max_cushions,
        )
        return self.solve_request(request)

    def solve_request(self, request: ShotRequest) -> list[ShotCandidate]:
        """Solve a prepared request. See solve()."""
        request.validate(self.table)
        cue = _coerce_position(request.cue_position, "cue_position")
        obj = _coerce_position(request.object_position, "object_position")

        shots: list[ShotCandidate] = []
        evaluated = 0

        for name, pocket_pos in request.selected_pockets(self.table):
            evaluated += 1
            direct = self._calc_direct(cue, obj, name, pocket_pos)
            if direct:
                shots.append(direct)

            if request.max_cushions >= 1:
                for rail in Rail:
                    evaluated += 1
                    shot = self._calc_single_bank(cue, obj, name, pocket_pos, rail)
                    if shot:
                        shots.append(shot)

            if request.max_cushions >= 2:
                for rail1, rail2 in RAIL_PAIRS:
                    evaluated += 1
                    shot = self._calc_double_bank(
                        cue, obj, name, pocket_pos, rail1, rail2
                    )
                    if shot:
                        shots.append(shot)

        # Stable sort keeps enumeration order among equal scores
        shots.sort(key=lambda shot: shot.difficulty_score)
        logger.debug(
            "Solved cue=%s object=%s pocket=%s max_cushions=%d: %d/%d candidates",
            cue,
            obj,
            request.pocket or "all",
            request.max_cushions,
            len(shots),
            evaluated,
        )
        return shots

    # ------------------------------------------------------------------
    # Shot classes
    # ------------------------------------------------------------------

    def _calc_direct(
        self, cue: Point, obj: Point, pocket_name: str, pocket: Point
    ) -> Optional[ShotCandidate]:
        if distance(obj, pocket) < DISTANCE_EPSILON:
            logger.debug("Direct to %s rejected: object ball on pocket", pocket_name)
            return None

        aim = self._aim_toward(obj, pocket)
        if aim is None:
            logger.debug("Direct to %s rejected: aim point off table", pocket_name)
            return None

        return self._build_candidate(cue, obj, pocket_name, pocket, aim, [], [])

    def _calc_single_bank(
        self, cue: Point, obj: Point, pocket_name: str, pocket: Point, rail: Rail
    ) -> Optional[ShotCandidate]:
        mirror = mirror_point(pocket, rail, self.table.rail_position(rail))

        bank_point = self._cushion_contact(obj, mirror, rail)
        if bank_point is None:
            logger.debug("Bank %s to %s rejected: no contact", rail.value, pocket_name)
            return None
        if distance(obj, bank_point) < DISTANCE_EPSILON:
            return None

        aim = self._aim_toward(obj, bank_point)
        if aim is None:
            logger.debug(
                "Bank %s to %s rejected: aim point off table", rail.value, pocket_name
            )
            return None

        return self._build_candidate(
            cue, obj, pocket_name, pocket, aim, [bank_point], [rail]
        )

    def _calc_double_bank(
        self,
        cue: Point,
        obj: Point,
        pocket_name: str,
        pocket: Point,
        rail1: Rail,
        rail2: Rail,
    ) -> Optional[ShotCandidate]:
        # Unfold innermost first: pocket across the second rail, then the first
        mirror1 = mirror_point(pocket, rail2, self.table.rail_position(rail2))
        mirror2 = mirror_point(mirror1, rail1, self.table.rail_position(rail1))

        bank1 = self._cushion_contact(obj, mirror2, rail1)
        if bank1 is None:
            return None

        bank2 = self._cushion_contact(bank1, mirror1, rail2)
        if bank2 is None:
            return None

        if distance(obj, bank1) < DISTANCE_EPSILON:
            return None

        aim = self._aim_toward(obj, bank1)
        if aim is None:
            logger.debug(
                "Double bank %s/%s to %s rejected: aim point off table",
                rail1.value,
                rail2.value,
                pocket_name,
            )
            return None

        return self._build_candidate(
            cue, obj, pocket_name, pocket, aim, [bank1, bank2], [rail1, rail2]
        )

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _cushion_contact(self, start: Point, target: Point, rail: Rail) -> Optional[Point]:
        """Where the ray start -> target meets the rail, if within its span."""
        point = line_rail_intersection(
            start, target, rail, self.table.rail_position(rail)
        )
        if point is None or not self.table.is_on_rail(point, rail):
            return None
        return point

    def _aim_toward(self, obj: Point, target: Point) -> Optional[Point]:
        """Ghost ball point sending the object ball toward target, if on table."""
        direction = direction_between(obj, target)
        if direction is None:
            return None
        aim = ghost_ball_point(obj, direction, self.table.ball_radius)
        if aim is None or not self.table.is_on_table(aim):
            return None
        return aim

    def _build_candidate(
        self,
        cue: Point,
        obj: Point,
        pocket_name: str,
        pocket: Point,
        aim: Point,
        cushion_points: list[Point],
        rails: list[Rail],
    ) -> ShotCandidate:
        object_path = [obj, *cushion_points, pocket]
        segments = [PathSegment(cue, aim)] + [
            PathSegment(a, b) for a, b in zip(object_path, object_path[1:])
        ]

        cue_distance = segments[0].length
        object_distance = path_length(object_path)
        score = self.rate_difficulty(cue_distance, object_distance, len(rails))

        return ShotCandidate(
            cue_position=cue,
            object_position=obj,
            target_pocket=pocket,
            pocket_name=pocket_name,
            aim_point=aim,
            cushion_points=tuple(cushion_points),
            rails_used=tuple(rails),
            total_distance=cue_distance + object_distance,
            difficulty_score=score,
            difficulty=Difficulty.from_score(score),
            path_segments=tuple(segments),
        )

    def rate_difficulty(
        self, cue_distance: float, object_distance: float, cushion_count: int
    ) -> float:
        """Score a shot in [0, 1].

        Travel distance is normalized by twice the table diagonal and weighted
        by half; every cushion adds a flat penalty.
        """
        distance_factor = (cue_distance + object_distance) / (2.0 * self.table.diagonal)
        score = distance_factor * DISTANCE_WEIGHT + cushion_count * CUSHION_PENALTY
        return min(MAX_DIFFICULTY_SCORE, score)


__all__ = ["ShotSolver", "RAIL_PAIRS"]
