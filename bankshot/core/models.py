"""Core data models for the shot solver.

This module contains the value types exchanged between the solver and its
collaborators: the table geometry the solver is configured with, the request
it answers, and the ranked shot candidates it produces. Every type here is
immutable once constructed; a solve call creates fresh values and keeps no
state between calls.

Coordinate System:
    Millimeters on the playing surface. Origin at the bottom-left corner
    pocket, x along the short rail (0..width), y along the long rail
    (0..length).
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any, Optional, Sequence

from .constants import (
    BALL_RADIUS_MM,
    CORNER_POCKET_OPENING_MM,
    EASY_THRESHOLD,
    HARD_THRESHOLD,
    MEDIUM_THRESHOLD,
    POCKET_NAMES,
    RAIL_TOLERANCE_MM,
    SIDE_POCKET_OPENING_MM,
    TABLE_LENGTH_MM,
    TABLE_WIDTH_MM,
)
from .validation import validate_shot_request

if TYPE_CHECKING:
    from bankshot.config.schemas import TableSettings

Point = tuple[float, float]


def as_point(value: Sequence[float]) -> Point:
    """Coerce an (x, y) pair into a tuple of finite floats.

    Raises:
        ValueError: If value is not a pair of finite numbers
    """
    if isinstance(value, (str, bytes)) or len(value) != 2:
        raise ValueError(f"Expected an (x, y) pair, got {value!r}")
    point = (float(value[0]), float(value[1]))
    if not all(math.isfinite(c) for c in point):
        raise ValueError(f"Coordinates must be finite, got {value!r}")
    return point


class Rail(Enum):
    """The four cushions, each an axis-aligned line."""

    LEFT = "left"
    RIGHT = "right"
    BOTTOM = "bottom"
    TOP = "top"

    @property
    def is_vertical(self) -> bool:
        """True for rails that are lines of constant x."""
        return self in (Rail.LEFT, Rail.RIGHT)


class ShotType(Enum):
    """Shot classes enumerated by the solver."""

    DIRECT = "direct"
    BANK = "bank"
    DOUBLE_BANK = "double_bank"


_DIFFICULTY_DISPLAY = {
    "easy": ("EASY", "#00e676"),
    "medium": ("MEDIUM", "#ffeb3b"),
    "hard": ("HARD", "#ff9800"),
    "very_hard": ("VERY HARD", "#f44336"),
}


class Difficulty(Enum):
    """Difficulty category, a fixed bucketing of the difficulty score."""

    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"
    VERY_HARD = "very_hard"

    @classmethod
    def from_score(cls, score: float) -> "Difficulty":
        if score < EASY_THRESHOLD:
            return cls.EASY
        if score < MEDIUM_THRESHOLD:
            return cls.MEDIUM
        if score < HARD_THRESHOLD:
            return cls.HARD
        return cls.VERY_HARD

    @property
    def label(self) -> str:
        """Badge text for renderers."""
        return _DIFFICULTY_DISPLAY[self.value][0]

    @property
    def color(self) -> str:
        """Hex color renderers use for this category."""
        return _DIFFICULTY_DISPLAY[self.value][1]

    @property
    def rank(self) -> int:
        return list(Difficulty).index(self)


@dataclass(frozen=True)
class TableGeometry:
    """Pool table geometry.

    Represents the playing surface the solver works on: its dimensions, the
    ball size, the four rail lines and the six pocket positions, plus the two
    margins used when deciding whether a candidate is physically plausible.
    """

    width: float = TABLE_WIDTH_MM
    length: float = TABLE_LENGTH_MM
    ball_radius: float = BALL_RADIUS_MM
    rail_tolerance: float = RAIL_TOLERANCE_MM
    on_table_margin: Optional[float] = None  # None means one ball radius
    corner_pocket_opening: float = CORNER_POCKET_OPENING_MM
    side_pocket_opening: float = SIDE_POCKET_OPENING_MM
    pocket_positions: tuple[tuple[str, Point], ...] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        """Validate dimensions and derive the pocket table."""
        sizes = (self.width, self.length, self.ball_radius, self.rail_tolerance)
        if not all(math.isfinite(v) for v in sizes):
            raise ValueError("Table dimensions must be finite")
        if self.width <= 0 or self.length <= 0:
            raise ValueError("Table dimensions must be positive")
        if self.ball_radius <= 0:
            raise ValueError("Ball radius must be positive")
        if self.rail_tolerance < 0:
            raise ValueError("Rail tolerance must be non-negative")
        if self.on_table_margin is None:
            object.__setattr__(self, "on_table_margin", self.ball_radius)
        elif not 0 <= self.on_table_margin < math.inf:
            raise ValueError("On-table margin must be finite and non-negative")

        half = self.length / 2.0
        positions = (
            (0.0, 0.0),
            (self.width, 0.0),
            (0.0, half),
            (self.width, half),
            (0.0, self.length),
            (self.width, self.length),
        )
        object.__setattr__(
            self, "pocket_positions", tuple(zip(POCKET_NAMES, positions))
        )

    @classmethod
    def standard(cls) -> "TableGeometry":
        """Create the standard 8-foot table."""
        return cls()

    @classmethod
    def from_settings(cls, settings: "TableSettings") -> "TableGeometry":
        """Create a table from validated configuration settings."""
        return cls(
            width=settings.width,
            length=settings.length,
            ball_radius=settings.ball_diameter / 2.0,
            rail_tolerance=settings.rail_tolerance,
            on_table_margin=settings.on_table_margin,
            corner_pocket_opening=settings.corner_pocket_opening,
            side_pocket_opening=settings.side_pocket_opening,
        )

    @property
    def ball_diameter(self) -> float:
        return 2.0 * self.ball_radius

    @property
    def diagonal(self) -> float:
        """Table diagonal, the distance normalizer for scoring."""
        return math.hypot(self.width, self.length)

    @property
    def pockets(self) -> dict[str, Point]:
        """Pocket name to position, in enumeration order."""
        return dict(self.pocket_positions)

    @property
    def pocket_names(self) -> list[str]:
        return [name for name, _ in self.pocket_positions]

    @property
    def rails(self) -> list[Rail]:
        return list(Rail)

    def pocket_position(self, name: str) -> Point:
        """Get a pocket position by name.

        Raises:
            KeyError: If the pocket is unknown
        """
        return self.pockets[name]

    def rail_position(self, rail: Rail) -> float:
        """Constant coordinate of a rail line (x for LEFT/RIGHT, y otherwise)."""
        if rail is Rail.LEFT:
            return 0.0
        if rail is Rail.RIGHT:
            return self.width
        if rail is Rail.BOTTOM:
            return 0.0
        if rail is Rail.TOP:
            return self.length
        raise ValueError(f"Unknown rail: {rail!r}")

    def is_on_table(self, point: Point) -> bool:
        """Check if a ball center at point can rest on the table.

        A ball center may lie up to ``on_table_margin`` beyond each rail line.
        """
        x, y = point
        m = self.on_table_margin
        return -m <= x <= self.width + m and -m <= y <= self.length + m

    def is_on_rail(self, point: Point, rail: Rail) -> bool:
        """Check if a contact point lies within the rail's span plus tolerance."""
        x, y = point
        tol = self.rail_tolerance
        if rail.is_vertical:
            return -tol <= y <= self.length + tol
        return -tol <= x <= self.width + tol

    def nearest_pocket(
        self, point: Point, max_distance: Optional[float] = None
    ) -> Optional[str]:
        """Find the pocket closest to a point.

        Args:
            point: Position in table millimeters
            max_distance: If given, pockets further away than this are ignored

        Returns:
            Pocket name, or None when no pocket is within max_distance
        """
        best_name = None
        best_distance = math.inf
        for name, (px, py) in self.pocket_positions:
            d = math.hypot(px - point[0], py - point[1])
            if d < best_distance:
                best_name, best_distance = name, d

        if max_distance is not None and best_distance > max_distance:
            return None
        return best_name

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "width": self.width,
            "length": self.length,
            "ball_radius": self.ball_radius,
            "ball_diameter": self.ball_diameter,
            "rail_tolerance": self.rail_tolerance,
            "on_table_margin": self.on_table_margin,
            "corner_pocket_opening": self.corner_pocket_opening,
            "side_pocket_opening": self.side_pocket_opening,
            "diagonal": self.diagonal,
            "pockets": {name: list(pos) for name, pos in self.pocket_positions},
            "rails": {rail.value: self.rail_position(rail) for rail in Rail},
        }


@dataclass(frozen=True)
class ShotRequest:
    """A single solve request."""

    cue_position: Point
    object_position: Point
    pocket: Optional[str] = None  # None evaluates all six pockets
    max_cushions: int = 2

    def validate(self, table: TableGeometry) -> None:
        """Reject structurally invalid requests.

        Raises:
            ShotRequestError: On unknown pocket name or max_cushions outside 0..2
        """
        validate_shot_request(
            self.pocket, self.max_cushions, table.pocket_names
        ).raise_for_errors()

    def selected_pockets(self, table: TableGeometry) -> list[tuple[str, Point]]:
        if self.pocket is None:
            return list(table.pocket_positions)
        return [(self.pocket, table.pocket_position(self.pocket))]


@dataclass(frozen=True)
class PathSegment:
    """One straight leg of a shot path, for rendering."""

    start: Point
    end: Point

    @property
    def length(self) -> float:
        return math.hypot(self.end[0] - self.start[0], self.end[1] - self.start[1])

    def to_list(self) -> list[list[float]]:
        return [list(self.start), list(self.end)]


@dataclass(frozen=True)
class ShotCandidate:
    """A feasible way to pot the object ball.

    Path segments run cue -> aim point, then object ball -> each cushion
    point in order -> pocket. ``rails_used`` lines up with ``cushion_points``.
    """

    cue_position: Point
    object_position: Point
    target_pocket: Point
    pocket_name: str
    aim_point: Point
    cushion_points: tuple[Point, ...]
    rails_used: tuple[Rail, ...]
    total_distance: float
    difficulty_score: float
    difficulty: Difficulty
    path_segments: tuple[PathSegment, ...]

    @property
    def cushion_count(self) -> int:
        return len(self.cushion_points)

    @property
    def shot_type(self) -> ShotType:
        if self.cushion_count == 0:
            return ShotType.DIRECT
        if self.cushion_count == 1:
            return ShotType.BANK
        return ShotType.DOUBLE_BANK

    @property
    def object_travel_distance(self) -> float:
        """Distance the object ball covers from its spot to the pocket."""
        return sum(segment.length for segment in self.path_segments[1:])

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "cue_position": list(self.cue_position),
            "object_position": list(self.object_position),
            "target_pocket": list(self.target_pocket),
            "pocket_name": self.pocket_name,
            "aim_point": list(self.aim_point),
            "cushion_points": [list(p) for p in self.cushion_points],
            "rails_used": [rail.value for rail in self.rails_used],
            "shot_type": self.shot_type.value,
            "total_distance": self.total_distance,
            "difficulty_score": self.difficulty_score,
            "difficulty": self.difficulty.value,
            "difficulty_label": self.difficulty.label,
            "difficulty_color": self.difficulty.color,
            "path_segments": [segment.to_list() for segment in self.path_segments],
        }


__all__ = [
    "Point",
    "as_point",
    "Rail",
    "ShotType",
    "Difficulty",
    "TableGeometry",
    "ShotRequest",
    "PathSegment",
    "ShotCandidate",
]
