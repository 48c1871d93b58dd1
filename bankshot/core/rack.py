"""Synthetic ball layout for demos and tests."""

from dataclasses import dataclass
from typing import Optional

from .models import Point, TableGeometry

# sqrt(3)/2, row spacing factor of a tight triangle
ROW_SPACING_FACTOR = 0.866

# (column offset in diameters, row, color, number, striped)
_RACK_LAYOUT = [
    (0.0, 0, "yellow", 1, False),
    (-0.5, 1, "blue", 2, False),
    (0.5, 1, "orange", 13, True),
    (-1.0, 2, "red", 3, False),
    (0.0, 2, "black", 8, False),
    (1.0, 2, "yellow", 9, True),
    (-1.5, 3, "purple", 4, False),
    (-0.5, 3, "blue", 10, True),
    (0.5, 3, "maroon", 7, False),
    (1.5, 3, "red", 11, True),
    (-2.0, 4, "orange", 5, False),
    (-1.0, 4, "green", 14, True),
    (0.0, 4, "purple", 12, True),
    (1.0, 4, "green", 6, False),
    (2.0, 4, "maroon", 15, True),
]


@dataclass(frozen=True)
class RackBall:
    """A ball placed on the table."""

    number: int  # 0 is the cue ball
    color: str
    x: float
    y: float
    is_striped: bool = False

    @property
    def position(self) -> Point:
        return (self.x, self.y)

    @property
    def is_cue_ball(self) -> bool:
        return self.number == 0


def create_synthetic_rack(table: Optional[TableGeometry] = None) -> list[RackBall]:
    """Create a racked table: cue ball on the head string, 15 balls at the foot.

    The apex ball sits on the foot spot (width/2, 3/4 length) and rows extend
    toward the top rail.
    """
    table = table or TableGeometry.standard()
    diameter = table.ball_diameter
    row_spacing = diameter * ROW_SPACING_FACTOR
    foot_x = table.width / 2.0
    foot_y = table.length * 0.75

    balls = [RackBall(0, "white", table.width / 2.0, table.length * 0.25)]
    for col, row, color, number, striped in _RACK_LAYOUT:
        balls.append(
            RackBall(
                number=number,
                color=color,
                x=foot_x + col * diameter,
                y=foot_y + row * row_spacing,
                is_striped=striped,
            )
        )
    return balls


def find_ball(balls: list[RackBall], number: int) -> RackBall:
    """Get a ball by number.

    Raises:
        KeyError: If no ball carries that number
    """
    for ball in balls:
        if ball.number == number:
            return ball
    raise KeyError(f"No ball numbered {number}")


__all__ = ["RackBall", "create_synthetic_rack", "find_ball"]
