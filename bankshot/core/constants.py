"""Standard table constants for the shot solver.

All measurements are in millimeters on the playing surface of a standard
8-foot pool table. The coordinate origin is the bottom-left corner pocket,
x runs along the short rail and y along the long rail.

These values describe the reference table. A solver for a different table
receives its own TableGeometry (see models.py); nothing here is mutated at
runtime.
"""

# ============================================================================
# TABLE DIMENSIONS
# ============================================================================

# 8ft table playing surface: 44" x 88"
TABLE_WIDTH_MM = 1118.0  # short rail, x-axis
TABLE_LENGTH_MM = 2235.0  # long rail, y-axis


# ============================================================================
# BALL DIMENSIONS
# ============================================================================

# Standard pool ball: 57.15mm (2.25 inches) diameter
BALL_DIAMETER_MM = 57.15
BALL_RADIUS_MM = BALL_DIAMETER_MM / 2.0


# ============================================================================
# POCKET DIMENSIONS
# ============================================================================

# Informational only, the solver aims at the pocket point
CORNER_POCKET_OPENING_MM = 114.3  # ~4.5 inches
SIDE_POCKET_OPENING_MM = 127.0  # ~5 inches

POCKET_NAMES = (
    "bottom_left",
    "bottom_right",
    "side_left",
    "side_right",
    "top_left",
    "top_right",
)


# ============================================================================
# SOLVER MARGINS
# ============================================================================

# Cushion contact may land this far past a physical rail end (cushion nose)
RAIL_TOLERANCE_MM = 50.0

# Numeric tolerances
DIRECTION_EPSILON = 1e-9
DISTANCE_EPSILON = 1e-6


# ============================================================================
# DIFFICULTY SCORING
# ============================================================================

# score = min(1, DISTANCE_WEIGHT * travel / (2 * diagonal) + CUSHION_PENALTY * n)
DISTANCE_WEIGHT = 0.5
CUSHION_PENALTY = 0.25
MAX_DIFFICULTY_SCORE = 1.0

# Upper bounds (exclusive) for EASY, MEDIUM and HARD; anything above is VERY_HARD
EASY_THRESHOLD = 0.25
MEDIUM_THRESHOLD = 0.5
HARD_THRESHOLD = 0.75

# Renderers draw at most this many candidates
DEFAULT_DISPLAY_SHOTS = 8

MAX_CUSHIONS = 2


__all__ = [
    # Table dimensions
    "TABLE_WIDTH_MM",
    "TABLE_LENGTH_MM",
    # Ball dimensions
    "BALL_DIAMETER_MM",
    "BALL_RADIUS_MM",
    # Pockets
    "CORNER_POCKET_OPENING_MM",
    "SIDE_POCKET_OPENING_MM",
    "POCKET_NAMES",
    # Solver margins
    "RAIL_TOLERANCE_MM",
    "DIRECTION_EPSILON",
    "DISTANCE_EPSILON",
    # Scoring
    "DISTANCE_WEIGHT",
    "CUSHION_PENALTY",
    "MAX_DIFFICULTY_SCORE",
    "EASY_THRESHOLD",
    "MEDIUM_THRESHOLD",
    "HARD_THRESHOLD",
    "DEFAULT_DISPLAY_SHOTS",
    "MAX_CUSHIONS",
]
