"""Unit tests for the planar geometry helpers."""

import math
import unittest

from bankshot.core.models import Rail
from bankshot.core.utils.geometry import (
    direction_between,
    distance,
    ghost_ball_point,
    line_rail_intersection,
    mirror_point,
    normalize_vector,
    path_length,
)

BALL_RADIUS = 28.575


class TestGeometryUtils(unittest.TestCase):
    """Test cases for distances, normalization and reflection."""

    def test_distance(self):
        """Test Euclidean distance with a 3-4-5 triangle."""
        self.assertAlmostEqual(distance((0.0, 0.0), (3.0, 4.0)), 5.0)
        self.assertAlmostEqual(distance((3.0, 4.0), (0.0, 0.0)), 5.0)

    def test_normalize_vector(self):
        """Test that normalization yields a unit vector."""
        x, y = normalize_vector(3.0, 4.0)
        self.assertAlmostEqual(x, 0.6)
        self.assertAlmostEqual(y, 0.8)
        self.assertAlmostEqual(math.hypot(x, y), 1.0)

    def test_normalize_degenerate_vector(self):
        """Test that a (near) zero vector has no direction."""
        assert normalize_vector(0.0, 0.0) is None
        assert normalize_vector(1e-12, -1e-12) is None

    def test_direction_between(self):
        assert direction_between((1.0, 1.0), (1.0, 6.0)) == (0.0, 1.0)
        assert direction_between((2.0, 2.0), (2.0, 2.0)) is None

    def test_mirror_across_each_rail(self):
        """Test reflection across vertical and horizontal rails."""
        point = (100.0, 200.0)
        assert mirror_point(point, Rail.LEFT, 0.0) == (-100.0, 200.0)
        assert mirror_point(point, Rail.RIGHT, 1118.0) == (2136.0, 200.0)
        assert mirror_point(point, Rail.BOTTOM, 0.0) == (100.0, -200.0)
        assert mirror_point(point, Rail.TOP, 2235.0) == (100.0, 4270.0)

    def test_mirror_twice_is_identity(self):
        point = (321.5, 987.25)
        for rail, position in [(Rail.RIGHT, 1118.0), (Rail.TOP, 2235.0)]:
            once = mirror_point(point, rail, position)
            self.assertEqual(mirror_point(once, rail, position), point)

    def test_line_rail_intersection(self):
        """Test that the ray crosses the rail line at the expected point."""
        point = line_rail_intersection((100.0, 100.0), (-100.0, 300.0), Rail.LEFT, 0.0)
        self.assertAlmostEqual(point[0], 0.0)
        self.assertAlmostEqual(point[1], 200.0)

        point = line_rail_intersection((100.0, 100.0), (300.0, 4000.0), Rail.TOP, 2235.0)
        self.assertAlmostEqual(point[1], 2235.0)

    def test_line_parallel_to_rail(self):
        """Test that a ray parallel to the rail never meets it."""
        assert line_rail_intersection((100.0, 100.0), (100.0, 300.0), Rail.LEFT, 0.0) is None
        assert (
            line_rail_intersection((100.0, 100.0), (900.0, 100.0), Rail.BOTTOM, 0.0)
            is None
        )

    def test_line_crossing_behind_start(self):
        """Test that crossings behind the start point are rejected."""
        assert line_rail_intersection((100.0, 100.0), (200.0, 100.0), Rail.LEFT, 0.0) is None

    def test_intersection_beyond_target_is_allowed(self):
        """The ray continues past the target point."""
        point = line_rail_intersection((100.0, 100.0), (50.0, 100.0), Rail.LEFT, 0.0)
        assert point == (0.0, 100.0)

    def test_ghost_ball_point(self):
        """Test ghost ball sits one diameter behind the object ball."""
        aim = ghost_ball_point((500.0, 500.0), (1.0, 0.0), BALL_RADIUS)
        self.assertAlmostEqual(aim[0], 500.0 - 2 * BALL_RADIUS)
        self.assertAlmostEqual(aim[1], 500.0)

    def test_ghost_ball_point_with_unnormalized_direction(self):
        aim = ghost_ball_point((500.0, 500.0), (0.0, -10.0), BALL_RADIUS)
        self.assertAlmostEqual(aim[0], 500.0)
        self.assertAlmostEqual(aim[1], 500.0 + 2 * BALL_RADIUS)

    def test_ghost_ball_point_degenerate_direction(self):
        assert ghost_ball_point((500.0, 500.0), (0.0, 0.0), BALL_RADIUS) is None

    def test_path_length(self):
        self.assertAlmostEqual(path_length([(0.0, 0.0), (3.0, 4.0), (3.0, 10.0)]), 11.0)
        self.assertEqual(path_length([(1.0, 1.0)]), 0)


if __name__ == "__main__":
    unittest.main()
