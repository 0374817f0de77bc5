"""Unit tests for the experimental cube and the nearest-point search.

Tests cover:
- Corner winding order
- Nearest-corner search with ties
- Corner-voting normal on faces, and its zero-vector edge case
- Single-face ray intersection from the ray origin
"""

import pytest


class TestNearestPoint:
    """Tests for index_closest and index_closest_except."""

    def test_closest(self):
        """Test finding the nearest point."""
        from src.spheremover.core.vector import Point3
        from src.spheremover.geometry.points import index_closest

        points = [Point3(0.0, 0.0, 0.0), Point3(5.0, 0.0, 0.0), Point3(9.0, 0.0, 0.0)]

        assert index_closest(points, Point3(6.0, 0.0, 0.0)) == 1

    def test_tie_goes_to_lowest_index(self):
        """Test that the first of equally near points wins."""
        from src.spheremover.core.vector import Point3
        from src.spheremover.geometry.points import index_closest

        points = [Point3(0.0, 0.0, 0.0), Point3(1.0, 0.0, 0.0), Point3(3.0, 0.0, 0.0)]

        assert index_closest(points, Point3(2.0, 0.0, 0.0)) == 1

    def test_excluded_indices_are_skipped(self):
        """Test that excluded indices are never returned."""
        from src.spheremover.core.vector import Point3
        from src.spheremover.geometry.points import index_closest_except

        points = [Point3(0.0, 0.0, 0.0), Point3(1.0, 0.0, 0.0), Point3(1.0, 0.0, 0.0)]

        assert index_closest_except(points, Point3(2.0, 0.0, 0.0), {1}) == 2
        assert index_closest_except(points, Point3(2.0, 0.0, 0.0), {1, 2}) == 0

    def test_no_candidates_raises(self):
        """Test that an exhausted search raises ValueError."""
        from src.spheremover.core.vector import Point3
        from src.spheremover.geometry.points import index_closest, index_closest_except

        points = [Point3(0.0, 0.0, 0.0)]

        with pytest.raises(ValueError, match="No candidate points"):
            index_closest_except(points, Point3(1.0, 0.0, 0.0), [0])
        with pytest.raises(ValueError, match="No candidate points"):
            index_closest([], Point3(1.0, 0.0, 0.0))


class TestCubeCorners:
    """Tests for corner generation."""

    def test_winding_order(self):
        """Test the bottom ring then top ring corner order."""
        from src.spheremover.core.vector import Point3
        from src.spheremover.geometry.cube import Cube

        corners = Cube.uniform(Point3(0.0, 0.0, 0.0), 2.0).corners()

        assert corners == [
            Point3(-1.0, -1.0, -1.0),
            Point3(1.0, -1.0, -1.0),
            Point3(1.0, -1.0, 1.0),
            Point3(-1.0, -1.0, 1.0),
            Point3(-1.0, 1.0, -1.0),
            Point3(1.0, 1.0, -1.0),
            Point3(1.0, 1.0, 1.0),
            Point3(-1.0, 1.0, 1.0),
        ]

    def test_independent_extents(self):
        """Test width, height and depth along x, y and z."""
        from src.spheremover.core.vector import Point3
        from src.spheremover.geometry.cube import Cube

        cube = Cube(Point3(1.0, 2.0, 3.0), 2.0, 4.0, 6.0)

        assert cube.corner(0) == Point3(0.0, 0.0, 0.0)
        assert cube.corner(6) == Point3(2.0, 4.0, 6.0)


class TestCubeNormal:
    """Tests for the corner-voting normal."""

    @pytest.mark.parametrize(
        "point, expected",
        [
            ((0.0, 0.0, -1.0), (0.0, 0.0, -1.0)),
            ((0.0, 0.0, 1.0), (0.0, 0.0, 1.0)),
            ((1.0, 0.0, 0.0), (1.0, 0.0, 0.0)),
            ((-1.0, 0.2, 0.1), (-1.0, 0.0, 0.0)),
            ((0.3, 1.0, -0.4), (0.0, 1.0, 0.0)),
            ((0.0, -1.0, 0.0), (0.0, -1.0, 0.0)),
        ],
    )
    def test_face_points(self, point, expected):
        """Test that points near the middle of a face get the face normal."""
        from src.spheremover.core.vector import Point3, Vector3
        from src.spheremover.geometry.cube import Cube

        cube = Cube.uniform(Point3(0.0, 0.0, 0.0), 2.0)

        assert cube.normal(Point3(*point)) == Vector3(*expected)

    def test_corner_point_gives_zero_vector(self):
        """Test the known approximation at a corner."""
        from src.spheremover.core.vector import Point3, Vector3
        from src.spheremover.geometry.cube import Cube

        cube = Cube.uniform(Point3(0.0, 0.0, 0.0), 2.0)

        assert cube.normal(Point3(1.0, 1.0, 1.0)) == Vector3(0.0, 0.0, 0.0)

    def test_center_point_votes_bottom_ring(self):
        """Test that all-equal distances pick the first four corners."""
        from src.spheremover.core.vector import Point3, Vector3
        from src.spheremover.geometry.cube import Cube

        cube = Cube.uniform(Point3(0.0, 0.0, 0.0), 2.0)

        assert cube.normal(cube.center) == Vector3(0.0, -1.0, 0.0)


class TestCubeIntersection:
    """Tests for hit_cube."""

    def test_hit_from_center(self):
        """Test a ray from the center toward the face its origin implies."""
        from src.spheremover.core.ray import Ray
        from src.spheremover.core.vector import Point3, Vector3
        from src.spheremover.geometry.cube import Cube, hit_cube

        cube = Cube.uniform(Point3(0.0, 0.0, 0.0), 2.0)
        ray = Ray(Point3(0.0, 0.0, 0.0), Point3(0.0, -1.0, 0.0))

        hit = hit_cube(ray, cube)

        assert hit is not None
        assert hit.point == Point3(0.0, 0.0, 0.0)
        assert hit.normal == Vector3(0.0, -1.0, 0.0)

    def test_front_ray_misses(self):
        """Test the known approximation: the origin face faces the ray."""
        from src.spheremover.core.ray import Ray
        from src.spheremover.core.vector import Point3
        from src.spheremover.geometry.cube import Cube, hit_cube

        cube = Cube.uniform(Point3(0.0, 0.0, 0.0), 2.0)
        ray = Ray(Point3(0.0, 0.0, -10.0), Point3(0.0, 0.0, 0.0))

        assert hit_cube(ray, cube) is None

    def test_zero_normal_misses(self):
        """Test that a ray starting off a corner never hits."""
        from src.spheremover.core.ray import Ray
        from src.spheremover.core.vector import Point3
        from src.spheremover.geometry.cube import Cube, hit_cube

        cube = Cube.uniform(Point3(0.0, 0.0, 0.0), 2.0)
        ray = Ray(Point3(5.0, 5.0, 5.0), Point3(0.0, 0.0, 0.0))

        assert hit_cube(ray, cube) is None

    def test_describe_corners(self):
        """Test the corner listing."""
        from src.spheremover.core.vector import Point3
        from src.spheremover.geometry.cube import Cube

        text = Cube.uniform(Point3(0.0, 0.0, 0.0), 2.0).describe_corners()

        assert text.startswith("[-1, -1, -1], [1, -1, -1]")
        assert text.count("[") == 8
