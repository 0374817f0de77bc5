"""Unit tests for the Ray type and intersection dispatch."""

import pytest


class TestRay:
    """Tests for Ray construction and evaluation."""

    def test_direction_is_end_minus_start(self):
        """Test that the direction is cached and not normalized."""
        from src.spheremover.core.ray import Ray
        from src.spheremover.core.vector import Point3, Vector3

        ray = Ray(Point3(1.0, 2.0, 3.0), Point3(4.0, 6.0, 3.0))

        assert ray.direction == Vector3(3.0, 4.0, 0.0)

    def test_at(self):
        """Test evaluating the ray at a parameter value."""
        from src.spheremover.core.ray import Ray
        from src.spheremover.core.vector import Point3

        ray = Ray(Point3(0.0, 0.0, 0.0), Point3(2.0, 4.0, 6.0))

        assert ray.at(0.0) == Point3(0.0, 0.0, 0.0)
        assert ray.at(0.5) == Point3(1.0, 2.0, 3.0)
        assert ray.at(1.0) == ray.end

    def test_toward_screen(self):
        """Test building a ray toward the z = 0 screen."""
        from src.spheremover.core.ray import Ray
        from src.spheremover.core.vector import Point2, Point3

        eye = Point3(0.0, 0.0, -990.0)
        ray = Ray.toward_screen(eye, Point2(10.0, 20.0))

        assert ray.start == eye
        assert ray.end == Point3(10.0, 20.0, 0.0)

    def test_str(self):
        """Test the string form."""
        from src.spheremover.core.ray import Ray
        from src.spheremover.core.vector import Point3

        ray = Ray(Point3(0.0, 0.0, 0.0), Point3(1.0, 2.0, 3.0))

        assert str(ray) == "[0, 0, 0] -> [1, 2, 3]"


class TestRayIntersect:
    """Tests for Ray.intersect dispatch over primitive kinds."""

    def test_intersect_sphere(self):
        """Test dispatch to the sphere test."""
        from src.spheremover.core.ray import Ray
        from src.spheremover.core.vector import Point3
        from src.spheremover.geometry.sphere import Sphere

        ray = Ray(Point3(0.0, 0.0, -10.0), Point3(0.0, 0.0, 0.0))
        hit = ray.intersect(Sphere(Point3(0.0, 0.0, 5.0), 1.0))

        assert hit is not None
        assert hit.point.distance(Point3(0.0, 0.0, 4.0)) < 1e-12

    def test_intersect_plane(self):
        """Test dispatch to the plane test."""
        from src.spheremover.core.ray import Ray
        from src.spheremover.core.vector import Point3, Vector3
        from src.spheremover.geometry.plane import Plane

        ray = Ray(Point3(0.0, 0.0, 0.0), Point3(0.0, 0.0, 1.0))
        hit = ray.intersect(Plane(Point3(0.0, 0.0, 10.0), Vector3(0.0, 0.0, 1.0)))

        assert hit is not None
        assert hit.point == Point3(0.0, 0.0, 10.0)

    def test_intersect_cube(self):
        """Test dispatch to the cube test."""
        from src.spheremover.core.ray import Ray
        from src.spheremover.core.vector import Point3, Vector3
        from src.spheremover.geometry.cube import Cube

        ray = Ray(Point3(0.0, 0.0, 0.0), Point3(0.0, -1.0, 0.0))
        hit = ray.intersect(Cube.uniform(Point3(0.0, 0.0, 0.0), 2.0))

        assert hit is not None
        assert hit.normal == Vector3(0.0, -1.0, 0.0)

    def test_intersect_disk(self):
        """Test dispatch to the disk test."""
        from src.spheremover.core.ray import Ray
        from src.spheremover.core.vector import Point3
        from src.spheremover.geometry.disk import Disk

        ray = Ray(Point3(0.0, 0.0, 0.0), Point3(1.0, 0.0, 10.0))
        hit = ray.intersect(Disk.circle(Point3(0.0, 0.0, 10.0), 2.0))

        assert hit is not None
        assert hit.point == Point3(1.0, 0.0, 10.0)

    def test_intersect_unsupported_type(self):
        """Test that unknown primitives raise TypeError."""
        from src.spheremover.core.ray import Ray
        from src.spheremover.core.vector import Point3

        ray = Ray(Point3(0.0, 0.0, 0.0), Point3(0.0, 0.0, 1.0))

        with pytest.raises(TypeError, match="Cannot intersect"):
            ray.intersect(object())

    def test_intersect_function_matches_method(self):
        """Test that the free function and the method agree."""
        from src.spheremover.core.ray import Ray
        from src.spheremover.core.vector import Point3
        from src.spheremover.geometry.intersection import intersect
        from src.spheremover.geometry.sphere import Sphere

        sphere = Sphere(Point3(1.0, 2.0, 30.0), 3.0)
        ray = Ray(Point3(0.0, 0.0, 0.0), Point3(0.1, 0.2, 3.0))

        assert intersect(sphere, ray) == ray.intersect(sphere)
