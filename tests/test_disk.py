"""Unit tests for the flat elliptical disk."""


class TestDisk:
    """Tests for the Disk value."""

    def test_circle_is_flat_in_z(self):
        """Test the single-radius constructor."""
        from src.spheremover.core.vector import Point3, Vector3
        from src.spheremover.geometry.disk import Disk

        disk = Disk.circle(Point3(0.0, 0.0, 10.0), 2.0)

        assert disk.radius == Vector3(2.0, 2.0, 0.0)
        assert disk.flat_axis == 2
        assert disk.normal() == Vector3(0.0, 0.0, 1.0)

    def test_flat_axis_follows_smallest_radius(self):
        """Test the normal along the flattest axis."""
        from src.spheremover.core.vector import Point3, Vector3
        from src.spheremover.geometry.disk import Disk

        disk = Disk(Point3(0.0, 0.0, 0.0), Vector3(3.0, -0.5, 4.0))

        assert disk.flat_axis == 1
        assert disk.normal(Point3(1.0, 2.0, 3.0)) == Vector3(0.0, 1.0, 0.0)

    def test_flat_axis_tie_goes_to_lowest_axis(self):
        """Test the tie rule."""
        from src.spheremover.core.vector import Point3, Vector3
        from src.spheremover.geometry.disk import Disk

        disk = Disk(Point3(0.0, 0.0, 0.0), Vector3(1.0, 1.0, 1.0))

        assert disk.flat_axis == 0


class TestDiskIntersection:
    """Tests for hit_disk."""

    def test_hit_inside_circle(self):
        """Test a hit inside the rim."""
        from src.spheremover.core.ray import Ray
        from src.spheremover.core.vector import Point3, Vector3
        from src.spheremover.geometry.disk import Disk, hit_disk

        disk = Disk.circle(Point3(0.0, 0.0, 10.0), 2.0)
        ray = Ray(Point3(0.0, 0.0, 0.0), Point3(1.0, 0.0, 10.0))

        hit = hit_disk(ray, disk)

        assert hit is not None
        assert hit.point == Point3(1.0, 0.0, 10.0)
        assert hit.normal == Vector3(0.0, 0.0, 1.0)

    def test_miss_outside_circle(self):
        """Test that plane hits outside the rim are rejected."""
        from src.spheremover.core.ray import Ray
        from src.spheremover.core.vector import Point3
        from src.spheremover.geometry.disk import Disk, hit_disk

        disk = Disk.circle(Point3(0.0, 0.0, 10.0), 2.0)
        ray = Ray(Point3(0.0, 0.0, 0.0), Point3(3.0, 0.0, 10.0))

        assert hit_disk(ray, disk) is None

    def test_ellipse_extents(self):
        """Test containment against unequal in-plane radii."""
        from src.spheremover.core.ray import Ray
        from src.spheremover.core.vector import Point3, Vector3
        from src.spheremover.geometry.disk import Disk, hit_disk

        disk = Disk(Point3(0.0, 0.0, 0.0), Vector3(0.0, 1.0, 4.0))

        inside = Ray(Point3(-5.0, 0.0, 3.0), Point3(0.0, 0.0, 3.0))
        outside = Ray(Point3(-5.0, 0.0, 5.0), Point3(0.0, 0.0, 5.0))

        assert hit_disk(inside, disk) is not None
        assert hit_disk(outside, disk) is None

    def test_disk_is_one_sided(self):
        """Test that rays against the normal miss, as for planes."""
        from src.spheremover.core.ray import Ray
        from src.spheremover.core.vector import Point3
        from src.spheremover.geometry.disk import Disk, hit_disk

        disk = Disk.circle(Point3(0.0, 0.0, 10.0), 2.0)
        ray = Ray(Point3(0.0, 0.0, 20.0), Point3(0.0, 0.0, 10.0))

        assert hit_disk(ray, disk) is None

    def test_zero_in_plane_radius_misses(self):
        """Test a degenerate disk with two zero radii."""
        from src.spheremover.core.ray import Ray
        from src.spheremover.core.vector import Point3, Vector3
        from src.spheremover.geometry.disk import Disk, hit_disk

        disk = Disk(Point3(0.0, 0.0, 0.0), Vector3(0.0, 0.0, 1.0))
        ray = Ray(Point3(-5.0, 0.0, 0.0), Point3(0.0, 0.0, 0.0))

        assert hit_disk(ray, disk) is None
