"""Infinite plane primitive with ray-plane intersection.

A plane is stored as a point on the plane plus a normal. The constructor does
not normalize the normal; callers are expected to pass a unit vector.

The intersection test is one-sided: a ray only hits the plane when it travels
*along* the normal (``D.N > 1e-6``). Rays parallel to the plane, or moving
against the normal, miss. Hits behind the ray origin (``t < 0``) also miss.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.spheremover.core.ray import Hit, Ray
from src.spheremover.core.vector import Point3, Vector3

# Smallest accepted D.N for a plane hit
PLANE_EPSILON = 1e-6


@dataclass(frozen=True)
class Plane:
    """A plane through ``point`` with normal ``normal``.

    Attributes:
        point: Any point on the plane.
        normal_vector: The plane normal (expected, but not required, to be
            unit length). Read it through ``normal()``.
    """

    point: Point3
    normal_vector: Vector3

    def normal(self, point: Point3 | None = None) -> Vector3:
        """Return the stored normal; the plane normal is the same everywhere."""
        return self.normal_vector

    def __str__(self) -> str:
        return f"plane: ({self.point}, {self.normal_vector})"


def hit_oriented_plane(ray: Ray, point: Point3, normal: Vector3) -> Hit | None:
    """Intersect a ray with the plane through ``point`` with ``normal``.

    Shared by planes and by the single-face cube approximation.

    Args:
        ray: The ray to test.
        point: A point on the plane.
        normal: The plane normal.

    Returns:
        The hit point and ``normal``, or None if ``D.N <= 1e-6`` or the hit
        lies behind the ray origin.
    """
    denominator = ray.direction.dot(normal)
    if denominator <= PLANE_EPSILON:
        return None

    t = (point - ray.start).dot(normal) / denominator
    if t < 0.0:
        return None

    return Hit(ray.at(t), normal)


def hit_plane(ray: Ray, plane: Plane) -> Hit | None:
    """Test for ray-plane intersection.

    Args:
        ray: The ray to test.
        plane: The plane to test against.

    Returns:
        The hit point and the plane normal, or None on a miss.
    """
    return hit_oriented_plane(ray, plane.point, plane.normal())
