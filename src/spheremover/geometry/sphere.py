"""Sphere primitive with closed-form ray-sphere intersection.

The ray-sphere intersection substitutes the ray's parametric line
``P(t) = P0 + t * D`` into the implicit sphere equation
``|P - C|^2 = r^2``, giving the quadratic

    a*t^2 + b*t + c = 0

with ``a = D.D``, ``b = 2 * D.(P0 - C)`` and ``c = (P0 - C).(P0 - C) - r^2``.

Two simplifications are kept on purpose and callers rely on them:

- A discriminant ``<= 0`` is a miss, so a ray that only grazes the sphere
  (exact tangency) reports no hit.
- Only the smaller root is used and it is not checked against ``t >= 0``, so a
  sphere behind the ray origin can still report a hit.

Example:
    >>> from src.spheremover.core.ray import Ray
    >>> from src.spheremover.core.vector import Point3
    >>> sphere = Sphere(Point3(0.0, 0.0, 0.0), 1.0)
    >>> ray = Ray(Point3(0.0, 0.0, -5.0), Point3(0.0, 0.0, -4.0))
    >>> hit_sphere(ray, sphere).point
    Vector3(x=0.0, y=0.0, z=-1.0)
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from src.spheremover.core.ray import Hit, Ray
from src.spheremover.core.vector import Point3, Vector3


@dataclass(frozen=True)
class Sphere:
    """A sphere defined by center point and radius.

    The radius is fixed for the sphere's lifetime; moving a sphere produces a
    new Sphere (see ``moved``).

    Attributes:
        center: The center point of the sphere.
        radius: The radius of the sphere (non-negative).
    """

    center: Point3
    radius: float

    @property
    def radius_squared(self) -> float:
        return self.radius * self.radius

    def normal(self, point: Point3) -> Vector3:
        """Return the outward normal at a point on the surface.

        Computed as ``(point - center) / radius``. This has unit length only
        when ``point`` lies on the surface; the point is not validated.
        """
        return (point - self.center) / self.radius

    def moved(self, offset: Vector3) -> Sphere:
        """Return a sphere with the same radius, shifted by ``offset``."""
        return Sphere(self.center + offset, self.radius)

    def __str__(self) -> str:
        return f"sphere: ({self.center}, {self.radius:g})"


def hit_sphere(ray: Ray, sphere: Sphere) -> Hit | None:
    """Test for ray-sphere intersection.

    Args:
        ray: The ray to test.
        sphere: The sphere to test against.

    Returns:
        The near intersection point and the sphere normal there, or None when
        the discriminant is zero or negative.
    """
    direction = ray.direction
    oc = ray.start - sphere.center

    a = direction.dot(direction)
    b = 2.0 * direction.dot(oc)
    c = oc.dot(oc) - sphere.radius_squared

    discriminant = b * b - 4.0 * a * c

    # Tangent rays (discriminant == 0) count as a miss
    if discriminant <= 0.0:
        return None

    t = (-b - math.sqrt(discriminant)) / (a * 2.0)

    point = ray.at(t)
    return Hit(point, sphere.normal(point))
