"""Ray data structure and the hit result it produces.

A ray is a directed segment between two points. The direction (``end - start``)
is computed once when the ray is built and is *not* normalized, so the ray
parameter ``t`` is measured in units of the segment length: ``t = 0`` is the
start point and ``t = 1`` the end point.

Rays never own or reference the primitives they are tested against. The
intersection formulas live next to each primitive in ``geometry``;
``Ray.intersect`` picks the right one for the primitive it is given.

Example:
    >>> from src.spheremover.core.vector import Point3
    >>> from src.spheremover.geometry.sphere import Sphere
    >>> ray = Ray(Point3(0.0, 0.0, -10.0), Point3(0.0, 0.0, 0.0))
    >>> hit = ray.intersect(Sphere(Point3(0.0, 0.0, 5.0), 1.0))
    >>> str(hit.point), str(hit.normal)
    ('[0, 0, 4]', '[0, 0, -1]')
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, NamedTuple

from .vector import Point2, Point3, Vector3

if TYPE_CHECKING:
    from src.spheremover.geometry.intersection import Primitive


class Hit(NamedTuple):
    """Where a ray meets a primitive.

    Attributes:
        point: The intersection point in world space.
        normal: The primitive's surface normal at ``point``.
    """

    point: Point3
    normal: Vector3


@dataclass(frozen=True)
class Ray:
    """A ray from ``start`` through ``end``.

    Attributes:
        start: The ray origin.
        end: A second point on the ray; together with ``start`` it fixes the
            direction and the scale of the ray parameter.
        direction: ``end - start``, cached at construction.
    """

    start: Point3
    end: Point3
    direction: Vector3 = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "direction", self.end - self.start)

    @classmethod
    def toward_screen(cls, view_point: Point3, screen_position: Point2) -> Ray:
        """Create a ray from ``view_point`` toward a point on the ``z = 0`` screen.

        Args:
            view_point: The eye position.
            screen_position: The (x, y) screen position; z is taken as 0.

        Returns:
            A ray ending at ``(screen_position.x, screen_position.y, 0)``.
        """
        return cls(view_point, Point3(screen_position.x, screen_position.y, 0.0))

    def at(self, t: float) -> Point3:
        """Return the point ``start + t * direction``."""
        return self.start + self.direction * t

    def intersect(self, primitive: Primitive) -> Hit | None:
        """Intersect this ray with a primitive.

        Args:
            primitive: A Sphere, Plane, Cube or Disk.

        Returns:
            The hit point and surface normal, or None if the ray misses.

        Raises:
            TypeError: If the primitive type is not supported.
        """
        # Import here to avoid circular imports (geometry depends on Ray)
        from src.spheremover.geometry.intersection import intersect

        return intersect(primitive, self)

    def __str__(self) -> str:
        return f"{self.start} -> {self.end}"
