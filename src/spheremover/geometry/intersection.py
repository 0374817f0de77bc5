"""Ray/primitive intersection dispatch.

Each primitive kind has its own free intersection function (``hit_sphere``,
``hit_plane``, ``hit_cube``, ``hit_disk``). ``intersect`` routes a primitive to
the right one through ``functools.singledispatch``, so the set of supported
primitives is a closed registry rather than a class hierarchy.

All intersection functions are pure functions of (ray, primitive) and are
safe to call concurrently for different rays.

Example:
    >>> from src.spheremover.core.ray import Ray
    >>> from src.spheremover.core.vector import Point3, Vector3
    >>> from src.spheremover.geometry.plane import Plane
    >>> ray = Ray(Point3(0.0, 0.0, 0.0), Point3(0.0, 0.0, 1.0))
    >>> intersect(Plane(Point3(0.0, 0.0, 10.0), Vector3(0.0, 0.0, 1.0)), ray).point
    Vector3(x=0.0, y=0.0, z=10.0)
"""

from __future__ import annotations

from functools import singledispatch
from typing import Union

from src.spheremover.core.ray import Hit, Ray

from .cube import Cube, hit_cube
from .disk import Disk, hit_disk
from .plane import Plane, hit_plane
from .sphere import Sphere, hit_sphere

Primitive = Union[Sphere, Plane, Cube, Disk]


@singledispatch
def intersect(primitive: object, ray: Ray) -> Hit | None:
    """Intersect ``ray`` with ``primitive``.

    Args:
        primitive: A Sphere, Plane, Cube or Disk.
        ray: The ray to test.

    Returns:
        The hit point and surface normal, or None on a miss.

    Raises:
        TypeError: If the primitive type has no intersection function.
    """
    raise TypeError(f"Cannot intersect a ray with {type(primitive).__name__}")


@intersect.register
def _(primitive: Sphere, ray: Ray) -> Hit | None:
    return hit_sphere(ray, primitive)


@intersect.register
def _(primitive: Plane, ray: Ray) -> Hit | None:
    return hit_plane(ray, primitive)


@intersect.register
def _(primitive: Cube, ray: Ray) -> Hit | None:
    return hit_cube(ray, primitive)


@intersect.register
def _(primitive: Disk, ray: Ray) -> Hit | None:
    return hit_disk(ray, primitive)
