"""Flat elliptical disk primitive.

A disk has a center and a radius vector ``(rx, ry, rz)``. One of the radius
components is expected to be zero (the flat axis); the single-radius
constructor ``Disk.circle`` produces ``(r, r, 0)``, a circle facing z.

The disk normal is the unit vector along the flattest axis, i.e. the axis with
the smallest absolute radius component (ties go to the lowest axis).
"""

from __future__ import annotations

from dataclasses import dataclass

from src.spheremover.core.ray import Hit, Ray
from src.spheremover.core.vector import Point3, Vector3

from .plane import hit_oriented_plane

_AXES = (
    Vector3(1.0, 0.0, 0.0),
    Vector3(0.0, 1.0, 0.0),
    Vector3(0.0, 0.0, 1.0),
)


@dataclass(frozen=True)
class Disk:
    """A disk (or ellipse) centered at ``center``.

    Attributes:
        center: The center of the disk.
        radius: Radius per axis; the smallest component marks the flat axis.
    """

    center: Point3
    radius: Vector3

    @classmethod
    def circle(cls, center: Point3, radius: float) -> Disk:
        """Create a circular disk lying in the plane ``z = center.z``."""
        return cls(center, Vector3(radius, radius, 0.0))

    @property
    def flat_axis(self) -> int:
        extents = [abs(c) for c in self.radius]
        return extents.index(min(extents))

    def normal(self, point: Point3 | None = None) -> Vector3:
        """Return the disk normal; it is the same at every point."""
        return _AXES[self.flat_axis]

    def __str__(self) -> str:
        return f"disk: ({self.center}, {self.radius})"


def hit_disk(ray: Ray, disk: Disk) -> Hit | None:
    """Test for ray-disk intersection.

    Runs the one-sided plane test against the disk's plane, then keeps the hit
    only if it falls inside the ellipse spanned by the two in-plane radii.

    Args:
        ray: The ray to test.
        disk: The disk to test against.

    Returns:
        The hit point and the disk normal, or None on a miss.
    """
    hit = hit_oriented_plane(ray, disk.center, disk.normal())
    if hit is None:
        return None

    flat = disk.flat_axis
    offset = tuple(hit.point - disk.center)
    radii = tuple(disk.radius)

    inside = 0.0
    for axis in range(3):
        if axis == flat:
            continue
        if radii[axis] == 0.0:
            return None
        inside += (offset[axis] / radii[axis]) ** 2

    if inside > 1.0:
        return None
    return hit
