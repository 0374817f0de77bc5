"""Experimental axis-aligned cube primitive.

A cube is stored as its center plus independent width (x), height (y) and
depth (z) extents. Its eight corners come in a fixed winding order: the bottom
ring (front-left, front-right, back-right, back-left) followed by the top ring
in the same order.

    index  0: (-, -, -)   4: (-, +, -)
           1: (+, -, -)   5: (+, +, -)
           2: (+, -, +)   6: (+, +, +)
           3: (-, -, +)   7: (-, +, +)

Known approximations
--------------------
The surface normal is estimated by corner voting rather than by comparing the
point with the six face planes:

1. take the four corners nearest to the point (found one after another, ties
   going to the lowest corner index),
2. average the vectors from the center to those corners,
3. normalize the average and keep only the integer part of each component.

For a point near the middle of a face this gives the face normal. Near edges
and corners, or when the four-nearest set is ambiguous, it can give a diagonal
vector or the zero vector.

Ray intersection uses the normal estimated at the *ray origin* as the one face
to test, and runs a plane test through the cube center against it. Rays that
should strike a different face than the one implied by their start point can
miss or hit the wrong place.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.spheremover.core.ray import Hit, Ray
from src.spheremover.core.vector import Point3, Vector3

from .plane import hit_oriented_plane
from .points import format_points, nearest_indices

# Signs of each corner offset, in winding order
CORNER_SIGNS: tuple[tuple[int, int, int], ...] = (
    (-1, -1, -1),
    (1, -1, -1),
    (1, -1, 1),
    (-1, -1, 1),
    (-1, 1, -1),
    (1, 1, -1),
    (1, 1, 1),
    (-1, 1, 1),
)

# Number of corners that vote on the normal
NORMAL_VOTERS = 4


@dataclass(frozen=True)
class Cube:
    """An axis-aligned box with a center and three extents.

    Attributes:
        center: The center point of the cube.
        width: Extent along x.
        height: Extent along y.
        depth: Extent along z.
    """

    center: Point3
    width: float
    height: float
    depth: float

    @classmethod
    def uniform(cls, center: Point3, size: float) -> Cube:
        """Create a cube with the same width, height and depth."""
        return cls(center, size, size, size)

    def corner(self, index: int) -> Point3:
        """Return corner ``index`` (0-7) in winding order."""
        sx, sy, sz = CORNER_SIGNS[index]
        return self.center + Vector3(
            sx * self.width / 2.0,
            sy * self.height / 2.0,
            sz * self.depth / 2.0,
        )

    def corners(self) -> list[Point3]:
        """Return all eight corners in winding order."""
        return [self.corner(i) for i in range(len(CORNER_SIGNS))]

    def normal(self, point: Point3) -> Vector3:
        """Estimate the outward normal near ``point`` by corner voting.

        See the module docstring for the procedure and its limits. The result
        has components in {-1, 0, 1} and may be the zero vector.
        """
        corners = self.corners()
        voters = nearest_indices(corners, point, NORMAL_VOTERS)

        total = Vector3(0.0, 0.0, 0.0)
        for index in voters:
            total = total + (corners[index] - self.center)
        average = total / NORMAL_VOTERS

        return average.normalize().intify()

    def __str__(self) -> str:
        return (
            f"cube: ({self.center}, {self.width:g}, {self.height:g}, {self.depth:g})"
        )

    def describe_corners(self) -> str:
        return format_points(self.corners())


def hit_cube(ray: Ray, cube: Cube) -> Hit | None:
    """Test a ray against the single cube face implied by the ray origin.

    Args:
        ray: The ray to test.
        cube: The cube to test against.

    Returns:
        The hit point and the estimated face normal, or None on a miss.
        A zero normal always misses.
    """
    face_normal = cube.normal(ray.start)
    return hit_oriented_plane(ray, cube.center, face_normal)
