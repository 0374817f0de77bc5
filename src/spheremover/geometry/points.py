"""Nearest-point search over ordered point lists.

Distances are compared squared. The search scans points in list order and
keeps the first strict improvement, so ties go to the lowest index.
"""

from __future__ import annotations

from collections.abc import Collection, Sequence

from src.spheremover.core.vector import Point3


def index_closest_except(
    points: Sequence[Point3],
    target: Point3,
    excluded: Collection[int] = (),
) -> int:
    """Return the index of the point closest to ``target``, skipping some indices.

    Args:
        points: The candidate points, in a fixed order.
        target: The point to measure distances from.
        excluded: Indices that may not be returned.

    Returns:
        The index of the nearest non-excluded point.

    Raises:
        ValueError: If every point is excluded (or ``points`` is empty).
    """
    best_index = -1
    best_distance = 0.0
    for index, point in enumerate(points):
        if index in excluded:
            continue
        distance = point.distance_squared(target)
        if best_index < 0 or distance < best_distance:
            best_index = index
            best_distance = distance

    if best_index < 0:
        raise ValueError("No candidate points left to search")
    return best_index


def index_closest(points: Sequence[Point3], target: Point3) -> int:
    """Return the index of the point closest to ``target``."""
    return index_closest_except(points, target)


def nearest_indices(points: Sequence[Point3], target: Point3, count: int) -> list[int]:
    """Return the indices of the ``count`` points nearest to ``target``.

    Found one at a time: the nearest, then the nearest of the rest, and so on.
    """
    chosen: list[int] = []
    for _ in range(count):
        chosen.append(index_closest_except(points, target, chosen))
    return chosen


def format_points(points: Sequence[Point3]) -> str:
    """Return the points as a comma separated string."""
    return ", ".join(str(p) for p in points)
