"""Geometry module for shape primitives and ray intersection.

Components:
    sphere: Sphere primitive with closed-form ray-sphere intersection
    plane: Infinite one-sided plane
    cube: Experimental axis-aligned cube with a corner-voting normal
    disk: Flat elliptical disk
    points: Nearest-point search used by the cube normal
    intersection: Dispatch from a primitive to its intersection function

Every intersection function follows the pattern:
    hit = hit_shape(ray, shape)  # Hit(point, normal) or None
"""

from .cube import Cube, hit_cube
from .disk import Disk, hit_disk
from .intersection import Primitive, intersect
from .plane import Plane, hit_plane
from .points import index_closest, index_closest_except
from .sphere import Sphere, hit_sphere

__all__ = [
    "Sphere",
    "hit_sphere",
    "Plane",
    "hit_plane",
    "Cube",
    "hit_cube",
    "Disk",
    "hit_disk",
    "Primitive",
    "intersect",
    "index_closest",
    "index_closest_except",
]
