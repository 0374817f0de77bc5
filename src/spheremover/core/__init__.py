"""Core building blocks: vectors, colors and rays.

Components:
    vector: Immutable 2D/3D/4D vectors (points, directions and colors)
    color: Named colors and 32-bit pixel packing
    ray: Ray data structure and the Hit result of an intersection
    renderer: Data-parallel frame renderer built on Taichi kernels

All vector and ray values are immutable; every operation returns a new value.
"""

from .color import (
    BLACK,
    BLUE,
    BLUEISH,
    DARKGRAY,
    GRAY,
    GREEN,
    RED,
    WHITE,
    pack_argb,
)
from .ray import Hit, Ray
from .vector import RG, RGB, RGBA, Point2, Point3, Vector2, Vector3, Vector4

# Note: renderer is NOT imported here because importing it allocates Taichi
# fields. Import it directly from src.spheremover.core.renderer when needed.

__all__ = [
    "Vector2",
    "Vector3",
    "Vector4",
    "Point2",
    "Point3",
    "RG",
    "RGB",
    "RGBA",
    "Ray",
    "Hit",
    "pack_argb",
    "RED",
    "GREEN",
    "BLUE",
    "BLACK",
    "WHITE",
    "BLUEISH",
    "GRAY",
    "DARKGRAY",
]
