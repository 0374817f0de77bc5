"""Immutable scene: one light, planes, spheres and a background color.

A Scene is a persistent value. The "move" operations never modify the scene
they are called on; they build and return a new Scene, and the caller replaces
the reference it holds. A renderer working from an older Scene is therefore
never affected by a move made while its frame is in flight.

Shading
-------
``Scene.color`` casts one ray from the eye point toward the screen position
``(x, y, 0)`` and tests it against every sphere and every plane. For each hit
it computes the diffuse term

    dt = normalize(light - hit) . normalize(normal)

which is *not* clamped, so surfaces facing away from the light get a
negative term and come out darker than their base tone. Then:

- sphere hit:  ``(red + white * dt) * 0.5``
- plane hit:   ``((blueish + white * dt) * 0.5) * 0.5 + background * 0.5``

Hits are collected in a dictionary keyed by the distance from the eye point
(a one-sample z-buffer). The color with the smallest distance wins and is
clamped to [0, 255]. Two hits at exactly the same distance share a key, so the
one recorded later wins. With no hit at all the background is returned as is,
without clamping.

Example:
    >>> from src.spheremover.core.vector import Point3, Vector3
    >>> from src.spheremover.geometry import Plane, Sphere
    >>> scene = Scene(
    ...     light=Sphere(Point3(0.0, 0.0, 50.0), 1.0),
    ...     planes=[Plane(Point3(0.0, 0.0, 100.0), Vector3(0.0, 0.0, 1.0))],
    ...     spheres=[Sphere(Point3(160.0, 100.0, 50.0), 50.0)],
    ... )
    >>> moved = scene.sphere_move(0, Vector3(1.0, 0.0, 0.0))
    >>> scene.spheres[0].center.x, moved.spheres[0].center.x
    (160.0, 161.0)
"""

from __future__ import annotations

import dataclasses
from collections.abc import Sequence
from dataclasses import dataclass

from src.spheremover.core.color import BLUEISH, DARKGRAY, RED, WHITE
from src.spheremover.core.ray import Ray
from src.spheremover.core.vector import RGB, Point3, Vector3
from src.spheremover.geometry.plane import Plane, hit_plane
from src.spheremover.geometry.sphere import Sphere, hit_sphere


def diffuse_term(light_position: Point3, point: Point3, normal: Vector3) -> float:
    """Return the unclamped diffuse term at ``point``.

    The dot product of the normalized direction toward the light and the
    normalized surface normal. Ranges over [-1, 1].
    """
    light_direction = light_position - point
    return light_direction.normalize().dot(normal.normalize())


def shade_sphere(dt: float) -> RGB:
    """Return the color of a sphere hit with diffuse term ``dt``."""
    return (RED + WHITE * dt) * 0.5


def shade_plane(dt: float, background: RGB) -> RGB:
    """Return the color of a plane hit, half blended with the background."""
    return ((BLUEISH + WHITE * dt) * 0.5) * 0.5 + background * 0.5


@dataclass(frozen=True)
class Scene:
    """A light, planes, spheres and a background color.

    Lists passed to the constructor are stored as tuples.

    Attributes:
        light: The light source, modeled as a sphere. Only its center is used
            for shading; the radius is for display.
        planes: The planes in the scene.
        spheres: The spheres in the scene.
        background: The color returned where nothing is hit.
    """

    light: Sphere
    planes: Sequence[Plane] = ()
    spheres: Sequence[Sphere] = ()
    background: RGB = DARKGRAY

    def __post_init__(self) -> None:
        object.__setattr__(self, "planes", tuple(self.planes))
        object.__setattr__(self, "spheres", tuple(self.spheres))

    # =========================================================================
    # Shading
    # =========================================================================

    def color(self, eye: Point3, x: float, y: float) -> RGB:
        """Ray trace a single pixel.

        Args:
            eye: The eye point the ray starts from.
            x: Screen x coordinate (the ray passes through ``(x, y, 0)``).
            y: Screen y coordinate.

        Returns:
            The clamped color of the nearest hit, or the unclamped background
            color when no primitive is hit.

        Raises:
            ZeroDivisionError: If the light center lies exactly on a hit point
                (the light direction cannot be normalized). The frame kernel
                yields NaN channels for such pixels instead of raising.
        """
        ray = Ray(eye, Point3(float(x), float(y), 0.0))
        light_position = self.light.center

        depth_color: dict[float, RGB] = {}

        for sphere in self.spheres:
            hit = hit_sphere(ray, sphere)
            if hit is None:
                continue
            dt = diffuse_term(light_position, hit.point, hit.normal)
            depth_color[eye.distance(hit.point)] = shade_sphere(dt)

        for plane in self.planes:
            hit = hit_plane(ray, plane)
            if hit is None:
                continue
            dt = diffuse_term(light_position, hit.point, hit.normal)
            depth_color[eye.distance(hit.point)] = shade_plane(dt, self.background)

        if not depth_color:
            return self.background

        return depth_color[min(depth_color)].clamp255()

    # =========================================================================
    # Persistent updates
    # =========================================================================

    def sphere_move(self, index: int, offset: Vector3) -> Scene:
        """Return a new scene where sphere ``index`` is shifted by ``offset``.

        The sphere keeps its radius; the light, planes, background and all
        other spheres are carried over unchanged. With no spheres (or an index
        that matches no sphere) the result is a new Scene equal to this one.
        """
        if not self.spheres:
            return dataclasses.replace(self)

        spheres = tuple(
            sphere.moved(offset) if i == index else sphere
            for i, sphere in enumerate(self.spheres)
        )
        return dataclasses.replace(self, spheres=spheres)

    def light_move(self, offset: Vector3) -> Scene:
        """Return a new scene where only the light is shifted by ``offset``."""
        return dataclasses.replace(self, light=self.light.moved(offset))

    def with_sphere(self, sphere: Sphere) -> Scene:
        """Return a new scene with ``sphere`` appended."""
        return dataclasses.replace(self, spheres=(*self.spheres, sphere))

    def with_plane(self, plane: Plane) -> Scene:
        """Return a new scene with ``plane`` appended."""
        return dataclasses.replace(self, planes=(*self.planes, plane))

    # =========================================================================
    # Queries
    # =========================================================================

    @property
    def sphere_count(self) -> int:
        return len(self.spheres)

    @property
    def plane_count(self) -> int:
        return len(self.planes)

    def describe(self) -> str:
        """List the elements of the scene, one per line."""
        lines = [f"background color: {self.background}", f"light: {self.light}"]
        lines.extend(str(sphere) for sphere in self.spheres)
        lines.extend(str(plane) for plane in self.planes)
        return "\n".join(lines) + "\n"

    def __str__(self) -> str:
        return self.describe()
