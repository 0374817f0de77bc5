"""Ready-made scenes.

The Sphere Mover scene is the one the interactive window starts with: three
red spheres side by side in front of a blueish back plane, lit by a small
light near the screen, on a dark gray background.

    light:   sphere at (0, 0, 50), radius 1
    plane:   through (0, 0, 100), normal normalize((0, 0, 0.5))
    spheres: at (W*0.4, H*0.5, 50), (W*0.5, H*0.5, 50), (W*0.6, H*0.5, 50),
             radius 50
    eye:     (0, 0, -2*W)

Example:
    >>> scene, eye = create_sphere_mover_scene(SphereMoverParams(width=320, height=200))
    >>> len(scene.spheres), str(eye)
    (3, '[0, 0, -640]')
"""

from __future__ import annotations

from dataclasses import dataclass

from src.spheremover.core.color import DARKGRAY
from src.spheremover.core.vector import RGB, Point3, Vector3
from src.spheremover.geometry.plane import Plane
from src.spheremover.geometry.sphere import Sphere

from .scene import Scene

# =============================================================================
# Sphere Mover Parameters
# =============================================================================


@dataclass
class SphereMoverParams:
    """Parameters for the Sphere Mover scene.

    Attributes:
        width: Frame width in pixels. Sphere positions and the eye distance
            scale with it. Default 495.
        height: Frame height in pixels. Default 270.
        sphere_x_fractions: Horizontal position of each sphere as a fraction
            of the width. One sphere is created per entry.
        sphere_radius: Radius of every sphere. Default 50.
        sphere_z: Depth of every sphere. Default 50.
        light_center: Position of the light. Default (0, 0, 50).
        light_radius: Display radius of the light. Default 1.
        plane_point: A point on the back plane. Default (0, 0, 100).
        plane_normal: Back plane normal, normalized on use.
        background: Background color. Default dark gray.

    Example:
        >>> params = SphereMoverParams()
        >>> params.width, params.height
        (495, 270)
    """

    width: int = 495
    height: int = 270
    sphere_x_fractions: tuple[float, ...] = (0.4, 0.5, 0.6)
    sphere_radius: float = 50.0
    sphere_z: float = 50.0
    light_center: tuple[float, float, float] = (0.0, 0.0, 50.0)
    light_radius: float = 1.0
    plane_point: tuple[float, float, float] = (0.0, 0.0, 100.0)
    plane_normal: tuple[float, float, float] = (0.0, 0.0, 0.5)
    background: RGB = DARKGRAY


def default_eye(width: int) -> Point3:
    """Return the eye point used with a frame ``width`` pixels wide."""
    return Point3(0.0, 0.0, -width * 2.0)


def create_sphere_mover_scene(
    params: SphereMoverParams | None = None,
) -> tuple[Scene, Point3]:
    """Create the Sphere Mover scene and its eye point.

    Args:
        params: Scene parameters. Uses the defaults when None.

    Returns:
        Tuple of (scene, eye point).
    """
    if params is None:
        params = SphereMoverParams()

    light = Sphere(Point3(*params.light_center), params.light_radius)
    plane = Plane(Point3(*params.plane_point), Vector3(*params.plane_normal).normalize())

    spheres = [
        Sphere(
            Point3(params.width * fraction, params.height * 0.5, params.sphere_z),
            params.sphere_radius,
        )
        for fraction in params.sphere_x_fractions
    ]

    scene = Scene(light=light, planes=[plane], spheres=spheres, background=params.background)
    return scene, default_eye(params.width)


def create_single_sphere_scene(width: int = 495, height: int = 270) -> tuple[Scene, Point3]:
    """Create one centered sphere in front of a plane facing +z.

    The sphere sits at the middle of the frame, so the pixel
    ``(width / 2, height / 2)`` sees the sphere rather than the plane.

    Returns:
        Tuple of (scene, eye point).
    """
    scene = Scene(
        light=Sphere(Point3(0.0, 0.0, 50.0), 1.0),
        planes=[Plane(Point3(0.0, 0.0, 100.0), Vector3(0.0, 0.0, 1.0))],
        spheres=[Sphere(Point3(width * 0.5, height * 0.5, 50.0), 50.0)],
    )
    return scene, default_eye(width)
