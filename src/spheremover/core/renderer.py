"""Data-parallel frame renderer.

This module renders a whole frame of ``Scene.color`` in one Taichi kernel.
Each pixel ``(x, y)`` casts a ray from the eye point toward ``(x, y, 0)`` and
writes only its own cell of the frame buffer, so Taichi parallelizes the
outermost pixel loop freely.

The scene is uploaded into Taichi fields before every frame
(structure-of-arrays layout with fixed capacity). The kernel works in double
precision and applies the same shading and nearest-hit rules as
``Scene.color``:

- sphere and plane hits are shaded with the unclamped diffuse term,
- the hit nearest to the eye wins, and a later primitive at exactly the same
  distance replaces an earlier one,
- the winning color is clamped to [0, 255]; with no hit the background is
  written unclamped.

Row ``y`` of the returned image is screen row ``y`` (row 0 at the top, as the
pixel coordinates are used directly as screen coordinates).

``render_reference`` computes the same frame with a plain Python loop over
``Scene.color``. It is slow but has no Taichi dependency in the shading path,
which makes it the ground truth for the kernel.

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu, default_fp=ti.f64)
    >>> from src.spheremover.core.renderer import FrameRenderer
    >>> from src.spheremover.scene.presets import create_sphere_mover_scene
    >>>
    >>> scene, eye = create_sphere_mover_scene()
    >>> renderer = FrameRenderer(495, 270)
    >>> renderer.render(scene, eye)
    >>> image = renderer.get_image_numpy()  # (270, 495, 3) float64
"""

import logging
from typing import TYPE_CHECKING

import numpy as np
import numpy.typing as npt
import taichi as ti
import taichi.math as tm

from .color import BLUEISH, RED, WHITE, pack_argb
from .vector import Point3

if TYPE_CHECKING:
    from src.spheremover.scene.scene import Scene

logger = logging.getLogger(__name__)

# Double precision 3D vector
vec3d = ti.types.vector(3, ti.f64)

# Smallest accepted D.N for a plane hit
PLANE_EPSILON = 1e-6


@ti.dataclass
class FrameHit:
    """Result of a ray-primitive test inside a kernel.

    Attributes:
        hit: 1 if the ray hit the primitive, 0 otherwise.
        point: The hit point. Only valid if hit == 1.
        normal: The surface normal at the hit point. Only valid if hit == 1.
    """

    hit: ti.i32
    point: vec3d
    normal: vec3d


# =============================================================================
# Scene Storage
# =============================================================================

# Maximum number of primitives per frame
MAX_SPHERES = 256
MAX_PLANES = 64

# Sphere storage: Structure of Arrays layout
_sphere_centers = ti.Vector.field(3, dtype=ti.f64, shape=MAX_SPHERES)
_sphere_radii = ti.field(dtype=ti.f64, shape=MAX_SPHERES)
_num_spheres = ti.field(dtype=ti.i32, shape=())

# Plane storage
_plane_points = ti.Vector.field(3, dtype=ti.f64, shape=MAX_PLANES)
_plane_normals = ti.Vector.field(3, dtype=ti.f64, shape=MAX_PLANES)
_num_planes = ti.field(dtype=ti.i32, shape=())

_light_center = ti.Vector.field(3, dtype=ti.f64, shape=())
_background = ti.Vector.field(3, dtype=ti.f64, shape=())

# Shading palette: red, white, blueish
_palette = ti.Vector.field(3, dtype=ti.f64, shape=3)
_PALETTE_RED = 0
_PALETTE_WHITE = 1
_PALETTE_BLUEISH = 2


def _pack_vectors(vectors: list, capacity: int) -> npt.NDArray[np.float64]:
    data = np.zeros((capacity, 3), dtype=np.float64)
    for i, v in enumerate(vectors):
        data[i] = (v.x, v.y, v.z)
    return data


def upload_scene(scene: "Scene") -> None:
    """Copy a scene snapshot into the renderer's Taichi fields.

    Args:
        scene: The scene to render next.

    Raises:
        RuntimeError: If the scene has more than MAX_SPHERES spheres or more
            than MAX_PLANES planes.
    """
    if len(scene.spheres) > MAX_SPHERES:
        raise RuntimeError(
            f"Maximum number of spheres ({MAX_SPHERES}) exceeded: {len(scene.spheres)}"
        )
    if len(scene.planes) > MAX_PLANES:
        raise RuntimeError(
            f"Maximum number of planes ({MAX_PLANES}) exceeded: {len(scene.planes)}"
        )

    radii = np.zeros(MAX_SPHERES, dtype=np.float64)
    radii[: len(scene.spheres)] = [s.radius for s in scene.spheres]

    _sphere_centers.from_numpy(_pack_vectors([s.center for s in scene.spheres], MAX_SPHERES))
    _sphere_radii.from_numpy(radii)
    _num_spheres[None] = len(scene.spheres)

    _plane_points.from_numpy(_pack_vectors([p.point for p in scene.planes], MAX_PLANES))
    _plane_normals.from_numpy(
        _pack_vectors([p.normal_vector for p in scene.planes], MAX_PLANES)
    )
    _num_planes[None] = len(scene.planes)

    light = scene.light.center
    _light_center[None] = [light.x, light.y, light.z]
    background = scene.background
    _background[None] = [background.x, background.y, background.z]

    _palette.from_numpy(_pack_vectors([RED, WHITE, BLUEISH], 3))


def get_sphere_count() -> int:
    """Get the number of spheres uploaded for the next frame."""
    return int(_num_spheres[None])


def get_plane_count() -> int:
    """Get the number of planes uploaded for the next frame."""
    return int(_num_planes[None])


# =============================================================================
# Render Target
# =============================================================================

# Maximum supported frame size (preallocated to avoid kernel recompilation)
MAX_IMAGE_WIDTH = 1920
MAX_IMAGE_HEIGHT = 1080

_frame = ti.Vector.field(3, dtype=ti.f64, shape=(MAX_IMAGE_WIDTH, MAX_IMAGE_HEIGHT))


# =============================================================================
# Kernel Functions
# =============================================================================


@ti.func
def _miss() -> FrameHit:
    return FrameHit(hit=0, point=vec3d(0.0, 0.0, 0.0), normal=vec3d(0.0, 0.0, 0.0))


@ti.func
def _hit_sphere(origin: vec3d, direction: vec3d, center: vec3d, radius: ti.f64) -> FrameHit:
    """Near root of the ray-sphere quadratic; tangent rays miss."""
    rec = _miss()

    oc = origin - center
    a = direction.dot(direction)
    b = 2.0 * direction.dot(oc)
    c = oc.dot(oc) - radius * radius
    discriminant = b * b - 4.0 * a * c

    if discriminant > 0.0:
        t = (-b - tm.sqrt(discriminant)) / (a * 2.0)
        point = origin + direction * t
        rec.hit = 1
        rec.point = point
        rec.normal = (point - center) * (1.0 / radius)

    return rec


@ti.func
def _hit_plane(origin: vec3d, direction: vec3d, point: vec3d, normal: vec3d) -> FrameHit:
    """One-sided ray-plane test."""
    rec = _miss()

    denominator = direction.dot(normal)
    if denominator > PLANE_EPSILON:
        t = (point - origin).dot(normal) / denominator
        if t >= 0.0:
            rec.hit = 1
            rec.point = origin + direction * t
            rec.normal = normal

    return rec


@ti.func
def _diffuse(light: vec3d, point: vec3d, normal: vec3d) -> ti.f64:
    to_light = light - point
    return (to_light / to_light.norm()).dot(normal / normal.norm())


@ti.func
def _clamp255(color: vec3d) -> vec3d:
    result = color
    for c in ti.static(range(3)):
        if color[c] > 255.0:
            result[c] = 255.0
        elif color[c] < 0.0:
            result[c] = 0.0
    return result


@ti.func
def shade_pixel(x: ti.f64, y: ti.f64, eye: vec3d) -> vec3d:
    """Trace one pixel against the uploaded scene.

    Args:
        x: Screen x coordinate.
        y: Screen y coordinate.
        eye: The eye point.

    Returns:
        The clamped color of the nearest hit, or the background on a miss.
    """
    direction = vec3d(x, y, 0.0) - eye
    light = _light_center[None]
    background = _background[None]
    red = _palette[_PALETTE_RED]
    white = _palette[_PALETTE_WHITE]
    blueish = _palette[_PALETTE_BLUEISH]

    found = 0
    best_depth = ti.cast(tm.inf, ti.f64)
    color = background

    for s in range(_num_spheres[None]):
        rec = _hit_sphere(eye, direction, _sphere_centers[s], _sphere_radii[s])
        if rec.hit == 1:
            depth = (rec.point - eye).norm()
            # Equal depth replaces the earlier hit
            if depth <= best_depth:
                dt = _diffuse(light, rec.point, rec.normal)
                color = (red + white * dt) * 0.5
                best_depth = depth
                found = 1

    for p in range(_num_planes[None]):
        rec = _hit_plane(eye, direction, _plane_points[p], _plane_normals[p])
        if rec.hit == 1:
            depth = (rec.point - eye).norm()
            if depth <= best_depth:
                dt = _diffuse(light, rec.point, rec.normal)
                color = ((blueish + white * dt) * 0.5) * 0.5 + background * 0.5
                best_depth = depth
                found = 1

    if found == 1:
        color = _clamp255(color)

    return color


@ti.kernel
def _render_frame(
    width: ti.i32,
    height: ti.i32,
    eye_x: ti.f64,
    eye_y: ti.f64,
    eye_z: ti.f64,
):
    """Shade every pixel of a width x height frame into the frame buffer."""
    eye = vec3d(eye_x, eye_y, eye_z)
    for i, j in ti.ndrange(width, height):
        _frame[i, j] = shade_pixel(ti.cast(i, ti.f64), ti.cast(j, ti.f64), eye)


@ti.kernel
def _render_single_pixel(x: ti.f64, y: ti.f64, eye_x: ti.f64, eye_y: ti.f64, eye_z: ti.f64) -> vec3d:
    return shade_pixel(x, y, vec3d(eye_x, eye_y, eye_z))


# =============================================================================
# Public Rendering API
# =============================================================================


class FrameRenderer:
    """Renders scenes into a fixed-size frame.

    The renderer shares the module's preallocated frame buffer; only the
    top-left ``width x height`` region is used.

    Attributes:
        width: Frame width in pixels.
        height: Frame height in pixels.
    """

    def __init__(self, width: int, height: int) -> None:
        """Initialize the renderer.

        Args:
            width: Frame width in pixels (1 to MAX_IMAGE_WIDTH).
            height: Frame height in pixels (1 to MAX_IMAGE_HEIGHT).

        Raises:
            ValueError: If a dimension is outside the supported range.
        """
        if not (1 <= width <= MAX_IMAGE_WIDTH and 1 <= height <= MAX_IMAGE_HEIGHT):
            raise ValueError(
                f"Frame dimensions ({width}x{height}) must be between 1x1 and "
                f"{MAX_IMAGE_WIDTH}x{MAX_IMAGE_HEIGHT}"
            )
        self._width = width
        self._height = height
        self._frame_count = 0

    @property
    def width(self) -> int:
        """Get the frame width."""
        return self._width

    @property
    def height(self) -> int:
        """Get the frame height."""
        return self._height

    @property
    def frame_count(self) -> int:
        """Get the number of frames rendered so far."""
        return self._frame_count

    def render(self, scene: "Scene", eye: Point3) -> None:
        """Render one frame of ``scene`` seen from ``eye``.

        Raises:
            RuntimeError: If the scene exceeds the renderer capacity.
        """
        upload_scene(scene)
        _render_frame(self._width, self._height, eye.x, eye.y, eye.z)
        self._frame_count += 1
        logger.debug(
            "Rendered frame %d (%dx%d, %d spheres, %d planes)",
            self._frame_count,
            self._width,
            self._height,
            len(scene.spheres),
            len(scene.planes),
        )

    def render_pixel(self, scene: "Scene", eye: Point3, x: float, y: float) -> tuple[float, float, float]:
        """Shade a single pixel with the kernel code path.

        Used for testing and debugging; ``render`` covers whole frames.
        """
        upload_scene(scene)
        color = _render_single_pixel(float(x), float(y), eye.x, eye.y, eye.z)
        return (float(color[0]), float(color[1]), float(color[2]))

    def _check_rendered(self) -> None:
        if self._frame_count == 0:
            raise RuntimeError("No frame rendered yet. Call render() first.")

    def get_image_numpy(self) -> npt.NDArray[np.float64]:
        """Get the last frame as a NumPy array.

        Returns:
            Array of shape (height, width, 3), dtype float64, channels on a
            0-255 scale. Row ``y`` is screen row ``y``.

        Raises:
            RuntimeError: If no frame has been rendered.
        """
        self._check_rendered()
        full = _frame.to_numpy()
        image = full[: self._width, : self._height, :]
        return np.ascontiguousarray(np.transpose(image, (1, 0, 2)))

    def get_frame_packed(self, *, swap_green_blue: bool = True) -> npt.NDArray[np.uint32]:
        """Get the last frame as opaque 32-bit pixels (see ``pack_argb``)."""
        return pack_argb(self.get_image_numpy(), swap_green_blue=swap_green_blue)


def render_reference(
    scene: "Scene",
    eye: Point3,
    width: int,
    height: int,
) -> npt.NDArray[np.float64]:
    """Render a frame with a plain Python loop over ``Scene.color``.

    Args:
        scene: The scene to render.
        eye: The eye point.
        width: Frame width in pixels.
        height: Frame height in pixels.

    Returns:
        Array of shape (height, width, 3), dtype float64.
    """
    if width < 1 or height < 1:
        raise ValueError(f"Frame dimensions ({width}x{height}) must be positive")

    image = np.empty((height, width, 3), dtype=np.float64)
    for y in range(height):
        for x in range(width):
            c = scene.color(eye, x, y)
            image[y, x] = (c.x, c.y, c.z)

    logger.debug("Rendered reference frame (%dx%d)", width, height)
    return image
