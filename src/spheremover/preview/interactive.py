"""Interactive Sphere Mover window using Taichi GGUI.

This module provides the keyboard controller that turns key presses into scene
updates, and a preview window that re-renders the frame whenever the scene
changes.

Controls:
    - Tab / Space: select the next sphere (wraps around)
    - Right / d: move the selected sphere +x
    - Left / a: move the selected sphere -x
    - Up / w: move the selected sphere -y (up the screen)
    - Down / s: move the selected sphere +y
    - i / k / j / l: move the light -y / +y / -x / +x
    - p: export the current frame to a timestamped PNG
    - q / Escape: quit

Each move is one unit. Moves never modify a Scene in place: the controller
swaps in the new Scene returned by ``sphere_move`` or ``light_move``.

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu, default_fp=ti.f64)
    >>> from src.spheremover.preview.interactive import InteractivePreview
    >>> from src.spheremover.scene.presets import create_sphere_mover_scene
    >>>
    >>> scene, eye = create_sphere_mover_scene()
    >>> preview = InteractivePreview(scene, eye, 495, 270)
    >>> preview.run()  # Blocks until the window is closed
"""

from __future__ import annotations

import logging
import os
import time
from datetime import datetime
from typing import TYPE_CHECKING

import numpy as np
import taichi as ti

from src.spheremover.core.vector import Vector3

if TYPE_CHECKING:
    import numpy.typing as npt

    from src.spheremover.core.renderer import FrameRenderer
    from src.spheremover.core.vector import Point3
    from src.spheremover.scene.scene import Scene

logger = logging.getLogger(__name__)

# Offsets applied to the selected sphere
SPHERE_MOVES: dict[str, Vector3] = {
    ti.ui.RIGHT: Vector3(1.0, 0.0, 0.0),
    "d": Vector3(1.0, 0.0, 0.0),
    ti.ui.LEFT: Vector3(-1.0, 0.0, 0.0),
    "a": Vector3(-1.0, 0.0, 0.0),
    ti.ui.UP: Vector3(0.0, -1.0, 0.0),
    "w": Vector3(0.0, -1.0, 0.0),
    ti.ui.DOWN: Vector3(0.0, 1.0, 0.0),
    "s": Vector3(0.0, 1.0, 0.0),
}

# Offsets applied to the light
LIGHT_MOVES: dict[str, Vector3] = {
    "i": Vector3(0.0, -1.0, 0.0),
    "k": Vector3(0.0, 1.0, 0.0),
    "j": Vector3(-1.0, 0.0, 0.0),
    "l": Vector3(1.0, 0.0, 0.0),
}

SELECT_KEYS = frozenset({ti.ui.TAB, ti.ui.SPACE})
QUIT_KEYS = frozenset({"q", ti.ui.ESCAPE})
EXPORT_KEY = "p"


class SphereMoverController:
    """Maps key presses to scene updates.

    Holds the current scene and the index of the selected sphere. The scene
    reference is replaced on every move; scenes handed out earlier stay as
    they were.

    Attributes:
        scene: The current scene.
        selected: Index of the sphere that movement keys act on.
        quit_requested: Set once a quit key has been pressed.
    """

    def __init__(self, scene: Scene, selected: int = 0) -> None:
        self.scene = scene
        self.selected = selected
        self.quit_requested = False

    def select_next(self) -> None:
        """Select the next sphere, wrapping back to the first."""
        self.selected += 1
        if self.selected >= len(self.scene.spheres):
            self.selected = 0

    def handle_key(self, key: str) -> bool:
        """Apply one key press.

        Args:
            key: A GGUI key name (``ti.ui.LEFT``, ``"a"``, ...).

        Returns:
            True if the scene changed and the frame needs re-rendering.
        """
        if key in SELECT_KEYS:
            self.select_next()
            logger.debug("Selected sphere %d", self.selected)
            return False

        if key in SPHERE_MOVES:
            self.scene = self.scene.sphere_move(self.selected, SPHERE_MOVES[key])
            return True

        if key in LIGHT_MOVES:
            self.scene = self.scene.light_move(LIGHT_MOVES[key])
            return True

        if key in QUIT_KEYS:
            self.quit_requested = True

        return False


class InteractivePreview:
    """Sphere Mover window using Taichi GGUI.

    Wraps ti.ui.Window, a FrameRenderer and a SphereMoverController. The
    frame is re-rendered only when the scene changes.

    Attributes:
        width: Frame width in pixels.
        height: Frame height in pixels.
        controller: The key controller holding the current scene.
        display_image: Taichi field storing the display image (RGB float).
    """

    def __init__(
        self,
        scene: Scene,
        eye: Point3,
        width: int,
        height: int,
        *,
        title: str = "Sphere Mover",
        window_scale: int = 2,
    ) -> None:
        """Initialize the preview.

        Args:
            scene: The scene to start with.
            eye: The eye point.
            width: Frame width in pixels.
            height: Frame height in pixels.
            title: Window title.
            window_scale: Window size as a multiple of the frame size.

        Raises:
            ValueError: If the frame size is not supported by the renderer.

        Note:
            The window is created lazily on the first call to run().
        """
        from src.spheremover.core.renderer import FrameRenderer

        self.width = width
        self.height = height
        self.eye = eye
        self.controller = SphereMoverController(scene)
        self._renderer: FrameRenderer = FrameRenderer(width, height)
        self._title = title
        self._window_scale = window_scale

        self._window: ti.ui.Window | None = None
        self._canvas: ti.ui.Canvas | None = None

        # Shape is (width, height) for the Taichi field
        self.display_image: ti.MatrixField = ti.Vector.field(
            3, dtype=ti.f32, shape=(width, height)
        )

    def _initialize_window(self) -> None:
        if self._window is not None:
            return

        self._window = ti.ui.Window(
            name=self._title,
            res=(self.width * self._window_scale, self.height * self._window_scale),
            vsync=True,
        )
        self._canvas = self._window.get_canvas()

    @property
    def scene(self) -> Scene:
        """Get the current scene."""
        return self.controller.scene

    @property
    def renderer(self) -> FrameRenderer:
        return self._renderer

    def update_image(self, image: npt.NDArray[np.floating]) -> None:
        """Update the display image from a 0-255 frame.

        Args:
            image: NumPy array of shape (height, width, 3), row 0 at the top.

        Raises:
            ValueError: If image shape doesn't match (height, width, 3).
        """
        expected_shape = (self.height, self.width, 3)
        if image.shape != expected_shape:
            raise ValueError(
                f"Image shape {image.shape} doesn't match expected {expected_shape}"
            )

        display = np.clip(image, 0.0, 255.0) / 255.0

        # Taichi fields use (x, y) indexing with the origin at the bottom-left
        display = np.ascontiguousarray(
            np.transpose(np.flipud(display), (1, 0, 2)).astype(np.float32)
        )
        self.display_image.from_numpy(display)

    def render_frame(self) -> None:
        """Render the current scene and load it into the display image."""
        self._renderer.render(self.controller.scene, self.eye)
        self.update_image(self._renderer.get_image_numpy())

    def process_events(self) -> bool:
        """Feed pending key presses to the controller.

        Returns:
            True if the scene changed.
        """
        changed = False
        for event in self._window.get_events(ti.ui.PRESS):
            if event.key == EXPORT_KEY:
                print(f"Exported: {self.export_frame()}")
                continue
            changed = self.controller.handle_key(event.key) or changed
        return changed

    def is_running(self) -> bool:
        """Check if the window is open and no quit key was pressed."""
        return (
            self._window is not None
            and self._window.running
            and not self.controller.quit_requested
        )

    def run(self) -> None:
        """Run the main window event loop.

        Blocks until the window is closed or a quit key is pressed.
        """
        self._initialize_window()
        self.render_frame()

        frames = 0
        start = time.perf_counter()

        while self.is_running():
            if self.process_events():
                self.render_frame()
                frames += 1

            self._canvas.set_image(self.display_image)
            self._window.show()

        elapsed = time.perf_counter() - start
        if frames and elapsed > 0:
            logger.info("Rendered %d frames, %.1f fps", frames, frames / elapsed)

    def close(self) -> None:
        """Stop the event loop; the window cannot be reopened afterwards."""
        if self._window is not None:
            self._window.running = False

    def export_frame(self, directory: str = ".") -> str:
        """Save the current frame to a timestamped PNG file.

        Returns:
            The path written.
        """
        from src.spheremover.preview.export import save_png

        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        path = os.path.join(directory, f"sphere_mover_{timestamp}.png")
        save_png(self._renderer.get_image_numpy(), path)
        return path

    @staticmethod
    def is_display_available() -> bool:
        """Check if a display is available for GUI rendering.

        Returns:
            True if a display is available, False for headless environments.
        """
        if os.name == "nt":
            return True

        if os.uname().sysname == "Darwin":
            return not (os.environ.get("SSH_CONNECTION") and not os.environ.get("DISPLAY"))

        return bool(os.environ.get("DISPLAY") or os.environ.get("WAYLAND_DISPLAY"))
