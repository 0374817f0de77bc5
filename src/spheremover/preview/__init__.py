"""Frame export and the interactive Sphere Mover window.

Components:
    export: PPM and PNG export of rendered frames
    interactive: Taichi GGUI window and keyboard controller

Example:
    >>> from src.spheremover.preview import save_image
    >>> save_image(renderer.get_image_numpy(), "spheres.ppm")

For the interactive window (after ti.init()):
    >>> from src.spheremover.preview import InteractivePreview
    >>> preview = InteractivePreview(scene, eye, 495, 270)
    >>> preview.run()
"""

from src.spheremover.preview.export import (
    image_to_uint8,
    save_image,
    save_png,
    save_ppm,
)
from src.spheremover.preview.interactive import InteractivePreview, SphereMoverController

__all__ = [
    # Interactive preview
    "InteractivePreview",
    "SphereMoverController",
    # Export functions
    "image_to_uint8",
    "save_ppm",
    "save_png",
    "save_image",
]
