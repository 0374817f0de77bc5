"""Image export utilities for rendered frames.

Frames are float arrays of shape (H, W, 3) with channels on a 0-255 scale.
Exporters clamp every channel to [0, 255] and truncate it to an integer.

Supported formats:
    - PPM (plain-text ``P3``)
    - PNG (8-bit RGB via Pillow)

The PPM layout is a three-line header followed by one ``R G B`` line per
pixel, rows top to bottom and pixels left to right:

    P3
    <width> <height>
    255
    R G B
    ...

Example:
    >>> from src.spheremover.core.renderer import FrameRenderer
    >>> from src.spheremover.preview.export import save_image
    >>>
    >>> renderer = FrameRenderer(495, 270)
    >>> renderer.render(scene, eye)
    >>> save_image(renderer.get_image_numpy(), "spheres.ppm")
"""

from __future__ import annotations

import logging
from pathlib import Path

import numpy as np
import numpy.typing as npt
from PIL import Image as PILImage

logger = logging.getLogger(__name__)

# Largest channel value written to PPM files
PPM_MAX_VALUE = 255


def _check_frame_shape(image: npt.NDArray[np.floating]) -> None:
    if image.ndim != 3 or image.shape[2] != 3:
        raise ValueError(f"Expected an image of shape (H, W, 3), got {image.shape}")


def image_to_uint8(image: npt.NDArray[np.floating]) -> npt.NDArray[np.uint8]:
    """Convert a 0-255 float frame to uint8.

    Clamps to [0, 255], then truncates toward zero (no rounding).

    Args:
        image: Frame array of shape (H, W, 3).

    Returns:
        8-bit image array of shape (H, W, 3).

    Raises:
        ValueError: If the array does not have shape (H, W, 3).
    """
    _check_frame_shape(image)
    return np.clip(image, 0.0, 255.0).astype(np.uint8)


def save_ppm(image: npt.NDArray[np.floating], filepath: str | Path) -> Path:
    """Save a frame as a plain-text PPM (``P3``) file.

    Args:
        image: Frame array of shape (H, W, 3).
        filepath: Output file path.

    Returns:
        The path written.

    Raises:
        ValueError: If the array does not have shape (H, W, 3).
    """
    pixels = image_to_uint8(image)
    height, width, _ = pixels.shape

    path = Path(filepath)
    with path.open("w", encoding="ascii") as f:
        f.write(f"P3\n{width} {height}\n{PPM_MAX_VALUE}\n")
        np.savetxt(f, pixels.reshape(-1, 3), fmt="%d", delimiter=" ")

    logger.info("Saved %dx%d PPM to %s", width, height, path)
    return path


def save_png(image: npt.NDArray[np.floating], filepath: str | Path) -> Path:
    """Save a frame as an 8-bit RGB PNG file.

    Args:
        image: Frame array of shape (H, W, 3).
        filepath: Output file path (should end in .png).

    Returns:
        The path written.

    Raises:
        ValueError: If the array does not have shape (H, W, 3).
    """
    pixels = image_to_uint8(image)

    path = Path(filepath)
    pil_image = PILImage.fromarray(pixels)
    pil_image.save(path)

    logger.info("Saved %dx%d PNG to %s", pixels.shape[1], pixels.shape[0], path)
    return path


def save_image(image: npt.NDArray[np.floating], filepath: str | Path) -> Path:
    """Save a frame, picking the format from the file extension.

    ``.ppm`` writes a plain-text PPM; ``.png`` writes a PNG.

    Raises:
        ValueError: If the extension is not supported.
    """
    path = Path(filepath)
    suffix = path.suffix.lower()
    if suffix == ".ppm":
        return save_ppm(image, path)
    if suffix == ".png":
        return save_png(image, path)
    raise ValueError(f"Unsupported image format '{suffix}' (expected .ppm or .png)")
