"""Named colors and 32-bit pixel packing.

Colors are ``RGB`` vectors with channels on a 0-255 scale. Shading may push
channels outside that range; ``Vector3.clamp255`` brings them back.

The display path packs a frame into opaque 32-bit pixels. The Sphere Mover
pixel layout puts red in bits 16-23, *blue* in bits 8-15 and *green* in bits
0-7. ``pack_argb`` uses that layout by default. Pass ``swap_green_blue=False`` for
the conventional ``0xAARRGGBB`` layout.

Example:
    >>> import numpy as np
    >>> frame = np.array([[[255.0, 16.0, 32.0]]])
    >>> hex(int(pack_argb(frame)[0, 0]))
    '0xffff2010'
    >>> hex(int(pack_argb(frame, swap_green_blue=False)[0, 0]))
    '0xffff1020'
"""

import numpy as np
import numpy.typing as npt

from .vector import RGB

RED = RGB(255.0, 0.0, 0.0)
GREEN = RGB(0.0, 255.0, 0.0)
BLUE = RGB(0.0, 0.0, 255.0)

BLACK = RGB(0.0, 0.0, 0.0)
WHITE = RGB(255.0, 255.0, 255.0)

BLUEISH = RGB(80.0, 140.0, 255.0)
GRAY = RGB(128.0, 128.0, 128.0)

DARKGRAY = RGB(32.0, 32.0, 32.0)

OPAQUE_ALPHA = np.uint32(0xFF000000)


def pack_argb(
    image: npt.NDArray[np.floating],
    *,
    swap_green_blue: bool = True,
) -> npt.NDArray[np.uint32]:
    """Pack an RGB frame into opaque 32-bit pixels.

    Channels are clamped to [0, 255] and truncated to integers before packing.

    Args:
        image: Array of shape (..., 3) with RGB channels on a 0-255 scale.
        swap_green_blue: If True (default), store blue in bits 8-15 and green
            in bits 0-7, the Sphere Mover layout. If False,
            use the conventional R, G, B byte order.

    Returns:
        Array of shape ``image.shape[:-1]`` with dtype uint32.

    Raises:
        ValueError: If the last axis does not have 3 channels.
    """
    if image.shape[-1] != 3:
        raise ValueError(f"Expected 3 color channels, got shape {image.shape}")

    channels = np.clip(image, 0.0, 255.0).astype(np.uint32)
    red = channels[..., 0]
    green = channels[..., 1]
    blue = channels[..., 2]

    if swap_green_blue:
        return OPAQUE_ALPHA | (red << 16) | (blue << 8) | green
    return OPAQUE_ALPHA | (red << 16) | (green << 8) | blue
