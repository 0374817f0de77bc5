"""Unit tests for the color palette and 32-bit pixel packing."""

import numpy as np
import pytest


class TestPalette:
    """Tests for the named colors."""

    def test_palette_values(self):
        """Test the channel values of the named colors."""
        from src.spheremover.core.color import (
            BLACK,
            BLUE,
            BLUEISH,
            DARKGRAY,
            GRAY,
            GREEN,
            RED,
            WHITE,
        )
        from src.spheremover.core.vector import RGB

        assert RED == RGB(255.0, 0.0, 0.0)
        assert GREEN == RGB(0.0, 255.0, 0.0)
        assert BLUE == RGB(0.0, 0.0, 255.0)
        assert BLACK == RGB(0.0, 0.0, 0.0)
        assert WHITE == RGB(255.0, 255.0, 255.0)
        assert BLUEISH == RGB(80.0, 140.0, 255.0)
        assert GRAY == RGB(128.0, 128.0, 128.0)
        assert DARKGRAY == RGB(32.0, 32.0, 32.0)


class TestPackArgb:
    """Tests for pack_argb."""

    def test_swapped_layout_by_default(self):
        """Test that blue lands in bits 8-15 and green in bits 0-7."""
        from src.spheremover.core.color import pack_argb

        frame = np.array([[[255.0, 16.0, 32.0]]])
        packed = pack_argb(frame)

        assert packed.dtype == np.uint32
        assert int(packed[0, 0]) == 0xFFFF2010

    def test_conventional_layout(self):
        """Test the plain 0xAARRGGBB layout."""
        from src.spheremover.core.color import pack_argb

        frame = np.array([[[255.0, 16.0, 32.0]]])

        assert int(pack_argb(frame, swap_green_blue=False)[0, 0]) == 0xFFFF1020

    def test_clamps_and_truncates(self):
        """Test that out-of-range channels are clamped before packing."""
        from src.spheremover.core.color import pack_argb

        frame = np.array([[[300.0, -5.0, 12.7]]])

        # red 255, green 0, blue 12
        assert int(pack_argb(frame)[0, 0]) == 0xFFFF0C00

    def test_always_opaque(self):
        """Test that every packed pixel has alpha 0xFF."""
        from src.spheremover.core.color import pack_argb

        frame = np.random.default_rng(0).uniform(-50.0, 300.0, size=(4, 5, 3))
        packed = pack_argb(frame)

        assert packed.shape == (4, 5)
        assert np.all((packed >> 24) == 0xFF)

    def test_rejects_wrong_channel_count(self):
        """Test that a non-RGB array is rejected."""
        from src.spheremover.core.color import pack_argb

        with pytest.raises(ValueError, match="3 color channels"):
            pack_argb(np.zeros((2, 2, 4)))
