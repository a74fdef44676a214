"""Framebuffer: 64x32 monochrome display with XOR sprite compositing."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

DISPLAY_WIDTH = 64
DISPLAY_HEIGHT = 32

_BIT_OFFSETS = np.arange(8)


class Framebuffer:
    """One-bit pixel grid, indexed ``[row, column]``.

    Sprites wrap around both axes. ``dirty`` is set by every mutation and
    cleared by the presenter through ``consume_dirty``.
    """

    def __init__(self) -> None:
        self._pixels = np.zeros((DISPLAY_HEIGHT, DISPLAY_WIDTH), dtype=np.uint8)
        self.dirty = False

    @property
    def width(self) -> int:
        return DISPLAY_WIDTH

    @property
    def height(self) -> int:
        return DISPLAY_HEIGHT

    @property
    def pixels(self) -> np.ndarray:
        """A copy of the pixel grid (shape 32x64, values 0/1)."""
        return self._pixels.copy()

    def pixel(self, x: int, y: int) -> int:
        """Pixel value at column ``x``, row ``y`` (coordinates wrap)."""
        return int(self._pixels[y % DISPLAY_HEIGHT, x % DISPLAY_WIDTH])

    def clear(self) -> None:
        self._pixels.fill(0)
        self.dirty = True

    def blit_sprite(self, rows: Sequence[int] | bytes, x: int, y: int) -> bool:
        """XOR a sprite onto the screen.

        Each byte of ``rows`` is one sprite row, top to bottom; its MSB is
        the leftmost pixel. Destination coordinates wrap modulo the screen
        size.

        Args:
            rows: Sprite row bytes.
            x: Column of the sprite's left edge.
            y: Row of the sprite's top edge.

        Returns:
            True if any set pixel was turned off (collision).
        """
        collision = False
        cols = (x + _BIT_OFFSETS) % DISPLAY_WIDTH
        for dy, row in enumerate(rows):
            bits = np.unpackbits(np.array([row & 0xFF], dtype=np.uint8))
            line = (y + dy) % DISPLAY_HEIGHT
            current = self._pixels[line, cols]
            if not collision and np.any(current & bits):
                collision = True
            self._pixels[line, cols] = current ^ bits
        self.dirty = True
        return collision

    def packed(self) -> bytes:
        """256-byte packed copy: 8 bytes per row, MSB leftmost."""
        return np.packbits(self._pixels, axis=1).tobytes()

    def consume_dirty(self) -> bool:
        """Return and clear the changed-since-last-presentation flag."""
        dirty = self.dirty
        self.dirty = False
        return dirty
