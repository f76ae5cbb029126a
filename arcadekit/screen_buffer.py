"""An off-screen pixel buffer of ARGB values."""

from __future__ import annotations

import logging
from collections.abc import Iterator

from .color import Color

_log = logging.getLogger(__name__)


class ScreenBuffer:
    """A grid of packed ARGB pixels used as a back buffer."""

    def __init__(self) -> None:
        self._pixels: list[list[int]] | None = None
        self.has_alpha = True

    @property
    def width(self) -> int:
        return len(self._pixels[0]) if self._pixels else 0

    @property
    def height(self) -> int:
        return len(self._pixels) if self._pixels else 0

    @property
    def initialized(self) -> bool:
        return self._pixels is not None

    def init(self, width: int, height: int, alpha_channel: bool = True) -> None:
        """Allocate a ``width`` by ``height`` buffer and clear it to black."""
        if width < 0 or height < 0:
            raise ValueError("width and height must not be negative")
        self.has_alpha = alpha_channel
        self._pixels = [[0] * width for _ in range(height)]
        _log.debug(
            "The RGBA surface pixel format is: %s",
            "ARGB8888" if alpha_channel else "RGB888",
        )
        self.clear_surface()

    def _require(self) -> list[list[int]]:
        if self._pixels is None:
            raise RuntimeError("Surface not found!")
        return self._pixels

    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= y < self.height and 0 <= x < self.width):
            raise IndexError(f"Pixel ({x}, {y}) out of boundaries!")

    def clear_surface(self, color: Color | None = None) -> None:
        """Fill the whole buffer with ``color`` (black by default)."""
        pixels = self._require()
        value = (Color.black() if color is None else color).pixel_color
        for row in pixels:
            row[:] = [value] * len(row)

    def set_pixel(self, color: Color, x: int, y: int) -> None:
        """Set the pixel at column ``x``, row ``y``."""
        pixels = self._require()
        self._check_bounds(x, y)
        pixels[y][x] = color.pixel_color

    def get_pixel(self, x: int, y: int) -> Color:
        """Colour of the pixel at column ``x``, row ``y``."""
        pixels = self._require()
        self._check_bounds(x, y)
        return Color(pixels[y][x])

    def copy(self) -> ScreenBuffer:
        """Independent copy holding the same pixels."""
        duplicate = ScreenBuffer()
        duplicate.has_alpha = self.has_alpha
        if self._pixels is not None:
            duplicate._pixels = [list(row) for row in self._pixels]
        return duplicate

    __copy__ = copy

    def rows(self) -> Iterator[tuple[int, ...]]:
        """Yield each row of packed ARGB values, top to bottom."""
        for row in self._require():
            yield tuple(row)