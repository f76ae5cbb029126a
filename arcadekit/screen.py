"""The game window with a double-buffered drawing surface."""

from __future__ import annotations

import math
import struct
from collections.abc import Iterator
from itertools import chain

import pygame

from .color import Color
from .line import Line2D
from .screen_buffer import ScreenBuffer
from .shapes import Triangle2D
from .vec2d import Vec2D


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def line_points(line: Line2D) -> Iterator[tuple[int, int]]:
    """Yield the pixels of ``line`` using Bresenham's algorithm."""
    x0, y0 = _round_half_away(line.p0.x), _round_half_away(line.p0.y)
    x1, y1 = _round_half_away(line.p1.x), _round_half_away(line.p1.y)

    dx = x1 - x0
    dy = y1 - y0
    ix = (dx > 0) - (dx < 0)
    iy = (dy > 0) - (dy < 0)
    dx = abs(dx) * 2
    dy = abs(dy) * 2

    yield x0, y0
    if dx >= dy:
        d = dy - dx // 2
        while x0 != x1:
            if d >= 0:
                d -= dx
                y0 += iy
            d += dy
            x0 += ix
            yield x0, y0
    else:
        d = dx - dy // 2
        while y0 != y1:
            if d >= 0:
                d -= dy
                x0 += ix
            d += dx
            y0 += iy
            yield x0, y0


class Screen:
    """Main window manager: draws into a back buffer and shows it on swap."""

    def __init__(self) -> None:
        self.width = 0
        self.height = 0
        self._clear_color = Color()
        self._back_buffer = ScreenBuffer()
        self._window: pygame.Surface | None = None

    @property
    def back_buffer(self) -> ScreenBuffer:
        return self._back_buffer

    @property
    def window(self) -> pygame.Surface | None:
        return self._window

    def init(self, width: int, height: int, magnification: int = 1) -> pygame.Surface:
        """Open a window of ``width`` x ``height`` pixels scaled by ``magnification``."""
        if width <= 0 or height <= 0:
            raise ValueError("width and height must be positive")
        if magnification <= 0:
            raise ValueError("magnification must be positive")
        try:
            pygame.display.init()
        except pygame.error as exc:
            raise RuntimeError(f"SDL could not initialize: {exc}") from exc

        self.width = width
        self.height = height
        try:
            window = pygame.display.set_mode((width * magnification, height * magnification))
            pygame.display.set_caption("ARCADE")
        except pygame.error as exc:
            pygame.display.quit()
            raise RuntimeError(f"Could not create the window: {exc}") from exc
        self._window = window

        self._back_buffer.init(width, height)
        self._clear_color = Color.black()
        self._back_buffer.clear_surface(self._clear_color)
        return window

    def _require_window(self) -> pygame.Surface:
        if self._window is None:
            raise RuntimeError("Window not initialized!")
        return self._window

    def set_clear_color(self, color: Color) -> None:
        """Colour the window is cleared with before each frame."""
        self._clear_color = color

    def _frame_surface(self) -> pygame.Surface:
        buffer = self._back_buffer
        pixels = chain.from_iterable(buffer.rows())
        if not buffer.has_alpha:
            pixels = (value | 0xFF000000 for value in pixels)
        data = struct.pack(f">{buffer.width * buffer.height}I", *pixels)
        return pygame.image.frombuffer(data, (buffer.width, buffer.height), "ARGB")

    def swap_screens(self) -> None:
        """Show the back buffer in the window and clear it for the next frame."""
        window = self._require_window()
        window.fill(self._clear_color_rgba())
        scaled = pygame.transform.scale(self._frame_surface(), window.get_size())
        window.blit(scaled, (0, 0))
        pygame.display.flip()
        self._back_buffer.clear_surface()

    def _clear_color_rgba(self) -> tuple[int, int, int, int]:
        color = self._clear_color
        return color.red, color.green, color.blue, color.alpha

    def draw_pixel(self, x: int, y: int, color: Color) -> None:
        self._require_window()
        self._back_buffer.set_pixel(color, x, y)

    def draw_point(self, point: Vec2D, color: Color) -> None:
        self._require_window()
        self._back_buffer.set_pixel(color, int(point.x), int(point.y))

    def draw_line(self, line: Line2D, color: Color) -> None:
        self._require_window()
        for x, y in line_points(line):
            self.draw_pixel(x, y, color)

    def draw_triangle(self, triangle: Triangle2D, color: Color) -> None:
        self._require_window()
        p0, p1, p2 = triangle.p0, triangle.p1, triangle.p2
        for start, end in ((p0, p1), (p1, p2), (p2, p0)):
            self.draw_line(Line2D(start, end), color)

    def close(self) -> None:
        """Destroy the window and shut the display down."""
        self._window = None
        pygame.display.quit()

    def __enter__(self) -> Screen:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()