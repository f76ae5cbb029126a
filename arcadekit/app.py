"""Demo application: draws a triangle and waits for the window to close."""

from __future__ import annotations

import argparse
import time

import pygame

from .color import Color
from .screen import Screen
from .shapes import Triangle2D
from .vec2d import Vec2D

SCREEN_WIDTH = 224
SCREEN_HEIGHT = 288
MAGNIFICATION = 2


def demo_triangle(width: int, height: int) -> Triangle2D:
    """The triangle shown by the demo on a ``width`` x ``height`` screen."""
    return Triangle2D(
        Vec2D(width // 2, 50),
        Vec2D(50, height - 50),
        Vec2D(width - 50, height - 50),
    )


def main(argv: list[str] | None = None) -> int:
    """Open the window, draw the demo triangle and run until the window is closed."""
    argparse.ArgumentParser(prog="arcadekit", description=__doc__).parse_args(argv)

    with Screen() as screen:
        screen.init(SCREEN_WIDTH, SCREEN_HEIGHT, MAGNIFICATION)
        screen.draw_triangle(demo_triangle(SCREEN_WIDTH, SCREEN_HEIGHT), Color.orange())
        screen.swap_screens()

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    running = False
            time.sleep(0.2)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())