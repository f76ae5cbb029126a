# arcadekit

A small toolkit for drawing pixel-style arcade graphics in Python.

## Modules

- `arcadekit.vec2d`: the `Vec2D` vector (attributes `x` and `y`) with
  `mag`, `mag2`, `get_unit_vec`, `normalize`, `distance`, `dot`,
  `project_onto`, `angle_between`, `reflect`, `rotate`, `rotation_result`
  and `copy`, plus the arithmetic operators `+`, `-`, `*`, `/` and their
  in-place forms. Equality is tolerant, so vectors are unhashable. The module
  also has the float helpers `is_equal`, `is_greater_than_or_equal` and
  `is_less_than_or_equal`, which use the tolerance `EPSILON = 0.0001`.
- `arcadekit.line`: `Line2D` through two points (`p0`, `p1`), built directly
  or with `Line2D.from_coords`. It offers `closest_point`,
  `min_distance_from` (both optionally limited to the segment), `slope`
  (0 for vertical lines), `mid_point` and `length`.
- `arcadekit.shapes`: `Rectangle2D`, `Circle2D` and `Triangle2D`, all
  derived from the abstract `Shape2D` (`center_point`, `get_points`,
  `move_by`).
  - `Rectangle2D` takes inclusive `top_left` and `bottom_right` corners, or
    use `Rectangle2D.from_size`. It has `width`, `height`, `move_to`,
    `intersects`, `contains_point` and `Rectangle2D.inset`.
  - `Circle2D` has a `radius` attribute and the methods `move_to`,
    `intersects` and `contains_point`.
  - `Triangle2D` has the vertices `p0`, `p1` and `p2`, and the methods
    `area` and `contains_point`. Its `center_point` is the centroid.
- `arcadekit.color`: `Color`, a packed 32-bit ARGB value. It has named
  factories (`black`, `gray`, `white`, `red_color`, `green_color`,
  `blue_color`, `cyan`, `magenta`, `yellow`, `orange`, `purple`),
  `Color.from_rgba`, `set_rgba`, the settable properties `red`, `green`,
  `blue` and `alpha`, and the read-only property `pixel_color`. Components
  outside 0..255 raise `ValueError`.
- `arcadekit.screen_buffer`: `ScreenBuffer`, an off-screen grid of ARGB
  pixels with `init`, `clear_surface`, `set_pixel`, `get_pixel`, `copy` and
  `rows`. Using it before `init` raises `RuntimeError`. A pixel outside the
  buffer raises `IndexError`.
- `arcadekit.screen`: `Screen`, a pygame window with a back buffer. It has
  `init(width, height, magnification)`, `draw_pixel`, `draw_point`,
  `draw_line`, `draw_triangle`, `set_clear_color`, `swap_screens` and
  `close`, and it works as a context manager. Drawing before `init` raises
  `RuntimeError`. `line_points` yields the pixels of a `Line2D`, using
  Bresenham's algorithm.
- `arcadekit.app`: the demo, with `demo_triangle` and `main`.

## Installation

```
pip install .
```

This also installs `pygame`, which `arcadekit.screen` uses for the window.

## Quick look

```python
from arcadekit.vec2d import Vec2D
from arcadekit.shapes import Triangle2D
from arcadekit.color import Color
from arcadekit.screen import Screen

v = Vec2D(3.0, 4.0)
print(v.mag())           # 5.0
print(v.get_unit_vec())  # Vec(x,y): (0.60,0.80)

triangle = Triangle2D(Vec2D(112, 50), Vec2D(50, 238), Vec2D(174, 238))

with Screen() as screen:
    screen.init(224, 288, 2)
    screen.draw_triangle(triangle, Color.orange())
    screen.swap_screens()
```

Dividing a vector by zero raises `ZeroDivisionError`. So does dividing by
anything whose size is below `EPSILON`.

## Demo

```
arcadekit-demo
```

The demo opens a 224×288 window shown at twice that size. It draws an orange
triangle and runs until you close the window.

## What it does not do

The package provides drawing and geometry building blocks only. It contains
no game: there is no game loop, input handling, ball or paddle logic, and no
filled-shape or text rendering.

## Tests

```
pip install ".[test]"
pytest
```