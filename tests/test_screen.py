import pytest

from arcadekit.color import Color
from arcadekit.line import Line2D
from arcadekit.screen import Screen, line_points
from arcadekit.shapes import Triangle2D
from arcadekit.vec2d import Vec2D


@pytest.fixture
def screen(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    scr = Screen()
    scr.init(4, 3, 2)
    yield scr
    scr.close()


def _assert_connected(points):
    for (ax, ay), (bx, by) in zip(points, points[1:]):
        assert abs(ax - bx) <= 1 and abs(ay - by) <= 1


@pytest.mark.parametrize(
    "start, end",
    [((0, 0), (3, 0)), ((0, 0), (0, 5)), ((0, 0), (4, 4)), ((5, 1), (0, 3)), ((2, 7), (1, 0))],
)
def test_line_points_invariants(start, end):
    points = list(line_points(Line2D(Vec2D(*start), Vec2D(*end))))
    assert points[0] == start
    assert points[-1] == end
    assert len(points) == max(abs(end[0] - start[0]), abs(end[1] - start[1])) + 1
    _assert_connected(points)


def test_line_points_horizontal():
    points = list(line_points(Line2D.from_coords(0, 0, 3, 0)))
    assert points == [(0, 0), (1, 0), (2, 0), (3, 0)]


def test_line_points_rounds_half_away_from_zero():
    points = list(line_points(Line2D.from_coords(0.5, -0.5, 0.5, -0.5)))
    assert points == [(1, -1)]


def test_draw_before_init_raises():
    scr = Screen()
    with pytest.raises(RuntimeError):
        scr.draw_pixel(0, 0, Color.white())
    with pytest.raises(RuntimeError):
        scr.draw_line(Line2D.from_coords(0, 0, 1, 1), Color.white())
    with pytest.raises(RuntimeError):
        scr.swap_screens()


def test_init_rejects_bad_magnification():
    with pytest.raises(ValueError):
        Screen().init(4, 3, 0)


def test_init_sets_size(screen):
    assert (screen.width, screen.height) == (4, 3)
    assert screen.window.get_size() == (8, 6)
    assert screen.back_buffer.get_pixel(0, 0) == Color.black()


def test_draw_pixel_and_point(screen):
    screen.draw_pixel(1, 2, Color.cyan())
    screen.draw_point(Vec2D(3.7, 0.2), Color.yellow())
    assert screen.back_buffer.get_pixel(1, 2) == Color.cyan()
    assert screen.back_buffer.get_pixel(3, 0) == Color.yellow()


def test_draw_out_of_bounds(screen):
    with pytest.raises(IndexError):
        screen.draw_pixel(4, 0, Color.white())


def test_draw_line_sets_all_points(screen):
    line = Line2D.from_coords(0, 0, 3, 2)
    screen.draw_line(line, Color.magenta())
    for x, y in line_points(line):
        assert screen.back_buffer.get_pixel(x, y) == Color.magenta()


def test_draw_triangle_sets_vertices(screen):
    triangle = Triangle2D(Vec2D(0, 0), Vec2D(3, 0), Vec2D(0, 2))
    screen.draw_triangle(triangle, Color.orange())
    for vertex in triangle.get_points():
        assert screen.back_buffer.get_pixel(int(vertex.x), int(vertex.y)) == Color.orange()


def test_swap_screens_shows_and_clears(screen):
    screen.draw_pixel(1, 1, Color.orange())
    screen.swap_screens()
    assert tuple(screen.window.get_at((2, 2)))[:3] == (255, 165, 0)
    assert tuple(screen.window.get_at((3, 3)))[:3] == (255, 165, 0)
    assert tuple(screen.window.get_at((0, 0)))[:3] == (0, 0, 0)
    assert screen.back_buffer.get_pixel(1, 1) == Color.black()


def test_context_manager_closes(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    with Screen() as scr:
        scr.init(2, 2, 1)
        scr.draw_pixel(0, 0, Color.white())
        assert scr.back_buffer.get_pixel(0, 0) == Color.white()
    with pytest.raises(RuntimeError):
        scr.draw_pixel(0, 0, Color.white())