import pytest

from arcadekit.color import Color
from arcadekit.screen_buffer import ScreenBuffer


@pytest.fixture
def buffer():
    buf = ScreenBuffer()
    buf.init(5, 3)
    return buf


def test_uninitialized_buffer_raises():
    buf = ScreenBuffer()
    with pytest.raises(RuntimeError):
        buf.clear_surface()
    with pytest.raises(RuntimeError):
        buf.set_pixel(Color.white(), 0, 0)
    with pytest.raises(RuntimeError):
        buf.get_pixel(0, 0)
    with pytest.raises(RuntimeError):
        list(buf.rows())


def test_init_dimensions_and_black(buffer):
    rows = list(buffer.rows())
    assert buffer.width == 5
    assert buffer.height == 3
    assert len(rows) == 3
    assert all(len(row) == 5 for row in rows)
    assert all(value == Color.BLACK for row in rows for value in row)


def test_set_and_get_pixel(buffer):
    buffer.set_pixel(Color.orange(), 4, 2)
    assert buffer.get_pixel(4, 2) == Color.orange()
    assert buffer.get_pixel(3, 2) == Color.black()
    assert list(buffer.rows())[2][4] == Color.ORANGE


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (5, 0), (0, 3)])
def test_out_of_bounds(buffer, x, y):
    with pytest.raises(IndexError):
        buffer.set_pixel(Color.white(), x, y)
    with pytest.raises(IndexError):
        buffer.get_pixel(x, y)


def test_clear_with_color(buffer):
    buffer.set_pixel(Color.red_color(), 1, 1)
    buffer.clear_surface(Color.cyan())
    assert all(value == Color.CYAN for row in buffer.rows() for value in row)


def test_copy_is_independent(buffer):
    buffer.set_pixel(Color.green_color(), 0, 0)
    duplicate = buffer.copy()
    buffer.set_pixel(Color.blue_color(), 0, 0)
    assert duplicate.get_pixel(0, 0) == Color.green_color()
    assert buffer.get_pixel(0, 0) == Color.blue_color()
    assert duplicate.width == buffer.width and duplicate.height == buffer.height


def test_copy_of_uninitialized():
    duplicate = ScreenBuffer().copy()
    assert duplicate.initialized is False


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        ScreenBuffer().init(-1, 4)


def test_alpha_channel_flag():
    buf = ScreenBuffer()
    buf.init(2, 2, alpha_channel=False)
    assert buf.has_alpha is False
    assert buf.get_pixel(1, 1) == Color.black()