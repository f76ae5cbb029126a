import pytest

from arcadekit.color import Color


@pytest.mark.parametrize(
    "factory, argb",
    [
        (Color.black, 0xFF000000),
        (Color.gray, 0xFF808080),
        (Color.white, 0xFFFFFFFF),
        (Color.red_color, 0xFFFF0000),
        (Color.green_color, 0xFF00FF00),
        (Color.blue_color, 0xFF0000FF),
        (Color.cyan, 0xFF00FFFF),
        (Color.magenta, 0xFFFF00FF),
        (Color.yellow, 0xFFFFFF00),
        (Color.orange, 0xFFFFA500),
        (Color.purple, 0xFF800080),
    ],
)
def test_named_colors(factory, argb):
    assert factory().pixel_color == argb


def test_orange_components():
    orange = Color.orange()
    assert (orange.red, orange.green, orange.blue, orange.alpha) == (255, 165, 0, 255)


def test_purple_components():
    purple = Color.purple()
    assert (purple.red, purple.green, purple.blue, purple.alpha) == (128, 0, 128, 255)


def test_default_color():
    assert Color().pixel_color == 0xFF0000


def test_from_rgba_round_trip():
    color = Color.from_rgba(12, 34, 56, 78)
    assert (color.red, color.green, color.blue, color.alpha) == (12, 34, 56, 78)


def test_from_rgba_matches_named():
    assert Color.from_rgba(255, 165, 0, 255) == Color.orange()


def test_component_setters_change_one_channel():
    color = Color.black()
    color.red = 200
    color.blue = 7
    assert color.red == 200
    assert color.green == 0
    assert color.blue == 7
    assert color.alpha == 255
    color.alpha = 0
    assert color.alpha == 0
    assert color.red == 200


def test_set_rgba():
    color = Color.white()
    color.set_rgba(255, 165, 0, 255)
    assert color == Color.orange()


@pytest.mark.parametrize("bad", [-1, 256, 1.5])
def test_invalid_component(bad):
    with pytest.raises(ValueError):
        Color.from_rgba(0, bad, 0, 255)


@pytest.mark.parametrize("bad", [-1, 0x1_0000_0000])
def test_invalid_argb(bad):
    with pytest.raises(ValueError):
        Color(bad)


def test_equality_and_hash():
    assert Color(Color.RED) == Color.red_color()
    assert hash(Color(Color.RED)) == hash(Color.red_color())
    assert Color.red_color() != Color.blue_color()
    assert len({Color.black(), Color.black(), Color.white()}) == 2


def test_not_equal_to_plain_int():
    assert (Color.black() == Color.BLACK) is False