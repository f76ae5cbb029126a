"""32-bit ARGB colours."""

from __future__ import annotations

from typing import ClassVar


def _check_byte(name: str, value: int) -> int:
    if not isinstance(value, int) or not 0 <= value <= 0xFF:
        raise ValueError(f"{name} component must be an integer in 0..255, got {value!r}")
    return value


def _check_argb(value: int) -> int:
    if not isinstance(value, int) or not 0 <= value <= 0xFFFFFFFF:
        raise ValueError(f"ARGB colour must be an integer in 0..0xFFFFFFFF, got {value!r}")
    return value


class Color:
    """A colour stored as a packed ARGB pixel value."""

    __slots__ = ("_argb",)

    BLACK: ClassVar[int] = 0xFF000000
    GRAY: ClassVar[int] = 0xFF808080
    WHITE: ClassVar[int] = 0xFFFFFFFF
    RED: ClassVar[int] = 0xFFFF0000
    GREEN: ClassVar[int] = 0xFF00FF00
    BLUE: ClassVar[int] = 0xFF0000FF
    CYAN: ClassVar[int] = 0xFF00FFFF
    MAGENTA: ClassVar[int] = 0xFFFF00FF
    YELLOW: ClassVar[int] = 0xFFFFFF00
    ORANGE: ClassVar[int] = 0xFFFFA500
    PURPLE: ClassVar[int] = 0xFF800080

    def __init__(self, argb: int = 0xFF0000) -> None:
        self._argb = _check_argb(argb)

    @classmethod
    def from_rgba(cls, r: int, g: int, b: int, a: int) -> Color:
        """Build a colour from its red, green, blue and alpha components."""
        color = cls(0)
        color.set_rgba(r, g, b, a)
        return color

    # Named colours --------------------------------------------------------

    @classmethod
    def black(cls) -> Color:
        return cls(cls.BLACK)

    @classmethod
    def gray(cls) -> Color:
        return cls(cls.GRAY)

    @classmethod
    def white(cls) -> Color:
        return cls(cls.WHITE)

    @classmethod
    def red_color(cls) -> Color:
        return cls(cls.RED)

    @classmethod
    def green_color(cls) -> Color:
        return cls(cls.GREEN)

    @classmethod
    def blue_color(cls) -> Color:
        return cls(cls.BLUE)

    @classmethod
    def cyan(cls) -> Color:
        return cls(cls.CYAN)

    @classmethod
    def magenta(cls) -> Color:
        return cls(cls.MAGENTA)

    @classmethod
    def yellow(cls) -> Color:
        return cls(cls.YELLOW)

    @classmethod
    def orange(cls) -> Color:
        return cls(cls.ORANGE)

    @classmethod
    def purple(cls) -> Color:
        return cls(cls.PURPLE)

    # Components -----------------------------------------------------------

    @property
    def pixel_color(self) -> int:
        """The packed ARGB value."""
        return self._argb

    def set_rgba(self, r: int, g: int, b: int, a: int) -> None:
        """Replace all four components."""
        r = _check_byte("red", r)
        g = _check_byte("green", g)
        b = _check_byte("blue", b)
        a = _check_byte("alpha", a)
        self._argb = (a << 24) | (r << 16) | (g << 8) | b

    def _components(self) -> tuple[int, int, int, int]:
        argb = self._argb
        return (argb >> 16) & 0xFF, (argb >> 8) & 0xFF, argb & 0xFF, (argb >> 24) & 0xFF

    @property
    def red(self) -> int:
        return self._components()[0]

    @red.setter
    def red(self, value: int) -> None:
        _, g, b, a = self._components()
        self.set_rgba(value, g, b, a)

    @property
    def green(self) -> int:
        return self._components()[1]

    @green.setter
    def green(self, value: int) -> None:
        r, _, b, a = self._components()
        self.set_rgba(r, value, b, a)

    @property
    def blue(self) -> int:
        return self._components()[2]

    @blue.setter
    def blue(self, value: int) -> None:
        r, g, _, a = self._components()
        self.set_rgba(r, g, value, a)

    @property
    def alpha(self) -> int:
        return self._components()[3]

    @alpha.setter
    def alpha(self, value: int) -> None:
        r, g, b, _ = self._components()
        self.set_rgba(r, g, b, value)

    # Comparison -----------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return self._argb == other._argb

    def __hash__(self) -> int:
        return hash(self._argb)

    def __repr__(self) -> str:
        return f"Color(0x{self._argb:08X})"