"""Two-dimensional vectors and tolerant float comparisons."""

from __future__ import annotations

import math
from collections.abc import Iterator
from numbers import Real

EPSILON = 0.0001
"""Tolerance used for floating-point comparisons."""


def is_equal(x: float, y: float) -> bool:
    """Return True when ``x`` and ``y`` differ by less than EPSILON."""
    return abs(x - y) < EPSILON


def is_greater_than_or_equal(x: float, y: float) -> bool:
    """Return True when ``x`` is greater than ``y`` or equal within EPSILON."""
    return x > y or is_equal(x, y)


def is_less_than_or_equal(x: float, y: float) -> bool:
    """Return True when ``x`` is less than ``y`` or equal within EPSILON."""
    return x < y or is_equal(x, y)


def _check_divisor(scalar: float) -> None:
    if abs(scalar) < EPSILON:
        raise ZeroDivisionError("Division by zero or a very small value!")


class Vec2D:
    """A point or vector in 2D space.

    Equality is tolerant (within EPSILON per component), so instances are
    mutable and unhashable.
    """

    __slots__ = ("x", "y")

    ZERO: Vec2D

    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        self.x = float(x)
        self.y = float(y)

    # Measurements ---------------------------------------------------------

    def mag2(self) -> float:
        """Squared magnitude."""
        return self.dot(self)

    def mag(self) -> float:
        """Magnitude (length)."""
        return math.sqrt(self.mag2())

    def get_unit_vec(self) -> Vec2D:
        """Unit vector in the same direction, or a zero vector if too short."""
        magnitude = self.mag()
        if magnitude > EPSILON:
            return self / magnitude
        return Vec2D(0.0, 0.0)

    def normalize(self) -> Vec2D:
        """Scale this vector to unit length in place; leave tiny vectors as they are."""
        magnitude = self.mag()
        if magnitude > EPSILON:
            self /= magnitude
        return self

    def distance(self, other: Vec2D) -> float:
        """Distance between this point and ``other``."""
        return (self - other).mag()

    def dot(self, other: Vec2D) -> float:
        """Dot product."""
        return self.x * other.x + self.y * other.y

    def project_onto(self, other: Vec2D) -> Vec2D:
        """Projection of this vector onto ``other``."""
        unit = other.get_unit_vec()
        return unit * self.dot(unit)

    def angle_between(self, other: Vec2D) -> float:
        """Angle in radians between this vector and ``other``."""
        dot_product = self.get_unit_vec().dot(other.get_unit_vec())
        dot_product = min(1.0, max(-1.0, dot_product))
        return math.acos(dot_product)

    def reflect(self, normal: Vec2D) -> Vec2D:
        """Reflection of this vector off the given normal."""
        return self - 2 * self.project_onto(normal)

    # Rotation -------------------------------------------------------------

    def rotate(self, angle: float, point: Vec2D | None = None) -> None:
        """Rotate in place by ``angle`` radians around ``point`` (origin by default)."""
        rotated = self.rotation_result(angle, point)
        self.x, self.y = rotated.x, rotated.y

    def rotation_result(self, angle: float, point: Vec2D | None = None) -> Vec2D:
        """Return this vector rotated by ``angle`` radians around ``point``."""
        x0, y0 = (0.0, 0.0) if point is None else (point.x, point.y)
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        dx = self.x - x0
        dy = self.y - y0
        return Vec2D(dx * cos_a - dy * sin_a + x0, dx * sin_a + dy * cos_a + y0)

    def copy(self) -> Vec2D:
        """Return an independent copy."""
        return Vec2D(self.x, self.y)

    # Representation -------------------------------------------------------

    def __str__(self) -> str:
        return f"Vec(x,y): ({self.x:.2f},{self.y:.2f})"

    def __repr__(self) -> str:
        return f"Vec2D(x={self.x!r}, y={self.y!r})"

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    # Operators ------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vec2D):
            return NotImplemented
        return is_equal(self.x, other.x) and is_equal(self.y, other.y)

    __hash__ = None  # type: ignore[assignment]

    def __neg__(self) -> Vec2D:
        return Vec2D(-self.x, -self.y)

    def __mul__(self, scalar: float) -> Vec2D:
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vec2D(scalar * self.x, scalar * self.y)

    def __rmul__(self, scalar: float) -> Vec2D:
        return self.__mul__(scalar)

    def __truediv__(self, scalar: float) -> Vec2D:
        if not isinstance(scalar, Real):
            return NotImplemented
        _check_divisor(scalar)
        return Vec2D(self.x / scalar, self.y / scalar)

    def __imul__(self, scalar: float) -> Vec2D:
        if not isinstance(scalar, Real):
            return NotImplemented
        self.x *= scalar
        self.y *= scalar
        return self

    def __itruediv__(self, scalar: float) -> Vec2D:
        if not isinstance(scalar, Real):
            return NotImplemented
        _check_divisor(scalar)
        self.x /= scalar
        self.y /= scalar
        return self

    def __add__(self, other: Vec2D) -> Vec2D:
        if not isinstance(other, Vec2D):
            return NotImplemented
        return Vec2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2D) -> Vec2D:
        if not isinstance(other, Vec2D):
            return NotImplemented
        return Vec2D(self.x - other.x, self.y - other.y)

    def __iadd__(self, other: Vec2D) -> Vec2D:
        if not isinstance(other, Vec2D):
            return NotImplemented
        self.x += other.x
        self.y += other.y
        return self

    def __isub__(self, other: Vec2D) -> Vec2D:
        if not isinstance(other, Vec2D):
            return NotImplemented
        self.x -= other.x
        self.y -= other.y
        return self


Vec2D.ZERO = Vec2D(0.0, 0.0)