"""Basic 2D shapes: rectangles, circles and triangles."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .vec2d import Vec2D, is_equal, is_less_than_or_equal


class Shape2D(ABC):
    """A shape defined by a list of points."""

    def __init__(self, points: list[Vec2D]) -> None:
        self._points = [p.copy() for p in points]

    @abstractmethod
    def center_point(self) -> Vec2D:
        """Center of the shape."""

    def get_points(self) -> list[Vec2D]:
        """Copies of the points that define the shape."""
        return [p.copy() for p in self._points]

    def move_by(self, delta: Vec2D) -> None:
        """Translate every point by ``delta``."""
        for point in self._points:
            point += delta


class Rectangle2D(Shape2D):
    """Axis-aligned rectangle given by inclusive top-left and bottom-right corners."""

    def __init__(self, top_left: Vec2D | None = None, bottom_right: Vec2D | None = None) -> None:
        super().__init__([
            Vec2D() if top_left is None else top_left,
            Vec2D() if bottom_right is None else bottom_right,
        ])

    @classmethod
    def from_size(cls, top_left: Vec2D, width: float, height: float) -> Rectangle2D:
        """Rectangle of ``width`` by ``height`` pixels starting at ``top_left``."""
        width, height = int(width), int(height)
        if width < 0 or height < 0:
            raise ValueError("width and height must not be negative")
        bottom_right = Vec2D(top_left.x + width - 1, top_left.y + height - 1)
        return cls(top_left, bottom_right)

    @property
    def top_left(self) -> Vec2D:
        return self._points[0].copy()

    @top_left.setter
    def top_left(self, value: Vec2D) -> None:
        self._points[0] = value.copy()

    @property
    def bottom_right(self) -> Vec2D:
        return self._points[1].copy()

    @bottom_right.setter
    def bottom_right(self, value: Vec2D) -> None:
        self._points[1] = value.copy()

    def width(self) -> float:
        """Width, counting both edge columns."""
        return abs(self._points[1].x - self._points[0].x) + 1

    def height(self) -> float:
        """Height, counting both edge rows."""
        return abs(self._points[1].y - self._points[0].y) + 1

    def move_to(self, position: Vec2D) -> None:
        """Move so that the top-left corner is at ``position``."""
        self.move_by(position - self._points[0])

    def center_point(self) -> Vec2D:
        top_left = self._points[0]
        return Vec2D(top_left.x + self.width() / 2.0, top_left.y + self.height() / 2.0)

    def intersects(self, other: Rectangle2D) -> bool:
        """True when the two rectangles overlap or touch."""
        tl, br = self._points
        otl, obr = other._points
        within_x = tl.x <= obr.x and br.x >= otl.x
        within_y = tl.y <= obr.y and br.y >= otl.y
        return within_x and within_y

    def contains_point(self, point: Vec2D) -> bool:
        """True when ``point`` lies inside or on the border."""
        tl, br = self._points
        return tl.x <= point.x <= br.x and tl.y <= point.y <= br.y

    @classmethod
    def inset(cls, rect: Rectangle2D, insets: Vec2D) -> Rectangle2D:
        """Rectangle shrunk by ``insets`` on every side."""
        top_left = rect._points[0] + insets
        width = rect.width() - 2 * insets.x
        height = rect.height() - 2 * insets.y
        return cls.from_size(top_left, width, height)

    def get_points(self) -> list[Vec2D]:
        """The four corners: top-left, top-right, bottom-left, bottom-right."""
        tl, br = self._points
        return [tl.copy(), Vec2D(br.x, tl.y), Vec2D(tl.x, br.y), br.copy()]

    def __repr__(self) -> str:
        return f"Rectangle2D(top_left={self._points[0]!r}, bottom_right={self._points[1]!r})"


class Circle2D(Shape2D):
    """Circle given by its center and radius."""

    def __init__(self, center: Vec2D | None = None, radius: float = 0.0) -> None:
        super().__init__([Vec2D() if center is None else center])
        self.radius = float(radius)

    def center_point(self) -> Vec2D:
        return self._points[0].copy()

    def move_to(self, position: Vec2D) -> None:
        """Place the center at ``position``."""
        self._points[0] = position.copy()

    def intersects(self, other: Circle2D) -> bool:
        """True when the circles overlap (touching does not count)."""
        return self._points[0].distance(other._points[0]) < self.radius + other.radius

    def contains_point(self, point: Vec2D) -> bool:
        """True when ``point`` lies inside or on the circle."""
        return is_less_than_or_equal(self._points[0].distance(point), self.radius)

    def __repr__(self) -> str:
        return f"Circle2D(center={self._points[0]!r}, radius={self.radius!r})"


def _area(p0: Vec2D, p1: Vec2D, p2: Vec2D) -> float:
    return abs((p0.x * (p1.y - p2.y) + p1.x * (p2.y - p0.y) + p2.x * (p0.y - p1.y)) / 2.0)


class Triangle2D(Shape2D):
    """Triangle given by three vertices."""

    def __init__(
        self,
        p0: Vec2D | None = None,
        p1: Vec2D | None = None,
        p2: Vec2D | None = None,
    ) -> None:
        super().__init__([Vec2D() if p is None else p for p in (p0, p1, p2)])

    @property
    def p0(self) -> Vec2D:
        return self._points[0].copy()

    @p0.setter
    def p0(self, value: Vec2D) -> None:
        self._points[0] = value.copy()

    @property
    def p1(self) -> Vec2D:
        return self._points[1].copy()

    @p1.setter
    def p1(self, value: Vec2D) -> None:
        self._points[1] = value.copy()

    @property
    def p2(self) -> Vec2D:
        return self._points[2].copy()

    @p2.setter
    def p2(self, value: Vec2D) -> None:
        self._points[2] = value.copy()

    def center_point(self) -> Vec2D:
        """Centroid of the triangle."""
        return Vec2D(
            sum(p.x for p in self._points) / 3.0,
            sum(p.y for p in self._points) / 3.0,
        )

    def area(self) -> float:
        """Area of the triangle."""
        return _area(*self._points)

    def contains_point(self, point: Vec2D) -> bool:
        """True when ``point`` lies inside or on the triangle."""
        p0, p1, p2 = self._points
        total = _area(point, p1, p2) + _area(p0, point, p2) + _area(p0, p1, point)
        return is_equal(self.area(), total)

    def __repr__(self) -> str:
        p0, p1, p2 = self._points
        return f"Triangle2D(p0={p0!r}, p1={p1!r}, p2={p2!r})"