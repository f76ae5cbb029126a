"""Line segments in 2D space."""

from __future__ import annotations

from .vec2d import EPSILON, Vec2D


class Line2D:
    """A line through two points, also usable as the segment between them."""

    __slots__ = ("p0", "p1")

    def __init__(self, p0: Vec2D | None = None, p1: Vec2D | None = None) -> None:
        self.p0 = Vec2D() if p0 is None else p0.copy()
        self.p1 = Vec2D() if p1 is None else p1.copy()

    @classmethod
    def from_coords(cls, x0: float, y0: float, x1: float, y1: float) -> Line2D:
        """Build a line from the coordinates of its two end points."""
        return cls(Vec2D(x0, y0), Vec2D(x1, y1))

    def closest_point(self, point: Vec2D, limit_to_segment: bool = False) -> Vec2D:
        """Point on the line (or on the segment if limited) closest to ``point``.

        Raises ZeroDivisionError when both end points coincide.
        """
        p0_to_p = point - self.p0
        p0_to_p1 = self.p1 - self.p0
        t = p0_to_p.dot(p0_to_p1) / p0_to_p1.mag2()
        if limit_to_segment:
            t = max(0.0, min(1.0, t))
        return self.p0 + p0_to_p1 * t

    def min_distance_from(self, point: Vec2D, limit_to_segment: bool = False) -> float:
        """Shortest distance from ``point`` to the line or segment."""
        return point.distance(self.closest_point(point, limit_to_segment))

    def slope(self) -> float:
        """Slope dy/dx; 0 for (near) vertical lines."""
        dx = self.p1.x - self.p0.x
        if abs(dx) < EPSILON:
            return 0.0
        return (self.p1.y - self.p0.y) / dx

    def mid_point(self) -> Vec2D:
        """Midpoint of the segment."""
        return Vec2D((self.p0.x + self.p1.x) / 2.0, (self.p0.y + self.p1.y) / 2.0)

    def length(self) -> float:
        """Length of the segment."""
        return self.p1.distance(self.p0)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Line2D):
            return NotImplemented
        return self.p0 == other.p0 and self.p1 == other.p1

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Line2D(p0={self.p0!r}, p1={self.p1!r})"