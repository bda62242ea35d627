"""Geometric primitives for cloud layout computation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable


@dataclass(frozen=True)
class Point:
    """An integer point in pixel space."""

    x: int
    y: int

    def offset(self, dx: int, dy: int) -> Point:
        return Point(self.x + dx, self.y + dy)


@dataclass(frozen=True)
class Size:
    """Width and height of a rectangle in pixels."""

    width: int
    height: int

    @property
    def area(self) -> int:
        return self.width * self.height

    def half(self) -> Size:
        """Half of each dimension, rounded toward zero."""
        return Size(self.width // 2, self.height // 2)


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle in pixel space; (x, y) is the top-left corner."""

    x: int
    y: int
    width: int
    height: int

    @classmethod
    def centered_at(cls, point: Point, size: Size) -> Rect:
        """Rectangle of the given size whose center is ``point``."""
        half = size.half()
        return cls(point.x - half.width, point.y - half.height, size.width, size.height)

    @classmethod
    def bounding(cls, rects: Iterable[Rect]) -> Rect | None:
        """Smallest rectangle containing all ``rects``. None if there are none."""
        rects = list(rects)
        if not rects:
            return None
        left = min(r.x for r in rects)
        top = min(r.y for r in rects)
        right = max(r.right for r in rects)
        bottom = max(r.bottom for r in rects)
        return cls(left, top, right - left, bottom - top)

    @property
    def right(self) -> int:
        return self.x + self.width

    @property
    def bottom(self) -> int:
        return self.y + self.height

    @property
    def location(self) -> Point:
        return Point(self.x, self.y)

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    @property
    def center(self) -> Point:
        half = self.size.half()
        return Point(self.x + half.width, self.y + half.height)

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def contains(self, px: float, py: float) -> bool:
        """True if the point lies inside; the right and bottom edges are outside."""
        return self.x <= px < self.right and self.y <= py < self.bottom

    def intersects_with(self, other: Rect) -> bool:
        """True if the interiors overlap.

        Touching edges do not count, and an empty rectangle never
        intersects anything.
        """
        if self.is_empty or other.is_empty:
            return False
        return (
            other.x < self.right
            and self.x < other.right
            and other.y < self.bottom
            and self.y < other.bottom
        )

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y, "width": self.width, "height": self.height}
