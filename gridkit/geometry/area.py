"""Axis-aligned rectangles of grid cells.

An :class:`Area` is an origin plus :class:`Dimensions`. Edges are inclusive:
``right == left + width - 1``. Areas double as bounds checks and as viewport
descriptors for grid views.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Optional, Tuple

from .dimensions import Dimensions
from .point import Point2D


@dataclass(frozen=True)
class Area:
    origin: Point2D
    dimensions: Dimensions

    @classmethod
    def from_corners(cls, first: Point2D, second: Point2D) -> "Area":
        """Build the smallest area containing two opposite corners, in any order."""
        left, right = sorted((first.x, second.x))
        top, bottom = sorted((first.y, second.y))
        return cls(Point2D(left, top), Dimensions(right - left + 1, bottom - top + 1))

    @classmethod
    def from_dimensions(cls, dimensions: Dimensions, at: Optional[Point2D] = None) -> "Area":
        return cls(at if at is not None else Point2D.zero(), dimensions)

    # edges ------------------------------------------------------------------

    @property
    def top(self) -> int:
        return self.origin.y

    @property
    def left(self) -> int:
        return self.origin.x

    @property
    def bottom(self) -> int:
        return self.origin.y + self.dimensions.height - 1

    @property
    def right(self) -> int:
        return self.origin.x + self.dimensions.width - 1

    @property
    def top_left(self) -> Point2D:
        return self.origin

    @property
    def top_right(self) -> Point2D:
        return Point2D(self.right, self.top)

    @property
    def bottom_left(self) -> Point2D:
        return Point2D(self.left, self.bottom)

    @property
    def bottom_right(self) -> Point2D:
        return Point2D(self.right, self.bottom)

    def is_empty(self) -> bool:
        return self.dimensions.surface_area() == 0

    def corners(self) -> Tuple[Point2D, Point2D, Point2D, Point2D]:
        """Top-left, top-right, bottom-left, bottom-right."""
        return (self.top_left, self.top_right, self.bottom_left, self.bottom_right)

    # containment ------------------------------------------------------------

    def contains(self, point: Point2D) -> bool:
        return self.left <= point.x <= self.right and self.top <= point.y <= self.bottom

    def __contains__(self, point: object) -> bool:
        return isinstance(point, Point2D) and self.contains(point)

    def contains_area(self, other: "Area") -> bool:
        """True when ``other`` lies entirely inside this area.

        An empty area is contained anywhere its origin could start a view:
        inside this area or on its far edges.
        """
        if other.is_empty():
            return (
                self.left <= other.left <= self.right + 1
                and self.top <= other.top <= self.bottom + 1
                and other.right <= self.right
                and other.bottom <= self.bottom
            )
        return self.contains(other.top_left) and self.contains(other.bottom_right)

    def intersection(self, other: "Area") -> Optional["Area"]:
        """The overlapping region, or ``None`` if the areas share no cell."""
        left = max(self.left, other.left)
        top = max(self.top, other.top)
        right = min(self.right, other.right)
        bottom = min(self.bottom, other.bottom)
        if right < left or bottom < top:
            return None
        return Area(Point2D(left, top), Dimensions(right - left + 1, bottom - top + 1))

    def overlaps(self, other: "Area") -> bool:
        return self.intersection(other) is not None

    def translate(self, offset: Point2D) -> "Area":
        return Area(self.origin + offset, self.dimensions)

    # enumeration ------------------------------------------------------------

    def __iter__(self) -> Iterator[Point2D]:
        """Every point in row-major order."""
        for y in range(self.top, self.bottom + 1):
            for x in range(self.left, self.right + 1):
                yield Point2D(x, y)

    def __len__(self) -> int:
        return self.dimensions.surface_area()

    def edges(self) -> List[Point2D]:
        """Unique points on the border, top row first then down the sides."""
        if self.is_empty():
            return []
        seen = set()
        border: List[Point2D] = []
        candidates = [Point2D(x, self.top) for x in range(self.left, self.right + 1)]
        for y in range(self.top + 1, self.bottom):
            candidates.append(Point2D(self.left, y))
            candidates.append(Point2D(self.right, y))
        candidates.extend(Point2D(x, self.bottom) for x in range(self.left, self.right + 1))
        for point in candidates:
            if point not in seen:
                seen.add(point)
                border.append(point)
        return border

    def __str__(self) -> str:
        return f"{self.top_left} to {self.bottom_right}"


__all__ = ["Area"]
