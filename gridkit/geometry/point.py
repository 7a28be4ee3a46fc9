"""Two-dimensional integer points.

``Point2D`` is the coordinate type used everywhere in gridkit. Grid cells are
addressed with ``x`` growing to the east and ``y`` growing to the south, so
``Point2D(0, 0)`` is the top-left cell of a grid.
"""

from __future__ import annotations

from dataclasses import dataclass
import operator
import re
from typing import TYPE_CHECKING, Iterable, Iterator, Optional

if TYPE_CHECKING:
    from .direction import CardinalDirection, Directional

_POINT_PATTERN = re.compile(r"^\s*\(?\s*(-?\d+)\s*,\s*(-?\d+)\s*\)?\s*$")


@dataclass(frozen=True)
class Point2D:
    """An ``(x, y)`` pair with vector arithmetic and a componentwise partial order."""

    x: int
    y: int

    @classmethod
    def zero(cls) -> "Point2D":
        return cls(0, 0)

    @classmethod
    def one(cls) -> "Point2D":
        return cls(1, 1)

    @classmethod
    def parse(cls, text: str) -> "Point2D":
        """Parse ``"x, y"`` or ``"(x, y)"``; the space after the comma is optional."""
        match = _POINT_PATTERN.match(text)
        if match is None:
            raise ValueError(f"not a point: {text!r}")
        return cls(int(match.group(1)), int(match.group(2)))

    # arithmetic -----------------------------------------------------------

    def __add__(self, other: "Point2D") -> "Point2D":
        if not isinstance(other, Point2D):
            return NotImplemented
        return Point2D(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Point2D") -> "Point2D":
        if not isinstance(other, Point2D):
            return NotImplemented
        return Point2D(self.x - other.x, self.y - other.y)

    def __neg__(self) -> "Point2D":
        return Point2D(-self.x, -self.y)

    def __mul__(self, scalar: int) -> "Point2D":
        if isinstance(scalar, Point2D):
            return NotImplemented
        return Point2D(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __floordiv__(self, scalar: int) -> "Point2D":
        return Point2D(self.x // scalar, self.y // scalar)

    def __iter__(self) -> Iterator[int]:
        yield self.x
        yield self.y

    # partial order ----------------------------------------------------------

    def partial_cmp(self, other: "Point2D") -> Optional[int]:
        """Compare componentwise; ``None`` when the components disagree."""
        x = (self.x > other.x) - (self.x < other.x)
        y = (self.y > other.y) - (self.y < other.y)
        return x if x == y else None

    def __lt__(self, other: "Point2D") -> bool:
        if not isinstance(other, Point2D):
            return NotImplemented
        return self.partial_cmp(other) == -1

    def __le__(self, other: "Point2D") -> bool:
        if not isinstance(other, Point2D):
            return NotImplemented
        return self.partial_cmp(other) in (-1, 0)

    def __gt__(self, other: "Point2D") -> bool:
        if not isinstance(other, Point2D):
            return NotImplemented
        return self.partial_cmp(other) == 1

    def __ge__(self, other: "Point2D") -> bool:
        if not isinstance(other, Point2D):
            return NotImplemented
        return self.partial_cmp(other) in (0, 1)

    # distances and neighbourhoods -----------------------------------------

    def manhattan_distance(self, other: "Point2D") -> int:
        """Taxicab distance between two points."""
        return abs(self.x - other.x) + abs(self.y - other.y)

    def hex_distance(self, other: "Point2D") -> int:
        """Step distance between two hex cells in axial coordinates."""
        dq = self.x - other.x
        dr = self.y - other.y
        return (abs(dq) + abs(dr) + abs(dq + dr)) // 2

    def clamp(self, low: int, high: int) -> "Point2D":
        return Point2D(min(max(self.x, low), high), min(max(self.y, low), high))

    def neighbours(self, directions: Iterable["Directional"]) -> Iterator["Point2D"]:
        """Yield the point one step away in each of ``directions``."""
        for direction in directions:
            yield self + direction.direction_vector()

    def direct_neighbours(self) -> Iterator["Point2D"]:
        """The four orthogonal neighbours (north, east, south, west)."""
        from .direction import CARDINAL

        return self.neighbours(CARDINAL)

    def all_neighbours(self) -> Iterator["Point2D"]:
        """The eight surrounding points, clockwise from north."""
        from .direction import ALL_2D

        return self.neighbours(ALL_2D)

    def hex_neighbours(self) -> Iterator["Point2D"]:
        from .direction import HEX

        return self.neighbours(HEX)

    def direction_to(self, other: "Point2D") -> Optional["CardinalDirection"]:
        """The cardinal direction that steps from ``self`` onto ``other``, if adjacent."""
        from .direction import CARDINAL

        delta = other - self
        for direction in CARDINAL:
            if direction.direction_vector() == delta:
                return direction
        return None

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


def as_point(value: object) -> Point2D:
    """Accept a :class:`Point2D` or an ``(x, y)`` tuple of integers."""
    if isinstance(value, Point2D):
        return value
    if isinstance(value, tuple) and len(value) == 2:
        # floats raise TypeError
        return Point2D(operator.index(value[0]), operator.index(value[1]))
    raise TypeError(f"expected a Point2D or (x, y) tuple, got {type(value).__name__}")


__all__ = ["Point2D", "as_point"]
