"""Uniform access to owned grids and borrowed views.

:class:`GridLike` asks concrete types for four primitives (``dimensions``,
``get``, ``get_row`` and ``get_column``) and derives iteration, mapping and
rendering from them. :class:`GridLikeMut` adds a single ``set`` primitive.
Neighbour lookup and counting helpers are plain functions over the
interface, so :class:`~gridkit.grid.finite_grid.Grid` and both view types
share one implementation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import (
    TYPE_CHECKING,
    Any,
    Callable,
    Generic,
    Iterable,
    Iterator,
    List,
    Optional,
    Tuple,
    TypeVar,
)

import numpy as np

from ..errors import WrongDimensionsError
from ..geometry import CARDINAL, Area, Dimensions, Directional, Point2D, as_point

if TYPE_CHECKING:
    from .finite_grid import Grid

T = TypeVar("T")
U = TypeVar("U")
Item = TypeVar("Item")


class GridSequence(Generic[Item]):
    """A finite, lazy sequence that starts over every time it is iterated."""

    __slots__ = ("_factory", "_length")

    def __init__(self, factory: Callable[[], Iterator[Item]], length: int) -> None:
        self._factory = factory
        self._length = length

    def __iter__(self) -> Iterator[Item]:
        return self._factory()

    def __len__(self) -> int:
        return self._length

    def __repr__(self) -> str:
        return f"GridSequence(len={self._length})"


class GridLike(ABC, Generic[T]):
    """Read access shared by grids and grid views."""

    @abstractmethod
    def dimensions(self) -> Dimensions:
        ...

    @abstractmethod
    def get(self, point: Point2D) -> Optional[T]:
        """Value at ``point`` or ``None`` outside ``[0, width) x [0, height)``."""

    @abstractmethod
    def get_row(self, row: int) -> Optional[Tuple[T, ...]]:
        ...

    @abstractmethod
    def get_column(self, column: int) -> Optional[Tuple[T, ...]]:
        ...

    # derived ----------------------------------------------------------------

    def area(self) -> Area:
        return Area.from_dimensions(self.dimensions())

    def in_bounds(self, point: Point2D) -> bool:
        width, height = self.dimensions()
        return 0 <= point.x < width and 0 <= point.y < height

    def __len__(self) -> int:
        return self.dimensions().surface_area()

    def __getitem__(self, point: Any) -> T:
        point = as_point(point)
        if not self.in_bounds(point):
            raise IndexError(f"{point} is outside a {self.dimensions()} grid")
        return self.get(point)

    def iter_rows(self) -> GridSequence[Tuple[T, ...]]:
        height = self.dimensions().height
        return GridSequence(lambda: (self.get_row(row) for row in range(height)), height)

    def iter_columns(self) -> GridSequence[Tuple[T, ...]]:
        width = self.dimensions().width
        return GridSequence(lambda: (self.get_column(column) for column in range(width)), width)

    rows = iter_rows
    columns = iter_columns

    def iter(self) -> GridSequence[T]:
        """Cell values in row-major order."""
        return GridSequence(
            lambda: (value for row in self.iter_rows() for value in row),
            len(self),
        )

    def enumerate(self) -> GridSequence[Tuple[Point2D, T]]:
        """``(position, value)`` pairs in row-major order."""
        return GridSequence(lambda: zip(iter(self.area()), iter(self.iter())), len(self))

    def map(self, mapper: Callable[[T], U]) -> "Grid[U]":
        from .finite_grid import Grid

        return Grid.from_iter(self.dimensions(), (mapper(value) for value in self.iter()))

    def enumerate_map(self, mapper: Callable[[Point2D, T], U]) -> "Grid[U]":
        """Build a new grid from ``mapper(position, old_value)``.

        Only the source is read and only the result is written, which makes
        this the safe way to compute the next generation of a cellular
        automaton.
        """
        from .finite_grid import Grid

        items = (mapper(point, value) for point, value in self.enumerate())
        return Grid.from_iter(self.dimensions(), items)

    def owned(self) -> "Grid[T]":
        """Copy the cells into a new, independent grid."""
        return self.map(lambda value: value)

    def to_array(self) -> np.ndarray:
        """A 2-D ``object`` array holding the cells."""
        width, height = self.dimensions()
        out = np.empty((height, width), dtype=object)
        for point, value in self.enumerate():
            out[point.y, point.x] = value
        return out

    def render(self, glyph: Callable[[T], str] = str) -> str:
        """One line per row, each cell drawn with ``glyph``."""
        return "\n".join("".join(glyph(value) for value in row) for row in self.iter_rows())

    def __str__(self) -> str:
        return self.render()


class CellRef(Generic[T]):
    """Writable handle on one cell, as returned by :meth:`GridLikeMut.get_mut`."""

    __slots__ = ("_grid", "point")

    def __init__(self, grid: "GridLikeMut[T]", point: Point2D) -> None:
        self._grid = grid
        self.point = point

    def get(self) -> T:
        return self._grid[self.point]

    def set(self, value: T) -> None:
        self._grid[self.point] = value

    value = property(get, set)

    def __repr__(self) -> str:
        return f"CellRef({self.point}, {self.get()!r})"


class GridLikeMut(GridLike[T]):
    """Write access shared by owned grids and mutable views."""

    @abstractmethod
    def set(self, point: Point2D, value: T) -> bool:
        """Store ``value`` at ``point``; ``False`` if ``point`` is out of range."""

    def get_mut(self, point: Any) -> Optional[CellRef[T]]:
        point = as_point(point)
        if not self.in_bounds(point):
            return None
        return CellRef(self, point)

    def __setitem__(self, point: Any, value: T) -> None:
        point = as_point(point)
        if not self.set(point, value):
            raise IndexError(f"{point} is outside a {self.dimensions()} grid")

    def update(self, point: Any, updater: Callable[[T], T]) -> bool:
        point = as_point(point)
        if not self.in_bounds(point):
            return False
        return self.set(point, updater(self.get(point)))

    def fill(self, value: T) -> None:
        for point in self.area():
            self.set(point, value)

    def set_row(self, row: int, values: Iterable[T]) -> bool:
        """Overwrite row ``row``; ``False`` if the row does not exist.

        ``values`` must hold exactly ``width`` items, otherwise
        :class:`WrongDimensionsError` is raised and nothing is written.
        """
        width, height = self.dimensions()
        if not 0 <= row < height:
            return False
        cells = list(values)
        if len(cells) != width:
            raise WrongDimensionsError(Dimensions(width, 1), f"{len(cells)} cells")
        for x, value in enumerate(cells):
            self.set(Point2D(x, row), value)
        return True

    def set_column(self, column: int, values: Iterable[T]) -> bool:
        width, height = self.dimensions()
        if not 0 <= column < width:
            return False
        cells = list(values)
        if len(cells) != height:
            raise WrongDimensionsError(Dimensions(1, height), f"{len(cells)} cells")
        for y, value in enumerate(cells):
            self.set(Point2D(column, y), value)
        return True


# derived operations ---------------------------------------------------------


def neighbours(
    grid: GridLike[T],
    point: Point2D,
    directions: Iterable[Directional] = CARDINAL,
) -> Iterator[Tuple[Point2D, T]]:
    """``(position, value)`` for each neighbour of ``point`` that lies in ``grid``."""
    for candidate in as_point(point).neighbours(directions):
        if grid.in_bounds(candidate):
            yield candidate, grid.get(candidate)


def count_where(grid: GridLike[T], predicate: Callable[[T], bool]) -> int:
    return sum(1 for value in grid.iter() if predicate(value))


def positions_where(grid: GridLike[T], predicate: Callable[[T], bool]) -> List[Point2D]:
    return [point for point, value in grid.enumerate() if predicate(value)]


def find_position(grid: GridLike[T], predicate: Callable[[T], bool]) -> Optional[Point2D]:
    """First position in row-major order whose value satisfies ``predicate``."""
    for point, value in grid.enumerate():
        if predicate(value):
            return point
    return None


def pop_count(grid: GridLike[Any]) -> int:
    """Population count of a two-state grid: how many cells are on."""
    return count_where(grid, lambda cell: cell.is_on())


__all__ = [
    "GridSequence",
    "GridLike",
    "GridLikeMut",
    "CellRef",
    "neighbours",
    "count_where",
    "positions_where",
    "find_position",
    "pop_count",
]
