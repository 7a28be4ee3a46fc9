"""Owned, fixed-size rectangular grids backed by a flat numpy buffer.

Cells live in a one-dimensional ``object`` array in row-major order, so
``(x, y)`` maps to index ``y * width + x``. Views share that buffer instead
of copying it.
"""

from __future__ import annotations

import copy
import logging
from typing import Any, Callable, Iterable, List, Optional, Sequence, Tuple, TypeVar

import numpy as np

from ..errors import InvalidGridAreaError, InvalidTokenError, WrongDimensionsError
from ..geometry import Area, Dimensions, Point2D, as_point
from .borrow import BorrowLedger
from .grid_like import GridLikeMut

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

T = TypeVar("T")


def _object_buffer(items: Sequence[Any]) -> np.ndarray:
    buffer = np.empty(len(items), dtype=object)
    # element-wise so tuple and list values stay single cells
    for index, item in enumerate(items):
        buffer[index] = item
    return buffer


class Grid(GridLikeMut[T]):
    """A ``width x height`` grid of values that owns its storage."""

    def __init__(self, dimensions: Dimensions, tiles: np.ndarray) -> None:
        if tiles.ndim != 1 or len(tiles) != dimensions.surface_area():
            raise WrongDimensionsError(dimensions, f"{tiles.size} cells")
        self._dimensions = dimensions
        self._tiles = tiles
        self._borrows = BorrowLedger()

    # construction -----------------------------------------------------------

    @classmethod
    def new(cls, dimensions: Dimensions, fill: T) -> "Grid[T]":
        """Grid with every cell holding its own copy of ``fill``."""
        return cls(
            dimensions,
            _object_buffer([copy.copy(fill) for _ in range(dimensions.surface_area())]),
        )

    @classmethod
    def empty(cls, dimensions: Dimensions) -> "Grid[Optional[T]]":
        return cls.new(dimensions, None)

    @classmethod
    def from_iter(cls, dimensions: Dimensions, items: Iterable[T]) -> "Grid[T]":
        """Fill row-major from ``items``, which must yield exactly ``width * height`` values."""
        values = list(items)
        if len(values) != dimensions.surface_area():
            raise WrongDimensionsError(dimensions, f"{len(values)} cells")
        return cls(dimensions, _object_buffer(values))

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[T]]) -> "Grid[T]":
        materialised = [list(row) for row in rows]
        dimensions = Dimensions.of_rows(materialised)
        return cls.from_iter(dimensions, (value for row in materialised for value in row))

    @classmethod
    def from_array(cls, array: np.ndarray) -> "Grid[Any]":
        """Copy a 2-D array indexed ``[row, column]``."""
        array = np.asarray(array)
        if array.ndim != 2:
            raise WrongDimensionsError(None, f"array of shape {array.shape}")
        height, width = array.shape
        return cls.from_iter(Dimensions(width, height), array.reshape(-1).tolist())

    @classmethod
    def parse(
        cls,
        text: str,
        converter: Callable[[str], T],
        dimensions: Optional[Dimensions] = None,
    ) -> "Grid[T]":
        """Parse one character per cell and one line per row.

        Leading and trailing line breaks are ignored and ``\\r\\n`` endings are
        accepted. ``converter`` failures (``ValueError`` or ``KeyError``) are
        reported as :class:`InvalidTokenError` carrying the ``(x, y)`` of the
        offending character. With ``dimensions`` the input must match exactly;
        without it the shape is inferred and ragged input is rejected.
        """
        body = text.strip("\r\n")
        lines = body.splitlines() if body else []
        rows: List[List[T]] = []
        for y, line in enumerate(lines):
            row = []
            for x, char in enumerate(line):
                try:
                    row.append(converter(char))
                except (ValueError, KeyError) as exc:
                    raise InvalidTokenError(char, (x, y)) from exc
            rows.append(row)

        if dimensions is None:
            dimensions = Dimensions.of_rows(rows)
        else:
            widths = {len(row) for row in rows}
            if len(rows) != dimensions.height or widths - {dimensions.width}:
                if len(widths) <= 1:
                    actual: object = Dimensions(widths.pop() if widths else 0, len(rows))
                else:
                    actual = f"{len(rows)} rows of widths {sorted(widths)}"
                raise WrongDimensionsError(dimensions, actual)

        logger.debug("parsed grid", extra={"dimensions": str(dimensions)})
        return cls.from_iter(dimensions, (value for row in rows for value in row))

    # primitives -------------------------------------------------------------

    def dimensions(self) -> Dimensions:
        return self._dimensions

    @property
    def borrows(self) -> BorrowLedger:
        return self._borrows

    def backing_index(self, point: Point2D) -> int:
        return point.y * self._dimensions.width + point.x

    def get(self, point: Any) -> Optional[T]:
        point = as_point(point)
        if not self.in_bounds(point):
            return None
        return self._tiles[self.backing_index(point)]

    def get_row(self, row: int) -> Optional[Tuple[T, ...]]:
        width, height = self._dimensions
        if not 0 <= row < height:
            return None
        start = row * width
        return tuple(self._tiles[start:start + width])

    def get_column(self, column: int) -> Optional[Tuple[T, ...]]:
        width = self._dimensions.width
        if not 0 <= column < width:
            return None
        return tuple(self._tiles[column::width])

    def set(self, point: Any, value: T) -> bool:
        point = as_point(point)
        if not self.in_bounds(point):
            return False
        self._borrows.check_write(point)
        self._tiles[self.backing_index(point)] = value
        return True

    def to_array(self) -> np.ndarray:
        """Read-only ``[row, column]`` view of the backing buffer."""
        width, height = self._dimensions
        array = self._tiles.reshape(height, width)
        array.flags.writeable = False
        return array

    # views ------------------------------------------------------------------

    def _checked_area(self, area: Area) -> Area:
        if not self.area().contains_area(area):
            raise InvalidGridAreaError(self._dimensions, area)
        return area

    def sub_grid(self, area: Area) -> "GridView[T]":
        area = self._checked_area(area)
        return GridView(self, area.origin, area.dimensions)

    def sub_grid_mut(self, area: Area) -> "GridViewMut[T]":
        area = self._checked_area(area)
        return GridViewMut(self, area.origin, area.dimensions)

    def view(self) -> "GridView[T]":
        return self.sub_grid(self.area())

    def view_mut(self) -> "GridViewMut[T]":
        return self.sub_grid_mut(self.area())

    # value semantics --------------------------------------------------------

    def copy(self) -> "Grid[T]":
        return Grid(self._dimensions, self._tiles.copy())

    __copy__ = copy

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self._dimensions == other._dimensions and list(self._tiles) == list(other._tiles)

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Grid({self._dimensions})"


from .view import GridView, GridViewMut  # noqa: E402

__all__ = ["Grid"]
