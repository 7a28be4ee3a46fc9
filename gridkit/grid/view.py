"""Rectangular windows onto a :class:`~gridkit.grid.finite_grid.Grid`.

A view holds the grid, its absolute ``offset`` inside that grid and the
grid's row ``stride``. Positions handed to a view are local, with ``(0, 0)``
at the view's top-left corner, so a view behaves like a smaller grid while
sharing the parent's storage. Cropping a view yields another view over the
same buffer with a composed offset.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, List, Optional, Tuple, TypeVar
import weakref

import numpy as np

from ..errors import BorrowError, InvalidGridAreaError
from ..geometry import Area, Dimensions, Point2D, as_point
from .grid_like import GridLike, GridLikeMut

if TYPE_CHECKING:
    from .finite_grid import Grid

logger = logging.getLogger(__name__)
logger.addHandler(logging.NullHandler())

T = TypeVar("T")


class GridView(GridLike[T]):
    """Read-only window. Any number may overlap unless a mutable view is live."""

    mutable = False

    def __init__(
        self,
        grid: "Grid[T]",
        offset: Point2D,
        dimensions: Dimensions,
        parent: Optional["GridView[T]"] = None,
    ) -> None:
        self._grid = grid
        self.offset = offset
        self._dimensions = dimensions
        self.parent = parent
        self._released = False
        self._exported: List["weakref.ReferenceType[np.ndarray]"] = []
        grid.borrows.register(self)

    @property
    def stride(self) -> int:
        return self._grid.dimensions().width

    @property
    def absolute_area(self) -> Area:
        """Region of the parent grid this view covers."""
        return Area(self.offset, self._dimensions)

    @property
    def released(self) -> bool:
        return self._released

    def _check_live(self) -> None:
        if self._released:
            raise BorrowError("view has been released")

    def _backing_index(self, point: Point2D) -> int:
        return (self.offset.y + point.y) * self.stride + self.offset.x + point.x

    def dimensions(self) -> Dimensions:
        return self._dimensions

    def get(self, point: Any) -> Optional[T]:
        self._check_live()
        point = as_point(point)
        if not self.in_bounds(point):
            return None
        return self._grid._tiles[self._backing_index(point)]

    def get_row(self, row: int) -> Optional[Tuple[T, ...]]:
        self._check_live()
        if not 0 <= row < self._dimensions.height:
            return None
        start = self._backing_index(Point2D(0, row))
        return tuple(self._grid._tiles[start:start + self._dimensions.width])

    def get_column(self, column: int) -> Optional[Tuple[T, ...]]:
        self._check_live()
        height = self._dimensions.height
        if not 0 <= column < self._dimensions.width:
            return None
        if height == 0:
            return ()
        start = self._backing_index(Point2D(column, 0))
        stop = start + (height - 1) * self.stride + 1
        return tuple(self._grid._tiles[start:stop:self.stride])

    def to_array(self) -> np.ndarray:
        """``[row, column]`` numpy view of the window; writable only for mutable views.

        Writable arrays are made read-only again by :meth:`release`. A view
        dropped without being released leaves them writable, as do arrays
        sliced from an exported one.
        """
        self._check_live()
        width, height = self._dimensions
        parent_width, parent_height = self._grid.dimensions()
        full = self._grid._tiles.reshape(parent_height, parent_width)
        array = full[self.offset.y:self.offset.y + height, self.offset.x:self.offset.x + width]
        array.flags.writeable = self.mutable
        if self.mutable:
            self._exported.append(weakref.ref(array))
        return array

    def _checked_area(self, area: Area) -> Area:
        self._check_live()
        if not self.area().contains_area(area):
            raise InvalidGridAreaError(self._dimensions, area)
        return area

    def crop(self, area: Area) -> "GridView[T]":
        """Shared sub-view; ``area`` is relative to this view."""
        area = self._checked_area(area)
        return GridView(self._grid, self.offset + area.origin, area.dimensions, parent=self)

    def release(self) -> None:
        """End the borrow. Further use of this view raises :class:`BorrowError`."""
        if not self._released:
            self._released = True
            for reference in self._exported:
                array = reference()
                if array is not None:
                    array.flags.writeable = False
            self._exported.clear()
            self._grid.borrows.release(self)

    def __enter__(self) -> "GridView[T]":
        self._check_live()
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.release()

    def __repr__(self) -> str:
        kind = type(self).__name__
        return f"{kind}({self._dimensions} at {self.offset})"


class GridViewMut(GridView[T], GridLikeMut[T]):
    """Writable window. Only its own ancestors may overlap it while it is live."""

    mutable = True

    def set(self, point: Any, value: T) -> bool:
        self._check_live()
        point = as_point(point)
        if not self.in_bounds(point):
            return False
        self._grid._tiles[self._backing_index(point)] = value
        return True

    def crop_mut(self, area: Area) -> "GridViewMut[T]":
        """Writable sub-view; ``area`` is relative to this view."""
        area = self._checked_area(area)
        return GridViewMut(self._grid, self.offset + area.origin, area.dimensions, parent=self)


__all__ = ["GridView", "GridViewMut"]
