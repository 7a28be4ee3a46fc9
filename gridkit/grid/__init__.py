"""Owned grids, borrowed views and the operations they share."""

from .cells import Bit, Light
from .grid_like import (
    CellRef,
    GridLike,
    GridLikeMut,
    GridSequence,
    count_where,
    find_position,
    neighbours,
    pop_count,
    positions_where,
)
from .finite_grid import Grid
from .view import GridView, GridViewMut
from .borrow import BorrowLedger

__all__ = [
    "Bit",
    "Light",
    "CellRef",
    "GridLike",
    "GridLikeMut",
    "GridSequence",
    "Grid",
    "GridView",
    "GridViewMut",
    "BorrowLedger",
    "neighbours",
    "count_where",
    "positions_where",
    "find_position",
    "pop_count",
]
