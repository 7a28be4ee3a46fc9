"""gridkit: 2-D grids, grid views and worklist traversal for puzzle solvers."""

import logging

from .errors import (
    BorrowError,
    GridError,
    InvalidGridAreaError,
    InvalidTokenError,
    NotRectangularError,
    WrongDimensionsError,
)
from .geometry import (
    ALL_2D,
    CARDINAL,
    HEX,
    ORDINAL,
    Area,
    CardinalDirection,
    Dimensions,
    HexDirection,
    OrdinalDirection,
    Point2D,
    RotationDirection,
)
from .grid import (
    Bit,
    CellRef,
    Grid,
    GridLike,
    GridLikeMut,
    GridView,
    GridViewMut,
    Light,
    count_where,
    find_position,
    neighbours,
    pop_count,
    positions_where,
)
from .iteration import (
    DuplicateFilter,
    FifoQueue,
    FindState,
    FoldState,
    IterState,
    LifoQueue,
    PriorityQueue,
    Queue,
    SearchDepth,
    recursive_find,
    recursive_fold,
    recursive_iter,
    try_recursive_find,
    try_recursive_fold,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "GridError",
    "WrongDimensionsError",
    "NotRectangularError",
    "InvalidTokenError",
    "InvalidGridAreaError",
    "BorrowError",
    "Point2D",
    "Dimensions",
    "Area",
    "CardinalDirection",
    "OrdinalDirection",
    "HexDirection",
    "RotationDirection",
    "CARDINAL",
    "ORDINAL",
    "ALL_2D",
    "HEX",
    "Bit",
    "Light",
    "CellRef",
    "Grid",
    "GridLike",
    "GridLikeMut",
    "GridView",
    "GridViewMut",
    "neighbours",
    "count_where",
    "positions_where",
    "find_position",
    "pop_count",
    "Queue",
    "FifoQueue",
    "LifoQueue",
    "PriorityQueue",
    "FoldState",
    "FindState",
    "IterState",
    "recursive_fold",
    "try_recursive_fold",
    "recursive_find",
    "try_recursive_find",
    "recursive_iter",
    "DuplicateFilter",
    "SearchDepth",
]
