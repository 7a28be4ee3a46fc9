"""Exceptions raised by the grid family.

Input validation failures subclass :class:`ValueError` so callers that only
care about "bad input" can catch the builtin. Borrow conflicts are usage
errors and subclass :class:`RuntimeError`. The traversal engine adds no
exception types; it forwards whatever its visitors raise.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Tuple

if TYPE_CHECKING:
    from .geometry import Area, Dimensions


class GridError(Exception):
    """Base class for every gridkit error."""


class WrongDimensionsError(GridError, ValueError):
    """Data did not have the expected ``width * height`` shape."""

    def __init__(self, expected: Optional["Dimensions"], actual: object = None) -> None:
        self.expected = expected
        self.actual = actual
        message = f"Data did not have the expected dimensions, expected: {expected}"
        if actual is not None:
            message += f", got: {actual}"
        super().__init__(message)


class NotRectangularError(WrongDimensionsError):
    """Rows of differing length were supplied where a rectangle was required."""

    def __init__(self, row: int, width: int, expected_width: int) -> None:
        self.row = row
        self.width = width
        self.expected_width = expected_width
        GridError.__init__(
            self,
            f"row {row} has {width} cells, expected {expected_width}",
        )
        self.expected = None
        self.actual = None


class InvalidTokenError(GridError, ValueError):
    """A character had no valid cell conversion."""

    def __init__(self, token: str, position: Optional[Tuple[int, int]] = None) -> None:
        self.token = token
        self.position = position
        message = f"invalid token {token!r}"
        if position is not None:
            message += f" at {position}"
        super().__init__(message)


class InvalidGridAreaError(GridError, ValueError):
    """A requested area does not lie inside the grid or view it was cut from."""

    def __init__(self, dimensions: "Dimensions", area: "Area") -> None:
        self.dimensions = dimensions
        self.area = area
        super().__init__(f"{area} is not a valid area within a grid with dimensions {dimensions}")


class BorrowError(GridError, RuntimeError):
    """A view or write would alias a live mutable view of the same cells."""


__all__ = [
    "GridError",
    "WrongDimensionsError",
    "NotRectangularError",
    "InvalidTokenError",
    "InvalidGridAreaError",
    "BorrowError",
]
