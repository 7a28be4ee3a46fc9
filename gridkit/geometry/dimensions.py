"""Width/height pairs."""

from __future__ import annotations

from dataclasses import dataclass
import re
from typing import Iterator, Optional, Sequence

from ..errors import NotRectangularError

_DIMENSIONS_PATTERN = re.compile(r"^\s*(\d+)x(\d+)\s*$")


@dataclass(frozen=True)
class Dimensions:
    """Non-negative ``width`` x ``height``, ordered componentwise."""

    width: int
    height: int

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise ValueError(f"dimensions must be non-negative, got {self.width}x{self.height}")

    @classmethod
    def parse(cls, text: str) -> "Dimensions":
        """Parse ``"WxH"``, e.g. ``"50x6"``."""
        match = _DIMENSIONS_PATTERN.match(text)
        if match is None:
            raise ValueError(f"not a dimensions string: {text!r}")
        return cls(int(match.group(1)), int(match.group(2)))

    @classmethod
    def of_rows(cls, rows: Sequence[Sequence[object]]) -> "Dimensions":
        """Measure a list of rows, rejecting ragged input."""
        if not rows:
            return cls(0, 0)
        width = len(rows[0])
        for index, row in enumerate(rows):
            if len(row) != width:
                raise NotRectangularError(index, len(row), width)
        return cls(width, len(rows))

    def surface_area(self) -> int:
        return self.width * self.height

    def partial_cmp(self, other: "Dimensions") -> Optional[int]:
        width = (self.width > other.width) - (self.width < other.width)
        height = (self.height > other.height) - (self.height < other.height)
        return width if width == height else None

    def __lt__(self, other: "Dimensions") -> bool:
        if not isinstance(other, Dimensions):
            return NotImplemented
        return self.partial_cmp(other) == -1

    def __le__(self, other: "Dimensions") -> bool:
        if not isinstance(other, Dimensions):
            return NotImplemented
        return self.partial_cmp(other) in (-1, 0)

    def __gt__(self, other: "Dimensions") -> bool:
        if not isinstance(other, Dimensions):
            return NotImplemented
        return self.partial_cmp(other) == 1

    def __ge__(self, other: "Dimensions") -> bool:
        if not isinstance(other, Dimensions):
            return NotImplemented
        return self.partial_cmp(other) in (0, 1)

    def __iter__(self) -> Iterator[int]:
        yield self.width
        yield self.height

    def __str__(self) -> str:
        return f"{self.width}x{self.height}"


__all__ = ["Dimensions"]
