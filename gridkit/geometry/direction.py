"""Compass directions and the direction sets used for neighbour enumeration.

Screen orientation is assumed: north is ``y - 1`` and south is ``y + 1``.
Hex directions use axial coordinates ``(q, r)`` with flat-topped cells, so a
hex grid can share :class:`~gridkit.geometry.point.Point2D` with square grids.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Tuple

from .point import Point2D


class RotationDirection(Enum):
    LEFT = "left"
    RIGHT = "right"


class _VectorDirection(Enum):
    """Shared behaviour for enums whose value is a ``(dx, dy)`` offset."""

    def direction_vector(self) -> Point2D:
        dx, dy = self.value
        return Point2D(dx, dy)


class CardinalDirection(_VectorDirection):
    NORTH = (0, -1)
    EAST = (1, 0)
    SOUTH = (0, 1)
    WEST = (-1, 0)

    def rotate(self, rotation: RotationDirection) -> "CardinalDirection":
        order = list(CardinalDirection)
        step = 1 if rotation is RotationDirection.RIGHT else -1
        return order[(order.index(self) + step) % len(order)]

    def opposite(self) -> "CardinalDirection":
        dx, dy = self.value
        return CardinalDirection((-dx, -dy))

    @classmethod
    def parse(cls, char: str) -> "CardinalDirection":
        """Parse a single character such as ``U``, ``n``, ``>`` or ``v``."""
        try:
            return _CARDINAL_CHARS[char]
        except KeyError:
            raise ValueError(f"not a direction: {char!r}") from None

    def relative_char(self) -> str:
        return {"NORTH": "U", "EAST": "R", "SOUTH": "D", "WEST": "L"}[self.name]

    def absolute_char(self) -> str:
        return self.name[0]


_CARDINAL_CHARS: Dict[str, CardinalDirection] = {}
for _chars, _direction in (
    ("UuNn^", CardinalDirection.NORTH),
    ("RrEe>", CardinalDirection.EAST),
    ("DdSsVv", CardinalDirection.SOUTH),
    ("LlWw<", CardinalDirection.WEST),
):
    for _char in _chars:
        _CARDINAL_CHARS[_char] = _direction


class OrdinalDirection(_VectorDirection):
    NORTH_EAST = (1, -1)
    SOUTH_EAST = (1, 1)
    SOUTH_WEST = (-1, 1)
    NORTH_WEST = (-1, -1)


class HexDirection(_VectorDirection):
    """Steps to the six neighbours of a hex cell, in axial coordinates."""

    NORTH = (0, -1)
    NORTH_EAST = (1, -1)
    SOUTH_EAST = (1, 0)
    SOUTH = (0, 1)
    SOUTH_WEST = (-1, 1)
    NORTH_WEST = (-1, 0)

    @classmethod
    def parse(cls, text: str) -> "HexDirection":
        """Parse ``n``, ``ne``, ``se``, ``s``, ``sw`` or ``nw`` in either case."""
        try:
            return _HEX_NAMES[text.strip().lower()]
        except KeyError:
            raise ValueError(f"not a hex direction: {text!r}") from None


_HEX_NAMES: Dict[str, HexDirection] = {
    "n": HexDirection.NORTH,
    "ne": HexDirection.NORTH_EAST,
    "se": HexDirection.SOUTH_EAST,
    "s": HexDirection.SOUTH,
    "sw": HexDirection.SOUTH_WEST,
    "nw": HexDirection.NORTH_WEST,
}

# Anything with a ``direction_vector()`` method returning a Point2D.
Directional = _VectorDirection

CARDINAL: Tuple[CardinalDirection, ...] = tuple(CardinalDirection)
ORDINAL: Tuple[OrdinalDirection, ...] = tuple(OrdinalDirection)
ALL_2D: Tuple[_VectorDirection, ...] = (
    CardinalDirection.NORTH,
    OrdinalDirection.NORTH_EAST,
    CardinalDirection.EAST,
    OrdinalDirection.SOUTH_EAST,
    CardinalDirection.SOUTH,
    OrdinalDirection.SOUTH_WEST,
    CardinalDirection.WEST,
    OrdinalDirection.NORTH_WEST,
)
HEX: Tuple[HexDirection, ...] = tuple(HexDirection)


__all__ = [
    "RotationDirection",
    "CardinalDirection",
    "OrdinalDirection",
    "HexDirection",
    "Directional",
    "CARDINAL",
    "ORDINAL",
    "ALL_2D",
    "HEX",
]
