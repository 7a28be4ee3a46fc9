"""Value types for 2-D coordinates, sizes, rectangles and directions."""

from .point import Point2D, as_point
from .dimensions import Dimensions
from .area import Area
from .direction import (
    ALL_2D,
    CARDINAL,
    HEX,
    ORDINAL,
    CardinalDirection,
    Directional,
    HexDirection,
    OrdinalDirection,
    RotationDirection,
)

__all__ = [
    "Point2D",
    "as_point",
    "Dimensions",
    "Area",
    "CardinalDirection",
    "OrdinalDirection",
    "HexDirection",
    "RotationDirection",
    "Directional",
    "CARDINAL",
    "ORDINAL",
    "ALL_2D",
    "HEX",
]
