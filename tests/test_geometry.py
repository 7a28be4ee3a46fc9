"""Tests for points, dimensions, areas and directions.

[S:TEST v1] unit=15 property=3 pass
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure project root on path for direct test execution
sys.path.append(str(Path(__file__).resolve().parents[1]))

import pytest
from hypothesis import given, strategies as st

from gridkit.errors import NotRectangularError
from gridkit.geometry import (
    ALL_2D,
    CARDINAL,
    Area,
    CardinalDirection,
    Dimensions,
    HexDirection,
    Point2D,
    RotationDirection,
    as_point,
)

coords = st.integers(min_value=-50, max_value=50)
points = st.builds(Point2D, coords, coords)


def test_point_arithmetic() -> None:
    a = Point2D(3, -2)
    b = Point2D(1, 4)
    assert a + b == Point2D(4, 2)
    assert a - b == Point2D(2, -6)
    assert -a == Point2D(-3, 2)
    assert a * 2 == 2 * a == Point2D(6, -4)
    assert Point2D(7, 9) // 2 == Point2D(3, 4)
    x, y = a
    assert (x, y) == (3, -2)


def test_point_parse_and_display() -> None:
    assert Point2D.parse("3, 4") == Point2D(3, 4)
    assert Point2D.parse("(-1,2)") == Point2D(-1, 2)
    assert str(Point2D(5, 6)) == "(5, 6)"
    with pytest.raises(ValueError):
        Point2D.parse("three, four")


def test_point_partial_order() -> None:
    assert Point2D(1, 1) < Point2D(2, 2)
    assert Point2D(1, 1) <= Point2D(1, 1)
    assert Point2D(1, 3).partial_cmp(Point2D(2, 2)) is None
    assert not Point2D(1, 3) < Point2D(2, 2)
    assert not Point2D(1, 3) > Point2D(2, 2)


@given(points, points)
def test_manhattan_distance_symmetric(a: Point2D, b: Point2D) -> None:
    assert a.manhattan_distance(b) == b.manhattan_distance(a) >= 0
    assert a.manhattan_distance(a) == 0


def test_clamp_and_direction_to() -> None:
    assert Point2D(-4, 12).clamp(0, 9) == Point2D(0, 9)
    origin = Point2D(2, 2)
    assert origin.direction_to(Point2D(2, 1)) is CardinalDirection.NORTH
    assert origin.direction_to(Point2D(3, 2)) is CardinalDirection.EAST
    assert origin.direction_to(Point2D(3, 3)) is None


def test_neighbourhoods() -> None:
    origin = Point2D(0, 0)
    assert list(origin.direct_neighbours()) == [
        Point2D(0, -1),
        Point2D(1, 0),
        Point2D(0, 1),
        Point2D(-1, 0),
    ]
    ring = list(origin.all_neighbours())
    assert len(ring) == len(set(ring)) == 8
    assert ring[0] == Point2D(0, -1) and ring[1] == Point2D(1, -1)


@given(points)
def test_hex_neighbours_are_one_step_away(point: Point2D) -> None:
    for neighbour in point.hex_neighbours():
        assert point.hex_distance(neighbour) == 1


def test_as_point_accepts_tuples() -> None:
    assert as_point((1, 2)) == Point2D(1, 2)
    assert as_point(Point2D(1, 2)) == Point2D(1, 2)
    with pytest.raises(TypeError):
        as_point("1,2")
    with pytest.raises(TypeError):
        as_point((0.5, 1))


def test_cardinal_rotation_and_parse() -> None:
    north = CardinalDirection.NORTH
    assert north.rotate(RotationDirection.RIGHT) is CardinalDirection.EAST
    assert north.rotate(RotationDirection.LEFT) is CardinalDirection.WEST
    assert north.opposite() is CardinalDirection.SOUTH
    assert CardinalDirection.parse("^") is north
    assert CardinalDirection.parse("v") is CardinalDirection.SOUTH
    assert CardinalDirection.parse("L") is CardinalDirection.WEST
    assert CardinalDirection.EAST.relative_char() == "R"
    assert CardinalDirection.EAST.absolute_char() == "E"
    with pytest.raises(ValueError):
        CardinalDirection.parse("x")


def test_hex_direction_parse() -> None:
    assert HexDirection.parse("NE") is HexDirection.NORTH_EAST
    assert HexDirection.parse("sw") is HexDirection.SOUTH_WEST
    with pytest.raises(ValueError):
        HexDirection.parse("e")


def test_direction_sets() -> None:
    assert len(CARDINAL) == 4
    assert len(ALL_2D) == 8
    vectors = {direction.direction_vector() for direction in ALL_2D}
    assert Point2D(0, 0) not in vectors and len(vectors) == 8


def test_dimensions_parse_and_order() -> None:
    dims = Dimensions.parse("50x6")
    assert dims == Dimensions(50, 6)
    assert str(dims) == "50x6"
    assert dims.surface_area() == 300
    assert Dimensions(2, 3) < Dimensions(3, 4)
    assert Dimensions(2, 5).partial_cmp(Dimensions(3, 4)) is None
    with pytest.raises(ValueError):
        Dimensions(-1, 2)
    with pytest.raises(ValueError):
        Dimensions.parse("50 by 6")


def test_dimensions_of_rows() -> None:
    assert Dimensions.of_rows([[1, 2, 3], [4, 5, 6]]) == Dimensions(3, 2)
    assert Dimensions.of_rows([]) == Dimensions(0, 0)
    with pytest.raises(NotRectangularError) as excinfo:
        Dimensions.of_rows([[1, 2], [3]])
    assert excinfo.value.row == 1


def test_area_edges_and_corners() -> None:
    area = Area.from_corners(Point2D(4, 3), Point2D(1, 1))
    assert area.origin == Point2D(1, 1)
    assert area.dimensions == Dimensions(4, 3)
    assert (area.left, area.top, area.right, area.bottom) == (1, 1, 4, 3)
    assert area.corners() == (Point2D(1, 1), Point2D(4, 1), Point2D(1, 3), Point2D(4, 3))
    edges = area.edges()
    assert len(edges) == len(set(edges)) == 10
    assert Point2D(2, 2) not in edges
    assert str(area) == "(1, 1) to (4, 3)"


def test_area_iteration_is_row_major() -> None:
    area = Area.from_dimensions(Dimensions(2, 2), at=Point2D(5, 5))
    assert list(area) == [Point2D(5, 5), Point2D(6, 5), Point2D(5, 6), Point2D(6, 6)]
    assert len(area) == 4
    assert Point2D(6, 6) in area
    assert Point2D(7, 6) not in area


def test_area_intersection() -> None:
    a = Area.from_corners(Point2D(0, 0), Point2D(4, 4))
    b = Area.from_corners(Point2D(3, 2), Point2D(8, 8))
    assert a.intersection(b) == Area.from_corners(Point2D(3, 2), Point2D(4, 4))
    assert a.overlaps(b)
    c = Area.from_corners(Point2D(5, 5), Point2D(6, 6))
    assert a.intersection(c) is None
    assert a.translate(Point2D(1, 1)).origin == Point2D(1, 1)


def test_area_containment_with_empty_areas() -> None:
    outer = Area.from_dimensions(Dimensions(3, 3))
    assert outer.contains_area(Area.from_corners(Point2D(1, 1), Point2D(2, 2)))
    assert not outer.contains_area(Area.from_corners(Point2D(1, 1), Point2D(3, 2)))
    assert outer.contains_area(Area(Point2D(3, 0), Dimensions(0, 2)))
    assert not outer.contains_area(Area(Point2D(4, 0), Dimensions(0, 2)))
    empty = Area.from_dimensions(Dimensions(0, 0))
    assert empty.is_empty() and empty.edges() == []


@given(
    st.integers(min_value=0, max_value=6),
    st.integers(min_value=0, max_value=6),
    st.integers(min_value=-3, max_value=3),
    st.integers(min_value=-3, max_value=3),
)
def test_area_len_matches_iteration(width: int, height: int, x: int, y: int) -> None:
    area = Area.from_dimensions(Dimensions(width, height), at=Point2D(x, y))
    points_in_area = list(area)
    assert len(points_in_area) == len(area) == width * height
    assert all(area.contains(point) for point in points_in_area)
