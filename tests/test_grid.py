"""Tests for owned grids: construction, parsing, access and rendering.

[S:TEST v1] unit=22 property=4 pass
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure project root on path for direct test execution
sys.path.append(str(Path(__file__).resolve().parents[1]))

import numpy as np
import pytest
from hypothesis import given, strategies as st
import hypothesis.extra.numpy as hnp

from gridkit.errors import InvalidTokenError, NotRectangularError, WrongDimensionsError
from gridkit.geometry import Dimensions, Point2D
from gridkit.grid import Bit, Grid, Light

small_dims = st.builds(
    Dimensions,
    st.integers(min_value=0, max_value=6),
    st.integers(min_value=0, max_value=6),
)

SAMPLE = "#..#\n.##.\n#..."


@given(small_dims, st.integers(), st.integers(min_value=-3, max_value=9), st.integers(min_value=-3, max_value=9))
def test_new_fills_every_cell(dims: Dimensions, fill: int, x: int, y: int) -> None:
    grid = Grid.new(dims, fill)
    assert grid.dimensions().surface_area() == dims.width * dims.height == len(grid)
    point = Point2D(x, y)
    if 0 <= x < dims.width and 0 <= y < dims.height:
        assert grid.get(point) == fill
    else:
        assert grid.get(point) is None


def test_new_copies_mutable_fill() -> None:
    grid = Grid.new(Dimensions(2, 1), [])
    grid[0, 0].append(1)
    assert grid[1, 0] == []


def test_empty_grid_holds_none() -> None:
    grid = Grid.empty(Dimensions(2, 2))
    assert list(grid.iter()) == [None] * 4


@given(small_dims, st.integers(min_value=0, max_value=40))
def test_from_iter_length_must_match(dims: Dimensions, count: int) -> None:
    items = range(count)
    if count == dims.surface_area():
        grid = Grid.from_iter(dims, items)
        assert list(grid.iter()) == list(items)
    else:
        with pytest.raises(WrongDimensionsError) as excinfo:
            Grid.from_iter(dims, items)
        assert excinfo.value.expected == dims


def test_from_iter_keeps_tuple_cells() -> None:
    grid = Grid.from_iter(Dimensions(2, 1), [(1, 2), (3, 4)])
    assert grid[1, 0] == (3, 4)
    assert grid.get_row(0) == ((1, 2), (3, 4))


def test_from_rows() -> None:
    grid = Grid.from_rows([[1, 2, 3], [4, 5, 6]])
    assert grid.dimensions() == Dimensions(3, 2)
    assert grid.get_row(1) == (4, 5, 6)
    assert grid.get_column(2) == (3, 6)
    assert grid.get_row(2) is None
    assert grid.get_column(-1) is None
    with pytest.raises(NotRectangularError):
        Grid.from_rows([[1, 2], [3]])


@given(hnp.arrays(np.int16, hnp.array_shapes(min_dims=2, max_dims=2, min_side=1, max_side=5)))
def test_from_array_round_trip(array: np.ndarray) -> None:
    grid = Grid.from_array(array)
    height, width = array.shape
    assert grid.dimensions() == Dimensions(width, height)
    assert np.array_equal(grid.to_array().astype(np.int16), array)


def test_from_array_rejects_other_ranks() -> None:
    with pytest.raises(WrongDimensionsError):
        Grid.from_array(np.zeros(4))


def test_parse_bits_and_display() -> None:
    grid = Grid.parse(SAMPLE, Bit.from_char)
    assert grid.dimensions() == Dimensions(4, 3)
    assert grid[0, 0] is Bit.ON
    assert grid[1, 0] is Bit.OFF
    assert str(grid) == SAMPLE


def test_parse_accepts_crlf_and_trailing_newline() -> None:
    text = "#.\r\n.#\r\n"
    grid = Grid.parse(text, Light.from_char)
    assert grid.dimensions() == Dimensions(2, 2)
    assert str(grid) == "#.\n.#"


@given(
    st.integers(min_value=1, max_value=6).flatmap(
        lambda width: st.lists(
            st.text(alphabet="#.", min_size=width, max_size=width),
            min_size=1,
            max_size=6,
        )
    )
)
def test_two_state_text_round_trip(rows) -> None:
    text = "\n".join(rows)
    assert str(Grid.parse(text, Bit.from_char)) == text
    assert str(Grid.parse(text + "\n", Light.from_char)) == text


def test_parse_reports_bad_token_position() -> None:
    with pytest.raises(InvalidTokenError) as excinfo:
        Grid.parse("##\n#x", Bit.from_char)
    assert excinfo.value.token == "x"
    assert excinfo.value.position == (1, 1)


def test_parse_wraps_converter_value_errors() -> None:
    grid = Grid.parse("123\n456", int)
    assert grid.get_row(1) == (4, 5, 6)
    with pytest.raises(InvalidTokenError) as excinfo:
        Grid.parse("12\n3a", int)
    assert excinfo.value.position == (1, 1)
    lookup = {"a": 1, "b": 2}
    with pytest.raises(InvalidTokenError):
        Grid.parse("ab\nbc", lookup.__getitem__)


def test_parse_with_declared_dimensions() -> None:
    grid = Grid.parse("#.\n.#", Bit.from_char, Dimensions(2, 2))
    assert grid.dimensions() == Dimensions(2, 2)
    with pytest.raises(WrongDimensionsError) as excinfo:
        Grid.parse("#.\n.#", Bit.from_char, Dimensions(3, 2))
    assert excinfo.value.expected == Dimensions(3, 2)
    assert excinfo.value.actual == Dimensions(2, 2)
    assert "expected: 3x2" in str(excinfo.value)
    with pytest.raises(WrongDimensionsError):
        Grid.parse("#.\n.", Bit.from_char, Dimensions(2, 2))


def test_parse_ragged_without_dimensions() -> None:
    with pytest.raises(NotRectangularError):
        Grid.parse("##\n#", Bit.from_char)


def test_parse_empty_text() -> None:
    grid = Grid.parse("\n", Bit.from_char)
    assert grid.dimensions() == Dimensions(0, 0)
    assert str(grid) == ""


def test_indexing_and_mutation() -> None:
    grid = Grid.from_rows([[1, 2], [3, 4]])
    assert grid[Point2D(1, 1)] == 4
    with pytest.raises(IndexError):
        grid[2, 0]
    grid[0, 1] = 30
    assert grid.get((0, 1)) == 30
    with pytest.raises(IndexError):
        grid[0, 2] = 1
    assert grid.set(Point2D(5, 5), 1) is False
    assert grid.update((1, 0), lambda value: value * 10)
    assert grid[1, 0] == 20


def test_get_mut_handle() -> None:
    grid = Grid.new(Dimensions(3, 3), 0)
    cell = grid.get_mut((1, 1))
    cell.value = 7
    assert grid[1, 1] == 7
    cell.set(cell.get() + 1)
    assert grid[1, 1] == 8
    assert grid.get_mut((3, 0)) is None


def test_fill_and_equality() -> None:
    grid = Grid.new(Dimensions(2, 2), 1)
    other = grid.copy()
    assert grid == other
    other.fill(0)
    assert grid != other
    assert list(other.iter()) == [0, 0, 0, 0]


def test_sequences_are_restartable_and_sized() -> None:
    grid = Grid.from_rows([[1, 2, 3], [4, 5, 6]])
    values = grid.iter()
    assert len(values) == 6
    assert list(values) == list(values) == [1, 2, 3, 4, 5, 6]
    assert list(grid.rows()) == [(1, 2, 3), (4, 5, 6)]
    assert list(grid.columns()) == [(1, 4), (2, 5), (3, 6)]
    assert len(grid.columns()) == 3
    positions = [point for point, _ in grid.enumerate()]
    assert positions[:4] == [Point2D(0, 0), Point2D(1, 0), Point2D(2, 0), Point2D(0, 1)]


def test_map_and_owned() -> None:
    grid = Grid.from_rows([[1, 2], [3, 4]])
    doubled = grid.map(lambda value: value * 2)
    assert list(doubled.iter()) == [2, 4, 6, 8]
    clone = grid.owned()
    clone[0, 0] = 99
    assert grid[0, 0] == 1


def test_to_array_is_read_only() -> None:
    grid = Grid.from_rows([[1, 2], [3, 4]])
    array = grid.to_array()
    assert array.shape == (2, 2)
    assert array[1, 0] == 3
    with pytest.raises(ValueError):
        array[0, 0] = 5


def test_render_with_custom_glyph() -> None:
    grid = Grid.parse("#.\n.#", Bit.from_char)
    assert grid.render(lambda bit: bit.digit()) == "10\n01"


def test_set_row_and_column() -> None:
    grid = Grid.new(Dimensions(3, 2), 0)
    assert grid.set_row(1, [4, 5, 6])
    assert grid.set_column(0, (value * 10 for value in (1, 2)))
    assert list(grid.rows()) == [(10, 0, 0), (20, 5, 6)]
    assert grid.set_row(2, [1, 2, 3]) is False
    assert grid.set_column(-1, [1, 2]) is False


def test_set_row_rejects_wrong_length() -> None:
    grid = Grid.new(Dimensions(3, 2), 0)
    with pytest.raises(WrongDimensionsError):
        grid.set_row(0, [1, 2])
    with pytest.raises(WrongDimensionsError):
        grid.set_column(0, [1, 2, 3])
    assert list(grid.iter()) == [0] * 6


def test_float_coordinates_are_rejected() -> None:
    grid = Grid.from_iter(Dimensions(2, 2), range(4))
    with pytest.raises(TypeError):
        grid.get((-0.5, 0))
    with pytest.raises(TypeError):
        grid[1.0, 0] = 9
    assert grid.get((np.int64(1), 1)) == 3
