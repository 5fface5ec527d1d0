from __future__ import annotations

import pytest

from contracts.errors import GridError, IndexOutOfRange, InvalidLength, InvalidValue
from sudoku.grid import PuzzleGrid, box_of, column_of, peers_of, row_of

from sample_grids import PUZZLE, SOLUTION


def test_get_fields_round_trips_construction_input() -> None:
    grid = PuzzleGrid(PUZZLE)
    assert grid.get_fields() == PUZZLE


def test_get_fields_returns_a_copy() -> None:
    grid = PuzzleGrid(PUZZLE)
    fields = grid.get_fields()
    fields[0] = 9
    assert grid.get_fields()[0] == PUZZLE[0]


def test_construction_copies_the_input() -> None:
    values = list(PUZZLE)
    grid = PuzzleGrid(values)
    values[2] = 4
    assert grid[2] == 0


@pytest.mark.parametrize("length", [0, 80, 82])
def test_wrong_length_is_rejected(length: int) -> None:
    with pytest.raises(InvalidLength) as excinfo:
        PuzzleGrid([0] * length)
    assert excinfo.value.length == length


@pytest.mark.parametrize("bad", [10, -1, True, 4.5, "5", None])
def test_out_of_range_value_is_rejected(bad) -> None:
    values = [0] * 81
    values[17] = bad
    with pytest.raises(InvalidValue) as excinfo:
        PuzzleGrid(values)
    assert excinfo.value.index == 17
    assert isinstance(excinfo.value, GridError)


def test_integral_floats_are_accepted() -> None:
    values = [0.0] * 81
    values[0] = 5.0
    grid = PuzzleGrid(values)
    assert grid.get_fields()[0] == 5
    assert all(isinstance(v, int) for v in grid.get_fields())


def test_empty_cells_are_always_valid() -> None:
    values = [0] * 81
    values[0] = 5
    values[1] = 5
    grid = PuzzleGrid(values)
    for index in range(2, 81):
        assert grid.check_field_validity(index) is True


def test_row_duplicate_invalidates_both_cells() -> None:
    values = [0] * 81
    values[0] = 5
    values[1] = 5
    grid = PuzzleGrid(values)
    assert grid.check_field_validity(0) is False
    assert grid.check_field_validity(1) is False
    assert grid.check_validity() is False


def test_column_duplicate_is_detected() -> None:
    values = [0] * 81
    values[4] = 7
    values[9 * 8 + 4] = 7
    grid = PuzzleGrid(values)
    assert grid.check_field_validity(4) is False
    assert grid.check_field_validity(76) is False


def test_box_duplicate_is_detected() -> None:
    values = [0] * 81
    values[9 * 3 + 3] = 2
    values[9 * 5 + 5] = 2
    grid = PuzzleGrid(values)
    assert grid.check_field_validity(30) is False
    assert grid.check_field_validity(50) is False


def test_lone_digit_does_not_conflict_with_itself() -> None:
    values = [0] * 81
    values[40] = 9
    assert PuzzleGrid(values).check_field_validity(40) is True


def test_all_empty_grid_is_valid() -> None:
    assert PuzzleGrid.empty().check_validity() is True


def test_published_puzzle_and_solution_are_valid() -> None:
    assert PuzzleGrid(PUZZLE).check_validity() is True
    solved = PuzzleGrid(SOLUTION)
    assert solved.check_validity() is True
    assert solved.is_complete() is True


@pytest.mark.parametrize("index", [-1, 81, 200, True, 1.0])
def test_cell_index_out_of_range(index) -> None:
    grid = PuzzleGrid.empty()
    with pytest.raises(IndexOutOfRange):
        grid.check_field_validity(index)


def test_out_of_range_getitem_raises_index_error() -> None:
    with pytest.raises(IndexError):
        PuzzleGrid.empty()[81]


def test_index_helpers() -> None:
    assert (row_of(40), column_of(40), box_of(40)) == (4, 4, (1, 1))
    assert (row_of(80), column_of(80), box_of(80)) == (8, 8, (2, 2))
    assert box_of(29) == (1, 0)


def test_peers_cover_row_column_and_box() -> None:
    peers = set(peers_of(0))
    assert 0 not in peers
    assert len(peers) == 20
    assert {1, 8, 9, 72, 10, 20} <= peers


def test_equality_and_copy() -> None:
    grid = PuzzleGrid(PUZZLE)
    clone = grid.copy()
    assert clone == grid
    assert clone is not grid
    assert PuzzleGrid(SOLUTION) != grid
