from __future__ import annotations

from sudoku.grid import PuzzleGrid, box_indices
from sudoku.solver import CellState, cell_state, solve_grid

from sample_grids import PUZZLE, SOLUTION, dead_end


def test_published_puzzle_is_solved() -> None:
    solved = PuzzleGrid(PUZZLE).solve()
    assert solved.get_fields() == SOLUTION
    assert solved.is_complete()
    assert solved.check_validity()


def test_givens_are_kept() -> None:
    solved = PuzzleGrid(PUZZLE).solve().get_fields()
    for index, value in enumerate(PUZZLE):
        if value:
            assert solved[index] == value


def test_solve_leaves_source_untouched() -> None:
    grid = PuzzleGrid(PUZZLE)
    result = grid.solve()
    assert grid.get_fields() == PUZZLE
    assert result is not grid


def test_solving_a_solved_grid_is_a_no_op() -> None:
    result = solve_grid(PuzzleGrid(SOLUTION))
    assert result.solved is True
    assert result.grid.get_fields() == SOLUTION
    assert result.stats.nodes == 0


def test_empty_grid_gets_filled() -> None:
    result = solve_grid(PuzzleGrid.empty())
    assert result.solved is True
    assert result.grid.is_complete()
    assert result.grid.check_validity()
    assert result.grid.get_fields()[:9] == list(range(1, 10))


def test_blanked_box_never_repeats_a_digit() -> None:
    fields = list(SOLUTION)
    for index in box_indices(1, 1):
        fields[index] = 0
    result = solve_grid(PuzzleGrid(fields))
    assert result.solved is True
    box = [result.grid[index] for index in box_indices(1, 1)]
    assert sorted(box) == list(range(1, 10))


def test_dead_end_reports_failure_and_restores_cells() -> None:
    fields = dead_end()
    grid = PuzzleGrid(fields)
    assert grid.check_validity() is True

    result = solve_grid(grid)
    assert result.solved is False
    assert result.grid.get_fields() == fields
    assert result.stats.nodes == 9
    assert result.stats.backtracks == 1
    assert grid.solve().is_complete() is False


def test_full_grid_with_duplicate_is_not_reported_solved() -> None:
    fields = list(SOLUTION)
    fields[1] = fields[0]
    result = solve_grid(PuzzleGrid(fields))
    assert result.solved is False
    assert result.grid.check_validity() is False


def test_duplicate_givens_are_not_filled_into_a_false_solution() -> None:
    fields = list(PUZZLE)
    fields[2] = 5  # row 0 already holds a 5 at index 0
    grid = PuzzleGrid(fields)
    result = solve_grid(grid)
    assert result.solved is False
    assert result.grid == grid
    assert not (result.grid.is_complete() and result.grid.check_validity())


def test_stats_count_placements() -> None:
    result = solve_grid(PuzzleGrid(PUZZLE))
    assert result.stats.nodes >= PuzzleGrid(PUZZLE).empty_count()
    assert result.stats.elapsed_ms >= 0
    assert set(result.stats.to_payload()) == {"nodes", "backtracks", "elapsed_ms"}


def test_cell_state() -> None:
    cells = list(PUZZLE)
    assert cell_state(cells, 0) is CellState.SKIP
    assert cell_state(cells, 2) is CellState.TRY


def test_cell_states_are_skip_and_try_only() -> None:
    assert {state.value for state in CellState} == {"SKIP", "TRY"}


def test_rejected_input_has_zero_stats() -> None:
    fields = list(PUZZLE)
    fields[2] = 5
    result = solve_grid(PuzzleGrid(fields))
    assert result.stats.to_payload() == {"nodes": 0, "backtracks": 0, "elapsed_ms": 0}
