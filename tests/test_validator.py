from __future__ import annotations

from contracts.validator import validate
from sudoku.grid import PuzzleGrid

from sample_grids import PUZZLE, SOLUTION


def test_solution_has_no_issues() -> None:
    report = validate(PuzzleGrid(SOLUTION))
    assert report.ok is True
    assert report.errors == []
    assert report.warnings == []


def test_partial_grid_warns_about_empty_cells() -> None:
    report = validate(PuzzleGrid(PUZZLE))
    assert report.ok is True
    assert [w.code for w in report.warnings] == ["grid.incomplete"]
    assert report.warnings[0].msg == "51 empty cells"


def test_row_and_box_duplicates_are_reported_per_cell() -> None:
    values = [0] * 81
    values[0] = 5
    values[1] = 5
    report = validate(PuzzleGrid(values))
    assert report.ok is False
    found = [(issue.path, issue.code) for issue in report.errors]
    assert found == [
        ("$.fields[0]", "box.duplicate"),
        ("$.fields[0]", "row.duplicate"),
        ("$.fields[1]", "box.duplicate"),
        ("$.fields[1]", "row.duplicate"),
    ]
    assert all(issue.severity == "ERROR" for issue in report.errors)


def test_errors_are_ordered_by_cell_index() -> None:
    values = [0] * 81
    values[2] = 3
    values[9 * 7 + 2] = 3
    report = validate(PuzzleGrid(values))
    assert [issue.path for issue in report.errors] == ["$.fields[2]", "$.fields[65]"]
    assert {issue.code for issue in report.errors} == {"column.duplicate"}
    assert "column 2" in report.errors[0].msg
