"""Conflict report for a grid."""

from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

from sudoku.grid import (
    BOX,
    EMPTY,
    SIZE,
    PuzzleGrid,
    box_indices,
    column_indices,
    row_indices,
)

from .errors import ValidationIssue, ValidationReport, make_error, make_warning


def _units() -> Iterable[Tuple[str, str, Iterable[int]]]:
    for row in range(SIZE):
        yield "row", f"row {row}", row_indices(row)
    for column in range(SIZE):
        yield "column", f"column {column}", column_indices(column)
    for box_row in range(BOX):
        for box_column in range(BOX):
            yield "box", f"box ({box_row}, {box_column})", box_indices(box_row, box_column)


def _duplicates(cells: Sequence[int], unit: Iterable[int]) -> List[int]:
    seen: dict[int, int] = {}
    dupes: List[int] = []
    for index in unit:
        value = cells[index]
        if value == EMPTY:
            continue
        if value in seen:
            if seen[value] not in dupes:
                dupes.append(seen[value])
            dupes.append(index)
        else:
            seen[value] = index
    return dupes


def _path(index: int) -> str:
    return f"$.fields[{index}]"


def validate(grid: PuzzleGrid) -> ValidationReport:
    """Check ``grid`` and list every duplicated digit.

    Each cell taking part in a duplicate yields one error per unit it is
    duplicated in.  Empty cells produce a single ``grid.incomplete`` warning.
    """

    cells = grid.get_fields()
    found: List[Tuple[int, ValidationIssue]] = []
    for kind, label, unit in _units():
        for index in _duplicates(cells, unit):
            issue = make_error(
                f"{kind}.duplicate",
                f"digit {cells[index]} repeated in {label}",
                _path(index),
            )
            found.append((index, issue))

    warnings: List[ValidationIssue] = []
    empty = grid.empty_count()
    if empty:
        warnings.append(make_warning("grid.incomplete", f"{empty} empty cells", "$.fields"))

    found.sort(key=lambda item: (item[0], item[1].code))
    errors = [issue for _, issue in found]
    return ValidationReport(ok=not errors, errors=errors, warnings=warnings)


__all__ = ["validate"]
