"""Naive depth-first backtracking solver for :class:`PuzzleGrid`.

Cells are visited in row-major order.  A filled cell is skipped, an empty cell
tries digits 1-9 in ascending order and recurses after every placement that
keeps the cell valid.  When all digits fail the cell is reset to empty before
failure is reported one level up.  The first complete assignment wins.
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from enum import Enum
from typing import List

from .grid import CELL_COUNT, DIGITS, EMPTY, PuzzleGrid, _cell_is_valid


class CellState(str, Enum):
    """Per-cell step of the search."""

    SKIP = "SKIP"
    TRY = "TRY"


@dataclass
class SolveStats:
    """Counters collected during one search."""

    nodes: int = 0
    backtracks: int = 0
    elapsed_ms: int = 0

    def to_payload(self) -> dict:
        return {"nodes": self.nodes, "backtracks": self.backtracks, "elapsed_ms": self.elapsed_ms}


@dataclass(frozen=True)
class SolveResult:
    """Outcome of :func:`solve_grid`.

    ``solved`` is ``False`` when the input already breaks the uniqueness rule
    or when no assignment of the empty cells satisfies it.  ``grid`` is then
    equal to the input.
    """

    grid: PuzzleGrid
    solved: bool
    stats: SolveStats


def cell_state(cells: List[int], index: int) -> CellState:
    return CellState.SKIP if cells[index] != EMPTY else CellState.TRY


def _search(cells: List[int], index: int, stats: SolveStats) -> bool:
    if index >= CELL_COUNT:
        return True

    if cell_state(cells, index) is CellState.SKIP:
        return _search(cells, index + 1, stats)

    for digit in DIGITS:
        cells[index] = digit
        stats.nodes += 1
        if _cell_is_valid(cells, index) and _search(cells, index + 1, stats):
            return True

    # exhausted: undo before reporting up
    cells[index] = EMPTY
    stats.backtracks += 1
    return False


def solve_grid(grid: PuzzleGrid) -> SolveResult:
    """Solve a copy of ``grid`` and report whether a solution was found."""

    stats = SolveStats()
    if not grid.check_validity():
        return SolveResult(grid=grid.copy(), solved=False, stats=stats)

    started = time.perf_counter()
    cells = grid.get_fields()
    solved = _search(cells, 0, stats)
    stats.elapsed_ms = int((time.perf_counter() - started) * 1000)
    return SolveResult(grid=PuzzleGrid(cells), solved=solved, stats=stats)


__all__ = ["CellState", "SolveResult", "SolveStats", "cell_state", "solve_grid"]
