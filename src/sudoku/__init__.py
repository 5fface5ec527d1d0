"""Classic 9x9 Sudoku grid and backtracking solver."""

from __future__ import annotations

from .grid import CELL_COUNT, EMPTY, PuzzleGrid, box_of, column_of, peers_of, row_of
from .solver import CellState, SolveResult, SolveStats, solve_grid

__all__ = [
    "CELL_COUNT",
    "EMPTY",
    "CellState",
    "PuzzleGrid",
    "SolveResult",
    "SolveStats",
    "box_of",
    "column_of",
    "peers_of",
    "row_of",
    "solve_grid",
]
