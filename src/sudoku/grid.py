"""Fixed-size 9x9 grid with row/column/box uniqueness checks.

Cells are stored as a flat row-major list of 81 ints.  ``0`` marks an empty
cell and ``1``-``9`` a placed digit.  Rows, columns and boxes are never stored;
they are derived from the linear index by the helpers below.
"""

from __future__ import annotations

from numbers import Integral, Real
from typing import Any, Iterable, Iterator, List, Sequence, Tuple

from contracts.errors import IndexOutOfRange, InvalidLength, InvalidValue

SIZE = 9
BOX = 3
CELL_COUNT = SIZE * SIZE
EMPTY = 0
DIGITS = range(1, SIZE + 1)

__all__ = [
    "BOX",
    "CELL_COUNT",
    "DIGITS",
    "EMPTY",
    "SIZE",
    "PuzzleGrid",
    "box_of",
    "box_indices",
    "column_of",
    "column_indices",
    "coerce_cell",
    "peers_of",
    "row_of",
    "row_indices",
]


def row_of(index: int) -> int:
    return index // SIZE


def column_of(index: int) -> int:
    return index % SIZE


def box_of(index: int) -> Tuple[int, int]:
    """Return ``(box_row, box_column)`` of the 3x3 box holding ``index``."""

    return row_of(index) // BOX, column_of(index) // BOX


def row_indices(row: int) -> range:
    return range(SIZE * row, SIZE * row + SIZE)


def column_indices(column: int) -> range:
    return range(column, CELL_COUNT, SIZE)


def box_indices(box_row: int, box_column: int) -> Iterator[int]:
    origin = SIZE * BOX * box_row + BOX * box_column
    for row in range(BOX):
        for column in range(BOX):
            yield origin + SIZE * row + column


def peers_of(index: int) -> Iterator[int]:
    """Yield every index sharing a row, column or box with ``index``.

    Indices may repeat across the three units; ``index`` itself is skipped.
    """

    for unit in (
        row_indices(row_of(index)),
        column_indices(column_of(index)),
        box_indices(*box_of(index)),
    ):
        for other in unit:
            if other != index:
                yield other


def coerce_cell(index: int, value: Any) -> int:
    """Return ``value`` as a cell int or raise :class:`InvalidValue`.

    Integral floats (``5.0``) are accepted since JSON and JavaScript hosts do
    not distinguish them from ints.  Booleans are rejected.
    """

    if isinstance(value, bool):
        raise InvalidValue(index, value)
    if isinstance(value, Integral):
        number = int(value)
    elif isinstance(value, Real) and float(value).is_integer():
        number = int(value)
    else:
        raise InvalidValue(index, value)
    if not EMPTY <= number <= SIZE:
        raise InvalidValue(index, value)
    return number


def _check_index(index: Any) -> int:
    if isinstance(index, bool) or not isinstance(index, Integral):
        raise IndexOutOfRange(index)
    if not 0 <= index < CELL_COUNT:
        raise IndexOutOfRange(index)
    return int(index)


class PuzzleGrid:
    """In-memory 9x9 puzzle state.

    The constructor validates length and per-cell range; after that the grid is
    never mutated through its public surface.  :meth:`solve` works on a private
    copy and returns a new instance.
    """

    __slots__ = ("_cells",)

    def __init__(self, values: Iterable[Any]) -> None:
        values = list(values)
        if len(values) != CELL_COUNT:
            raise InvalidLength(len(values))
        self._cells: List[int] = [coerce_cell(i, value) for i, value in enumerate(values)]

    @classmethod
    def empty(cls) -> "PuzzleGrid":
        return cls([EMPTY] * CELL_COUNT)

    @property
    def cells(self) -> Tuple[int, ...]:
        return tuple(self._cells)

    def get_fields(self) -> List[int]:
        """Return a copy of the 81 cell values in row-major order."""

        return list(self._cells)

    def copy(self) -> "PuzzleGrid":
        clone = PuzzleGrid.__new__(PuzzleGrid)
        clone._cells = list(self._cells)
        return clone

    def __getitem__(self, index: int) -> int:
        return self._cells[_check_index(index)]

    def __len__(self) -> int:
        return CELL_COUNT

    def __iter__(self) -> Iterator[int]:
        return iter(list(self._cells))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PuzzleGrid):
            return NotImplemented
        return self._cells == other._cells

    def __hash__(self) -> int:
        return hash(tuple(self._cells))

    def __repr__(self) -> str:
        return f"PuzzleGrid({''.join(str(v) for v in self._cells)!r})"

    def is_complete(self) -> bool:
        """Return ``True`` when no cell is empty."""

        return EMPTY not in self._cells

    def empty_count(self) -> int:
        return self._cells.count(EMPTY)

    def check_field_validity(self, index: int) -> bool:
        """Return ``True`` when the digit at ``index`` has no duplicate peer.

        Empty cells are always valid.  Raises :class:`IndexOutOfRange` for an
        index outside ``[0, 80]``.
        """

        index = _check_index(index)
        return _cell_is_valid(self._cells, index)

    def check_validity(self) -> bool:
        """Return ``True`` when no row, column or box repeats a digit.

        Empty cells are ignored, so a partially filled grid can be valid.
        """

        return all(_cell_is_valid(self._cells, index) for index in range(CELL_COUNT))

    def solve(self) -> "PuzzleGrid":
        """Return a solved copy of this grid.

        The copy is left equal to the input when no solution exists; use
        :func:`sudoku.solver.solve_grid` for an explicit success flag.
        """

        from .solver import solve_grid

        return solve_grid(self).grid


def _cell_is_valid(cells: Sequence[int], index: int) -> bool:
    value = cells[index]
    if value == EMPTY:
        return True
    for other in peers_of(index):
        if cells[other] == value:
            return False
    return True
