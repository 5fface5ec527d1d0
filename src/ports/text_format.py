"""Plain-text grid input and output."""

from __future__ import annotations

from typing import List, Sequence

from contracts.errors import InvalidLength, InvalidValue
from sudoku.grid import BOX, CELL_COUNT, EMPTY, SIZE

__all__ = ["EMPTY_MARKS", "parse_grid", "render", "to_line"]

EMPTY_MARKS = frozenset("0._")
_IGNORED = frozenset("|+-")


def parse_grid(text: str) -> List[int]:
    """Parse 81 cells from ``text``.

    Whitespace and the ``|+-`` drawing characters are ignored, so both the
    81-character line and the output of :func:`render` read back.  Digits 1-9
    are givens and ``0``, ``.`` or ``_`` mark empty cells.
    """

    cells: List[int] = []
    for ch in text:
        if ch.isspace() or ch in _IGNORED:
            continue
        if ch in EMPTY_MARKS:
            cells.append(EMPTY)
        elif "1" <= ch <= "9":
            cells.append(int(ch))
        else:
            raise InvalidValue(len(cells), ch)
    if len(cells) != CELL_COUNT:
        raise InvalidLength(len(cells))
    return cells


def to_line(fields: Sequence[int]) -> str:
    return "".join(str(value) for value in fields)


def render(fields: Sequence[int], empty_char: str = ".") -> str:
    separator = "+-------+-------+-------+"
    lines = []
    for row in range(SIZE):
        if row % BOX == 0:
            lines.append(separator)
        chunks = []
        for box in range(BOX):
            start = row * SIZE + box * BOX
            chunk = fields[start:start + BOX]
            chunks.append(" ".join(str(v) if v != EMPTY else empty_char for v in chunk))
        lines.append("| " + " | ".join(chunks) + " |")
    lines.append(separator)
    return "\n".join(lines)
