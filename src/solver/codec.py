"""Adapters between host representations and the flat 81-cell grid."""

from __future__ import annotations

from typing import List, Sequence

from contracts.errors import make_error, malformed
from contracts.rulebook import check_cells

from .board import CELLS, EMPTY, SIZE

_FRAMING = set(" \t\r\n|-+")


def from_string(text: str) -> bytearray:
    """Parse an 81-character puzzle string.

    Digits ``1-9`` are givens, ``0`` and ``.`` are empty cells.  Whitespace
    and the ``|``, ``-``, ``+`` characters produced by :func:`format_grid`
    are ignored.
    """

    cells: List[int] = []
    issues = []
    for position, ch in enumerate(text):
        if ch in _FRAMING:
            continue
        if ch == ".":
            cells.append(EMPTY)
        elif ch in "0123456789":
            cells.append(int(ch))
        else:
            issues.append(
                make_error(
                    "invariant.grid.symbol_out_of_range",
                    f"symbol {ch!r} is not a digit or '.'",
                    f"$.grid[{position}]",
                )
            )
    if len(cells) != CELLS:
        issues.extend(check_cells(cells))
    if issues:
        raise malformed(issues)
    return bytearray(cells)


def to_string(grid: Sequence[int]) -> str:
    return "".join(str(grid[i] or 0) for i in range(CELLS))


def from_rows(rows: Sequence[Sequence[int]]) -> bytearray:
    """Flatten a 9x9 nested sequence in row-major order."""

    if len(rows) != SIZE or any(len(row) != SIZE for row in rows):
        raise malformed([make_error("invariant.grid.shape", "grid must be 9 rows of 9 cells", "$.grid")])
    cells = [value for row in rows for value in row]
    issues = check_cells(cells)
    if issues:
        raise malformed(issues)
    return bytearray(cells)


def to_rows(grid: Sequence[int]) -> List[List[int]]:
    return [[int(grid[r * SIZE + c]) for c in range(SIZE)] for r in range(SIZE)]


def format_grid(grid: Sequence[int]) -> str:
    lines = []
    for r in range(SIZE):
        if r % 3 == 0:
            lines.append("+-------+-------+-------+")
        row = []
        for c in range(SIZE):
            v = grid[r * SIZE + c]
            row.append(str(v) if v != EMPTY else ".")
            if c % 3 == 2:
                row.append("|")
        lines.append("| " + " ".join(row))
    lines.append("+-------+-------+-------+")
    return "\n".join(lines)


__all__ = ["format_grid", "from_rows", "from_string", "to_rows", "to_string"]
