"""Row-major backtracking search over a flat 81-cell grid."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .board import BOX, CELLS, DIGITS, EMPTY, SIZE, Grid, box_origin


@dataclass
class SearchStats:
    """Counters collected while searching.

    ``nodes`` counts tentative assignments, ``backtracks`` counts assignments
    that were undone, and ``max_depth`` is the deepest cursor reached.
    """

    nodes: int = 0
    backtracks: int = 0
    max_depth: int = 0


def is_safe(grid: Grid, row: int, col: int, digit: int) -> bool:
    """Return ``True`` when ``digit`` is absent from the cell's row, column and box."""

    base = row * SIZE
    for j in range(SIZE):
        if grid[base + j] == digit:
            return False
    for i in range(SIZE):
        if grid[i * SIZE + col] == digit:
            return False
    sr, sc = box_origin(row, col)
    for i in range(sr, sr + BOX):
        for j in range(sc, sc + BOX):
            if grid[i * SIZE + j] == digit:
                return False
    return True


def solve(grid: Grid, cursor: int = 0, stats: Optional[SearchStats] = None) -> bool:
    """Fill every empty cell of ``grid`` in place.

    Cells are visited in row-major order starting at ``cursor`` and candidates
    are tried in ascending order, so the first solution found is always the
    same for a given input.  Every assignment is reset when its branch fails,
    which leaves the empty cells untouched if ``False`` is returned.

    The grid must already pass :func:`solver.board.is_valid`; it is not
    re-checked here.
    """

    if stats is not None and cursor > stats.max_depth:
        stats.max_depth = cursor
    if cursor == CELLS:
        return True
    if grid[cursor] != EMPTY:
        return solve(grid, cursor + 1, stats)

    row, col = divmod(cursor, SIZE)
    for digit in DIGITS:
        if not is_safe(grid, row, col, digit):
            continue
        grid[cursor] = digit
        if stats is not None:
            stats.nodes += 1
        if solve(grid, cursor + 1, stats):
            return True
        grid[cursor] = EMPTY
        if stats is not None:
            stats.backtracks += 1
    return False


__all__ = ["SearchStats", "is_safe", "solve"]
