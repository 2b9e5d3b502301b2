"""Grid model and structural validation for the classic 9x9 Sudoku."""

from __future__ import annotations

from dataclasses import dataclass
from typing import MutableSequence, Optional, Sequence, Tuple

from contracts.rulebook import BOX, CELLS, EMPTY, SIZE, is_cell_value

DIGITS = range(1, SIZE + 1)

Grid = MutableSequence[int]


@dataclass(frozen=True)
class Conflict:
    """First structural violation found in a grid.

    ``unit`` is one of ``"row"``, ``"column"``, ``"box"``, ``"cell"`` (a value
    outside 0..9) or ``"grid"`` (wrong cell count, ``value`` holds the length).
    ``number`` is the zero-based unit index, boxes being numbered left to
    right, top to bottom.
    """

    unit: str
    number: int
    value: int
    index: int

    def describe(self) -> str:
        if self.unit == "grid":
            return f"Grid has {self.value} cells, expected {CELLS}"
        if self.unit == "cell":
            return f"Cell {self.index}: value {self.value!r} is not a digit 0-9"
        label = {"row": "Row", "column": "Column", "box": "Box"}[self.unit]
        return f"{label} {self.number + 1}: digit {self.value} is duplicated"


def index(row: int, col: int) -> int:
    return row * SIZE + col


def position(idx: int) -> Tuple[int, int]:
    return divmod(idx, SIZE)


def box_origin(row: int, col: int) -> Tuple[int, int]:
    return (row // BOX) * BOX, (col // BOX) * BOX


def find_conflict(grid: Sequence[int]) -> Optional[Conflict]:
    """Return the first duplicate (rows, then columns, then boxes) or ``None``.

    Out-of-range values are reported as ``"cell"`` conflicts before any unit
    is inspected.  The function never mutates ``grid``.
    """

    if len(grid) != CELLS:
        return Conflict(unit="grid", number=0, value=len(grid), index=-1)
    for idx, value in enumerate(grid):
        if not is_cell_value(value):
            return Conflict(unit="cell", number=idx, value=value, index=idx)  # type: ignore[arg-type]

    for i in range(SIZE):
        row_seen = [False] * (SIZE + 1)
        col_seen = [False] * (SIZE + 1)
        for j in range(SIZE):
            rv = grid[index(i, j)]
            cv = grid[index(j, i)]
            if rv != EMPTY:
                if row_seen[rv]:
                    return Conflict(unit="row", number=i, value=rv, index=index(i, j))
                row_seen[rv] = True
            if cv != EMPTY:
                if col_seen[cv]:
                    return Conflict(unit="column", number=i, value=cv, index=index(j, i))
                col_seen[cv] = True

    for br in range(0, SIZE, BOX):
        for bc in range(0, SIZE, BOX):
            box_seen = [False] * (SIZE + 1)
            for r in range(br, br + BOX):
                for c in range(bc, bc + BOX):
                    v = grid[index(r, c)]
                    if v == EMPTY:
                        continue
                    if box_seen[v]:
                        return Conflict(unit="box", number=br + bc // BOX, value=v, index=index(r, c))
                    box_seen[v] = True
    return None


def is_valid(grid: Sequence[int]) -> bool:
    """Check that no fixed digit repeats within a row, column or 3x3 box.

    Total over any input: a grid of the wrong length or holding values
    outside 0..9 is simply reported as invalid.
    """

    return find_conflict(grid) is None


def is_complete(grid: Sequence[int]) -> bool:
    return is_valid(grid) and all(value != EMPTY for value in grid)


__all__ = [
    "BOX",
    "CELLS",
    "Conflict",
    "DIGITS",
    "EMPTY",
    "Grid",
    "SIZE",
    "box_origin",
    "find_conflict",
    "index",
    "is_complete",
    "is_valid",
    "position",
]
