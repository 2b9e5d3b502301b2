"""Central registry of grid invariants applied to solve requests."""

from __future__ import annotations


from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Sequence

from .errors import ValidationIssue, make_error

# Grid geometry shared with the solver package.
SIZE = 9
BOX = 3
CELLS = SIZE * SIZE
EMPTY = 0

_EMPTY_SYMBOLS = {"0", "."}


@dataclass(frozen=True)
class InvariantRule:
    name: str
    check: Callable[[dict], Iterable[ValidationIssue]]


def is_cell_value(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and EMPTY <= value <= SIZE


def check_cells(cells: Sequence[object], *, path: str = "$.grid") -> List[ValidationIssue]:
    """Shape checks shared by the request validator and the solver boundary."""

    issues: List[ValidationIssue] = []
    if len(cells) != CELLS:
        issues.append(
            make_error(
                "invariant.grid.length",
                f"grid length {len(cells)} does not equal {CELLS}",
                path,
            )
        )
    for idx, value in enumerate(cells):
        if not is_cell_value(value):
            issues.append(
                make_error(
                    "invariant.grid.symbol_out_of_range",
                    f"value {value!r} is not a digit 0-9",
                    f"{path}[{idx}]",
                )
            )
    return issues


def _raw_cells(artifact: dict) -> Optional[List[object]]:
    grid = artifact.get("grid")
    if isinstance(grid, str):
        out: List[object] = []
        for symbol in grid:
            if symbol in _EMPTY_SYMBOLS:
                out.append(EMPTY)
            elif symbol in "123456789":
                out.append(int(symbol))
            else:
                out.append(symbol)
        return out
    if isinstance(grid, list):
        return list(grid)
    return None


def _cells(artifact: dict) -> Optional[List[int]]:
    cells = _raw_cells(artifact)
    if cells is None or check_cells(cells):
        return None
    return cells  # type: ignore[return-value]


def _grid_shape(artifact: dict) -> Iterable[ValidationIssue]:
    cells = _raw_cells(artifact)
    if cells is None:
        return [make_error("type.mismatch", "grid must be a string or an array", "$.grid")]
    return check_cells(cells)


def _duplicates(cells: List[int], units: Iterable[List[int]], kind: str) -> List[ValidationIssue]:
    issues: List[ValidationIssue] = []
    for number, unit in enumerate(units):
        seen: set[int] = set()
        for idx in unit:
            value = cells[idx]
            if value == EMPTY:
                continue
            if value in seen:
                issues.append(
                    make_error(
                        f"invariant.grid.duplicate_{kind}",
                        f"{kind.capitalize()} {number + 1}: digit {value} is duplicated",
                        f"$.grid[{idx}]",
                    )
                )
            seen.add(value)
    return issues


def _row_units() -> List[List[int]]:
    return [[r * SIZE + c for c in range(SIZE)] for r in range(SIZE)]


def _column_units() -> List[List[int]]:
    return [[r * SIZE + c for r in range(SIZE)] for c in range(SIZE)]


def _box_units() -> List[List[int]]:
    units = []
    for br in range(0, SIZE, BOX):
        for bc in range(0, SIZE, BOX):
            units.append([(br + i) * SIZE + bc + j for i in range(BOX) for j in range(BOX)])
    return units


def _grid_rows(artifact: dict) -> Iterable[ValidationIssue]:
    cells = _cells(artifact)
    return [] if cells is None else _duplicates(cells, _row_units(), "row")


def _grid_columns(artifact: dict) -> Iterable[ValidationIssue]:
    cells = _cells(artifact)
    return [] if cells is None else _duplicates(cells, _column_units(), "column")


def _grid_boxes(artifact: dict) -> Iterable[ValidationIssue]:
    cells = _cells(artifact)
    return [] if cells is None else _duplicates(cells, _box_units(), "box")


INVARIANTS: List[InvariantRule] = [
    InvariantRule("grid_shape", _grid_shape),
    InvariantRule("grid_rows", _grid_rows),
    InvariantRule("grid_columns", _grid_columns),
    InvariantRule("grid_boxes", _grid_boxes),
]


def run_invariants(artifact: dict, rules: Optional[Iterable[str]] = None) -> List[ValidationIssue]:
    """Run every enabled invariant over ``artifact`` and collect the issues."""

    enabled = None if rules is None else set(rules)
    issues: List[ValidationIssue] = []
    for rule in INVARIANTS:
        if enabled is not None and rule.name not in enabled:
            continue
        issues.extend(rule.check(artifact))
    return issues


__all__ = [
    "BOX",
    "CELLS",
    "EMPTY",
    "INVARIANTS",
    "InvariantRule",
    "SIZE",
    "check_cells",
    "is_cell_value",
    "run_invariants",
]
