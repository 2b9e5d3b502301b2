"""Entry points exposing the solver to callers."""

from __future__ import annotations

import hashlib
import logging
import time
from typing import Any, Dict, MutableSequence, Sequence

from contracts.errors import make_error, malformed
from contracts.rulebook import check_cells

from . import codec, log
from .board import CELLS, SIZE, find_conflict, is_valid
from .search import SearchStats, solve

_LOGGER = logging.getLogger(__name__)


def _is_read_only(buffer: Sequence[Any]) -> bool:
    if isinstance(buffer, memoryview):
        return buffer.readonly
    return not isinstance(buffer, MutableSequence)


def _ensure_well_formed(buffer: Sequence[Any], *, writable: bool = False) -> None:
    issues = check_cells(buffer, path="$.buffer")
    if writable and _is_read_only(buffer):
        issues.insert(
            0, make_error("invariant.grid.readonly", "buffer cannot be written in place", "$.buffer")
        )
    if issues:
        raise malformed(issues)


def _write_back(buffer: MutableSequence[int], work: bytearray) -> None:
    for idx in range(CELLS):
        buffer[idx] = work[idx]


def _solve_buffer(buffer: MutableSequence[int], stats: SearchStats | None = None) -> int:
    if not is_valid(buffer):
        if _LOGGER.isEnabledFor(logging.DEBUG):
            _LOGGER.debug("grid rejected: %s", find_conflict(buffer).describe())  # type: ignore[union-attr]
        return 0
    work = bytearray(buffer)
    if not solve(work, 0, stats):
        _LOGGER.debug("search exhausted without a solution")
        return 0
    _write_back(buffer, work)
    return 1


def solve_sudoku(buffer: MutableSequence[int]) -> int:
    """Solve the 81-cell row-major ``buffer`` in place.

    Returns ``1`` when the buffer now holds the solution and ``0`` when the
    givens conflict or no completion exists.  In both failure cases the
    buffer is left exactly as it was passed in.

    Raises
    ------
    MalformedGridError
        If ``buffer`` does not hold exactly 81 integers in the range 0..9,
        or cannot be written in place (``bytes``, tuples, read-only
        memoryviews).
    """

    _ensure_well_formed(buffer, writable=True)
    return _solve_buffer(buffer)


def _coerce_puzzle(puzzle: Any) -> bytearray:
    if isinstance(puzzle, str):
        return codec.from_string(puzzle)
    if isinstance(puzzle, (bytes, bytearray, memoryview)):
        grid = bytearray(puzzle)
        _ensure_well_formed(grid)
        return grid
    cells = list(puzzle)
    if len(cells) == SIZE and all(isinstance(row, (list, tuple)) for row in cells):
        return codec.from_rows(cells)
    _ensure_well_formed(cells)
    return bytearray(cells)


def solve_puzzle(puzzle: Any, *, puzzle_id: str | None = None) -> Dict[str, Any]:
    """Solve ``puzzle`` given as a string, a flat sequence or 9x9 rows.

    The caller's object is never mutated.  The result payload carries the
    solved grid string (or the input when unsolved), the first structural
    conflict if the givens were rejected, and search counters.  A solve event
    is appended to the event log when it is enabled.
    """

    grid = _coerce_puzzle(puzzle)
    digest = hashlib.sha256(codec.to_string(grid).encode("utf-8")).hexdigest()
    conflict = find_conflict(grid)
    stats = SearchStats()

    start = time.perf_counter()
    solved = bool(_solve_buffer(grid, stats)) if conflict is None else False
    time_ms = int((time.perf_counter() - start) * 1000)

    result: Dict[str, Any] = {
        "solved": solved,
        "grid": codec.to_string(grid),
        "conflict": conflict.describe() if conflict is not None else None,
        "nodes": stats.nodes,
        "backtracks": stats.backtracks,
        "time_ms": time_ms,
    }
    if puzzle_id is not None:
        result["id"] = puzzle_id

    event = {
        "event": "solve",
        "puzzle_digest": f"sha256-{digest}",
        "solved": solved,
        "rejected": conflict is not None,
        "nodes": stats.nodes,
        "backtracks": stats.backtracks,
        "bt_depth": stats.max_depth,
        "time_ms": time_ms,
    }
    if puzzle_id is not None:
        event["id"] = puzzle_id
    log.append_event(event)
    _LOGGER.debug("solve finished: solved=%s nodes=%d time_ms=%d", solved, stats.nodes, time_ms)
    return result


__all__ = ["solve_puzzle", "solve_sudoku"]
