"""Backtracking solver for the classic 9x9 Sudoku."""

from __future__ import annotations

from .board import CELLS, EMPTY, Conflict, find_conflict, is_complete, is_valid
from .search import SearchStats, is_safe, solve
from .solver_port import solve_puzzle, solve_sudoku

__all__ = [
    "CELLS",
    "EMPTY",
    "Conflict",
    "SearchStats",
    "find_conflict",
    "is_complete",
    "is_safe",
    "is_valid",
    "solve",
    "solve_puzzle",
    "solve_sudoku",
]
