"""Validation contracts for Sudoku solve requests."""

from __future__ import annotations

from .errors import MalformedGridError, ManagedValidationError, ValidationIssue, ValidationReport
from .validator import assert_valid, validate

__all__ = [
    "MalformedGridError",
    "ManagedValidationError",
    "ValidationIssue",
    "ValidationReport",
    "assert_valid",
    "validate",
]
