"""Public facade for validating solve requests."""

from __future__ import annotations

import time
from typing import Any, Dict, Iterable, List, Optional

from . import loader, rulebook
from .errors import (
    ManagedValidationError,
    ValidationIssue,
    ValidationReport,
    make_error,
)

SOLVE_REQUEST_SCHEMA = "solve_request.schema.json"


def _jsonschema_path(exc: Exception) -> str:
    path = getattr(exc, "absolute_path", [])
    if not path:
        return "$"
    components: List[str] = ["$"]
    for part in path:
        if isinstance(part, int):
            components.append(f"[{part}]")
        else:
            components.append(f".{part}")
    return "".join(components)


def _schema_stage(payload: Any) -> List[ValidationIssue]:
    if not isinstance(payload, dict):
        return [make_error("type.mismatch", "Request must be a JSON object", "$")]
    validator = loader.compile_schema(SOLVE_REQUEST_SCHEMA)
    issues: List[ValidationIssue] = []
    for exc in sorted(validator.iter_errors(payload), key=lambda e: list(e.absolute_path)):
        issues.append(make_error("schema.violation", exc.message, _jsonschema_path(exc)))
    return issues


def validate(
    payload: Dict[str, Any],
    *,
    check_schema: bool = True,
    rules: Optional[Iterable[str]] = None,
) -> ValidationReport:
    """Validate a solve request against the schema and the grid invariants.

    Invariants run even when the schema stage fails so that duplicate digits
    are reported alongside shape problems.
    """

    timings = {"schema": 0, "invariants": 0}
    errors: List[ValidationIssue] = []

    if check_schema:
        schema_start = time.perf_counter()
        errors.extend(_schema_stage(payload))
        timings["schema"] = int((time.perf_counter() - schema_start) * 1000)

    if isinstance(payload, dict):
        invariants_start = time.perf_counter()
        errors.extend(rulebook.run_invariants(payload, rules))
        timings["invariants"] = int((time.perf_counter() - invariants_start) * 1000)

    return ValidationReport(ok=not errors, errors=errors, timings_ms=timings)


def assert_valid(payload: Dict[str, Any], **kwargs: Any) -> None:
    report = validate(payload, **kwargs)
    if report.ok:
        return
    codes = ", ".join(issue.code for issue in report.errors[:5])
    if len(report.errors) > 5:
        codes += ", …"
    raise ManagedValidationError(f"Validation failed for SolveRequest: {codes}", report)


__all__ = [
    "ManagedValidationError",
    "SOLVE_REQUEST_SCHEMA",
    "assert_valid",
    "validate",
]
