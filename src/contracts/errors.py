"""Shared error types for grid and request validation."""

from __future__ import annotations


from dataclasses import dataclass, field
from typing import Dict, List

SEVERITY_ERROR = "ERROR"


@dataclass(frozen=True)
class ValidationIssue:
    """Single validation finding produced by a rule or schema check."""

    code: str
    msg: str
    path: str
    severity: str

    def to_dict(self) -> Dict[str, str]:
        return {"code": self.code, "msg": self.msg, "path": self.path, "severity": self.severity}


@dataclass(frozen=True)
class ValidationReport:
    """Aggregate result of validating a solve request or grid."""

    ok: bool
    errors: List[ValidationIssue]
    timings_ms: dict[str, int] = field(default_factory=dict)


class ManagedValidationError(ValueError):
    """Raised when validation fails; carries the full :class:`ValidationReport`."""

    def __init__(self, message: str, report: ValidationReport) -> None:
        super().__init__(message)
        self.report = report


class MalformedGridError(ManagedValidationError):
    """The input is not an 81-cell grid of values 0..9.

    Distinct from the ordinary "no solution" outcome, which is reported
    through return values and never raised.
    """


def make_error(code: str, msg: str, path: str) -> ValidationIssue:
    """Construct an error-level :class:`ValidationIssue`."""

    return ValidationIssue(code=code, msg=msg, path=path, severity=SEVERITY_ERROR)


def malformed(issues: List[ValidationIssue]) -> MalformedGridError:
    codes = ", ".join(issue.code for issue in issues[:5])
    if len(issues) > 5:
        codes += ", …"
    report = ValidationReport(ok=False, errors=list(issues))
    return MalformedGridError(f"Malformed grid: {codes}", report)


__all__ = [
    "SEVERITY_ERROR",
    "MalformedGridError",
    "ManagedValidationError",
    "ValidationIssue",
    "ValidationReport",
    "make_error",
    "malformed",
]
