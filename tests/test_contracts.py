from __future__ import annotations

import pytest

from contracts import validator
from contracts.errors import ManagedValidationError
from contracts.rulebook import check_cells, run_invariants

from _grids import CLASSIC, SOLVED, cells


def _codes(report) -> list[str]:
    return [issue.code for issue in report.errors]


def test_valid_string_and_array_requests_pass() -> None:
    assert validator.validate({"grid": CLASSIC}).ok
    assert validator.validate({"grid": CLASSIC.replace("0", "."), "id": "wiki"}).ok
    assert validator.validate({"grid": list(cells(SOLVED))}).ok


def test_schema_rejects_unknown_fields_and_bad_types() -> None:
    report = validator.validate({"grid": CLASSIC, "extra": 1})
    assert "schema.violation" in _codes(report)

    report = validator.validate({"grid": 42})
    assert "schema.violation" in _codes(report)
    assert "type.mismatch" in _codes(report)

    report = validator.validate(["not", "an", "object"])  # type: ignore[arg-type]
    assert _codes(report) == ["type.mismatch"]


def test_array_cell_out_of_range_has_indexed_paths() -> None:
    grid = list(cells(CLASSIC))
    grid[5] = 12
    report = validator.validate({"grid": grid})
    assert not report.ok
    paths = {issue.path for issue in report.errors}
    assert "$.grid[5]" in paths


def test_duplicates_are_reported_per_unit() -> None:
    grid = "11" + "0" * 79
    report = validator.validate({"grid": grid})
    codes = _codes(report)
    assert "invariant.grid.duplicate_row" in codes
    assert "invariant.grid.duplicate_box" in codes
    assert "invariant.grid.duplicate_column" not in codes
    row_issue = next(i for i in report.errors if i.code == "invariant.grid.duplicate_row")
    assert row_issue.msg == "Row 1: digit 1 is duplicated"
    assert row_issue.path == "$.grid[1]"


def test_invariants_can_be_selected() -> None:
    issues = run_invariants({"grid": "11" + "0" * 79}, rules=["grid_columns"])
    assert issues == []


def test_check_cells_reports_length_and_values() -> None:
    issues = check_cells([0] * 80 + [10])
    assert [issue.code for issue in issues] == ["invariant.grid.symbol_out_of_range"]
    issues = check_cells([0] * 3)
    assert [issue.code for issue in issues] == ["invariant.grid.length"]


def test_assert_valid_raises_with_report() -> None:
    validator.assert_valid({"grid": CLASSIC})
    with pytest.raises(ManagedValidationError) as excinfo:
        validator.assert_valid({"grid": "11" + "0" * 79})
    assert "invariant.grid.duplicate_row" in str(excinfo.value)
    assert excinfo.value.report.ok is False
