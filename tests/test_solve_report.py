from __future__ import annotations

import json
from pathlib import Path

from tools.reports import solve_report


def _write_events(path: Path, events: list[dict]) -> None:
    lines = [json.dumps(event, sort_keys=True) for event in events]
    path.write_text("\n".join(lines), encoding="utf-8")


def test_aggregate_counts_outcomes(tmp_path):
    events = [
        {"event": "solve", "solved": True, "rejected": False, "time_ms": 4, "nodes": 120},
        {"event": "solve", "solved": True, "rejected": False, "time_ms": 9, "nodes": 800},
        {"event": "solve", "solved": False, "rejected": True, "time_ms": 0, "nodes": 0},
        {"event": "solve", "solved": False, "rejected": False, "time_ms": 1, "nodes": 2},
        {"event": "other"},
    ]
    log_path = tmp_path / "log.jsonl"
    _write_events(log_path, events)

    summary = solve_report.aggregate([log_path])

    assert summary["total_events"] == 4
    assert summary["outcomes"] == {"solved": 2, "rejected": 1, "unsolvable": 1}
    assert summary["time_ms_p50"] == 1
    assert summary["time_ms_p95"] == 9
    assert summary["nodes_max"] == 800

    canonical = json.loads(summary["canonical"])
    assert canonical["outcomes"] == summary["outcomes"]
    assert "canonical" not in canonical


def test_aggregate_of_empty_logs(tmp_path):
    log_path = tmp_path / "empty.jsonl"
    log_path.write_text("\n", encoding="utf-8")
    summary = solve_report.aggregate([log_path])
    assert summary["total_events"] == 0
    assert summary["time_ms_p95"] == 0
    assert summary["nodes_max"] == 0
