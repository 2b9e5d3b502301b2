"""Aggregation helpers for solve event logs."""

from __future__ import annotations

import json
import math
from collections import Counter
from pathlib import Path
from typing import Iterable, List, Mapping

__all__ = ["aggregate"]


def _load_events(paths: Iterable[Path]) -> Iterable[Mapping[str, object]]:
    for path in paths:
        for line in path.read_text(encoding="utf-8").splitlines():
            if not line.strip():
                continue
            yield json.loads(line)


def _percentile(values: List[int], q: float) -> int:
    if not values:
        return 0
    ordered = sorted(values)
    rank = max(1, math.ceil(q * len(ordered)))
    return ordered[rank - 1]


def aggregate(paths: Iterable[Path]) -> Mapping[str, object]:
    outcomes = Counter()
    times: List[int] = []
    nodes: List[int] = []
    for event in _load_events(paths):
        if event.get("event") != "solve":
            continue
        if event.get("rejected"):
            outcomes["rejected"] += 1
        elif event.get("solved"):
            outcomes["solved"] += 1
        else:
            outcomes["unsolvable"] += 1
        times.append(int(event.get("time_ms", 0)))  # type: ignore[arg-type]
        nodes.append(int(event.get("nodes", 0)))  # type: ignore[arg-type]

    summary = {
        "total_events": sum(outcomes.values()),
        "outcomes": dict(outcomes),
        "time_ms_p50": _percentile(times, 0.5),
        "time_ms_p95": _percentile(times, 0.95),
        "nodes_max": max(nodes, default=0),
    }
    # Canonical form for deterministic snapshots
    summary["canonical"] = json.dumps(summary, sort_keys=True, separators=(",", ":"))
    return summary
