"""Aggregation helpers for solve-event logs."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Iterable, Mapping

from contracts.errors import PayloadError

__all__ = ["aggregate"]


def _load_events(paths: Iterable[Path]) -> Iterable[Mapping[str, object]]:
    for path in paths:
        for number, line in enumerate(path.read_text(encoding="utf-8").splitlines(), start=1):
            if not line.strip():
                continue
            try:
                event = json.loads(line)
            except json.JSONDecodeError as exc:
                raise PayloadError(f"malformed event: {exc.msg}", path=f"{path}:{number}") from exc
            if not isinstance(event, Mapping):
                raise PayloadError("event is not an object", path=f"{path}:{number}")
            yield event


def aggregate(paths: Iterable[Path]) -> Mapping[str, object]:
    total = 0
    solved = 0
    nodes = 0
    slowest_ms = 0
    for event in _load_events(paths):
        if event.get("event") != "solve.completed":
            continue
        total += 1
        if event.get("solved") is True:
            solved += 1
        nodes += int(event.get("nodes", 0))
        slowest_ms = max(slowest_ms, int(event.get("elapsed_ms", 0)))

    summary = {
        "total_events": total,
        "solved": solved,
        "unsolved": total - solved,
        "mean_nodes": round(nodes / total, 2) if total else 0.0,
        "slowest_ms": slowest_ms,
    }
    # Canonical form for deterministic snapshots
    summary["canonical"] = json.dumps(summary, sort_keys=True, separators=(",", ":"))
    return summary
