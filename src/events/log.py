"""Solve-event log.

Every ``port_solve`` run can leave one ``solve.completed`` line behind.  Lines
go to ``<base_dir>/<YYYYMMDD>/solve_NN.jsonl``; a file that has reached
``max_bytes`` is left alone and the next free number is used.
"""

from __future__ import annotations

import json
import threading
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

from sudoku.solver import SolveResult

__all__ = ["SOLVE_COMPLETED", "SolveEventLog", "solve_event"]

SOLVE_COMPLETED = "solve.completed"

# One lock for all instances: the port builds a log per call.
_WRITE_LOCK = threading.Lock()


def solve_event(
    result: SolveResult,
    *,
    digest: str,
    givens: int,
    label: Optional[str] = None,
    now: Optional[datetime] = None,
) -> Dict[str, Any]:
    """Build the ``solve.completed`` record for ``result``."""

    stamp = (now or datetime.now(timezone.utc)).isoformat(timespec="milliseconds")
    record: Dict[str, Any] = {
        "event": SOLVE_COMPLETED,
        "ts": stamp,
        "digest": digest,
        "givens": givens,
        "solved": result.solved,
        **result.stats.to_payload(),
    }
    if label is not None:
        record["label"] = label
    return record


@dataclass(frozen=True)
class SolveEventLog:
    """Writer for solve records below ``base_dir``."""

    base_dir: Path
    max_bytes: int = 10 * 1024 * 1024

    def _target(self, day: str) -> Path:
        folder = Path(self.base_dir) / day
        folder.mkdir(parents=True, exist_ok=True)
        number = 0
        while True:
            candidate = folder / f"solve_{number:02d}.jsonl"
            if not candidate.exists() or candidate.stat().st_size < self.max_bytes:
                return candidate
            number += 1

    def write(self, record: Dict[str, Any]) -> Path:
        """Append ``record`` as one JSON line and return the file used."""

        day = str(record["ts"])[:10].replace("-", "")
        line = json.dumps(record, sort_keys=True, ensure_ascii=False)
        with _WRITE_LOCK:
            path = self._target(day)
            with path.open("a", encoding="utf-8") as handle:
                handle.write(line + "\n")
        return path

    def record(
        self,
        result: SolveResult,
        *,
        digest: str,
        givens: int,
        label: Optional[str] = None,
    ) -> Path:
        return self.write(solve_event(result, digest=digest, givens=givens, label=label))
