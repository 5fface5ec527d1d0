"""Append-only JSONL record of solve runs."""

from __future__ import annotations

from .log import SOLVE_COMPLETED, SolveEventLog, solve_event

__all__ = ["SOLVE_COMPLETED", "SolveEventLog", "solve_event"]
