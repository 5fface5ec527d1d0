"""Host-facing facade over :class:`~sudoku.grid.PuzzleGrid`.

A host (CLI, web binding, another service) hands over raw values or a JSON
payload and gets grids or plain payload dicts back.  Raw input is checked
against the grid payload schema before a grid is built.
"""

from __future__ import annotations

import hashlib
import logging
from typing import Any, Dict, Iterable, List, Mapping

import events
from contracts.schema_validator import validate_payload
from contracts.validator import validate
from settings import RuntimeSettings, build_env, resolve_settings
from sudoku.grid import PuzzleGrid
from sudoku.solver import SolveResult, solve_grid

from .text_format import to_line

_LOGGER = logging.getLogger(__name__)


def construct(values: Iterable[Any]) -> PuzzleGrid:
    """Build a grid from 81 raw values after schema validation."""

    fields = list(values)
    validate_payload({"fields": fields})
    grid = PuzzleGrid(fields)
    _LOGGER.debug("constructed grid with %d empty cells", grid.empty_count())
    return grid


def get_fields(grid: PuzzleGrid) -> List[int]:
    return grid.get_fields()


def check_validity(grid: PuzzleGrid) -> bool:
    return grid.check_validity()


def solve(grid: PuzzleGrid) -> PuzzleGrid:
    return grid.solve()


def grid_digest(fields: Iterable[int]) -> str:
    digest = hashlib.sha256(to_line(fields).encode("ascii")).hexdigest()
    return f"sha256-{digest}"


def _grid_from_payload(payload: Mapping[str, Any]) -> PuzzleGrid:
    if isinstance(payload, Mapping):
        body = dict(payload)
        if isinstance(body.get("fields"), tuple):
            body["fields"] = list(body["fields"])
    else:
        body = payload
    validate_payload(body)
    return PuzzleGrid(body["fields"])


def _record(
    result: SolveResult,
    grid: PuzzleGrid,
    digest: str,
    label: Any,
    settings: RuntimeSettings,
) -> None:
    log = events.SolveEventLog(settings.events_dir, max_bytes=settings.events_max_bytes)
    path = log.record(
        result,
        digest=digest,
        givens=len(grid) - grid.empty_count(),
        label=label,
    )
    _LOGGER.debug("recorded %s for %s in %s", events.SOLVE_COMPLETED, digest, path)


def port_solve(
    payload: Mapping[str, Any],
    *,
    env: Mapping[str, str] | None = None,
) -> Dict[str, Any]:
    """Solve the grid described by ``payload`` and return a result payload."""

    settings = resolve_settings(build_env(env))
    grid = _grid_from_payload(payload)
    result: SolveResult = solve_grid(grid)
    fields = result.grid.get_fields()
    digest = grid_digest(grid.get_fields())

    _LOGGER.debug(
        "solve %s: solved=%s nodes=%d backtracks=%d",
        digest,
        result.solved,
        result.stats.nodes,
        result.stats.backtracks,
    )

    response = {
        "fields": fields,
        "solved": result.solved,
        "valid": result.grid.check_validity(),
        "complete": result.grid.is_complete(),
        "stats": result.stats.to_payload(),
        "digest": digest,
    }

    if settings.events_enabled:
        _record(result, grid, digest, payload.get("label"), settings)

    return response


def port_check(payload: Mapping[str, Any]) -> Dict[str, Any]:
    """Return the conflict report for the grid described by ``payload``."""

    grid = _grid_from_payload(payload)
    report = validate(grid)
    return {
        "valid": report.ok,
        "complete": grid.is_complete(),
        "issues": [issue.to_payload() for issue in report.errors + report.warnings],
    }


__all__ = [
    "check_validity",
    "construct",
    "get_fields",
    "grid_digest",
    "port_check",
    "port_solve",
    "solve",
]
