"""JSON Schema validation for grid payloads handed over by a host."""

from __future__ import annotations

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, List

import jsonschema
from jsonschema.exceptions import best_match

from .errors import InvalidLength, InvalidValue, PayloadError

_SCHEMA_ROOT = Path(__file__).resolve().parent / "schemas"
GRID_PAYLOAD_SCHEMA = "grid_payload.schema.json"


@lru_cache(maxsize=None)
def load_schema(schema_path: str = GRID_PAYLOAD_SCHEMA) -> Dict[str, Any]:
    """Load a schema relative to the bundled ``schemas`` directory."""

    resolved = (_SCHEMA_ROOT / schema_path).resolve()
    try:
        return json.loads(resolved.read_text("utf-8"))
    except FileNotFoundError as exc:  # pragma: no cover - defensive
        raise PayloadError(f"schema {schema_path!r} not found") from exc


@lru_cache(maxsize=None)
def _validator(schema_path: str) -> jsonschema.protocols.Validator:
    schema = load_schema(schema_path)
    Validator = jsonschema.validators.validator_for(schema)
    Validator.check_schema(schema)
    return Validator(schema)


def _jsonschema_path(exc: jsonschema.ValidationError) -> str:
    path = getattr(exc, "absolute_path", [])
    components: List[str] = ["$"]
    for part in path:
        if isinstance(part, int):
            components.append(f"[{part}]")
        else:
            components.append(f".{part}")
    return "".join(components)


def _field_index(exc: jsonschema.ValidationError) -> int | None:
    path = list(exc.absolute_path)
    if len(path) == 2 and path[0] == "fields" and isinstance(path[1], int):
        return path[1]
    return None


def validate_payload(payload: Any, *, schema_path: str = GRID_PAYLOAD_SCHEMA) -> Dict[str, Any]:
    """Validate ``payload`` against the grid payload schema.

    Length failures on ``fields`` raise :class:`InvalidLength` and per-cell
    failures raise :class:`InvalidValue` for the lowest offending index, so a
    host sees the same errors as a direct :class:`~sudoku.grid.PuzzleGrid`
    caller.  Anything else raises :class:`PayloadError`.
    """

    errors = list(_validator(schema_path).iter_errors(payload))
    if not errors:
        return payload

    for exc in errors:
        if exc.validator in ("minItems", "maxItems") and list(exc.absolute_path) == ["fields"]:
            raise InvalidLength(len(exc.instance))

    cell_errors = [exc for exc in errors if _field_index(exc) is not None]
    if cell_errors:
        first = min(cell_errors, key=_field_index)
        raise InvalidValue(_field_index(first), first.instance)

    exc = best_match(errors)
    raise PayloadError(exc.message, _jsonschema_path(exc))


__all__ = ["GRID_PAYLOAD_SCHEMA", "load_schema", "validate_payload"]
