"""Runtime settings resolved from config.toml, the environment and CLI flags."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from project_config import get_section

_STYLES = {"boxed", "line"}


@dataclass(frozen=True)
class RuntimeSettings:
    """Finalised settings after precedence resolution."""

    empty_char: str
    style: str
    events_enabled: bool
    events_dir: Path
    events_max_bytes: int
    log_level: str


_DEFAULTS = RuntimeSettings(
    empty_char=".",
    style="boxed",
    events_enabled=False,
    events_dir=Path("logs/solve"),
    events_max_bytes=10 * 1024 * 1024,
    log_level="WARNING",
)

# field -> (config path, env key, cli key)
_KEYS = {
    "empty_char": ("render.empty_char", "SUDOKU_EMPTY_CHAR", "CLI_SUDOKU_EMPTY_CHAR"),
    "style": ("render.style", "SUDOKU_STYLE", "CLI_SUDOKU_STYLE"),
    "events_enabled": ("events.enabled", "SUDOKU_EVENTS_ENABLED", "CLI_SUDOKU_EVENTS_ENABLED"),
    "events_dir": ("events.dir", "SUDOKU_EVENTS_DIR", "CLI_SUDOKU_EVENTS_DIR"),
    "events_max_bytes": ("events.max_bytes", "SUDOKU_EVENTS_MAX_BYTES", "CLI_SUDOKU_EVENTS_MAX_BYTES"),
    "log_level": ("logging.level", "SUDOKU_LOG_LEVEL", "CLI_SUDOKU_LOG_LEVEL"),
}


def _parse_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        normalised = value.strip().lower()
        if normalised in {"1", "true", "yes", "on"}:
            return True
        if normalised in {"0", "false", "no", "off"}:
            return False
    return None


def _parse_int(value: Any) -> Optional[int]:
    try:
        if isinstance(value, bool):
            return None
        if isinstance(value, int):
            return value
        if isinstance(value, str) and value.strip():
            return int(value)
    except (TypeError, ValueError):
        return None
    return None


def _parse_level(value: Any) -> Optional[str]:
    if not isinstance(value, str):
        return None
    level = value.strip().upper()
    if isinstance(logging.getLevelName(level), int):
        return level
    return None


def _config_overrides() -> Dict[str, Any]:
    payload: Dict[str, Any] = {}
    for field, (path, _, _) in _KEYS.items():
        try:
            payload[field] = get_section(path)
        except KeyError:
            continue
    return payload


def _env_overrides(env: Mapping[str, str], index: int) -> Dict[str, Any]:
    payload: Dict[str, Any] = {}
    for field, keys in _KEYS.items():
        key = keys[index]
        if key in env:
            payload[field] = env[key]
    return payload


def _apply_overrides(settings: RuntimeSettings, overrides: Mapping[str, Any]) -> RuntimeSettings:
    changes: Dict[str, Any] = {}

    if "empty_char" in overrides:
        value = overrides["empty_char"]
        if isinstance(value, str) and len(value) == 1 and not value.isspace():
            changes["empty_char"] = value
    if "style" in overrides:
        value = overrides["style"]
        if isinstance(value, str) and value.strip().lower() in _STYLES:
            changes["style"] = value.strip().lower()
    if "events_enabled" in overrides:
        maybe = _parse_bool(overrides["events_enabled"])
        if maybe is not None:
            changes["events_enabled"] = maybe
    if "events_dir" in overrides:
        value = overrides["events_dir"]
        if isinstance(value, (str, Path)) and str(value):
            changes["events_dir"] = Path(value)
    if "events_max_bytes" in overrides:
        maybe_int = _parse_int(overrides["events_max_bytes"])
        if maybe_int is not None and maybe_int > 0:
            changes["events_max_bytes"] = maybe_int
    if "log_level" in overrides:
        maybe_level = _parse_level(overrides["log_level"])
        if maybe_level is not None:
            changes["log_level"] = maybe_level

    return replace(settings, **changes)


def build_env(overrides: Mapping[str, str] | None = None) -> Dict[str, str]:
    """Merge the process environment with optional overrides."""

    env: Dict[str, str] = {str(k): str(v) for k, v in os.environ.items()}
    if overrides:
        env.update({str(k): str(v) for k, v in overrides.items()})
    return env


def resolve_settings(env: Mapping[str, str] | None = None) -> RuntimeSettings:
    """Resolve settings with precedence defaults < config < env < CLI.

    CLI overrides travel in ``env`` under ``CLI_SUDOKU_*`` keys.  Values that
    fail to parse are ignored and the lower layer wins.
    """

    env_map = {str(k).upper(): str(v) for k, v in (env or {}).items()}
    settings = _apply_overrides(_DEFAULTS, _config_overrides())
    settings = _apply_overrides(settings, _env_overrides(env_map, 1))
    settings = _apply_overrides(settings, _env_overrides(env_map, 2))
    return settings


__all__ = ["RuntimeSettings", "build_env", "resolve_settings"]
