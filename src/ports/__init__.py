"""Host-facing port facades."""

from __future__ import annotations

from .grid_port import check_validity, construct, get_fields, port_check, port_solve, solve

__all__ = [
    "check_validity",
    "construct",
    "get_fields",
    "port_check",
    "port_solve",
    "solve",
]
