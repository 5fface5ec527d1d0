"""Grid error taxonomy and host payload validation.

The conflict report lives in :mod:`contracts.validator`; it depends on
:mod:`sudoku.grid` and is not imported here.
"""

from __future__ import annotations

from .errors import (
    GridError,
    IndexOutOfRange,
    InvalidLength,
    InvalidValue,
    PayloadError,
    ValidationIssue,
    ValidationReport,
)
from .schema_validator import validate_payload

__all__ = [
    "GridError",
    "IndexOutOfRange",
    "InvalidLength",
    "InvalidValue",
    "PayloadError",
    "ValidationIssue",
    "ValidationReport",
    "validate_payload",
]
