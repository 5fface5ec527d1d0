"""Shared error and report types for grid validation."""

from __future__ import annotations


from dataclasses import dataclass
from typing import Any, List

SEVERITY_ERROR = "ERROR"
SEVERITY_WARN = "WARN"


class GridError(ValueError):
    """Base class for every error raised while building or querying a grid."""


class InvalidLength(GridError):
    """Raised when a grid is constructed from a sequence that is not 81 long."""

    def __init__(self, length: int) -> None:
        self.length = length
        super().__init__(f"grid must contain exactly 81 values, got {length}")


class InvalidValue(GridError):
    """Raised when a cell value is not an integer in [0, 9]."""

    def __init__(self, index: int, value: Any) -> None:
        self.index = index
        self.value = value
        super().__init__(f"cell {index} must be an integer in [0, 9], got {value!r}")


class IndexOutOfRange(GridError, IndexError):
    """Raised when a cell index falls outside [0, 80]."""

    def __init__(self, index: Any) -> None:
        self.index = index
        super().__init__(f"cell index must be in [0, 80], got {index!r}")


class PayloadError(GridError):
    """Raised when a host payload does not match the grid payload schema."""

    def __init__(self, msg: str, path: str = "$") -> None:
        self.path = path
        super().__init__(f"{path}: {msg}")


@dataclass(frozen=True)
class ValidationIssue:
    """Single finding produced while checking a grid."""

    code: str
    msg: str
    path: str
    severity: str

    def to_payload(self) -> dict:
        return {"code": self.code, "msg": self.msg, "path": self.path, "severity": self.severity}


@dataclass(frozen=True)
class ValidationReport:
    """Aggregate result of checking a grid."""

    ok: bool
    errors: List[ValidationIssue]
    warnings: List[ValidationIssue]


def make_error(code: str, msg: str, path: str) -> ValidationIssue:
    """Construct an error-level :class:`ValidationIssue`."""

    return ValidationIssue(code=code, msg=msg, path=path, severity=SEVERITY_ERROR)


def make_warning(code: str, msg: str, path: str) -> ValidationIssue:
    """Construct a warning-level :class:`ValidationIssue`."""

    return ValidationIssue(code=code, msg=msg, path=path, severity=SEVERITY_WARN)


__all__ = [
    "SEVERITY_ERROR",
    "SEVERITY_WARN",
    "GridError",
    "IndexOutOfRange",
    "InvalidLength",
    "InvalidValue",
    "PayloadError",
    "ValidationIssue",
    "ValidationReport",
    "make_error",
    "make_warning",
]
