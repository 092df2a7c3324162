"""Type definitions and result dataclasses for consistent API responses."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ErrorKind(Enum):
    """Error taxonomy reported to the user, each with its fixed message."""

    INVALID_EXPRESSION = "Invalid expression"
    INVALID_IDENTIFIER = "Invalid identifier"
    INVALID_ASSIGNMENT = "Invalid assignment"
    UNKNOWN_VARIABLE = "Unknown variable"

    @property
    def message(self) -> str:
        return self.value


@dataclass
class CalcResult:
    """Outcome of one pipeline stage or one input line.

    Holds either a success value or exactly one error kind. A successful
    assignment is a void success: ``ok=True`` with ``value=None``.
    """

    ok: bool
    value: Any = None
    error: ErrorKind | None = None

    @classmethod
    def success(cls, value: Any = None) -> CalcResult:
        return cls(ok=True, value=value)

    @classmethod
    def failure(cls, error: ErrorKind) -> CalcResult:
        return cls(ok=False, error=error)

    @property
    def message(self) -> str | None:
        """Text to print for this result, or None for a void success."""
        if self.error is not None:
            return self.error.message
        if self.value is None:
            return None
        return str(self.value)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result_dict: dict[str, Any] = {"ok": self.ok}
        if self.value is not None:
            result_dict["result"] = str(self.value)
        if self.error is not None:
            result_dict["error"] = self.error.message
            result_dict["error_code"] = self.error.name
        return result_dict

    def __repr__(self) -> str:
        """Return string representation of the result."""
        if not self.ok:
            return f"CalcResult(ok=False, error={self.error.name if self.error else None})"
        if self.value is None:
            return "CalcResult(ok=True)"
        return f"CalcResult(ok=True, value={self.value!r})"


class ExpressionError(Exception):
    """Raised inside the tokenizer when a token cannot be understood."""

    def __init__(self, message: str, code: str = "INVALID_EXPRESSION"):
        self.message = message
        self.code = code
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message
