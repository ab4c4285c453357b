"""OpResult and OpError: the return contract of every validating operation.

INVARIANT: exactly one of success / error is populated. A failed result
carries an ``OpError`` and no value; a successful one carries no error.
The CLI and any other front end consume this type.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, Field, model_validator


class ErrorKind(StrEnum):
    """Why a validating operation refused its input."""

    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    INVALID_RANGE = "INVALID_RANGE"
    TOO_SHORT = "TOO_SHORT"
    TOO_LONG = "TOO_LONG"
    NOT_FOUND = "NOT_FOUND"


class OpError(BaseModel):
    """Structured error payload within an OpResult."""

    model_config = {"frozen": True}

    code: ErrorKind
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class OpResult(BaseModel):
    """Universal return type for validating operations.

    Attributes:
        ok: Whether the operation succeeded.
        op: Name of the operation (e.g. ``"safe_clamp"``).
        value: Operation-specific payload on success (may be None).
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    value: Any = None
    warnings: list[str] = Field(default_factory=list)
    error: OpError | None = None

    @model_validator(mode="after")
    def _one_outcome(self) -> OpResult:
        if self.ok and self.error is not None:
            raise ValueError("a successful result cannot carry an error")
        if not self.ok:
            if self.error is None:
                raise ValueError("a failed result must carry an error")
            if self.value is not None:
                raise ValueError("a failed result cannot carry a value")
        return self

    @classmethod
    def success(cls, op: str, value: Any = None, *, warnings: list[str] | None = None) -> OpResult:
        return cls(ok=True, op=op, value=value, warnings=warnings or [])

    @classmethod
    def failure(cls, op: str, code: ErrorKind, message: str, **detail: Any) -> OpResult:
        return cls(
            ok=False,
            op=op,
            error=OpError(code=code, message=message, detail=detail),
        )
