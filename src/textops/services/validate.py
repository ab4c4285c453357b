"""Validating operations: the ``safe_*`` counterparts of permissive helpers.

Each function checks its arguments, reports the first problem as a failed
:class:`OpResult`, and otherwise delegates to the same domain function the
permissive variant uses. The transformation logic itself is never
duplicated here.

INVARIANT: a given invalid condition is either reported or coerced, never
both. Nothing in this module raises for bad input.
"""

from __future__ import annotations

import logging

from textops.domain.numeric import clamp
from textops.domain.transforms import truncate
from textops.services.result import ErrorKind, OpResult

logger = logging.getLogger(__name__)


def _fail(op: str, code: ErrorKind, message: str, **detail: object) -> OpResult:
    logger.debug("%s rejected input: %s", op, message)
    return OpResult.failure(op, code, message, **detail)


def safe_truncate(text: str, n: int) -> OpResult:
    """:func:`~textops.domain.transforms.truncate`, rejecting a negative *n*."""
    op = "safe_truncate"
    if n < 0:
        return _fail(op, ErrorKind.INVALID_ARGUMENT, f"count must be non-negative, got {n}", n=n)
    return OpResult.success(op, truncate(text, n))


def safe_clamp(value: int, low: int, high: int) -> OpResult:
    """:func:`~textops.domain.numeric.clamp`, rejecting ``low > high``."""
    op = "safe_clamp"
    if low > high:
        return _fail(
            op,
            ErrorKind.INVALID_RANGE,
            f"lower bound {low} exceeds upper bound {high}",
            low=low,
            high=high,
        )
    return OpResult.success(op, clamp(value, low, high))


def validate_length(text: str, min_len: int, max_len: int) -> OpResult:
    """Check that *text* has between *min_len* and *max_len* codepoints.

    Bounds are checked before the text: a negative bound or
    ``min_len > max_len`` is ``INVALID_RANGE`` regardless of *text*.
    Success carries no value.
    """
    op = "validate_length"
    if min_len < 0 or max_len < 0 or min_len > max_len:
        return _fail(
            op,
            ErrorKind.INVALID_RANGE,
            f"invalid length bounds [{min_len}, {max_len}]",
            min=min_len,
            max=max_len,
        )
    length = len(text)
    if length < min_len:
        return _fail(
            op,
            ErrorKind.TOO_SHORT,
            f"length {length} is below minimum {min_len}",
            length=length,
            min=min_len,
        )
    if length > max_len:
        return _fail(
            op,
            ErrorKind.TOO_LONG,
            f"length {length} exceeds maximum {max_len}",
            length=length,
            max=max_len,
        )
    return OpResult.success(op)


def safe_index(text: str, substring: str) -> OpResult:
    """Codepoint offset of the first *substring* in *text*.

    An empty *substring* matches at 0.
    """
    op = "safe_index"
    position = text.find(substring)
    if position < 0:
        return _fail(op, ErrorKind.NOT_FOUND, f"{substring!r} not found", substring=substring)
    return OpResult.success(op, position)


def safe_split(text: str, separator: str) -> OpResult:
    """Split *text* on every occurrence of *separator*.

    Splitting an empty *text* yields ``[]`` for an empty *separator* and
    ``[""]`` otherwise. An empty *separator* on non-empty *text* has no
    well-defined split point and is rejected.
    """
    op = "safe_split"
    if not separator:
        if text:
            return _fail(
                op,
                ErrorKind.INVALID_ARGUMENT,
                "separator must not be empty",
                separator=separator,
            )
        return OpResult.success(op, [])
    return OpResult.success(op, text.split(separator))
