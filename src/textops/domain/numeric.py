"""Bounded-integer helpers.

Python ints never overflow, so :func:`abs_int` is exact. Callers that hand
values on to fixed-width storage use :func:`saturating_abs`, which pins the
magnitude of the most negative value to the largest positive one.
"""

from __future__ import annotations

from typing import TypeVar

T = TypeVar("T")

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def clamp(value: int, low: int, high: int) -> int:
    """Restrict *value* to ``[low, high]``.

    Expects ``low <= high``. With inverted bounds the checks still run in
    order (``low`` first), so the result is ``low`` or ``high``, never an
    error. Use :func:`textops.services.validate.safe_clamp` to have inverted
    bounds reported.
    """
    if value < low:
        return low
    if value > high:
        return high
    return value


def abs_int(n: int) -> int:
    """Magnitude of *n*."""
    return -n if n < 0 else n


def saturating_abs(n: int, *, bits: int = 64) -> int:
    """Magnitude of *n*, capped at the largest signed *bits*-wide value.

    ``saturating_abs(INT64_MIN) == INT64_MAX``.

    Raises:
        ValueError: If *bits* is smaller than 2.
    """
    if bits < 2:
        msg = f"bits must be at least 2, got {bits}"
        raise ValueError(msg)
    ceiling = 2 ** (bits - 1) - 1
    return min(abs_int(n), ceiling)


def max_of(a: T, b: T) -> T:
    """Larger of *a* and *b*; *a* on a tie."""
    return b if b > a else a


def min_of(a: T, b: T) -> T:
    """Smaller of *a* and *b*; *a* on a tie."""
    return b if b < a else a
