"""Generic operations over sequences of any element type."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TypeVar

T = TypeVar("T")


def filter_items(items: Iterable[T], predicate: Callable[[T], bool]) -> list[T]:
    """Return the elements of *items* satisfying *predicate*, in order.

    Always returns a new list; *items* is never mutated.
    """
    return [item for item in items if predicate(item)]


def contains(items: Iterable[T], item: T) -> bool:
    """True if any element of *items* equals *item* (``==``)."""
    return any(element == item for element in items)
