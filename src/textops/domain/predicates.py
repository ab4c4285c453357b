"""Boolean predicates over text.

These never fail; the validating checks that report a typed reason
(length bounds, search, split) return ``OpResult`` and live in
:mod:`textops.services.validate`.
"""

from __future__ import annotations

from collections.abc import Iterable

from textops.domain.chars import is_word_char


def is_empty(text: str) -> bool:
    """True when *text* is empty or whitespace only."""
    return not text.strip()


def is_palindrome(text: str) -> bool:
    """Check whether the letters and digits of *text* read the same both ways.

    Punctuation, whitespace, and case never affect the result. Each
    codepoint is folded on its own with :meth:`str.casefold`
    (locale-insensitive), and the folded units are compared as a sequence.
    Folding per codepoint keeps an expansion such as ``"ŉ"`` -> ``"ʼn"``
    from being read backwards, so reversing the input never changes the
    answer.

    Examples:
        >>> is_palindrome("A man, a plan, a canal: Panama")
        True
        >>> is_palindrome("")
        True
    """
    folded = [ch.casefold() for ch in text if is_word_char(ch)]
    return folded == folded[::-1]


def contains_any(text: str, charset: Iterable[str]) -> bool:
    """True if any codepoint of *text* is in *charset*.

    *charset* may be a ``str`` or any iterable of single codepoints.
    Empty *text* or empty *charset* is always False.
    """
    members = frozenset(charset)
    if not text or not members:
        return False
    return any(ch in members for ch in text)
