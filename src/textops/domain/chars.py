"""Single-codepoint classification and case mapping.

Every helper here takes exactly one codepoint (a ``str`` of length 1) and
returns either a bool or exactly one codepoint.

INVARIANT: case mapping never changes the codepoint count. Python's full
case mapping can expand a codepoint (``"ß".upper() == "SS"``); when an
uppercase mapping expands, the original codepoint is kept.
"""

from __future__ import annotations


def is_space(ch: str) -> bool:
    """Whitespace per the Unicode ``White_Space`` property (``str.isspace``)."""
    return ch.isspace()


def is_word_char(ch: str) -> bool:
    """Letter or decimal digit.

    Letters are any alphabetic codepoint (categories L*); digits are
    decimal digits only (category Nd), so ``"²"`` and ``"Ⅷ"`` do not count.
    """
    return ch.isalpha() or ch.isdecimal()


def to_upper(ch: str) -> str:
    """Single-codepoint uppercase mapping, identity when none exists."""
    upper = ch.upper()
    return upper if len(upper) == 1 else ch


def to_lower(ch: str) -> str:
    """Single-codepoint lowercase mapping, identity when none exists.

    The only expanding lowercase mapping is U+0130 (``"İ"`` becomes ``"i"``
    plus a combining dot above); its base letter is kept.
    """
    lower = ch.lower()
    return lower[0] if lower else ch
