"""Codepoint-sequence transforms.

Each function takes a ``str`` and returns a new ``str``. Python strings are
sequences of codepoints, so ``len``, indexing, and slicing below never split
a multi-byte character.

INVARIANT: permissive transforms never fail. Out-of-range counts and
indices fall back to a documented no-op instead of raising. The validating
counterparts live in :mod:`textops.services.validate`.
"""

from __future__ import annotations

import itertools
from collections.abc import Callable

from textops.domain.chars import is_space, is_word_char, to_lower, to_upper

SLUG_SEPARATOR = "-"


def reverse(text: str) -> str:
    """Return the codepoints of *text* in opposite order.

    Examples:
        >>> reverse("héllo")
        'olléh'
    """
    return text[::-1]


def capitalize(text: str) -> str:
    """Upper-case the first codepoint only; leave the rest untouched.

    Unlike :meth:`str.capitalize`, the remaining codepoints keep their case.

    Examples:
        >>> capitalize("élan vital")
        'Élan vital'
        >>> capitalize("hELLO")
        'HELLO'
    """
    if not text:
        return text
    return to_upper(text[0]) + text[1:]


def to_title_case(text: str) -> str:
    """Upper-case each word start and lower-case everything else.

    A word start is the first codepoint or any codepoint right after a
    whitespace codepoint. Whitespace passes through unchanged, so leading
    and repeated whitespace are preserved verbatim.

    Examples:
        >>> to_title_case("hELLO wORLD")
        'Hello World'
        >>> to_title_case("  two  spaces")
        '  Two  Spaces'
    """
    out: list[str] = []
    at_word_start = True
    for ch in text:
        if is_space(ch):
            out.append(ch)
            at_word_start = True
        elif at_word_start:
            out.append(to_upper(ch))
            at_word_start = False
        else:
            out.append(to_lower(ch))
    return "".join(out)


def truncate(text: str, n: int) -> str:
    """Return the first *n* codepoints of *text*.

    A negative *n*, or one at least as long as *text*, returns *text*
    unchanged. Use :func:`textops.services.validate.safe_truncate` to have a
    negative count reported instead.
    """
    if n < 0 or n >= len(text):
        return text
    return text[:n]


def swap(text: str, i: int, j: int) -> str:
    """Exchange the codepoints at positions *i* and *j*.

    Indices outside ``[0, len(text))`` (negative ones included) and
    ``i == j`` return *text* unchanged.
    """
    size = len(text)
    if i == j or not (0 <= i < size and 0 <= j < size):
        return text
    chars = list(text)
    chars[i], chars[j] = chars[j], chars[i]
    return "".join(chars)


def trim_all(text: str) -> str:
    """Remove every whitespace codepoint, not just leading/trailing ones."""
    return "".join(ch for ch in text if not is_space(ch))


def normalize_spaces(text: str) -> str:
    """Collapse whitespace runs to one ASCII space and strip both ends.

    Examples:
        >>> normalize_spaces("  hello \\t\\n  world  ")
        'hello world'
    """
    return " ".join(_split_on(text, is_space))


def slugify(text: str, *, max_length: int | None = None) -> str:
    """Convert *text* to a lowercase, hyphen-delimited slug.

    Letters and decimal digits are kept verbatim (no transliteration);
    every run of anything else becomes a single hyphen. The slug never
    starts or ends with a hyphen and never contains two in a row.

    When *max_length* is a non-negative int, the slug is cut to that many
    codepoints and any hyphen exposed at the cut is dropped.

    Examples:
        >>> slugify("Hello World!")
        'hello-world'
        >>> slugify("  A   New--Topic  ")
        'a-new-topic'
    """
    lowered = "".join(to_lower(ch) for ch in text)
    words = _split_on(lowered, lambda ch: not is_word_char(ch))
    slug = SLUG_SEPARATOR.join(words)
    if max_length is not None and max_length >= 0:
        slug = slug[:max_length].rstrip(SLUG_SEPARATOR)
    return slug


def repeat(text: str, n: int) -> str:
    """Concatenate *n* copies of *text*; ``n <= 0`` yields ``""``."""
    if n <= 0:
        return ""
    return text * n


def fast_repeat(text: str, n: int) -> str:
    """Same output as :func:`repeat`, built with a single join."""
    if n <= 0 or not text:
        return ""
    return "".join(itertools.repeat(text, n))


def _split_on(text: str, is_separator: Callable[[str], bool]) -> list[str]:
    """Split *text* into the maximal runs of non-separator codepoints.

    Separator runs of any length act as one boundary; empty pieces at the
    ends are dropped.
    """
    pieces: list[str] = []
    current: list[str] = []
    for ch in text:
        if is_separator(ch):
            if current:
                pieces.append("".join(current))
                current = []
        else:
            current.append(ch)
    if current:
        pieces.append("".join(current))
    return pieces
