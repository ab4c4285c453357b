"""textops: Unicode-correct text, sequence, and bounded-integer utilities.

The public API re-exports the pure domain functions and the validating
``safe_*`` operations so callers can ``from textops import slugify``.
"""

from __future__ import annotations

from textops.domain.numeric import (
    INT64_MAX,
    INT64_MIN,
    abs_int,
    clamp,
    max_of,
    min_of,
    saturating_abs,
)
from textops.domain.predicates import contains_any, is_empty, is_palindrome
from textops.domain.sequences import contains, filter_items
from textops.domain.transforms import (
    capitalize,
    fast_repeat,
    normalize_spaces,
    repeat,
    reverse,
    slugify,
    swap,
    to_title_case,
    trim_all,
    truncate,
)
from textops.services.result import ErrorKind, OpError, OpResult
from textops.services.validate import (
    safe_clamp,
    safe_index,
    safe_split,
    safe_truncate,
    validate_length,
)

__version__ = "0.1.0"

__all__ = [
    "INT64_MAX",
    "INT64_MIN",
    "ErrorKind",
    "OpError",
    "OpResult",
    "__version__",
    "abs_int",
    "capitalize",
    "clamp",
    "contains",
    "contains_any",
    "fast_repeat",
    "filter_items",
    "is_empty",
    "is_palindrome",
    "max_of",
    "min_of",
    "normalize_spaces",
    "repeat",
    "reverse",
    "safe_clamp",
    "safe_index",
    "safe_split",
    "safe_truncate",
    "saturating_abs",
    "slugify",
    "swap",
    "to_title_case",
    "trim_all",
    "truncate",
    "validate_length",
]
