"""Tests for the validating (safe_*) operations."""

from __future__ import annotations

import logging

import pytest

from textops.services.result import ErrorKind, OpResult
from textops.services.validate import (
    safe_clamp,
    safe_index,
    safe_split,
    safe_truncate,
    validate_length,
)


def _code(result: OpResult) -> ErrorKind:
    assert not result.ok
    assert result.error is not None
    return result.error.code


class TestSafeTruncate:
    def test_truncates(self) -> None:
        result = safe_truncate("naïve café", 5)
        assert result.ok
        assert result.value == "naïve"

    def test_count_past_end_is_identity(self) -> None:
        assert safe_truncate("abc", 10).value == "abc"

    def test_negative_count_is_invalid_argument(self) -> None:
        result = safe_truncate("abc", -1)
        assert _code(result) is ErrorKind.INVALID_ARGUMENT
        assert result.op == "safe_truncate"
        assert result.error is not None
        assert result.error.detail == {"n": -1}


class TestSafeClamp:
    def test_clamps(self) -> None:
        assert safe_clamp(42, 0, 10).value == 10
        assert safe_clamp(-3, 0, 10).value == 0
        assert safe_clamp(5, 0, 10).value == 5

    def test_equal_bounds_are_valid(self) -> None:
        assert safe_clamp(9, 4, 4).value == 4

    def test_inverted_bounds_are_invalid_range(self) -> None:
        result = safe_clamp(5, 10, 0)
        assert _code(result) is ErrorKind.INVALID_RANGE
        assert result.value is None


class TestValidateLength:
    def test_too_short(self) -> None:
        assert _code(validate_length("hi", 3, 5)) is ErrorKind.TOO_SHORT

    def test_too_long(self) -> None:
        assert _code(validate_length("hello world", 3, 5)) is ErrorKind.TOO_LONG

    def test_within_bounds(self) -> None:
        result = validate_length("hello", 3, 5)
        assert result.ok
        assert result.value is None

    def test_counts_codepoints_not_bytes(self) -> None:
        """'日本語' is 9 UTF-8 bytes but 3 codepoints."""
        assert validate_length("日本語", 3, 3).ok

    @pytest.mark.parametrize("min_len,max_len", [(-1, 5), (0, -1), (6, 5)])
    def test_bad_bounds_are_invalid_range(self, min_len: int, max_len: int) -> None:
        assert _code(validate_length("hello", min_len, max_len)) is ErrorKind.INVALID_RANGE

    def test_bounds_checked_before_text(self) -> None:
        """An empty text with inverted bounds reports the bounds, not TOO_SHORT."""
        assert _code(validate_length("", 5, 3)) is ErrorKind.INVALID_RANGE

    def test_failure_detail(self) -> None:
        result = validate_length("hi", 3, 5)
        assert result.error is not None
        assert result.error.detail == {"length": 2, "min": 3}


class TestSafeIndex:
    def test_found(self) -> None:
        assert safe_index("banana", "na").value == 2

    def test_codepoint_offset(self) -> None:
        assert safe_index("héllo wörld", "wö").value == 6

    def test_empty_substring_matches_at_zero(self) -> None:
        assert safe_index("abc", "").value == 0
        assert safe_index("", "").value == 0

    def test_not_found(self) -> None:
        result = safe_index("banana", "x")
        assert _code(result) is ErrorKind.NOT_FOUND
        assert result.error is not None
        assert result.error.detail == {"substring": "x"}


class TestSafeSplit:
    def test_splits(self) -> None:
        assert safe_split("a,b,c", ",").value == ["a", "b", "c"]

    def test_keeps_empty_pieces(self) -> None:
        assert safe_split(",a,,b,", ",").value == ["", "a", "", "b", ""]

    def test_multi_codepoint_separator(self) -> None:
        assert safe_split("a→b→c", "→").value == ["a", "b", "c"]

    def test_empty_separator_is_invalid_argument(self) -> None:
        assert _code(safe_split("x", "")) is ErrorKind.INVALID_ARGUMENT

    def test_empty_text_empty_separator(self) -> None:
        result = safe_split("", "")
        assert result.ok
        assert result.value == []

    def test_empty_text_with_separator(self) -> None:
        assert safe_split("", ",").value == [""]


class TestFailureLogging:
    def test_failures_are_logged_at_debug(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="textops"):
            safe_index("abc", "z")
        assert any("safe_index" in record.getMessage() for record in caplog.records)

    def test_successes_are_silent(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="textops"):
            safe_index("abc", "b")
        assert caplog.records == []
