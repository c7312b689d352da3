"""Unit tests for direction resolution.

Tests cover:
- Strong character classification
- Entry and exit scans
- Heuristic application and contract checks
"""

import pytest

from bidiwrap.core.heuristics import always_ltr, always_rtl
from bidiwrap.core.resolver import (
    entry_direction,
    exit_direction,
    overall_direction,
    strong_direction_of,
)
from bidiwrap.domain import Direction
from bidiwrap.exceptions import HeuristicError, InvalidArgumentError

EN = "abba"
HE = "\u05e0\u05e1"
AR = "مر"


class TestStrongDirection:
    """Tests for single character classification."""

    def test_latin_is_ltr(self):
        """Latin letters are strong LTR."""
        assert strong_direction_of("a") is Direction.LTR
        assert strong_direction_of("Z") is Direction.LTR

    def test_lrm_is_ltr(self):
        """The left-to-right mark is itself strong LTR."""
        assert strong_direction_of("\u200e") is Direction.LTR

    def test_hebrew_and_arabic_are_rtl(self):
        """Hebrew (R) and Arabic (AL) letters are strong RTL."""
        assert strong_direction_of("א") is Direction.RTL
        assert strong_direction_of("ا") is Direction.RTL

    def test_rlm_is_rtl(self):
        """The right-to-left mark is itself strong RTL."""
        assert strong_direction_of("\u200f") is Direction.RTL

    def test_neutrals(self):
        """Digits, punctuation, spaces and embedding controls are not strong."""
        for char in "0123456789 .,!-\t\n":
            assert strong_direction_of(char) is None
        assert strong_direction_of("١") is None  # Arabic-indic digit one
        for char in "\u202a\u202b\u202c":
            assert strong_direction_of(char) is None


class TestEdgeDirections:
    """Tests for entry and exit scans."""

    def test_empty_text(self):
        """Empty text has no strong edges."""
        assert entry_direction("") is None
        assert exit_direction("") is None

    def test_neutral_text(self):
        """Purely neutral text has no strong edges."""
        assert entry_direction("12 + 3 = 15.") is None
        assert exit_direction("12 + 3 = 15.") is None

    def test_uniform_text(self):
        """Uniform text has the same entry and exit."""
        assert entry_direction(EN) is Direction.LTR
        assert exit_direction(EN) is Direction.LTR
        assert entry_direction(AR) is Direction.RTL
        assert exit_direction(AR) is Direction.RTL

    def test_mixed_text(self):
        """Entry and exit come from opposite ends."""
        assert entry_direction(EN + HE) is Direction.LTR
        assert exit_direction(EN + HE) is Direction.RTL
        assert entry_direction(HE + EN) is Direction.RTL
        assert exit_direction(HE + EN) is Direction.LTR

    def test_neutrals_are_skipped(self):
        """Leading and trailing neutrals are skipped."""
        assert entry_direction("." + HE + " 12" + EN + "!") is Direction.RTL
        assert exit_direction("." + HE + " 12" + EN + "!") is Direction.LTR

    def test_rejects_non_text(self):
        """None is rejected rather than treated as empty."""
        with pytest.raises(InvalidArgumentError):
            entry_direction(None)  # type: ignore[arg-type]
        with pytest.raises(InvalidArgumentError):
            exit_direction(None)  # type: ignore[arg-type]


class TestOverallDirection:
    """Tests for heuristic application."""

    def test_uses_heuristic(self):
        """The heuristic's answer is returned as is."""
        assert overall_direction(EN, always_rtl) is Direction.RTL
        assert overall_direction(HE, always_ltr) is Direction.LTR
        assert overall_direction("", always_rtl) is Direction.RTL

    def test_custom_callable(self):
        """Any callable returning a Direction is a heuristic."""
        assert overall_direction("x", lambda text: Direction.RTL) is Direction.RTL

    def test_rejects_missing_heuristic(self):
        """None and non-callables are rejected."""
        with pytest.raises(InvalidArgumentError, match="heuristic"):
            overall_direction(EN, None)  # type: ignore[arg-type]
        with pytest.raises(InvalidArgumentError, match="heuristic"):
            overall_direction(EN, "ltr")  # type: ignore[arg-type]

    def test_rejects_non_direction_result(self):
        """A heuristic must answer with a Direction."""
        with pytest.raises(HeuristicError):
            overall_direction(EN, lambda text: "rtl")  # type: ignore[arg-type, return-value]
        with pytest.raises(HeuristicError):
            overall_direction(EN, lambda text: None)  # type: ignore[arg-type, return-value]
