"""Unit tests for directionality heuristics and locale translation."""

import pytest

from bidiwrap.core.heuristics import (
    DEFAULT_HEURISTIC,
    HEURISTICS,
    always_ltr,
    always_rtl,
    any_rtl_ltr,
    first_strong_ltr,
    first_strong_rtl,
    get_heuristic,
    locale_heuristic,
)
from bidiwrap.core.locales import direction_for_locale, is_rtl_locale
from bidiwrap.domain import Direction
from bidiwrap.exceptions import InvalidArgumentError, UnknownHeuristicError

EN = "abba"
HE = "\u05e0\u05e1"


class TestForcedHeuristics:
    """Tests for always_ltr / always_rtl."""

    def test_ignore_text(self):
        """Forced heuristics answer the same for any text."""
        for text in ("", ".", EN, HE, EN + HE):
            assert always_ltr(text) is Direction.LTR
            assert always_rtl(text) is Direction.RTL


class TestFirstStrong:
    """Tests for first strong heuristics."""

    def test_first_strong_wins(self):
        """The first strong character decides."""
        assert first_strong_ltr(HE + EN) is Direction.RTL
        assert first_strong_rtl(EN + HE) is Direction.LTR
        assert first_strong_ltr("." + HE + ".") is Direction.RTL

    def test_fallback(self):
        """Neutral and empty text fall back to the named direction."""
        assert first_strong_ltr("") is Direction.LTR
        assert first_strong_ltr("123") is Direction.LTR
        assert first_strong_rtl("") is Direction.RTL
        assert first_strong_rtl("...") is Direction.RTL

    def test_default(self):
        """First strong with LTR fallback is the default."""
        assert DEFAULT_HEURISTIC is first_strong_ltr


class TestAnyRtl:
    """Tests for any_rtl_ltr."""

    def test_any_rtl(self):
        """Any RTL character makes the text RTL."""
        assert any_rtl_ltr(EN + EN + HE) is Direction.RTL
        assert any_rtl_ltr(EN) is Direction.LTR
        assert any_rtl_ltr("") is Direction.LTR


class TestRegistry:
    """Tests for heuristic lookup by name."""

    def test_lookup(self):
        """Registered names resolve, case and dash insensitive."""
        assert get_heuristic("ltr") is always_ltr
        assert get_heuristic("RTL") is always_rtl
        assert get_heuristic("firststrong-rtl") is first_strong_rtl
        assert set(HEURISTICS) == {
            "ltr",
            "rtl",
            "firststrong_ltr",
            "firststrong_rtl",
            "anyrtl_ltr",
        }

    def test_unknown(self):
        """Unknown names raise with the list of valid names."""
        with pytest.raises(UnknownHeuristicError, match="firststrong_ltr"):
            get_heuristic("majority")


class TestLocale:
    """Tests for locale to direction translation."""

    def test_rtl_languages(self):
        """Hebrew, Arabic, Persian and Urdu locales are RTL."""
        for tag in ("he", "iw", "ar", "fa-IR", "ur_PK", "he_IL.UTF-8", "yi"):
            assert is_rtl_locale(tag), tag

    def test_ltr_languages(self):
        """Latin, Cyrillic and CJK locales are LTR."""
        for tag in ("en", "en-US", "fr_FR", "ru", "zh-Hans-CN", "ja_JP.UTF-8"):
            assert not is_rtl_locale(tag), tag

    def test_script_subtag_wins(self):
        """An explicit script overrides the language default."""
        assert is_rtl_locale("az-Arab")
        assert is_rtl_locale("pa-Arab-PK")
        assert not is_rtl_locale("ku-Latn")
        assert not is_rtl_locale("ar-Latn")

    def test_direction_for_locale(self):
        """Locales map to a Direction."""
        assert direction_for_locale("he-IL") is Direction.RTL
        assert direction_for_locale("en") is Direction.LTR

    def test_malformed(self):
        """Empty or malformed identifiers are rejected."""
        for tag in ("", "   ", "1234", "-"):
            with pytest.raises(InvalidArgumentError):
                is_rtl_locale(tag)

    def test_locale_heuristic(self):
        """A locale heuristic answers with the locale's direction."""
        hebrew = locale_heuristic("he")
        assert hebrew(EN) is Direction.RTL
        assert locale_heuristic("en_GB")(HE) is Direction.LTR
