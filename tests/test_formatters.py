"""
Tests for word formatting — casing modes
"""

import pytest

from humanoid.presentation.formatters import WordFormat, format_word


class TestFormatWord:
    """Each casing mode."""

    def test_none_passes_through(self):
        assert format_word("eRis", WordFormat.NONE) == "eRis"

    def test_upper_first(self):
        """Only the first character is forced."""
        assert format_word("eris", WordFormat.UPPER_FIRST) == "Eris"
        assert format_word("eRIS", WordFormat.UPPER_FIRST) == "ERIS"

    def test_lower_first(self):
        assert format_word("ERIS", WordFormat.LOWER_FIRST) == "eRIS"

    def test_upper(self):
        assert format_word("eris", WordFormat.UPPER) == "ERIS"

    def test_lower(self):
        assert format_word("ErIs", WordFormat.LOWER) == "eris"

    def test_empty_word(self):
        for mode in WordFormat:
            assert format_word("", mode) == ""

    @pytest.mark.parametrize("mode", list(WordFormat))
    def test_idempotent(self, mode):
        """Formatting twice equals formatting once."""
        for word in ("andromeda", "Pinwheel", "x", "mIxEd"):
            once = format_word(word, mode)
            assert format_word(once, mode) == once


class TestWordFormatParse:
    """Config values map to members."""

    @pytest.mark.parametrize("value, expected", [
        ("upper_first", WordFormat.UPPER_FIRST),
        ("Upper-First", WordFormat.UPPER_FIRST),
        ("LOWER_FIRST", WordFormat.LOWER_FIRST),
        (" upper ", WordFormat.UPPER),
        ("none", WordFormat.NONE),
        (None, WordFormat.NONE),
        (WordFormat.LOWER, WordFormat.LOWER),
    ])
    def test_parse(self, value, expected):
        assert WordFormat.parse(value) is expected

    def test_unknown_value(self):
        with pytest.raises(ValueError, match="Unknown word format"):
            WordFormat.parse("title")
