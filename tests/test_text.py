"""Tests for gitwok.commit.text module."""

import pytest

from gitwok.commit import contains_newline, contains_whitespace, trim_footer


class TestContainsNewline:
    """Tests for contains_newline function."""

    def test_plain_string(self):
        assert contains_newline("fix bug") is False

    def test_unix_newline(self):
        assert contains_newline("fix\nbug") is True

    def test_windows_newline(self):
        assert contains_newline("fix\r\nbug") is True

    def test_empty_string(self):
        assert contains_newline("") is False


class TestContainsWhitespace:
    """Tests for contains_whitespace function."""

    def test_single_word(self):
        assert contains_whitespace("feat") is False

    def test_space(self):
        assert contains_whitespace("new feat") is True

    def test_tab(self):
        assert contains_whitespace("new\tfeat") is True

    def test_unicode_whitespace(self):
        """Test that non-ASCII whitespace such as NBSP is detected."""
        assert contains_whitespace("new\u00a0feat") is True

    def test_empty_string(self):
        assert contains_whitespace("") is False


class TestTrimFooter:
    """Tests for trim_footer function."""

    def test_keeps_colon_space_separator(self):
        """Test that an empty-valued colon footer keeps its trailing space."""
        assert trim_footer("Acked-by: ") == "Acked-by: "

    def test_keeps_space_sharp_separator(self):
        """Test that leading space-hash shape is restored and tail trimmed."""
        assert trim_footer("  #1 ") == " #1"

    def test_trims_regular_footer(self):
        assert trim_footer("  Refs: 123  \n") == "Refs: 123"

    def test_restores_colon_space(self):
        """Test that a trailing colon gets its separator space back."""
        assert trim_footer("Acked-by:   ") == "Acked-by: "

    def test_leading_space_sharp_kept(self):
        assert trim_footer(" #42\n") == " #42"

    def test_trailing_whitespace_after_sharp_value(self):
        assert trim_footer("fix #1\n  ") == "fix #1"

    def test_empty_string(self):
        assert trim_footer("") == ""

    def test_whitespace_only(self):
        assert trim_footer("  \n ") == ""

    @pytest.mark.parametrize(
        "raw",
        [
            "",
            "   ",
            "Acked-by: ",
            "Acked-by:   ",
            "  #1 ",
            "#",
            ":",
            "  #: ",
            "Refs: 123\n",
            "\tBREAKING CHANGE: api\n",
            "fix #1\n  ",
        ],
    )
    def test_idempotent(self, raw):
        """Test that trimming twice gives the same result as once."""
        once = trim_footer(raw)
        assert trim_footer(once) == once
