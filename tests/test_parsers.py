"""Tests for xfetch.checks.parsers: the pure text extractors."""

from __future__ import annotations

import pytest

from xfetch.checks.parsers import (
    capitalize_first,
    extract_quoted_string,
    extract_version_number,
    first_line,
    strip_prefix,
)


class TestExtractQuotedString:
    def test_returns_text_between_quotes(self):
        assert extract_quoted_string('XYZ="hello world"') == "hello world"

    def test_no_quotes_is_no_value(self):
        assert extract_quoted_string("XYZ=hello") is None

    def test_single_quote_char_is_no_value(self):
        assert extract_quoted_string('XYZ="hello') is None

    def test_empty_quotes_is_empty_string(self):
        result = extract_quoted_string('A=""')
        assert result == ""
        assert result is not None

    def test_uses_first_and_last_quote(self):
        assert extract_quoted_string('K="a "b" c"') == 'a "b" c'

    def test_pretty_name_line_with_newline(self):
        assert extract_quoted_string('PRETTY_NAME="Ubuntu 22.04.4 LTS"\n') == "Ubuntu 22.04.4 LTS"


class TestExtractVersionNumber:
    @pytest.mark.parametrize("text, expected", [
        ("bash, version 5.1.16(1)-release", "5.1.16"),
        ("v2", "2"),
        ("zsh 5.9 (x86_64-pc-linux-gnu)", "5.9"),
        ("fish, version 3.6.0", "3.6.0"),
        ("no digits here", ""),
        ("", ""),
    ])
    def test_extracts_first_numeric_token(self, text, expected):
        assert extract_version_number(text) == expected

    def test_stops_at_first_non_version_char(self):
        assert extract_version_number("1.2.3-beta4") == "1.2.3"

    def test_leading_dot_is_skipped(self):
        # Scanning starts at a digit, so a dot before it is not part of the token
        assert extract_version_number("version .5") == "5"

    def test_non_ascii_digits_are_not_digits(self):
        assert extract_version_number("x²y 7") == "7"


class TestCapitalizeFirst:
    def test_lowercase(self):
        assert capitalize_first("wayland") == "Wayland"

    def test_already_capital_is_unchanged(self):
        assert capitalize_first("X11") == "X11"

    def test_rest_of_string_untouched(self):
        assert capitalize_first("mIxEd") == "MIxEd"

    def test_empty_is_noop(self):
        assert capitalize_first("") == ""


class TestSmallHelpers:
    def test_strip_prefix_present(self):
        assert strip_prefix("up 2 hours, 3 minutes", "up ") == "2 hours, 3 minutes"

    def test_strip_prefix_absent(self):
        assert strip_prefix("2 hours", "up ") == "2 hours"

    def test_first_line(self):
        assert first_line("Linux\nignored\n") == "Linux"

    def test_first_line_empty(self):
        assert first_line("") == ""
