"""
Tests for the store file format

These tests verify the line codec:
- parse_lines(): Parse file contents into ordered pairs
- format_entries(): Serialize pairs into file contents
- validate_entry(): Reject pairs that cannot be written as one line

Run with: python -m pytest tests/test_format.py -v
"""

import pytest

from kv.errors import InvalidArgument, StoreFormatError
from kv.store.format import Entry, format_entries, parse_lines, validate_entry


class TestParseLines:
    """Test parsing store file contents."""

    def test_parse_empty(self):
        """Test empty contents give no entries."""
        assert parse_lines("") == {}

    def test_parse_basic(self):
        """Test parsing simple lines."""
        data = parse_lines("a:1\nb:2\n")
        assert list(data.items()) == [("a", "1"), ("b", "2")]

    def test_parse_without_trailing_newline(self):
        """Test the last line does not need a newline."""
        assert parse_lines("a:1")["a"] == "1"

    def test_parse_splits_on_first_separator(self):
        """Test values keep any further separators."""
        assert parse_lines("time:12:30:00\n")["time"] == "12:30:00"

    def test_parse_empty_value(self):
        """Test a key with an empty value."""
        assert parse_lines("a:\n")["a"] == ""

    def test_parse_skips_blank_lines(self):
        """Test blank lines are ignored."""
        data = parse_lines("\na:1\n\n\nb:2\n")
        assert list(data) == ["a", "b"]

    def test_parse_crlf(self):
        """Test Windows line endings are tolerated."""
        assert list(parse_lines("a:1\r\nb:2\r\n").items()) == [("a", "1"), ("b", "2")]

    def test_parse_duplicate_key_last_value_first_position(self):
        """Test a repeated key keeps its first position and last value."""
        data = parse_lines("a:1\nb:2\na:3\n")
        assert list(data.items()) == [("a", "3"), ("b", "2")]

    def test_parse_line_without_separator(self):
        """Test a line without a separator is rejected."""
        with pytest.raises(StoreFormatError) as exc_info:
            parse_lines("a:1\nb:2\nnope\n", "store.txt")
        assert exc_info.value.line_number == 3
        assert exc_info.value.line == "nope"
        assert "store.txt" in str(exc_info.value)

    def test_parse_line_with_empty_key(self):
        """Test a line starting with the separator is rejected."""
        with pytest.raises(StoreFormatError):
            parse_lines(":value\n")


class TestFormatEntries:
    """Test serializing entries."""

    def test_format_empty(self):
        """Test no entries give empty contents."""
        assert format_entries([]) == ""

    def test_format_entries(self):
        """Test every entry becomes one newline-terminated line."""
        text = format_entries([Entry("a", "1"), Entry("b", "x:y")])
        assert text == "a:1\nb:x:y\n"

    def test_format_then_parse(self):
        """Test formatted contents parse back to the same pairs."""
        entries = [Entry("user", "alice"), Entry("url", "http://h:1/"), Entry("e", "")]
        assert list(parse_lines(format_entries(entries)).items()) == entries


class TestValidateEntry:
    """Test validate_entry()."""

    def test_valid_entry(self):
        """Test an ordinary pair passes."""
        validate_entry("key", "value with spaces: and colons")

    @pytest.mark.parametrize("key", ["", "a:b", "a\nb", "a\rb"])
    def test_invalid_key(self, key: str):
        """Test unwritable keys are rejected."""
        with pytest.raises(InvalidArgument):
            validate_entry(key, "value")

    @pytest.mark.parametrize("value", ["a\nb", "a\rb"])
    def test_invalid_value(self, value: str):
        """Test values with line breaks are rejected."""
        with pytest.raises(InvalidArgument):
            validate_entry("key", value)
