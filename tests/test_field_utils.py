"""
Tests for field quote validation and unescaping.
"""

import pytest
import sys
from pathlib import Path

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from table_reader.errors import QuoteErrorKind
from table_reader.utils.field_utils import (
    has_outer_quotes,
    validate_field,
    finalize_field
)


@pytest.mark.parametrize("field", [
    'abc',
    '"abc"',
    '""',
    '"a""bc"',
    '"a""bcd""efg"""',
    '',
    '"Zürich ""ß"" 東京"',
])
def test_validate_field_valid(field):
    """Test fields with legal quoting."""
    assert validate_field(field) is None


def test_validate_field_invalid_escaped_quotes():
    """Test a doubled quote in an unquoted field."""
    assert validate_field('abc""de') == QuoteErrorKind.INVALID_ESCAPE


def test_validate_field_invalid_escaped_quotes_leading_quote_only():
    """Test a doubled quote when only the first character is a quote."""
    assert validate_field('"abc""de') == QuoteErrorKind.INVALID_ESCAPE


def test_validate_field_outer_with_single_inner_quote():
    """Test three quotes in a row."""
    assert validate_field('"""') == QuoteErrorKind.INVALID_QUOTE


def test_validate_field_outer_with_many_single_quotes():
    """Test separated single quotes inside outer quotes."""
    assert validate_field('"abc"de"f"') == QuoteErrorKind.INVALID_QUOTE


def test_validate_field_outer_with_inner_single_quote():
    """Test one lone quote inside outer quotes."""
    assert validate_field('"a"bc"') == QuoteErrorKind.INVALID_QUOTE


def test_validate_field_lone_quote_no_outer():
    """Test a lone quote in an unquoted field."""
    assert validate_field('abc"def') == QuoteErrorKind.INVALID_QUOTE


def test_validate_field_counts_characters_not_bytes():
    """Test that multi-byte characters do not shift quote positions."""
    # With byte offsets the closing quote would look like an interior quote
    assert validate_field('"日本"') is None
    assert validate_field('é""é') == QuoteErrorKind.INVALID_ESCAPE


def test_has_outer_quotes():
    """Test outer quote detection."""
    assert has_outer_quotes('"abc"')
    assert has_outer_quotes('""')
    assert not has_outer_quotes('a""bc')
    assert not has_outer_quotes('"')
    assert not has_outer_quotes('')


def test_finalize_field_outer_quotes():
    """Test stripping of outer quotes."""
    assert finalize_field('"this is a value"') == "this is a value"


def test_finalize_field_escaped_quotes():
    """Test unescaping of doubled quotes."""
    assert finalize_field('"this is a ""value"" that is quoted"') == 'this is a "value" that is quoted'


def test_finalize_field_consecutive_escaped_quotes():
    """Test that each doubled quote collapses to one quote."""
    field = '"this is a """"value"" that"" is quoted"'
    assert finalize_field(field) == 'this is a ""value" that" is quoted'


def test_finalize_field_no_quotes():
    """Test that unquoted text is returned unchanged."""
    assert finalize_field("this is a string without quotes") == "this is a string without quotes"


def test_finalize_field_only_quotes():
    """Test that an empty quoted field becomes an empty string."""
    assert finalize_field('""') == ""


def test_finalize_field_multibyte():
    """Test that outer quotes are removed by character."""
    assert finalize_field('"東京 ""駅"""') == '東京 "駅"'


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
