"""
Quote validation and unescaping for single delimited fields.

A field arrives here exactly as it was typed in the file, outer quotes and
doubled quotes included. Positions are character positions, never byte offsets.
"""

from typing import Optional

from table_reader.errors import QuoteErrorKind

QUOTE = '"'
ESCAPED_QUOTE = '""'


def has_outer_quotes(field: str) -> bool:
    """
    Check whether a field is wrapped in a pair of quotes.

    Args:
        field: Raw field text

    Returns:
        True if the first and last characters are both quotes
    """
    return len(field) >= 2 and field.startswith(QUOTE) and field.endswith(QUOTE)


def validate_field(field: str) -> Optional[QuoteErrorKind]:
    """
    Check that the quotes inside a raw field are legal.

    Quotes strictly between the first and last character must come in
    adjacent pairs (an escaped quote), and escaped quotes are only allowed
    when the field itself is wrapped in outer quotes.

    Args:
        field: Raw field text

    Returns:
        None if the field is valid, otherwise the kind of quote error
    """
    outer = has_outer_quotes(field)
    last = len(field) - 1

    # The first and last positions are skipped whether or not they are quotes
    indices = [i for i, c in enumerate(field) if c == QUOTE and 0 < i < last]

    if len(indices) % 2:
        return QuoteErrorKind.INVALID_QUOTE

    for first, second in zip(indices[::2], indices[1::2]):
        if second - first > 1:
            return QuoteErrorKind.INVALID_QUOTE
        if not outer:
            return QuoteErrorKind.INVALID_ESCAPE

    return None


def finalize_field(field: str) -> str:
    """
    Strip outer quotes and unescape doubled quotes.

    Only call this on a field that passed validate_field.

    Args:
        field: Raw field text

    Returns:
        The field value as it should appear in the table
    """
    if has_outer_quotes(field):
        field = field[1:-1]
    return field.replace(ESCAPED_QUOTE, QUOTE)
