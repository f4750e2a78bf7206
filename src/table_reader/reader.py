"""
Delimited text reader.

Turns CSV/TSV text into a TableData in a single left-to-right pass, checking
quote placement per field and field counts per row. The first problem found
is raised with its row and column; nothing is returned for malformed text.
"""

from typing import List, Optional

from table_reader.errors import (
    QuoteErrorKind,
    QuoteValidationError,
    RowFieldCountMismatchError,
)
from table_reader.table_data import TableData
from table_reader.utils.field_utils import QUOTE, finalize_field, validate_field

NEWLINE = "\n"
CARRIAGE_RETURN = "\r"

# How blank lines between rows are treated
BLANK_LINES_SKIP = "skip"
BLANK_LINES_ERROR = "error"
BLANK_LINE_MODES = (BLANK_LINES_SKIP, BLANK_LINES_ERROR)


class ScannerState:
    """Mutable state carried from one character to the next."""

    def __init__(self):
        self.inside_quote = False
        self.current_field: List[str] = []
        self.row_fields: List[str] = []
        # Field count of the last accepted row (header included)
        self.expected_column_count: Optional[int] = None
        # Data rows accepted so far, used for 1-indexed error rows
        self.accepted_row_count = 0
        self.at_line_start = True
        self.pending_blank_line = False


class RowScanner:
    """
    Character-driven state machine that splits text into fields and rows.

    Quotes toggle an inside-quote flag; while it is set, delimiters are kept
    as field content and newlines are dropped, so neither splits the field.
    """

    def __init__(self, delimiter: str, has_header: bool, blank_lines: str = BLANK_LINES_SKIP):
        self.delimiter = delimiter
        self.has_header = has_header
        self.blank_lines = blank_lines
        self.state = ScannerState()
        self.table = TableData()

    def feed(self, c: str) -> None:
        """Process one character of input (carriage returns already removed)."""
        state = self.state

        if not state.inside_quote:
            if c == NEWLINE:
                self._end_line()
                return
            if c == self.delimiter:
                self._end_field()
                state.at_line_start = False
                return

        if c != NEWLINE:
            state.current_field.append(c)
        if c == QUOTE:
            state.inside_quote = not state.inside_quote
        state.at_line_start = False

    def finish(self) -> TableData:
        """
        Flush the last line and return the table.

        Raises:
            QuoteValidationError: If the input ended inside a quoted field
        """
        state = self.state
        if state.inside_quote:
            raise QuoteValidationError(
                QuoteErrorKind.UNTERMINATED_QUOTE,
                row=state.accepted_row_count + 1,
                col=len(state.row_fields) + 1,
                value="".join(state.current_field),
            )

        # End of input terminates the last line; trailing blank lines are ignored
        if state.current_field:
            self._end_field()
        if state.row_fields:
            self._end_row()
        return self.table

    def _end_line(self) -> None:
        state = self.state
        if state.current_field:
            self._end_field()

        if state.row_fields:
            self._end_row()
        elif state.at_line_start and self.blank_lines == BLANK_LINES_ERROR:
            state.pending_blank_line = True

        state.at_line_start = True

    def _end_field(self) -> None:
        state = self.state
        field = "".join(state.current_field)

        error = validate_field(field)
        if error is not None:
            raise QuoteValidationError(
                error,
                row=state.accepted_row_count + 1,
                col=len(state.row_fields) + 1,
                value=field,
            )

        state.row_fields.append(finalize_field(field))
        state.current_field = []

    def _end_row(self) -> None:
        state = self.state
        found = len(state.row_fields)
        row = state.accepted_row_count + 1

        if state.pending_blank_line:
            expected = state.expected_column_count or found
            raise RowFieldCountMismatchError(row=row, expected=expected, found=0)

        if state.expected_column_count is not None and found != state.expected_column_count:
            raise RowFieldCountMismatchError(row=row, expected=state.expected_column_count, found=found)

        state.expected_column_count = found

        if self.has_header and not self.table.has_headers():
            self.table.set_header(state.row_fields)
        else:
            self.table.set_data(state.row_fields, found)
            state.accepted_row_count += 1

        state.row_fields = []


def parse(
    text: str,
    delimiter: str = ",",
    has_header: bool = False,
    *,
    blank_lines: str = BLANK_LINES_SKIP
) -> TableData:
    """
    Parse delimited text into a table.

    Args:
        text: Complete, already decoded file contents
        delimiter: Single field separator character (',' for CSV, tab for TSV)
        has_header: Whether the first row is a header row
        blank_lines: 'skip' to ignore blank lines, 'error' to reject a blank
            line that is followed by another row

    Returns:
        The parsed table

    Raises:
        QuoteValidationError: If a field's quotes are malformed
        RowFieldCountMismatchError: If a row's field count differs from the previous row
        ValueError: If the delimiter or blank_lines mode is not usable
    """
    if len(delimiter) != 1 or delimiter in (QUOTE, NEWLINE, CARRIAGE_RETURN):
        raise ValueError(f"Delimiter must be a single character other than a quote or line break, got {delimiter!r}")
    if blank_lines not in BLANK_LINE_MODES:
        raise ValueError(f"Unknown blank_lines mode: {blank_lines!r} (expected one of {', '.join(BLANK_LINE_MODES)})")

    scanner = RowScanner(delimiter, has_header, blank_lines)
    for c in text.replace(CARRIAGE_RETURN, ""):
        scanner.feed(c)
    return scanner.finish()
