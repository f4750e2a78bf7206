"""
Error types raised while reading delimited tables.

Three families never overlap:
- Validation errors (TableDataValidationError): the text itself is malformed.
  Quote errors point at a single field, row-shape errors at a whole row.
- File errors (TableFileError): the file could not be opened, read or decoded.
- Configuration errors (ConfigError): reader options are invalid.
"""

from enum import Enum
from typing import Any, Tuple


# Longest part of an offending value shown in an error message
MAX_VALUE_DISPLAY_LEN = 64


class QuoteErrorKind(Enum):
    """Kinds of quoting mistakes a single field can contain."""

    INVALID_QUOTE = "Unbalanced quote error"
    INVALID_ESCAPE = "Unquoted field with escaped quote error"
    UNTERMINATED_QUOTE = "Unterminated outer quote error"

    def __str__(self) -> str:
        return self.value


class TableDataValidationError(Exception):
    """Base class for errors caused by malformed table content."""

    def _fields(self) -> Tuple[Any, ...]:
        raise NotImplementedError

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._fields() == other._fields()  # type: ignore[attr-defined]

    def __hash__(self) -> int:
        return hash((type(self), self._fields()))


class QuoteValidationError(TableDataValidationError):
    """
    A field whose quotes are misplaced.

    Attributes:
        subtype: Which quoting rule was broken
        row: 1-indexed data row (the header does not count)
        col: 1-indexed column of the field within its row
        value: Raw text of the field, before any unescaping
    """

    def __init__(self, subtype: QuoteErrorKind, row: int, col: int, value: str):
        self.subtype = subtype
        self.row = row
        self.col = col
        self.value = value
        super().__init__(str(self))

    def _fields(self) -> Tuple[Any, ...]:
        return (self.subtype, self.row, self.col, self.value)

    def __str__(self) -> str:
        return (
            f"At row {self.row}. {self.subtype} in column: {self.col}, "
            f"value: {self.value[:MAX_VALUE_DISPLAY_LEN]}"
        )

    def __repr__(self) -> str:
        return (
            f"QuoteValidationError(subtype={self.subtype.name}, row={self.row}, "
            f"col={self.col}, value={self.value!r})"
        )


class RowFieldCountMismatchError(TableDataValidationError):
    """
    A row whose field count differs from the row before it.

    Attributes:
        row: 1-indexed data row (the header does not count)
        expected: Field count of the preceding row
        found: Field count of the offending row
    """

    def __init__(self, row: int, expected: int, found: int):
        self.row = row
        self.expected = expected
        self.found = found
        super().__init__(str(self))

    def _fields(self) -> Tuple[Any, ...]:
        return (self.row, self.expected, self.found)

    def __str__(self) -> str:
        return (
            f"At row {self.row}. Field count mismatch. "
            f"Expected: {self.expected}, Found: {self.found}"
        )

    def __repr__(self) -> str:
        return (
            f"RowFieldCountMismatchError(row={self.row}, "
            f"expected={self.expected}, found={self.found})"
        )


class TableFileError(Exception):
    """A table file that could not be opened, read or decoded."""

    def __init__(self, path: Any, reason: str):
        self.path = str(path)
        self.reason = reason
        super().__init__(f"Cannot read '{self.path}': {reason}")


class ConfigError(ValueError):
    """Invalid reader options."""
    pass
