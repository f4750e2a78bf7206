"""
CSV/TSV reading and validation.

Parse delimited text into a rectangular TableData, or fail with an error that
says exactly which row and column is malformed.
"""

from .errors import (
    ConfigError,
    QuoteErrorKind,
    QuoteValidationError,
    RowFieldCountMismatchError,
    TableDataValidationError,
    TableFileError,
)
from .table_data import TableData
from .reader import parse
from .loaders import from_csv_file, from_tsv_file, load_table

__all__ = [
    'parse',
    'TableData',
    'from_csv_file',
    'from_tsv_file',
    'load_table',
    'QuoteErrorKind',
    'TableDataValidationError',
    'QuoteValidationError',
    'RowFieldCountMismatchError',
    'TableFileError',
    'ConfigError',
]
