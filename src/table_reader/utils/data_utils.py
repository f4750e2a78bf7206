"""
Data access helpers for parsed tables.

This module provides functions for turning a TableData into records,
single columns, or a pandas DataFrame.
"""

from typing import Any, Dict, Iterable, List, Optional, Union

import pandas as pd

from table_reader.table_data import TableData


def to_records(
    table: TableData,
    null_values: Optional[Iterable[str]] = None
) -> List[Union[Dict[str, Any], List[Any]]]:
    """
    Convert table rows into records.

    Args:
        table: The parsed table
        null_values: Field values to replace with None

    Returns:
        List of rows - each row is a dict keyed by header (if the table has one)
        or a list of values (if it does not)
    """
    nulls = set(null_values or [])
    headers = table.header
    result: List[Union[Dict[str, Any], List[Any]]] = []

    for row in table.iter_rows():
        values = [None if value in nulls else value for value in row]
        if headers:
            result.append(dict(zip(headers, values)))
        else:
            result.append(values)

    return result


def get_column(table: TableData, column: Union[str, int]) -> List[str]:
    """
    Extract all values of a single column.

    Args:
        table: The parsed table
        column: Header name, or 0-indexed column position

    Returns:
        The column's values, top to bottom

    Raises:
        KeyError: If the column is not found
    """
    if isinstance(column, str):
        if column not in table.header:
            raise KeyError(f"Column '{column}' not found in header")
        index = table.header.index(column)
    else:
        index = column
        if not 0 <= index < table.column_count:
            raise KeyError(f"Column index {column} out of range (table has {table.column_count} columns)")

    return [row[index] for row in table.iter_rows()]


def to_dataframe(table: TableData) -> pd.DataFrame:
    """
    Build a pandas DataFrame from a table.

    All values stay strings; the header (when present) becomes the column labels.
    """
    columns = list(table.header) if table.has_headers() else list(range(table.column_count))
    return pd.DataFrame([list(row) for row in table.iter_rows()], columns=columns, dtype=str)
