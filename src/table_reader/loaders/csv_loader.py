"""
Loader for comma separated value files.
"""

from typing import Union
from pathlib import Path

from table_reader.table_data import TableData
from .base_loader import BaseLoader


class CsvLoader(BaseLoader):
    """Loader for .csv files."""

    LOADER_TYPE = "csv"
    DELIMITER = ","
    EXTENSIONS = (".csv",)


# Create a singleton instance
csv_loader = CsvLoader()


def from_csv_file(path: Union[str, Path], has_header: bool = False) -> TableData:
    """Read a comma separated file into a table."""
    return csv_loader.load_file(path, has_header)
