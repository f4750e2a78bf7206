"""
Loader for tab separated value files.

Plain .txt files are read as tab separated too.
"""

from typing import Union
from pathlib import Path

from table_reader.table_data import TableData
from .base_loader import BaseLoader


class TsvLoader(BaseLoader):
    """Loader for .tsv and .txt files."""

    LOADER_TYPE = "tsv"
    DELIMITER = "\t"
    EXTENSIONS = (".tsv", ".txt")


# Create a singleton instance
tsv_loader = TsvLoader()


def from_tsv_file(path: Union[str, Path], has_header: bool = False) -> TableData:
    """Read a tab separated file into a table."""
    return tsv_loader.load_file(path, has_header)
