"""
Open-file state for applications that show one table at a time.

A new file only replaces the current one after it has been read and parsed
completely; a failed open leaves the current table as it was.
"""

from pathlib import Path
from typing import Optional, Union

from table_reader.errors import TableDataValidationError
from table_reader.loaders import load_table
from table_reader.reader import BLANK_LINES_SKIP
from table_reader.table_data import TableData


class OpenFileInfo:
    """A successfully opened file and its table."""

    def __init__(self, name: str, data: TableData):
        self.name = name
        self.data = data

    def __repr__(self) -> str:
        return f"OpenFileInfo(name={self.name!r}, data={self.data!r})"


class TableSession:
    """Holds the currently open table file."""

    def __init__(self):
        self.current: Optional[OpenFileInfo] = None

    def open_file(
        self,
        path: Union[str, Path],
        has_header: bool = False,
        blank_lines: str = BLANK_LINES_SKIP,
        loader_type: Optional[str] = None
    ) -> OpenFileInfo:
        """
        Open a table file and make it current.

        Args:
            path: Path to the file
            has_header: Whether the first row is a header row
            blank_lines: Blank line handling passed to the reader
            loader_type: Force a loader type instead of using the extension

        Returns:
            The newly opened file

        Raises:
            ValueError: If no loader matches
            TableFileError: If the file cannot be read
            TableDataValidationError: If the file content is malformed
        """
        data = load_table(path, has_header, blank_lines, loader_type)
        self.current = OpenFileInfo(str(path), data)
        return self.current

    def close(self) -> None:
        self.current = None

    @staticmethod
    def message_for(error: Exception) -> str:
        """Render a user-facing message for a failed open."""
        if isinstance(error, TableDataValidationError):
            return str(error)
        # TableFileError, or ValueError for an unsupported extension
        return f"Could not open file. {error}"
