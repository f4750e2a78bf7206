"""
Base class for all table file loaders.

This module defines the common interface and shared functionality
that all loader types (CSV, TSV) provide: reading a whole file into memory
and handing its text to the reader with the loader's delimiter.
"""

import asyncio
from pathlib import Path
from typing import Optional, Tuple, Union

from table_reader.errors import TableFileError
from table_reader.reader import BLANK_LINES_SKIP, parse
from table_reader.table_data import TableData

PathLike = Union[str, Path]


class BaseLoader:
    """
    Base class for all table file loaders.

    Each loader type should inherit from this class and set the
    LOADER_TYPE, DELIMITER and EXTENSIONS class attributes.
    """

    # Class attributes identifying the loader
    LOADER_TYPE: Optional[str] = None
    DELIMITER: Optional[str] = None
    EXTENSIONS: Tuple[str, ...] = ()

    # utf-8-sig drops a leading byte-order mark so it never ends up in the first field
    ENCODING = "utf-8-sig"

    def __init__(self):
        """Initialize the loader."""
        if self.LOADER_TYPE is None:
            raise NotImplementedError(f"{self.__class__.__name__} must define LOADER_TYPE")
        if self.DELIMITER is None:
            raise NotImplementedError(f"{self.__class__.__name__} must define DELIMITER")

    def handles(self, path: PathLike) -> bool:
        """
        Check whether this loader is responsible for a file.

        Args:
            path: Path to the file

        Returns:
            True if the file's extension is one of EXTENSIONS
        """
        return Path(path).suffix.lower() in self.EXTENSIONS

    def read_text(self, path: PathLike) -> str:
        """
        Read an entire file into memory as text.

        Args:
            path: Path to the file

        Returns:
            The decoded file contents

        Raises:
            TableFileError: If the file cannot be opened, read or decoded
        """
        try:
            with open(path, 'r', encoding=self.ENCODING, newline='') as f:
                return f.read()
        except UnicodeDecodeError as e:
            raise TableFileError(path, f"not valid UTF-8 text ({e.reason} at byte {e.start})") from e
        except OSError as e:
            raise TableFileError(path, e.strerror or str(e)) from e

    def load_file(
        self,
        path: PathLike,
        has_header: bool = False,
        blank_lines: str = BLANK_LINES_SKIP
    ) -> TableData:
        """
        Read and parse a single table file.

        Args:
            path: Path to the file
            has_header: Whether the first row is a header row
            blank_lines: Blank line handling passed to the reader

        Returns:
            The parsed table

        Raises:
            TableFileError: If the file cannot be read
            TableDataValidationError: If the file content is malformed
        """
        text = self.read_text(path)
        return parse(text, self.DELIMITER, has_header, blank_lines=blank_lines)

    async def load_file_async(
        self,
        path: PathLike,
        has_header: bool = False,
        blank_lines: str = BLANK_LINES_SKIP
    ) -> TableData:
        """
        Read and parse a file on a worker thread.

        The event loop stays responsive while the file is read and parsed;
        errors propagate exactly as from load_file.
        """
        return await asyncio.to_thread(self.load_file, path, has_header, blank_lines)
