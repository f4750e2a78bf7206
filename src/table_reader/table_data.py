"""
Rectangular table container produced by the reader.

Values are stored flat in row-major order. Once a column count is known,
every header or row added afterwards must have exactly that many fields.
"""

from typing import Iterator, List, Sequence, Tuple


class TableData:
    """
    Header plus row-major field values with fixed column count.

    A table starts empty (0 columns, 0 rows). The reader sets the header at
    most once and then appends rows; callers treat it as read-only.
    """

    def __init__(self):
        """Initialize an empty table."""
        self._header: List[str] = []
        self._data: List[str] = []
        self._dims: Tuple[int, int] = (0, 0)

    def set_header(self, header: Sequence[str]) -> None:
        """
        Replace the header.

        Args:
            header: Header field values

        Raises:
            RuntimeError: If the table already has a different column count
        """
        if self.column_count and len(header) != self.column_count:
            raise RuntimeError("TableData: column mismatch when attempting to update the header field")

        self._header = list(header)
        self._dims = (len(self._header), self.row_count)

    def set_data(self, data: Sequence[str], cols: int) -> None:
        """
        Append one or more rows of values.

        Args:
            data: Field values in row-major order
            cols: Number of columns the values are laid out in

        Raises:
            RuntimeError: If cols disagrees with the table's column count,
                or data does not fill a whole number of rows
        """
        if cols <= 0 or (self.column_count and cols != self.column_count):
            raise RuntimeError("TableData: column mismatch when attempting to update the data field")
        if len(data) % cols:
            raise RuntimeError(f"TableData: {len(data)} values do not fill rows of {cols} columns")

        self._data.extend(data)
        self._dims = (cols, len(self._data) // cols)

    @property
    def header(self) -> Tuple[str, ...]:
        return tuple(self._header)

    @property
    def data(self) -> Tuple[str, ...]:
        return tuple(self._data)

    @property
    def column_count(self) -> int:
        return self._dims[0]

    @property
    def row_count(self) -> int:
        return self._dims[1]

    def has_headers(self) -> bool:
        return len(self._header) > 0

    def has_data(self) -> bool:
        return len(self._data) > 0

    def row(self, index: int) -> Tuple[str, ...]:
        """
        Get the values of one data row.

        Args:
            index: 0-indexed row number (negative indices count from the end)

        Raises:
            IndexError: If the row does not exist
        """
        if index < 0:
            index += self.row_count
        if not 0 <= index < self.row_count:
            raise IndexError(f"Row index {index} out of range (table has {self.row_count} rows)")
        start = index * self.column_count
        return tuple(self._data[start:start + self.column_count])

    def cell(self, row: int, col: int) -> str:
        """Get a single value by 0-indexed row and column."""
        if not 0 <= col < self.column_count:
            raise IndexError(f"Column index {col} out of range (table has {self.column_count} columns)")
        return self.row(row)[col]

    def iter_rows(self) -> Iterator[Tuple[str, ...]]:
        for index in range(self.row_count):
            yield self.row(index)

    def __len__(self) -> int:
        return self.column_count * self.row_count

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TableData):
            return NotImplemented
        return (self._header, self._data, self._dims) == (other._header, other._data, other._dims)

    def __repr__(self) -> str:
        return f"TableData(columns={self.column_count}, rows={self.row_count}, header={self._header!r})"
