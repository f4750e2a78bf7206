import argparse
import sys
from pathlib import Path
from typing import List, Optional

from table_reader.config import ReaderConfig, load_reader_options
from table_reader.errors import ConfigError, TableDataValidationError, TableFileError
from table_reader.reader import BLANK_LINE_MODES
from table_reader.session import TableSession
from table_reader.utils.data_utils import to_records

EXIT_OK = 0
EXIT_INVALID_CONTENT = 1
EXIT_FILE_ERROR = 2
EXIT_CONFIG_ERROR = 3


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="table-reader",
        description="Read and validate a CSV or TSV file.",
    )
    parser.add_argument("file", type=Path, help="CSV (.csv) or TSV (.tsv, .txt) file")
    parser.add_argument("--header", action="store_const", const=True, default=None,
                        help="treat the first row as a header row")
    parser.add_argument("--format", choices=["csv", "tsv"],
                        help="file format (default: from the file extension)")
    parser.add_argument("--blank-lines", choices=list(BLANK_LINE_MODES),
                        help="skip blank lines, or reject a blank line followed by another row")
    parser.add_argument("--options", type=Path,
                        help="JSON reader options file")
    parser.add_argument("--preview", type=int, default=5, metavar="N",
                        help="number of data rows to print (default: 5)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    # Environment defaults, then options file, then command line flags
    try:
        options = ReaderConfig().to_options()
        if args.options:
            options = load_reader_options(args.options, options)
    except ConfigError as e:
        print(f"✗ Configuration error: {e}")
        return EXIT_CONFIG_ERROR

    if args.header is not None:
        options['has_header'] = args.header
    if args.format:
        options['format'] = args.format
    if args.blank_lines:
        options['blank_lines'] = args.blank_lines

    print(f"\n=== Reading Table: {args.file.name} ===")
    session = TableSession()
    try:
        info = session.open_file(
            args.file,
            has_header=options['has_header'],
            blank_lines=options['blank_lines'],
            loader_type=options.get('format'),
        )
    except TableDataValidationError as e:
        print(f"✗ Invalid content: {session.message_for(e)}")
        return EXIT_INVALID_CONTENT
    except TableFileError as e:
        print(f"✗ {session.message_for(e)}")
        return EXIT_FILE_ERROR
    except ValueError as e:
        print(f"✗ {session.message_for(e)}")
        return EXIT_CONFIG_ERROR

    table = info.data
    print(f"✓ Columns: {table.column_count}")
    print(f"✓ Rows: {table.row_count}")
    if table.has_headers():
        print(f"Header: {', '.join(table.header)}")

    if args.preview > 0 and table.has_data():
        print(f"\n=== First {min(args.preview, table.row_count)} Row(s) ===")
        for record in to_records(table, options.get('null_values'))[:args.preview]:
            print(record)

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
