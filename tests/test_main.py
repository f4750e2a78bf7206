"""
Tests for the table-reader command line.
"""

import json
import pytest
import sys
from pathlib import Path

# Add src directory to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from table_reader.main import (
    EXIT_CONFIG_ERROR,
    EXIT_FILE_ERROR,
    EXIT_INVALID_CONTENT,
    EXIT_OK,
    main,
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ('TABLE_READER_HAS_HEADER', 'TABLE_READER_BLANK_LINES', 'TABLE_READER_FORMAT'):
        monkeypatch.delenv(name, raising=False)


def test_main_valid_file(tmp_path, capsys):
    """Test the summary of a valid file."""
    path = tmp_path / "people.csv"
    path.write_text("name,age\nJohn,30\nJane,NA\n", encoding="utf-8")

    code = main([str(path), "--header"])
    out = capsys.readouterr().out

    assert code == EXIT_OK
    assert "=== Reading Table: people.csv ===" in out
    assert "✓ Columns: 2" in out
    assert "✓ Rows: 2" in out
    assert "Header: name, age" in out
    assert "{'name': 'John', 'age': '30'}" in out


def test_main_invalid_content(tmp_path, capsys):
    """Test that validation errors print the formatted message."""
    path = tmp_path / "bad.csv"
    path.write_text("Name,Type,Value\nvalue1,string", encoding="utf-8")

    code = main([str(path), "--header"])
    out = capsys.readouterr().out

    assert code == EXIT_INVALID_CONTENT
    assert "At row 1. Field count mismatch. Expected: 3, Found: 2" in out


def test_main_missing_file(tmp_path, capsys):
    """Test the exit code for unreadable files."""
    code = main([str(tmp_path / "missing.csv")])

    assert code == EXIT_FILE_ERROR
    assert "Could not open file." in capsys.readouterr().out


def test_main_unknown_extension(tmp_path, capsys):
    """Test that an unsupported extension is a usage error."""
    path = tmp_path / "data.xlsx"
    path.write_text("a,b\n", encoding="utf-8")

    assert main([str(path)]) == EXIT_CONFIG_ERROR


def test_main_format_override(tmp_path, capsys):
    """Test that --format picks the loader."""
    path = tmp_path / "data.dat"
    path.write_text("a\tb\n1\t2\n", encoding="utf-8")

    code = main([str(path), "--format", "tsv", "--preview", "0"])
    out = capsys.readouterr().out

    assert code == EXIT_OK
    assert "✓ Columns: 2" in out
    assert "First" not in out


def test_main_options_file(tmp_path, capsys):
    """Test reader options from a JSON file."""
    data = tmp_path / "data.csv"
    data.write_text("name,age\nJane,NA\n", encoding="utf-8")
    options = tmp_path / "options.json"
    options.write_text(json.dumps({"has_header": True, "null_values": ["NA"]}), encoding="utf-8")

    code = main([str(data), "--options", str(options)])
    out = capsys.readouterr().out

    assert code == EXIT_OK
    assert "{'name': 'Jane', 'age': None}" in out


def test_main_invalid_options_file(tmp_path, capsys):
    """Test that invalid options are reported as configuration errors."""
    data = tmp_path / "data.csv"
    data.write_text("a\n", encoding="utf-8")
    options = tmp_path / "options.json"
    options.write_text(json.dumps({"delimiter": ";"}), encoding="utf-8")

    code = main([str(data), "--options", str(options)])

    assert code == EXIT_CONFIG_ERROR
    assert "Configuration error" in capsys.readouterr().out


def test_main_blank_lines_flag(tmp_path, capsys):
    """Test that --blank-lines reaches the reader."""
    path = tmp_path / "gaps.csv"
    path.write_text("a,b\n\nc,d\n", encoding="utf-8")

    assert main([str(path)]) == EXIT_OK
    assert main([str(path), "--blank-lines", "error"]) == EXIT_INVALID_CONTENT


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
