"""Reader configuration from environment variables and options files."""
import json
import os
from pathlib import Path
from typing import Any, Dict, Optional
from dotenv import load_dotenv

from table_reader.errors import ConfigError
from table_reader.utils.schema_utils import SCHEMA_DIR, validate_config

# Load environment variables from .env file
load_dotenv()

OPTIONS_SCHEMA_PATH = SCHEMA_DIR / "reader_options.json"

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off", "")


def _env_flag(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ConfigError(f"Environment variable {name} must be a boolean, got '{raw}'")


class ReaderConfig:
    """Reader defaults taken from the environment."""

    def __init__(self):
        self.has_header = _env_flag('TABLE_READER_HAS_HEADER', False)
        self.blank_lines = os.getenv('TABLE_READER_BLANK_LINES', 'skip')
        self.format = os.getenv('TABLE_READER_FORMAT') or None

    def to_options(self) -> Dict[str, Any]:
        """Return the defaults as a validated options dict."""
        options: Dict[str, Any] = {
            'has_header': self.has_header,
            'blank_lines': self.blank_lines,
        }
        if self.format:
            options['format'] = self.format
        validate_config(options, OPTIONS_SCHEMA_PATH, "environment")
        return options


def load_reader_options(path: Path, defaults: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Load a reader options file and merge it over defaults.

    Args:
        path: Path to a JSON options file
        defaults: Options used for keys the file does not set
            (ReaderConfig().to_options() when omitted)

    Returns:
        The merged options

    Raises:
        ConfigError: If the file cannot be read, is not JSON, or fails schema validation
    """
    path = Path(path)
    try:
        with open(path, 'r', encoding='utf-8') as f:
            file_options = json.load(f)
    except OSError as e:
        raise ConfigError(f"Cannot read options file '{path}': {e.strerror or e}") from e
    except json.JSONDecodeError as e:
        raise ConfigError(f"Options file '{path}' is not valid JSON: {e}") from e

    validate_config(file_options, OPTIONS_SCHEMA_PATH, path.name)

    options = dict(defaults) if defaults is not None else ReaderConfig().to_options()
    options.update(file_options)
    return options
