"""
Utility modules for the table-reader project.

This package contains reusable utility functions for:
- Field quote validation and unescaping (field_utils)
- Schema validation of reader options (schema_utils)
- Data access on parsed tables (data_utils)
"""

from .field_utils import has_outer_quotes, validate_field, finalize_field
from .schema_utils import load_schema, validate_config
from .data_utils import to_records, get_column, to_dataframe

__all__ = [
    'has_outer_quotes',
    'validate_field',
    'finalize_field',
    'load_schema',
    'validate_config',
    'to_records',
    'get_column',
    'to_dataframe',
]
