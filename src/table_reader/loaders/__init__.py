"""
Table file loaders package.

This package provides automatic discovery of all table file loaders.
Each loader inherits from BaseLoader and provides a consistent interface.

New loaders are automatically discovered - just create a new module in this
package with a class that inherits from BaseLoader and it will be picked up.
"""

import importlib
import inspect
import pkgutil
from pathlib import Path
from typing import List, Type, Dict, Optional, Union

from table_reader.reader import BLANK_LINES_SKIP
from table_reader.table_data import TableData
from .base_loader import BaseLoader
from .csv_loader import from_csv_file
from .tsv_loader import from_tsv_file


# Cache for discovered loaders
_LOADER_CACHE: Optional[List[Type[BaseLoader]]] = None


def _discover_loaders() -> List[Type[BaseLoader]]:
    """
    Automatically discover all loader classes in the loaders package.

    This function scans all Python files in the loaders directory,
    imports them, and finds all classes that inherit from BaseLoader
    (excluding BaseLoader itself).

    Returns:
        List of loader classes (not instances)
    """
    loaders: List[Type[BaseLoader]] = []

    package_dir = Path(__file__).parent
    package_name = __name__

    for finder, module_name, ispkg in pkgutil.iter_modules([str(package_dir)]):
        # Skip private modules and the base_loader module itself
        if module_name.startswith('_') or module_name == 'base_loader':
            continue

        try:
            full_module_name = f"{package_name}.{module_name}"
            module = importlib.import_module(full_module_name)
        except ImportError as e:
            print(f"[Loader Discovery] Warning: Failed to load module '{module_name}': {e}")
            continue

        for name, obj in inspect.getmembers(module, inspect.isclass):
            # Only count subclasses defined in this very module
            if (issubclass(obj, BaseLoader) and
                obj is not BaseLoader and
                obj.__module__ == full_module_name):
                loaders.append(obj)

    return loaders


def get_all_loader_classes() -> List[Type[BaseLoader]]:
    """
    Get all discovered loader classes.

    This function caches the results, so discovery only happens once.

    Returns:
        List of loader classes (not instances)
    """
    global _LOADER_CACHE

    if _LOADER_CACHE is None:
        _LOADER_CACHE = _discover_loaders()

    return _LOADER_CACHE


def get_all_loaders() -> List[BaseLoader]:
    """Get instances of all discovered loaders."""
    return [loader_class() for loader_class in get_all_loader_classes()]


def get_loader_by_type(loader_type: str) -> BaseLoader:
    """
    Get a loader instance by its type.

    Args:
        loader_type: The type of loader (e.g., 'csv', 'tsv')

    Returns:
        Loader instance

    Raises:
        ValueError: If loader type is not found
    """
    for loader_class in get_all_loader_classes():
        if loader_class.LOADER_TYPE == loader_type:
            return loader_class()

    raise ValueError(f"No loader found for type: {loader_type}")


def get_loader_for_path(path: Union[str, Path]) -> BaseLoader:
    """
    Pick a loader from a file's extension.

    Args:
        path: Path to the file

    Returns:
        Loader instance

    Raises:
        ValueError: If no loader handles the extension
    """
    for loader in get_all_loaders():
        if loader.handles(path):
            return loader

    raise ValueError(f"No loader found for file extension: '{Path(path).suffix}'")


def get_loader_info() -> Dict[str, Type[BaseLoader]]:
    """
    Get information about all available loaders.

    Returns:
        Dictionary mapping loader types to their classes
    """
    return {loader_class.LOADER_TYPE: loader_class for loader_class in get_all_loader_classes()}


def load_table(
    path: Union[str, Path],
    has_header: bool = False,
    blank_lines: str = BLANK_LINES_SKIP,
    loader_type: Optional[str] = None
) -> TableData:
    """
    Load a table file with the loader for its type or extension.

    Args:
        path: Path to the file
        has_header: Whether the first row is a header row
        blank_lines: Blank line handling passed to the reader
        loader_type: Force a loader type instead of using the extension

    Returns:
        The parsed table

    Raises:
        ValueError: If no loader matches
        TableFileError: If the file cannot be read
        TableDataValidationError: If the file content is malformed
    """
    loader = get_loader_by_type(loader_type) if loader_type else get_loader_for_path(path)
    return loader.load_file(path, has_header, blank_lines)


__all__ = [
    'BaseLoader',
    'get_all_loaders',
    'get_all_loader_classes',
    'get_loader_by_type',
    'get_loader_for_path',
    'get_loader_info',
    'load_table',
    'from_csv_file',
    'from_tsv_file',
]
