"""Tolerant filesystem helpers used while indexing and searching."""

import logging
import os
from collections.abc import Callable
from pathlib import Path

logger = logging.getLogger(__name__)


def list_directory(path: Path) -> list[str]:
    """List entry names of a directory, sorted by name.

    Missing or unreadable directories read as empty.

    Args:
        path: Directory to list.

    Returns:
        Sorted entry names.
    """
    try:
        return sorted(os.listdir(path))
    except FileNotFoundError:
        return []
    except OSError as e:
        logger.warning(f"Cannot read directory {path}: {e}")
        return []


def is_directory(path: Path) -> bool:
    """Check whether a path is a directory, treating errors as False."""
    try:
        return path.is_dir()
    except OSError:
        return False


def walk_files(directory: Path, callback: Callable[[Path], None]) -> None:
    """Recursively visit every non-directory entry under a directory.

    Entries are visited depth-first in sorted order.

    Args:
        directory: Directory to walk.
        callback: Called with the full path of each file.
    """
    for entry in list_directory(directory):
        full_path = directory / entry
        if is_directory(full_path):
            walk_files(full_path, callback)
        else:
            callback(full_path)


def is_within(root: Path, path: str | Path) -> bool:
    """Check that a path, once normalised, stays inside root.

    Purely lexical: no filesystem access takes place.

    Args:
        root: Root directory.
        path: Candidate path (absolute, or relative to the cwd).

    Returns:
        True if path is root itself or a descendant of it.
    """
    root_str = os.path.normpath(str(root))
    path_str = os.path.normpath(str(path))
    try:
        return os.path.commonpath([root_str, path_str]) == root_str
    except ValueError:
        # Mixed absolute/relative paths or different drives
        return False
