"""Keyword search over component paths, and relative path validation."""

import logging
import os
import re
from pathlib import Path, PurePosixPath

from frontend_components.storage.filesystem import is_within, walk_files

logger = logging.getLogger(__name__)

DEFAULT_MAX_RESULTS = 30

_SEPARATORS = re.compile(r"[\\/]")


def search_components(
    root: Path,
    query: str,
    framework: str | None = None,
    max_results: int = DEFAULT_MAX_RESULTS,
) -> list[str]:
    """Search component files by keywords in their relative path.

    Every whitespace-separated term of the query must appear, case
    insensitively, somewhere in the file's path relative to the root.

    Args:
        root: Component root directory.
        query: Search keywords (e.g. "badge dark").
        framework: Restrict the search to one framework directory.
        max_results: Maximum number of matches to return.

    Returns:
        Matching relative paths (POSIX separators) in traversal order.
    """
    terms = query.lower().split()
    search_dir = root / framework if framework else root

    results: list[str] = []

    def collect(file_path: Path) -> None:
        relative = file_path.relative_to(root).as_posix()
        lowered = relative.lower()
        if all(term in lowered for term in terms):
            results.append(relative)

    if search_dir.is_dir():
        walk_files(search_dir, collect)

    logger.debug(f"Search '{query}' in {search_dir}: {len(results)} match(es)")
    return results[:max_results]


def is_safe_path(root: Path, relative_path: str) -> bool:
    """Check that a relative path stays inside the component root.

    The check is lexical and never touches the filesystem.

    Args:
        root: Component root directory.
        relative_path: Caller-supplied path relative to the root.

    Returns:
        False for empty or absolute paths, paths with a ``..`` segment,
        and paths that would resolve outside root.
    """
    if not relative_path or "\x00" in relative_path:
        return False

    if os.path.isabs(relative_path) or PurePosixPath(relative_path).is_absolute():
        return False

    if ".." in _SEPARATORS.split(relative_path):
        return False

    return is_within(root, os.path.join(root, relative_path))
