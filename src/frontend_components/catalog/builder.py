"""
Catalogue builder.

Scans the component root once and produces the immutable catalogue.
"""

import logging
from collections.abc import Mapping
from pathlib import Path

from frontend_components.catalog.frameworks import FRAMEWORKS
from frontend_components.catalog.layouts import get_layout
from frontend_components.catalog.models import Catalog, Framework, FrameworkEntry
from frontend_components.storage.filesystem import is_directory

logger = logging.getLogger(__name__)


def index_framework(root: Path, framework: Framework) -> FrameworkEntry | None:
    """Index a single framework directory.

    Args:
        root: Component root directory.
        framework: Framework descriptor.

    Returns:
        The framework entry, or None if its directory does not exist.
    """
    framework_dir = root / framework.id
    if not is_directory(framework_dir):
        logger.debug(f"Skipping {framework.id}: {framework_dir} not found")
        return None

    categories = get_layout(framework.layout).index(framework_dir, framework)
    return FrameworkEntry(framework=framework, categories=categories)


def build_catalog(
    root: Path,
    frameworks: Mapping[str, Framework] = FRAMEWORKS,
) -> Catalog:
    """Build the component catalogue from the filesystem.

    Missing framework directories are skipped, so the framework is simply
    absent from the result. Unreadable directories contribute no variants.

    Args:
        root: Component root directory.
        frameworks: Framework descriptors to index.

    Returns:
        The built catalogue.
    """
    entries: dict[str, FrameworkEntry] = {}

    for framework_id, framework in frameworks.items():
        entry = index_framework(root, framework)
        if entry is not None:
            entries[framework_id] = entry

    catalog = Catalog(root_dir=root, frameworks=entries)
    logger.info(
        f"Indexed {catalog.variant_count} components "
        f"from {len(catalog)} framework(s) in {root}"
    )
    return catalog
