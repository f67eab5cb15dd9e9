"""Storage utilities for frontend-components."""

from frontend_components.storage.filesystem import (
    is_directory,
    is_within,
    list_directory,
    walk_files,
)
from frontend_components.storage.paths import (
    CONFIG_FILENAME,
    expand_path,
    get_components_dir,
    get_config_path,
    get_default_components_dir,
    get_project_root,
)

__all__ = [
    "CONFIG_FILENAME",
    "expand_path",
    "get_components_dir",
    "get_config_path",
    "get_default_components_dir",
    "get_project_root",
    "is_directory",
    "is_within",
    "list_directory",
    "walk_files",
]
