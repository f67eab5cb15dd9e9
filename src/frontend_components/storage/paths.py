"""
Path utilities for frontend-components.

Provides consistent path resolution for the component root and the
configuration file.
"""

import os
from pathlib import Path

CONFIG_FILENAME = "frontend-components.yaml"


def get_project_root() -> Path:
    """
    Get the directory two levels above the package.

    For a source checkout this is the repository root (``src/`` sits in
    between); for a plugin install it is the plugin's server directory.

    Returns:
        Path to the project root.
    """
    return Path(__file__).resolve().parents[3]


def get_default_components_dir() -> Path:
    """
    Get the component root used when nothing else is configured.

    Resolution order:
    1. CLAUDE_PLUGIN_ROOT environment variable: <plugin root>/components
    2. Default: <project root>/components

    Returns:
        Path to the component root.
    """
    plugin_root = os.environ.get("CLAUDE_PLUGIN_ROOT")
    if plugin_root:
        return expand_path(plugin_root) / "components"
    return get_project_root() / "components"


def get_components_dir(configured: str | Path | None = None) -> Path:
    """
    Resolve the component root directory.

    Args:
        configured: Explicitly configured directory, if any.

    Returns:
        Absolute path to the component root.
    """
    if configured:
        return expand_path(configured)
    return get_default_components_dir()


def get_config_path() -> Path:
    """
    Get the path to the configuration file.

    Resolution order:
    1. FRONTEND_COMPONENTS_CONFIG environment variable
    2. Default: ./frontend-components.yaml

    Returns:
        Path to the configuration file (which may not exist).
    """
    env_path = os.environ.get("FRONTEND_COMPONENTS_CONFIG")
    if env_path:
        return expand_path(env_path)
    return Path.cwd() / CONFIG_FILENAME


def expand_path(path: str | Path) -> Path:
    """
    Expand a path string, handling ~ and environment variables.

    Args:
        path: Path string or Path object.

    Returns:
        Expanded and resolved Path.
    """
    if isinstance(path, str):
        path = os.path.expandvars(path)
        path = os.path.expanduser(path)
    return Path(path).resolve()
