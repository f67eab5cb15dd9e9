"""
Configuration loader for frontend-components.

Loads and merges configuration from multiple sources:
1. Default values
2. Config file ($FRONTEND_COMPONENTS_CONFIG or ./frontend-components.yaml)
3. Environment variables (FRONTEND_COMPONENTS_*)
"""

import os
from pathlib import Path
from typing import Any

import yaml

from frontend_components.config.merger import deep_merge, set_nested_value
from frontend_components.config.schema import Config
from frontend_components.storage.paths import get_components_dir, get_config_path

ENV_PREFIX = "FRONTEND_COMPONENTS_"

# Handled by get_config_path, not by overrides
_RESERVED_ENV_VARS = {f"{ENV_PREFIX}CONFIG"}

# Nested sections; anything else maps to a top-level key
_SECTIONS = ("server", "search", "logging")


class ConfigurationError(Exception):
    """Raised when configuration loading or validation fails."""

    pass


def load_yaml_file(path: Path) -> dict[str, Any]:
    """
    Load a YAML configuration file.

    Args:
        path: Path to the YAML file.

    Returns:
        Parsed configuration dictionary (empty if the file does not exist).

    Raises:
        ConfigurationError: If the file cannot be read or parsed.
    """
    try:
        with open(path, encoding="utf-8") as f:
            content = yaml.safe_load(f)
    except FileNotFoundError:
        return {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e
    except OSError as e:
        raise ConfigurationError(f"Cannot read {path}: {e}") from e

    if content is None:
        return {}
    if not isinstance(content, dict):
        raise ConfigurationError(f"Expected a mapping at the top of {path}")
    return content


def env_key_to_path(key: str) -> str:
    """
    Convert an environment variable name to a config key path.

    FRONTEND_COMPONENTS_SEARCH_MAX_RESULTS -> search.max_results
    FRONTEND_COMPONENTS_COMPONENTS_DIR -> components_dir

    Args:
        key: Environment variable name, including the prefix.

    Returns:
        Dot-separated key path.
    """
    name = key[len(ENV_PREFIX) :].lower()
    for section in _SECTIONS:
        if name.startswith(f"{section}_"):
            return f"{section}.{name[len(section) + 1 :]}"
    return name


def apply_env_overrides(config: dict[str, Any]) -> dict[str, Any]:
    """
    Apply environment variable overrides to configuration.

    Values are kept as strings; the schema coerces them to the field types
    on validation, so a string field never turns into a number or a bool.

    Args:
        config: Configuration dictionary to modify.

    Returns:
        Configuration with environment overrides applied.
    """
    for key, value in os.environ.items():
        if not key.startswith(ENV_PREFIX) or key in _RESERVED_ENV_VARS:
            continue

        config = set_nested_value(config, env_key_to_path(key), value)

    return config


def load_config(
    config_path: Path | None = None,
    skip_env: bool = False,
) -> Config:
    """
    Load and merge configuration from all sources.

    Args:
        config_path: Config file to read. Defaults to get_config_path().
        skip_env: Skip environment variable overrides.

    Returns:
        Merged and validated Config object.

    Raises:
        ConfigurationError: If configuration is invalid.
    """
    config_dict = Config().model_dump()

    path = config_path or get_config_path()
    if path.exists():
        config_dict = deep_merge(config_dict, load_yaml_file(path))
    elif config_path is not None:
        raise ConfigurationError(f"Config file not found: {path}")

    if not skip_env:
        config_dict = apply_env_overrides(config_dict)

    try:
        return Config.model_validate(config_dict)
    except Exception as e:
        raise ConfigurationError(f"Configuration validation failed: {e}") from e


def resolve_components_dir(config: Config) -> Path:
    """
    Resolve the component root for a configuration.

    Args:
        config: Loaded configuration.

    Returns:
        Absolute path to the component root.
    """
    return get_components_dir(config.components_dir)
