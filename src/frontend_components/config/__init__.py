"""Configuration for frontend-components."""

from frontend_components.config.loader import (
    ConfigurationError,
    apply_env_overrides,
    env_key_to_path,
    load_config,
    load_yaml_file,
    resolve_components_dir,
)
from frontend_components.config.merger import deep_merge, set_nested_value
from frontend_components.config.schema import Config, LoggingConfig, SearchConfig, ServerConfig

__all__ = [
    "Config",
    "ConfigurationError",
    "LoggingConfig",
    "SearchConfig",
    "ServerConfig",
    "apply_env_overrides",
    "deep_merge",
    "env_key_to_path",
    "load_config",
    "load_yaml_file",
    "resolve_components_dir",
    "set_nested_value",
]
