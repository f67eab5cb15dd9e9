"""
Pydantic configuration schema for frontend-components.
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from frontend_components.catalog.search import DEFAULT_MAX_RESULTS

DEFAULT_INSTRUCTIONS = """\
Browse and fetch ready-made UI components.

- list_frameworks: available frameworks and their dependencies
- list_components: component types and variants of a framework
- get_component: source of one variant by framework/category/type/variant
- search_components: find components by keywords in their paths
- get_component_by_path: source of a component by its relative path
"""


class ServerConfig(BaseModel):
    """MCP server identity."""

    model_config = ConfigDict(extra="allow")

    name: str = "frontend-components"
    instructions: str = DEFAULT_INSTRUCTIONS


class SearchConfig(BaseModel):
    """Keyword search configuration."""

    max_results: int = Field(default=DEFAULT_MAX_RESULTS, ge=1)


class LoggingConfig(BaseModel):
    """Logging configuration. Console output always goes to stderr."""

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    file: Path | None = None

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value


class Config(BaseModel):
    """Root configuration model."""

    model_config = ConfigDict(extra="allow")

    # None means CLAUDE_PLUGIN_ROOT/components or the project default
    components_dir: Path | None = None

    server: ServerConfig = Field(default_factory=ServerConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
