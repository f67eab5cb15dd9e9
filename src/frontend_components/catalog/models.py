"""
Catalogue models.

Defines framework descriptors, the immutable component catalogue built
at startup, and the result type returned by every query operation.
"""

from collections.abc import Mapping
from enum import Enum
from pathlib import Path
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field, field_validator


class LayoutKind(str, Enum):
    """On-disk layout convention of a framework directory."""

    NESTED = "nested"  # category/type/variant.ext
    COMPONENT_DIR = "component_dir"  # type/variant.ext
    FLAT = "flat"  # variant.ext
    SPLIT = "split"  # css/variant.css + plugins/type/variant.{ts,css}


class Framework(BaseModel):
    """Descriptor for one component source."""

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., description="Framework identifier (directory name)")
    name: str = Field(..., description="Display name")
    ext: str = Field(..., description="Component file extension, including the dot")
    deps: str = Field(..., description="Dependency note shown to callers")
    layout: LayoutKind = Field(..., description="On-disk layout convention")
    script_ext: str | None = Field(
        default=None,
        description="Script extension for the plugins section of a split layout",
    )


class ComponentCategory(BaseModel):
    """Component types of one category, each with its ordered variants."""

    model_config = ConfigDict(frozen=True)

    name: str
    types: Mapping[str, tuple[str, ...]] = Field(default_factory=dict, validate_default=True)

    @field_validator("types")
    @classmethod
    def _freeze_types(cls, value: Mapping[str, tuple[str, ...]]) -> Mapping[str, tuple[str, ...]]:
        return MappingProxyType(dict(value))

    @property
    def variant_count(self) -> int:
        """Total number of variants across all types."""
        return sum(len(variants) for variants in self.types.values())


class FrameworkEntry(BaseModel):
    """An indexed framework: its descriptor plus discovered categories."""

    model_config = ConfigDict(frozen=True)

    framework: Framework
    categories: Mapping[str, ComponentCategory] = Field(default_factory=dict, validate_default=True)

    @field_validator("categories")
    @classmethod
    def _freeze_categories(cls, value: Mapping[str, ComponentCategory]) -> Mapping[str, ComponentCategory]:
        return MappingProxyType(dict(value))

    @property
    def variant_count(self) -> int:
        """Total number of variants across all categories."""
        return sum(category.variant_count for category in self.categories.values())

    @property
    def category_names(self) -> list[str]:
        """Category names in index order."""
        return list(self.categories.keys())


class Catalog(BaseModel):
    """The component catalogue.

    Built once by scanning the component root and never mutated afterwards.
    Frameworks whose directory was missing at build time are absent.
    """

    model_config = ConfigDict(frozen=True)

    root_dir: Path = Field(..., description="Component root directory")
    frameworks: Mapping[str, FrameworkEntry] = Field(default_factory=dict, validate_default=True)

    @field_validator("frameworks")
    @classmethod
    def _freeze_frameworks(cls, value: Mapping[str, FrameworkEntry]) -> Mapping[str, FrameworkEntry]:
        return MappingProxyType(dict(value))

    def get(self, framework_id: str) -> FrameworkEntry | None:
        """Get an indexed framework by id."""
        return self.frameworks.get(framework_id)

    @property
    def variant_count(self) -> int:
        """Total number of variants across all frameworks."""
        return sum(entry.variant_count for entry in self.frameworks.values())

    def __contains__(self, framework_id: object) -> bool:
        return framework_id in self.frameworks

    def __len__(self) -> int:
        return len(self.frameworks)


class ResultStatus(str, Enum):
    """Outcome of a query operation."""

    OK = "ok"
    UNKNOWN_FRAMEWORK = "unknown_framework"
    NOT_FOUND = "not_found"
    SUGGESTIONS = "suggestions"
    INVALID_PATH = "invalid_path"
    NO_RESULTS = "no_results"


class QueryResult(BaseModel):
    """Result of a catalogue query, rendered as Markdown text."""

    status: ResultStatus = ResultStatus.OK
    text: str  # Human-readable output returned to the caller
    matches: list[str] = Field(default_factory=list)  # Search hits or suggestions
    syntax: str | None = None  # Fence tag derived from the file extension
    path: str | None = None  # Resolved component path, if any

    @property
    def is_error(self) -> bool:
        """Whether the query failed to produce what was asked for."""
        return self.status is not ResultStatus.OK

    def __str__(self) -> str:
        return self.text
