"""
Component library for frontend-components.

Provides the query operations over a built catalogue. Every operation is a
read against the catalogue and the component files; none mutate state.
"""

import logging
from pathlib import Path

from frontend_components.catalog.builder import build_catalog
from frontend_components.catalog.exceptions import (
    ComponentNotFoundError,
    InvalidPathError,
    UnknownFrameworkError,
)
from frontend_components.catalog.frameworks import FRAMEWORKS, get_framework
from frontend_components.catalog.layouts import get_layout
from frontend_components.catalog.models import Catalog, QueryResult, ResultStatus
from frontend_components.catalog.search import (
    DEFAULT_MAX_RESULTS,
    is_safe_path,
    search_components,
)

logger = logging.getLogger(__name__)

ALL_FRAMEWORKS = "all"


def syntax_for(path: Path) -> str:
    """Get the code fence tag for a file (its extension without the dot)."""
    return path.suffix[1:]


def read_text(path: Path) -> str:
    """Read a whole component file as UTF-8."""
    return path.read_text(encoding="utf-8", errors="replace")


class ComponentLibrary:
    """Query interface over a component catalogue.

    Provides methods to:
    - List indexed frameworks and their components
    - Fetch a component by coordinates or by relative path
    - Search components by keyword
    """

    def __init__(self, catalog: Catalog, max_results: int = DEFAULT_MAX_RESULTS):
        """Initialize the library.

        Args:
            catalog: Built catalogue to serve.
            max_results: Cap on search matches and suggestions.
        """
        self.catalog = catalog
        self.max_results = max_results

    @classmethod
    def from_directory(cls, root: Path, max_results: int = DEFAULT_MAX_RESULTS) -> "ComponentLibrary":
        """Build the catalogue for a component root and wrap it."""
        return cls(build_catalog(root), max_results=max_results)

    @property
    def root(self) -> Path:
        """Component root directory."""
        return self.catalog.root_dir

    # -------------------------------------------------------------------------
    # Lookups
    # -------------------------------------------------------------------------

    def resolve_component(
        self,
        framework: str,
        category: str,
        component_type: str,
        variant: str,
    ) -> Path | None:
        """Resolve component coordinates to an existing file.

        Args:
            framework: Framework id.
            category: Category name.
            component_type: Component type name.
            variant: Variant name.

        Returns:
            Path to the component file, or None if it does not exist.

        Raises:
            UnknownFrameworkError: If the framework id is not a built-in.
        """
        descriptor = get_framework(framework)
        if descriptor is None:
            raise UnknownFrameworkError(framework)

        layout = get_layout(descriptor.layout)
        return layout.resolve(self.root / framework, descriptor, category, component_type, variant)

    def search_paths(self, query: str, framework: str | None = None) -> list[str]:
        """Search component paths by keyword.

        Args:
            query: Search keywords.
            framework: Framework id to restrict to, or None / "all".

        Returns:
            Matching relative paths, at most ``max_results``.

        Raises:
            UnknownFrameworkError: If the framework id is not a built-in.
        """
        if framework == ALL_FRAMEWORKS:
            framework = None
        if framework is not None and framework not in FRAMEWORKS:
            raise UnknownFrameworkError(framework)
        return search_components(self.root, query, framework, self.max_results)

    def read_component_file(self, relative_path: str) -> Path:
        """Validate a relative path and locate the file it names.

        Args:
            relative_path: Path relative to the component root.

        Returns:
            Absolute path to the component file.

        Raises:
            InvalidPathError: If the path is unsafe.
            ComponentNotFoundError: If no file exists at the path.
        """
        if not is_safe_path(self.root, relative_path):
            raise InvalidPathError(relative_path)

        file_path = self.root / relative_path
        if not file_path.is_file():
            raise ComponentNotFoundError(relative_path)
        return file_path

    # -------------------------------------------------------------------------
    # Query operations
    # -------------------------------------------------------------------------

    def list_frameworks(self) -> QueryResult:
        """List every indexed framework with its dependencies and size."""
        lines = []
        for framework_id, entry in self.catalog.frameworks.items():
            lines.append(f"## {entry.framework.name} (`{framework_id}`)")
            lines.append(f"- Dependencies: {entry.framework.deps}")
            lines.append(f"- Components: {entry.variant_count} variants")
            lines.append(f"- Categories: {', '.join(entry.category_names)}")
            lines.append("")

        return QueryResult(text="\n".join(lines))

    def list_components(self, framework: str, category: str | None = None) -> QueryResult:
        """List component types and variants of a framework.

        Args:
            framework: Framework id.
            category: Only list this category.

        Returns:
            QueryResult; UNKNOWN_FRAMEWORK if the framework is not indexed.
        """
        entry = self.catalog.get(framework)
        if entry is None:
            return QueryResult(
                status=ResultStatus.UNKNOWN_FRAMEWORK,
                text=str(UnknownFrameworkError(framework)),
            )

        if category:
            selected = {category: entry.categories[category]} if category in entry.categories else {}
        else:
            selected = entry.categories

        lines = [f"# {entry.framework.name} Components\n"]
        for category_name, category_data in selected.items():
            lines.append(f"## {category_name}")
            for type_name, variants in category_data.types.items():
                lines.append(f"- **{type_name}** ({len(variants)}): {', '.join(variants)}")
            lines.append("")

        return QueryResult(text="\n".join(lines))

    def get_component(
        self,
        framework: str,
        category: str,
        component_type: str,
        variant: str,
    ) -> QueryResult:
        """Fetch a component's source by its coordinates.

        When the coordinates do not resolve, the type and variant are used
        as search keywords to suggest close matches.

        Args:
            framework: Framework id.
            category: Category name.
            component_type: Component type name.
            variant: Variant name.

        Returns:
            QueryResult with the source, SUGGESTIONS, NOT_FOUND or
            UNKNOWN_FRAMEWORK.
        """
        try:
            file_path = self.resolve_component(framework, category, component_type, variant)
        except UnknownFrameworkError as e:
            return QueryResult(status=ResultStatus.UNKNOWN_FRAMEWORK, text=str(e))

        if file_path is None:
            suggestions = self.search_paths(f"{component_type} {variant}", framework)
            if suggestions:
                listing = "\n".join(f"- {suggestion}" for suggestion in suggestions)
                return QueryResult(
                    status=ResultStatus.SUGGESTIONS,
                    text=f"Component not found at exact path. Did you mean:\n{listing}",
                    matches=suggestions,
                )
            logger.info(f"Component not found: {framework}/{category}/{component_type}/{variant}")
            return QueryResult(status=ResultStatus.NOT_FOUND, text="Component not found.")

        try:
            code = read_text(file_path)
        except OSError as e:
            logger.warning(f"Cannot read component {file_path}: {e}")
            return QueryResult(status=ResultStatus.NOT_FOUND, text="Component not found.")

        syntax = syntax_for(file_path)
        descriptor = FRAMEWORKS[framework]

        return QueryResult(
            text=(
                f"# {variant}\n\n"
                f"**Framework:** {descriptor.name}\n"
                f"**Dependencies:** {descriptor.deps}\n\n"
                f"```{syntax}\n{code}\n```"
            ),
            syntax=syntax,
            path=file_path.relative_to(self.root).as_posix(),
        )

    def search(self, query: str, framework: str = ALL_FRAMEWORKS) -> QueryResult:
        """Search components by keyword.

        Args:
            query: Search keywords (e.g. "badge dark").
            framework: Framework id, or "all".

        Returns:
            QueryResult listing matching paths, or NO_RESULTS.
        """
        try:
            results = self.search_paths(query, framework)
        except UnknownFrameworkError as e:
            return QueryResult(status=ResultStatus.UNKNOWN_FRAMEWORK, text=str(e))

        if not results:
            return QueryResult(
                status=ResultStatus.NO_RESULTS,
                text=f'No components found for "{query}". Try broader keywords.',
            )

        lines = [f'# Search: "{query}"\n', f"Found {len(results)} results:\n"]
        for result in results:
            lines.append(f"- `{result}`")

        return QueryResult(text="\n".join(lines), matches=results)

    def get_component_by_path(self, path: str) -> QueryResult:
        """Fetch a component's source by its path relative to the root.

        Args:
            path: Relative path, as returned by search.

        Returns:
            QueryResult with the source, INVALID_PATH or NOT_FOUND.
        """
        try:
            file_path = self.read_component_file(path)
        except InvalidPathError as e:
            logger.warning(f"Rejected component path: {path!r}")
            return QueryResult(status=ResultStatus.INVALID_PATH, text=str(e))
        except ComponentNotFoundError as e:
            return QueryResult(status=ResultStatus.NOT_FOUND, text=str(e), path=path)

        try:
            code = read_text(file_path)
        except OSError as e:
            logger.warning(f"Cannot read component {file_path}: {e}")
            return QueryResult(
                status=ResultStatus.NOT_FOUND,
                text=str(ComponentNotFoundError(path)),
                path=path,
            )

        syntax = syntax_for(file_path)

        return QueryResult(
            text=f"# {file_path.name}\n\n```{syntax}\n{code}\n```",
            syntax=syntax,
            path=path,
        )

    def __repr__(self) -> str:
        return f"<ComponentLibrary root={self.root} frameworks=[{', '.join(self.catalog.frameworks)}]>"
