"""
Framework directory layouts.

Each layout kind knows both how to index a framework directory and how to
resolve component coordinates back to a file, so the two stay in sync.
"""

from abc import ABC, abstractmethod
from pathlib import Path

from frontend_components.catalog.models import ComponentCategory, Framework, LayoutKind
from frontend_components.storage.filesystem import is_directory, is_within, list_directory

# Category names used by layouts that have no category level on disk
COMPONENTS_CATEGORY = "components"
ALL_TYPE = "all"

# Split layout sections
CSS_SECTION = "css"
PLUGINS_SECTION = "plugins"
STYLESHEET_EXT = ".css"

# The one plugin variant that ships as a stylesheet. This mirrors a naming
# collision in the upstream FlyonUI file set; do not extend it.
STYLESHEET_PLUGIN_VARIANT = "variants"


def list_variants(directory: Path, ext: str) -> list[str]:
    """List variant names (file stems) with the given extension.

    Args:
        directory: Directory holding component files.
        ext: Extension to match, including the dot.

    Returns:
        Variant names in directory order.
    """
    return [
        name[: -len(ext)]
        for name in list_directory(directory)
        if name.endswith(ext) and len(name) > len(ext)
    ]


def list_plugin_variants(plugin_dir: Path, script_ext: str) -> list[str]:
    """List the variants of a split-layout plugin in directory order.

    Script files are variants; the only stylesheet that is one is
    ``variants.css``.
    """
    stylesheet = f"{STYLESHEET_PLUGIN_VARIANT}{STYLESHEET_EXT}"
    variants = [
        STYLESHEET_PLUGIN_VARIANT if name == stylesheet else name[: -len(script_ext)]
        for name in list_directory(plugin_dir)
        if name == stylesheet or (name.endswith(script_ext) and len(name) > len(script_ext))
    ]
    # A plugin may ship both variants.ts and variants.css
    return list(dict.fromkeys(variants))


class Layout(ABC):
    """Base class for framework directory layouts."""

    @property
    @abstractmethod
    def kind(self) -> LayoutKind:
        """Layout kind handled by this strategy."""
        pass

    @abstractmethod
    def index(self, framework_dir: Path, framework: Framework) -> dict[str, ComponentCategory]:
        """Scan a framework directory.

        Args:
            framework_dir: Existing directory for the framework.
            framework: Framework descriptor.

        Returns:
            Categories keyed by name, in directory order.
        """
        pass

    @abstractmethod
    def component_path(
        self,
        framework_dir: Path,
        framework: Framework,
        category: str,
        component_type: str,
        variant: str,
    ) -> Path | None:
        """Build the path a component would live at.

        Returns:
            The candidate path, or None if the coordinates cannot map to a
            file under this layout.
        """
        pass

    def resolve(
        self,
        framework_dir: Path,
        framework: Framework,
        category: str,
        component_type: str,
        variant: str,
    ) -> Path | None:
        """Resolve coordinates to an existing component file.

        Returns:
            Path to the component file, or None if it does not exist.
        """
        path = self.component_path(framework_dir, framework, category, component_type, variant)
        if path is None or not is_within(framework_dir, path):
            return None
        if not path.is_file():
            return None
        return path

    def __repr__(self) -> str:
        return f"<{type(self).__name__} kind={self.kind.value}>"


class NestedLayout(Layout):
    """Two-level layout: ``category/type/variant.ext`` (HyperUI)."""

    @property
    def kind(self) -> LayoutKind:
        return LayoutKind.NESTED

    def index(self, framework_dir: Path, framework: Framework) -> dict[str, ComponentCategory]:
        categories: dict[str, ComponentCategory] = {}

        for category in list_directory(framework_dir):
            category_dir = framework_dir / category
            if not is_directory(category_dir):
                continue

            types: dict[str, tuple[str, ...]] = {}
            for component_type in list_directory(category_dir):
                type_dir = category_dir / component_type
                if not is_directory(type_dir):
                    continue

                variants = list_variants(type_dir, framework.ext)
                if variants:
                    types[component_type] = tuple(variants)

            categories[category] = ComponentCategory(name=category, types=types)

        return categories

    def component_path(self, framework_dir, framework, category, component_type, variant):
        return framework_dir / category / component_type / f"{variant}{framework.ext}"


class ComponentDirLayout(Layout):
    """One-level layout: ``type/variant.ext`` (HeadlessUI)."""

    @property
    def kind(self) -> LayoutKind:
        return LayoutKind.COMPONENT_DIR

    def index(self, framework_dir: Path, framework: Framework) -> dict[str, ComponentCategory]:
        types: dict[str, tuple[str, ...]] = {}

        for component_type in list_directory(framework_dir):
            type_dir = framework_dir / component_type
            if not is_directory(type_dir):
                continue

            variants = list_variants(type_dir, framework.ext)
            if variants:
                types[component_type] = tuple(variants)

        return {COMPONENTS_CATEGORY: ComponentCategory(name=COMPONENTS_CATEGORY, types=types)}

    def component_path(self, framework_dir, framework, category, component_type, variant):
        # The category is always "components" and has no directory of its own
        return framework_dir / component_type / f"{variant}{framework.ext}"


class FlatLayout(Layout):
    """Flat layout: ``variant.ext`` (DaisyUI)."""

    @property
    def kind(self) -> LayoutKind:
        return LayoutKind.FLAT

    def index(self, framework_dir: Path, framework: Framework) -> dict[str, ComponentCategory]:
        types: dict[str, tuple[str, ...]] = {}

        variants = list_variants(framework_dir, framework.ext)
        if variants:
            types[ALL_TYPE] = tuple(variants)

        return {COMPONENTS_CATEGORY: ComponentCategory(name=COMPONENTS_CATEGORY, types=types)}

    def component_path(self, framework_dir, framework, category, component_type, variant):
        return framework_dir / f"{variant}{framework.ext}"


class SplitLayout(Layout):
    """Two-section layout (FlyonUI).

    - ``css/variant.css``: stylesheet components under type ``all``
    - ``plugins/type/variant.ts``: script plugins, plus a single
      ``variants.css`` stylesheet per plugin
    """

    @property
    def kind(self) -> LayoutKind:
        return LayoutKind.SPLIT

    def index(self, framework_dir: Path, framework: Framework) -> dict[str, ComponentCategory]:
        categories: dict[str, ComponentCategory] = {}
        script_ext = framework.script_ext or framework.ext

        css_dir = framework_dir / CSS_SECTION
        if is_directory(css_dir):
            types: dict[str, tuple[str, ...]] = {}
            variants = list_variants(css_dir, STYLESHEET_EXT)
            if variants:
                types[ALL_TYPE] = tuple(variants)
            categories[CSS_SECTION] = ComponentCategory(name=CSS_SECTION, types=types)

        plugins_dir = framework_dir / PLUGINS_SECTION
        if is_directory(plugins_dir):
            types = {}
            for plugin in list_directory(plugins_dir):
                plugin_dir = plugins_dir / plugin
                if not is_directory(plugin_dir):
                    continue

                variants = list_plugin_variants(plugin_dir, script_ext)
                if variants:
                    types[plugin] = tuple(variants)
            categories[PLUGINS_SECTION] = ComponentCategory(name=PLUGINS_SECTION, types=types)

        return categories

    def component_path(self, framework_dir, framework, category, component_type, variant):
        if category == CSS_SECTION:
            return framework_dir / CSS_SECTION / f"{variant}{STYLESHEET_EXT}"

        if category == PLUGINS_SECTION:
            if variant == STYLESHEET_PLUGIN_VARIANT:
                ext = STYLESHEET_EXT
            else:
                ext = framework.script_ext or framework.ext
            return framework_dir / PLUGINS_SECTION / component_type / f"{variant}{ext}"

        return None


LAYOUTS: dict[LayoutKind, Layout] = {
    layout.kind: layout
    for layout in (NestedLayout(), ComponentDirLayout(), FlatLayout(), SplitLayout())
}


def get_layout(kind: LayoutKind) -> Layout:
    """Get the layout strategy for a layout kind."""
    return LAYOUTS[kind]
