"""
Component catalogue.

The catalogue is built once from a component root directory where each
framework follows its own layout:
- hyperui/<category>/<type>/<variant>.html
- headlessui-react/<type>/<variant>.tsx, headlessui-vue/<type>/<variant>.vue
- daisyui/<variant>.md
- flyonui/css/<variant>.css and flyonui/plugins/<type>/<variant>.ts

Usage:
    from frontend_components.catalog import ComponentLibrary

    library = ComponentLibrary.from_directory(Path("components"))

    # Browse
    print(library.list_frameworks())
    print(library.list_components("hyperui", category="application"))

    # Fetch
    result = library.get_component("hyperui", "application", "badges", "1")

    # Search
    result = library.search("badge dark", framework="hyperui")
"""

# Models
from frontend_components.catalog.models import (
    Catalog,
    ComponentCategory,
    Framework,
    FrameworkEntry,
    LayoutKind,
    QueryResult,
    ResultStatus,
)

# Errors
from frontend_components.catalog.exceptions import (
    ComponentError,
    ComponentNotFoundError,
    InvalidPathError,
    UnknownFrameworkError,
)

# Frameworks and layouts
from frontend_components.catalog.frameworks import FRAMEWORK_IDS, FRAMEWORKS, get_framework
from frontend_components.catalog.layouts import LAYOUTS, Layout, get_layout

# Builder and search
from frontend_components.catalog.builder import build_catalog, index_framework
from frontend_components.catalog.search import (
    DEFAULT_MAX_RESULTS,
    is_safe_path,
    search_components,
)

# Library
from frontend_components.catalog.library import ALL_FRAMEWORKS, ComponentLibrary

__all__ = [
    # Models
    "Catalog",
    "ComponentCategory",
    "Framework",
    "FrameworkEntry",
    "LayoutKind",
    "QueryResult",
    "ResultStatus",
    # Errors
    "ComponentError",
    "ComponentNotFoundError",
    "InvalidPathError",
    "UnknownFrameworkError",
    # Frameworks and layouts
    "FRAMEWORK_IDS",
    "FRAMEWORKS",
    "LAYOUTS",
    "Layout",
    "get_framework",
    "get_layout",
    # Builder and search
    "DEFAULT_MAX_RESULTS",
    "build_catalog",
    "index_framework",
    "is_safe_path",
    "search_components",
    # Library
    "ALL_FRAMEWORKS",
    "ComponentLibrary",
]
