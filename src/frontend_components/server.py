"""
MCP server for frontend-components.

Exposes the component library as MCP tools over stdio:
- list_frameworks
- list_components
- get_component
- search_components
- get_component_by_path

Usage:
    frontend-components serve

    # MCP client config (stdio)
    command: frontend-components
    args: ["serve"]
"""

import logging
from typing import Annotated, Literal

from fastmcp import FastMCP
from pydantic import Field

from frontend_components import __version__
from frontend_components.catalog import ComponentLibrary
from frontend_components.config import Config, load_config, resolve_components_dir
from frontend_components.logs import configure_logging

logger = logging.getLogger(__name__)

FrameworkId = Literal["hyperui", "headlessui-react", "headlessui-vue", "daisyui", "flyonui"]
SearchScope = Literal["hyperui", "headlessui-react", "headlessui-vue", "daisyui", "flyonui", "all"]


def create_server(library: ComponentLibrary, config: Config | None = None) -> FastMCP:
    """Create the MCP server and register the component tools.

    Args:
        library: Component library to serve.
        config: Configuration (server name and instructions).

    Returns:
        Configured FastMCP server, not yet running.
    """
    config = config or Config()

    mcp = FastMCP(
        name=config.server.name,
        version=__version__,
        instructions=config.server.instructions,
    )

    @mcp.tool(
        name="list_frameworks",
        description="List all available frontend component frameworks and their dependencies",
    )
    def list_frameworks() -> str:
        return library.list_frameworks().text

    @mcp.tool(
        name="list_components",
        description=(
            "List all component types and variants in a framework. "
            "Optionally filter by category."
        ),
    )
    def list_components(
        framework: Annotated[
            FrameworkId,
            Field(
                description="Framework ID (e.g. hyperui, daisyui, flyonui, headlessui-react, headlessui-vue)"
            ),
        ],
        category: Annotated[
            str | None,
            Field(description="Category to filter (e.g. application, marketing, css, plugins, components)"),
        ] = None,
    ) -> str:
        return library.list_components(framework, category).text

    @mcp.tool(
        name="get_component",
        description=(
            "Get the full source code of a specific component variant. "
            "Use list_components to find available variants first."
        ),
    )
    def get_component(
        framework: Annotated[FrameworkId, Field(description="Framework ID")],
        category: Annotated[
            str,
            Field(description="Category (e.g. application, marketing, css, plugins, components)"),
        ],
        component_type: Annotated[
            str,
            Field(description="Component type (e.g. badges, dialog, accordion, all)"),
        ],
        variant: Annotated[str, Field(description="Variant name (e.g. 1, 1-dark, simple)")],
    ) -> str:
        return library.get_component(framework, category, component_type, variant).text

    @mcp.tool(
        name="search_components",
        description=(
            "Search for components by keyword across all frameworks or within a "
            "specific framework. Searches file names and paths."
        ),
    )
    def search_components(
        query: Annotated[
            str,
            Field(description="Search keywords (e.g. 'badge dark', 'modal', 'accordion')"),
        ],
        framework: Annotated[
            SearchScope,
            Field(description="Framework to search in, or 'all'"),
        ] = "all",
    ) -> str:
        return library.search(query, framework).text

    @mcp.tool(
        name="get_component_by_path",
        description="Get component source code by its relative path (as returned by search_components).",
    )
    def get_component_by_path(
        path: Annotated[
            str,
            Field(description="Relative path from search results (e.g. hyperui/application/badges/1.html)"),
        ],
    ) -> str:
        return library.get_component_by_path(path).text

    return mcp


def run_server(config: Config | None = None) -> None:
    """Build the catalogue once and serve it over stdio.

    Args:
        config: Configuration. Loaded from file and environment if omitted.
    """
    config = config or load_config()
    configure_logging(config.logging)

    root = resolve_components_dir(config)
    if not root.is_dir():
        logger.warning(f"Component root {root} does not exist; serving an empty catalogue")

    library = ComponentLibrary.from_directory(root, max_results=config.search.max_results)
    logger.info(f"Starting {config.server.name} {__version__} (stdio) with root {root}")

    create_server(library, config).run(transport="stdio")
