"""
frontend-components components - Inspect the component catalogue.

Usage:
    frontend-components components frameworks
    frontend-components components list hyperui --category application
    frontend-components components get hyperui application badges 1
    frontend-components components search "badge dark" --framework hyperui
    frontend-components components show hyperui/application/badges/1.html
"""

from typing import Annotated

import typer
from rich.table import Table

from frontend_components.catalog import ALL_FRAMEWORKS, ComponentLibrary, QueryResult
from frontend_components.cli.output import console, print_result
from frontend_components.config import Config, resolve_components_dir

app = typer.Typer(
    name="components",
    help="Browse, search and fetch components.",
)

RawOption = Annotated[
    bool,
    typer.Option(
        "--raw",
        help="Print the Markdown verbatim instead of rendering it.",
    ),
]


def get_library(ctx: typer.Context) -> ComponentLibrary:
    """Build the component library for the configured root."""
    config: Config = ctx.obj if isinstance(ctx.obj, Config) else Config()
    return ComponentLibrary.from_directory(
        resolve_components_dir(config),
        max_results=config.search.max_results,
    )


def _finish(result: QueryResult, raw: bool) -> None:
    print_result(result, raw=raw)
    if result.is_error:
        raise typer.Exit(1)


@app.command()
def frameworks(
    ctx: typer.Context,
    raw: RawOption = False,
) -> None:
    """List indexed frameworks."""
    library = get_library(ctx)

    if raw:
        _finish(library.list_frameworks(), raw=True)
        return

    if not library.catalog.frameworks:
        console.print(f"[yellow]No frameworks found in {library.root}[/yellow]")
        return

    table = Table(title="Frameworks")
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Name")
    table.add_column("Variants", justify="right")
    table.add_column("Categories", style="dim")
    table.add_column("Dependencies", style="dim")

    for framework_id, entry in library.catalog.frameworks.items():
        table.add_row(
            framework_id,
            entry.framework.name,
            str(entry.variant_count),
            ", ".join(entry.category_names),
            entry.framework.deps,
        )

    console.print(table)


@app.command("list")
def list_components(
    ctx: typer.Context,
    framework: Annotated[
        str,
        typer.Argument(help="Framework ID (e.g. hyperui, daisyui, flyonui)."),
    ],
    category: Annotated[
        str | None,
        typer.Option(
            "--category",
            "-c",
            help="Only list this category.",
        ),
    ] = None,
    raw: RawOption = False,
) -> None:
    """List component types and variants of a framework."""
    _finish(get_library(ctx).list_components(framework, category), raw)


@app.command()
def get(
    ctx: typer.Context,
    framework: Annotated[str, typer.Argument(help="Framework ID.")],
    category: Annotated[str, typer.Argument(help="Category (e.g. application, css, plugins).")],
    component_type: Annotated[str, typer.Argument(help="Component type (e.g. badges, all).")],
    variant: Annotated[str, typer.Argument(help="Variant name (e.g. 1, 1-dark).")],
    raw: RawOption = False,
) -> None:
    """Show the source of one component variant."""
    _finish(get_library(ctx).get_component(framework, category, component_type, variant), raw)


@app.command()
def search(
    ctx: typer.Context,
    query: Annotated[str, typer.Argument(help="Search keywords.")],
    framework: Annotated[
        str,
        typer.Option(
            "--framework",
            "-f",
            help="Framework to search in, or 'all'.",
        ),
    ] = ALL_FRAMEWORKS,
    raw: RawOption = False,
) -> None:
    """Search components by keywords in their paths."""
    _finish(get_library(ctx).search(query, framework), raw)


@app.command()
def show(
    ctx: typer.Context,
    path: Annotated[
        str,
        typer.Argument(help="Path relative to the component root."),
    ],
    raw: RawOption = False,
) -> None:
    """Show the source of a component by relative path."""
    _finish(get_library(ctx).get_component_by_path(path), raw)
