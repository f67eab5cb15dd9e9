"""
Main Typer application for the frontend-components CLI.

This module defines the root CLI application and registers all command groups.
"""

from pathlib import Path
from typing import Annotated

import typer

from frontend_components import __version__
from frontend_components.cli.commands import components, config
from frontend_components.cli.output import print_error, print_info
from frontend_components.config import ConfigurationError, load_config
from frontend_components.storage.paths import get_config_path

# Create the main Typer app
app = typer.Typer(
    name="frontend-components",
    help="UI component catalogue: MCP server and inspection commands.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    pretty_exceptions_enable=True,
    pretty_exceptions_show_locals=False,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        print_info(f"frontend-components version [green]{__version__}[/green]")
        raise typer.Exit()


# noinspection PyUnusedLocal
@app.callback()
def main_callback(
    ctx: typer.Context,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit.",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
    config_file: Annotated[
        Path | None,
        typer.Option(
            "--config",
            help="Config file (default: $FRONTEND_COMPONENTS_CONFIG or ./frontend-components.yaml).",
        ),
    ] = None,
    components_dir: Annotated[
        Path | None,
        typer.Option(
            "--components-dir",
            "-d",
            help="Component root directory (default: $CLAUDE_PLUGIN_ROOT/components).",
        ),
    ] = None,
) -> None:
    """
    [bold blue]frontend-components[/bold blue] - UI component catalogue

    Indexes HyperUI, HeadlessUI, DaisyUI and FlyonUI component snippets and
    serves them to AI assistants over MCP.
    """
    try:
        loaded = load_config(config_file)
    except ConfigurationError as e:
        print_error(str(e))
        raise typer.Exit(1)

    if components_dir is not None:
        loaded = loaded.model_copy(update={"components_dir": components_dir})

    ctx.obj = loaded
    ctx.meta["config_path"] = config_file or get_config_path()


# Register command groups
app.add_typer(components.app, name="components")
app.add_typer(config.app, name="config")


@app.command()
def serve(ctx: typer.Context) -> None:
    """Start the MCP server on stdio."""
    from frontend_components.server import run_server

    run_server(ctx.obj)


if __name__ == "__main__":
    app()
