"""
frontend-components config - Configuration commands.

Usage:
    frontend-components config show
    frontend-components config path
"""

import typer
import yaml
from rich.syntax import Syntax

from frontend_components.cli.output import console
from frontend_components.config import Config, resolve_components_dir
from frontend_components.storage.paths import get_config_path

app = typer.Typer(
    name="config",
    help="Configuration inspection.",
)


@app.command()
def show(ctx: typer.Context) -> None:
    """Show the resolved configuration."""
    config: Config = ctx.obj if isinstance(ctx.obj, Config) else Config()

    data = config.model_dump(mode="json")
    data["components_dir"] = str(resolve_components_dir(config))

    console.print(Syntax(yaml.safe_dump(data, sort_keys=False), "yaml"))


@app.command()
def path(ctx: typer.Context) -> None:
    """Show where the configuration file is read from."""
    config_path = ctx.meta.get("config_path") or get_config_path()
    status = "" if config_path.exists() else " [dim](not found)[/dim]"
    console.print(f"{config_path}{status}")
