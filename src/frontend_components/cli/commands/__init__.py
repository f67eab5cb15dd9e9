"""CLI command groups."""

from frontend_components.cli.commands import components, config

__all__ = ["components", "config"]
