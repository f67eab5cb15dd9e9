"""Command-line interface for frontend-components."""

from frontend_components.cli.app import app

__all__ = ["app"]
