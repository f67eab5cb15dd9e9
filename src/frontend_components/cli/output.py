"""
Output formatting utilities for the CLI.

Provides consistent output formatting across all CLI commands.
"""

from rich.console import Console
from rich.markdown import Markdown

from frontend_components.catalog import QueryResult

# Global console instance
console = Console()


def print_error(message: str) -> None:
    """Print an error message."""
    console.print(f"[red]✗[/red] {message}")


def print_warning(message: str) -> None:
    """Print a warning message."""
    console.print(f"[yellow]![/yellow] {message}")


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[blue]i[/blue] {message}")


def print_result(result: QueryResult, raw: bool = False) -> None:
    """Print a query result as rendered Markdown, or verbatim if raw."""
    if raw:
        console.print(result.text, markup=False, highlight=False, soft_wrap=True)
    elif result.is_error:
        print_warning(result.text)
    else:
        console.print(Markdown(result.text))
