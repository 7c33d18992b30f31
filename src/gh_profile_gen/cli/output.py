"""
Output formatting utilities for the CLI.

Status lines, tables and YAML for the CLI commands.
"""

from typing import Any

import yaml
from rich.console import Console
from rich.syntax import Syntax
from rich.table import Table

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


def print_table(
    headers: list[str],
    rows: list[list[Any]],
    title: str | None = None,
) -> None:
    """Print a table."""
    table = Table(title=title)

    for header in headers:
        table.add_column(header)

    for row in rows:
        table.add_row(*[str(cell) for cell in row])

    console.print(table)


def to_yaml(data: dict[str, Any]) -> str:
    """Dump plain data as block-style YAML, keeping key order."""
    return yaml.safe_dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True)


def print_yaml(data: dict[str, Any], highlight: bool = True) -> None:
    """Print data as YAML, syntax highlighted unless ``highlight`` is off."""
    output = to_yaml(data)
    if highlight:
        console.print(Syntax(output, "yaml", theme="monokai"))
    else:
        console.print(output, end="", markup=False, highlight=False, soft_wrap=True)
