"""Rich console helpers for the Blacksmith command line.

The generation pipeline never prints; everything user-facing goes through
these helpers so output stays consistent.
"""

from __future__ import annotations

from rich.console import Console
from rich.table import Table

console = Console()


def print_artifact_table(artifacts: dict[str, str], title: str = "Artifacts") -> None:
    """Print the artifact catalogue as a kind / description table.

    Args:
        artifacts: Mapping of artifact kind -> description, printed in order.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Artifact", style="dim", no_wrap=True)
    table.add_column("Description")

    for kind, description in artifacts.items():
        table.add_row(kind, description)

    console.print(table)
    console.print()


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{message}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message."""
    console.print(f"[bold red]{message}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{message}[/bold yellow]")
