"""Rich console utilities for lanegraph examples."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

if TYPE_CHECKING:
    from lanegraph import GitGraphRenderer, GraphStats

# Shared console instances
console = Console()
error_console = Console(stderr=True)


def print_header(title: str, subtitle: str | None = None) -> None:
    """Print a styled header panel."""
    content = Text(title, style="bold blue")
    if subtitle:
        content.append(f"\n{subtitle}", style="dim")
    console.print(Panel(content, expand=False))


def print_error(message: str, hint: str | None = None) -> None:
    """Print formatted error message to stderr."""
    content = Text(f"ERROR: {message}", style="bold red")
    if hint:
        content.append(f"\n\nHint: {hint}", style="yellow")
    error_console.print(Panel(content, title="Error", border_style="red"))


def print_success(message: str) -> None:
    """Print success message."""
    console.print(Panel(message, title="Success", border_style="green"))


def print_graph(graph: GitGraphRenderer, title: str | None = None) -> None:
    """Print a rendered graph, styled when the renderer has colors enabled."""
    if title:
        console.print(f"\n[bold]{title}[/bold]")
    console.print(graph.render_text(), highlight=False)


def print_stats(stats: GraphStats) -> None:
    """Print graph stats table."""
    table = Table(show_header=False, box=None)
    table.add_column("Key", style="cyan")
    table.add_column("Value")

    table.add_row("Nodes", str(stats.node_count))
    table.add_row("Edges", str(stats.edge_count))
    table.add_row("Columns", str(stats.max_column + 1 if stats.node_count else 0))

    console.print(table)
