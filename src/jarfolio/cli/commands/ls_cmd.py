# ABOUTME: The `jarfolio ls` command for listing, searching, and sorting the catalog.
# ABOUTME: Displays a Rich table of the matching entries or a no-results notice.

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from jarfolio.cli.formatting import format_bytes, truncate
from jarfolio.cli.options import catalog_session, db_option
from jarfolio.core.query import SortMode, view


@click.command("ls")
@click.argument("query", required=False, default="")
@click.option(
    "-s", "--sort",
    type=click.Choice([mode.value for mode in SortMode]),
    default=SortMode.RECENT.value,
    show_default=True,
    help="Sort order: newest first, by name, or largest first.",
)
@db_option
def ls(query: str, sort: str, db_path: Path | None) -> None:
    """List catalog entries, optionally filtered by QUERY."""
    console = Console()

    with catalog_session(db_path) as store:
        entries = view(store.list_all(), query, sort)

    if not entries:
        console.print("[yellow]No JARs found.[/yellow]")
        if query.strip():
            console.print(f"[dim]Nothing matches '{escape(query.strip())}'.[/dim]")
        else:
            console.print("[dim]Add your first JAR with `jarfolio add`.[/dim]")
        return

    table = Table()
    table.add_column("ID", style="dim", no_wrap=True)
    table.add_column("Name", style="bold")
    table.add_column("Version")
    table.add_column("Size", justify="right")
    table.add_column("Tags", style="cyan")
    table.add_column("Description")

    for entry in entries:
        table.add_row(
            escape(entry.id),
            escape(entry.name),
            escape(entry.version or ""),
            format_bytes(entry.size),
            escape(", ".join(entry.tags) or "jar"),
            escape(truncate(entry.description, 60)),
        )

    console.print(table)
    console.print(f"\n[dim]{len(entries)} JAR(s)[/dim]")
