# ABOUTME: The `jarfolio info` command for displaying every field of one entry.
# ABOUTME: Shows coordinates, links, license, size, digest, and when it was added.

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from jarfolio.cli.formatting import format_bytes, format_timestamp
from jarfolio.cli.options import catalog_session, db_option


@click.command("info")
@click.argument("entry_id")
@db_option
def info(entry_id: str, db_path: Path | None) -> None:
    """Show detailed metadata for an entry by ID."""
    console = Console()

    with catalog_session(db_path) as store:
        entry = store.get_by_id(entry_id)

    if entry is None:
        console.print(f"[red]Entry {escape(entry_id)} not found.[/red]")
        raise SystemExit(1)

    table = Table(show_header=False, box=None, pad_edge=False)
    table.add_column("Field", style="bold", width=12)
    table.add_column("Value", overflow="fold")

    table.add_row("ID", escape(entry.id))
    table.add_row("Name", escape(entry.name))
    table.add_row("Version", escape(entry.version or "—"))
    if entry.description:
        table.add_row("Description", escape(entry.description))
    if entry.group_id:
        table.add_row("Group ID", escape(entry.group_id))
    if entry.artifact_id:
        table.add_row("Artifact ID", escape(entry.artifact_id))
    if entry.tags:
        table.add_row("Tags", escape(", ".join(entry.tags)))
    table.add_row("URL", escape(entry.url or "—"))
    table.add_row("Repository", escape(entry.repo or "—"))
    table.add_row("License", escape(entry.license or "—"))
    table.add_row("Size", f"{format_bytes(entry.size)} ({entry.size} bytes)")
    table.add_row("SHA-256", entry.digest or "—")
    table.add_row("Added", format_timestamp(entry.added_at))

    console.print(table)
