# ABOUTME: The `jarfolio rm` command for deleting an entry from the catalog.
# ABOUTME: Asks for confirmation unless --yes is given.

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from jarfolio.cli.options import catalog_session, db_option


@click.command("rm")
@click.argument("entry_id")
@click.confirmation_option(prompt="Delete this jar from the gallery?")
@db_option
def rm(entry_id: str, db_path: Path | None) -> None:
    """Remove an entry from the catalog by ID."""
    console = Console()

    with catalog_session(db_path) as store:
        entry = store.get_by_id(entry_id)
        removed = store.remove(entry_id)

    if not removed or entry is None:
        console.print(f"[red]Entry {escape(entry_id)} not found.[/red]")
        raise SystemExit(1)

    console.print(f"Removed [bold]{escape(entry.name)}[/bold].")
