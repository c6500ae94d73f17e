# ABOUTME: The `jarfolio export` and `jarfolio import` commands.
# ABOUTME: Writes the catalog to jarfolio.json and merges such documents back in.

from pathlib import Path
from typing import BinaryIO

import click
from rich.console import Console
from rich.markup import escape

from jarfolio.cli.options import catalog_session, db_option
from jarfolio.core.transfer import EXPORT_FILENAME, export_to_file, import_and_merge
from jarfolio.store.snapshot import SnapshotError, dump_snapshot


@click.command("export")
@click.option(
    "-o", "--output",
    "output",
    type=click.Path(dir_okay=False, allow_dash=True, path_type=Path),
    default=Path(EXPORT_FILENAME),
    show_default=True,
    help="File to write; '-' writes to stdout.",
)
@db_option
def export(output: Path, db_path: Path | None) -> None:
    """Export the catalog as a JSON document."""
    with catalog_session(db_path) as store:
        if str(output) == "-":
            click.echo(dump_snapshot(store.list_all()))
            return
        count = export_to_file(store, output)

    Console().print(f"Exported [bold]{count}[/bold] JAR(s) to {output}")


@click.command("import")
@click.argument("source", type=click.File("rb"))
@db_option
def import_(source: BinaryIO, db_path: Path | None) -> None:
    """Merge entries from an exported JSON document into the catalog."""
    console = Console()
    document = source.read()

    with catalog_session(db_path) as store:
        try:
            imported = import_and_merge(store, document)
        except SnapshotError as exc:
            console.print(f"[red]Error:[/red] {escape(str(exc))}")
            raise SystemExit(1) from exc

    console.print(f"[green]Imported {len(imported)} item(s).[/green]")
