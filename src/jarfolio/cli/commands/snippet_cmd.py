# ABOUTME: The `jarfolio snippet` command for printing a Maven dependency block.
# ABOUTME: Output is plain text so it can be piped straight into a pom.xml or clipboard tool.

from pathlib import Path

import click

from jarfolio.cli.options import catalog_session, db_option
from jarfolio.core.snippet import maven_snippet


@click.command("snippet")
@click.argument("entry_id")
@db_option
def snippet(entry_id: str, db_path: Path | None) -> None:
    """Print the Maven <dependency> snippet for an entry."""
    with catalog_session(db_path) as store:
        entry = store.get_by_id(entry_id)

    if entry is None:
        click.echo(f"Entry {entry_id} not found.", err=True)
        raise SystemExit(1)

    click.echo(maven_snippet(entry))
