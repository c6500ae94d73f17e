# ABOUTME: The `jarfolio reset` and `jarfolio clear` commands.
# ABOUTME: Replace the whole catalog with the demo entries, or with nothing.

from pathlib import Path

import click
from rich.console import Console

from jarfolio.cli.options import catalog_session, db_option


@click.command("reset")
@click.confirmation_option(prompt="Reset demo data?")
@db_option
def reset(db_path: Path | None) -> None:
    """Replace the catalog with the demo entries."""
    with catalog_session(db_path) as store:
        store.reset_to_seed()
        count = len(store)

    Console().print(f"Catalog reset to {count} demo JAR(s).")


@click.command("clear")
@click.confirmation_option(prompt="Remove every JAR from the catalog?")
@db_option
def clear(db_path: Path | None) -> None:
    """Remove every entry from the catalog."""
    with catalog_session(db_path) as store:
        store.clear()

    Console().print("Catalog cleared.")
