# ABOUTME: Shared Click options and catalog setup for Jarfolio CLI commands.
# ABOUTME: Provides the --db option and a context manager yielding a loaded CatalogStore.

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

import click

from jarfolio.store.catalog import CatalogStore
from jarfolio.store.connection import DEFAULT_DB_PATH, store_session

db_option = click.option(
    "--db",
    "db_path",
    type=click.Path(path_type=Path),
    default=None,
    envvar="JARFOLIO_DB",
    show_envvar=True,
    help=f"Path to catalog database (default: {DEFAULT_DB_PATH})",
)


@contextmanager
def catalog_session(db_path: Path | None) -> Iterator[CatalogStore]:
    """Open the catalog database, load the catalog, and close it afterwards."""
    with store_session(db_path or DEFAULT_DB_PATH) as conn:
        store = CatalogStore(conn)
        store.load()
        yield store
