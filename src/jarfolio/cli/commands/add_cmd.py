# ABOUTME: The `jarfolio add` command for cataloging a JAR by URL or from a local file.
# ABOUTME: Local files are hashed; URLs get a best-effort HEAD probe for their size.

from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from jarfolio.cli.formatting import format_bytes
from jarfolio.cli.options import catalog_session, db_option
from jarfolio.core.ingest import (
    IngestResult,
    display_name_for,
    ingest_local_file,
    ingest_remote_reference,
)
from jarfolio.model.types import DEFAULT_NAME, EntryDraft, parse_tags
from jarfolio.remote.http import JarfolioHttpClient


def _report(console: Console, result: IngestResult) -> None:
    entry = result.entry
    console.print(
        f"Added [bold]{escape(entry.name)}[/bold] ({format_bytes(entry.size)}) "
        f"as [cyan]{escape(entry.id)}[/cyan]."
    )
    if entry.has_digest:
        console.print(f"  [dim]SHA-256:[/dim] {entry.digest}")
    for issue in result.degraded:
        console.print(f"  [yellow]Warning:[/yellow] {escape(issue.reason)}")


@click.command("add")
@click.argument("url", required=False)
@click.option(
    "-f", "--file",
    "file_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Catalog a local JAR file (hashed with SHA-256).",
)
@click.option("--name", default=None, help="Display name (default: from the file name).")
@click.option("--version", "version", default=None, help="Artifact version.")
@click.option("--description", default=None, help="Short description.")
@click.option("--group-id", default=None, help="Maven groupId.")
@click.option("--artifact-id", default=None, help="Maven artifactId.")
@click.option("--tags", default=None, help="Comma-separated tags.")
@click.option("--repo", default=None, help="Source repository URL.")
@click.option("--license", "license_", default=None, help="License identifier.")
@click.option(
    "--probe/--no-probe",
    default=True,
    help="Look up the size of a URL with a HEAD request (default: --probe).",
)
@click.option(
    "--timeout",
    type=click.FloatRange(min=0.0, min_open=True),
    default=None,
    help="Timeout in seconds for the size probe (default: none).",
)
@db_option
def add(
    url: str | None,
    file_path: Path | None,
    name: str | None,
    version: str | None,
    description: str | None,
    group_id: str | None,
    artifact_id: str | None,
    tags: str | None,
    repo: str | None,
    license_: str | None,
    probe: bool,
    timeout: float | None,
    db_path: Path | None,
) -> None:
    """Add a JAR to the catalog from a URL or a local file."""
    if url and file_path:
        raise click.UsageError("Give either a URL or --file, not both.")

    console = Console()

    if file_path is not None:
        name = name or display_name_for(file_path.name)
        description = description or f"Uploaded: {file_path.name}"

    draft = EntryDraft(
        name=name or DEFAULT_NAME,
        version=version,
        description=description,
        group_id=group_id,
        artifact_id=artifact_id,
        tags=parse_tags(tags),
        url=url,
        repo=repo,
        license=license_,
    )

    with catalog_session(db_path) as store:
        if file_path is not None:
            result = ingest_local_file(store, file_path, draft)
        elif probe and url:
            client = JarfolioHttpClient(timeout=timeout)
            try:
                result = ingest_remote_reference(store, draft, client)
            finally:
                client.close()
        else:
            result = ingest_remote_reference(store, draft)

    _report(console, result)
