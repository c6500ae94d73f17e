# ABOUTME: CLI package for Jarfolio, built on Click.
# ABOUTME: Defines the root command group and registers subcommands.

import locale
import logging

import click

from jarfolio.cli.commands import (
    add_cmd,
    info_cmd,
    ls_cmd,
    reset_cmd,
    rm_cmd,
    snippet_cmd,
    transfer_cmd,
)
from jarfolio.cli.logs import configure_logging

logger = logging.getLogger(__name__)


@click.group()
@click.version_option(package_name="jarfolio")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Show debug logging.")
def cli(verbose: bool) -> None:
    """Jarfolio - a personal catalog of JAR artifacts."""
    configure_logging(verbose)
    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error as exc:
        logger.debug("Keeping default collation: %s", exc)


cli.add_command(add_cmd.add)
cli.add_command(ls_cmd.ls)
cli.add_command(info_cmd.info)
cli.add_command(rm_cmd.rm)
cli.add_command(snippet_cmd.snippet)
cli.add_command(transfer_cmd.export)
cli.add_command(transfer_cmd.import_)
cli.add_command(reset_cmd.reset)
cli.add_command(reset_cmd.clear)
