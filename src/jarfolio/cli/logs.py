# ABOUTME: Logging setup for the Jarfolio CLI.
# ABOUTME: --verbose routes jarfolio debug logs through a Rich handler on stderr.

import logging

from rich.console import Console
from rich.logging import RichHandler


def configure_logging(verbose: bool) -> None:
    """Attach a RichHandler to the jarfolio logger when verbose output is requested.

    Without --verbose nothing is configured and warnings reach stderr through
    logging's last-resort handler.
    """
    if not verbose:
        return

    logger = logging.getLogger("jarfolio")
    logger.setLevel(logging.DEBUG)
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(console=Console(stderr=True), show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)
