"""Logging setup for slate.

Library modules only create loggers with ``logging.getLogger(__name__)``.
Handlers are attached here, once, by the CLI entry point or an embedding
host application.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

# Root logger for all slate modules
LOGGER_NAME = "slate"


def configure_logging(
    level: str = "WARNING",
    *,
    verbose: bool = False,
    quiet: bool = False,
    console: Console | None = None,
) -> logging.Logger:
    """Attach a Rich handler to the slate logger.

    Calling this again replaces the previously installed handler.

    Args:
        level: Level name to use when neither flag is set.
        verbose: Force DEBUG output.
        quiet: Force ERROR output. Ignored when verbose is set.
        console: Console to log to. Defaults to the shared stderr console.

    Returns:
        The configured slate logger.
    """
    if console is None:
        from slate.utils.formatting import err_console

        console = err_console

    if verbose:
        level = "DEBUG"
    elif quiet:
        level = "ERROR"

    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(console=console, show_path=verbose, rich_tracebacks=True)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level.upper())
    return logger
