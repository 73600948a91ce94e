"""Logging setup for the vidsweep CLI."""

import logging

from rich.logging import RichHandler

from vidsweep.utils.formatting import err_console


def configure_logging(*, verbose: bool = False, quiet: bool = False) -> None:
    """Route standard library logging through Rich on stderr.

    Args:
        verbose: Log DEBUG and above.
        quiet: Log ERROR and above. Ignored when verbose is set.
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=verbose, rich_tracebacks=True)],
        force=True,
    )
