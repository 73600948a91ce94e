"""CLI package for vidsweep.

This package contains the Typer application and all subcommands.
"""

from vidsweep.cli.main import app

__all__ = ["app"]
