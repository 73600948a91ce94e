"""CLI commands for vidsweep.

This package contains all subcommand implementations.
"""

from vidsweep.cli.commands import config, scan

__all__ = ["config", "scan"]
