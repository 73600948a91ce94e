"""Allow running vidsweep as ``python -m vidsweep``."""

from vidsweep.cli.main import app

app()
