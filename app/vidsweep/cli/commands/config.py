"""Config commands.

Shows the effective configuration and writes a default config file.
"""

from pathlib import Path
from typing import Annotated

import typer

from vidsweep.core.config import ConfigError, SweepConfig, dump_config, load_config, save_config
from vidsweep.core.paths import get_config_path
from vidsweep.utils.formatting import console, print_error, print_success

app = typer.Typer(
    help="Show or initialize the vidsweep configuration.",
    no_args_is_help=True,
)


@app.command()
def show(
    config_path: Annotated[
        Path | None,
        typer.Option("--config", help="Path to config file."),
    ] = None,
) -> None:
    """Print the effective configuration as TOML."""
    path = config_path or get_config_path()
    try:
        config = load_config(path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    source = str(path) if path.exists() else "defaults (no config file)"
    console.print(f"[muted]# source: {source}[/]", highlight=False)
    console.print(dump_config(config), markup=False, highlight=False)


@app.command()
def init(
    force: Annotated[
        bool,
        typer.Option("--force", help="Overwrite an existing config file."),
    ] = False,
    config_path: Annotated[
        Path | None,
        typer.Option("--config", help="Path to config file."),
    ] = None,
) -> None:
    """Write a config file with default settings."""
    path = config_path or get_config_path()
    if path.exists() and not force:
        print_error(f"Config already exists: {path} (use --force to overwrite)")
        raise typer.Exit(code=1)

    try:
        saved = save_config(SweepConfig(), path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Config written to {saved}")
