"""Scan command implementation.

Scans one or more media libraries for leftovers of deleted videos,
reports them, and optionally deletes them.
"""

import json
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer

from vidsweep.cli.display import (
    create_results_table,
    print_report,
    print_results_summary,
    print_scan_summary,
    report_to_dict,
    results_to_list,
)
from vidsweep.core.config import ConfigError, load_config
from vidsweep.library.models import CleanupResult
from vidsweep.library.operator import CleanupActionResult, CleanupOperator
from vidsweep.library.scanner import LibraryScanner
from vidsweep.utils.formatting import console, err_console, print_error, print_info


class OutputFormat(str, Enum):
    """Output format options."""

    TABLE = "table"
    JSON = "json"


def scan(
    library_paths: Annotated[
        list[Path],
        typer.Argument(
            help="Library root directories (library/studio/title/video layout).",
            show_default=False,
        ),
    ],
    execute: Annotated[
        bool,
        typer.Option("--execute", help="Actually delete findings (default is dry-run)."),
    ] = False,
    workers: Annotated[
        int | None,
        typer.Option(
            "--workers",
            "-w",
            min=0,
            help="Worker threads per library (default from config, 10).",
        ),
    ] = None,
    yes: Annotated[
        bool,
        typer.Option("--yes", "-y", help="Skip confirmation prompt."),
    ] = False,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format: table or json.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
    export_path: Annotated[
        Path | None,
        typer.Option(
            "--export",
            "-e",
            help="Export scan results to JSON file.",
        ),
    ] = None,
    config_path: Annotated[
        Path | None,
        typer.Option("--config", help="Path to config file."),
    ] = None,
) -> None:
    """Find orphaned metadata, empty folders and layout problems.

    Expected structure: library/studio/title/video.mkv

    Examples:
        vidsweep scan /media/movies                # Dry run, show table
        vidsweep scan /media/movies /media/tv      # Several libraries
        vidsweep scan /media/movies -w 4           # Four worker threads
        vidsweep scan /media/movies --format json  # Output as JSON
        vidsweep scan /media/movies --execute -y   # Delete without asking
    """
    try:
        config = load_config(config_path)
    except ConfigError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    effective_workers = workers if workers is not None else config.scan.workers
    as_table = output_format == OutputFormat.TABLE

    if as_table and not execute:
        console.print("[warning]=== DRY RUN MODE (use --execute to actually delete) ===[/]\n")

    result = CleanupResult()
    scanner = LibraryScanner(result, workers=effective_workers)
    for library_path in library_paths:
        if as_table:
            print_info(f"Scanning library: {library_path}")
        if not scanner.scan(library_path):
            print_error(scanner.errors[-1])

    if export_path is not None:
        exported = _export_results(result, export_path)
        if as_table:
            print_info(f"Results exported to {exported}")

    if as_table:
        print_report(result.sorted())
        print_scan_summary(result, execute=execute)

    actions: list[CleanupActionResult] = []
    if execute and result.deletable_count:
        if not yes:
            confirmed = typer.confirm(
                f"\nProceed with deleting {result.deletable_count} item(s)?",
                default=False,
                err=True,
            )
            if not confirmed:
                if as_table:
                    print_info("Aborted.")
                else:
                    err_console.print("[info]Aborted.[/]")
                raise typer.Exit(code=0)

        actions = CleanupOperator().execute(result)
        if as_table:
            console.print()
            console.print(create_results_table(actions))
            print_results_summary(actions)

    if not as_table:
        payload = report_to_dict(result)
        if execute:
            payload["deletions"] = results_to_list(actions)
        console.print_json(json.dumps(payload))

    if any(a.failed for a in actions):
        raise typer.Exit(code=1)


def _export_results(result: CleanupResult, export_path: Path) -> Path:
    """Export the sorted scan result to a JSON file and return its path."""
    export_path = export_path.resolve()
    if export_path.is_dir():
        print_error(f"Export path is a directory: {export_path}")
        raise typer.Exit(code=1)

    try:
        export_path.parent.mkdir(parents=True, exist_ok=True)
        export_path.write_text(json.dumps(report_to_dict(result), indent=2))
    except OSError as e:
        print_error(f"Failed to export: {e}")
        raise typer.Exit(code=1) from e
    return export_path
