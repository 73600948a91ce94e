"""Rich display functions for scan reports and deletion results."""

from typing import Any

from rich.table import Table

from vidsweep.library.models import Category, CleanupResult
from vidsweep.library.operator import CleanupActionResult
from vidsweep.utils.formatting import console, print_info, print_success

# Report sections in display order: (category, title, row style)
_REPORT_SECTIONS: tuple[tuple[Category, str, str], ...] = (
    (Category.STRUCTURE_WARNING, "Structure warnings", "warning"),
    (Category.ORPHANED_FOLDER, "Orphaned metadata folders (no video file)", "orphan"),
    (Category.ORPHANED_FILE, "Orphaned metadata files (no video file at same level)", "orphan"),
    (Category.EMPTY_FOLDER, "Empty folders", "empty"),
)


def create_findings_table(title: str, entries: list[str], style: str) -> Table:
    """Create a Rich table listing the entries of one category.

    Args:
        title: Section title; the entry count is appended.
        entries: Paths or warning messages to list.
        style: Theme style applied to every row.

    Returns:
        Rich Table configured for findings display.
    """
    table = Table(
        title=f"{title} ({len(entries)})",
        show_header=False,
        border_style="border",
        title_style="bold_header",
    )
    table.add_column("Entry", overflow="fold")
    for entry in entries:
        table.add_row(f"[{style}]{entry}[/{style}]")
    return table


def print_report(result: CleanupResult) -> None:
    """Print every non-empty category of a scan result as a table.

    Args:
        result: Scan result, usually a sorted snapshot.
    """
    data = result.to_dict()
    for category, title, style in _REPORT_SECTIONS:
        entries = data[category.value]
        if entries:
            console.print()
            console.print(create_findings_table(title, entries, style))


def print_scan_summary(result: CleanupResult, *, execute: bool) -> None:
    """Print the closing line of a scan.

    Args:
        result: Completed scan result.
        execute: Whether deletion was requested.
    """
    total = result.deletable_count
    if total == 0:
        print_success("\nNothing to clean up")
    elif not execute:
        print_info(f"\nRun with --execute to delete {total} items")


def report_to_dict(result: CleanupResult) -> dict[str, Any]:
    """Build the JSON payload for a scan result (sorted, with counts)."""
    snapshot = result.sorted()
    return {
        "counts": {category.value: count for category, count in snapshot.counts().items()},
        **snapshot.to_dict(),
    }


def results_to_list(results: list[CleanupActionResult]) -> list[dict[str, Any]]:
    """Convert deletion results for JSON output."""
    return [
        {
            "path": r.path,
            "category": r.category.value,
            "success": r.success,
            "error": r.error,
        }
        for r in results
    ]


def create_results_table(results: list[CleanupActionResult]) -> Table:
    """Create a Rich table displaying deletion results.

    Args:
        results: Results returned by the cleanup operator.

    Returns:
        Rich Table configured for results display.
    """
    table = Table(
        title="Deletion Results",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Status", width=8, justify="center")
    table.add_column("Type", width=16)
    table.add_column("Path", overflow="fold")
    table.add_column("Details", style="muted")

    for r in results:
        if r.success:
            status = "[success]OK[/]"
            detail = ""
        else:
            status = "[error]FAIL[/]"
            detail = r.error or "Unknown error"
        table.add_row(status, r.category.value, r.path, detail)

    return table


def print_results_summary(results: list[CleanupActionResult]) -> None:
    """Print the deleted/failed counts of a deletion pass."""
    deleted = sum(1 for r in results if r.success)
    failed = sum(1 for r in results if r.failed)

    message = f"Deleted {deleted} items, {failed} failures"
    if failed == 0:
        print_success(f"\n{message}")
    else:
        console.print(f"\n[warning]{message}[/warning]")
