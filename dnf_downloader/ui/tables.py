"""Table rendering utilities for CLI output."""

from collections import Counter

from rich.markup import escape
from rich.table import Table

from dnf_downloader.domain.models import DownloadSummary


def create_summary_table(summary: DownloadSummary) -> Table:
    """Create a table with one row per fetch attempt.

    Repeated names get one row per attempt, matching the resolver output.

    Args:
        summary: Outcome of a download run

    Returns:
        Rich Table object ready for display
    """
    attempts = Counter(fetch.package for fetch in summary.fetches)
    title = (
        f"{escape(summary.package_name)} "
        f"({len(summary.fetches)} fetched, {len(attempts)} unique)"
    )
    table = Table(title=title)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Package", style="cyan")
    table.add_column("Status")
    table.add_column("Error", style="dim")

    for index, fetch in enumerate(summary.fetches, start=1):
        status = "[green]downloaded[/green]" if fetch.success else "[red]failed[/red]"
        table.add_row(
            str(index),
            escape(fetch.package),
            status,
            escape(fetch.error) if fetch.error else "-",
        )

    return table


def format_outcome_summary(summary: DownloadSummary) -> str:
    """Create a summary string of fetch and move counts.

    Args:
        summary: Outcome of a download run

    Returns:
        Formatted summary string like "3 fetched, 1 failed, 2 moved"
    """
    fetched = len(summary.fetches) - len(summary.failed_fetches)
    parts = [f"{fetched} fetched"]
    if summary.failed_fetches:
        parts.append(f"{len(summary.failed_fetches)} failed")
    parts.append(f"{len(summary.moved_files)} moved")
    if summary.failed_moves:
        parts.append(f"{len(summary.failed_moves)} not moved")
    return ", ".join(parts)
