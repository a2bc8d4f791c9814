"""Reporter for download output and progress tracking."""

from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TextColumn,
    TimeElapsedColumn,
)

from dnf_downloader.domain.models import DownloadSummary, PackageFetch
from dnf_downloader.ui.tables import create_summary_table, format_outcome_summary


class Reporter:
    """Download reporter with rich progress bars and formatted output."""

    def __init__(self, silent: bool = False) -> None:
        """Initialize reporter.

        Args:
            silent: If True, suppress all output (for testing/automation).
        """
        self.silent = silent
        self.console = Console(quiet=silent)
        self._fetch_progress: Progress | None = None
        self._fetch_task_id: int | None = None

    def report_output_directory(self, output_dir: Path) -> None:
        """Report the directory packages will be collected in."""
        if not self.silent:
            self.console.print(f"Output directory created: {escape(str(output_dir))}")

    def report_dependencies_resolved(self, package_name: str, count: int) -> None:
        """Report how many package names the resolver returned."""
        if not self.silent:
            self.console.print(
                f"Resolved {count} packages for [bold]{escape(package_name)}[/bold]"
            )

    def report_download_succeeded(self, package_name: str) -> None:
        """Report a successful fetch."""
        if not self.silent:
            self.console.print(f"[green]✓[/green] Successfully downloaded {escape(package_name)}")

    def report_download_failed(self, package_name: str, error: str | None) -> None:
        """Report a failed fetch."""
        self.report_warning(f"Failed to download {package_name}: {error or 'unknown error'}")

    def report_file_moved(self, filename: str, output_dir: Path) -> None:
        """Report a file relocated into the output directory."""
        if not self.silent:
            self.console.print(f"Moved {escape(filename)} to {escape(str(output_dir))}")

    def report_move_failed(self, filename: str, output_dir: Path, error: str | None) -> None:
        """Report a file that could not be relocated."""
        self.report_warning(
            f"Failed to move {filename} to {output_dir}: {error or 'unknown error'}"
        )

    def report_summary(self, summary: DownloadSummary) -> None:
        """Render the per-package table and a one-line summary."""
        if self.silent:
            return

        if summary.fetches:
            self.console.print()
            self.console.print(create_summary_table(summary))
        self.console.print(f"\n[bold]Summary:[/bold] {format_outcome_summary(summary)}")

    def report_warning(self, message: str) -> None:
        """Report a warning message."""
        if not self.silent:
            self.console.print(f"[yellow]Warning:[/yellow] {escape(message)}")

    def report_error(self, message: str) -> None:
        """Report an error message."""
        if not self.silent:
            self.console.print(f"\n[red]Error:[/red] {escape(message)}")

    def create_fetch_progress_hook(self):
        """Create a progress hook reporting each fetch and advancing the bar."""
        if self.silent:

            def hook(fetch: PackageFetch, current: int, total: int) -> None:
                pass

            return hook

        if self._fetch_progress is None:
            raise RuntimeError("Must be called within fetch_context")

        def hook(fetch: PackageFetch, current: int, total: int) -> None:
            if fetch.success:
                self.report_download_succeeded(fetch.package)
            else:
                self.report_download_failed(fetch.package, fetch.error)

            if self._fetch_progress is None or self._fetch_task_id is None:
                return

            self._fetch_progress.update(
                self._fetch_task_id,
                total=total,
                completed=current,
                package=fetch.package,
            )

        return hook

    def fetch_context(self, total: int):
        """Context manager for fetch progress display."""
        if self.silent:

            class NoOpContext:
                def __enter__(self):
                    return self

                def __exit__(self, *args):
                    pass

            return NoOpContext()

        class FetchContext:
            def __init__(ctx_self, reporter):
                ctx_self.reporter = reporter

            def __enter__(ctx_self):
                progress = Progress(
                    SpinnerColumn(),
                    TextColumn("Fetching"),
                    BarColumn(),
                    MofNCompleteColumn(),
                    TextColumn("[bold blue]{task.fields[package]}"),
                    TimeElapsedColumn(),
                    console=ctx_self.reporter.console,
                    transient=True,
                )
                ctx_self.reporter._fetch_progress = progress
                ctx_self.reporter._fetch_task_id = progress.add_task(
                    "fetch", total=total, package=""
                )
                progress.__enter__()
                return progress

            def __exit__(ctx_self, *args):
                if ctx_self.reporter._fetch_progress:
                    ctx_self.reporter._fetch_progress.__exit__(*args)
                    ctx_self.reporter._fetch_progress = None
                    ctx_self.reporter._fetch_task_id = None

        return FetchContext(self)
