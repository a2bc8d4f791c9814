"""Typer-based CLI for downloading RPMs with their dependencies."""

import logging

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.logging import RichHandler

from dnf_downloader.config import Settings
from dnf_downloader.domain.exceptions import DownloaderError
from dnf_downloader.orchestrators import PackageDownload
from dnf_downloader.ui import Reporter

logger = logging.getLogger("dnf_downloader")

app = typer.Typer(help="Download RPMs for a package and its dependencies")


def _configure_logging(level: str) -> None:
    """Send log records to stderr through rich."""
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


@app.command()
def download(
    package_names: list[str] = typer.Argument(
        ..., metavar="PACKAGE...", help="Package to download; only the first name is used"
    ),
):
    """Download a package and its runtime dependencies into ./out/<package>."""
    reporter = Reporter()

    try:
        config = Settings()
    except ValidationError as e:
        reporter.report_error(f"Invalid configuration: {e}")
        raise typer.Exit(1)

    _configure_logging(config.log_level)

    package_name, *ignored = package_names
    if ignored:
        reporter.report_warning(f"Ignoring extra arguments: {' '.join(ignored)}")

    orchestrator = PackageDownload(config)
    try:
        orchestrator.download(package_name, reporter=reporter)
    except DownloaderError as e:
        logger.debug("Download of %s aborted", package_name, exc_info=True)
        reporter.report_error(str(e))
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
