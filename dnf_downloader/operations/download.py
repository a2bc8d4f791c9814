"""Sequential package fetching through the external downloader."""

import logging
from pathlib import Path

from dnf_downloader.config import Settings
from dnf_downloader.domain.exceptions import ExternalCommandError
from dnf_downloader.domain.models import CommandResult, PackageFetch
from dnf_downloader.domain.types import CommandRunner, FetchProgressHook
from dnf_downloader.operations.command import run_command

logger = logging.getLogger(__name__)


def download_package(
    package_name: str,
    settings: Settings,
    work_dir: Path,
    runner: CommandRunner | None = None,
) -> CommandResult:
    """Fetch one package into the working directory.

    Raises:
        ExternalCommandError: If the downloader cannot be started or exits non-zero
    """
    runner = runner or run_command
    return runner(settings.download_command(package_name), work_dir)


def download_packages(
    packages: list[str],
    settings: Settings,
    work_dir: Path,
    runner: CommandRunner | None = None,
    progress_hook: FetchProgressHook | None = None,
) -> list[PackageFetch]:
    """Fetch every package in order, continuing past failures.

    Each name is fetched once per occurrence, so duplicates are fetched again.

    Args:
        packages: Resolved package names
        settings: Supplies the downloader command line
        work_dir: Directory the downloaded files land in
        runner: Command runner; defaults to run_command
        progress_hook: Optional callback invoked with the outcome of every attempt

    Returns:
        One PackageFetch per entry of packages, in the same order
    """
    results = []
    total = len(packages)

    for index, package in enumerate(packages, start=1):
        try:
            download_package(package, settings, work_dir, runner)
        except ExternalCommandError as e:
            logger.warning("Failed to download %s: %s", package, e)
            fetch = PackageFetch(package=package, success=False, error=str(e))
        else:
            logger.info("Downloaded %s", package)
            fetch = PackageFetch(package=package, success=True)

        results.append(fetch)
        if progress_hook:
            progress_hook(fetch, index, total)

    return results
