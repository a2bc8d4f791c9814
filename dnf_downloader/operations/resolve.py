"""Dependency resolution through the external resolver."""

import logging
from pathlib import Path

from dnf_downloader.config import Settings
from dnf_downloader.domain.exceptions import ExternalCommandError, ResolutionError
from dnf_downloader.domain.types import CommandRunner
from dnf_downloader.operations.command import run_command

logger = logging.getLogger(__name__)


def resolve_dependencies(
    package_name: str,
    settings: Settings,
    work_dir: Path,
    runner: CommandRunner | None = None,
) -> list[str]:
    """Return the package names the resolver lists for a package.

    The resolver's standard output is split on whitespace and returned as-is:
    no deduplication and no filtering.

    Args:
        package_name: Package to resolve
        settings: Supplies the resolver command line
        work_dir: Directory the resolver runs in
        runner: Command runner; defaults to run_command

    Returns:
        Resolved package names in resolver output order

    Raises:
        ResolutionError: If the resolver cannot be started or exits non-zero
    """
    runner = runner or run_command

    try:
        result = runner(settings.resolve_command(package_name), work_dir)
    except ExternalCommandError as e:
        raise ResolutionError(package_name, e) from e

    dependencies = result.stdout.split()
    logger.info("Resolved %d dependencies for %s", len(dependencies), package_name)
    return dependencies
