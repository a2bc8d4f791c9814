"""Package download orchestrator.

Coordinates the complete end-to-end download workflow for one package.
"""

import logging
from pathlib import Path

from dnf_downloader.config import Settings
from dnf_downloader.domain.models import DownloadSummary, FileMove, PackageFetch
from dnf_downloader.domain.types import CommandRunner
from dnf_downloader.operations.command import run_command
from dnf_downloader.operations.download import download_packages
from dnf_downloader.operations.output import create_output_directory, resolve_work_dir
from dnf_downloader.operations.relocate import move_package_files
from dnf_downloader.operations.resolve import resolve_dependencies
from dnf_downloader.ui import Reporter

logger = logging.getLogger(__name__)


class PackageDownload:
    """Orchestrates the complete package download workflow.

    This orchestrator runs four steps strictly in order:
    1. Create the output directory <work dir>/out/<package>
    2. Resolve runtime requirements with the external resolver
    3. Fetch every resolved name into the working directory
    4. Move downloaded package files into the output directory

    Steps 1, 2 and the file search in step 4 are fatal when they fail. Failed
    fetches and failed moves are reported and skipped.
    """

    def __init__(self, config: Settings | None = None, runner: CommandRunner | None = None):
        """Initialize the package download orchestrator.

        Args:
            config: Downloader configuration. If None, creates new Settings() from environment.
            runner: Command runner for external commands. Defaults to run_command.
        """
        self.config = config if config is not None else Settings()
        self.runner = runner or run_command

    def download(self, package_name: str, reporter: Reporter | None = None) -> DownloadSummary:
        """Run the complete download workflow for a package.

        Nothing is cleaned up when a step fails: the output directory and any
        files already fetched stay on disk.

        Args:
            package_name: Package to download together with its dependencies
            reporter: Optional reporter for progress. Defaults to Reporter().

        Returns:
            Summary of every fetch and move performed

        Raises:
            DirectoryCreationError: If the output directory cannot be created
            ResolutionError: If the resolver fails
            GlobError: If searching for downloaded files fails
        """
        if reporter is None:
            reporter = Reporter()

        # Step 1: Output directory, created before the resolver runs
        work_dir = resolve_work_dir(self.config.work_dir)
        output_dir = create_output_directory(package_name, work_dir, self.config.output_root)
        reporter.report_output_directory(output_dir)

        # Step 2: Resolve dependencies
        dependencies = resolve_dependencies(package_name, self.config, work_dir, self.runner)
        reporter.report_dependencies_resolved(package_name, len(dependencies))

        summary = DownloadSummary(
            package_name=package_name,
            output_dir=output_dir,
            dependencies=dependencies,
        )

        # Step 3: Fetch into the working directory
        summary.fetches = self._fetch(dependencies, work_dir, reporter)

        # Step 4: Relocate downloaded files
        summary.moves = move_package_files(output_dir, work_dir, self.config.package_pattern)
        self._report_moves(summary.moves, output_dir, reporter)

        logger.info("Finished %r", summary)
        reporter.report_summary(summary)
        return summary

    def _fetch(
        self,
        dependencies: list[str],
        work_dir: Path,
        reporter: Reporter,
    ) -> list[PackageFetch]:
        """Fetch packages with progress tracking.

        Args:
            dependencies: Resolved package names
            work_dir: Directory the downloader runs in
            reporter: Progress reporter

        Returns:
            Outcome of every fetch attempt
        """
        if not dependencies:
            return []

        with reporter.fetch_context(len(dependencies)):
            return download_packages(
                dependencies,
                self.config,
                work_dir,
                self.runner,
                reporter.create_fetch_progress_hook(),
            )

    def _report_moves(
        self,
        moves: list[FileMove],
        output_dir: Path,
        reporter: Reporter,
    ) -> None:
        for move in moves:
            if move.success:
                reporter.report_file_moved(move.source.name, output_dir)
            else:
                reporter.report_move_failed(move.source.name, output_dir, move.error)
