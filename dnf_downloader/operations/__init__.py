"""Package acquisition layer.

This module wraps the external package manager and the filesystem steps
of a download run.

Public API:
    Command boundary:
        - run_command: Run an external command, raising on failure

    Pipeline steps:
        - resolve_work_dir: Working directory, defaulting to the current one
        - create_output_directory: Create <work dir>/out/<package>
        - resolve_dependencies: List runtime requirements via the resolver
        - download_packages: Fetch each resolved name into the working directory
        - move_package_files: Relocate downloaded files to the output directory
"""

from dnf_downloader.operations.command import run_command
from dnf_downloader.operations.download import download_package, download_packages
from dnf_downloader.operations.output import create_output_directory, resolve_work_dir
from dnf_downloader.operations.relocate import find_package_files, move_package_files
from dnf_downloader.operations.resolve import resolve_dependencies

__all__ = [
    # Command boundary
    "run_command",
    # Pipeline steps
    "resolve_work_dir",
    "create_output_directory",
    "resolve_dependencies",
    "download_package",
    "download_packages",
    "find_package_files",
    "move_package_files",
]
