"""DNF Downloader.

Downloads an RPM package and its runtime dependencies into a per-package
directory, delegating resolution and retrieval to dnf.

Quick Start (High-Level API):
    >>> from dnf_downloader import download_package
    >>> download_package("curl")  # Fills ./out/curl with RPMs

Quick Start (SDK API):
    >>> from dnf_downloader import PackageDownload, Reporter, Settings
    >>> config = Settings(output_root="rpms")
    >>> summary = PackageDownload(config).download("curl", reporter=Reporter(silent=True))
    >>> summary.failed_fetches
    []

Configuration:
    >>> import os
    >>> os.environ["DNF_DOWNLOADER_PACKAGE_PATTERN"] = "*.x86_64.rpm"
    >>> config = Settings()  # Loads from environment

Public API:
    High-level functions:
        - download_package: Run a complete download for one package

    Orchestrators:
        - PackageDownload: Setup, resolve, fetch and relocate

    Configuration:
        - Settings: Configuration model

    Domain Models:
        - DownloadSummary: Outcome of a run
        - PackageFetch: Outcome of one fetch attempt
        - FileMove: Outcome of one file relocation

    Errors:
        - DownloaderError: Base class
        - DirectoryCreationError, ResolutionError, GlobError: Fatal errors
        - ExternalCommandError: External command failure

    Reporters (for custom UIs):
        - Reporter: Progress reporter (use silent=True for headless mode)
"""

# Configuration
from dnf_downloader.config import Settings

# Domain models and errors
from dnf_downloader.domain import (
    DirectoryCreationError,
    DownloaderError,
    DownloadSummary,
    ExternalCommandError,
    FileMove,
    GlobError,
    PackageFetch,
    ResolutionError,
)

# Orchestrators
from dnf_downloader.orchestrators import PackageDownload

# UI Reporters
from dnf_downloader.ui import Reporter

__all__ = [
    # High-level functions
    "download_package",
    # Orchestrators
    "PackageDownload",
    # Configuration
    "Settings",
    # Domain models
    "DownloadSummary",
    "PackageFetch",
    "FileMove",
    # Errors
    "DownloaderError",
    "DirectoryCreationError",
    "ExternalCommandError",
    "GlobError",
    "ResolutionError",
    # Reporters
    "Reporter",
]

# Version
__version__ = "0.1.0"


def download_package(
    package_name: str,
    config: Settings | None = None,
    reporter: Reporter | None = None,
) -> DownloadSummary:
    """Download a package and its dependencies (high-level convenience function).

    Args:
        package_name: Package to download
        config: Downloader configuration. If None, loads Settings() from environment.
        reporter: Progress reporter. If None, uses Reporter().

    Returns:
        Summary of every fetch and move performed

    Example:
        >>> from dnf_downloader import download_package, Settings
        >>> summary = download_package("curl", config=Settings(output_root="rpms"))
        >>> summary.moved_files
    """
    orchestrator = PackageDownload(config)
    return orchestrator.download(package_name, reporter=reporter)
