"""Domain models and errors."""

from dnf_downloader.domain.exceptions import (
    DirectoryCreationError,
    DownloaderError,
    ExternalCommandError,
    GlobError,
    ResolutionError,
)
from dnf_downloader.domain.models import (
    CommandResult,
    DownloadSummary,
    FileMove,
    PackageFetch,
)
from dnf_downloader.domain.types import CommandRunner, FetchProgressHook

__all__ = [
    "CommandResult",
    "PackageFetch",
    "FileMove",
    "DownloadSummary",
    "DownloaderError",
    "DirectoryCreationError",
    "ExternalCommandError",
    "GlobError",
    "ResolutionError",
    "CommandRunner",
    "FetchProgressHook",
]
