"""Error hierarchy for the downloader.

Fatal errors (DirectoryCreationError, ResolutionError, GlobError) abort the
run and are turned into a non-zero exit status by the CLI. ExternalCommandError
is raised at the boundary of every external invocation; callers decide whether
it is fatal (resolution) or recorded and skipped (fetch).
"""


class DownloaderError(Exception):
    """Base class for all downloader errors."""


class ExternalCommandError(DownloaderError):
    """An external command could not be started or exited non-zero."""

    def __init__(
        self,
        command: list[str],
        returncode: int | None = None,
        stderr: str = "",
        reason: str | None = None,
    ):
        """Initialize the error.

        Args:
            command: Command line that was executed
            returncode: Exit status, or None if the process never started
            stderr: Captured standard error of the process
            reason: Description of why the process could not be started
        """
        self.command = list(command)
        self.returncode = returncode
        self.stderr = stderr
        self.reason = reason
        super().__init__(self._describe())

    def _describe(self) -> str:
        cmd = " ".join(self.command)
        if self.returncode is None:
            return f"could not run '{cmd}': {self.reason or 'unknown error'}"

        message = f"'{cmd}' exited with status {self.returncode}"
        detail = self.stderr.strip()
        if detail:
            # Last line is usually the actual complaint
            message += f": {detail.splitlines()[-1]}"
        return message


class DirectoryCreationError(DownloaderError):
    """The output directory could not be determined or created."""


class ResolutionError(DownloaderError):
    """The dependency resolver failed for a package."""

    def __init__(self, package_name: str, cause: ExternalCommandError):
        """Initialize the error.

        Args:
            package_name: Package whose dependencies could not be resolved
            cause: Failure reported by the resolver command
        """
        self.package_name = package_name
        self.cause = cause
        super().__init__(f"error resolving dependencies for {package_name}: {cause}")


class GlobError(DownloaderError):
    """Matching package files in the working directory failed."""
