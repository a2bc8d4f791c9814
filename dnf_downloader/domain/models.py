"""Domain models for a download run."""

from pathlib import Path

from pydantic import BaseModel, Field


class CommandResult(BaseModel):
    """Outcome of an external command that exited successfully."""

    args: list[str]
    returncode: int = 0
    stdout: str = ""
    stderr: str = ""


class PackageFetch(BaseModel):
    """Outcome of fetching a single resolved package name."""

    package: str
    success: bool
    error: str | None = None


class FileMove(BaseModel):
    """Outcome of relocating one downloaded file into the output directory."""

    source: Path
    destination: Path
    success: bool
    error: str | None = None


class DownloadSummary(BaseModel):
    """Everything that happened while downloading one package."""

    package_name: str
    output_dir: Path
    dependencies: list[str] = Field(default_factory=list)  # Verbatim resolver output
    fetches: list[PackageFetch] = Field(default_factory=list)
    moves: list[FileMove] = Field(default_factory=list)

    @property
    def failed_fetches(self) -> list[PackageFetch]:
        """Return fetch attempts that did not succeed."""
        return [fetch for fetch in self.fetches if not fetch.success]

    @property
    def failed_moves(self) -> list[FileMove]:
        """Return file moves that did not succeed."""
        return [move for move in self.moves if not move.success]

    @property
    def moved_files(self) -> list[Path]:
        """Return destination paths of every relocated file."""
        return [move.destination for move in self.moves if move.success]

    @property
    def has_failures(self) -> bool:
        """Return True if any fetch or move failed."""
        return bool(self.failed_fetches or self.failed_moves)

    def __repr__(self) -> str:
        """Return string representation of the summary."""
        return (
            f"DownloadSummary("
            f"package={self.package_name!r}, "
            f"dependencies={len(self.dependencies)}, "
            f"failed_fetches={len(self.failed_fetches)}, "
            f"moved={len(self.moved_files)})"
        )
