"""Relocation of downloaded package files."""

import errno
import logging
import shutil
from pathlib import Path

from dnf_downloader.domain.exceptions import GlobError
from dnf_downloader.domain.models import FileMove

logger = logging.getLogger(__name__)


def find_package_files(work_dir: Path, pattern: str = "*.rpm") -> list[Path]:
    """Return regular files in work_dir matching pattern, sorted by name.

    Raises:
        GlobError: If the pattern is rejected by the matcher
    """
    try:
        matches = sorted(path for path in Path(work_dir).glob(pattern) if path.is_file())
    except (ValueError, NotImplementedError, OSError) as e:
        raise GlobError(f"error searching for files matching {pattern!r}: {e}") from e

    return matches


def move_package_files(
    output_dir: Path,
    work_dir: Path,
    pattern: str = "*.rpm",
) -> list[FileMove]:
    """Move every matching file from work_dir into output_dir.

    Uses shutil.move: a rename on the same filesystem, copy and delete across
    filesystems. A file already present under the same name is replaced; a
    directory under that name is a failed move.

    Args:
        output_dir: Destination directory
        work_dir: Directory scanned for downloaded files
        pattern: Glob selecting package files

    Returns:
        One FileMove per matched file

    Raises:
        GlobError: If the pattern is rejected by the matcher
    """
    results = []

    for source in find_package_files(work_dir, pattern):
        destination = Path(output_dir) / source.name
        try:
            if destination.is_dir():
                raise IsADirectoryError(
                    errno.EISDIR, "destination is a directory", str(destination)
                )
            shutil.move(str(source), str(destination))
        except OSError as e:
            logger.warning("Failed to move %s to %s: %s", source, output_dir, e)
            results.append(
                FileMove(source=source, destination=destination, success=False, error=str(e))
            )
        else:
            logger.info("Moved %s to %s", source.name, output_dir)
            results.append(FileMove(source=source, destination=destination, success=True))

    return results
