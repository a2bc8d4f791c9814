"""Output directory setup."""

import logging
from pathlib import Path

from dnf_downloader.domain.exceptions import DirectoryCreationError

logger = logging.getLogger(__name__)


def resolve_work_dir(work_dir: Path | None = None) -> Path:
    """Return work_dir as an absolute path, defaulting to the current directory.

    Raises:
        DirectoryCreationError: If the current directory cannot be determined
    """
    try:
        base = Path(work_dir) if work_dir is not None else Path.cwd()
        return base.absolute()
    except OSError as e:
        raise DirectoryCreationError(f"error getting current working directory: {e}") from e


def create_output_directory(
    package_name: str,
    work_dir: Path | None = None,
    output_root: Path | str = "out",
) -> Path:
    """Create the per-package output directory.

    Args:
        package_name: Package the directory is named after
        work_dir: Working directory; defaults to the current directory
        output_root: Parent of all package directories, relative to work_dir

    Returns:
        Absolute path of <work_dir>/<output_root>/<package_name>

    Raises:
        DirectoryCreationError: If the working directory cannot be determined
            or the directory cannot be created
    """
    # An absolute name such as a file provide (/usr/bin/python3) still nests under output_root
    name = Path(package_name)
    if name.anchor:
        name = name.relative_to(name.anchor)

    output_dir = resolve_work_dir(work_dir) / output_root / name
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise DirectoryCreationError(
            f"error creating output directory {output_dir}: {e}"
        ) from e

    logger.info("Output directory ready: %s", output_dir)
    return output_dir
