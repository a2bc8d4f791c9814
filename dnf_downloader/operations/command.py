"""External command execution."""

import logging
import subprocess
from pathlib import Path

from dnf_downloader.domain.exceptions import ExternalCommandError
from dnf_downloader.domain.models import CommandResult

logger = logging.getLogger(__name__)


def run_command(args: list[str], cwd: Path) -> CommandResult:
    """Run a command to completion and return its captured output.

    No timeout is applied; a hanging command blocks the caller.

    Args:
        args: Command line, executable first
        cwd: Directory the command runs in

    Returns:
        Result of the command when it exits with status 0

    Raises:
        ExternalCommandError: If the command cannot be started or exits non-zero
    """
    logger.debug("Running %s (cwd=%s)", " ".join(args), cwd)
    try:
        proc = subprocess.run(
            args,
            cwd=str(cwd),
            capture_output=True,
            text=True,
            check=False,
        )
    except OSError as e:
        raise ExternalCommandError(args, reason=str(e)) from e

    if proc.returncode != 0:
        raise ExternalCommandError(args, returncode=proc.returncode, stderr=proc.stderr)

    return CommandResult(
        args=list(args),
        returncode=proc.returncode,
        stdout=proc.stdout,
        stderr=proc.stderr,
    )
