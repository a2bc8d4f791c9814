"""Shared type definitions."""

from collections.abc import Callable
from pathlib import Path

from dnf_downloader.domain.models import CommandResult, PackageFetch

# Runs an external command (argv, working directory) and returns its result
CommandRunner = Callable[[list[str], Path], CommandResult]

# Progress hook for the fetch loop (outcome of the attempt, attempts so far, total attempts)
FetchProgressHook = Callable[[PackageFetch, int, int], None]
