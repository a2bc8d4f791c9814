"""Configure tests."""

import shlex
from pathlib import Path

import pytest

from dnf_downloader.config import Settings
from dnf_downloader.domain.exceptions import ExternalCommandError
from dnf_downloader.domain.models import CommandResult


class FakeDnf:
    """In-process stand-in for the dnf command line.

    ``repoquery`` answers from ``dependencies``; ``download`` writes an empty
    ``<name>.rpm`` into the working directory unless the name is in ``failing``.
    """

    def __init__(
        self,
        dependencies: dict[str, list[str]] | None = None,
        failing: set[str] | None = None,
    ):
        self.dependencies = dependencies or {}
        self.failing = failing or set()
        self.calls: list[tuple[list[str], Path]] = []

    @property
    def downloads(self) -> list[str]:
        """Names passed to 'dnf download', in call order."""
        return [args[-1] for args, _ in self.calls if args[1] == "download"]

    def __call__(self, args: list[str], cwd: Path) -> CommandResult:
        self.calls.append((list(args), Path(cwd)))
        package = args[-1]

        if args[1] == "repoquery":
            if package not in self.dependencies:
                raise ExternalCommandError(
                    args, returncode=1, stderr=f"No match for argument: {package}\n"
                )
            return CommandResult(args=args, stdout="\n".join(self.dependencies[package]) + "\n")

        if args[1] == "download":
            if package in self.failing:
                raise ExternalCommandError(
                    args, returncode=1, stderr=f"No package {package} available.\n"
                )
            (Path(cwd) / f"{package}.rpm").write_bytes(b"")
            return CommandResult(args=args)

        raise ExternalCommandError(args, returncode=2, stderr="unknown command\n")


@pytest.fixture
def work_dir(tmp_path):
    """Create an empty working directory (the download cache)."""
    path = tmp_path / "work"
    path.mkdir()
    return path


@pytest.fixture
def settings(work_dir):
    """Create settings pointing at the temporary working directory."""
    return Settings(work_dir=work_dir)


@pytest.fixture
def fake_dnf():
    """Create an in-process dnf stand-in with no known packages."""
    return FakeDnf()


@pytest.fixture
def make_dnf_script(tmp_path):
    """Build an executable shell script that behaves like dnf.

    Returns a factory taking the resolver output, the names whose download
    fails and the resolver exit status. Every download attempt is appended to
    ``<tmp_path>/downloads.log``.
    """

    def _make(
        dependencies: list[str],
        failing: list[str] | None = None,
        resolve_status: int = 0,
    ) -> Path:
        log_file = tmp_path / "downloads.log"
        deps = " ".join(shlex.quote(dep) for dep in dependencies)
        fail_clause = ""
        if failing:
            names = "|".join(shlex.quote(name) for name in failing)
            fail_clause = f'    {names}) echo "No package $2 available." >&2; exit 1;;\n'

        script = tmp_path / "bin" / "dnf"
        script.parent.mkdir(exist_ok=True)
        script.write_text(
            "#!/bin/sh\n"
            'if [ "$1" = "repoquery" ]; then\n'
            f"  if [ {resolve_status} -ne 0 ]; then\n"
            '    echo "Error: no match for argument" >&2\n'
            f"    exit {resolve_status}\n"
            "  fi\n"
            f"  for dep in {deps}; do echo \"$dep\"; done\n"
            "  exit 0\n"
            "fi\n"
            'if [ "$1" = "download" ]; then\n'
            f'  echo "$2" >> {shlex.quote(str(log_file))}\n'
            '  case "$2" in\n'
            f"{fail_clause}"
            "  esac\n"
            '  : > "$2.rpm"\n'
            "  exit 0\n"
            "fi\n"
            "exit 2\n"
        )
        script.chmod(0o755)
        return script

    return _make
