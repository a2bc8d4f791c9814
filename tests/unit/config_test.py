"""Unit tests for configuration management."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from dnf_downloader.config import Settings


class TestSettings:
    """Test configuration."""

    def test_defaults(self, tmp_path, monkeypatch):
        """Defaults reproduce the plain dnf invocation."""
        monkeypatch.chdir(tmp_path)
        settings = Settings()

        assert settings.dnf_binary == "dnf"
        assert settings.resolve_args == ["repoquery", "--resolve", "--requires"]
        assert settings.download_args == ["download"]
        assert settings.package_pattern == "*.rpm"
        assert settings.output_root == Path("out")
        assert settings.work_dir is None
        assert settings.log_level == "ERROR"

    def test_commands(self, tmp_path, monkeypatch):
        """Command lines end with the package name."""
        monkeypatch.chdir(tmp_path)
        settings = Settings()

        assert settings.resolve_command("curl") == [
            "dnf",
            "repoquery",
            "--resolve",
            "--requires",
            "curl",
        ]
        assert settings.download_command("curl") == ["dnf", "download", "curl"]

    def test_no_directories_created(self, tmp_path, monkeypatch):
        """Settings never create the output root."""
        monkeypatch.chdir(tmp_path)

        Settings(output_root=tmp_path / "rpms", work_dir=tmp_path / "cache")

        assert not (tmp_path / "rpms").exists()
        assert not (tmp_path / "cache").exists()

    def test_null_work_dir(self, tmp_path, monkeypatch):
        """Test work_dir null conversion."""
        monkeypatch.chdir(tmp_path)

        assert Settings(work_dir="null").work_dir is None
        assert Settings(work_dir="").work_dir is None
        assert Settings(work_dir=tmp_path).work_dir == tmp_path

    def test_log_level_normalized(self, tmp_path, monkeypatch):
        """Log level is upper-cased and validated."""
        monkeypatch.chdir(tmp_path)

        assert Settings(log_level="debug").log_level == "DEBUG"
        with pytest.raises(ValidationError):
            Settings(log_level="chatty")

    def test_env_loading(self, tmp_path, monkeypatch):
        """Test loading from environment."""
        monkeypatch.chdir(tmp_path)

        monkeypatch.setenv("DNF_DOWNLOADER_DNF_BINARY", "/usr/bin/dnf5")
        monkeypatch.setenv("DNF_DOWNLOADER_PACKAGE_PATTERN", "*.x86_64.rpm")
        monkeypatch.setenv("DNF_DOWNLOADER_DOWNLOAD_ARGS", '["download", "--arch", "x86_64"]')

        settings = Settings()

        assert settings.dnf_binary == "/usr/bin/dnf5"
        assert settings.package_pattern == "*.x86_64.rpm"
        assert settings.download_command("curl") == [
            "/usr/bin/dnf5",
            "download",
            "--arch",
            "x86_64",
            "curl",
        ]

    def test_programmatic_override(self, tmp_path, monkeypatch):
        """Test programmatic override of env."""
        monkeypatch.chdir(tmp_path)

        monkeypatch.setenv("DNF_DOWNLOADER_DNF_BINARY", "dnf5")

        settings = Settings(dnf_binary="yum")
        assert settings.dnf_binary == "yum"
