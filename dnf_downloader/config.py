"""Downloader configuration with environment variable support."""

import logging
from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Downloader configuration loaded from environment variables.

    Loads from environment (DNF_DOWNLOADER_*), .env file, or defaults.
    """

    model_config = SettingsConfigDict(
        env_prefix="DNF_DOWNLOADER_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # External package manager
    dnf_binary: str = "dnf"
    resolve_args: list[str] = ["repoquery", "--resolve", "--requires"]
    download_args: list[str] = ["download"]

    # Files
    package_pattern: str = "*.rpm"
    output_root: Path = Path("out")
    work_dir: Path | None = None  # None = current directory at run time

    log_level: str = "ERROR"

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Upper-case the level and reject names logging does not know."""
        level = str(v).strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"unknown log level: {v}")
        return level

    @field_validator("work_dir", mode="before")
    @classmethod
    def parse_null_work_dir(cls, v: str | Path | None) -> str | Path | None:
        """Convert 'null' string to None."""
        if isinstance(v, str) and v.lower() in ("null", "none", ""):
            return None
        return v

    def resolve_command(self, package_name: str) -> list[str]:
        """Return the command line that lists runtime requirements of a package."""
        return [self.dnf_binary, *self.resolve_args, package_name]

    def download_command(self, package_name: str) -> list[str]:
        """Return the command line that fetches a single package."""
        return [self.dnf_binary, *self.download_args, package_name]
