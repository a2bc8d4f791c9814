"""UI."""

from dnf_downloader.ui.reporter import Reporter

__all__ = ["Reporter"]
