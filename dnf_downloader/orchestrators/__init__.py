"""Orchestration layer.

This module contains the workflow orchestrator that runs a complete
package download: setup, resolve, fetch and relocate.
"""

from dnf_downloader.orchestrators.package_download import PackageDownload

__all__ = [
    "PackageDownload",
]
