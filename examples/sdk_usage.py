"""Example: Using dnf_downloader as an SDK.

This example demonstrates how to use dnf_downloader programmatically
as a Python library (SDK) rather than via the CLI.
"""

import os
from pathlib import Path

from dnf_downloader import (
    DownloaderError,
    PackageDownload,
    Reporter,
    Settings,
    download_package,
)


def example_simple_usage():
    """Simplest usage - use defaults and download into ./out/curl."""
    print("=" * 60)
    print("Example 1: Simple Usage")
    print("=" * 60)

    # Uses default config and Rich output
    download_package("curl")


def example_with_environment_config():
    """Load configuration from environment variables."""
    print("\n" + "=" * 60)
    print("Example 2: Environment Configuration")
    print("=" * 60)

    # Set environment variables
    os.environ["DNF_DOWNLOADER_DNF_BINARY"] = "dnf5"
    os.environ["DNF_DOWNLOADER_PACKAGE_PATTERN"] = "*.x86_64.rpm"

    # Load from environment
    settings = Settings()
    print(f"Loaded config: binary={settings.dnf_binary}, pattern={settings.package_pattern}")

    download_package("curl", config=settings)


def example_with_custom_config():
    """Use programmatic configuration."""
    print("\n" + "=" * 60)
    print("Example 3: Programmatic Configuration")
    print("=" * 60)

    settings = Settings(
        work_dir=Path("/var/tmp/rpm-cache"),
        output_root=Path("bundles"),  # /var/tmp/rpm-cache/bundles/<package>
        download_args=["download", "--arch", "x86_64,noarch"],
    )

    download_package("curl", config=settings)


def example_headless_mode():
    """Use silent reporter for headless/server mode."""
    print("\n" + "=" * 60)
    print("Example 4: Headless Mode (No Terminal Output)")
    print("=" * 60)

    # Use silent mode for no output (good for cron jobs, servers)
    reporter = Reporter(silent=True)
    summary = download_package("curl", reporter=reporter)
    print(f"✓ Downloaded {len(summary.moved_files)} files silently")


def example_orchestrator_api():
    """Use the orchestrator API directly and inspect the summary."""
    print("\n" + "=" * 60)
    print("Example 5: Orchestrator API (More Control)")
    print("=" * 60)

    orchestrator = PackageDownload(Settings())

    try:
        summary = orchestrator.download("curl", reporter=Reporter())
    except DownloaderError as e:
        print(f"Aborted: {e}")
        return

    for fetch in summary.failed_fetches:
        print(f"  Could not fetch {fetch.package}: {fetch.error}")
    for move in summary.failed_moves:
        print(f"  Could not move {move.source.name}: {move.error}")
    print(f"Output directory: {summary.output_dir}")


if __name__ == "__main__":
    print("\n" + "=" * 60)
    print("DNF Downloader SDK Examples")
    print("=" * 60)
    print("\nThese examples show different ways to use dnf_downloader")
    print("as a Python library (SDK) in your own code.\n")

    # Uncomment the examples you want to run:

    # example_simple_usage()
    # example_with_environment_config()
    # example_with_custom_config()
    # example_headless_mode()
    # example_orchestrator_api()

    print("\nTo run an example, uncomment it in the __main__ section.")
