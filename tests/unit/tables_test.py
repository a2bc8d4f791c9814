"""Unit tests for table rendering utilities."""

from pathlib import Path

from dnf_downloader.domain.models import DownloadSummary, FileMove, PackageFetch
from dnf_downloader.ui.tables import create_summary_table, format_outcome_summary


def make_summary(fetches, moves=()):
    return DownloadSummary(
        package_name="foo",
        output_dir=Path("/work/out/foo"),
        dependencies=[f.package for f in fetches],
        fetches=list(fetches),
        moves=list(moves),
    )


class TestSummaryTable:
    """Test summary table creation."""

    def test_creates_table_with_correct_columns(self):
        """Table should have all required columns."""
        table = create_summary_table(make_summary([PackageFetch(package="a", success=True)]))

        column_headers = [col.header for col in table.columns]
        assert column_headers == ["#", "Package", "Status", "Error"]

    def test_one_row_per_attempt(self):
        """Duplicate names get a row each."""
        summary = make_summary(
            [
                PackageFetch(package="libfoo-1.0", success=True),
                PackageFetch(package="libfoo-1.0", success=True),
                PackageFetch(package="libbar-2.1", success=False, error="boom"),
            ]
        )

        table = create_summary_table(summary)

        assert table.row_count == 3
        assert "3 fetched" in table.title
        assert "2 unique" in table.title


class TestOutcomeSummary:
    """Test the one-line summary."""

    def test_all_successful(self):
        """Only non-zero failure counts are shown."""
        summary = make_summary(
            [PackageFetch(package="a", success=True)],
            [FileMove(source=Path("a.rpm"), destination=Path("out/a.rpm"), success=True)],
        )

        assert format_outcome_summary(summary) == "1 fetched, 1 moved"

    def test_with_failures(self):
        """Failed fetches and moves are counted."""
        summary = make_summary(
            [
                PackageFetch(package="a", success=True),
                PackageFetch(package="b", success=False, error="x"),
            ],
            [
                FileMove(source=Path("a.rpm"), destination=Path("out/a.rpm"), success=True),
                FileMove(
                    source=Path("c.rpm"), destination=Path("out/c.rpm"), success=False, error="y"
                ),
            ],
        )

        assert format_outcome_summary(summary) == "1 fetched, 1 failed, 1 moved, 1 not moved"

    def test_empty(self):
        """Nothing resolved means nothing fetched."""
        assert format_outcome_summary(make_summary([])) == "0 fetched, 0 moved"
