"""
Tests for diff_summary module
"""
from readmi.update.diff_summary import create_diff_summary, diff, format_diff_summary
from readmi.update.models import DiffSummary


OLD = "# A\n\nx\n\n## Install\n\nold\n\n## Gone\n\nbye\n"
NEW = "# A\n\nx\n\n## Install\n\nnew\n\n## Usage\n\nrun\n"


class TestCreateDiffSummary:
    """Test section-level diff."""

    def test_buckets(self):
        summary = create_diff_summary(OLD, NEW)

        assert summary.added == ["Usage"]
        assert summary.removed == ["Gone"]
        assert summary.modified == ["Install"]
        assert summary.unchanged == ["A"]
        assert summary.has_changes()

    def test_whitespace_only_change_is_unchanged(self):
        summary = diff("## A\n\nbody\n", "## A\n\n\nbody\n\n\n")

        assert summary.unchanged == ["A"]
        assert not summary.has_changes()

    def test_titles_matched_after_normalization(self):
        summary = diff("## Installation\n\nx\n", "## 📦 Installation\n\nx\n")

        assert summary.unchanged == ["📦 Installation"]
        assert summary.added == []
        assert summary.removed == []

    def test_every_title_in_exactly_one_bucket(self):
        old = "## A\n\n1\n\n## A\n\n2\n\n## B\n\n3\n"
        new = "## A\n\n1\n\n## C\n\n4\n"

        summary = diff(old, new)
        buckets = summary.added + summary.removed + summary.modified + summary.unchanged

        assert sorted(buckets) == ["A", "B", "C"]

    def test_later_duplicate_title_is_folded_into_first(self):
        content = "## Usage\n\na\n\n## Usage!\n\nb\n"

        summary = diff(content, content)

        assert summary.unchanged == ["Usage"]
        assert summary.added == summary.removed == summary.modified == []

    def test_empty_documents(self):
        assert diff("", "") == DiffSummary()
        assert diff("", "## New\n").added == ["New"]
        assert diff("## Old\n", "").removed == ["Old"]


class TestFormatDiffSummary:
    """Test display lines."""

    def test_lines(self):
        assert format_diff_summary(create_diff_summary(OLD, NEW)) == [
            "Added: Usage",
            "Modified: Install",
            "Removed: Gone",
        ]

    def test_no_changes(self):
        assert format_diff_summary(DiffSummary(unchanged=["A"])) == ["No section changes"]
