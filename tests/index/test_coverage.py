"""Tests for coverage computation."""

import pytest

from ownerscope.index.coverage import CoverageReport, compute_coverage
from ownerscope.index.file_index import FileIndex
from ownerscope.rules.parser import parse_rules

TEN_FILES = [
    "src/a.rs", "src/b.rs", "src/c.rs", "docs/d.md", "docs/e.md",
    "lib/f.py", "lib/g.py", "scripts/h.sh", "Makefile", "README.md",
]


class TestComputeCoverage:
    """Tests for compute_coverage."""

    def test_seventy_percent(self) -> None:
        """Given 10 files with 7 covered, coverage is 70.0%."""
        index = FileIndex.from_paths(TEN_FILES)
        rules = parse_rules("src/ @core\ndocs/ @docs\nlib/ @lib\n")
        report = compute_coverage(index, rules)
        assert report.total == 10
        assert report.owned == 7
        assert report.unowned == ("scripts/h.sh", "Makefile", "README.md")
        assert report.percentage == pytest.approx(70.0)
        assert report.mode == "total"
        assert not report.is_complete

    def test_empty_owner_rule_counts_as_covered(self) -> None:
        index = FileIndex.from_paths(["gen/a.txt", "b.txt"])
        report = compute_coverage(index, parse_rules("gen/\n"))
        assert report.unowned == ("b.txt",)

    def test_owned_plus_unowned_is_total(self) -> None:
        index = FileIndex.from_paths(TEN_FILES)
        for text in ["", "* @a", "*.rs @a", "src/ @a\nMakefile @b", "nothing/ @x"]:
            report = compute_coverage(index, parse_rules(text))
            assert report.owned + len(report.unowned) == report.total
            assert 0.0 <= report.percentage <= 100.0

    def test_empty_index_is_complete(self) -> None:
        report = compute_coverage(FileIndex.from_paths([]), parse_rules(""))
        assert report.total == 0
        assert report.percentage == 100.0
        assert report.is_complete

    def test_checked_mode(self) -> None:
        """Given an explicit file list, only those files are considered."""
        index = FileIndex.from_paths(TEN_FILES)
        rules = parse_rules("src/ @core\n")
        report = compute_coverage(index, rules, files=["src/a.rs", "Makefile", "src/a.rs"])
        assert report.mode == "checked"
        assert report.total == 2
        assert report.unowned == ("Makefile",)
        assert report.percentage == pytest.approx(50.0)

    def test_checked_mode_file_outside_index(self) -> None:
        report = compute_coverage(
            FileIndex.from_paths([]), parse_rules("new/ @a\n"), files=["new/x.py", "y.py"]
        )
        assert report.total == 2
        assert report.unowned == ("y.py",)


class TestCoverageReport:
    def test_to_dict(self) -> None:
        report = CoverageReport(total=3, unowned=("a",))
        assert report.to_dict() == {
            "mode": "total",
            "total": 3,
            "owned": 2,
            "unowned_count": 1,
            "percentage": 66.7,
            "unowned": ["a"],
        }
