"""Tests for CODEOWNERS parsing."""

from __future__ import annotations

from pathlib import Path

import pytest

from ownerscope.core.errors import ErrorCode, RulesFileError
from ownerscope.rules.parser import parse_line, parse_rules, read_rules_file
from ownerscope.rules.pattern import Directory, SingleSegmentGlob


class TestParseLine:
    """Single-line parsing and source positions."""

    def test_pattern_and_owners(self) -> None:
        rule = parse_line("*.rs @rust-team @alice", 3)
        assert rule is not None
        assert rule.raw_pattern == "*.rs"
        assert rule.owners == ("@rust-team", "@alice")
        assert rule.line_number == 3
        assert rule.pattern.compiled == SingleSegmentGlob("**/*.rs")

    def test_offsets(self) -> None:
        """Given leading whitespace, spans point at the tokens themselves."""
        rule = parse_line("  /src/   @a  @b", 0)
        assert rule is not None
        assert rule.pattern_span == (2, 7)
        assert rule.owners_start == 10

    def test_no_owners(self) -> None:
        """A rule with no owners is kept; owners_start sits at the pattern end."""
        rule = parse_line("docs/generated/", 7)
        assert rule is not None
        assert rule.owners == ()
        assert rule.is_unowned
        assert rule.owners_start == rule.pattern_span[1] == len("docs/generated/")

    def test_tabs_separate_tokens(self) -> None:
        rule = parse_line("src/\t@a\t\t@b", 0)
        assert rule is not None
        assert rule.owners == ("@a", "@b")
        assert rule.owners_start == 5

    @pytest.mark.parametrize("line", ["", "   ", "\t", "# comment", "   # indented comment"])
    def test_skipped_lines(self, line: str) -> None:
        assert parse_line(line, 0) is None

    def test_hash_inside_owner_is_kept(self) -> None:
        """Only a leading ``#`` makes a comment; later tokens are taken verbatim."""
        rule = parse_line("src/ @a #not-a-comment", 0)
        assert rule is not None
        assert rule.owners == ("@a", "#not-a-comment")

    def test_owner_token_not_validated(self) -> None:
        rule = parse_line("src/ team@example.com not-an-owner", 0)
        assert rule is not None
        assert rule.owners == ("team@example.com", "not-an-owner")


class TestParseRules:
    def test_file_order_and_zero_based_lines(self) -> None:
        text = "# header\n\n*.rs @rust\n/src/ @core\n"
        rules = parse_rules(text)
        assert len(rules) == 2
        assert [r.line_number for r in rules] == [2, 3]
        assert [r.raw_pattern for r in rules] == ["*.rs", "/src/"]
        assert rules[1].pattern.compiled == Directory("src")

    def test_empty_text(self) -> None:
        rules = parse_rules("")
        assert len(rules) == 0
        assert not rules

    def test_crlf_line_endings(self) -> None:
        """Given CRLF input, the trailing CR never leaks into a token."""
        rules = parse_rules("*.rs @rust\r\n/src/ @core\r\n")
        assert [r.owners for r in rules] == [("@rust",), ("@core",)]
        assert [r.line_number for r in rules] == [0, 1]

    def test_duplicate_patterns_kept(self) -> None:
        rules = parse_rules("src/ @a\nsrc/ @b\n")
        assert [r.owners for r in rules] == [("@a",), ("@b",)]

    def test_every_rule_has_a_pattern(self) -> None:
        text = "\n".join(["# c", "a @x", "   ", "b", "c @y @z", "#d"])
        rules = parse_rules(text)
        assert all(r.raw_pattern for r in rules)
        assert [r.line_number for r in rules] == [1, 3, 4]


class TestReadRulesFile:
    def test_reads_file(self, tmp_path: Path) -> None:
        path = tmp_path / "CODEOWNERS"
        path.write_text("* @everyone\n")
        rules = read_rules_file(path)
        assert rules[0].owners == ("@everyone",)

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(RulesFileError) as exc_info:
            read_rules_file(tmp_path / "CODEOWNERS")
        assert exc_info.value.code == ErrorCode.RULES_FILE_NOT_FOUND

    def test_undecodable_file(self, tmp_path: Path) -> None:
        path = tmp_path / "CODEOWNERS"
        path.write_bytes(b"* @a\n\xff\xfe\xfa\n")
        with pytest.raises(RulesFileError) as exc_info:
            read_rules_file(path)
        assert exc_info.value.code == ErrorCode.RULES_FILE_READ_FAILED
        assert exc_info.value.retryable
