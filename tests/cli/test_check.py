"""Tests for ownerscope check command."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from ownerscope.cli.main import cli

runner = CliRunner()


class TestCheckHuman:
    def test_later_rule_wins(self, sample_repo: Path) -> None:
        result = runner.invoke(cli, ["--root", str(sample_repo), "check", "src/legacy/old.py"])
        assert result.exit_code == 0, result.output
        assert "File: src/legacy/old.py" in result.output
        assert "Rule: src/legacy/ (line 3)" in result.output
        assert "Owners: @legacy-team" in result.output

    def test_unmatched_single_file_exits_1(self, sample_repo: Path) -> None:
        result = runner.invoke(cli, ["--root", str(sample_repo), "check", "Makefile"])
        assert result.exit_code == 1
        assert "No matching rule - file has no owners" in result.output

    def test_unmatched_among_many_exits_0(self, sample_repo: Path) -> None:
        result = runner.invoke(
            cli, ["--root", str(sample_repo), "check", "Makefile", "src/main.py"]
        )
        assert result.exit_code == 0
        assert "Owners: @core" in result.output

    def test_explicitly_unowned(self, sample_repo: Path) -> None:
        result = runner.invoke(cli, ["--root", str(sample_repo), "check", "generated/api.txt"])
        assert result.exit_code == 0
        assert "Rule: generated/ (line 7)" in result.output
        assert "(none - explicitly unowned)" in result.output

    def test_dot_slash_prefix_normalized(self, sample_repo: Path) -> None:
        result = runner.invoke(cli, ["--root", str(sample_repo), "check", "./README.md"])
        assert "File: README.md" in result.output
        assert "Owners: @docs @writers" in result.output

    def test_no_files(self, sample_repo: Path) -> None:
        result = runner.invoke(cli, ["--root", str(sample_repo), "check"])
        assert result.exit_code == 1
        assert "No files specified" in result.output


class TestCheckJson:
    def test_json_output(self, sample_repo: Path) -> None:
        result = runner.invoke(
            cli,
            ["--root", str(sample_repo), "check", "--json", "src/legacy/old.py", "Makefile"],
        )
        assert result.exit_code == 0
        assert json.loads(result.stdout) == {
            "src/legacy/old.py": {"rule": "src/legacy/", "line": 3, "owners": ["@legacy-team"]},
            "Makefile": {"rule": None, "line": None, "owners": []},
        }

    def test_stdin(self, sample_repo: Path) -> None:
        result = runner.invoke(
            cli,
            ["--root", str(sample_repo), "check", "--stdin", "--json"],
            input="src/main.py\n\n  docs/guide.txt  \nsrc/main.py\n",
        )
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert list(data) == ["src/main.py", "docs/guide.txt"]
        assert data["docs/guide.txt"]["owners"] == ["@docs"]

    def test_files_from(self, sample_repo: Path, tmp_path: Path) -> None:
        listing = tmp_path / "changed.txt"
        listing.write_text(".github/CODEOWNERS\nREADME.md\n")
        result = runner.invoke(
            cli,
            ["--root", str(sample_repo), "check", "--json", "--files-from", str(listing)],
        )
        data = json.loads(result.stdout)
        assert data[".github/CODEOWNERS"]["owners"] == ["@infra"]
        assert data["README.md"]["rule"] == "*.md"


class TestCheckDiscovery:
    def test_missing_codeowners(self, tmp_path: Path) -> None:
        empty = tmp_path / "empty"
        empty.mkdir()
        (empty / ".ownerscope.yaml").write_text("rules:\n  path: no-such-owners-file\n")
        result = runner.invoke(cli, ["--root", str(empty), "check", "a.txt"])
        assert result.exit_code == 1
        assert "No CODEOWNERS file found" in result.output

    def test_configured_rules_path(self, make_tree) -> None:
        root = make_tree(
            {".ownerscope.yaml": "rules:\n  path: meta/OWNERS\n", "meta/OWNERS": "* @meta\n"}
        )
        result = runner.invoke(cli, ["--root", str(root), "check", "--json", "x.py"])
        assert json.loads(result.stdout)["x.py"]["owners"] == ["@meta"]

    def test_invalid_config(self, make_tree) -> None:
        root = make_tree({"CODEOWNERS": "* @a\n", ".ownerscope.yaml": "coverage: [\n"})
        result = runner.invoke(cli, ["--root", str(root), "check", "x.py"])
        assert result.exit_code == 1
        assert "Failed to parse config" in result.output

    def test_from_subdirectory(self, sample_repo: Path) -> None:
        """Paths stay relative to the repository root, not the start directory."""
        result = runner.invoke(
            cli, ["--root", str(sample_repo / "src"), "check", "--json", "src/main.py"]
        )
        assert json.loads(result.stdout)["src/main.py"]["owners"] == ["@core"]

    def test_repo_config_found_from_subdirectory(self, make_tree) -> None:
        """A repo-root .ownerscope.yaml applies when the CLI starts in a subdirectory."""
        root = make_tree(
            {
                ".ownerscope.yaml": "rules:\n  path: owners/RULES\n",
                "owners/RULES": "/src/ @platform\n",
                "src/main.py": "",
            }
        )
        result = runner.invoke(cli, ["--root", str(root / "src"), "check", "--json", "src/main.py"])
        assert result.exit_code == 0
        assert json.loads(result.stdout)["src/main.py"]["owners"] == ["@platform"]
