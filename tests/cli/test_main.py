"""Tests for the ownerscope command group."""

from __future__ import annotations

from pathlib import Path

from click.testing import CliRunner

from ownerscope import __version__
from ownerscope.cli.main import cli

runner = CliRunner()


class TestCliGroup:
    def test_version(self) -> None:
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert f"ownerscope, version {__version__}" in result.output

    def test_help_lists_commands(self) -> None:
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        for name in ("check", "coverage", "lint"):
            assert name in result.output

    def test_root_must_exist(self, tmp_path: Path) -> None:
        result = runner.invoke(cli, ["--root", str(tmp_path / "missing"), "lint"])
        assert result.exit_code == 2

    def test_verbose_still_runs(self, sample_repo: Path) -> None:
        result = runner.invoke(cli, ["-v", "--root", str(sample_repo), "check", "--json", "a"])
        assert result.exit_code == 0
