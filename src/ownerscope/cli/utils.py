"""CLI utilities."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

import click

from ownerscope.config import OwnerScopeConfig, find_config_root, load_config
from ownerscope.core.errors import OwnerScopeError
from ownerscope.core.logging import configure_logging, get_logger
from ownerscope.index.file_index import FileIndex
from ownerscope.rules.discovery import RulesLocation, find_rules_file
from ownerscope.rules.models import RuleSet
from ownerscope.rules.parser import read_rules_file

log = get_logger("cli")


@dataclass
class Workspace:
    """Everything a command needs: config, the rules file and its parsed rules."""

    config: OwnerScopeConfig
    location: RulesLocation
    rules: RuleSet

    @property
    def repo_root(self) -> Path:
        return self.location.repo_root

    def display_path(self) -> str:
        """Rules file path relative to the repository root."""
        return self.location.path.relative_to(self.repo_root).as_posix()

    def build_index(self) -> FileIndex:
        try:
            return FileIndex.from_root(
                self.repo_root,
                respect_gitignore=self.config.walk.respect_gitignore,
                extra_excludes=self.config.walk.extra_excludes,
            )
        except OwnerScopeError as e:
            raise click.ClickException(e.message) from e


def load_workspace(ctx: click.Context) -> Workspace:
    """Load config, locate the CODEOWNERS file and parse it.

    Config is read from the nearest directory at or above the start that
    holds .ownerscope.yaml (it may name a custom rules path), and again
    from the repository root if that differs.

    Raises:
        click.ClickException: On config, discovery or read failures.
    """
    start: Path = ctx.obj["start"]
    try:
        config_root = find_config_root(start) or start.resolve()
        config = load_config(config_root)
        location = find_rules_file(start, override=config.rules.path)
        if location.repo_root != config_root:
            config = load_config(location.repo_root)
        rules = read_rules_file(location.path)
    except OwnerScopeError as e:
        log.debug("workspace_load_failed", error=e.error_name, **e.details)
        raise click.ClickException(e.message) from e

    if not ctx.obj.get("verbose"):
        configure_logging(config=config.logging)
    log.debug("workspace_loaded", rules_file=str(location.path), rules=len(rules))
    return Workspace(config=config, location=location, rules=rules)


def normalize_query_path(path: str) -> str:
    """Turn a user-typed path into the relative form rules match against."""
    path = path.replace("\\", "/")
    while path.startswith("./"):
        path = path[2:]
    return path


def collect_files(
    files: Iterable[str] = (),
    files_from: Path | None = None,
    stdin: bool = False,
) -> list[str]:
    """Merge file arguments, a --files-from list and stdin lines.

    Lines are trimmed, blanks dropped and duplicates removed, keeping
    first-seen order.

    Raises:
        click.ClickException: If the --files-from file cannot be read.
    """
    collected: list[str] = list(files)

    if files_from is not None:
        try:
            content = files_from.read_text(encoding="utf-8")
        except OSError as e:
            raise click.ClickException(f"Failed to read '{files_from}': {e}") from e
        collected.extend(content.splitlines())

    if stdin:
        collected.extend(click.get_text_stream("stdin").read().splitlines())

    cleaned = (normalize_query_path(line.strip()) for line in collected)
    return list(dict.fromkeys(line for line in cleaned if line))
