"""Ignore-file pattern matching for the directory walker.

Patterns come from, in precedence order (later wins):
- extra patterns from configuration
- ``.git/info/exclude`` at the root (with respect_gitignore)
- ``.gitignore`` files at every level (with respect_gitignore)
- ``.ownerscopeignore`` files at every level

Pattern syntax follows .gitignore closely enough for file scanning:
- Blank lines and ``#`` comments are skipped
- ``!pattern`` re-includes a path excluded by an earlier pattern
- A trailing ``/`` restricts the pattern to directories
- A pattern without an inner ``/`` matches a basename at any depth below
  the ignore file; otherwise it is anchored to the ignore file's directory
- Globs use fnmatch, so ``*`` may cross ``/`` in anchored patterns, and
  ``**/`` also matches zero directories (``**/build`` matches ``build``)

The last matching pattern decides. VCS directories are pruned separately
(see ``ownerscope.core.excludes``) and cannot be re-included.
"""

from __future__ import annotations

import fnmatch
from dataclasses import dataclass
from pathlib import Path, PurePosixPath

from ownerscope.config.constants import IGNORE_FILE_NAME
from ownerscope.core.excludes import GITIGNORE_NAME, is_hardcoded_dir
from ownerscope.core.logging import get_logger

__all__ = ["IgnoreChecker", "IgnorePattern", "parse_ignore_line"]

log = get_logger("index.ignore")


def _glob_matches(rel_path: str, glob: str) -> bool:
    """fnmatch where ``**/`` may also match zero directories."""
    if fnmatch.fnmatchcase(rel_path, glob):
        return True
    if glob.startswith("**/") and _glob_matches(rel_path, glob[3:]):
        return True
    start = glob.find("/**/")
    while start != -1:
        if _glob_matches(rel_path, glob[:start] + glob[start + 3 :]):
            return True
        start = glob.find("/**/", start + 1)
    return False


@dataclass(frozen=True, slots=True)
class IgnorePattern:
    """One parsed ignore line, scoped to the directory that declared it."""

    glob: str
    negated: bool = False
    dir_only: bool = False
    anchored: bool = False
    base: str = ""  # Relative directory of the declaring file, "" for root

    def matches(self, rel_path: str, *, is_dir: bool) -> bool:
        if self.dir_only and not is_dir:
            return False

        if self.base:
            if not rel_path.startswith(f"{self.base}/"):
                return False
            rel_path = rel_path[len(self.base) + 1 :]

        if self.anchored:
            return _glob_matches(rel_path, self.glob)
        return fnmatch.fnmatchcase(PurePosixPath(rel_path).name, self.glob)


def parse_ignore_line(line: str, base: str = "") -> IgnorePattern | None:
    """Parse one ignore-file line, or None for blanks and comments."""
    line = line.strip()
    if not line or line.startswith("#"):
        return None

    negated = line.startswith("!")
    if negated:
        line = line[1:]

    dir_only = line.endswith("/")
    line = line.rstrip("/")
    anchored = "/" in line
    glob = line.lstrip("/")
    if not glob:
        return None

    return IgnorePattern(
        glob=glob,
        negated=negated,
        dir_only=dir_only,
        anchored=anchored,
        base=base,
    )


class IgnoreChecker:
    """Decides whether a path under ``root`` is excluded from the scan.

    Ignore files in subdirectories are picked up as the walker reaches them
    through ``load_directory``; patterns only ever apply below their own
    directory, so loading order between siblings does not matter.
    """

    def __init__(
        self,
        root: Path,
        extra_patterns: list[str] | None = None,
        *,
        respect_gitignore: bool = True,
    ) -> None:
        self._root = root
        self._respect_gitignore = respect_gitignore
        self._patterns: list[IgnorePattern] = []

        for line in extra_patterns or []:
            pattern = parse_ignore_line(line)
            if pattern is not None:
                self._patterns.append(pattern)

        if respect_gitignore:
            self._load_ignore_file(root / ".git" / "info" / "exclude")

    def load_directory(self, rel_dir: str) -> None:
        """Load ignore files declared in ``rel_dir`` ("" for the root)."""
        directory = self._root / rel_dir if rel_dir else self._root
        if self._respect_gitignore:
            self._load_ignore_file(directory / GITIGNORE_NAME, base=rel_dir)
        self._load_ignore_file(directory / IGNORE_FILE_NAME, base=rel_dir)

    def _load_ignore_file(self, path: Path, base: str = "") -> None:
        if not path.is_file():
            return
        try:
            content = path.read_text(encoding="utf-8", errors="replace")
        except OSError as e:
            # A vanished or unreadable ignore file excludes nothing
            log.warning("ignore_file_unreadable", path=str(path), error=str(e))
            return

        for line in content.splitlines():
            pattern = parse_ignore_line(line, base)
            if pattern is not None:
                self._patterns.append(pattern)

    def is_ignored(self, rel_path: str, *, is_dir: bool = False) -> bool:
        """Check a single path, without looking at its parent directories."""
        ignored = False
        for pattern in self._patterns:
            if pattern.matches(rel_path, is_dir=is_dir):
                ignored = not pattern.negated
        return ignored

    def should_prune_dir(self, rel_dir: str) -> bool:
        """Check if the walker should skip a directory entirely."""
        name = rel_dir.rsplit("/", 1)[-1]
        return is_hardcoded_dir(name) or self.is_ignored(rel_dir, is_dir=True)
