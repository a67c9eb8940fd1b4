"""Read-only snapshot of the files under a scan root.

Built once per invocation from a directory walk. Any change to the tree
needs a new index; there is no incremental update.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from pathlib import Path

from ownerscope.core.logging import get_logger
from ownerscope.index.walker import walk_files
from ownerscope.rules.models import RuleSet
from ownerscope.rules.pattern import compile_pattern

log = get_logger("index.file_index")


class FileIndex:
    """Immutable, de-duplicated, ordered collection of relative file paths."""

    __slots__ = ("_paths", "_members", "_root")

    def __init__(self, paths: Iterable[str], *, root: Path | None = None) -> None:
        # dict.fromkeys de-duplicates while keeping first-seen order
        self._paths: tuple[str, ...] = tuple(dict.fromkeys(paths))
        self._members: frozenset[str] = frozenset(self._paths)
        self._root = root

    @classmethod
    def from_root(
        cls,
        root: Path,
        *,
        respect_gitignore: bool = True,
        extra_excludes: list[str] | None = None,
    ) -> FileIndex:
        """Walk ``root`` once and capture every non-ignored regular file."""
        index = cls(
            walk_files(root, respect_gitignore=respect_gitignore, extra_excludes=extra_excludes),
            root=root,
        )
        log.debug("file_index_built", root=str(root), files=len(index))
        return index

    @classmethod
    def from_paths(cls, paths: Iterable[str]) -> FileIndex:
        return cls(paths)

    @property
    def root(self) -> Path | None:
        return self._root

    @property
    def paths(self) -> tuple[str, ...]:
        return self._paths

    def __len__(self) -> int:
        return len(self._paths)

    def __iter__(self) -> Iterator[str]:
        return iter(self._paths)

    def __contains__(self, path: object) -> bool:
        return path in self._members

    def __repr__(self) -> str:
        return f"FileIndex(files={len(self._paths)}, root={self._root!r})"

    def matching_files(self, pattern: str) -> list[str]:
        """Indexed paths matched by ``pattern``, in index order."""
        compiled = compile_pattern(pattern)
        return [path for path in self._paths if compiled.matches(path)]

    def count_matches(self, pattern: str) -> int:
        compiled = compile_pattern(pattern)
        return sum(1 for path in self._paths if compiled.matches(path))

    def unowned_files(self, rules: RuleSet) -> list[str]:
        """Indexed paths that no rule matches.

        A rule with no owners still counts as covering its paths.
        """
        return [path for path in self._paths if not any(rule.matches(path) for rule in rules)]
