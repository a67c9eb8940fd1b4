"""Directory walker producing the paths a file index is built from.

Yields every regular file under the root as a relative ``/``-separated
string. Hidden entries are included; VCS internals and ignored paths are
not. Symlinks are not followed and are not reported.
"""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path

from ownerscope.core.errors import WalkError
from ownerscope.core.logging import get_logger
from ownerscope.index._internal.ignore import IgnoreChecker

log = get_logger("index.walker")


def walk_files(
    root: Path,
    *,
    respect_gitignore: bool = True,
    extra_excludes: list[str] | None = None,
) -> Iterator[str]:
    """Walk ``root`` top-down in sorted order.

    Raises:
        WalkError: If ``root`` is missing or not a directory.
    """
    if not root.exists():
        raise WalkError.root_not_found(str(root))
    if not root.is_dir():
        raise WalkError.not_a_directory(str(root))

    checker = IgnoreChecker(root, extra_excludes, respect_gitignore=respect_gitignore)

    for dirpath, dirnames, filenames in root.walk(on_error=_log_walk_error):
        rel_dir = dirpath.relative_to(root).as_posix()
        rel_dir = "" if rel_dir == "." else rel_dir
        checker.load_directory(rel_dir)

        kept: list[str] = []
        for name in sorted(dirnames):
            if (dirpath / name).is_symlink():
                continue
            if not checker.should_prune_dir(_join(rel_dir, name)):
                kept.append(name)
        dirnames[:] = kept

        for name in sorted(filenames):
            path = dirpath / name
            if path.is_symlink() or not path.is_file():
                continue
            rel_path = _join(rel_dir, name)
            if not checker.is_ignored(rel_path):
                yield rel_path


def _join(rel_dir: str, name: str) -> str:
    return f"{rel_dir}/{name}" if rel_dir else name


def _log_walk_error(error: OSError) -> None:
    # Unreadable subdirectories are skipped, matching `git ls-files` behavior
    log.warning("walk_error", path=str(error.filename), error=str(error))
