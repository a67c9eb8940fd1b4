"""Directories the walker never descends into.

These are VCS internals. They are pruned regardless of ignore files, since
hidden entries are otherwise included in the scan.
"""

from __future__ import annotations

HARDCODED_DIRS: frozenset[str] = frozenset(
    (
        ".git",
        ".svn",
        ".hg",
        ".bzr",
    )
)

GITIGNORE_NAME = ".gitignore"


def is_hardcoded_dir(dirname: str) -> bool:
    """Check if directory is always pruned (not overridable)."""
    return dirname in HARDCODED_DIRS
