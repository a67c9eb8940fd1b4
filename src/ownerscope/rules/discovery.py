"""Locate the CODEOWNERS file and the repository root it governs."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ownerscope.config.constants import CODEOWNERS_LOCATIONS
from ownerscope.core.errors import RulesFileError
from ownerscope.core.logging import get_logger

log = get_logger("rules.discovery")


@dataclass(frozen=True, slots=True)
class RulesLocation:
    """A rules file and the directory its patterns are relative to."""

    path: Path
    repo_root: Path


def find_rules_file(start: Path, *, override: str | None = None) -> RulesLocation:
    """Search ``start`` and its ancestors for a CODEOWNERS file.

    At each level the standard locations are tried in order
    (``.github/CODEOWNERS``, ``CODEOWNERS``, ``docs/CODEOWNERS``); the level
    where one is found is the repository root. With ``override``, only that
    location (relative to each level) is tried.

    Raises:
        RulesFileError: If no ancestor holds a CODEOWNERS file.
    """
    locations = (override,) if override else CODEOWNERS_LOCATIONS
    current = start.resolve()
    for directory in (current, *current.parents):
        for location in locations:
            candidate = directory / location
            if candidate.is_file():
                log.debug("rules_file_found", path=str(candidate), repo_root=str(directory))
                return RulesLocation(path=candidate, repo_root=directory)
    raise RulesFileError.not_found(str(start))
