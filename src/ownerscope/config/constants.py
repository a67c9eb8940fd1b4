"""Configuration constants.

Values here are not user-configurable. For configurable values, see models.py.
"""

CODEOWNERS_LOCATIONS: tuple[str, ...] = (
    ".github/CODEOWNERS",
    "CODEOWNERS",
    "docs/CODEOWNERS",
)
"""Candidate rules file locations, relative to a directory, in lookup order."""

REPO_CONFIG_NAME = ".ownerscope.yaml"
"""Per-repository config file, at the repository root."""

IGNORE_FILE_NAME = ".ownerscopeignore"
"""Tool-specific ignore file, same syntax as .gitignore."""
