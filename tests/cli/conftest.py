"""Shared fixtures for CLI command tests."""

from __future__ import annotations

from pathlib import Path

import pytest

SAMPLE_CODEOWNERS = """\
# Ownership
src/ @core
src/legacy/ @legacy-team
docs/ @docs
*.md @docs @writers
.github/ @infra
generated/
"""


@pytest.fixture
def sample_repo(make_tree) -> Path:
    """Ten files, seven of them matched by a rule (one explicitly unowned)."""
    return make_tree(
        {
            ".github/CODEOWNERS": SAMPLE_CODEOWNERS,
            "src/main.py": "",
            "src/util.py": "",
            "src/legacy/old.py": "",
            "docs/guide.txt": "",
            "README.md": "",
            "generated/api.txt": "",
            "scripts/build.sh": "",
            "Makefile": "",
            "setup.cfg": "",
        }
    )
