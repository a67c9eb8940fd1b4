"""Root conftest.py for test configuration.

Ensures local src/ directory takes priority over any installed packages,
and keeps user-level config and OWNERSCOPE__ env vars out of every test.
"""

import logging
import os
import sys
from collections.abc import Generator
from pathlib import Path

import pytest

_src_dir = Path(__file__).parent.parent / "src"
if str(_src_dir) not in sys.path:
    sys.path.insert(0, str(_src_dir))

# Force reimport of ownerscope modules if already imported
for module_name in list(sys.modules.keys()):
    if module_name.startswith("ownerscope"):
        del sys.modules[module_name]


@pytest.fixture(autouse=True)
def isolated_config(
    tmp_path_factory: pytest.TempPathFactory, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Point the global config at an empty location and drop OWNERSCOPE__ env vars."""
    global_dir = tmp_path_factory.mktemp("global-config")
    monkeypatch.setattr(
        "ownerscope.config.loader.GLOBAL_CONFIG_PATH", global_dir / "config.yaml"
    )
    for key in list(os.environ):
        if key.startswith("OWNERSCOPE__"):
            monkeypatch.delenv(key)


@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None, None, None]:
    """Reset logging state between tests."""
    import structlog

    from ownerscope.core.logging import clear_run_id

    yield
    structlog.reset_defaults()
    logging.getLogger().handlers.clear()
    clear_run_id()


@pytest.fixture
def make_tree(tmp_path: Path):
    """Create files (with optional content) under tmp_path from relative paths."""

    def _make(files: dict[str, str] | list[str], root: Path | None = None) -> Path:
        base = root or tmp_path
        items = files.items() if isinstance(files, dict) else ((f, "") for f in files)
        for rel, content in items:
            path = base / rel
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content)
        return base

    return _make
