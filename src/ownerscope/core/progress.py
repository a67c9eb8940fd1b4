"""User-facing terminal output for CLI commands.

Design principles:
- Results go to stdout, status lines to stderr
- Spinner only on a TTY, so pipes and CI stay clean
- Suppress structlog console output while a spinner is live

Usage::

    from ownerscope.core.progress import spinner, status

    with spinner("Scanning files"):
        index = FileIndex.from_root(root)

    status("All files have owners", style="success")  # ✓ All files have owners
"""

from __future__ import annotations

import sys
import threading
from collections.abc import Iterator
from contextlib import contextmanager

from rich.console import Console

# stdout for results, stderr for status
_console = Console(highlight=False, soft_wrap=True)
_err_console = Console(stderr=True, highlight=False)

_STYLES = {
    "success": "[green]✓[/green] ",
    "error": "[red]✗[/red] ",
    "warning": "[yellow]![/yellow] ",
    "info": "  ",
    "none": "",
}

_suppress_console_logs = threading.local()


def is_console_suppressed() -> bool:
    """Check if console logging is currently suppressed."""
    return getattr(_suppress_console_logs, "active", False)


@contextmanager
def suppress_console_logs() -> Iterator[None]:
    """Pause structlog console output. File handlers still receive logs."""
    _suppress_console_logs.active = True
    try:
        yield
    finally:
        _suppress_console_logs.active = False


def _is_tty() -> bool:
    return hasattr(sys.stderr, "isatty") and sys.stderr.isatty()


def get_console() -> Console:
    """Get the shared stdout console."""
    return _console


def status(message: str, *, style: str = "info", indent: int = 0) -> None:
    """Print a styled status message to stdout."""
    prefix = _STYLES.get(style, "")
    padding = " " * indent
    _console.print(f"{padding}{prefix}{message}")


@contextmanager
def spinner(message: str) -> Iterator[None]:
    """Show a spinner on stderr while the block runs (TTY only)."""
    if not _is_tty():
        yield
        return

    with suppress_console_logs(), _err_console.status(message):
        yield
