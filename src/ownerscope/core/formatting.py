"""Summary formatting utilities for consistent terminal output."""

from __future__ import annotations


def pluralize(count: int, singular: str, plural: str | None = None) -> str:
    """Return grammatically correct singular/plural form.

    Examples:
        (1, "file") -> "1 file"
        (3, "file") -> "3 files"
    """
    if plural is None:
        plural = singular + "s"
    word = singular if count == 1 else plural
    return f"{count} {word}"


def format_percentage(value: float) -> str:
    """Format a percentage with one decimal place, e.g. 70.0 -> "70.0%"."""
    return f"{value:.1f}%"


def coverage_style(percentage: float) -> str:
    """Rich style for a coverage percentage: green >= 90, yellow >= 70, red below."""
    if percentage >= 90.0:
        return "green"
    if percentage >= 70.0:
        return "yellow"
    return "red"
