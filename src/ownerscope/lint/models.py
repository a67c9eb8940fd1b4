"""Lint models - diagnostics and results."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class Severity(Enum):
    """Diagnostic severity level."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"
    HINT = "hint"


@dataclass
class Diagnostic:
    """A single finding against one rule of a CODEOWNERS file.

    ``line`` and columns are zero-based, as recorded by the parser; renderers
    add one for display.
    """

    line: int
    column: int
    message: str
    code: str  # "dead-rule", "no-owners", ...
    severity: Severity = Severity.WARNING
    end_column: int | None = None
    pattern: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "line": self.line + 1,
            "column": self.column + 1,
            "end_column": self.end_column + 1 if self.end_column is not None else None,
            "severity": self.severity.value,
            "code": self.code,
            "message": self.message,
            "pattern": self.pattern,
        }


@dataclass
class LintResult:
    """All diagnostics for one rules file, in line order."""

    path: str
    rules_checked: int = 0
    diagnostics: list[Diagnostic] = field(default_factory=list)

    def count(self, severity: Severity) -> int:
        return sum(1 for d in self.diagnostics if d.severity is severity)

    @property
    def error_count(self) -> int:
        return self.count(Severity.ERROR)

    @property
    def warning_count(self) -> int:
        return self.count(Severity.WARNING)

    def failed(self, *, strict: bool = False) -> bool:
        """Errors always fail; warnings fail only in strict mode."""
        return self.error_count > 0 or (strict and self.warning_count > 0)

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "rules_checked": self.rules_checked,
            "errors": self.error_count,
            "warnings": self.warning_count,
            "diagnostics": [d.to_dict() for d in self.diagnostics],
        }
