"""CODEOWNERS lint checks."""

from ownerscope.lint.checks import lint_rules
from ownerscope.lint.models import Diagnostic, LintResult, Severity

__all__ = [
    "Diagnostic",
    "LintResult",
    "Severity",
    "lint_rules",
]
