"""Rule-level checks over a parsed CODEOWNERS file."""

from __future__ import annotations

from ownerscope.core.logging import get_logger
from ownerscope.index.file_index import FileIndex
from ownerscope.lint.models import Diagnostic, LintResult, Severity
from ownerscope.owners.cache import OwnerValidator
from ownerscope.rules.models import Rule, RuleSet
from ownerscope.rules.subsumption import find_dead_rules

log = get_logger("lint.checks")


def _at_pattern(rule: Rule, code: str, message: str, severity: Severity) -> Diagnostic:
    start, end = rule.pattern_span
    return Diagnostic(
        line=rule.line_number,
        column=start,
        end_column=end,
        message=message,
        code=code,
        severity=severity,
        pattern=rule.raw_pattern,
    )


def _at_owners(rule: Rule, code: str, message: str, severity: Severity) -> Diagnostic:
    return Diagnostic(
        line=rule.line_number,
        column=rule.owners_start,
        message=message,
        code=code,
        severity=severity,
        pattern=rule.raw_pattern,
    )


def check_dead_rules(rules: RuleSet) -> list[Diagnostic]:
    return [
        _at_pattern(
            dead.rule,
            "dead-rule",
            f"Rule is never applied: '{dead.shadowed_by.raw_pattern}' "
            f"on line {dead.shadowed_by.line_number + 1} overrides every path it matches",
            Severity.WARNING,
        )
        for dead in find_dead_rules(rules)
    ]


def check_unowned_rules(rules: RuleSet) -> list[Diagnostic]:
    return [
        _at_pattern(rule, "no-owners", "Rule assigns no owners", Severity.INFO)
        for rule in rules
        if rule.is_unowned
    ]


def check_duplicate_owners(rules: RuleSet) -> list[Diagnostic]:
    diagnostics: list[Diagnostic] = []
    for rule in rules:
        seen: set[str] = set()
        for owner in rule.owners:
            if owner in seen:
                diagnostics.append(
                    _at_owners(
                        rule, "duplicate-owner", f"Owner {owner} listed twice", Severity.HINT
                    )
                )
            seen.add(owner)
    return diagnostics


def check_unmatched_patterns(rules: RuleSet, index: FileIndex) -> list[Diagnostic]:
    return [
        _at_pattern(rule, "no-matching-files", "Pattern matches no files", Severity.WARNING)
        for rule in rules
        if index.count_matches(rule.raw_pattern) == 0
    ]


def check_owner_validity(rules: RuleSet, validator: OwnerValidator) -> list[Diagnostic]:
    diagnostics: list[Diagnostic] = []
    for rule in rules:
        for owner in dict.fromkeys(rule.owners):
            if validator(owner) is False:
                diagnostics.append(
                    _at_owners(rule, "invalid-owner", f"Unknown owner {owner}", Severity.ERROR)
                )
    return diagnostics


def lint_rules(
    rules: RuleSet,
    *,
    path: str = "CODEOWNERS",
    index: FileIndex | None = None,
    validator: OwnerValidator | None = None,
) -> LintResult:
    """Run every applicable check.

    The unmatched-pattern check needs ``index`` and the owner check needs
    ``validator``; each is skipped when its input is absent.
    """
    diagnostics = [
        *check_dead_rules(rules),
        *check_unowned_rules(rules),
        *check_duplicate_owners(rules),
    ]
    if index is not None:
        diagnostics += check_unmatched_patterns(rules, index)
    if validator is not None:
        diagnostics += check_owner_validity(rules, validator)

    diagnostics.sort(key=lambda d: (d.line, d.column))
    result = LintResult(path=path, rules_checked=len(rules), diagnostics=diagnostics)
    log.debug(
        "lint_finished",
        rules=len(rules),
        errors=result.error_count,
        warnings=result.warning_count,
    )
    return result
