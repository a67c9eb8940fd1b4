"""Last-match-wins ownership resolution.

Among all rules whose pattern matches a path, the one appearing latest in
file order determines the owners. File order is the only precedence
signal; there is no specificity ranking.
"""

from __future__ import annotations

from ownerscope.rules.models import OwnershipMatch, Rule, RuleSet


def resolve(rules: RuleSet, path: str) -> Rule | None:
    """Return the winning rule for ``path``, or None when no rule matches."""
    for rule in reversed(rules):
        if rule.matches(path):
            return rule
    return None


def explain(rules: RuleSet, path: str) -> OwnershipMatch:
    """Resolve ``path`` and report every matching rule along with the winner."""
    candidates = tuple(rule for rule in rules if rule.matches(path))
    winner = candidates[-1] if candidates else None
    return OwnershipMatch(path=path, rule=winner, candidates=candidates)


class OwnershipResolver:
    """Resolver bound to one rule set, for repeated single-path queries."""

    def __init__(self, rules: RuleSet) -> None:
        self._rules = rules

    @property
    def rules(self) -> RuleSet:
        return self._rules

    def resolve(self, path: str) -> Rule | None:
        return resolve(self._rules, path)

    def owners_of(self, path: str) -> tuple[str, ...] | None:
        """Owners for ``path``: None when unmatched, () when explicitly unowned."""
        rule = self.resolve(path)
        return rule.owners if rule is not None else None

    def explain(self, path: str) -> OwnershipMatch:
        return explain(self._rules, path)
