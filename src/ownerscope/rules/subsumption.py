"""Dead-rule detection by syntactic pattern containment.

``subsumes(a, b)`` holds when every path matched by ``a`` is provably also
matched by ``b``. If ``a`` appears before ``b`` in the file, ``a`` can never
win resolution and is dead. The check only recognizes a few shapes
(identical, universal, extension-style, directory-style) and answers False
for everything else, so it never flags a rule that might still be live.
"""

from __future__ import annotations

from dataclasses import dataclass

from ownerscope.core.logging import get_logger
from ownerscope.rules.models import Rule, RuleSet
from ownerscope.rules.pattern import normalize_pattern

log = get_logger("rules.subsumption")

_DIR_SUFFIXES = ("/", "/**", "/*")


@dataclass(frozen=True, slots=True)
class DeadRule:
    """A rule whose matches are all taken over by a later rule."""

    rule: Rule
    shadowed_by: Rule


def subsumes(a: str, b: str) -> bool:
    """Check if every path matched by pattern ``a`` is also matched by ``b``."""
    a = normalize_pattern(a)
    b = normalize_pattern(b)

    if a == b:
        return True

    if b in ("*", "**"):
        return True

    # Extension style: *.rs.bak is subsumed by *.bak
    if a.startswith("*"):
        if b.startswith("*"):
            return a[1:].endswith(b[1:])
        return False

    a_dir = _directory_form(a)
    b_dir = _directory_form(b)
    a_is_dir = a.endswith(_DIR_SUFFIXES)
    b_is_dir = b.endswith(_DIR_SUFFIXES)

    # src/lib/ is subsumed by src/ and src/**
    if a_is_dir and b_is_dir:
        return a_dir == b_dir or _is_under(a_dir, b_dir)

    # src/main.rs is subsumed by src/ and src/**
    if b_is_dir and not a_is_dir:
        return a == b_dir or _is_under(a, b_dir)

    return False


def find_dead_rules(rules: RuleSet) -> list[DeadRule]:
    """Find rules subsumed by some later rule, in file order.

    Each dead rule is reported once, against the first later rule that
    subsumes it.
    """
    dead: list[DeadRule] = []
    for i, rule in enumerate(rules):
        for later in rules.rules[i + 1 :]:
            if subsumes(rule.raw_pattern, later.raw_pattern):
                dead.append(DeadRule(rule=rule, shadowed_by=later))
                break

    if dead:
        log.debug("dead_rules_found", count=len(dead))
    return dead


def _directory_form(pattern: str) -> str:
    # Strip every trailing "/", then "/**", then "/*"
    for suffix in _DIR_SUFFIXES:
        while pattern.endswith(suffix):
            pattern = pattern.removesuffix(suffix)
    return pattern


def _is_under(path: str, directory: str) -> bool:
    return path.startswith(directory) and path[len(directory) : len(directory) + 1] == "/"
