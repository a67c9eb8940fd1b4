"""Ownership rules: pattern compilation, parsing, resolution, dead-rule analysis."""

from ownerscope.rules.discovery import RulesLocation, find_rules_file
from ownerscope.rules.models import OwnershipMatch, Rule, RuleSet
from ownerscope.rules.parser import parse_rules, read_rules_file
from ownerscope.rules.pattern import Pattern, compile_pattern, matches, pattern_matches
from ownerscope.rules.resolver import OwnershipResolver, explain, resolve
from ownerscope.rules.subsumption import DeadRule, find_dead_rules, subsumes

__all__ = [
    "DeadRule",
    "OwnershipMatch",
    "OwnershipResolver",
    "Pattern",
    "Rule",
    "RuleSet",
    "RulesLocation",
    "compile_pattern",
    "explain",
    "find_dead_rules",
    "find_rules_file",
    "matches",
    "parse_rules",
    "pattern_matches",
    "read_rules_file",
    "resolve",
    "subsumes",
]
