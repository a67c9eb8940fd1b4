"""Rule data models."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field

from ownerscope.rules.pattern import Pattern


@dataclass(frozen=True, slots=True)
class Rule:
    """One ``<pattern> <owner>...`` line of a CODEOWNERS file.

    ``line_number`` is zero-based. ``pattern_span`` is the ``(start, end)``
    character range of the pattern token within its line and ``owners_start``
    the offset of the first owner token (the pattern end when there is none).
    """

    pattern: Pattern
    owners: tuple[str, ...]
    line_number: int
    pattern_span: tuple[int, int]
    owners_start: int

    @property
    def raw_pattern(self) -> str:
        return self.pattern.raw

    @property
    def is_unowned(self) -> bool:
        """True for a rule that explicitly assigns no owners."""
        return not self.owners

    def matches(self, path: str) -> bool:
        return self.pattern.matches(path)


@dataclass(frozen=True, slots=True)
class RuleSet:
    """Rules in file order. Order is precedence: later rules win."""

    rules: tuple[Rule, ...] = ()

    def __iter__(self) -> Iterator[Rule]:
        return iter(self.rules)

    def __reversed__(self) -> Iterator[Rule]:
        return reversed(self.rules)

    def __len__(self) -> int:
        return len(self.rules)

    def __getitem__(self, index: int) -> Rule:
        return self.rules[index]

    def __bool__(self) -> bool:
        return bool(self.rules)


@dataclass(frozen=True, slots=True)
class OwnershipMatch:
    """Resolution result for one path.

    ``candidates`` lists every matching rule in file order; ``rule`` is the
    winner (the last candidate) or None when nothing matched.
    """

    path: str
    rule: Rule | None
    candidates: tuple[Rule, ...] = field(default=())

    @property
    def owners(self) -> tuple[str, ...]:
        return self.rule.owners if self.rule is not None else ()

    @property
    def is_matched(self) -> bool:
        return self.rule is not None
