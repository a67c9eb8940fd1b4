"""Parse CODEOWNERS text into an ordered rule set."""

from __future__ import annotations

import re
from pathlib import Path

from ownerscope.core.errors import RulesFileError
from ownerscope.core.logging import get_logger
from ownerscope.rules.models import Rule, RuleSet
from ownerscope.rules.pattern import compile_pattern

log = get_logger("rules.parser")

_TOKEN_RE = re.compile(r"\S+")


def parse_line(line: str, line_number: int) -> Rule | None:
    """Parse one line. Blank lines and ``#`` comments yield None."""
    tokens = list(_TOKEN_RE.finditer(line))
    if not tokens or tokens[0].group().startswith("#"):
        return None

    pattern_token, *owner_tokens = tokens
    pattern_span = pattern_token.span()
    owners_start = owner_tokens[0].start() if owner_tokens else pattern_span[1]
    return Rule(
        pattern=compile_pattern(pattern_token.group()),
        owners=tuple(t.group() for t in owner_tokens),
        line_number=line_number,
        pattern_span=pattern_span,
        owners_start=owners_start,
    )


def parse_rules(text: str) -> RuleSet:
    """Parse CODEOWNERS text. Never fails: each line is a rule or skipped."""
    rules: list[Rule] = []
    # Split on "\n" only; a CRLF "\r" is whitespace to the tokenizer
    for line_number, line in enumerate(text.split("\n")):
        rule = parse_line(line, line_number)
        if rule is not None:
            rules.append(rule)

    log.debug(
        "rules_parsed",
        rules=len(rules),
        unowned=sum(1 for r in rules if r.is_unowned),
    )
    return RuleSet(tuple(rules))


def read_rules_file(path: Path) -> RuleSet:
    """Read and parse a CODEOWNERS file.

    Raises:
        RulesFileError: If the file is missing or unreadable.
    """
    if not path.is_file():
        raise RulesFileError.not_found(str(path))
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise RulesFileError.read_failed(str(path), str(e)) from e
    log.debug("rules_file_read", path=str(path))
    return parse_rules(text)
