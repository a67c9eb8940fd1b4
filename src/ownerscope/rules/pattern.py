"""CODEOWNERS pattern compilation and matching.

A raw pattern is classified once into one of five shapes, then matched
against normalized repository-relative paths (``/``-separated, no leading
slash). Classification order, first hit wins:

    *, **              -> MatchAll
    has * but no /     -> SingleSegmentGlob (matches the basename at any depth)
    has * and a /      -> MultiSegmentGlob (anchored at the root)
    ends with /        -> Directory
    anything else      -> Exact (also acts as a directory prefix)

A leading ``/`` only anchors at the root, which is where matching starts
anyway, so it is stripped before classification.

Glob semantics: ``*`` and ``?`` stay inside one path segment, ``**`` as a
whole segment spans zero or more segments. All matching is case-sensitive.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache

__all__ = [
    "CompiledPattern",
    "Directory",
    "Exact",
    "MatchAll",
    "MultiSegmentGlob",
    "Pattern",
    "SingleSegmentGlob",
    "compile_pattern",
    "matches",
    "normalize_pattern",
    "pattern_matches",
]


@dataclass(frozen=True, slots=True)
class MatchAll:
    """``*`` or ``**``: every path."""


@dataclass(frozen=True, slots=True)
class SingleSegmentGlob:
    """Glob without ``/``, stored in its any-depth form ``**/<pattern>``."""

    glob: str


@dataclass(frozen=True, slots=True)
class MultiSegmentGlob:
    """Glob with at least one ``/``, matched against the full path."""

    glob: str


@dataclass(frozen=True, slots=True)
class Directory:
    """``dir/``: the directory itself and everything below it."""

    name: str


@dataclass(frozen=True, slots=True)
class Exact:
    """Literal path, also matching anything below it."""

    name: str


CompiledPattern = MatchAll | SingleSegmentGlob | MultiSegmentGlob | Directory | Exact


@dataclass(frozen=True, slots=True)
class Pattern:
    """A raw pattern string and its compiled form."""

    raw: str
    compiled: CompiledPattern

    def matches(self, path: str) -> bool:
        return matches(self, path)


def normalize_pattern(raw: str) -> str:
    """Strip the root anchor (leading slashes) from a raw pattern."""
    return raw.lstrip("/")


@lru_cache(maxsize=4096)
def compile_pattern(raw: str) -> Pattern:
    """Classify a raw pattern. Total: any string compiles, Exact by default."""
    pattern = normalize_pattern(raw)

    if pattern in ("*", "**"):
        return Pattern(raw, MatchAll())

    if "*" in pattern:
        if "/" not in pattern:
            return Pattern(raw, SingleSegmentGlob(f"**/{pattern}"))
        return Pattern(raw, MultiSegmentGlob(pattern))

    if pattern.endswith("/"):
        return Pattern(raw, Directory(pattern.rstrip("/")))

    return Pattern(raw, Exact(pattern))


def matches(pattern: Pattern, path: str) -> bool:
    """Check whether a compiled pattern matches a normalized relative path."""
    match pattern.compiled:
        case MatchAll():
            return True
        case SingleSegmentGlob(glob=glob) | MultiSegmentGlob(glob=glob):
            return _glob_regex(glob).fullmatch(path) is not None
        case Directory(name=prefix) | Exact(name=prefix):
            return _is_at_or_under(path, prefix)


def pattern_matches(raw: str, path: str) -> bool:
    """Compile ``raw`` and match it against ``path``."""
    return matches(compile_pattern(raw), path)


def _is_at_or_under(path: str, prefix: str) -> bool:
    # Segment boundary: "src" must not match "srcfoo/file"
    if not path.startswith(prefix):
        return False
    return len(path) == len(prefix) or path[len(prefix)] == "/"


def _segment_to_regex(segment: str) -> str:
    out: list[str] = []
    i = 0
    while i < len(segment):
        c = segment[i]
        if c == "*":
            # A run of stars inside a segment never crosses "/"
            while i + 1 < len(segment) and segment[i + 1] == "*":
                i += 1
            out.append("[^/]*")
        elif c == "?":
            out.append("[^/]")
        else:
            out.append(re.escape(c))
        i += 1
    return "".join(out)


def _glob_to_regex(glob: str) -> str:
    segments: list[str] = []
    for segment in glob.split("/"):
        # a/**/**/b is the same as a/**/b
        if segment == "**" and segments and segments[-1] == "**":
            continue
        segments.append(segment)

    last = len(segments) - 1
    out: list[str] = []
    for i, segment in enumerate(segments):
        if segment == "**":
            if i == last:
                out.append(".*" if i == 0 else "(?:/.*)?")
            else:
                out.append("(?:.*/)?" if i == 0 else "/(?:.*/)?")
            continue
        if i > 0 and segments[i - 1] != "**":
            out.append("/")
        out.append(_segment_to_regex(segment))
    return "".join(out)


@lru_cache(maxsize=4096)
def _glob_regex(glob: str) -> re.Pattern[str]:
    return re.compile(_glob_to_regex(glob), re.DOTALL)
