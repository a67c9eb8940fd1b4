"""Ownership coverage over a file index."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Literal

from ownerscope.core.logging import get_logger
from ownerscope.index.file_index import FileIndex
from ownerscope.rules.models import RuleSet

log = get_logger("index.coverage")

CoverageMode = Literal["total", "checked"]


@dataclass(frozen=True, slots=True)
class CoverageReport:
    """Owned/unowned counts.

    ``mode`` is "total" when every indexed file was considered and
    "checked" when only a caller-supplied file list was.
    """

    total: int
    unowned: tuple[str, ...]
    mode: CoverageMode = "total"

    @property
    def owned(self) -> int:
        return self.total - len(self.unowned)

    @property
    def percentage(self) -> float:
        if self.total == 0:
            return 100.0
        return 100.0 * self.owned / self.total

    @property
    def is_complete(self) -> bool:
        return not self.unowned

    def to_dict(self) -> dict[str, Any]:
        return {
            "mode": self.mode,
            "total": self.total,
            "owned": self.owned,
            "unowned_count": len(self.unowned),
            "percentage": round(self.percentage, 1),
            "unowned": list(self.unowned),
        }


def compute_coverage(
    index: FileIndex,
    rules: RuleSet,
    files: Iterable[str] | None = None,
) -> CoverageReport:
    """Compute coverage of ``rules`` over ``index``.

    With ``files``, only those paths are considered ("checked" mode), whether
    or not the index holds them; duplicates count once.
    """
    if files is None:
        report = CoverageReport(total=len(index), unowned=tuple(index.unowned_files(rules)))
    else:
        checked = FileIndex.from_paths(files)
        report = CoverageReport(
            total=len(checked),
            unowned=tuple(checked.unowned_files(rules)),
            mode="checked",
        )

    log.debug(
        "coverage_computed",
        mode=report.mode,
        total=report.total,
        owned=report.owned,
        percentage=round(report.percentage, 1),
    )
    return report
