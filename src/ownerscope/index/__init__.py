"""File index and coverage reporting."""

from ownerscope.index.coverage import CoverageReport, compute_coverage
from ownerscope.index.file_index import FileIndex
from ownerscope.index.walker import walk_files

__all__ = [
    "CoverageReport",
    "FileIndex",
    "compute_coverage",
    "walk_files",
]
