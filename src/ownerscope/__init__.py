"""ownerscope - CODEOWNERS ownership resolution, coverage and dead-rule analysis."""

__version__ = "0.1.0"
