"""Config module exports."""

from ownerscope.config.loader import find_config_root, load_config
from ownerscope.config.models import (
    CoverageConfig,
    LintConfig,
    LoggingConfig,
    OwnerScopeConfig,
    RulesConfig,
    WalkConfig,
)

__all__ = [
    "find_config_root",
    "load_config",
    "CoverageConfig",
    "LintConfig",
    "LoggingConfig",
    "OwnerScopeConfig",
    "RulesConfig",
    "WalkConfig",
]
