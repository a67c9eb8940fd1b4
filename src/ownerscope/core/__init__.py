"""Core module exports."""

from ownerscope.core.errors import (
    ConfigError,
    ErrorCode,
    OwnerScopeError,
    RulesFileError,
    WalkError,
)
from ownerscope.core.logging import (
    clear_run_id,
    configure_logging,
    get_logger,
    get_run_id,
    set_run_id,
)

__all__ = [
    # Errors
    "ConfigError",
    "ErrorCode",
    "OwnerScopeError",
    "RulesFileError",
    "WalkError",
    # Logging
    "clear_run_id",
    "configure_logging",
    "get_logger",
    "get_run_id",
    "set_run_id",
]
