"""ownerscope error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Rules file
- 4xxx: File index / directory walk
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002

    # Rules file (3xxx)
    RULES_FILE_NOT_FOUND = 3001
    RULES_FILE_READ_FAILED = 3002

    # Walk (4xxx)
    WALK_ROOT_NOT_FOUND = 4001
    WALK_NOT_A_DIRECTORY = 4002


@dataclass(frozen=True, slots=True)
class OwnerScopeError(Exception):
    """Base error with structured context for CLI and JSON output."""

    code: ErrorCode
    message: str
    retryable: bool = False
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'RULES_FILE_NOT_FOUND')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "retryable": self.retryable,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(OwnerScopeError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )


class RulesFileError(OwnerScopeError):
    """Errors locating or reading a CODEOWNERS file."""

    @classmethod
    def not_found(cls, start: str) -> "RulesFileError":
        return cls(
            code=ErrorCode.RULES_FILE_NOT_FOUND,
            message=f"No CODEOWNERS file found from {start}",
            details={"start": start},
        )

    @classmethod
    def read_failed(cls, path: str, reason: str) -> "RulesFileError":
        return cls(
            code=ErrorCode.RULES_FILE_READ_FAILED,
            message=f"Failed to read {path}: {reason}",
            retryable=True,
            details={"path": path, "reason": reason},
        )


class WalkError(OwnerScopeError):
    """Errors raised before a directory walk can start."""

    @classmethod
    def root_not_found(cls, root: str) -> "WalkError":
        return cls(
            code=ErrorCode.WALK_ROOT_NOT_FOUND,
            message=f"Scan root does not exist: {root}",
            details={"root": root},
        )

    @classmethod
    def not_a_directory(cls, root: str) -> "WalkError":
        return cls(
            code=ErrorCode.WALK_NOT_A_DIRECTORY,
            message=f"Scan root is not a directory: {root}",
            details={"root": root},
        )
