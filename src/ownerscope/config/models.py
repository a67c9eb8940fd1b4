"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (OWNERSCOPE__SECTION__KEY)
3. Repo YAML (.ownerscope.yaml at the repository root)
4. Global YAML (~/.config/ownerscope/config.yaml)
5. Built-in defaults (this file)

Examples:
    OWNERSCOPE__LOGGING__LEVEL=DEBUG
    OWNERSCOPE__COVERAGE__FAIL_UNDER=90
    OWNERSCOPE__WALK__RESPECT_GITIGNORE=false
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration."""

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        OWNERSCOPE__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="WARNING",
        description="Root log level. -v on the command line forces DEBUG.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class RulesConfig(BaseModel):
    """Rules file location.

    Env vars:
        OWNERSCOPE__RULES__PATH: CODEOWNERS path relative to the repository root
    """

    path: str | None = Field(
        default=None,
        description="Explicit CODEOWNERS path, relative to the repository root. "
        "Default: first of .github/CODEOWNERS, CODEOWNERS, docs/CODEOWNERS.",
    )


class WalkConfig(BaseModel):
    """Directory walk used to build the file index.

    Env vars:
        OWNERSCOPE__WALK__RESPECT_GITIGNORE: Apply .gitignore files (default: true)
    """

    respect_gitignore: bool = Field(
        default=True,
        description="Skip paths excluded by .gitignore files at any level.",
    )
    extra_excludes: list[str] = Field(
        default_factory=list,
        description="Additional ignore globs, in .gitignore syntax.",
    )


class CoverageConfig(BaseModel):
    """Coverage command configuration.

    Env vars:
        OWNERSCOPE__COVERAGE__UNOWNED_DISPLAY_LIMIT: Unowned files listed
        OWNERSCOPE__COVERAGE__FAIL_UNDER: Minimum passing percentage
    """

    unowned_display_limit: int = Field(
        default=50,
        description="Unowned files listed in human output before '...and N more'.",
    )
    fail_under: float = Field(
        default=100.0,
        description="Exit non-zero when coverage is below this percentage.",
    )

    @field_validator("unowned_display_limit")
    @classmethod
    def validate_display_limit(cls, v: int) -> int:
        if v < 0:
            raise ValueError(f"Display limit must be >= 0, got {v}")
        return v

    @field_validator("fail_under")
    @classmethod
    def validate_fail_under(cls, v: float) -> float:
        if not (0.0 <= v <= 100.0):
            raise ValueError(f"fail_under must be 0-100, got {v}")
        return v


class LintConfig(BaseModel):
    """Lint command configuration.

    Env vars:
        OWNERSCOPE__LINT__STRICT: Treat warnings as failures
    """

    strict: bool = Field(
        default=False,
        description="Exit non-zero on warnings as well as errors.",
    )


class OwnerScopeConfig(BaseModel):
    """Root configuration for ownerscope."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    rules: RulesConfig = Field(default_factory=RulesConfig)
    walk: WalkConfig = Field(default_factory=WalkConfig)
    coverage: CoverageConfig = Field(default_factory=CoverageConfig)
    lint: LintConfig = Field(default_factory=LintConfig)
