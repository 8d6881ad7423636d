"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (TURBOTEST__SECTION__KEY)
3. Repo YAML (<workspace>/.turbotest/config.yaml)
4. Global YAML (~/.config/turbotest/config.yaml)
5. Built-in defaults (this file)

Environment Variable Format:
    TURBOTEST__<SECTION>__<KEY>=<VALUE>

Examples:
    TURBOTEST__LOGGING__LEVEL=DEBUG
    TURBOTEST__TESTING__TURBO_BINARY_PATH="pnpm turbo"
    TURBOTEST__TESTING__TEST_MATCH='["**/*.test.ts"]'
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from turbotest.discovery.finder import DEFAULT_TEST_PATTERNS

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

DEFAULT_MAX_BUFFER_BYTES = 10 * 1024 * 1024


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
        TURBOTEST__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="INFO",
        description="Root log level. DEBUG logs every scanned directory.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class TestingConfig(BaseModel):
    """Test discovery and execution configuration.

    Env vars:
        TURBOTEST__TESTING__TEST_MATCH: JSON list of file name globs
        TURBOTEST__TESTING__TURBO_BINARY_PATH: Command used to invoke turbo
        TURBOTEST__TESTING__MAX_BUFFER_BYTES: stdout ceiling for one run
        TURBOTEST__TESTING__EAGER_PARSE: Parse test files during refresh
    """

    __test__ = False  # not a pytest test class

    test_match: list[str] = Field(
        default_factory=lambda: list(DEFAULT_TEST_PATTERNS),
        description="Glob patterns over file names. A leading '**/' is ignored "
        "because discovery already walks every depth.",
    )
    turbo_binary_path: str = Field(
        default="npx turbo",
        description="Invocation prefix for turbo, e.g. 'pnpm turbo' or an absolute path.",
    )
    max_buffer_bytes: int = Field(
        default=DEFAULT_MAX_BUFFER_BYTES,
        description="Maximum stdout captured from one test command. "
        "RISK: Too low truncates verbose JSON reporters.",
    )
    eager_parse: bool = Field(
        default=True,
        description="Extract suites and cases during refresh. When false, files "
        "are parsed on first expansion.",
    )

    @field_validator("test_match")
    @classmethod
    def validate_test_match(cls, v: list[str]) -> list[str]:
        patterns = [p for p in v if p.strip()]
        if not patterns:
            raise ValueError("At least one test pattern is required")
        return patterns

    @field_validator("max_buffer_bytes")
    @classmethod
    def validate_max_buffer(cls, v: int) -> int:
        if v <= 0:
            raise ValueError(f"max_buffer_bytes must be positive, got {v}")
        return v


class TurboTestConfig(BaseModel):
    """Root configuration for turbotest."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    testing: TestingConfig = Field(default_factory=TestingConfig)
