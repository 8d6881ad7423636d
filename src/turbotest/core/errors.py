"""turbotest error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 7xxx: Test run
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002

    # Test run (7xxx)
    TEST_OUTPUT_PARSE_ERROR = 7001
    TEST_PROCESS_FAILED = 7002
    TEST_OUTPUT_LIMIT = 7003
    TEST_RUN_IN_PROGRESS = 7004


@dataclass(frozen=True, slots=True)
class TurboTestError(Exception):
    """Base error with structured context."""

    code: ErrorCode
    message: str
    retryable: bool = False
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'TEST_PROCESS_FAILED')."""
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


class ConfigError(TurboTestError):
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


class TestRunError(TurboTestError):
    """Failures of a test run: process faults and unusable reporter output."""

    __test__ = False  # not a pytest test class

    @classmethod
    def no_json_output(cls) -> "TestRunError":
        return cls(
            code=ErrorCode.TEST_OUTPUT_PARSE_ERROR,
            message="No JSON output found in test results",
        )

    @classmethod
    def parse_failed(cls, reason: str) -> "TestRunError":
        return cls(
            code=ErrorCode.TEST_OUTPUT_PARSE_ERROR,
            message=f"Failed to parse test results: {reason}",
            details={"reason": reason},
        )

    @classmethod
    def process_failed(cls, command: str, exit_code: int | None, stderr: str = "") -> "TestRunError":
        return cls(
            code=ErrorCode.TEST_PROCESS_FAILED,
            message=f"Command failed with exit code {exit_code}: {command}",
            details={"command": command, "exit_code": exit_code, "stderr": stderr},
        )

    @classmethod
    def spawn_failed(cls, command: str, reason: str) -> "TestRunError":
        return cls(
            code=ErrorCode.TEST_PROCESS_FAILED,
            message=f"Could not start command: {reason}",
            details={"command": command, "reason": reason},
        )

    @classmethod
    def output_limit_exceeded(cls, command: str, limit_bytes: int) -> "TestRunError":
        return cls(
            code=ErrorCode.TEST_OUTPUT_LIMIT,
            message=f"stdout exceeded {limit_bytes} bytes",
            details={"command": command, "limit_bytes": limit_bytes},
        )

    @classmethod
    def run_in_progress(cls) -> "TestRunError":
        return cls(
            code=ErrorCode.TEST_RUN_IN_PROGRESS,
            message="A test run is already in progress",
            retryable=True,
        )

