"""Core module exports."""

from turbotest.core.errors import (
    ConfigError,
    ErrorCode,
    TestRunError,
    TurboTestError,
)
from turbotest.core.logging import (
    clear_run_id,
    configure_logging,
    get_run_id,
    set_run_id,
)

__all__ = [
    # Errors
    "ErrorCode",
    "TurboTestError",
    "ConfigError",
    "TestRunError",
    # Logging
    "clear_run_id",
    "configure_logging",
    "get_run_id",
    "set_run_id",
]
