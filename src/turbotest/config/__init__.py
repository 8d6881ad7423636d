"""Config module exports."""

from turbotest.config.loader import load_config
from turbotest.config.models import (
    LoggingConfig,
    LogOutputConfig,
    TestingConfig,
    TurboTestConfig,
)

__all__ = [
    "load_config",
    "LoggingConfig",
    "LogOutputConfig",
    "TestingConfig",
    "TurboTestConfig",
]
