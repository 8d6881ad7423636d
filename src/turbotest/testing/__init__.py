"""Test tree, command execution and result reconciliation."""

from turbotest.testing.consumer import (
    TestControllerConsumer,
    TestRunReporter,
    WorkspaceContext,
)
from turbotest.testing.controller import TestController
from turbotest.testing.executor import ExecutionCallbacks, ProcessExecutor
from turbotest.testing.models import (
    PackageRef,
    RunOptions,
    TestError,
    TestNode,
    TestResult,
)
from turbotest.testing.tree import TestTree

__all__ = [
    "TestController",
    "TestControllerConsumer",
    "TestRunReporter",
    "WorkspaceContext",
    "ExecutionCallbacks",
    "ProcessExecutor",
    "PackageRef",
    "RunOptions",
    "TestError",
    "TestNode",
    "TestResult",
    "TestTree",
]
