"""Filesystem watching for test files.

Feeds change, create and delete events for files matching the configured
test patterns into :meth:`TestController.on_file_changed`. Pruned directories
(``node_modules``, build output, VCS metadata) are filtered out before any
event reaches the controller.
"""

from __future__ import annotations

import asyncio
import contextlib
from collections.abc import Iterable
from pathlib import Path

import structlog
from watchfiles import Change, DefaultFilter, awatch

from turbotest.core.excludes import PRUNED_DIRS
from turbotest.discovery.finder import DEFAULT_TEST_PATTERNS, compile_patterns, matches_any
from turbotest.testing.controller import TestController

log = structlog.get_logger(__name__)

# awatch already batches events; this is its quiet window in milliseconds
DEBOUNCE_MS = 300


class TestFileFilter(DefaultFilter):
    """Pass only test-file events outside pruned directories."""

    __test__ = False  # not a pytest test class

    def __init__(
        self,
        patterns: Iterable[str] = DEFAULT_TEST_PATTERNS,
        root: Path | None = None,
    ) -> None:
        super().__init__(ignore_dirs=sorted(PRUNED_DIRS))
        self._compiled = compile_patterns(patterns)
        self._root = root

    def __call__(self, change: Change, path: str) -> bool:
        if not matches_any(Path(path).name, self._compiled):
            return False
        # Only directories below the root count, so a workspace may live under "build/"
        if self._root is not None:
            with contextlib.suppress(ValueError):
                path = str(Path(path).relative_to(self._root))
        return super().__call__(change, path)


async def watch_workspace(
    controller: TestController,
    workspace_path: str | Path,
    stop_event: asyncio.Event | None = None,
    *,
    patterns: Iterable[str] = DEFAULT_TEST_PATTERNS,
) -> None:
    """Watch ``workspace_path`` until ``stop_event`` is set or the task is cancelled."""
    root = Path(workspace_path).absolute()
    log.info("watch.started", workspace=str(root))
    try:
        async for changes in awatch(
            root,
            watch_filter=TestFileFilter(patterns, root),
            debounce=DEBOUNCE_MS,
            stop_event=stop_event,
            ignore_permission_denied=True,
        ):
            for change, path in sorted(changes, key=lambda c: c[1]):
                log.debug("watch.event", change=change.name, path=path)
                controller.on_file_changed(path)
    finally:
        log.info("watch.stopped", workspace=str(root))
