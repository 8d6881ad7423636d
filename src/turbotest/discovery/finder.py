"""Test file discovery.

Patterns are globs over the file NAME only. A leading ``**/`` is dropped
because the walk already covers every depth, so ``**/*.spec.ts`` and
``*.spec.ts`` are equivalent. ``*`` never matches a path separator.
"""

from __future__ import annotations

import os
import re
from collections.abc import Iterable
from pathlib import Path

import structlog

from turbotest.core.excludes import is_pruned_dir

log = structlog.get_logger(__name__)

DEFAULT_TEST_PATTERNS: tuple[str, ...] = ("**/*.spec.ts", "**/*.spec.js")

_RECURSIVE_PREFIX = "**/"


def glob_to_regex(pattern: str) -> re.Pattern[str]:
    """Compile a file-name glob into an anchored regex."""
    while pattern.startswith(_RECURSIVE_PREFIX):
        pattern = pattern[len(_RECURSIVE_PREFIX) :]
    parts = [re.escape(part) for part in pattern.split("*")]
    return re.compile("^" + "[^/\\\\]*".join(parts) + "$")


def compile_patterns(patterns: Iterable[str]) -> list[re.Pattern[str]]:
    return [glob_to_regex(p) for p in patterns]


def matches_any(file_name: str, compiled: Iterable[re.Pattern[str]]) -> bool:
    return any(regex.match(file_name) for regex in compiled)


def is_test_file(path: str | Path, patterns: Iterable[str] = DEFAULT_TEST_PATTERNS) -> bool:
    """Check whether a path's base name matches any test pattern."""
    return matches_any(Path(path).name, compile_patterns(patterns))


def find_test_files(
    root: str | Path,
    patterns: Iterable[str] = DEFAULT_TEST_PATTERNS,
) -> list[Path]:
    """Recursively collect test files under ``root``.

    Returns an empty list when ``root`` is missing or not a directory.
    Results follow directory-listing order, depth first.
    """
    root_path = Path(root)
    if not root_path.is_dir():
        return []

    compiled = compile_patterns(patterns)
    results: list[Path] = []
    _scan_directory(root_path, compiled, results)
    return results


def _scan_directory(directory: Path, compiled: list[re.Pattern[str]], results: list[Path]) -> None:
    try:
        with os.scandir(directory) as it:
            entries = list(it)
    except OSError as e:
        log.warning("discovery.scan_failed", path=str(directory), error=str(e))
        return

    for entry in entries:
        try:
            if entry.is_dir(follow_symlinks=False):
                if not is_pruned_dir(entry.name):
                    _scan_directory(Path(entry.path), compiled, results)
            elif entry.is_file() and matches_any(entry.name, compiled):
                results.append(Path(entry.path))
        except OSError as e:
            log.warning("discovery.entry_failed", path=entry.path, error=str(e))
