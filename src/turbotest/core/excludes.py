"""Directories that test discovery never descends into.

Tier 0 (HARDCODED_DIRS): version control internals and our own data.
Tier 1 (DEFAULT_PRUNABLE_DIRS): dependency stores, build outputs and caches.

The combined PRUNED_DIRS is what the finder and the watcher consult.
"""

from __future__ import annotations

HARDCODED_DIRS: frozenset[str] = frozenset(
    (
        ".git",
        ".svn",
        ".hg",
        ".turbotest",
    )
)

DEFAULT_PRUNABLE_DIRS: frozenset[str] = frozenset(
    (
        # Dependencies
        "node_modules",
        "bower_components",
        ".npm",
        ".yarn",
        ".pnpm-store",
        # Build outputs
        "dist",
        "build",
        "out",
        ".next",
        ".nuxt",
        ".svelte-kit",
        # Caches
        ".turbo",
        ".cache",
        ".parcel-cache",
        "coverage",
        ".nyc_output",
    )
)

PRUNED_DIRS: frozenset[str] = HARDCODED_DIRS | DEFAULT_PRUNABLE_DIRS


def is_pruned_dir(dirname: str) -> bool:
    """Check a bare directory name (not a path) against PRUNED_DIRS."""
    return dirname in PRUNED_DIRS
