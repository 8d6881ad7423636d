"""Package boundary detection.

A package is a directory holding a package.json with a non-empty "name".
Absence of any kind (no manifest, malformed JSON, unnamed manifest,
unreadable file) is reported as None; callers do not distinguish them.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

import structlog

log = structlog.get_logger(__name__)

MANIFEST_NAME = "package.json"


@dataclass(frozen=True)
class DetectedPackage:
    """A package owning a subtree of the workspace."""

    name: str
    path: Path


def detect_package_from_path(path: str | Path) -> DetectedPackage | None:
    """Detect the package whose manifest sits directly inside ``path``."""
    directory = Path(path)
    manifest = directory / MANIFEST_NAME
    try:
        content = manifest.read_text(encoding="utf-8")
    except FileNotFoundError:
        return None
    except OSError as e:
        log.warning("packages.manifest_unreadable", path=str(manifest), error=str(e))
        return None

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        log.warning("packages.manifest_invalid", path=str(manifest), error=str(e))
        return None

    name = data.get("name") if isinstance(data, dict) else None
    if not isinstance(name, str) or not name:
        log.debug("packages.manifest_unnamed", path=str(manifest))
        return None

    return DetectedPackage(name=name, path=directory)


def detect_package_from_file(
    file_path: str | Path,
    *,
    workspace_root: str | Path | None = None,
) -> DetectedPackage | None:
    """Find the nearest package owning ``file_path``.

    Walks upward from the file's directory. The walk stops at the first
    directory with a valid manifest, after checking ``workspace_root`` when the
    walk reaches it, or at the filesystem root.
    """
    current = Path(file_path).absolute().parent
    boundary = Path(workspace_root).absolute() if workspace_root is not None else None

    while True:
        pkg = detect_package_from_path(current)
        if pkg is not None:
            return pkg
        if boundary is not None and current == boundary:
            return None
        if current == current.parent:
            return None
        current = current.parent
