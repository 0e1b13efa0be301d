# src/storage/layout.py — v1
"""Output file naming and project-relative default locations.

Each run writes image-<ts>.png and manifest-<ts>.json side by side, where
<ts> is the UTC start time formatted as YYYYMMDD-HHMMSS.
"""

from __future__ import annotations

import os
from collections.abc import Sequence
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path

TIMESTAMP_FORMAT = "%Y%m%d-%H%M%S"
IMAGE_PREFIX = "image-"
IMAGE_SUFFIX = ".png"
MANIFEST_PREFIX = "manifest-"
MANIFEST_SUFFIX = ".json"


@dataclass(frozen=True)
class ArtifactPaths:
    """Paths for one run's image and manifest."""

    image: Path
    manifest: Path


def run_timestamp(moment: datetime | None = None) -> str:
    """Format a moment (default: now) as the filename timestamp, in UTC."""
    ts = moment or datetime.now(timezone.utc)
    return ts.astimezone(timezone.utc).strftime(TIMESTAMP_FORMAT)


def artifact_paths(output_dir: Path, timestamp: str) -> ArtifactPaths:
    return ArtifactPaths(
        image=output_dir / f"{IMAGE_PREFIX}{timestamp}{IMAGE_SUFFIX}",
        manifest=output_dir / f"{MANIFEST_PREFIX}{timestamp}{MANIFEST_SUFFIX}",
    )


def default_project_path(
    name: str, roots: Sequence[str | Path] = (".", ".."),
) -> Path:
    """Return `name` under the first root that already has such a directory.

    Falls back to `name` relative to the current directory, so running from
    a project subdirectory still targets the project's styles/, characters/
    and outputs/ directories.
    """
    for root in roots:
        candidate = Path(root) / name
        if candidate.is_dir():
            return Path(os.path.normpath(candidate))
    return Path(name)
