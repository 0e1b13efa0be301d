# src/storage/base_output_writer.py — v1
"""Abstract output writer interface for run artifacts."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path


class BaseOutputWriter(ABC):
    """Unified interface for output storage backends."""

    @abstractmethod
    def ensure_dir(self, path: Path) -> None:
        """Create a directory (and parents) if absent."""

    @abstractmethod
    def write(self, path: Path, content: bytes | str) -> None:
        """Write content to the given path, replacing any existing file."""
