# src/storage/local_writer.py — v1
"""Local filesystem output writer.

Writes go to a sibling temporary file that is renamed into place, so a
failed write never leaves a truncated image or manifest behind.
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path

from warhol.core.errors import ArtifactWriteError
from warhol.storage.base_output_writer import BaseOutputWriter


class LocalWriter(BaseOutputWriter):
    """Write outputs to the local filesystem."""

    def ensure_dir(self, path: Path) -> None:
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise ArtifactWriteError(str(path), _reason(exc)) from exc

    def write(self, path: Path, content: bytes | str) -> None:
        data = content.encode("utf-8") if isinstance(content, str) else content
        tmp_name: str | None = None
        try:
            fd, tmp_name = tempfile.mkstemp(
                prefix=f".{path.name}.", suffix=".tmp", dir=path.parent,
            )
            with os.fdopen(fd, "wb") as fh:
                fh.write(data)
            os.chmod(tmp_name, 0o644)
            os.replace(tmp_name, path)
            tmp_name = None
        except OSError as exc:
            raise ArtifactWriteError(str(path), _reason(exc)) from exc
        finally:
            if tmp_name is not None and os.path.exists(tmp_name):
                os.unlink(tmp_name)


def _reason(exc: OSError) -> str:
    return exc.strerror or str(exc)
