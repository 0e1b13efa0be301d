# src/logging/logger.py — v1
"""Logger factory with JSON and text formatters.

Both formatters stamp records with the current run context (run_id,
provider, step). Console output goes to stderr so stdout stays reserved
for command results.
"""

from __future__ import annotations

import json
import logging
import re
import sys
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

from warhol.logging.context import get_context

_QUIET_LOGGERS = ("httpx", "httpcore")
_SIZE_UNITS = {"KB": 1024, "MB": 1024**2, "GB": 1024**3}
_SIZE_RE = re.compile(r"(\d+)\s*(\w+)")


class JsonFormatter(logging.Formatter):
    """One JSON object per record; context fields sit at the top level."""

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": _utc(record.created).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        entry.update(get_context().as_dict())
        if record.exc_info and record.exc_info[1] is not None:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


class TextFormatter(logging.Formatter):
    """Terminal format: `HH:MM:SS LEVEL logger [provider/step] message`."""

    def __init__(self) -> None:
        super().__init__("%(asctime)s %(levelname)-7s %(name)s%(run_tag)s %(message)s")

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:  # noqa: N802
        return _utc(record.created).strftime(datefmt or "%H:%M:%S")

    def format(self, record: logging.LogRecord) -> str:
        ctx = get_context()
        tag = "/".join(v for v in (ctx.provider, ctx.step) if v)
        record.run_tag = f" [{tag}]" if tag else ""
        return super().format(record)


_FORMATTERS: dict[str, type[logging.Formatter]] = {
    "json": JsonFormatter,
    "text": TextFormatter,
}


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the warhol namespace. See setup_logging()."""
    return logging.getLogger(f"warhol.{name}")


def setup_logging(
    level: str = "INFO",
    log_format: str = "text",
    log_file: str | None = None,
    rotation: str = "10MB",
    retention: int = 5,
) -> None:
    """Configure the warhol logger; safe to call more than once.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR).
        log_format: "json" or "text".
        log_file: Optional log file path; console only when empty.
        rotation: Max file size before rotation (e.g. "10MB").
        retention: Number of rotated files to keep.

    Raises:
        ValueError: Unknown log format or malformed rotation size.
    """
    try:
        formatter = _FORMATTERS[log_format]()
    except KeyError:
        raise ValueError(
            f"Unknown log format {log_format!r} (expected json or text)"
        ) from None
    max_bytes = parse_size(rotation) if log_file else 0

    root_logger = logging.getLogger("warhol")
    root_logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        path = Path(log_file).expanduser()
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(RotatingFileHandler(
            path, maxBytes=max_bytes, backupCount=retention,
            encoding="utf-8",
        ))
    for handler in handlers:
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def _utc(created: float) -> datetime:
    return datetime.fromtimestamp(created, tz=timezone.utc)


def parse_size(size_str: str) -> int:
    """Bytes for a rotation size such as '10MB' (KB, MB or GB, any case)."""
    match = _SIZE_RE.fullmatch(size_str.strip())
    unit = match.group(2).upper() if match else ""
    if unit not in _SIZE_UNITS:
        raise ValueError(f"Invalid size format: {size_str!r}. Use e.g. '10MB'.")
    return int(match.group(1)) * _SIZE_UNITS[unit]
