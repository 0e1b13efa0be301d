# src/logging/context.py — v1
"""Contextual logging support: attach run_id, provider and step to log records."""

from __future__ import annotations

import contextvars
from dataclasses import dataclass
from typing import Any

# Context variables for structured logging, set per generation run.
_run_id: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "run_id", default=None
)
_provider: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "provider", default=None
)
_step: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "step", default=None
)


@dataclass
class LogContext:
    """Immutable snapshot of current logging context."""

    run_id: str | None = None
    provider: str | None = None
    step: str | None = None

    def as_dict(self) -> dict[str, Any]:
        """Return non-None fields as dict for JSON log injection."""
        return {k: v for k, v in self.__dict__.items() if v is not None}


def get_context() -> LogContext:
    """Snapshot current context variables."""
    return LogContext(
        run_id=_run_id.get(),
        provider=_provider.get(),
        step=_step.get(),
    )


def set_run_context(run_id: str, provider: str | None = None) -> None:
    """Set run-level context (called once per generation run)."""
    _run_id.set(run_id)
    _provider.set(provider)


def set_step(step: str) -> None:
    """Record the orchestrator state the run has reached."""
    _step.set(step)


def clear_context() -> None:
    """Reset all context variables."""
    _run_id.set(None)
    _provider.set(None)
    _step.set(None)
