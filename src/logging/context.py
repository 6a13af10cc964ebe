# src/logging/context.py - v1
"""Contextual logging support: attach the current document and phase to log records.

Each generation task runs in its own asyncio task, which copies the
context on creation, so per-document values never leak between tasks.
"""

from __future__ import annotations

import contextvars
from dataclasses import dataclass
from typing import Any

_document_index: contextvars.ContextVar[int | None] = contextvars.ContextVar(
    "document_index", default=None
)
_source: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "source", default=None
)
_phase: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "phase", default=None
)


@dataclass
class LogContext:
    """Immutable snapshot of current logging context."""

    document_index: int | None = None
    source: str | None = None
    phase: str | None = None

    def as_dict(self) -> dict[str, Any]:
        """Return non-None fields as dict for JSON log injection."""
        return {k: v for k, v in self.__dict__.items() if v is not None}


def get_context() -> LogContext:
    """Snapshot current context variables."""
    return LogContext(
        document_index=_document_index.get(),
        source=_source.get(),
        phase=_phase.get(),
    )


def set_document_context(document_index: int, source: str | None = None) -> None:
    """Set document-level context (called once per generation task)."""
    _document_index.set(document_index)
    _source.set(source)


def set_phase(phase: str | None) -> None:
    """Set the pipeline phase (ingestion, generation)."""
    _phase.set(phase)


def clear_context() -> None:
    """Reset all context variables."""
    _document_index.set(None)
    _source.set(None)
    _phase.set(None)
