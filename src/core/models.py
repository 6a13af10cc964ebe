# src/core/models.py - v1
"""Shared Pydantic domain models used across modules.

Document is the unit flowing from the loaders through the cache into
generation; DocumentOutcome and BatchResult describe a generation run.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class Document(BaseModel):
    """Normalized text plus metadata extracted from one source file."""

    content: str
    metadata: dict[str, Any] = Field(default_factory=dict)

    @property
    def source(self) -> str:
        """Originating file path, or empty string if unknown."""
        return str(self.metadata.get("source", ""))


class DocumentOutcome(BaseModel):
    """Generation status of a single document."""

    index: int
    source: str
    questions: list[str] | None = None
    error: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.error is None and self.questions is not None


class BatchResult(BaseModel):
    """Summary of a question generation run."""

    total_documents: int
    succeeded: int
    failed: int
    total_questions: int
    output_path: str
    duration_seconds: float
    outcomes: list[DocumentOutcome] = Field(default_factory=list)
    output_error: str | None = None

    @property
    def has_failures(self) -> bool:
        return self.failed > 0

    @property
    def output_failed(self) -> bool:
        return self.output_error is not None
