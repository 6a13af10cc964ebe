# src/extraction/base_extractor.py - v1
"""Abstract extractor interface for document formats."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

from questgen.core.models import Document


class LoaderError(Exception):
    """Raised when a single file cannot be parsed by its extractor."""

    def __init__(self, path: Path, cause: Exception) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"Failed to load {path}: {cause}")


class BaseExtractor(ABC):
    """Unified interface for document format extractors."""

    @property
    @abstractmethod
    def supported_extensions(self) -> list[str]:
        """File extensions this extractor handles (e.g., ['.pdf'])."""

    @property
    @abstractmethod
    def format_name(self) -> str:
        """Short format identifier stored in document metadata."""

    @abstractmethod
    async def extract(self, path: Path) -> list[Document]:
        """Extract one or more documents from the file at ``path``."""

    def _metadata(self, path: Path, **extra: object) -> dict[str, object]:
        """Base metadata shared by every document from ``path``."""
        return {"source": str(path), "format": self.format_name, **extra}
