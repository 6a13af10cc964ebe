# src/extraction/txt_extractor.py - v1
"""Plain text extractor: passthrough, one document per file."""

from __future__ import annotations

from pathlib import Path

from questgen.core.models import Document
from questgen.extraction.base_extractor import BaseExtractor


class TxtExtractor(BaseExtractor):
    """Extractor for plain text files (.txt)."""

    @property
    def supported_extensions(self) -> list[str]:
        return [".txt"]

    @property
    def format_name(self) -> str:
        return "txt"

    async def extract(self, path: Path) -> list[Document]:
        text = path.read_text(encoding="utf-8", errors="replace")
        return [Document(content=text, metadata=self._metadata(path))]
