# src/extraction/docx_extractor.py - v1
"""DOCX extractor using python-docx.

Paragraph text followed by table rows, one document per file.
Requires the 'python-docx' package.
"""

from __future__ import annotations

from pathlib import Path

from questgen.core.models import Document
from questgen.extraction.base_extractor import BaseExtractor


class DocxExtractor(BaseExtractor):
    """Extractor for Word documents (.docx)."""

    @property
    def supported_extensions(self) -> list[str]:
        return [".docx"]

    @property
    def format_name(self) -> str:
        return "docx"

    async def extract(self, path: Path) -> list[Document]:
        try:
            import docx
        except ImportError as e:
            raise ImportError(
                "python-docx package required for DOCX extraction: "
                "pip install python-docx"
            ) from e

        doc = docx.Document(str(path))

        text_parts: list[str] = [
            para.text for para in doc.paragraphs if para.text.strip()
        ]
        for table in doc.tables:
            for row in table.rows:
                cells = [cell.text.strip() for cell in row.cells]
                if any(cells):
                    text_parts.append(" | ".join(cells))

        return [
            Document(content="\n\n".join(text_parts), metadata=self._metadata(path))
        ]
