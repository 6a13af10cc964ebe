# src/extraction/pdf_extractor.py - v1
"""PDF extractor using PyMuPDF (fitz).

Produces one document per page, with the 1-based page number in metadata.
Requires the 'pymupdf' package.
"""

from __future__ import annotations

import logging
from pathlib import Path

from questgen.core.models import Document
from questgen.extraction.base_extractor import BaseExtractor

logger = logging.getLogger(__name__)


class PdfExtractor(BaseExtractor):
    """Extractor for PDF files using PyMuPDF."""

    @property
    def supported_extensions(self) -> list[str]:
        return [".pdf"]

    @property
    def format_name(self) -> str:
        return "pdf"

    async def extract(self, path: Path) -> list[Document]:
        """Extract the text layer of each page."""
        try:
            import fitz  # PyMuPDF
        except ImportError as e:
            raise ImportError(
                "pymupdf package required for PDF extraction: pip install pymupdf"
            ) from e

        documents: list[Document] = []
        with fitz.open(str(path)) as doc:
            total_pages = len(doc)
            for page_num in range(total_pages):
                text = doc[page_num].get_text("text")
                documents.append(
                    Document(
                        content=text,
                        metadata=self._metadata(
                            path, page=page_num + 1, total_pages=total_pages,
                        ),
                    )
                )

        logger.debug("Extracted %d pages from %s", len(documents), path.name)
        return documents
