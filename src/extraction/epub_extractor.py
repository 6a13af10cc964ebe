# src/extraction/epub_extractor.py - v1
"""EPUB extractor using ebooklib.

One document per chapter (HTML item in the book) that carries text.
Requires the 'ebooklib' and 'beautifulsoup4' packages.
"""

from __future__ import annotations

import logging
from pathlib import Path

from questgen.core.models import Document
from questgen.extraction.base_extractor import BaseExtractor

logger = logging.getLogger(__name__)


class EpubExtractor(BaseExtractor):
    """Extractor for EPUB files (.epub)."""

    @property
    def supported_extensions(self) -> list[str]:
        return [".epub"]

    @property
    def format_name(self) -> str:
        return "epub"

    async def extract(self, path: Path) -> list[Document]:
        """Extract chapter text in spine order."""
        try:
            import ebooklib
            from ebooklib import epub
        except ImportError as e:
            raise ImportError(
                "ebooklib package required for EPUB extraction: "
                "pip install ebooklib beautifulsoup4"
            ) from e

        try:
            from bs4 import BeautifulSoup
        except ImportError as e:
            raise ImportError(
                "beautifulsoup4 required for EPUB extraction: pip install beautifulsoup4"
            ) from e

        book = epub.read_epub(str(path))
        title = self._book_title(book)

        documents: list[Document] = []
        for item in book.get_items_of_type(ebooklib.ITEM_DOCUMENT):
            html_content = item.get_content().decode("utf-8", errors="replace")
            soup = BeautifulSoup(html_content, "html.parser")
            text = soup.get_text(separator="\n", strip=True)
            if not text.strip():
                continue
            documents.append(
                Document(
                    content=text,
                    metadata=self._metadata(
                        path, chapter=len(documents) + 1, title=title,
                    ),
                )
            )

        logger.debug("Extracted %d chapters from %s", len(documents), path.name)
        return documents

    @staticmethod
    def _book_title(book: object) -> str | None:
        titles = book.get_metadata("DC", "title")  # type: ignore[attr-defined]
        if titles:
            return str(titles[0][0])
        return None
