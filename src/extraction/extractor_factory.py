# src/extraction/extractor_factory.py - v1
"""Registry of the built-in extractors, keyed by file extension."""

from __future__ import annotations

from typing import Callable

from questgen.extraction.base_extractor import BaseExtractor
from questgen.extraction.csv_extractor import CsvExtractor
from questgen.extraction.docx_extractor import DocxExtractor
from questgen.extraction.epub_extractor import EpubExtractor
from questgen.extraction.json_extractor import JsonExtractor, JsonLinesExtractor
from questgen.extraction.pdf_extractor import PdfExtractor
from questgen.extraction.txt_extractor import TxtExtractor

ExtractorFactory = Callable[[], BaseExtractor]

# Registry maps extension -> zero-arg extractor factory.
_EXTRACTOR_REGISTRY: dict[str, ExtractorFactory] = {}


def _register_defaults() -> None:
    """Register built-in extractors."""
    for cls in [TxtExtractor, PdfExtractor, DocxExtractor, EpubExtractor,
                CsvExtractor, JsonExtractor, JsonLinesExtractor]:
        instance = cls()
        for ext in instance.supported_extensions:
            _EXTRACTOR_REGISTRY[ext.lower()] = cls


_register_defaults()


def default_loaders() -> dict[str, ExtractorFactory]:
    """Snapshot of the registry, suitable for DirectoryLoader."""
    return dict(_EXTRACTOR_REGISTRY)
