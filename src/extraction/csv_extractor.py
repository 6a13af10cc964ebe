# src/extraction/csv_extractor.py - v1
"""CSV extractor: one document per row, taken from a single column."""

from __future__ import annotations

import csv
from pathlib import Path

from questgen.core.models import Document
from questgen.extraction.base_extractor import BaseExtractor


class CsvExtractor(BaseExtractor):
    """Extractor for CSV files with a header row.

    Rows where ``column`` is missing or blank are skipped.
    """

    def __init__(self, column: str = "text") -> None:
        self._column = column

    @property
    def supported_extensions(self) -> list[str]:
        return [".csv"]

    @property
    def format_name(self) -> str:
        return "csv"

    async def extract(self, path: Path) -> list[Document]:
        documents: list[Document] = []
        with path.open(newline="", encoding="utf-8") as fh:
            reader = csv.DictReader(fh)
            if reader.fieldnames is None or self._column not in reader.fieldnames:
                raise ValueError(
                    f"Column {self._column!r} not found in CSV header of {path.name}"
                )
            for line, row in enumerate(reader, start=1):
                value = row.get(self._column) or ""
                if not value.strip():
                    continue
                documents.append(
                    Document(content=value, metadata=self._metadata(path, line=line))
                )
        return documents
