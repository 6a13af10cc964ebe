# src/ingestion/preprocessor.py - v1
"""Text normalization applied once to freshly loaded documents."""

from __future__ import annotations

import re

from questgen.core.models import Document

_BLANK_LINES = re.compile(r"\n{2,}")


def preprocess_text(text: str) -> str:
    """Collapse runs of newlines into one and trim surrounding whitespace."""
    return _BLANK_LINES.sub("\n", text).strip()


def preprocess_documents(documents: list[Document]) -> list[Document]:
    """Return copies of ``documents`` with normalized content."""
    return [
        doc.model_copy(update={"content": preprocess_text(doc.content)})
        for doc in documents
    ]
