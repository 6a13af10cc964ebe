# src/extraction/json_extractor.py - v1
"""JSON and JSON Lines extractors addressed by a JSON pointer (RFC 6901).

The pointer selects a node; every string found under that node (walking
lists and objects depth-first) becomes one document.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Iterator

from questgen.core.models import Document
from questgen.extraction.base_extractor import BaseExtractor

_MISSING = object()


def resolve_pointer(data: Any, pointer: str) -> Any:
    """Return the node at ``pointer`` or a sentinel if it does not exist."""
    if pointer in ("", "/"):
        return data
    if not pointer.startswith("/"):
        raise ValueError(f"Invalid JSON pointer: {pointer!r}")

    node = data
    for token in pointer[1:].split("/"):
        token = token.replace("~1", "/").replace("~0", "~")
        if isinstance(node, dict):
            if token not in node:
                return _MISSING
            node = node[token]
        elif isinstance(node, list):
            if not token.isdigit() or int(token) >= len(node):
                return _MISSING
            node = node[int(token)]
        else:
            return _MISSING
    return node


def iter_strings(node: Any) -> Iterator[str]:
    """Yield every string under ``node`` depth-first."""
    if isinstance(node, str):
        yield node
    elif isinstance(node, list):
        for item in node:
            yield from iter_strings(item)
    elif isinstance(node, dict):
        for value in node.values():
            yield from iter_strings(value)


class JsonExtractor(BaseExtractor):
    """Extractor for JSON files (.json)."""

    def __init__(self, pointer: str = "/texts") -> None:
        self._pointer = pointer

    @property
    def supported_extensions(self) -> list[str]:
        return [".json"]

    @property
    def format_name(self) -> str:
        return "json"

    async def extract(self, path: Path) -> list[Document]:
        data = json.loads(path.read_text(encoding="utf-8"))
        node = resolve_pointer(data, self._pointer)
        if node is _MISSING:
            return []
        return [
            Document(content=text, metadata=self._metadata(path, line=i))
            for i, text in enumerate(iter_strings(node), start=1)
        ]


class JsonLinesExtractor(BaseExtractor):
    """Extractor for JSON Lines files (.jsonl), one object per line."""

    def __init__(self, pointer: str = "/html") -> None:
        self._pointer = pointer

    @property
    def supported_extensions(self) -> list[str]:
        return [".jsonl"]

    @property
    def format_name(self) -> str:
        return "jsonl"

    async def extract(self, path: Path) -> list[Document]:
        documents: list[Document] = []
        with path.open(encoding="utf-8") as fh:
            for line_no, line in enumerate(fh, start=1):
                if not line.strip():
                    continue
                node = resolve_pointer(json.loads(line), self._pointer)
                if isinstance(node, str):
                    documents.append(
                        Document(content=node, metadata=self._metadata(path, line=line_no))
                    )
        return documents
