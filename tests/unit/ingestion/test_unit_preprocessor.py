# tests/unit/ingestion/test_unit_preprocessor.py - v1
"""Tests for ingestion/preprocessor.py."""

from __future__ import annotations

import pytest

from questgen.core.models import Document
from questgen.ingestion.preprocessor import preprocess_documents, preprocess_text


class TestPreprocessText:
    @pytest.mark.parametrize("raw,expected", [
        ("a\n\nb", "a\nb"),
        ("a\n\n\n\nb\n\nc", "a\nb\nc"),
        ("  \n\nleading and trailing\n\n  ", "leading and trailing"),
        ("single\nnewline", "single\nnewline"),
        ("", ""),
        ("\n\n\n", ""),
    ])
    def test_cases(self, raw, expected):
        assert preprocess_text(raw) == expected

    @pytest.mark.parametrize("raw", [
        "a\n\n b \n\n\nc  ",
        "\n \n \n",
        "x\r\n\r\ny",
        "  padded\t\n\n",
    ])
    def test_idempotent(self, raw):
        once = preprocess_text(raw)
        assert preprocess_text(once) == once


class TestPreprocessDocuments:
    def test_content_normalized_metadata_kept(self):
        original = Document(content="a\n\n\nb  ", metadata={"source": "x.txt", "format": "txt"})
        [processed] = preprocess_documents([original])
        assert processed.content == "a\nb"
        assert processed.metadata == {"source": "x.txt", "format": "txt"}

    def test_does_not_mutate_input(self):
        original = Document(content="a\n\nb")
        preprocess_documents([original])
        assert original.content == "a\n\nb"

    def test_order_preserved(self):
        docs = [Document(content=str(i)) for i in range(5)]
        assert [d.content for d in preprocess_documents(docs)] == ["0", "1", "2", "3", "4"]
