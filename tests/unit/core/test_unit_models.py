# tests/unit/core/test_unit_models.py - v1
"""Tests for core/models.py."""

from __future__ import annotations

from questgen.core.models import BatchResult, Document, DocumentOutcome


class TestDocument:
    def test_defaults(self):
        doc = Document(content="text")
        assert doc.metadata == {}
        assert doc.source == ""

    def test_source_from_metadata(self):
        assert Document(content="x", metadata={"source": "a/b.pdf"}).source == "a/b.pdf"

    def test_json_round_trip(self):
        doc = Document(content="x", metadata={"source": "a.csv", "line": 3, "tags": ["t"]})
        assert Document.model_validate_json(doc.model_dump_json()) == doc


class TestDocumentOutcome:
    def test_pending_is_not_success(self):
        assert DocumentOutcome(index=0, source="a").succeeded is False

    def test_success(self):
        assert DocumentOutcome(index=0, source="a", questions=[]).succeeded is True

    def test_error(self):
        outcome = DocumentOutcome(index=0, source="a", questions=["q"], error="boom")
        assert outcome.succeeded is False


class TestBatchResult:
    def test_has_failures(self):
        kwargs = dict(total_documents=2, total_questions=1, output_path="q.json",
                      duration_seconds=0.1)
        assert BatchResult(succeeded=2, failed=0, **kwargs).has_failures is False
        assert BatchResult(succeeded=1, failed=1, **kwargs).has_failures is True
