# tests/conftest.py - v1
"""Shared test fixtures for unit and integration tests.

Provides sample documents, a scripted mock completion client and helpers
to populate document directories. No network access: the completion
service is always mocked.
"""

from __future__ import annotations

from pathlib import Path
from unittest.mock import AsyncMock

import pytest

from questgen.core.models import Document
from questgen.llm.base_client import BaseLLMClient
from questgen.llm.models import LLMResponse
from questgen.logging.context import clear_context


def make_response(content: str) -> LLMResponse:
    return LLMResponse(content=content, model="gpt-test", provider="openai")


@pytest.fixture(autouse=True)
def _reset_log_context():
    clear_context()
    yield
    clear_context()


@pytest.fixture
def sample_documents() -> list[Document]:
    """Three small preprocessed documents."""
    return [
        Document(
            content="Photosynthesis converts light into chemical energy.",
            metadata={"source": "data/biology.txt", "format": "txt"},
        ),
        Document(
            content="The French Revolution began in 1789.",
            metadata={"source": "data/history.pdf", "format": "pdf", "page": 1},
        ),
        Document(
            content="Supply and demand set market prices.",
            metadata={"source": "data/econ.csv", "format": "csv", "line": 3},
        ),
    ]


@pytest.fixture
def mock_llm_client() -> AsyncMock:
    """Completion client answering every prompt with three numbered questions."""
    client = AsyncMock(spec=BaseLLMClient)
    client.complete.return_value = make_response(
        "1. What is it?\n\n2. Why does it matter?\n3. How does it work?\n"
    )
    client.provider_name = "mock"
    return client


@pytest.fixture
def docs_dir(tmp_path: Path) -> Path:
    """Directory with two text files."""
    root = tmp_path / "data"
    root.mkdir()
    (root / "a.txt").write_text("Alpha paragraph.\n\n\nAlpha second line.\n", encoding="utf-8")
    (root / "b.txt").write_text("  Beta content.  \n", encoding="utf-8")
    return root
