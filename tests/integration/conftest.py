# tests/integration/conftest.py - v1
"""Integration fixtures: isolated working directory, cache root and API key."""

from __future__ import annotations

from pathlib import Path

import pytest


@pytest.fixture(autouse=True)
def isolated_run(monkeypatch, tmp_path: Path) -> Path:
    cache_root = tmp_path / "cache"
    monkeypatch.setenv("OPENAI_API_KEY", "sk-integration")
    monkeypatch.setenv("CACHE_ROOT", str(cache_root))
    monkeypatch.delenv("OPENAI_MODEL", raising=False)
    monkeypatch.chdir(tmp_path)
    return cache_root
