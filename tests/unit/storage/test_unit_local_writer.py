# tests/unit/storage/test_unit_local_writer.py - v1
"""Tests for storage/local_writer.py."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from questgen.storage.local_writer import LocalWriter, write_atomic


class TestWriteAtomic:
    def test_writes_text_and_creates_parents(self, tmp_path: Path):
        target = tmp_path / "a" / "b" / "out.json"
        write_atomic(target, "[]")
        assert target.read_text(encoding="utf-8") == "[]"

    def test_writes_bytes(self, tmp_path: Path):
        target = tmp_path / "out.bin"
        write_atomic(target, b"\x00\x01")
        assert target.read_bytes() == b"\x00\x01"

    def test_replaces_existing(self, tmp_path: Path):
        target = tmp_path / "out.json"
        target.write_text("old")
        write_atomic(target, "new")
        assert target.read_text() == "new"
        assert [p.name for p in tmp_path.iterdir()] == ["out.json"]

    def test_failed_replace_keeps_old_content_and_cleans_temp(self, tmp_path: Path):
        target = tmp_path / "out.json"
        target.write_text("old")
        with patch("questgen.storage.local_writer.os.replace", side_effect=OSError("disk")):
            with pytest.raises(OSError):
                write_atomic(target, "new")
        assert target.read_text() == "old"
        assert [p.name for p in tmp_path.iterdir()] == ["out.json"]


class TestLocalWriter:
    @pytest.mark.asyncio
    async def test_write_creates_file(self, tmp_path: Path):
        target = tmp_path / "nested" / "x.txt"
        await LocalWriter().write(target, "hello")
        assert target.read_text() == "hello"

    @pytest.mark.asyncio
    async def test_write_error_propagates(self, tmp_path: Path):
        blocker = tmp_path / "file"
        blocker.write_text("not a directory")
        with pytest.raises(OSError):
            await LocalWriter().write(blocker / "x.txt", "hello")
