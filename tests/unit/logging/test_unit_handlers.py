# tests/unit/logging/test_unit_handlers.py - v1
"""Tests for logging/handlers.py."""

from __future__ import annotations

from logging.handlers import RotatingFileHandler
from pathlib import Path

import pytest

from questgen.logging.handlers import create_rotating_handler, parse_size


class TestParseSize:
    @pytest.mark.parametrize("value,expected", [
        ("10MB", 10 * 1024**2),
        ("512kb", 512 * 1024),
        ("1 GB", 1024**3),
    ])
    def test_valid(self, value, expected):
        assert parse_size(value) == expected

    @pytest.mark.parametrize("value", ["10", "MB", "10TB", "ten MB"])
    def test_invalid(self, value):
        with pytest.raises(ValueError):
            parse_size(value)


class TestCreateRotatingHandler:
    def test_creates_parent_and_configures(self, tmp_path: Path):
        log_file = tmp_path / "nested" / "app.log"
        handler = create_rotating_handler(str(log_file), rotation="1MB", retention=3)
        try:
            assert isinstance(handler, RotatingFileHandler)
            assert handler.maxBytes == 1024**2
            assert handler.backupCount == 3
            assert log_file.parent.is_dir()
        finally:
            handler.close()
