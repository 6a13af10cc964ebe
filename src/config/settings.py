# src/config/settings.py - v1
"""Typed configuration loaded from environment and .env via pydantic-settings.

Single source of truth for deployment-specific settings. CLI flags are
applied on top as overrides through load_settings().
"""

from __future__ import annotations

import tempfile
from pathlib import Path
from typing import Literal

from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from questgen.logging.handlers import parse_size


class ConfigurationError(Exception):
    """Raised when a required option is missing or a value is invalid."""


class Settings(BaseSettings):
    """Application settings loaded from environment and .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # === LLM ===
    openai_api_key: str = ""
    openai_model: str = "gpt-3.5-turbo"
    llm_temperature: float = 0.7
    max_tokens: int | None = None

    # === Generation ===
    questions_per_document: int = 25
    generation_concurrency: int = 8  # 0 = unbounded

    # === Paths ===
    data_directory: Path = Path("./data")
    output_path: Path = Path("./questions.json")

    # === Cache ===
    cache_enabled: bool = True
    cache_root: Path = Path(tempfile.gettempdir())
    cache_prefix: str = "QG"

    # === Logging ===
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    log_format: Literal["json", "text"] = "text"
    log_file: Path | None = None
    log_rotation: str = "10MB"
    log_retention: int = 5

    # --- Validators ---

    @field_validator("questions_per_document")
    @classmethod
    def validate_questions_per_document(cls, v: int) -> int:  # noqa: N805
        if v < 1:
            raise ValueError("questions_per_document must be >= 1")
        return v

    @field_validator("max_tokens")
    @classmethod
    def validate_max_tokens(cls, v: int | None) -> int | None:  # noqa: N805
        if v is not None and v < 1:
            raise ValueError("max_tokens must be >= 1")
        return v

    @field_validator("generation_concurrency")
    @classmethod
    def validate_generation_concurrency(cls, v: int) -> int:  # noqa: N805
        if v < 0:
            raise ValueError("generation_concurrency must be >= 0")
        return v

    @field_validator("log_rotation")
    @classmethod
    def validate_log_rotation(cls, v: str) -> str:  # noqa: N805
        parse_size(v)
        return v

    @field_validator("log_retention")
    @classmethod
    def validate_log_retention(cls, v: int) -> int:  # noqa: N805
        if v < 0:
            raise ValueError("log_retention must be >= 0")
        return v


def load_settings(**overrides: object) -> Settings:
    """Load settings from environment/.env with optional overrides.

    Overrides whose value is None are ignored so that unset CLI flags
    fall through to the environment.

    Raises:
        ConfigurationError: If a value fails validation.
    """
    values = {k: v for k, v in overrides.items() if v is not None}
    try:
        return Settings(**values)  # type: ignore[arg-type]
    except ValidationError as e:
        raise ConfigurationError(_format_validation_error(e)) from e


def resolve_api_key(settings: Settings) -> str:
    """Return the OpenAI API key or fail before any I/O happens."""
    if not settings.openai_api_key:
        raise ConfigurationError(
            "Missing required option: key. Pass --key or set OPENAI_API_KEY."
        )
    return settings.openai_api_key


def _format_validation_error(error: ValidationError) -> str:
    parts = []
    for err in error.errors():
        field = ".".join(str(loc) for loc in err["loc"])
        parts.append(f"{field}: {err['msg']}")
    return "; ".join(parts)
