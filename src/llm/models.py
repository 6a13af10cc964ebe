# src/llm/models.py - v1
"""LLM-specific types."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class LLMResponse(BaseModel):
    """Normalized response from the completion service."""

    content: str
    input_tokens: int = 0
    output_tokens: int = 0
    model: str
    provider: str
    latency_ms: int = 0
    raw_response: Any = None
