# src/llm/base_client.py - v1
"""Abstract LLM client interface."""

from __future__ import annotations

from abc import ABC, abstractmethod

from questgen.llm.models import LLMResponse


class BaseLLMClient(ABC):
    """Single-prompt completion client."""

    @abstractmethod
    async def complete(self, prompt: str, max_tokens: int | None = None) -> LLMResponse:
        """Return the completion for ``prompt``.

        Raises:
            CompletionError: Or one of its subclasses on failure.
        """

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Provider identifier."""
