# src/llm/client_factory.py - v1
"""Factory: build the completion client from settings."""

from __future__ import annotations

import logging

from questgen.config.settings import Settings, resolve_api_key
from questgen.llm.base_client import BaseLLMClient

logger = logging.getLogger(__name__)


def create_llm_client(settings: Settings) -> BaseLLMClient:
    """Instantiate the OpenAI adapter configured by ``settings``.

    Raises:
        ConfigurationError: If no API key is configured.
    """
    from questgen.llm.adapters.openai_adapter import OpenAIAdapter

    api_key = resolve_api_key(settings)
    client = OpenAIAdapter(
        model=settings.openai_model,
        api_key=api_key,
        max_tokens=settings.max_tokens,
        temperature=settings.llm_temperature,
    )
    logger.debug(
        "Created LLM client: provider=%s, model=%s, max_tokens=%s",
        client.provider_name, settings.openai_model, settings.max_tokens,
    )
    return client
