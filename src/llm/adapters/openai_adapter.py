# src/llm/adapters/openai_adapter.py - v1
"""OpenAI adapter implementing BaseLLMClient.

Uses the official openai SDK (chat completions). SDK exceptions are
mapped onto the CompletionError hierarchy.
"""

from __future__ import annotations

import time
from typing import Any

import openai

from questgen.llm.base_client import BaseLLMClient
from questgen.llm.errors import AuthError, CompletionError, NetworkError, RateLimitError
from questgen.llm.models import LLMResponse


class OpenAIAdapter(BaseLLMClient):
    """OpenAI GPT adapter."""

    def __init__(
        self,
        model: str = "gpt-3.5-turbo",
        api_key: str = "",
        max_tokens: int | None = None,
        temperature: float = 0.7,
        client: Any = None,
    ) -> None:
        self._model = model
        self._max_tokens = max_tokens
        self._temperature = temperature
        # SDK retries are disabled, failures propagate as that document's error
        self._client = client or openai.AsyncOpenAI(api_key=api_key, max_retries=0)

    async def complete(self, prompt: str, max_tokens: int | None = None) -> LLMResponse:
        kwargs: dict[str, Any] = {
            "model": self._model,
            "messages": [{"role": "user", "content": prompt}],
            "temperature": self._temperature,
        }
        limit = max_tokens if max_tokens is not None else self._max_tokens
        if limit is not None:
            kwargs["max_tokens"] = limit

        t0 = time.monotonic()
        try:
            resp = await self._client.chat.completions.create(**kwargs)
        except (openai.AuthenticationError, openai.PermissionDeniedError) as e:
            raise AuthError(str(e)) from e
        except openai.RateLimitError as e:
            raise RateLimitError(str(e)) from e
        except openai.APIConnectionError as e:
            raise NetworkError(str(e)) from e
        except openai.OpenAIError as e:
            raise CompletionError(str(e)) from e
        latency = int((time.monotonic() - t0) * 1000)

        choice = resp.choices[0]
        usage = resp.usage
        return LLMResponse(
            content=choice.message.content or "",
            input_tokens=usage.prompt_tokens if usage else 0,
            output_tokens=usage.completion_tokens if usage else 0,
            model=self._model,
            provider="openai",
            latency_ms=latency,
            raw_response=resp,
        )

    @property
    def provider_name(self) -> str:
        return "openai"
