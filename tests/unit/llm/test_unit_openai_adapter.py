# tests/unit/llm/test_unit_openai_adapter.py - v1
"""Tests for llm/adapters/openai_adapter.py with a stubbed SDK client."""

from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import httpx
import openai
import pytest

from questgen.llm.adapters.openai_adapter import OpenAIAdapter
from questgen.llm.base_client import BaseLLMClient
from questgen.llm.errors import AuthError, CompletionError, NetworkError, RateLimitError

_REQUEST = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")


def _status_error(cls: type, status: int) -> Exception:
    return cls("error", response=httpx.Response(status, request=_REQUEST), body=None)


def _sdk_client(content: str | None = "1. Q?", usage: object = None) -> MagicMock:
    client = MagicMock()
    client.chat.completions.create = AsyncMock(
        return_value=SimpleNamespace(
            choices=[SimpleNamespace(message=SimpleNamespace(content=content))],
            usage=usage,
        )
    )
    return client


class TestOpenAIAdapter:
    def test_is_llm_client(self):
        adapter = OpenAIAdapter(api_key="sk-test")
        assert isinstance(adapter, BaseLLMClient)
        assert adapter.provider_name == "openai"

    def test_base_client_cannot_be_instantiated(self):
        with pytest.raises(TypeError):
            BaseLLMClient()  # type: ignore[abstract]

    @pytest.mark.asyncio
    async def test_complete(self):
        sdk = _sdk_client(usage=SimpleNamespace(prompt_tokens=12, completion_tokens=4))
        adapter = OpenAIAdapter(model="gpt-4o-mini", client=sdk, temperature=0.3)
        resp = await adapter.complete("Generate questions")

        assert resp.content == "1. Q?"
        assert resp.input_tokens == 12
        assert resp.output_tokens == 4
        assert resp.model == "gpt-4o-mini"
        assert resp.provider == "openai"
        kwargs = sdk.chat.completions.create.await_args.kwargs
        assert kwargs["model"] == "gpt-4o-mini"
        assert kwargs["messages"] == [{"role": "user", "content": "Generate questions"}]
        assert kwargs["temperature"] == 0.3
        assert "max_tokens" not in kwargs

    @pytest.mark.asyncio
    async def test_max_tokens_default_and_override(self):
        sdk = _sdk_client()
        adapter = OpenAIAdapter(client=sdk, max_tokens=100)
        await adapter.complete("p")
        assert sdk.chat.completions.create.await_args.kwargs["max_tokens"] == 100
        await adapter.complete("p", max_tokens=20)
        assert sdk.chat.completions.create.await_args.kwargs["max_tokens"] == 20

    @pytest.mark.asyncio
    async def test_none_content_becomes_empty(self):
        resp = await OpenAIAdapter(client=_sdk_client(content=None)).complete("p")
        assert resp.content == ""
        assert resp.input_tokens == 0

    @pytest.mark.asyncio
    @pytest.mark.parametrize("sdk_error,expected", [
        (_status_error(openai.AuthenticationError, 401), AuthError),
        (_status_error(openai.PermissionDeniedError, 403), AuthError),
        (_status_error(openai.RateLimitError, 429), RateLimitError),
        (openai.APIConnectionError(request=_REQUEST), NetworkError),
        (openai.APITimeoutError(request=_REQUEST), NetworkError),
        (_status_error(openai.InternalServerError, 500), CompletionError),
    ])
    async def test_error_mapping(self, sdk_error, expected):
        sdk = _sdk_client()
        sdk.chat.completions.create.side_effect = sdk_error
        with pytest.raises(expected) as exc_info:
            await OpenAIAdapter(client=sdk).complete("p")
        assert isinstance(exc_info.value, CompletionError)
        assert exc_info.value.__cause__ is sdk_error

    @pytest.mark.asyncio
    async def test_server_error_is_plain_completion_error(self):
        sdk = _sdk_client()
        sdk.chat.completions.create.side_effect = _status_error(openai.InternalServerError, 500)
        with pytest.raises(CompletionError) as exc_info:
            await OpenAIAdapter(client=sdk).complete("p")
        assert type(exc_info.value) is CompletionError
