"""OpenRouter chat adapter."""

from __future__ import annotations

import json

import httpx
import pytest

from voice_gateway.providers.base import ChatMessage, ChatOptions, ChatRole
from voice_gateway.providers.errors import ConfigurationError, ProviderError
from voice_gateway.providers.llm import OpenRouterLLM

from conftest import RecordingTransport

MESSAGES = [
    ChatMessage(ChatRole.SYSTEM, "Be brief."),
    ChatMessage(ChatRole.USER, "What is the capital of France?"),
]


def _completion(content="Paris.", total_tokens=18):
    return {
        "choices": [{"message": {"role": "assistant", "content": content}}],
        "usage": {"total_tokens": total_tokens},
    }


def test_requires_key_at_construction(no_credentials):
    with pytest.raises(ConfigurationError, match="OPENROUTER_API_KEY"):
        OpenRouterLLM(no_credentials)


def test_resolve_options_defaults():
    assert OpenRouterLLM.resolve_options(None) == ChatOptions(
        model="openai/gpt-4o-mini", temperature=0.7, max_tokens=1000
    )


def test_resolve_options_keeps_explicit_zero_temperature():
    resolved = OpenRouterLLM.resolve_options(ChatOptions(model="z-ai/glm-4.5-air", temperature=0.0))

    assert resolved.temperature == 0.0
    assert OpenRouterLLM.resolve_options(resolved) == resolved


@pytest.mark.asyncio
async def test_chat_request_and_result(credentials):
    transport = RecordingTransport(lambda request: httpx.Response(200, json=_completion()))

    result = await OpenRouterLLM(credentials, transport=transport).chat(
        MESSAGES, ChatOptions(model="x-ai/grok-4.1-fast")
    )

    request = transport.requests[0]
    assert request.url == "https://openrouter.ai/api/v1/chat/completions"
    assert request.headers["Authorization"] == "Bearer or-key"
    assert request.headers["HTTP-Referer"] == "http://localhost:3000"
    assert json.loads(request.content) == {
        "model": "x-ai/grok-4.1-fast",
        "messages": [
            {"role": "system", "content": "Be brief."},
            {"role": "user", "content": "What is the capital of France?"},
        ],
        "temperature": 0.7,
        "max_tokens": 1000,
    }
    assert result.message == "Paris."
    assert result.model == "x-ai/grok-4.1-fast"
    assert result.tokens_used == 18


@pytest.mark.asyncio
async def test_chat_tolerates_missing_content(credentials):
    transport = RecordingTransport(lambda request: httpx.Response(200, json={"choices": []}))

    result = await OpenRouterLLM(credentials, transport=transport).chat(MESSAGES)

    assert result.message == ""
    assert result.tokens_used is None


@pytest.mark.asyncio
async def test_chat_error_message(credentials):
    transport = RecordingTransport(
        lambda request: httpx.Response(402, json={"error": {"message": "Insufficient credits"}})
    )

    with pytest.raises(ProviderError) as excinfo:
        await OpenRouterLLM(credentials, transport=transport).chat(MESSAGES)

    assert excinfo.value.message == "LLM request failed: Insufficient credits"


@pytest.mark.asyncio
async def test_chat_timeout_message(credentials):
    def handler(request):
        raise httpx.ReadTimeout("timed out", request=request)

    with pytest.raises(ProviderError) as excinfo:
        await OpenRouterLLM(credentials, transport=RecordingTransport(handler)).chat(MESSAGES)

    assert excinfo.value.message == "LLM request timed out. The model is taking too long to respond."


def test_available_models(credentials):
    assert OpenRouterLLM(credentials).available_models() == frozenset(
        {"z-ai/glm-4.5-air", "x-ai/grok-4.1-fast"}
    )
