"""OpenRouter chat completion adapter."""

from __future__ import annotations

import logging
from typing import Sequence

import httpx

from voice_gateway.config.catalog import OPENROUTER_MODELS
from voice_gateway.config.settings import ProviderCredentials, settings
from voice_gateway.providers.base import ChatMessage, ChatOptions, ChatResult, Chatter
from voice_gateway.providers.http import HttpAdapter, dig, require_key, vendor_errors

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "openai/gpt-4o-mini"
DEFAULT_TEMPERATURE = 0.7
DEFAULT_MAX_TOKENS = 1000


class OpenRouterLLM(HttpAdapter, Chatter):
    """OpenAI-compatible ``/chat/completions`` on OpenRouter. Fails at construction without a key."""

    name = "OpenRouter"
    base_url = "https://openrouter.ai/api/v1"
    timeout = 120.0

    def __init__(
        self,
        credentials: ProviderCredentials | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(transport=transport)
        creds = credentials or settings.providers
        self._api_key = require_key(
            creds.reveal(creds.openrouter_api_key), "OPENROUTER_API_KEY", "OpenRouter"
        )
        self._referer = creds.openrouter_referer

    @staticmethod
    def resolve_options(options: ChatOptions | None) -> ChatOptions:
        return (options or ChatOptions()).with_defaults(
            model=DEFAULT_MODEL,
            temperature=DEFAULT_TEMPERATURE,
            max_tokens=DEFAULT_MAX_TOKENS,
        )

    async def chat(
        self,
        messages: Sequence[ChatMessage],
        options: ChatOptions | None = None,
    ) -> ChatResult:
        opts = self.resolve_options(options)
        body = {
            "model": opts.model,
            "messages": [message.as_dict() for message in messages],
            "temperature": opts.temperature,
            "max_tokens": opts.max_tokens,
        }

        with vendor_errors(
            "LLM request failed",
            ("error.message",),
            timeout_message="LLM request timed out. The model is taking too long to respond.",
        ):
            async with self._client() as client:
                response = await client.post(
                    "/chat/completions",
                    headers={
                        "Authorization": f"Bearer {self._api_key}",
                        "HTTP-Referer": self._referer,
                    },
                    json=body,
                )
                response.raise_for_status()
                payload = response.json()

        return ChatResult(
            message=dig(payload, "choices", 0, "message", "content", default=""),
            model=opts.model,
            tokens_used=dig(payload, "usage", "total_tokens"),
        )

    def available_models(self) -> frozenset[str]:
        return frozenset(model.id for model in OPENROUTER_MODELS)
