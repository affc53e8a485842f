"""OpenAI Whisper transcription adapter."""

from __future__ import annotations

import logging

import httpx

from voice_gateway.config.settings import ProviderCredentials, settings
from voice_gateway.providers.base import TranscribeOptions, Transcriber, TranscriptionResult
from voice_gateway.providers.data import OPENAI_STT_FORMATS, OPENAI_STT_LANGUAGES
from voice_gateway.providers.http import HttpAdapter, dig, require_key, vendor_errors
from voice_gateway.providers.languages import OPENAI_LANGUAGES

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "whisper-1"


class OpenAISTT(HttpAdapter, Transcriber):
    """Whisper via ``/v1/audio/transcriptions``. Fails at construction without a key."""

    name = "OpenAI Whisper"
    base_url = "https://api.openai.com/v1"
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
            creds.reveal(creds.openai_api_key), "OPENAI_API_KEY", "OpenAI"
        )

    async def transcribe(
        self,
        audio: bytes,
        options: TranscribeOptions | None = None,
    ) -> TranscriptionResult:
        opts = (options or TranscribeOptions()).with_defaults(model=DEFAULT_MODEL)
        language = OPENAI_LANGUAGES.normalize(opts.language)

        form = {"model": opts.model}
        # Omitting the parameter lets Whisper auto-detect.
        if language:
            form["language"] = language
        logger.debug("[OpenAI Whisper] Request params: %s", form)

        with vendor_errors("Transcription failed"):
            async with self._client() as client:
                response = await client.post(
                    "/audio/transcriptions",
                    headers={"Authorization": f"Bearer {self._api_key}"},
                    data=form,
                    files={"file": ("audio.webm", audio, "audio/webm")},
                )
                response.raise_for_status()
                payload = response.json()

        return TranscriptionResult(
            text=dig(payload, "text", default=""),
            language=language,
            duration=dig(payload, "duration"),
        )

    def supported_formats(self) -> frozenset[str]:
        return OPENAI_STT_FORMATS

    def supported_languages(self) -> frozenset[str]:
        return OPENAI_STT_LANGUAGES
