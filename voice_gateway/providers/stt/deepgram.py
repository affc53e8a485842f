"""Deepgram Nova-3 pre-recorded transcription adapter."""

from __future__ import annotations

import logging

import httpx

from voice_gateway.config.settings import ProviderCredentials, settings
from voice_gateway.providers.base import TranscribeOptions, Transcriber, TranscriptionResult
from voice_gateway.providers.data import DEEPGRAM_STT_FORMATS, DEEPGRAM_STT_LANGUAGES
from voice_gateway.providers.http import HttpAdapter, dig, require_key, vendor_errors
from voice_gateway.providers.languages import DEEPGRAM_LANGUAGES

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "nova-3"


class DeepgramSTT(HttpAdapter, Transcriber):
    """Deepgram ``/v1/listen``.

    The key is checked when transcribing rather than at construction so the
    provider can still be listed on a deployment without Deepgram access.
    """

    name = "Deepgram"
    base_url = "https://api.deepgram.com"

    def __init__(
        self,
        credentials: ProviderCredentials | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(transport=transport)
        creds = credentials or settings.providers
        self._api_key = creds.reveal(creds.deepgram_api_key)

    async def transcribe(
        self,
        audio: bytes,
        options: TranscribeOptions | None = None,
    ) -> TranscriptionResult:
        api_key = require_key(self._api_key, "DEEPGRAM_API_KEY", "Deepgram")
        opts = (options or TranscribeOptions()).with_defaults(model=DEFAULT_MODEL)
        language = DEEPGRAM_LANGUAGES.normalize(opts.language)

        # No encoding/sample_rate: Deepgram sniffs the container itself.
        params = {
            "model": opts.model,
            "language": language,
            "smart_format": "true",
            "punctuate": "true",
            "paragraphs": "true",
            "diarize": "false",
        }
        logger.debug("[DeepgramSTT] input=%s mapped=%s", opts.language, language)

        with vendor_errors("Deepgram transcription failed", ("err_msg", "error")):
            async with self._client() as client:
                response = await client.post(
                    "/v1/listen",
                    params=params,
                    headers={"Authorization": f"Token {api_key}"},
                    content=audio,
                )
                response.raise_for_status()
                payload = response.json()

        alternative = dig(payload, "results", "channels", 0, "alternatives", 0, default={})
        detected = dig(alternative, "languages", 0, default=language)
        return TranscriptionResult(
            text=dig(alternative, "transcript", default=""),
            confidence=dig(alternative, "confidence", default=0),
            language=detected,
            duration=dig(payload, "metadata", "duration"),
        )

    def supported_formats(self) -> frozenset[str]:
        return DEEPGRAM_STT_FORMATS

    def supported_languages(self) -> frozenset[str]:
        return DEEPGRAM_STT_LANGUAGES
