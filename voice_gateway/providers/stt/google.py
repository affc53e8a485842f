"""Google Cloud Speech-to-Text (REST v1) adapter."""

from __future__ import annotations

import base64

import httpx

from voice_gateway.config.settings import ProviderCredentials, settings
from voice_gateway.providers.base import TranscribeOptions, Transcriber, TranscriptionResult
from voice_gateway.providers.data import GOOGLE_STT_FORMATS, GOOGLE_STT_LANGUAGES
from voice_gateway.providers.http import HttpAdapter, dig, require_key, vendor_errors
from voice_gateway.providers.languages import GOOGLE_LANGUAGES

DEFAULT_MODEL = "latest_long"


class GoogleCloudSTT(HttpAdapter, Transcriber):
    """``speech:recognize`` with an API key; expects browser WEBM/Opus recordings."""

    name = "Google Cloud Speech-to-Text"
    base_url = "https://speech.googleapis.com/v1"

    def __init__(
        self,
        credentials: ProviderCredentials | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(transport=transport)
        creds = credentials or settings.providers
        self._api_key = creds.reveal(creds.google_cloud_api_key)

    async def transcribe(
        self,
        audio: bytes,
        options: TranscribeOptions | None = None,
    ) -> TranscriptionResult:
        api_key = require_key(self._api_key, "GOOGLE_CLOUD_API_KEY", "Google Cloud")
        opts = (options or TranscribeOptions()).with_defaults(model=DEFAULT_MODEL)
        language = GOOGLE_LANGUAGES.normalize(opts.language)

        body = {
            "config": {
                "encoding": "WEBM_OPUS",
                "sampleRateHertz": 48000,
                "languageCode": language,
                "audioChannelCount": 1,
                "enableAutomaticPunctuation": True,
                "model": opts.model,
            },
            "audio": {"content": base64.b64encode(audio).decode("ascii")},
        }

        with vendor_errors("Google Cloud transcription failed", ("error.message",)):
            async with self._client() as client:
                response = await client.post(
                    "/speech:recognize", params={"key": api_key}, json=body
                )
                response.raise_for_status()
                payload = response.json()

        results = dig(payload, "results", default=[])
        transcripts = [dig(result, "alternatives", 0, "transcript") for result in results]
        confidences = [
            dig(result, "alternatives", 0, "confidence", default=0) for result in results
        ]
        return TranscriptionResult(
            text="\n".join(text for text in transcripts if text),
            confidence=sum(confidences) / len(confidences) if confidences else 0,
            language=language,
        )

    def supported_formats(self) -> frozenset[str]:
        return GOOGLE_STT_FORMATS

    def supported_languages(self) -> frozenset[str]:
        return GOOGLE_STT_LANGUAGES
