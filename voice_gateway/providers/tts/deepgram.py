"""Deepgram Aura text-to-speech adapter."""

from __future__ import annotations

import httpx

from voice_gateway.config.settings import ProviderCredentials, settings
from voice_gateway.providers.base import AudioResult, SynthesizeOptions, Synthesizer, Voice
from voice_gateway.providers.data import DEEPGRAM_TTS_FORMATS, DEEPGRAM_VOICES
from voice_gateway.providers.http import HttpAdapter, require_key, vendor_errors

DEFAULT_VOICE = "aura-2-thalia"


class DeepgramTTS(HttpAdapter, Synthesizer):
    """Deepgram ``/v1/speak``; the voice id doubles as the model name.

    The key is only required when synthesizing so voices can be listed
    without one.
    """

    name = "Deepgram Aura"
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

    async def synthesize(
        self,
        text: str,
        options: SynthesizeOptions | None = None,
    ) -> AudioResult:
        api_key = require_key(self._api_key, "DEEPGRAM_API_KEY", "Deepgram")
        opts = (options or SynthesizeOptions()).with_defaults(voice=DEFAULT_VOICE)

        with vendor_errors("Deepgram TTS failed", ("err_msg", "error")):
            async with self._client() as client:
                response = await client.post(
                    "/v1/speak",
                    params={"model": opts.voice, "encoding": "mp3"},
                    headers={"Authorization": f"Token {api_key}"},
                    json={"text": text},
                )
                response.raise_for_status()
                audio = response.content

        return AudioResult(audio=audio, format="mp3")

    async def list_voices(self) -> list[Voice]:
        return list(DEEPGRAM_VOICES)

    def supported_formats(self) -> frozenset[str]:
        return DEEPGRAM_TTS_FORMATS
