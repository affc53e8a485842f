"""OpenAI text-to-speech adapter."""

from __future__ import annotations

import httpx

from voice_gateway.config.settings import ProviderCredentials, settings
from voice_gateway.providers.base import AudioResult, SynthesizeOptions, Synthesizer, Voice
from voice_gateway.providers.data import OPENAI_TTS_FORMATS, OPENAI_VOICES
from voice_gateway.providers.http import HttpAdapter, require_key, vendor_errors

DEFAULT_MODEL = "tts-1"
DEFAULT_VOICE = "alloy"
DEFAULT_SPEED = 1.0


class OpenAITTS(HttpAdapter, Synthesizer):
    name = "OpenAI TTS"
    base_url = "https://api.openai.com/v1"

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

    async def synthesize(
        self,
        text: str,
        options: SynthesizeOptions | None = None,
    ) -> AudioResult:
        opts = (options or SynthesizeOptions()).with_defaults(
            model=DEFAULT_MODEL, voice=DEFAULT_VOICE, speed=DEFAULT_SPEED
        )
        with vendor_errors("Synthesis failed"):
            async with self._client() as client:
                response = await client.post(
                    "/audio/speech",
                    headers={"Authorization": f"Bearer {self._api_key}"},
                    json={
                        "model": opts.model,
                        "voice": opts.voice,
                        "input": text,
                        "speed": opts.speed,
                    },
                )
                response.raise_for_status()
                audio = response.content

        return AudioResult(audio=audio, format="mp3")

    async def list_voices(self) -> list[Voice]:
        return list(OPENAI_VOICES)

    def supported_formats(self) -> frozenset[str]:
        return OPENAI_TTS_FORMATS
