"""ElevenLabs text-to-speech adapter."""

from __future__ import annotations

import logging
from urllib.parse import quote

import httpx

from voice_gateway.config.settings import ProviderCredentials, settings
from voice_gateway.providers.base import AudioResult, SynthesizeOptions, Synthesizer, Voice
from voice_gateway.providers.data import ELEVENLABS_FALLBACK_VOICES, ELEVENLABS_TTS_FORMATS
from voice_gateway.providers.errors import ProviderError
from voice_gateway.providers.http import HttpAdapter, dig, require_key, vendor_errors

logger = logging.getLogger(__name__)

DEFAULT_STABILITY = 0.5
SIMILARITY_BOOST = 0.75


class ElevenLabsTTS(HttpAdapter, Synthesizer):
    """ElevenLabs ``/v1/text-to-speech/{voice}``.

    The generic ``speed`` option is forwarded as the voice ``stability``
    setting, which is the closest knob ElevenLabs exposes.
    """

    name = "ElevenLabs"
    base_url = "https://api.elevenlabs.io/v1"

    def __init__(
        self,
        credentials: ProviderCredentials | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        super().__init__(transport=transport)
        creds = credentials or settings.providers
        self._api_key = require_key(
            creds.reveal(creds.elevenlabs_api_key), "ELEVENLABS_API_KEY", "ElevenLabs"
        )
        self._default_voice = creds.elevenlabs_default_voice_id
        self._default_model = creds.elevenlabs_default_model

    async def synthesize(
        self,
        text: str,
        options: SynthesizeOptions | None = None,
    ) -> AudioResult:
        opts = (options or SynthesizeOptions()).with_defaults(
            voice=self._default_voice or None,
            model=self._default_model,
            speed=DEFAULT_STABILITY,
        )
        if not opts.voice:
            raise ProviderError(
                "ElevenLabs TTS failed: Voice ID is required. Pass a voice option or set "
                "ELEVENLABS_DEFAULT_VOICE_ID in your .env file"
            )

        with vendor_errors("ElevenLabs TTS failed", ("detail.message", "detail")):
            async with self._client() as client:
                response = await client.post(
                    f"/text-to-speech/{quote(opts.voice, safe='')}",
                    headers={"xi-api-key": self._api_key},
                    json={
                        "text": text,
                        "model_id": opts.model,
                        "voice_settings": {
                            "stability": opts.speed,
                            "similarity_boost": SIMILARITY_BOOST,
                        },
                    },
                )
                response.raise_for_status()
                audio = response.content

        return AudioResult(audio=audio, format="mp3")

    async def list_voices(self) -> list[Voice]:
        try:
            async with self._client() as client:
                response = await client.get("/voices", headers={"xi-api-key": self._api_key})
                response.raise_for_status()
                payload = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("Failed to fetch ElevenLabs voices, using fallback list: %s", exc)
            return list(ELEVENLABS_FALLBACK_VOICES)

        voices = []
        for voice in dig(payload, "voices", default=[]):
            if not isinstance(voice, dict) or not voice.get("voice_id"):
                continue
            labels = voice.get("labels") or {}
            voices.append(
                Voice(
                    id=voice["voice_id"],
                    name=voice.get("name") or voice["voice_id"],
                    language=labels.get("language") or labels.get("accent"),
                    gender=labels.get("gender"),
                )
            )
        return voices

    def supported_formats(self) -> frozenset[str]:
        return ELEVENLABS_TTS_FORMATS
