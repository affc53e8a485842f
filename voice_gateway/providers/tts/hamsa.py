"""Hamsa AI text-to-speech adapter (job based)."""

from __future__ import annotations

import logging

import httpx

from voice_gateway.config.settings import ProviderCredentials, settings
from voice_gateway.providers.base import AudioResult, SynthesizeOptions, Synthesizer, Voice
from voice_gateway.providers.data import HAMSA_TTS_FORMATS
from voice_gateway.providers.errors import ProviderError
from voice_gateway.providers.http import HttpAdapter, dig, require_key, vendor_errors
from voice_gateway.providers.polling import JobPoller, JobStatus, Sleep

logger = logging.getLogger(__name__)

MAX_POLL_ATTEMPTS = 30
POLL_INTERVAL_SECONDS = 2.0


class HamsaTTS(HttpAdapter, Synthesizer):
    """Submit a ``/jobs/text-to-speech`` job, poll it, then download the WAV.

    Hamsa sometimes answers the submission with an already completed job; in
    that case the media file is downloaded without polling.
    """

    name = "Hamsa AI"
    base_url = "https://api.tryhamsa.com/v1"

    def __init__(
        self,
        credentials: ProviderCredentials | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        sleep: Sleep | None = None,
        max_attempts: int = MAX_POLL_ATTEMPTS,
        interval: float = POLL_INTERVAL_SECONDS,
    ) -> None:
        super().__init__(transport=transport)
        creds = credentials or settings.providers
        self._api_key = require_key(creds.reveal(creds.hamsa_api_key), "HAMSA_API_KEY", "Hamsa")
        self._default_voice = creds.hamsa_default_voice_id or ""
        if not self._default_voice:
            logger.warning(
                "HAMSA_DEFAULT_VOICE_ID is not set; requests must pass a voice UUID "
                "from https://cloud.tryhamsa.com/voices"
            )
        self._poller = JobPoller(
            max_attempts=max_attempts,
            interval=interval,
            sleep=sleep,
            label="HamsaTTS",
            failure_message="TTS job failed",
            timeout_message="TTS job timed out",
        )

    @property
    def _auth(self) -> dict[str, str]:
        return {"Authorization": f"Token {self._api_key}"}

    async def synthesize(
        self,
        text: str,
        options: SynthesizeOptions | None = None,
    ) -> AudioResult:
        opts = (options or SynthesizeOptions()).with_defaults(voice=self._default_voice or None)
        if not opts.voice:
            raise ProviderError(
                "Hamsa TTS failed: Voice ID is required. Add HAMSA_DEFAULT_VOICE_ID to your "
                ".env file or pass a voice in the format xxxxxxxx-xxxx-xxxx-xxxx-xxxxxxxxxxxx"
            )

        with vendor_errors("Hamsa TTS failed", ("message", "error")):
            async with self._client() as client:
                response = await client.post(
                    "/jobs/text-to-speech",
                    headers=self._auth,
                    json={"voiceId": opts.voice, "text": text},
                )
                response.raise_for_status()
                payload = response.json()
                job = dig(payload, "data")
                if not dig(payload, "success", default=False) and not job:
                    message = dig(payload, "message", default="Failed to submit TTS job")
                    raise ProviderError(f"Hamsa TTS failed: {message}")

                media_url = None
                if dig(job, "status") == "COMPLETED":
                    media_url = dig(job, "mediaUrl") or dig(job, "jobResponse", "ttsMediaFile")

                if not media_url:
                    job_id = dig(job, "jobId") or dig(job, "id")
                    if not job_id:
                        raise ProviderError("Hamsa TTS failed: No job ID returned from Hamsa")

                    async def check(current_job: str) -> JobStatus:
                        return await self._check(client, current_job)

                    media_url = await self._poller.wait(str(job_id), check)

                download = await client.get(media_url)
                download.raise_for_status()
                audio = download.content

        return AudioResult(audio=audio, format="wav")

    async def _check(self, client: httpx.AsyncClient, job_id: str) -> JobStatus:
        response = await client.get("/jobs", headers=self._auth, params={"jobId": job_id})
        response.raise_for_status()
        job = dig(response.json(), "data", default={})
        status = dig(job, "status")
        if status == "COMPLETED":
            media_url = dig(job, "jobResponse", "mediaUrl") or dig(job, "mediaUrl")
            if not media_url:
                raise ProviderError("Hamsa TTS failed: Job completed but no media URL found")
            return JobStatus.completed(media_url)
        if status == "FAILED":
            return JobStatus.failed(dig(job, "jobResponse", "error"))
        return JobStatus.pending()

    async def list_voices(self) -> list[Voice]:
        try:
            async with self._client() as client:
                response = await client.get("/tts/voices", headers=self._auth)
                response.raise_for_status()
                payload = response.json()
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning("Failed to fetch Hamsa voices: %s", exc)
            return []

        if not dig(payload, "success", default=False):
            return []
        return [
            Voice(
                id=str(voice.get("id")),
                name=voice.get("name") or str(voice.get("id")),
                language=voice.get("language"),
                gender=voice.get("gender"),
            )
            for voice in dig(payload, "data", default=[])
            if isinstance(voice, dict) and voice.get("id")
        ]

    def supported_formats(self) -> frozenset[str]:
        return HAMSA_TTS_FORMATS
