"""Hamsa AI transcription adapter.

Hamsa's transcription API is job based and only accepts a media URL, so a
call runs three steps:

1. upload the audio to a temporary file host (litterbox) to get a URL,
2. submit a ``/jobs/transcribe`` job for that URL,
3. poll ``/jobs?jobId=`` until the job completes, fails, or times out.

The upload has no retry of its own; if it fails the whole call fails.
"""

from __future__ import annotations

import logging
import time
from typing import Any

import httpx

from voice_gateway.config.settings import ProviderCredentials, settings
from voice_gateway.providers.base import TranscribeOptions, Transcriber, TranscriptionResult
from voice_gateway.providers.data import HAMSA_STT_FORMATS, HAMSA_STT_LANGUAGES
from voice_gateway.providers.errors import ProviderError
from voice_gateway.providers.http import HttpAdapter, dig, require_key, vendor_errors
from voice_gateway.providers.languages import HAMSA_LANGUAGES
from voice_gateway.providers.polling import JobPoller, JobStatus, Sleep

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "Hamsa-General-V2.0"
UPLOAD_URL = "https://litterbox.catbox.moe/resources/internals/api.php"
UPLOAD_RETENTION = "24h"
MAX_POLL_ATTEMPTS = 60
POLL_INTERVAL_SECONDS = 3.0


class HamsaSTT(HttpAdapter, Transcriber):
    """Hamsa ``/v1/jobs/transcribe``. Fails at construction without a key."""

    name = "Hamsa AI"
    base_url = "https://api.tryhamsa.com/v1"
    upload_timeout = 120.0

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
        self._poller = JobPoller(
            max_attempts=max_attempts,
            interval=interval,
            sleep=sleep,
            label="HamsaSTT",
            failure_message="Transcription job failed",
            timeout_message="Transcription job timed out",
        )

    @property
    def _auth(self) -> dict[str, str]:
        return {"Authorization": f"Token {self._api_key}"}

    async def transcribe(
        self,
        audio: bytes,
        options: TranscribeOptions | None = None,
    ) -> TranscriptionResult:
        opts = (options or TranscribeOptions()).with_defaults(model=DEFAULT_MODEL)
        language = HAMSA_LANGUAGES.normalize(opts.language)
        logger.info("[HamsaSTT] Using language: %s", language)

        with vendor_errors("Hamsa transcription failed", ("message", "error")):
            async with self._client() as client:
                media_url = await self._upload(client, audio)
                job_id = await self._submit(client, media_url, opts.model, language)

                async def check(current_job: str) -> JobStatus:
                    return await self._check(client, current_job)

                result = await self._poller.wait(job_id, check)

        # Litterbox expires uploads on its own; nothing to clean up here.
        text = dig(result, "text") or dig(result, "transcription") or ""
        return TranscriptionResult(
            text=text,
            language=language,
            confidence=dig(result, "confidence"),
        )

    async def _upload(self, client: httpx.AsyncClient, audio: bytes) -> str:
        filename = f"audio-{int(time.time() * 1000)}.webm"
        response = await client.post(
            UPLOAD_URL,
            data={"reqtype": "fileupload", "time": UPLOAD_RETENTION},
            files={"fileToUpload": (filename, audio, "audio/webm")},
            timeout=self.upload_timeout,
        )
        response.raise_for_status()
        media_url = response.text.strip()
        if not media_url.startswith(("http://", "https://")):
            raise ProviderError(
                "Hamsa transcription failed: Failed to get valid URL from file hosting service"
            )
        return media_url

    async def _submit(
        self,
        client: httpx.AsyncClient,
        media_url: str,
        model: str,
        language: str | None,
    ) -> str:
        response = await client.post(
            "/jobs/transcribe",
            headers=self._auth,
            json={"mediaUrl": media_url, "model": model, "language": language},
        )
        response.raise_for_status()
        payload = response.json()
        if not dig(payload, "success", default=False):
            message = dig(payload, "message", default="Failed to submit transcription job")
            raise ProviderError(f"Hamsa transcription failed: {message}")
        job_id = dig(payload, "data", "jobId")
        if not job_id:
            raise ProviderError("Hamsa transcription failed: no job ID returned")
        return str(job_id)

    async def _check(self, client: httpx.AsyncClient, job_id: str) -> JobStatus:
        response = await client.get("/jobs", headers=self._auth, params={"jobId": job_id})
        response.raise_for_status()
        payload = response.json()
        # Job documents arrive either as data.data or directly as data.
        job: Any = dig(payload, "data", "data") or dig(payload, "data", default={})
        status = dig(job, "status")
        if status == "COMPLETED":
            return JobStatus.completed(dig(job, "jobResponse") or job)
        if status == "FAILED":
            return JobStatus.failed(dig(job, "jobResponse", "error"))
        return JobStatus.pending()

    def supported_formats(self) -> frozenset[str]:
        return HAMSA_STT_FORMATS

    def supported_languages(self) -> frozenset[str]:
        return HAMSA_STT_LANGUAGES
