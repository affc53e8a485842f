"""Bounded status polling for vendors that only expose job-submission APIs.

A job is submitted elsewhere; :class:`JobPoller` then repeatedly asks a
status callback for the job's state until it completes, fails, or the
attempt budget runs out. Sleep is injected so tests can run the loop without
wall-clock delays.
"""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Awaitable, Callable

import httpx

from .errors import ProviderError, UpstreamJobFailed, UpstreamJobTimeout
from .http import describe_http_error

logger = logging.getLogger("voice_gateway.pipeline")

Sleep = Callable[[float], Awaitable[None]]


class JobState(str, Enum):
    PENDING = "pending"
    COMPLETED = "completed"
    FAILED = "failed"
    TIMED_OUT = "timed_out"


@dataclass(frozen=True)
class JobStatus:
    """One observation of a remote job."""

    state: JobState
    payload: Any = None
    error: str | None = None

    @classmethod
    def pending(cls) -> "JobStatus":
        return cls(JobState.PENDING)

    @classmethod
    def completed(cls, payload: Any) -> "JobStatus":
        return cls(JobState.COMPLETED, payload=payload)

    @classmethod
    def failed(cls, error: str | None) -> "JobStatus":
        return cls(JobState.FAILED, error=error)


StatusCheck = Callable[[str], Awaitable[JobStatus]]


class JobPoller:
    """Poll a job on a fixed interval up to ``max_attempts`` status checks.

    Outcomes:

    * ``COMPLETED`` returns the payload immediately.
    * ``FAILED`` raises :class:`UpstreamJobFailed` without further checks.
    * Still ``PENDING`` after the last check raises :class:`UpstreamJobTimeout`.
    * Transport errors while checking consume an attempt and are retried; the
      error from the final attempt is surfaced as a ``ProviderError``.
    """

    def __init__(
        self,
        *,
        max_attempts: int,
        interval: float,
        sleep: Sleep | None = None,
        label: str = "job",
        failure_message: str = "Job failed",
        timeout_message: str = "Job timed out",
    ) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self.max_attempts = max_attempts
        self.interval = interval
        self._sleep = sleep or asyncio.sleep
        self._label = label
        self._failure_message = failure_message
        self._timeout_message = timeout_message

    async def wait(self, job_id: str, check: StatusCheck) -> Any:
        logger.info(
            "[%s] Polling job %s (max %s attempts, %.1fs interval)",
            self._label,
            job_id,
            self.max_attempts,
            self.interval,
        )
        for attempt in range(1, self.max_attempts + 1):
            last_attempt = attempt == self.max_attempts
            try:
                status = await check(job_id)
            except httpx.HTTPError as exc:
                detail = describe_http_error(exc, ("message", "error"))
                if last_attempt:
                    raise ProviderError(f"{self._label}: {detail}") from exc
                logger.warning(
                    "[%s] Error polling job %s (attempt %s/%s): %s",
                    self._label,
                    job_id,
                    attempt,
                    self.max_attempts,
                    detail,
                )
                await self._sleep(self.interval)
                continue

            logger.info(
                "[%s] Job %s status: %s (attempt %s/%s)",
                self._label,
                job_id,
                status.state.value,
                attempt,
                self.max_attempts,
            )
            if status.state is JobState.COMPLETED:
                return status.payload
            if status.state is JobState.FAILED:
                raise UpstreamJobFailed(
                    f"{self._label}: {status.error or self._failure_message}",
                    job_id=job_id,
                )
            if not last_attempt:
                await self._sleep(self.interval)

        logger.warning(
            "[%s] Job %s %s after %s attempts",
            self._label,
            job_id,
            JobState.TIMED_OUT.value,
            self.max_attempts,
        )
        raise UpstreamJobTimeout(
            f"{self._label}: {self._timeout_message}",
            job_id=job_id,
            attempts=self.max_attempts,
        )


__all__ = ["JobPoller", "JobState", "JobStatus", "Sleep", "StatusCheck"]
