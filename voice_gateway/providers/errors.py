"""Error taxonomy shared by adapters, the registry and the pipeline."""

from __future__ import annotations


class GatewayError(RuntimeError):
    """Base class for every request-terminal gateway failure.

    ``stage`` is filled in by the conversation pipeline when the error escapes
    one of its stages, so callers can tell which step failed.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message
        self.stage: str | None = None


class ProviderError(GatewayError):
    """Raised when a vendor call fails, reports a failure, or times out."""


class ConfigurationError(ProviderError):
    """Raised when a required vendor credential is absent."""


class UpstreamJobFailed(ProviderError):
    """Raised when a polled asynchronous job reports a failure state."""

    def __init__(self, message: str, *, job_id: str) -> None:
        super().__init__(message)
        self.job_id = job_id


class UpstreamJobTimeout(ProviderError):
    """Raised when a polled job never leaves the pending state."""

    def __init__(self, message: str, *, job_id: str, attempts: int) -> None:
        super().__init__(message)
        self.job_id = job_id
        self.attempts = attempts


class UnknownProviderError(GatewayError):
    """Raised when an adapter identifier is not registered."""


class ProviderNotFoundOrDisabled(GatewayError):
    """Raised when a catalog id is missing or its entry is disabled."""

    def __init__(self, capability: str, provider_id: str) -> None:
        super().__init__(f"{capability.upper()} provider not found or disabled: {provider_id}")
        self.capability = capability
        self.provider_id = provider_id


__all__ = [
    "ConfigurationError",
    "GatewayError",
    "ProviderError",
    "ProviderNotFoundOrDisabled",
    "UnknownProviderError",
    "UpstreamJobFailed",
    "UpstreamJobTimeout",
]
