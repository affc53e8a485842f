"""httpx plumbing shared by the vendor adapters.

Adapters open one ``httpx.AsyncClient`` per call and wrap vendor interaction
in :func:`vendor_errors`, which guarantees that no raw transport exception
crosses the capability boundary.
"""

from __future__ import annotations

import json
import logging
from contextlib import contextmanager
from typing import Any, Iterator, Sequence

import httpx

from .errors import ConfigurationError, ProviderError

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 60.0
TIMEOUT_MESSAGE = "The provider is taking too long to respond."


def dig(data: Any, *path: str | int, default: Any = None) -> Any:
    """Walk nested dicts/lists, returning ``default`` when any hop is absent."""

    current = data
    for key in path:
        if isinstance(key, int):
            if not isinstance(current, (list, tuple)) or not -len(current) <= key < len(current):
                return default
            current = current[key]
        else:
            if not isinstance(current, dict) or key not in current:
                return default
            current = current[key]
        if current is None:
            return default
    return current


def _response_payload(response: httpx.Response) -> Any:
    """Parse an error body as JSON, tolerating binary and plain-text bodies."""

    try:
        raw = response.content
    except httpx.ResponseNotRead:
        return None
    if not raw:
        return None
    text = raw.decode("utf-8", errors="replace")
    try:
        return json.loads(text)
    except ValueError:
        return text.strip() or None


def describe_http_error(exc: httpx.HTTPError, error_fields: Sequence[str] = ()) -> str:
    """Build a human-readable cause from the vendor body, else the transport message.

    ``error_fields`` are dotted paths tried in order against the JSON body,
    e.g. ``("error.message", "message")``.
    """

    if isinstance(exc, httpx.HTTPStatusError):
        payload = _response_payload(exc.response)
        if isinstance(payload, dict):
            for field in error_fields:
                value = dig(payload, *field.split("."))
                if isinstance(value, str) and value:
                    return value
        elif isinstance(payload, str):
            return payload[:300]
        return f"HTTP {exc.response.status_code} from {exc.request.url.host}"
    return str(exc) or exc.__class__.__name__


@contextmanager
def vendor_errors(
    prefix: str,
    error_fields: Sequence[str] = ("error.message", "error", "message"),
    *,
    timeout_message: str | None = None,
) -> Iterator[None]:
    """Translate transport and parsing failures into ``ProviderError``."""

    try:
        yield
    except ProviderError:
        raise
    except httpx.TimeoutException as exc:
        logger.warning("%s: timeout (%s)", prefix, exc.__class__.__name__)
        raise ProviderError(timeout_message or f"{prefix}: {TIMEOUT_MESSAGE}") from exc
    except httpx.HTTPError as exc:
        detail = describe_http_error(exc, error_fields)
        logger.warning("%s: %s", prefix, detail)
        raise ProviderError(f"{prefix}: {detail}") from exc
    except httpx.InvalidURL as exc:
        logger.warning("%s: invalid request URL (%s)", prefix, exc)
        raise ProviderError(f"{prefix}: invalid request URL ({exc})") from exc
    except (ValueError, KeyError, TypeError) as exc:
        logger.warning("%s: malformed vendor response (%s)", prefix, exc)
        raise ProviderError(f"{prefix}: invalid response from provider ({exc})") from exc


def require_key(key: str, env_name: str, vendor: str) -> str:
    """Return ``key`` or raise the configuration error for a missing credential."""

    if not key:
        raise ConfigurationError(
            f"{env_name} environment variable is not set. "
            f"Please add your {vendor} API key to the .env file."
        )
    return key


class HttpAdapter:
    """Shared constructor plumbing for httpx-backed adapters."""

    base_url: str = ""
    timeout: float = DEFAULT_TIMEOUT

    def __init__(self, *, transport: httpx.AsyncBaseTransport | None = None) -> None:
        self._transport = transport

    def _client(self, *, timeout: float | None = None, **kwargs: Any) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout if timeout is not None else self.timeout,
            transport=self._transport,
            **kwargs,
        )


__all__ = [
    "DEFAULT_TIMEOUT",
    "HttpAdapter",
    "describe_http_error",
    "dig",
    "require_key",
    "vendor_errors",
]
