"""Per-request access log for the gateway API."""

from __future__ import annotations

import json
import logging
import time
from datetime import datetime, timezone
from typing import Any

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

from .telemetry import resolve_route

logger = logging.getLogger("voice_gateway.middleware.structured")

COLOR_RESET = "\u001b[0m"
STATUS_COLORS = {2: "\u001b[32m", 4: "\u001b[33m", 5: "\u001b[31m"}
COLOR_OTHER = "\u001b[36m"

ACCESS_FIELDS = ("timestamp", "method", "route", "path", "client_ip", "status_code", "duration_ms")


class StructuredLoggingMiddleware(BaseHTTPMiddleware):
    """Emit one colour-coded access line per request, keyed by the matched route.

    The query string is not logged.
    """

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        start_time = time.perf_counter()
        entry: dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "method": request.method,
            "path": request.url.path,
            "client_ip": request.client.host if request.client else None,
        }

        try:
            response = await call_next(request)
        except Exception as exc:  # pragma: no cover - defensive
            entry.update(route=resolve_route(request), status_code=500, error=repr(exc))
            entry["duration_ms"] = elapsed_ms(start_time)
            logger.exception(format_access_line(entry))
            raise

        entry.update(route=resolve_route(request), status_code=response.status_code)
        entry["duration_ms"] = elapsed_ms(start_time)
        logger.info(format_access_line(entry))
        logger.debug(json.dumps(entry, default=str, separators=(",", ":")))
        return response


def elapsed_ms(start_time: float) -> float:
    return round((time.perf_counter() - start_time) * 1000, 2)


def format_access_line(entry: dict[str, Any]) -> str:
    """Render ``name=value`` pairs wrapped in an ANSI colour picked by status class."""

    status = entry.get("status_code") or 0
    color = STATUS_COLORS.get(status // 100, COLOR_OTHER)

    pairs = []
    for name in ACCESS_FIELDS:
        value = entry.get(name)
        label = "status" if name == "status_code" else name
        pairs.append(f"{label}={value if value is not None else '-'}")
    return f"{color}{', '.join(pairs)}{COLOR_RESET}"
