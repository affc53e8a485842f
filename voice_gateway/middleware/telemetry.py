"""Telemetry middleware for request instrumentation."""

from __future__ import annotations

import time
from typing import Any

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

from voice_gateway.telemetry import observe_request


def resolve_route(request: Request) -> str:
    """Return the route template so per-file ``/audio`` hits share one label."""

    scope_route: Any = request.scope.get("route")
    path = getattr(scope_route, "path", None) if scope_route is not None else None
    if path:
        return path
    if request.url.path.startswith("/audio/"):
        return "/audio"
    return request.url.path


class TelemetryMiddleware(BaseHTTPMiddleware):
    """Collect request metrics for Prometheus."""

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint,
    ) -> Response:
        start_time = time.perf_counter()
        method = request.method

        try:
            response = await call_next(request)
        except Exception:  # pragma: no cover - defensive
            observe_request(method, resolve_route(request), 500, time.perf_counter() - start_time)
            raise

        # The matched route is only known once routing has run.
        observe_request(
            method,
            resolve_route(request),
            response.status_code,
            time.perf_counter() - start_time,
        )
        return response
