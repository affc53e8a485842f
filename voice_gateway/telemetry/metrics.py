"""Prometheus metrics definitions and helpers."""

from __future__ import annotations

import time
from contextlib import contextmanager
from typing import Iterator

from prometheus_client import Counter, Histogram

REQUEST_COUNT = Counter(
    "http_requests_total",
    "Total HTTP requests processed",
    ("method", "route", "status"),
)

REQUEST_LATENCY = Histogram(
    "http_request_duration_seconds",
    "HTTP request duration in seconds",
    ("method", "route"),
    buckets=(
        0.005,
        0.01,
        0.025,
        0.05,
        0.1,
        0.25,
        0.5,
        1.0,
        2.5,
        5.0,
        10.0,
    ),
)

ERROR_COUNTER = Counter(
    "app_internal_errors_total",
    "Number of requests ending in internal server error responses",
    ("method", "route"),
)

PROVIDER_REQUESTS = Counter(
    "provider_requests_total",
    "Vendor adapter invocations by outcome",
    ("capability", "adapter", "outcome"),
)

PROVIDER_LATENCY = Histogram(
    "provider_request_duration_seconds",
    "Vendor adapter invocation duration in seconds",
    ("capability", "adapter"),
    buckets=(0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0, 60.0, 120.0, 180.0),
)

PIPELINE_STAGE_LATENCY = Histogram(
    "pipeline_stage_duration_seconds",
    "Conversation pipeline stage duration in seconds",
    ("stage",),
    buckets=(0.01, 0.1, 0.5, 1.0, 2.5, 5.0, 10.0, 30.0, 60.0, 120.0, 180.0),
)


def observe_request(
    method: str,
    route: str,
    status_code: int,
    duration_seconds: float,
) -> None:
    """Record metrics for a completed HTTP request."""

    safe_route = route or "unknown"
    safe_method = method or "UNKNOWN"
    status_label = str(status_code)
    observed_duration = duration_seconds if duration_seconds >= 0 else 0

    REQUEST_COUNT.labels(
        method=safe_method,
        route=safe_route,
        status=status_label,
    ).inc()
    REQUEST_LATENCY.labels(
        method=safe_method,
        route=safe_route,
    ).observe(observed_duration)

    if status_code >= 500:
        ERROR_COUNTER.labels(
            method=safe_method,
            route=safe_route,
        ).inc()


@contextmanager
def track_provider_call(capability: str, adapter: object) -> Iterator[None]:
    """Count one adapter invocation and time it, tagging failures by exception type."""

    adapter_label = type(adapter).__name__
    start_time = time.perf_counter()
    outcome = "success"
    try:
        yield
    except Exception as exc:
        outcome = type(exc).__name__
        raise
    finally:
        PROVIDER_REQUESTS.labels(
            capability=capability,
            adapter=adapter_label,
            outcome=outcome,
        ).inc()
        PROVIDER_LATENCY.labels(
            capability=capability,
            adapter=adapter_label,
        ).observe(time.perf_counter() - start_time)


def observe_stage(stage: str, duration_seconds: float) -> None:
    """Record how long one pipeline stage took."""

    PIPELINE_STAGE_LATENCY.labels(stage=stage).observe(max(duration_seconds, 0))
