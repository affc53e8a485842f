"""Telemetry helpers and metrics."""

from .metrics import (
    ERROR_COUNTER,
    PIPELINE_STAGE_LATENCY,
    PROVIDER_LATENCY,
    PROVIDER_REQUESTS,
    REQUEST_COUNT,
    REQUEST_LATENCY,
    observe_request,
    observe_stage,
    track_provider_call,
)

__all__ = [
    "ERROR_COUNTER",
    "PIPELINE_STAGE_LATENCY",
    "PROVIDER_LATENCY",
    "PROVIDER_REQUESTS",
    "REQUEST_COUNT",
    "REQUEST_LATENCY",
    "observe_request",
    "observe_stage",
    "track_provider_call",
]
