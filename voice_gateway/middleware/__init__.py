"""Request middleware: access logging and Prometheus request metrics."""

from .logging import StructuredLoggingMiddleware, format_access_line
from .telemetry import TelemetryMiddleware, resolve_route

__all__ = [
    "StructuredLoggingMiddleware",
    "TelemetryMiddleware",
    "format_access_line",
    "resolve_route",
]
