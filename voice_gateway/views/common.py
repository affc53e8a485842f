"""Common response schemas."""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    detail: str
    code: Optional[str] = None
    stage: Optional[str] = None


ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    status_code: {"model": ErrorResponse, "description": description}
    for status_code, description in (
        (400, "Invalid request"),
        (404, "Provider not found or disabled"),
        (500, "Internal server error"),
        (502, "Upstream provider failed"),
        (503, "Provider is not configured"),
        (504, "Upstream provider timed out"),
    )
}
"""Error bodies shared by every API router, keyed by HTTP status."""


class HealthResponse(BaseModel):
    status: str = "ok"
    timestamp: datetime
    service: str
    version: str


class ProviderSummary(BaseModel):
    """Public view of an enabled catalog entry."""

    id: str
    name: str
    requires_auth: bool = Field(serialization_alias="requiresAuth")


class ProviderListResponse(BaseModel):
    providers: list[ProviderSummary]


__all__ = ["ERROR_RESPONSES", "ErrorResponse", "HealthResponse", "ProviderListResponse", "ProviderSummary"]
