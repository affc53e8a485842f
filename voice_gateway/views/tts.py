"""Schemas for the text-to-speech routes."""

from __future__ import annotations

from typing import Optional

from pydantic import AliasChoices, BaseModel, Field


class SynthesizeRequest(BaseModel):
    """Payload for ``POST /api/tts/synthesize``."""

    provider: str = Field(..., min_length=1)
    text: str = Field(..., min_length=1)
    voice: Optional[str] = None
    speed: Optional[float] = Field(None, gt=0)
    model: Optional[str] = None


class SynthesizeResponse(BaseModel):
    audio_url: str = Field(
        ...,
        validation_alias=AliasChoices("audioUrl", "audio_url"),
        serialization_alias="audioUrl",
    )
    format: str
    duration: Optional[float] = None


class VoiceResponse(BaseModel):
    id: str
    name: str
    language: Optional[str] = None
    gender: Optional[str] = None


class VoiceListResponse(BaseModel):
    voices: list[VoiceResponse]


__all__ = ["SynthesizeRequest", "SynthesizeResponse", "VoiceListResponse", "VoiceResponse"]
