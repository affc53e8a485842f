"""Schemas for the speech-to-text routes."""

from typing import Optional

from pydantic import BaseModel


class TranscriptionResponse(BaseModel):
    text: str
    confidence: Optional[float] = None
    language: Optional[str] = None
    duration: Optional[float] = None
