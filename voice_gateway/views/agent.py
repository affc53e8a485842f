"""Schema for the voice conversation route."""

from typing import Optional

from pydantic import AliasChoices, BaseModel, Field


class ConversationResponse(BaseModel):
    transcription: str
    llm_response: str = Field(
        ...,
        validation_alias=AliasChoices("llmResponse", "llm_response"),
        serialization_alias="llmResponse",
    )
    audio_url: str = Field(
        ...,
        validation_alias=AliasChoices("audioUrl", "audio_url"),
        serialization_alias="audioUrl",
    )
    format: str
    detected_language: Optional[str] = Field(
        None,
        validation_alias=AliasChoices("detectedLanguage", "detected_language"),
        serialization_alias="detectedLanguage",
    )
