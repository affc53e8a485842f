"""Typed containers shared across the conversation pipeline.

These dataclasses live in their own module so the stage helpers
(`prompts`, `flow`) and the HTTP controllers can import them without
creating circular dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from voice_gateway.providers.base import ChatMessage

DEFAULT_LANGUAGE = "multi"


@dataclass(frozen=True)
class ConversationRequest:
    """One voice turn: the recording plus the provider choices for each stage.

    ``history`` is owned by the caller; the pipeline forwards it untouched and
    never truncates it.
    """

    audio: bytes
    stt_provider: str
    llm_provider: str
    llm_model: str
    tts_provider: str
    tts_voice: str
    history: tuple[ChatMessage, ...] = ()
    language: str | None = None


@dataclass(frozen=True)
class ConversationResult:
    transcription: str
    detected_language: str | None
    llm_response: str
    audio_url: str
    format: str

    def to_payload(self) -> dict[str, Any]:
        """JSON shape returned by ``POST /api/agent/conversation``."""

        return {
            "transcription": self.transcription,
            "llmResponse": self.llm_response,
            "audioUrl": self.audio_url,
            "format": self.format,
            "detectedLanguage": self.detected_language,
        }


__all__ = ["DEFAULT_LANGUAGE", "ConversationRequest", "ConversationResult"]
