"""Pydantic schemas used as views in the MVC architecture."""

from .agent import ConversationResponse
from .common import ERROR_RESPONSES, ErrorResponse, HealthResponse, ProviderListResponse, ProviderSummary
from .llm import (
    ChatMessagePayload,
    ChatRequest,
    ChatResponse,
    ModelListResponse,
    ModelResponse,
)
from .stt import TranscriptionResponse
from .tts import SynthesizeRequest, SynthesizeResponse, VoiceListResponse, VoiceResponse

__all__ = [
    "ERROR_RESPONSES",
    "ChatMessagePayload",
    "ChatRequest",
    "ChatResponse",
    "ConversationResponse",
    "ErrorResponse",
    "HealthResponse",
    "ModelListResponse",
    "ModelResponse",
    "ProviderListResponse",
    "ProviderSummary",
    "SynthesizeRequest",
    "SynthesizeResponse",
    "TranscriptionResponse",
    "VoiceListResponse",
    "VoiceResponse",
]
