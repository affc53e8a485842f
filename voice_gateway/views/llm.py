"""Schemas for the LLM routes."""

from __future__ import annotations

from typing import Optional

from pydantic import AliasChoices, BaseModel, Field

from voice_gateway.providers.base import ChatMessage, ChatRole


class ChatMessagePayload(BaseModel):
    role: ChatRole
    content: str

    def to_message(self) -> ChatMessage:
        return ChatMessage(self.role, self.content)


class ChatRequest(BaseModel):
    """Payload for ``POST /api/llm/chat``."""

    provider: str = Field(..., min_length=1)
    model: str = Field(..., min_length=1)
    messages: list[ChatMessagePayload] = Field(..., min_length=1)
    temperature: Optional[float] = Field(None, ge=0, le=2)
    max_tokens: Optional[int] = Field(
        None,
        gt=0,
        validation_alias=AliasChoices("maxTokens", "max_tokens"),
    )


class ChatResponse(BaseModel):
    message: str
    model: str
    tokens_used: Optional[int] = Field(
        None,
        validation_alias=AliasChoices("tokensUsed", "tokens_used"),
        serialization_alias="tokensUsed",
    )


class ModelResponse(BaseModel):
    id: str
    name: str
    provider: str


class ModelListResponse(BaseModel):
    models: list[ModelResponse]


__all__ = [
    "ChatMessagePayload",
    "ChatRequest",
    "ChatResponse",
    "ModelListResponse",
    "ModelResponse",
]
