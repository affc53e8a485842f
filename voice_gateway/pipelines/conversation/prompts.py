"""Prompt assembly for the LLM stage."""

from __future__ import annotations

from typing import Iterable

from voice_gateway.providers.base import ChatMessage, ChatRole

PLAIN_TEXT_SYSTEM_PROMPT = (
    "You are a helpful AI assistant. Always respond in plain text without using any "
    "markdown formatting. Do not use headers, bold, italics, lists, code blocks, or any "
    "other markdown syntax. Just provide your response as simple, clean text that can be "
    "read naturally by text-to-speech."
)


def build_messages(
    transcript: str,
    history: Iterable[ChatMessage] = (),
    system_prompt: str = PLAIN_TEXT_SYSTEM_PROMPT,
) -> list[ChatMessage]:
    """System instruction, then the caller's history as-is, then the new user turn."""

    return [
        ChatMessage(ChatRole.SYSTEM, system_prompt),
        *history,
        ChatMessage(ChatRole.USER, transcript),
    ]


__all__ = ["PLAIN_TEXT_SYSTEM_PROMPT", "build_messages"]
