"""Request ingestion helpers for uploaded recordings and chat history."""

from __future__ import annotations

import json
import mimetypes
from typing import Any

from fastapi import HTTPException, UploadFile, status

from voice_gateway.providers.base import ChatMessage, ChatRole


def resolve_content_type(audio_file: UploadFile) -> str:
    """Accept any ``audio/*`` upload, guessing from the filename when the client sent no type."""

    content_type = audio_file.content_type
    if (not content_type or content_type == "application/octet-stream") and audio_file.filename:
        guessed_type, _ = mimetypes.guess_type(audio_file.filename)
        content_type = guessed_type or content_type

    if not content_type or not content_type.startswith("audio/"):
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Only audio files are allowed",
        )
    return content_type


def _too_large(max_bytes: int) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
        detail=f"Audio file exceeds the {max_bytes // (1024 * 1024)}MB upload limit",
    )


async def read_audio_bytes(audio_file: UploadFile, max_bytes: int | None = None) -> bytes:
    """Load the upload into memory, reading at most one byte past ``max_bytes``."""

    try:
        if max_bytes is None:
            audio_bytes = await audio_file.read()
        elif audio_file.size is not None and audio_file.size > max_bytes:
            raise _too_large(max_bytes)
        else:
            audio_bytes = await audio_file.read(max_bytes + 1)
    finally:
        await audio_file.close()

    if not audio_bytes:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="No audio file provided",
        )
    if max_bytes is not None and len(audio_bytes) > max_bytes:
        raise _too_large(max_bytes)
    return audio_bytes


def _coerce_message(entry: Any) -> ChatMessage:
    if not isinstance(entry, dict):
        raise ValueError("history entries must be objects")
    role = ChatRole(entry.get("role"))
    content = entry.get("content")
    if not isinstance(content, str):
        raise ValueError("history content must be a string")
    return ChatMessage(role, content)


def parse_history(raw: str | None) -> tuple[ChatMessage, ...]:
    """Decode the ``conversationHistory`` form field (a JSON array of role/content objects)."""

    if raw is None or not raw.strip():
        return ()

    try:
        entries = json.loads(raw)
        if not isinstance(entries, list):
            raise ValueError("history must be a list")
        return tuple(_coerce_message(entry) for entry in entries)
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Invalid conversationHistory: {exc}",
        ) from None


__all__ = ["parse_history", "read_audio_bytes", "resolve_content_type"]
