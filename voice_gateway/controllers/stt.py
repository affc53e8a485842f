"""Speech-to-text endpoints."""

import logging
from typing import Optional

from fastapi import APIRouter, File, Form, UploadFile

from voice_gateway.config.catalog import Capability
from voice_gateway.config.settings import settings
from voice_gateway.controllers.dependencies import CatalogDep, ResolverDep
from voice_gateway.pipelines.conversation import read_audio_bytes, resolve_content_type
from voice_gateway.providers.base import TranscribeOptions
from voice_gateway.telemetry import track_provider_call
from voice_gateway.views import (
    ERROR_RESPONSES,
    ProviderListResponse,
    ProviderSummary,
    TranscriptionResponse,
)

router = APIRouter(prefix="/stt", tags=["stt"], responses=ERROR_RESPONSES)

logger = logging.getLogger(__name__)

_AUDIO_FILE_UPLOAD = File(...)
_PROVIDER_FORM = Form(...)
_LANGUAGE_FORM = Form(None)
_MODEL_FORM = Form(None)


@router.get("/providers", response_model=ProviderListResponse)
async def list_providers(catalog: CatalogDep) -> ProviderListResponse:
    """List enabled speech-to-text providers."""

    return ProviderListResponse(
        providers=[
            ProviderSummary(id=entry.id, name=entry.name, requires_auth=entry.requires_auth)
            for entry in catalog.enabled(Capability.STT)
        ]
    )


@router.post("/transcribe", response_model=TranscriptionResponse)
async def transcribe(
    resolver: ResolverDep,
    provider: str = _PROVIDER_FORM,
    language: Optional[str] = _LANGUAGE_FORM,
    model: Optional[str] = _MODEL_FORM,
    audio: UploadFile = _AUDIO_FILE_UPLOAD,
) -> TranscriptionResponse:
    """Transcribe one uploaded recording with the chosen provider."""

    content_type = resolve_content_type(audio)
    audio_bytes = await read_audio_bytes(audio, settings.storage.max_upload_bytes)
    logger.info(
        "Transcription requested provider=%s language=%s bytes=%d type=%s",
        provider,
        language,
        len(audio_bytes),
        content_type,
    )

    transcriber = resolver.transcriber(provider)
    with track_provider_call(Capability.STT.value, transcriber):
        result = await transcriber.transcribe(
            audio_bytes, TranscribeOptions(language=language, model=model)
        )

    return TranscriptionResponse(
        text=result.text,
        confidence=result.confidence,
        language=result.language,
        duration=result.duration,
    )
