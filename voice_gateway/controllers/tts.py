"""Text-to-speech endpoints."""

import logging

from fastapi import APIRouter

from voice_gateway.config.catalog import Capability
from voice_gateway.controllers.dependencies import CatalogDep, ResolverDep, StorageDep
from voice_gateway.providers.base import SynthesizeOptions
from voice_gateway.telemetry import track_provider_call
from voice_gateway.views import (
    ERROR_RESPONSES,
    ProviderListResponse,
    ProviderSummary,
    SynthesizeRequest,
    SynthesizeResponse,
    VoiceListResponse,
    VoiceResponse,
)

router = APIRouter(prefix="/tts", tags=["tts"], responses=ERROR_RESPONSES)

logger = logging.getLogger(__name__)


@router.get("/providers", response_model=ProviderListResponse)
async def list_providers(catalog: CatalogDep) -> ProviderListResponse:
    """List enabled text-to-speech providers."""

    return ProviderListResponse(
        providers=[
            ProviderSummary(id=entry.id, name=entry.name, requires_auth=entry.requires_auth)
            for entry in catalog.enabled(Capability.TTS)
        ]
    )


@router.get("/voices/{provider_id}", response_model=VoiceListResponse)
async def list_voices(provider_id: str, resolver: ResolverDep) -> VoiceListResponse:
    synthesizer = resolver.synthesizer(provider_id)
    voices = await synthesizer.list_voices()
    return VoiceListResponse(
        voices=[
            VoiceResponse(
                id=voice.id,
                name=voice.name,
                language=voice.language,
                gender=voice.gender,
            )
            for voice in voices
        ]
    )


@router.post("/synthesize", response_model=SynthesizeResponse)
async def synthesize(
    request: SynthesizeRequest,
    resolver: ResolverDep,
    storage: StorageDep,
) -> SynthesizeResponse:
    """Synthesize ``text`` and store the result under ``/audio``."""

    synthesizer = resolver.synthesizer(request.provider)
    with track_provider_call(Capability.TTS.value, synthesizer):
        result = await synthesizer.synthesize(
            request.text,
            SynthesizeOptions(voice=request.voice, speed=request.speed, model=request.model),
        )

    stored = await storage.save(result.audio, result.format)
    logger.info("Synthesized %d bytes with %s -> %s", len(result.audio), request.provider, stored.url)

    return SynthesizeResponse(audio_url=stored.url, format=result.format, duration=result.duration)
