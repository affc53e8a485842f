"""LLM chat endpoints."""

import logging

from fastapi import APIRouter

from voice_gateway.config.catalog import Capability
from voice_gateway.controllers.dependencies import CatalogDep, ResolverDep
from voice_gateway.providers.base import ChatOptions
from voice_gateway.telemetry import track_provider_call
from voice_gateway.views import (
    ERROR_RESPONSES,
    ChatRequest,
    ChatResponse,
    ModelListResponse,
    ModelResponse,
    ProviderListResponse,
    ProviderSummary,
)

router = APIRouter(prefix="/llm", tags=["llm"], responses=ERROR_RESPONSES)

logger = logging.getLogger(__name__)


@router.get("/providers", response_model=ProviderListResponse)
async def list_providers(catalog: CatalogDep) -> ProviderListResponse:
    """List enabled LLM providers."""

    return ProviderListResponse(
        providers=[
            ProviderSummary(id=entry.id, name=entry.name, requires_auth=entry.requires_auth)
            for entry in catalog.enabled(Capability.LLM)
        ]
    )


@router.get("/models/{provider_id}", response_model=ModelListResponse)
async def list_models(provider_id: str, catalog: CatalogDep) -> ModelListResponse:
    """List the catalog models of an enabled LLM provider."""

    descriptor = catalog.require(Capability.LLM, provider_id)
    return ModelListResponse(
        models=[
            ModelResponse(id=model.id, name=model.name, provider=model.provider)
            for model in descriptor.models
        ]
    )


@router.post("/chat", response_model=ChatResponse)
async def chat(request: ChatRequest, resolver: ResolverDep) -> ChatResponse:
    chatter = resolver.chatter(request.provider)
    messages = [message.to_message() for message in request.messages]
    logger.info(
        "Chat requested provider=%s model=%s messages=%d",
        request.provider,
        request.model,
        len(messages),
    )

    with track_provider_call(Capability.LLM.value, chatter):
        result = await chatter.chat(
            messages,
            ChatOptions(
                model=request.model,
                temperature=request.temperature,
                max_tokens=request.max_tokens,
            ),
        )

    return ChatResponse(message=result.message, model=result.model, tokens_used=result.tokens_used)
