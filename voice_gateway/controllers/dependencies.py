"""Common FastAPI dependencies reused across controllers."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends

from voice_gateway.config.catalog import PROVIDER_CATALOG, ProvidersCatalog
from voice_gateway.pipelines.conversation import ConversationPipeline
from voice_gateway.providers.registry import ProviderResolver
from voice_gateway.services.storage import AudioStorage, get_audio_storage


def get_catalog() -> ProvidersCatalog:
    return PROVIDER_CATALOG


CatalogDep = Annotated[ProvidersCatalog, Depends(get_catalog)]


def get_resolver(catalog: CatalogDep) -> ProviderResolver:
    """Resolver over the active catalog; adapters are built per request."""

    return ProviderResolver(catalog)


ResolverDep = Annotated[ProviderResolver, Depends(get_resolver)]
StorageDep = Annotated[AudioStorage, Depends(get_audio_storage)]


def get_pipeline(resolver: ResolverDep, storage: StorageDep) -> ConversationPipeline:
    return ConversationPipeline(resolver, storage)


PipelineDep = Annotated[ConversationPipeline, Depends(get_pipeline)]


__all__ = [
    "CatalogDep",
    "PipelineDep",
    "ResolverDep",
    "StorageDep",
    "get_catalog",
    "get_pipeline",
    "get_resolver",
]
