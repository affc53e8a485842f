"""Adapter registry and catalog-backed provider resolution.

The registry maps each :class:`AdapterKind` to a zero-argument constructor.
Resolution always builds a fresh adapter; adapters hold nothing but their
read-only credentials, so there is no pooling.
"""

from __future__ import annotations

import logging
from typing import Callable, Mapping

from voice_gateway.config.catalog import (
    PROVIDER_CATALOG,
    AdapterKind,
    Capability,
    ProvidersCatalog,
)

from .base import Chatter, Synthesizer, Transcriber
from .errors import UnknownProviderError
from .llm import OpenRouterLLM
from .stt import DeepgramSTT, GoogleCloudSTT, HamsaSTT, OpenAISTT
from .tts import DeepgramTTS, ElevenLabsTTS, HamsaTTS, OpenAITTS

logger = logging.getLogger(__name__)

Adapter = Transcriber | Chatter | Synthesizer
AdapterFactory = Callable[[], Adapter]

DEFAULT_FACTORIES: Mapping[AdapterKind, AdapterFactory] = {
    AdapterKind.OPENAI_STT: OpenAISTT,
    AdapterKind.HAMSA_STT: HamsaSTT,
    AdapterKind.DEEPGRAM_STT: DeepgramSTT,
    AdapterKind.GOOGLE_CLOUD_STT: GoogleCloudSTT,
    AdapterKind.OPENROUTER_LLM: OpenRouterLLM,
    AdapterKind.OPENAI_TTS: OpenAITTS,
    AdapterKind.HAMSA_TTS: HamsaTTS,
    AdapterKind.DEEPGRAM_TTS: DeepgramTTS,
    AdapterKind.ELEVENLABS_TTS: ElevenLabsTTS,
}


class ProviderRegistry:
    """Build adapters from their :class:`AdapterKind` identifier."""

    def __init__(self, factories: Mapping[AdapterKind, AdapterFactory] | None = None) -> None:
        self._factories: dict[AdapterKind, AdapterFactory] = dict(
            DEFAULT_FACTORIES if factories is None else factories
        )

    def resolve(self, capability: Capability | str, identifier: AdapterKind | str) -> Adapter:
        """Return a new adapter for ``identifier``.

        Raises:
            UnknownProviderError: the identifier is not an adapter kind, is not
                registered, or implements a different capability.
        """

        try:
            kind = AdapterKind(identifier)
            wanted = Capability(capability)
        except ValueError:
            raise UnknownProviderError(
                f"Unknown {str(getattr(capability, 'value', capability)).upper()} provider: {identifier}"
            ) from None

        factory = self._factories.get(kind)
        if factory is None or kind.capability is not wanted:
            raise UnknownProviderError(f"Unknown {wanted.value.upper()} provider: {kind.value}")

        logger.debug("Creating %s adapter %s", wanted.value, kind.value)
        return factory()

    def available(self) -> dict[str, list[str]]:
        listing: dict[str, list[str]] = {capability.value: [] for capability in Capability}
        for kind in self._factories:
            listing[kind.capability.value].append(kind.value)
        return listing


class ProviderResolver:
    """Resolve catalog provider ids into live adapters.

    Missing or disabled catalog entries raise ``ProviderNotFoundOrDisabled``
    before any adapter is constructed.
    """

    def __init__(
        self,
        catalog: ProvidersCatalog = PROVIDER_CATALOG,
        registry: ProviderRegistry | None = None,
    ) -> None:
        self.catalog = catalog
        self.registry = registry or ProviderRegistry()

    def _resolve(self, capability: Capability, provider_id: str) -> Adapter:
        descriptor = self.catalog.require(capability, provider_id)
        return self.registry.resolve(capability, descriptor.adapter)

    def transcriber(self, provider_id: str) -> Transcriber:
        return self._resolve(Capability.STT, provider_id)  # type: ignore[return-value]

    def chatter(self, provider_id: str) -> Chatter:
        return self._resolve(Capability.LLM, provider_id)  # type: ignore[return-value]

    def synthesizer(self, provider_id: str) -> Synthesizer:
        return self._resolve(Capability.TTS, provider_id)  # type: ignore[return-value]


__all__ = [
    "Adapter",
    "AdapterFactory",
    "DEFAULT_FACTORIES",
    "ProviderRegistry",
    "ProviderResolver",
]
