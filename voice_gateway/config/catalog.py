"""Static provider catalog.

Declares, per capability, which providers the gateway exposes, whether they
are enabled, and which adapter implements them. The catalog is built once at
import time and never mutated; routes and the conversation pipeline only read
from it.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from voice_gateway.providers.errors import ProviderNotFoundOrDisabled


class Capability(str, Enum):
    """One of the three service categories the gateway composes."""

    STT = "stt"
    LLM = "llm"
    TTS = "tts"


class AdapterKind(str, Enum):
    """Closed set of adapter identifiers the registry knows how to build."""

    OPENAI_STT = "OpenAISTT"
    HAMSA_STT = "HamsaSTT"
    DEEPGRAM_STT = "DeepgramSTT"
    GOOGLE_CLOUD_STT = "GoogleCloudSTT"
    OPENROUTER_LLM = "OpenRouterLLM"
    OPENAI_TTS = "OpenAITTS"
    HAMSA_TTS = "HamsaTTS"
    DEEPGRAM_TTS = "DeepgramTTS"
    ELEVENLABS_TTS = "ElevenLabsTTS"

    @property
    def capability(self) -> Capability:
        return _ADAPTER_CAPABILITIES[self]


_ADAPTER_CAPABILITIES: dict[AdapterKind, Capability] = {
    AdapterKind.OPENAI_STT: Capability.STT,
    AdapterKind.HAMSA_STT: Capability.STT,
    AdapterKind.DEEPGRAM_STT: Capability.STT,
    AdapterKind.GOOGLE_CLOUD_STT: Capability.STT,
    AdapterKind.OPENROUTER_LLM: Capability.LLM,
    AdapterKind.OPENAI_TTS: Capability.TTS,
    AdapterKind.HAMSA_TTS: Capability.TTS,
    AdapterKind.DEEPGRAM_TTS: Capability.TTS,
    AdapterKind.ELEVENLABS_TTS: Capability.TTS,
}


@dataclass(frozen=True)
class ModelDescriptor:
    """A selectable chat model."""

    id: str
    name: str
    provider: str


@dataclass(frozen=True)
class ProviderDescriptor:
    """Catalog entry for one provider of one capability."""

    id: str
    name: str
    adapter: AdapterKind
    enabled: bool = True
    requires_auth: bool = True
    models: tuple[ModelDescriptor, ...] = ()


@dataclass(frozen=True)
class ProvidersCatalog:
    """Ordered provider declarations keyed by capability."""

    stt: tuple[ProviderDescriptor, ...] = ()
    tts: tuple[ProviderDescriptor, ...] = ()
    llm: tuple[ProviderDescriptor, ...] = ()

    def entries(self, capability: Capability) -> tuple[ProviderDescriptor, ...]:
        return getattr(self, Capability(capability).value)

    def enabled(self, capability: Capability) -> tuple[ProviderDescriptor, ...]:
        return tuple(entry for entry in self.entries(capability) if entry.enabled)

    def find(self, capability: Capability, provider_id: str) -> ProviderDescriptor | None:
        for entry in self.entries(capability):
            if entry.id == provider_id:
                return entry
        return None

    def require(self, capability: Capability, provider_id: str) -> ProviderDescriptor:
        """Return the enabled entry for ``provider_id`` or raise ``ProviderNotFoundOrDisabled``."""

        entry = self.find(capability, provider_id)
        if entry is None or not entry.enabled:
            raise ProviderNotFoundOrDisabled(Capability(capability).value, provider_id)
        return entry


OPENROUTER_MODELS: tuple[ModelDescriptor, ...] = (
    # GLM (Z.ai)
    ModelDescriptor("z-ai/glm-4.5-air", "GLM 4.5 Air", "Z.ai"),
    # Grok (xAI)
    ModelDescriptor("x-ai/grok-4.1-fast", "Grok 4.1 Fast", "xAI"),
)


PROVIDER_CATALOG = ProvidersCatalog(
    stt=(
        ProviderDescriptor("openai-whisper", "OpenAI Whisper", AdapterKind.OPENAI_STT),
        ProviderDescriptor("hamsa-stt", "Hamsa AI STT", AdapterKind.HAMSA_STT),
        ProviderDescriptor("deepgram-stt", "Deepgram Nova-3", AdapterKind.DEEPGRAM_STT),
        # WEBM_OPUS-only recognizer without auto-detect; kept out of the UI.
        ProviderDescriptor(
            "google-stt",
            "Google Cloud Speech-to-Text",
            AdapterKind.GOOGLE_CLOUD_STT,
            enabled=False,
        ),
    ),
    tts=(
        ProviderDescriptor("openai-tts", "OpenAI TTS", AdapterKind.OPENAI_TTS),
        ProviderDescriptor("hamsa-tts", "Hamsa AI TTS", AdapterKind.HAMSA_TTS),
        ProviderDescriptor("deepgram-tts", "Deepgram Aura", AdapterKind.DEEPGRAM_TTS),
        ProviderDescriptor("elevenlabs-tts", "ElevenLabs", AdapterKind.ELEVENLABS_TTS),
    ),
    llm=(
        ProviderDescriptor(
            "openrouter",
            "OpenRouter",
            AdapterKind.OPENROUTER_LLM,
            models=OPENROUTER_MODELS,
        ),
    ),
)


__all__ = [
    "AdapterKind",
    "Capability",
    "ModelDescriptor",
    "OPENROUTER_MODELS",
    "PROVIDER_CATALOG",
    "ProviderDescriptor",
    "ProvidersCatalog",
]
