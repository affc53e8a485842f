"""Capability interfaces and the value objects that cross them.

Every adapter implements exactly one of :class:`Transcriber`, :class:`Chatter`
or :class:`Synthesizer`. The pipeline and the HTTP controllers only talk to
these contracts, never to a vendor client directly.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, fields, replace
from enum import Enum
from typing import Any, Sequence

AUTO_DETECT_SENTINELS: frozenset[str] = frozenset({"auto", "multi", "detect"})
"""Language hints meaning "let the vendor detect the spoken language"."""


class _Defaults:
    """Mixin for option structs whose unset fields take adapter defaults."""

    def with_defaults(self, **defaults: Any):
        """Return a copy where every ``None`` field is replaced by its default.

        Fields that already carry a value are left untouched, so applying the
        same defaults twice yields the same options.
        """

        known = {item.name for item in fields(self)}  # type: ignore[arg-type]
        changes = {
            name: value
            for name, value in defaults.items()
            if name in known and getattr(self, name) is None
        }
        return replace(self, **changes)  # type: ignore[type-var]


class ChatRole(str, Enum):
    SYSTEM = "system"
    USER = "user"
    ASSISTANT = "assistant"


@dataclass(frozen=True)
class ChatMessage:
    role: ChatRole
    content: str

    def as_dict(self) -> dict[str, str]:
        return {"role": ChatRole(self.role).value, "content": self.content}


@dataclass(frozen=True)
class ChatOptions(_Defaults):
    """Chat completion options; ``None`` means "use the adapter default"."""

    model: str | None = None
    temperature: float | None = None
    max_tokens: int | None = None


@dataclass(frozen=True)
class ChatResult:
    message: str
    model: str
    tokens_used: int | None = None


@dataclass(frozen=True)
class TranscribeOptions(_Defaults):
    """Transcription options.

    ``language`` accepts a language code or one of
    :data:`AUTO_DETECT_SENTINELS`.
    """

    language: str | None = None
    model: str | None = None


@dataclass(frozen=True)
class TranscriptionResult:
    text: str = ""
    confidence: float | None = None
    language: str | None = None
    duration: float | None = None


@dataclass(frozen=True)
class SynthesizeOptions(_Defaults):
    voice: str | None = None
    speed: float | None = None
    model: str | None = None


@dataclass(frozen=True)
class AudioResult:
    audio: bytes
    format: str
    duration: float | None = None


@dataclass(frozen=True)
class Voice:
    id: str
    name: str
    language: str | None = None
    gender: str | None = None


class Transcriber(ABC):
    """Speech-to-text capability."""

    name: str

    @abstractmethod
    async def transcribe(
        self,
        audio: bytes,
        options: TranscribeOptions | None = None,
    ) -> TranscriptionResult:
        """Transcribe ``audio``; raises ``ProviderError`` on failure."""

    @abstractmethod
    def supported_formats(self) -> frozenset[str]:
        ...

    @abstractmethod
    def supported_languages(self) -> frozenset[str]:
        ...


class Chatter(ABC):
    """LLM chat completion capability."""

    name: str

    @abstractmethod
    async def chat(
        self,
        messages: Sequence[ChatMessage],
        options: ChatOptions | None = None,
    ) -> ChatResult:
        """Complete the conversation; raises ``ProviderError`` on failure."""

    @abstractmethod
    def available_models(self) -> frozenset[str]:
        ...


class Synthesizer(ABC):
    """Text-to-speech capability."""

    name: str

    @abstractmethod
    async def synthesize(
        self,
        text: str,
        options: SynthesizeOptions | None = None,
    ) -> AudioResult:
        """Render ``text`` as audio; raises ``ProviderError`` on failure."""

    @abstractmethod
    async def list_voices(self) -> list[Voice]:
        """Return selectable voices. Vendors with a flaky listing endpoint fall back to static data."""

    @abstractmethod
    def supported_formats(self) -> frozenset[str]:
        ...


def is_auto_detect(language: str | None) -> bool:
    return language is None or language in AUTO_DETECT_SENTINELS


__all__ = [
    "AUTO_DETECT_SENTINELS",
    "AudioResult",
    "ChatMessage",
    "ChatOptions",
    "ChatResult",
    "ChatRole",
    "Chatter",
    "SynthesizeOptions",
    "Synthesizer",
    "TranscribeOptions",
    "Transcriber",
    "TranscriptionResult",
    "Voice",
    "is_auto_detect",
]
