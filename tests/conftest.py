"""Shared fixtures: credentials, recorded httpx transports and fake adapters."""

from __future__ import annotations

from pathlib import Path
import sys
from typing import Callable, Sequence

import httpx
import pytest

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from voice_gateway.config.catalog import AdapterKind  # noqa: E402
from voice_gateway.config.settings import ProviderCredentials  # noqa: E402
from voice_gateway.providers.base import (  # noqa: E402
    AudioResult,
    ChatMessage,
    ChatOptions,
    ChatResult,
    Chatter,
    SynthesizeOptions,
    Synthesizer,
    TranscribeOptions,
    Transcriber,
    TranscriptionResult,
    Voice,
)
from voice_gateway.providers.registry import ProviderRegistry, ProviderResolver  # noqa: E402

_NO_KEYS = {
    "openai_api_key": None,
    "deepgram_api_key": None,
    "hamsa_api_key": None,
    "elevenlabs_api_key": None,
    "openrouter_api_key": None,
    "google_cloud_api_key": None,
    "hamsa_default_voice_id": None,
}


def make_credentials(**overrides) -> ProviderCredentials:
    """Credentials isolated from the developer's environment and .env file."""

    values = {**_NO_KEYS, **overrides}
    return ProviderCredentials(_env_file=None, **values)


@pytest.fixture
def credentials() -> ProviderCredentials:
    return make_credentials(
        openai_api_key="sk-openai",
        deepgram_api_key="dg-key",
        hamsa_api_key="hamsa-key",
        elevenlabs_api_key="xi-key",
        openrouter_api_key="or-key",
        google_cloud_api_key="gcp-key",
        hamsa_default_voice_id="11111111-2222-3333-4444-555555555555",
    )


@pytest.fixture
def no_credentials() -> ProviderCredentials:
    return make_credentials()


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it served."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: list[httpx.Request] = []

        def record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(record)


@pytest.fixture
def recording_transport() -> Callable[..., RecordingTransport]:
    return RecordingTransport


class SleepRecorder:
    """Stand-in for ``asyncio.sleep`` that returns immediately."""

    def __init__(self) -> None:
        self.calls: list[float] = []

    async def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)


@pytest.fixture
def sleeper() -> SleepRecorder:
    return SleepRecorder()


class FakeTranscriber(Transcriber):
    name = "fake-stt"

    def __init__(self, text: str = "hello there", language: str | None = "en", error: Exception | None = None) -> None:
        self.text = text
        self.language = language
        self.error = error
        self.calls: list[tuple[bytes, TranscribeOptions | None]] = []

    async def transcribe(self, audio, options=None):
        self.calls.append((audio, options))
        if self.error is not None:
            raise self.error
        return TranscriptionResult(text=self.text, language=self.language, confidence=0.9)

    def supported_formats(self):
        return frozenset({"webm"})

    def supported_languages(self):
        return frozenset({"en"})


class FakeChatter(Chatter):
    name = "fake-llm"

    def __init__(self, reply: str = "General Kenobi", error: Exception | None = None) -> None:
        self.reply = reply
        self.error = error
        self.calls: list[tuple[Sequence[ChatMessage], ChatOptions | None]] = []

    async def chat(self, messages, options=None):
        self.calls.append((list(messages), options))
        if self.error is not None:
            raise self.error
        model = options.model if options and options.model else "fake-model"
        return ChatResult(message=self.reply, model=model, tokens_used=42)

    def available_models(self):
        return frozenset({"fake-model"})


class FakeSynthesizer(Synthesizer):
    name = "fake-tts"

    def __init__(self, audio: bytes = b"ID3-fake-mp3", fmt: str = "mp3", error: Exception | None = None) -> None:
        self.audio = audio
        self.fmt = fmt
        self.error = error
        self.calls: list[tuple[str, SynthesizeOptions | None]] = []

    async def synthesize(self, text, options=None):
        self.calls.append((text, options))
        if self.error is not None:
            raise self.error
        return AudioResult(audio=self.audio, format=self.fmt)

    async def list_voices(self):
        return [Voice(id="fake-voice", name="Fake", language="en", gender="female")]

    def supported_formats(self):
        return frozenset({self.fmt})


class FakeStack:
    """One fake adapter per capability wired into a resolver over the real catalog."""

    def __init__(self) -> None:
        self.transcriber = FakeTranscriber()
        self.chatter = FakeChatter()
        self.synthesizer = FakeSynthesizer()
        stt_kinds = (
            AdapterKind.OPENAI_STT,
            AdapterKind.HAMSA_STT,
            AdapterKind.DEEPGRAM_STT,
            AdapterKind.GOOGLE_CLOUD_STT,
        )
        tts_kinds = (
            AdapterKind.OPENAI_TTS,
            AdapterKind.HAMSA_TTS,
            AdapterKind.DEEPGRAM_TTS,
            AdapterKind.ELEVENLABS_TTS,
        )
        factories = {kind: (lambda: self.transcriber) for kind in stt_kinds}
        factories.update({kind: (lambda: self.synthesizer) for kind in tts_kinds})
        factories[AdapterKind.OPENROUTER_LLM] = lambda: self.chatter
        self.resolver = ProviderResolver(registry=ProviderRegistry(factories))


@pytest.fixture
def fake_stack() -> FakeStack:
    return FakeStack()
