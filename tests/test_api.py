"""HTTP surface tests using FastAPI's TestClient with fake adapters."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from voice_gateway.config.settings import settings
from voice_gateway.controllers.dependencies import get_resolver
from voice_gateway.main import app, status_for_error
from voice_gateway.providers.errors import (
    ConfigurationError,
    GatewayError,
    ProviderError,
    ProviderNotFoundOrDisabled,
    UnknownProviderError,
    UpstreamJobFailed,
    UpstreamJobTimeout,
)
from voice_gateway.services.storage import AudioStorage, get_audio_storage

from conftest import FakeChatter, FakeSynthesizer, FakeTranscriber

AUDIO = b"\x1aE\xdf\xa3recorded-turn"


@pytest.fixture
def client(fake_stack, tmp_path):
    app.dependency_overrides[get_resolver] = lambda: fake_stack.resolver
    app.dependency_overrides[get_audio_storage] = lambda: AudioStorage(tmp_path)

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


def _conversation_form(**overrides):
    form = {
        "sttProvider": "openai-whisper",
        "llmProvider": "openrouter",
        "llmModel": "x-ai/grok-4.1-fast",
        "ttsProvider": "deepgram-tts",
        "ttsVoice": "aura-2-thalia",
    }
    form.update(overrides)
    return form


def _audio_upload(content=AUDIO, content_type="audio/webm"):
    return {"audio": ("turn.webm", content, content_type)}


def test_health(client):
    response = client.get("/api/health")

    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "ok"
    assert "timestamp" in body


def test_root(client):
    assert client.get("/").json()["status"] == "operational"


def test_stt_providers_hide_disabled_entries(client):
    response = client.get("/api/stt/providers")

    assert response.status_code == 200
    assert response.json() == {
        "providers": [
            {"id": "openai-whisper", "name": "OpenAI Whisper", "requiresAuth": True},
            {"id": "hamsa-stt", "name": "Hamsa AI STT", "requiresAuth": True},
            {"id": "deepgram-stt", "name": "Deepgram Nova-3", "requiresAuth": True},
        ]
    }


def test_tts_and_llm_provider_listings(client):
    tts_ids = [item["id"] for item in client.get("/api/tts/providers").json()["providers"]]
    llm_ids = [item["id"] for item in client.get("/api/llm/providers").json()["providers"]]

    assert tts_ids == ["openai-tts", "hamsa-tts", "deepgram-tts", "elevenlabs-tts"]
    assert llm_ids == ["openrouter"]


def test_llm_models(client):
    response = client.get("/api/llm/models/openrouter")

    assert response.status_code == 200
    assert [model["id"] for model in response.json()["models"]] == [
        "z-ai/glm-4.5-air",
        "x-ai/grok-4.1-fast",
    ]


def test_llm_models_unknown_provider(client):
    response = client.get("/api/llm/models/anthropic")

    assert response.status_code == 404
    assert response.json() == {
        "detail": "LLM provider not found or disabled: anthropic",
        "code": "ProviderNotFoundOrDisabled",
        "stage": None,
    }


def test_tts_voices(client):
    response = client.get("/api/tts/voices/openai-tts")

    assert response.status_code == 200
    assert response.json()["voices"] == [
        {"id": "fake-voice", "name": "Fake", "language": "en", "gender": "female"}
    ]


def test_tts_synthesize_stores_audio(client, fake_stack, tmp_path):
    response = client.post(
        "/api/tts/synthesize",
        json={"provider": "elevenlabs-tts", "text": "Hello", "voice": "Rachel", "speed": 0.4},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["format"] == "mp3"
    filename = body["audioUrl"].removeprefix("/audio/")
    assert (tmp_path / filename).read_bytes() == fake_stack.synthesizer.audio
    text, options = fake_stack.synthesizer.calls[0]
    assert text == "Hello"
    assert (options.voice, options.speed) == ("Rachel", 0.4)


def test_tts_synthesize_requires_text(client):
    response = client.post("/api/tts/synthesize", json={"provider": "openai-tts"})

    assert response.status_code == 400
    assert response.json()["code"] == "ValidationError"


def test_llm_chat(client, fake_stack):
    response = client.post(
        "/api/llm/chat",
        json={
            "provider": "openrouter",
            "model": "z-ai/glm-4.5-air",
            "messages": [{"role": "user", "content": "Hi"}],
            "temperature": 0,
            "maxTokens": 50,
        },
    )

    assert response.status_code == 200
    assert response.json() == {"message": "General Kenobi", "model": "z-ai/glm-4.5-air", "tokensUsed": 42}
    _, options = fake_stack.chatter.calls[0]
    assert options.temperature == 0
    assert options.max_tokens == 50


def test_llm_chat_rejects_unknown_role(client):
    response = client.post(
        "/api/llm/chat",
        json={
            "provider": "openrouter",
            "model": "z-ai/glm-4.5-air",
            "messages": [{"role": "wizard", "content": "Hi"}],
        },
    )

    assert response.status_code == 400


def test_stt_transcribe(client, fake_stack):
    response = client.post(
        "/api/stt/transcribe",
        data={"provider": "deepgram-stt", "language": "en-US"},
        files=_audio_upload(),
    )

    assert response.status_code == 200
    assert response.json()["text"] == "hello there"
    audio, options = fake_stack.transcriber.calls[0]
    assert audio == AUDIO
    assert options.language == "en-US"


def test_stt_transcribe_rejects_non_audio(client, fake_stack):
    response = client.post(
        "/api/stt/transcribe",
        data={"provider": "deepgram-stt"},
        files=_audio_upload(content_type="text/plain"),
    )

    assert response.status_code == 400
    assert response.json()["detail"] == "Only audio files are allowed"
    assert fake_stack.transcriber.calls == []


def test_stt_transcribe_rejects_oversized_upload(client, monkeypatch):
    monkeypatch.setattr(settings.storage, "max_upload_mb", 1)

    response = client.post(
        "/api/stt/transcribe",
        data={"provider": "deepgram-stt"},
        files=_audio_upload(content=b"\x00" * (1024 * 1024 + 1)),
    )

    assert response.status_code == 413
    assert response.json()["detail"] == "Audio file exceeds the 1MB upload limit"


def test_conversation_end_to_end(client, fake_stack, tmp_path):
    history = [
        {"role": "user", "content": "Hi"},
        {"role": "assistant", "content": "Hello!"},
    ]

    response = client.post(
        "/api/agent/conversation",
        data=_conversation_form(conversationHistory=json.dumps(history)),
        files=_audio_upload(),
    )

    assert response.status_code == 200
    body = response.json()
    assert body["transcription"] == "hello there"
    assert body["llmResponse"] == "General Kenobi"
    assert body["format"] == "mp3"
    assert body["detectedLanguage"] == "en"
    assert body["audioUrl"].startswith("/audio/")
    assert (tmp_path / body["audioUrl"].removeprefix("/audio/")).exists()

    assert fake_stack.transcriber.calls[0][1].language == "multi"
    messages, options = fake_stack.chatter.calls[0]
    assert [message.content for message in messages[1:]] == ["Hi", "Hello!", "hello there"]
    assert options.model == "x-ai/grok-4.1-fast"
    assert fake_stack.synthesizer.calls[0][1].voice == "aura-2-thalia"


def test_conversation_unknown_stt_provider(client, fake_stack):
    response = client.post(
        "/api/agent/conversation",
        data=_conversation_form(sttProvider="whisperx"),
        files=_audio_upload(),
    )

    assert response.status_code == 404
    assert response.json() == {
        "detail": "STT provider not found or disabled: whisperx",
        "code": "ProviderNotFoundOrDisabled",
        "stage": "stt",
    }
    assert fake_stack.chatter.calls == []
    assert fake_stack.synthesizer.calls == []


def test_conversation_missing_fields(client):
    response = client.post(
        "/api/agent/conversation",
        data={"sttProvider": "openai-whisper"},
        files=_audio_upload(),
    )

    assert response.status_code == 400
    assert response.json()["code"] == "ValidationError"


def test_conversation_invalid_history(client, fake_stack):
    response = client.post(
        "/api/agent/conversation",
        data=_conversation_form(conversationHistory="{not json"),
        files=_audio_upload(),
    )

    assert response.status_code == 400
    assert response.json()["detail"].startswith("Invalid conversationHistory")
    assert fake_stack.transcriber.calls == []


def test_conversation_empty_audio(client):
    response = client.post(
        "/api/agent/conversation",
        data=_conversation_form(),
        files=_audio_upload(content=b""),
    )

    assert response.status_code == 400


@pytest.mark.parametrize(
    "error, status_code",
    [
        (ConfigurationError("OPENROUTER_API_KEY environment variable is not set."), 503),
        (UpstreamJobTimeout("HamsaSTT: timed out", job_id="j", attempts=60), 504),
        (UpstreamJobFailed("HamsaSTT: failed", job_id="j"), 502),
        (ProviderError("LLM request failed: boom"), 502),
    ],
)
def test_conversation_provider_failures(client, fake_stack, error, status_code):
    fake_stack.chatter = FakeChatter(error=error)

    response = client.post(
        "/api/agent/conversation", data=_conversation_form(), files=_audio_upload()
    )

    assert response.status_code == status_code
    assert response.json() == {
        "detail": error.message,
        "code": type(error).__name__,
        "stage": "llm",
    }


def test_unexpected_errors_are_masked(fake_stack, tmp_path):
    fake_stack.transcriber = FakeTranscriber(error=KeyError("surprise"))
    app.dependency_overrides[get_resolver] = lambda: fake_stack.resolver
    app.dependency_overrides[get_audio_storage] = lambda: AudioStorage(tmp_path)
    try:
        with TestClient(app, raise_server_exceptions=False) as test_client:
            response = test_client.post(
                "/api/agent/conversation", data=_conversation_form(), files=_audio_upload()
            )
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 500
    assert response.json()["detail"] == "Internal server error"


def test_synthesized_audio_is_served(fake_stack):
    storage = AudioStorage(settings.storage.audio_dir, settings.storage.public_prefix)
    fake_stack.synthesizer = FakeSynthesizer(audio=b"ID3-served")
    app.dependency_overrides[get_resolver] = lambda: fake_stack.resolver
    app.dependency_overrides[get_audio_storage] = lambda: storage
    try:
        with TestClient(app) as test_client:
            audio_url = test_client.post(
                "/api/tts/synthesize", json={"provider": "openai-tts", "text": "Hi"}
            ).json()["audioUrl"]
            response = test_client.get(audio_url)
    finally:
        app.dependency_overrides.clear()

    assert response.status_code == 200
    assert response.content == b"ID3-served"
    (Path(settings.storage.audio_dir) / audio_url.rsplit("/", 1)[-1]).unlink()


def test_metrics_include_provider_counters(client):
    client.post("/api/llm/chat", json={
        "provider": "openrouter",
        "model": "z-ai/glm-4.5-air",
        "messages": [{"role": "user", "content": "Hi"}],
    })

    response = client.get("/metrics")

    assert response.status_code == 200
    assert "provider_requests_total" in response.text
    assert "http_requests_total" in response.text


def test_status_mapping():
    assert status_for_error(ProviderNotFoundOrDisabled("tts", "x")) == 404
    assert status_for_error(UnknownProviderError("Unknown TTS provider: x")) == 500
    assert status_for_error(ConfigurationError("missing")) == 503
    assert status_for_error(UpstreamJobTimeout("slow", job_id="j", attempts=1)) == 504
    assert status_for_error(ProviderError("bad gateway")) == 502
    assert status_for_error(GatewayError("other")) == 500


def test_openapi_documents_error_body(client):
    schema = client.get("/openapi.json").json()

    assert set(schema["components"]["schemas"]["ErrorResponse"]["properties"]) == {
        "detail",
        "code",
        "stage",
    }
    responses = schema["paths"]["/api/agent/conversation"]["post"]["responses"]
    for status_code in ("404", "502", "503", "504"):
        assert responses[status_code]["content"]["application/json"]["schema"] == {
            "$ref": "#/components/schemas/ErrorResponse"
        }


def test_access_log_names_matched_route(client, caplog):
    access_logger = logging.getLogger("voice_gateway.middleware.structured")
    access_logger.addHandler(caplog.handler)
    try:
        client.get("/api/llm/models/openrouter", params={"debug": "1"})
    finally:
        access_logger.removeHandler(caplog.handler)

    line = caplog.records[-1].getMessage()
    assert "method=GET" in line
    assert "route=/api/llm/models/{provider_id}" in line
    assert "path=/api/llm/models/openrouter" in line
    assert "status=200" in line
    assert "debug=1" not in line
