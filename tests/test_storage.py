"""Audio storage service."""

from __future__ import annotations

import pytest

from voice_gateway.providers.errors import GatewayError
from voice_gateway.services.storage import AudioStorage, StorageError


@pytest.mark.asyncio
async def test_save_creates_directory_and_unique_names(tmp_path):
    storage = AudioStorage(tmp_path / "nested" / "audio", public_prefix="/audio/")

    first = await storage.save(b"abc", "mp3")
    second = await storage.save(b"abc", "mp3")

    assert first.filename != second.filename
    assert first.filename.endswith(".mp3")
    assert first.url == f"/audio/{first.filename}"
    assert first.path.read_bytes() == b"abc"


@pytest.mark.asyncio
async def test_save_uses_reported_format(tmp_path):
    stored = await AudioStorage(tmp_path).save(b"RIFF", "wav")

    assert stored.path.suffix == ".wav"


@pytest.mark.asyncio
async def test_empty_payload_is_rejected(tmp_path):
    with pytest.raises(StorageError) as excinfo:
        await AudioStorage(tmp_path).save(b"", "mp3")

    assert isinstance(excinfo.value, GatewayError)
    assert list(tmp_path.iterdir()) == []
