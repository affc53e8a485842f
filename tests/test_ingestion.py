"""Upload reading limits for recorded audio."""

from __future__ import annotations

import io

import pytest
from fastapi import HTTPException, UploadFile

from voice_gateway.pipelines.conversation import read_audio_bytes

LIMIT = 1024


class TrackingUpload(UploadFile):
    """UploadFile that remembers how many bytes each read asked for."""

    def __init__(self, content: bytes, size: int | None = None) -> None:
        super().__init__(io.BytesIO(content), size=size, filename="turn.webm")
        self.read_sizes: list[int] = []
        self.was_closed = False

    async def read(self, size: int = -1) -> bytes:
        self.read_sizes.append(size)
        return await super().read(size)

    async def close(self) -> None:
        self.was_closed = True
        await super().close()


@pytest.mark.asyncio
async def test_read_stops_one_byte_past_the_limit():
    upload = TrackingUpload(b"\x00" * (LIMIT * 8))

    with pytest.raises(HTTPException) as info:
        await read_audio_bytes(upload, LIMIT)

    assert info.value.status_code == 413
    assert upload.read_sizes == [LIMIT + 1]
    assert upload.was_closed


@pytest.mark.asyncio
async def test_declared_size_rejects_without_reading():
    upload = TrackingUpload(b"\x00" * (LIMIT * 8), size=LIMIT * 8)

    with pytest.raises(HTTPException) as info:
        await read_audio_bytes(upload, LIMIT)

    assert info.value.status_code == 413
    assert upload.read_sizes == []
    assert upload.was_closed


@pytest.mark.asyncio
async def test_upload_at_the_limit_is_accepted():
    upload = TrackingUpload(b"a" * LIMIT, size=LIMIT)

    assert await read_audio_bytes(upload, LIMIT) == b"a" * LIMIT


@pytest.mark.asyncio
async def test_empty_upload_is_rejected():
    with pytest.raises(HTTPException) as info:
        await read_audio_bytes(TrackingUpload(b""), LIMIT)

    assert info.value.status_code == 400
    assert info.value.detail == "No audio file provided"
