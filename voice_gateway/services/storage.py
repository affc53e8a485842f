"""Local storage for synthesized audio served under ``/audio``."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from uuid import uuid4

from fastapi.concurrency import run_in_threadpool

from voice_gateway.config.settings import settings
from voice_gateway.providers.errors import GatewayError


class StorageError(GatewayError):
    """Raised when synthesized audio cannot be persisted."""


@dataclass(frozen=True)
class StoredAudio:
    filename: str
    path: Path
    url: str


class AudioStorage:
    """Write audio blobs into a flat directory under collision-free names.

    Files are never deleted here; cleanup belongs to whoever operates the
    directory.
    """

    def __init__(self, directory: str | Path, public_prefix: str = "/audio") -> None:
        self.directory = Path(directory)
        self.public_prefix = public_prefix.rstrip("/")

    async def save(self, audio: bytes, fmt: str) -> StoredAudio:
        if not audio:
            raise StorageError("Audio payload for storage was empty.")

        filename = f"{uuid4()}.{fmt.lstrip('.') or 'bin'}"
        path = self.directory / filename
        try:
            await run_in_threadpool(self._write, path, audio)
        except OSError as exc:
            raise StorageError(f"Failed to store synthesized audio: {exc}") from exc

        return StoredAudio(filename=filename, path=path, url=f"{self.public_prefix}/{filename}")

    def _write(self, path: Path, audio: bytes) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        path.write_bytes(audio)


def get_audio_storage() -> AudioStorage:
    """Storage bound to the configured audio directory."""

    return AudioStorage(settings.storage.audio_dir, settings.storage.public_prefix)


__all__ = ["AudioStorage", "StorageError", "StoredAudio", "get_audio_storage"]
