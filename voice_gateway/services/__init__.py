"""Infrastructure services used by the controllers and the pipeline."""

from .storage import AudioStorage, StorageError, StoredAudio, get_audio_storage

__all__ = ["AudioStorage", "StorageError", "StoredAudio", "get_audio_storage"]
