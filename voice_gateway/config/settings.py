from typing import Optional

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class ProviderCredentials(BaseSettings):
    """Vendor API keys and per-vendor defaults read from the environment."""

    openai_api_key: Optional[SecretStr] = None
    deepgram_api_key: Optional[SecretStr] = None
    hamsa_api_key: Optional[SecretStr] = None
    elevenlabs_api_key: Optional[SecretStr] = None
    openrouter_api_key: Optional[SecretStr] = None
    google_cloud_api_key: Optional[SecretStr] = None

    hamsa_default_voice_id: Optional[str] = Field(
        default=None,
        description="Voice UUID from the Hamsa dashboard used when no voice is requested.",
    )
    elevenlabs_default_voice_id: str = "21m00Tcm4TlvDq8ikWAM"
    elevenlabs_default_model: str = "eleven_multilingual_v2"
    openrouter_referer: str = "http://localhost:3000"

    model_config = SettingsConfigDict(
        env_prefix="",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    @staticmethod
    def reveal(value: Optional[SecretStr]) -> str:
        """Return the plain key, or an empty string when it is not configured."""

        if value is None:
            return ""
        return value.get_secret_value().strip()


class StorageConfig(BaseSettings):
    """Synthesized audio storage configuration."""

    audio_dir: str = "temp"
    public_prefix: str = "/audio"
    max_upload_mb: int = Field(default=25, ge=1, le=500)

    @property
    def max_upload_bytes(self) -> int:
        return self.max_upload_mb * 1024 * 1024

    model_config = SettingsConfigDict(
        env_prefix="STORAGE_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )


class Settings(BaseSettings):
    """Application settings"""

    app_name: str = "Voice Agent Gateway"
    app_version: str = "1.0.0"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = Field(default=3001, validation_alias="BACKEND_PORT")
    log_file: str = "logs/app.log"
    pipeline_log_file: str = "logs/pipeline.log"
    transcript_log_file: str = "logs/transcripts.log"

    # Vendors
    providers: ProviderCredentials = Field(default_factory=ProviderCredentials)

    # Audio storage
    storage: StorageConfig = Field(default_factory=StorageConfig)

    # CORS
    cors_origins: list[str] = ["*"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )


# Global settings instance
settings = Settings()
