"""Client settings and configuration management."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_BASE_URL = "https://sports-api.cloudbet.com"
DEFAULT_TIMEOUT_SECONDS = 10.0


class Settings(BaseSettings):
    """Client settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Cloudbet API
    cloudbet_api_key: str = Field(default="", description="Cloudbet API key")
    cloudbet_base_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="Base URL of the Cloudbet Sports API",
    )
    cloudbet_timeout_seconds: float = Field(
        default=DEFAULT_TIMEOUT_SECONDS,
        description="HTTP timeout for every API call",
    )

    # Application
    log_level: str = Field(default="INFO", description="Logging level")

    @property
    def cloudbet_configured(self) -> bool:
        """Check if a Cloudbet API key is configured."""
        return bool(self.cloudbet_api_key)


@lru_cache
def get_settings() -> Settings:
    """Get cached client settings."""
    return Settings()
