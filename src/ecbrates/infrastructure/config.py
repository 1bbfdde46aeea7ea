"""Application settings loaded from the environment."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from ecbrates.infrastructure.http.fetcher import DEFAULT_TIMEOUT_SECONDS
from ecbrates.infrastructure.utils.url_builder import DEFAULT_BASE_CURRENCY, DEFAULT_BASE_URL


class Settings(BaseSettings):
    """Settings for ecb-rates.

    Every field can be set through an ``ECBRATES_``-prefixed environment
    variable (e.g. ``ECBRATES_TIMEOUT_SECONDS=10``) or a ``.env`` file.
    """

    model_config = SettingsConfigDict(
        env_prefix="ECBRATES_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    base_url: str = Field(default=DEFAULT_BASE_URL, description="ECB SDMX API root")
    base_currency: str = Field(
        default=DEFAULT_BASE_CURRENCY, description="Default denomination currency"
    )
    timeout_seconds: float = Field(
        default=DEFAULT_TIMEOUT_SECONDS, gt=0, description="Request timeout in seconds"
    )
    log_level: str = Field(default="WARNING", description="Minimum log level")


@lru_cache
def get_settings() -> Settings:
    """Return the cached settings instance."""
    return Settings()
