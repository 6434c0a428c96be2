"""Runtime configuration for the Pokedex API.

Values come from environment variables prefixed with ``POKEDEX_`` (or a local
``.env`` file) and fall back to the public upstream endpoints.
"""

import logging
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from pokedex.clients import SpeciesClient, TranslationClient
from pokedex.models import TranslationStyle


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="POKEDEX_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = "Pokedex API"
    host: str = "127.0.0.1"
    port: int = 8080
    log_level: str = "INFO"

    # Upstream services
    species_api_base_url: str = SpeciesClient.BASE_URL
    yoda_translation_url: str = TranslationClient.DEFAULT_ENDPOINTS[TranslationStyle.SOLEMN]
    shakespeare_translation_url: str = TranslationClient.DEFAULT_ENDPOINTS[TranslationStyle.ARCHAIC]
    species_timeout_seconds: float = 5.0
    translation_timeout_seconds: float = 5.0

    # Description extraction
    description_language: str = "en"
    description_newline_replacement: str = " "

    @field_validator("species_timeout_seconds", "translation_timeout_seconds")
    @classmethod
    def validate_positive_timeout(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("Timeout must be greater than 0.")
        return value

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {value!r}")
        return level

    @field_validator("species_api_base_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        return value.rstrip("/")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Cached accessor for the process-wide settings."""
    return Settings()
