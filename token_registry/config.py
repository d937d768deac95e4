"""
Configuration management for the token registry.
Uses pydantic-settings for environment-based configuration.
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Service
    PROJECT_NAME: str = "NFT Token Registry"
    DEBUG: bool = False
    HOST: str = "0.0.0.0"
    PORT: int = 8080

    # Storage root, served statically; uploads go to STORAGE_ROOT/IMAGES_DIR
    STORAGE_ROOT: str = "./tmp"
    IMAGES_DIR: str = "images"

    # Scheme used when building the public image URL
    PUBLIC_URL_SCHEME: str = "https"

    # Logging
    LOG_LEVEL: str = "INFO"


@lru_cache
def get_settings() -> Settings:
    """
    Get cached application settings.
    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
