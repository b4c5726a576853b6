"""
Configuration management using Pydantic Settings.
Follows Single Responsibility Principle - only handles configuration.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

STORAGE_URL = "https://api.nft.storage/"
DEFAULT_CHUNK_SIZE = 64 * 1024


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # Application
    app_name: str = Field(default="nft-storage", alias="APP_NAME")
    debug: bool = Field(default=False, alias="DEBUG")

    # Storage service
    token: Optional[str] = Field(default=None, alias="NFT_STORAGE_TOKEN")
    endpoint: str = Field(default=STORAGE_URL, alias="NFT_STORAGE_ENDPOINT")
    offline_mode: bool = Field(default=False, alias="NFT_STORAGE_OFFLINE")

    # Transfer
    request_timeout: Optional[float] = Field(
        default=None, alias="NFT_STORAGE_TIMEOUT"
    )  # None = httpx default
    chunk_size: int = Field(
        default=DEFAULT_CHUNK_SIZE, gt=0, alias="NFT_STORAGE_CHUNK_SIZE"
    )

    # Logging
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    log_file: Optional[str] = Field(default=None, alias="LOG_FILE")


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached settings instance.
    Using lru_cache to ensure single instance (Singleton pattern).
    """
    return Settings()
