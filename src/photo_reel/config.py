"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    store_base_url: str = "https://6626f956b625bf088c0706c7.mockapi.io/api/v1"
    camera_index: int = 0
    camera_warmup_frames: int = 30
    capture_mime_type: str = "image/webp"
    capture_quality: int = 92
    timestamp_format: str = "%m/%d/%Y, %I:%M:%S %p"
    log_level: str = "INFO"
    debug_notices: bool = False
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
