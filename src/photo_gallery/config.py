"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    supabase_url: str
    supabase_service_key: str
    unsplash_access_key: str = ""
    unsplash_base_url: str = "https://api.unsplash.com"
    imgbb_api_key: str = ""
    imgbb_upload_url: str = "https://api.imgbb.com/1/upload"
    openai_api_key: str = ""
    openai_image_model: str = "gpt-image-1"
    generated_images_bucket: str = "generated-images"
    random_photo_count: int = 10
    random_cache_ttl_seconds: int = 300
    max_upload_bytes: int = 2 * 1024 * 1024
    log_level: str = "INFO"
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
