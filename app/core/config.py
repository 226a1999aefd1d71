"""
Application configuration using Pydantic Settings.
Loads from environment variables / .env file.
"""

from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # App
    APP_NAME: str = "GigSmart Backend"
    APP_VERSION: str = "1.0.0"
    ENVIRONMENT: str = "production"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    API_PREFIX: str = ""
    CORS_ORIGINS: List[str] = ["http://localhost:5173", "https://www.figma.com"]

    # Key-value store ("mongo" or "memory")
    KV_BACKEND: str = "mongo"
    MONGO_URI: str = "mongodb://localhost:27017"
    MONGO_DB_NAME: str = "gigsmart"
    KV_COLLECTION: str = "kv_store"

    # Job requests
    DEFAULT_SHIFT: str = "gündüz"

    # Admin stub (replace with a real identity provider)
    ADMIN_USERNAME: str = "admin"
    ADMIN_PASSWORD: str = "admin123"
    ADMIN_TOKEN_PREFIX: str = "admin_"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"



@lru_cache
def get_settings() -> Settings:
    """Cached settings instance."""
    return Settings()
