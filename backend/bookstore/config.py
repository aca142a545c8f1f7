"""Application configuration and environment variables."""
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from bookstore import __version__


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    app_name: str = "Bookstore API"
    version: str = __version__
    debug: bool = False
    log_level: str = "INFO"
    cors_origins: list[str] = ["*"]

    # Server
    host: str = "0.0.0.0"
    port: int = 8080

    model_config = SettingsConfigDict(
        env_prefix="BOOKSTORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
