"""Application configuration using pydantic-settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    host: str = "127.0.0.1"
    port: int = 3000

    debug: bool = False

    # Battle safety caps (never reached with the built-in job modifiers)
    max_rounds: int = 10_000
    max_speed_rerolls: int = 10_000

    # Health check thresholds
    health_heap_limit_mb: int = 500
    health_rss_limit_mb: int = 500
    health_disk_path: str = "/"
    health_disk_threshold: float = 0.9  # fraction of the disk in use


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
