"""Application configuration."""
from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """App settings from env."""

    openai_api_key: str = ""
    # Optional: YouTube results are disabled without it
    youtube_api_key: str = ""
    openai_model: str = "gpt-4"

    environment: str = "development"
    host: str = "0.0.0.0"
    port: int = 3000
    static_dir: str = "dist"
    cors_origins: list[str] = ["*"]
    log_level: str = "INFO"

    search_timeout_seconds: float = 10.0
    rate_limit_max_requests: int = 100  # per client, per window
    rate_limit_window_seconds: float = 15 * 60

    class Config:
        env_file = ".env"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    return Settings()
