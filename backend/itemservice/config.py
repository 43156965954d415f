"""Application configuration via environment variables."""

from functools import lru_cache

from pydantic_settings import BaseSettings

from itemservice.messages import DEFAULT_MESSAGES_FILE


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8000
    DEBUG: bool = False
    LOG_LEVEL: str = "info"

    # Validation
    TOTAL_PRICE_MIN: int = 10_000
    MESSAGES_FILE: str = str(DEFAULT_MESSAGES_FILE)

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


@lru_cache
def get_settings() -> Settings:
    return Settings()
