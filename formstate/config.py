"""Library configuration via environment variables."""

from pydantic_settings import BaseSettings
from functools import lru_cache


class Settings(BaseSettings):
    """Settings loaded from ``FORMSTATE_``-prefixed environment variables."""

    # Logging
    DEBUG: bool = False
    LOG_LEVEL: str = "info"

    # Persisted-session store
    REDIS_URL: str = "redis://localhost:6379/0"
    SESSION_TTL: int = 86400
    SESSION_KEY_PREFIX: str = "formstate:session:"

    # Form behaviour
    REVALIDATE_DEPENDENTS: bool = False

    model_config = {
        "env_prefix": "FORMSTATE_",
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


@lru_cache
def get_settings() -> Settings:
    return Settings()
