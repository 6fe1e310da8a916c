from pydantic import ValidationError, field_validator
from pydantic_settings import BaseSettings
from functools import lru_cache

from gamerelease.core.errors import ConfigurationError

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

class Settings(BaseSettings):
    APP_NAME: str = "Game Release Skill"
    APP_VERSION: str = "1.0.0"
    LOG_LEVEL: str = "INFO"
    IGDB_KEY: str  # required, no default
    IGDB_API_URL: str = "https://api-endpoint.igdb.com"
    IGDB_PAGE_SIZE: int = 50
    IGDB_MAX_PAGES: int = 20
    IGDB_TIMEOUT_SECONDS: float = 10.0
    RELEASE_TIMEZONE: str = "UTC"

    class Config:
        env_file = ".env"

    @field_validator("IGDB_KEY")
    @classmethod
    def _key_not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("IGDB_KEY is empty")
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def _known_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}")
        return level

    @field_validator("IGDB_PAGE_SIZE", "IGDB_MAX_PAGES")
    @classmethod
    def _positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("must be >= 1")
        return v

def load_settings(**overrides) -> Settings:
    try:
        return Settings(**overrides)
    except ValidationError as e:
        fields = ", ".join(str(err["loc"][0]) for err in e.errors() if err.get("loc"))
        raise ConfigurationError(f"Failed to load settings ({fields})") from e

@lru_cache
def get_settings() -> Settings:
    return load_settings()

# avoid logging secrets
def mask(s: str | None) -> str:
    if not s:
        return ""
    if len(s) < 8:
        return "****"
    return s[:4] + "..." + s[-4:]
