"""Configuration management for the LKprediction API.

Settings are loaded from environment variables (and .env) using
pydantic-settings. A missing RapidAPI key crashes the app at startup.
"""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from lkprediction.upstream.football_api import DEFAULT_RAPIDAPI_HOST


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Required secrets (app crashes at startup if missing):
    - RAPIDAPI_KEY: RapidAPI key for API-Football

    Optional settings (have defaults):
    - RAPIDAPI_HOST: RapidAPI host (default: api-football-v1.p.rapidapi.com)
    - HOST / PORT: Bind address for uvicorn (default: 127.0.0.1:5000)
    - ENVIRONMENT: Runtime environment, "production" enables JSON logs
    - UPSTREAM_TIMEOUT: Seconds before an upstream request is abandoned
    - CORS_ORIGINS: Allowed origins as a JSON list (default: ["*"])
    """

    rapidapi_key: str = Field(
        ...,
        min_length=1,
        description="RapidAPI key used for every upstream request",
    )
    rapidapi_host: str = Field(default=DEFAULT_RAPIDAPI_HOST)

    host: str = Field(default="127.0.0.1")
    port: int = Field(default=5000, ge=1, le=65535)
    environment: str = Field(default="development")

    upstream_timeout: float = Field(
        default=15.0,
        gt=0,
        le=120,
        description="Timeout in seconds for calls to the football-data provider",
    )
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance (singleton).

    Raises:
        ValidationError: If RAPIDAPI_KEY is missing or settings are invalid
    """
    return Settings()
