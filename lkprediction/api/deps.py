"""Dependency injection for FastAPI routes."""

from typing import Annotated

from fastapi import Depends

from lkprediction.api.config import Settings, get_settings
from lkprediction.upstream import FootballAPIClient


def get_app_settings() -> Settings:
    """Wrap the cached get_settings() singleton for use with Depends()."""
    return get_settings()


SettingsDep = Annotated[Settings, Depends(get_app_settings)]


def get_football_client(settings: SettingsDep) -> FootballAPIClient:
    """Build an upstream client from the application settings."""
    return FootballAPIClient(
        api_key=settings.rapidapi_key,
        host=settings.rapidapi_host,
        timeout=settings.upstream_timeout,
    )


FootballClientDep = Annotated[FootballAPIClient, Depends(get_football_client)]
