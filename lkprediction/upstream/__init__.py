"""Client for the upstream football-data provider."""

from lkprediction.upstream.football_api import (
    FootballAPIClient,
    UpstreamAPIError,
    extract_response_items,
)

__all__ = ["FootballAPIClient", "UpstreamAPIError", "extract_response_items"]
