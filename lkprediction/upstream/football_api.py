"""API-Football client (RapidAPI) for fixtures and bookmaker odds.

Thin async wrapper over httpx. Responses are returned as the raw upstream JSON
so the proxy endpoints can relay them untouched. Transport failures, timeouts
and non-2xx statuses surface as UpstreamAPIError.
"""

import os
import time
from typing import Any

import httpx
from dotenv import load_dotenv

from lkprediction.monitoring import get_logger

log = get_logger()

DEFAULT_RAPIDAPI_HOST = "api-football-v1.p.rapidapi.com"

# Warn when the RapidAPI quota drops below this many requests
LOW_QUOTA_THRESHOLD = 10


class UpstreamAPIError(Exception):
    """Raised when the football-data provider cannot serve a request."""

    def __init__(self, message: str, path: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.path = path
        self.status_code = status_code


def extract_response_items(payload: Any) -> list[Any]:
    """Return the ``response`` list of an API-Football payload, or []."""
    if isinstance(payload, dict):
        items = payload.get("response")
        if isinstance(items, list):
            return items
    return []


class FootballAPIClient:
    """Async client for API-Football v3 through RapidAPI.

    Attributes:
        api_key: RapidAPI key sent as ``x-rapidapi-key``
        host: RapidAPI host sent as ``x-rapidapi-host``
        timeout: Per-request timeout in seconds
        remaining_requests: Daily quota left (from last response), if reported
    """

    def __init__(
        self,
        api_key: str | None = None,
        host: str | None = None,
        timeout: float = 15.0,
    ) -> None:
        """Initialize the client.

        Args:
            api_key: RapidAPI key. Falls back to RAPIDAPI_KEY.
            host: RapidAPI host. Falls back to RAPIDAPI_HOST, then the
                public API-Football host.
            timeout: Request timeout in seconds.

        Raises:
            ValueError: If no API key is provided or found in environment.
        """
        load_dotenv()

        self.api_key = api_key or os.getenv("RAPIDAPI_KEY")
        if not self.api_key:
            raise ValueError(
                "RAPIDAPI_KEY not found in environment. "
                "Set it in .env or pass api_key parameter."
            )

        self.host = host or os.getenv("RAPIDAPI_HOST") or DEFAULT_RAPIDAPI_HOST
        self.timeout = timeout
        self.remaining_requests: int | None = None

    @property
    def base_url(self) -> str:
        return f"https://{self.host}/v3"

    @property
    def headers(self) -> dict[str, str]:
        return {
            "x-rapidapi-key": self.api_key,
            "x-rapidapi-host": self.host,
        }

    async def get_fixtures_by_date(self, date: str) -> dict[str, Any]:
        """Fetch all fixtures scheduled on a date (YYYY-MM-DD)."""
        return await self._get("/fixtures", {"date": date})

    async def get_fixtures_by_league(
        self, league_id: int | str, season: int | str
    ) -> dict[str, Any]:
        """Fetch the fixtures of a league for one season (e.g. 39, 2024)."""
        return await self._get("/fixtures", {"league": league_id, "season": season})

    async def get_odds_for_fixture(self, fixture_id: int | str) -> dict[str, Any]:
        """Fetch bookmaker odds for a single fixture."""
        return await self._get("/odds", {"fixture": fixture_id})

    async def _get(self, path: str, params: dict[str, Any]) -> dict[str, Any]:
        """Issue a GET against the provider and decode the JSON body.

        Raises:
            UpstreamAPIError: On timeout, transport error, non-2xx status or
                an undecodable body.
        """
        start_time = time.perf_counter()
        log.info("upstream_request_started", path=path, params=params)

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(
                    f"{self.base_url}{path}",
                    params=params,
                    headers=self.headers,
                )
                response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise UpstreamAPIError(
                f"Upstream returned {exc.response.status_code} for {path}",
                path=path,
                status_code=exc.response.status_code,
            ) from exc
        except httpx.HTTPError as exc:
            raise UpstreamAPIError(
                f"Upstream request to {path} failed: {exc}",
                path=path,
            ) from exc

        self._track_quota(response)

        try:
            data = response.json()
        except ValueError as exc:
            raise UpstreamAPIError(
                f"Upstream returned invalid JSON for {path}",
                path=path,
                status_code=response.status_code,
            ) from exc

        duration_ms = int((time.perf_counter() - start_time) * 1000)
        log.info(
            "upstream_request_completed",
            path=path,
            status_code=response.status_code,
            duration_ms=duration_ms,
            remaining_requests=self.remaining_requests,
        )
        return data

    def _track_quota(self, response: httpx.Response) -> None:
        remaining = response.headers.get("x-ratelimit-requests-remaining")
        if remaining is None:
            return
        try:
            self.remaining_requests = int(remaining)
        except ValueError:
            log.warning("unparseable_quota_header", value=remaining)
            return

        if self.remaining_requests < LOW_QUOTA_THRESHOLD:
            log.warning(
                "low_api_quota",
                remaining=self.remaining_requests,
                message="Consider reducing request frequency",
            )
