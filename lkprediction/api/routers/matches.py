"""Fixture pass-through endpoints."""

from datetime import datetime, timezone
from typing import Any

from fastapi import APIRouter, HTTPException, Path, Query

from lkprediction.api.deps import FootballClientDep
from lkprediction.monitoring import get_logger
from lkprediction.upstream import UpstreamAPIError

log = get_logger()

router = APIRouter(tags=["matches"])


def default_match_date() -> str:
    """Today's date in UTC as YYYY-MM-DD."""
    return datetime.now(timezone.utc).date().isoformat()


def default_season() -> int:
    return datetime.now(timezone.utc).year


@router.get("/matches/today")
async def get_matches_today(
    client: FootballClientDep,
    date: str | None = Query(
        default=None,
        pattern=r"^\d{4}-\d{2}-\d{2}$",
        description="Match date as YYYY-MM-DD, defaults to today (UTC)",
    ),
) -> dict[str, Any]:
    """Fixtures scheduled on a date, relayed as returned by the provider."""
    match_date = date or default_match_date()
    try:
        return await client.get_fixtures_by_date(match_date)
    except UpstreamAPIError as exc:
        log.error(
            "upstream_request_failed",
            route="matches_today",
            date=match_date,
            error=str(exc),
            upstream_status=exc.status_code,
        )
        raise HTTPException(status_code=503, detail="Unable to fetch matches") from exc


@router.get("/matches/league/{league_id}")
async def get_league_matches(
    client: FootballClientDep,
    league_id: int = Path(..., ge=1, description="Provider league id, e.g. 39"),
    season: int | None = Query(
        default=None,
        ge=1900,
        le=2100,
        description="Season start year, defaults to the current year (UTC)",
    ),
) -> dict[str, Any]:
    """Fixtures of a league for one season."""
    match_season = season or default_season()
    try:
        return await client.get_fixtures_by_league(league_id, match_season)
    except UpstreamAPIError as exc:
        log.error(
            "upstream_request_failed",
            route="league_matches",
            league_id=league_id,
            season=match_season,
            error=str(exc),
            upstream_status=exc.status_code,
        )
        raise HTTPException(
            status_code=503, detail="Unable to fetch league matches"
        ) from exc
