"""Bookmaker odds pass-through endpoint."""

from typing import Any

from fastapi import APIRouter, HTTPException, Path

from lkprediction.api.deps import FootballClientDep
from lkprediction.monitoring import get_logger
from lkprediction.upstream import UpstreamAPIError

log = get_logger()

router = APIRouter(tags=["odds"])


@router.get("/odds/fixture/{fixture_id}")
async def get_fixture_odds(
    client: FootballClientDep,
    fixture_id: str = Path(..., max_length=50),
) -> dict[str, Any]:
    """Bookmaker odds for a fixture, if the provider has any."""
    try:
        return await client.get_odds_for_fixture(fixture_id)
    except UpstreamAPIError as exc:
        log.error(
            "upstream_request_failed",
            route="fixture_odds",
            fixture_id=fixture_id,
            error=str(exc),
            upstream_status=exc.status_code,
        )
        raise HTTPException(status_code=503, detail="Unable to fetch odds") from exc
