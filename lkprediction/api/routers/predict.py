"""Odds-implied match prediction endpoint."""

from fastapi import APIRouter, HTTPException

from lkprediction.api.deps import FootballClientDep
from lkprediction.api.schemas import PredictRequest, PredictResponse, ProbabilitiesResponse
from lkprediction.monitoring import get_logger
from lkprediction.odds import normalize
from lkprediction.odds.normalizer import get_overround
from lkprediction.upstream import UpstreamAPIError, extract_response_items

log = get_logger()

router = APIRouter(tags=["predict"])


@router.post("/predict", response_model=PredictResponse)
async def predict(client: FootballClientDep, payload: PredictRequest | None = None):
    """Home/draw/away probabilities for a fixture.

    Uses the first complete three-way bookmaker market for the fixture, with
    the overround removed. Falls back to a fixed 0.45/0.25/0.30 split when no
    usable market exists.

    Request:
        { "fixtureId": <int | str> }

    Response:
        {
          "fixtureId": ...,
          "probabilities": { "home_win": 0.462, "draw": 0.308, "away_win": 0.231 },
          "source": "bookmaker_odds" | "heuristic_default"
        }
    """
    fixture_id = payload.fixture_id if payload else None
    if not fixture_id:
        raise HTTPException(status_code=400, detail="fixtureId is required")

    try:
        odds_payload = await client.get_odds_for_fixture(fixture_id)
    except UpstreamAPIError as exc:
        log.error(
            "upstream_request_failed",
            route="predict",
            fixture_id=fixture_id,
            error=str(exc),
            upstream_status=exc.status_code,
        )
        raise HTTPException(
            status_code=503, detail="Unable to compute prediction"
        ) from exc

    groups = extract_response_items(odds_payload)
    result = normalize(groups)

    if result.prices is not None:
        log.debug(
            "bookmaker_overround",
            fixture_id=fixture_id,
            overround_pct=round(get_overround(*result.prices), 2),
        )

    probabilities = result.probabilities.rounded(3)
    log.info(
        "prediction_computed",
        fixture_id=fixture_id,
        group_count=len(groups),
        source=result.source.value,
        **probabilities.as_response_dict(),
    )

    return PredictResponse(
        fixture_id=fixture_id,
        probabilities=ProbabilitiesResponse(**probabilities.as_response_dict()),
        source=result.source.value,
    )
