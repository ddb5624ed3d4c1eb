"""Pydantic v2 request and response models for the API."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


# --- Health ---

class StatusResponse(BaseModel):
    status: str = "ok"
    message: str


class HealthResponse(BaseModel):
    status: str = "ok"
    version: str
    timestamp: str


# --- Prediction ---

class PredictRequest(BaseModel):
    # Optional so a missing id can be answered with 400 instead of 422
    model_config = ConfigDict(populate_by_name=True)

    fixture_id: int | str | None = Field(default=None, alias="fixtureId")


class ProbabilitiesResponse(BaseModel):
    home_win: float = Field(..., ge=0, le=1)
    draw: float = Field(..., ge=0, le=1)
    away_win: float = Field(..., ge=0, le=1)


class PredictResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    fixture_id: int | str = Field(..., alias="fixtureId")
    probabilities: ProbabilitiesResponse
    source: Literal["bookmaker_odds", "heuristic_default"]
