"""Odds-implied match outcome probabilities."""

from lkprediction.odds.models import (
    DEFAULT_DISTRIBUTION,
    NormalizationResult,
    ProbabilityDistribution,
    ProbabilitySource,
)
from lkprediction.odds.normalizer import normalize

__all__ = [
    "DEFAULT_DISTRIBUTION",
    "NormalizationResult",
    "ProbabilityDistribution",
    "ProbabilitySource",
    "normalize",
]
