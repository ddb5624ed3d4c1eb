"""Value types for odds-implied match predictions.

A distribution is built fresh for every prediction and never mutated. When it
comes from bookmaker odds, the three components sum to 1.0 (within float
tolerance) before any presentation rounding.
"""

from dataclasses import dataclass
from enum import Enum


class ProbabilitySource(str, Enum):
    """Where a prediction's probabilities came from."""

    BOOKMAKER_ODDS = "bookmaker_odds"
    HEURISTIC_DEFAULT = "heuristic_default"


@dataclass(frozen=True)
class ProbabilityDistribution:
    """Home win / draw / away win probabilities for one fixture.

    Attributes:
        home: Probability of a home win
        draw: Probability of a draw
        away: Probability of an away win
    """

    home: float
    draw: float
    away: float

    @property
    def total(self) -> float:
        return self.home + self.draw + self.away

    def rounded(self, ndigits: int = 3) -> "ProbabilityDistribution":
        """Return a copy with every component rounded for display."""
        return ProbabilityDistribution(
            home=round(self.home, ndigits),
            draw=round(self.draw, ndigits),
            away=round(self.away, ndigits),
        )

    def as_response_dict(self) -> dict[str, float]:
        return {
            "home_win": self.home,
            "draw": self.draw,
            "away_win": self.away,
        }


# Used when no usable three-way market is found
DEFAULT_DISTRIBUTION = ProbabilityDistribution(home=0.45, draw=0.25, away=0.30)


@dataclass(frozen=True)
class NormalizationResult:
    """Distribution plus the source it was derived from.

    Attributes:
        probabilities: The home/draw/away distribution
        source: Whether it came from bookmaker odds or the default
        prices: Decimal (home, draw, away) prices used, None for the default
    """

    probabilities: ProbabilityDistribution
    source: ProbabilitySource
    prices: tuple[float, float, float] | None = None

    @property
    def from_bookmaker(self) -> bool:
        return self.source is ProbabilitySource.BOOKMAKER_ODDS
