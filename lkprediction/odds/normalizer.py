"""Convert bookmaker three-way (1X2) odds into match outcome probabilities.

Uses the margin-proportional method:
1. Convert each decimal price to an implied probability (1 / price)
2. Sum the implied probabilities (> 1.0 because of the bookmaker overround)
3. Divide each implied probability by the sum so the result sums to 1.0

Example:
    Home 2.0 / Draw 3.0 / Away 4.0
    - Implied: [0.5, 0.3333, 0.25] = 108.33% (8.33% overround)
    - Normalized: [0.4615, 0.3077, 0.2308]

The upstream payload is walked as groups -> bookmakers -> markets -> outcomes.
The first complete three-way market wins; there is no averaging or best-price
selection across bookmakers. Malformed or missing data never raises, it falls
back to a fixed default distribution.
"""

import math
import re
from collections.abc import Iterator, Mapping, Sequence
from typing import Any

from lkprediction.odds.models import (
    DEFAULT_DISTRIBUTION,
    NormalizationResult,
    ProbabilityDistribution,
    ProbabilitySource,
)

# Market vocabulary known from the upstream API. Exact, case-sensitive.
THREE_WAY_MARKET_LABELS = frozenset({"3-way"})
THREE_WAY_MARKET_KEYS = frozenset({"3way", "h2h"})

HOME_PATTERN = re.compile(r"home", re.IGNORECASE)
DRAW_PATTERN = re.compile(r"draw|tie", re.IGNORECASE)
AWAY_PATTERN = re.compile(r"away", re.IGNORECASE)


def _children(container: Any, key: str) -> Sequence[Any]:
    """Return the list stored under ``key``, or an empty tuple."""
    if not isinstance(container, Mapping):
        return ()
    value = container.get(key)
    if isinstance(value, (list, tuple)):
        return value
    return ()


def _mappings(items: Any) -> Iterator[Mapping[str, Any]]:
    if not isinstance(items, (list, tuple)):
        return
    for item in items:
        if isinstance(item, Mapping):
            yield item


def parse_decimal_price(value: Any) -> float | None:
    """Parse a decimal price, returning None unless it is a finite number > 0.

    Upstream prices arrive as numbers or numeric strings ("2.10"). Zero,
    empty strings, booleans, None and anything non-numeric count as absent.

    Examples:
        >>> parse_decimal_price("2.10")
        2.1
        >>> parse_decimal_price(0) is None
        True
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        price = float(value)
    elif isinstance(value, str):
        try:
            price = float(value.strip())
        except ValueError:
            return None
    else:
        return None

    if not math.isfinite(price) or price <= 0:
        return None
    return price


def is_three_way_market(market: Mapping[str, Any]) -> bool:
    """Check whether a market is a home/draw/away (1X2) market."""
    return (
        market.get("market") in THREE_WAY_MARKET_LABELS
        or market.get("key") in THREE_WAY_MARKET_KEYS
    )


def _first_matching_price(
    outcomes: Sequence[Mapping[str, Any]], pattern: re.Pattern[str]
) -> float | None:
    # Only the first name match counts, even when its price is unusable.
    for outcome in outcomes:
        name = outcome.get("name")
        if isinstance(name, str) and pattern.search(name):
            return parse_decimal_price(outcome.get("price"))
    return None


def extract_three_way_prices(outcomes: Any) -> tuple[float, float, float] | None:
    """Pick the home, draw and away prices out of a market's outcomes.

    Each side is looked up independently (home, then draw/tie, then away)
    by case-insensitive substring match on the outcome name.

    Returns:
        (home, draw, away) decimal prices, or None if any side is missing or
        has an unusable price.
    """
    entries = list(_mappings(outcomes))
    home = _first_matching_price(entries, HOME_PATTERN)
    draw = _first_matching_price(entries, DRAW_PATTERN)
    away = _first_matching_price(entries, AWAY_PATTERN)
    if home is None or draw is None or away is None:
        return None
    return home, draw, away


def implied_probability(decimal_odds: float) -> float:
    """Convert decimal odds to implied probability.

    Examples:
        >>> implied_probability(2.0)
        0.5
        >>> round(implied_probability(4.0), 3)
        0.25
    """
    return 1 / decimal_odds


def get_overround(home: float, draw: float, away: float) -> float:
    """Bookmaker margin percentage for a three-way market.

    Example:
        >>> round(get_overround(2.0, 3.0, 4.0), 2)
        8.33
    """
    total = sum(implied_probability(p) for p in (home, draw, away))
    return (total - 1.0) * 100


def normalize_prices(home: float, draw: float, away: float) -> ProbabilityDistribution:
    """Remove the overround proportionally from three decimal prices.

    Prices below 1.0 are accepted as-is; the result is still forced into
    [0, 1] relative to the other two outcomes. Each side is computed from
    price ratios, 1 / (1 + p/q + p/r), which equals (1/p) / (1/p + 1/q + 1/r)
    but cannot overflow to inf/inf for tiny positive prices.

    Args:
        home: Decimal price for a home win (> 0)
        draw: Decimal price for a draw (> 0)
        away: Decimal price for an away win (> 0)

    Returns:
        Distribution summing to 1.0
    """
    return ProbabilityDistribution(
        home=1 / (1 + home / draw + home / away),
        draw=1 / (1 + draw / home + draw / away),
        away=1 / (1 + away / home + away / draw),
    )


def find_three_way_prices(bookmaker_groups: Any) -> tuple[float, float, float] | None:
    """Return the prices of the first complete three-way market, in input order."""
    for group in _mappings(bookmaker_groups):
        for bookmaker in _mappings(_children(group, "bookmakers")):
            for market in _mappings(_children(bookmaker, "markets")):
                if not is_three_way_market(market):
                    continue
                prices = extract_three_way_prices(_children(market, "outcomes"))
                if prices is not None:
                    return prices
    return None


def normalize(
    bookmaker_groups: Any,
    fallback: ProbabilityDistribution = DEFAULT_DISTRIBUTION,
) -> NormalizationResult:
    """Turn a raw upstream odds payload into a probability distribution.

    Args:
        bookmaker_groups: The upstream ``response`` list. Each entry may hold
            ``bookmakers``, each bookmaker ``markets``, each market
            ``outcomes`` with ``name`` and ``price``. Any level may be absent.
        fallback: Distribution returned when no usable market exists.

    Returns:
        NormalizationResult with source ``bookmaker_odds`` when a complete
        three-way market was found, ``heuristic_default`` otherwise.

    Example:
        >>> groups = [{"bookmakers": [{"markets": [{"key": "h2h", "outcomes": [
        ...     {"name": "Home", "price": 2.0},
        ...     {"name": "Draw", "price": 3.0},
        ...     {"name": "Away", "price": 4.0},
        ... ]}]}]}]
        >>> normalize(groups).probabilities.rounded()
        ProbabilityDistribution(home=0.462, draw=0.308, away=0.231)
    """
    prices = find_three_way_prices(bookmaker_groups) if bookmaker_groups else None
    if prices is None:
        return NormalizationResult(
            probabilities=fallback,
            source=ProbabilitySource.HEURISTIC_DEFAULT,
        )

    return NormalizationResult(
        probabilities=normalize_prices(*prices),
        source=ProbabilitySource.BOOKMAKER_ODDS,
        prices=prices,
    )
