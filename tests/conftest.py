"""Shared pytest fixtures for LKprediction tests."""

import pytest

from lkprediction.monitoring import configure_logging


@pytest.fixture(autouse=True)
def setup_test_logging():
    """Configure structlog for test output."""
    configure_logging("development")


def _make_market(home=2.0, draw=3.0, away=4.0, key="h2h", **extra):
    """Build a three-way market in the upstream shape."""
    outcomes = []
    if home is not None:
        outcomes.append({"name": "Home", "price": home})
    if draw is not None:
        outcomes.append({"name": "Draw", "price": draw})
    if away is not None:
        outcomes.append({"name": "Away", "price": away})
    return {"key": key, "outcomes": outcomes, **extra}


def _make_groups(*bookmakers_markets):
    """Wrap lists of markets into groups -> bookmakers -> markets.

    Each positional argument is the markets list of one bookmaker; all
    bookmakers go into a single group.
    """
    return [
        {
            "fixture": {"id": 1035045},
            "bookmakers": [
                {"id": index + 1, "name": f"Book {index + 1}", "markets": markets}
                for index, markets in enumerate(bookmakers_markets)
            ],
        }
    ]


@pytest.fixture
def make_market():
    """Factory for upstream-shaped three-way markets."""
    return _make_market


@pytest.fixture
def make_groups():
    """Factory for upstream-shaped bookmaker groups."""
    return _make_groups


@pytest.fixture
def sample_odds_payload():
    """Upstream /odds payload with one complete three-way market.

    Prices 2.0 / 3.0 / 4.0 give implied 0.5 / 0.333 / 0.25 (108.33% book),
    normalized to roughly 0.4615 / 0.3077 / 0.2308.
    """
    return {
        "get": "odds",
        "parameters": {"fixture": "1035045"},
        "errors": [],
        "results": 1,
        "response": _make_groups([_make_market(2.0, 3.0, 4.0)]),
    }


@pytest.fixture
def empty_odds_payload():
    """Upstream /odds payload for a fixture without any bookmaker odds."""
    return {
        "get": "odds",
        "parameters": {"fixture": "1035045"},
        "errors": [],
        "results": 0,
        "response": [],
    }
