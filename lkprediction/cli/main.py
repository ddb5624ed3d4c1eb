"""Typer CLI entry point for LKprediction.

- lkprediction serve
- lkprediction predict 1035045
- lkprediction version
"""

import asyncio
import logging
import os

from dotenv import load_dotenv

# Load .env file before anything else
load_dotenv()

import typer
from rich.console import Console
from rich.table import Table

from lkprediction import __version__
from lkprediction.monitoring import configure_logging
from lkprediction.odds import NormalizationResult, normalize
from lkprediction.upstream import FootballAPIClient, UpstreamAPIError, extract_response_items

cli = typer.Typer(
    name="lkprediction",
    help="""LKprediction - football fixtures proxy and odds-implied predictions.

QUICK START:
  lkprediction serve                 # Run the HTTP API
  lkprediction predict 1035045       # Probabilities for one fixture

DATA SOURCE:
  API-Football (RapidAPI). Set RAPIDAPI_KEY in the environment or .env.
""",
    add_completion=False,
)

# Disable colors if NO_COLOR env var is set (standard convention)
console = Console(no_color=os.getenv("NO_COLOR") is not None)


@cli.command()
def serve(
    reload: bool = typer.Option(False, "--reload", help="Restart on code changes (development only)"),
):
    """Run the HTTP API with uvicorn (host/port from HOST and PORT)."""
    from lkprediction.api.server import main

    main(reload=reload)


@cli.command()
def predict(
    fixture_id: str = typer.Argument(..., help="Provider fixture id (e.g. 1035045)"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show INFO-level upstream request logs (otherwise only warnings)"),
):
    """Print home/draw/away probabilities for a fixture.

    Uses the first complete three-way bookmaker market for the fixture; falls
    back to a fixed 45/25/30 split when the provider has no usable odds.
    """
    configure_logging(
        "development" if verbose else "production",
        level=logging.INFO if verbose else logging.WARNING,
    )

    try:
        client = FootballAPIClient()
        payload = asyncio.run(client.get_odds_for_fixture(fixture_id))
    except (ValueError, UpstreamAPIError) as e:
        console.print(f"[bold red]Error:[/bold red] {e}", style="red")
        raise typer.Exit(code=1)

    result = normalize(extract_response_items(payload))
    _display_prediction(fixture_id, result)


@cli.command()
def version():
    """Show version and configuration info."""
    console.print(f"[bold cyan]LKprediction[/bold cyan] v{__version__}")
    console.print()
    console.print("[bold]Configuration:[/bold]")
    console.print(f"  RapidAPI: {'✓ configured' if os.getenv('RAPIDAPI_KEY') else '✗ missing RAPIDAPI_KEY'}")
    console.print(f"  Host: {os.getenv('RAPIDAPI_HOST', 'api-football-v1.p.rapidapi.com')}")


def _display_prediction(fixture_id: str, result: NormalizationResult) -> None:
    probabilities = result.probabilities.rounded(3)

    table = Table(title=f"Fixture {fixture_id}")
    table.add_column("Outcome", style="cyan")
    table.add_column("Probability", justify="right")
    if result.prices is not None:
        table.add_column("Decimal odds", justify="right")

    rows = [
        ("Home win", probabilities.home),
        ("Draw", probabilities.draw),
        ("Away win", probabilities.away),
    ]
    for index, (label, probability) in enumerate(rows):
        cells = [label, f"{probability:.1%}"]
        if result.prices is not None:
            cells.append(f"{result.prices[index]:.2f}")
        table.add_row(*cells)

    console.print(table)
    console.print(f"Source: [bold]{result.source.value}[/bold]")


if __name__ == "__main__":
    cli()
