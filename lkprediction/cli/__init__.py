"""CLI package for LKprediction."""

from lkprediction.cli.main import cli

__all__ = ["cli"]
