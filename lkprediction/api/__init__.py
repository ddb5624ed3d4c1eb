"""HTTP API for fixtures, odds and predictions."""
