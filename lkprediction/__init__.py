"""LKprediction backend: football fixtures proxy and odds-implied predictions."""

__version__ = "0.1.0"
