"""Monitoring module for structured logging.

Provides structlog configuration shared by the API, the upstream client and
the CLI:
- Structured JSON logging for production
- Human-readable console output for development
- Request IDs bound through contextvars
"""

from lkprediction.monitoring.logging import (
    bind_request_id,
    configure_logging,
    get_logger,
)

__all__ = [
    "configure_logging",
    "get_logger",
    "bind_request_id",
]
