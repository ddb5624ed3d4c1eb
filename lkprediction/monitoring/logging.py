"""Structured logging configuration using structlog.

- JSON output in production mode (filterable, parseable)
- Colored console output in development mode (human-readable)
- Request IDs for tracing a single HTTP request through the proxy

Usage:
    from lkprediction.monitoring import configure_logging, get_logger

    configure_logging("production")  # or "development"

    log = get_logger()
    log.info("odds_fetched", fixture_id=1035045, group_count=1)
    log.error("upstream_request_failed", path="/odds", error=str(e))
"""

import logging
import sys

import structlog


def configure_logging(mode: str = "development", level: int = logging.INFO) -> None:
    """Configure structlog for the application.

    Args:
        mode: "production" renders JSON, anything else renders colored
            console output.
        level: Minimum stdlib log level; events below it are dropped.
    """
    shared_processors = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if mode == "production":
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer(colors=True)

    structlog.configure(
        processors=[*shared_processors, renderer],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=level,
    )
    # basicConfig is a no-op once handlers exist
    logging.getLogger().setLevel(level)


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a structured logger instance.

    Args:
        name: Logger name (defaults to caller's module name)

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)


def bind_request_id(request_id: str) -> None:
    """Bind a request ID to the current context.

    All subsequent log events in this context include the request_id field.
    """
    structlog.contextvars.bind_contextvars(request_id=request_id)
