"""Request logging middleware."""

import time
import uuid

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from structlog.contextvars import bind_contextvars, clear_contextvars

from lkprediction.monitoring import bind_request_id

log = structlog.get_logger()

# Liveness probes are not logged
QUIET_PATHS = frozenset({"/", "/health"})


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Log every HTTP request with structured metadata.

    - Binds request_id, method, path and client_ip to contextvars so route
      and upstream-client logs carry them
    - Logs status_code and duration_ms on completion
    - Never logs the RapidAPI key (it is only sent upstream, never bound)
    """

    async def dispatch(self, request: Request, call_next) -> Response:
        clear_contextvars()

        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())

        client_ip = request.headers.get("X-Forwarded-For")
        if client_ip:
            client_ip = client_ip.split(",")[0].strip()
        elif request.client:
            client_ip = request.client.host

        bind_request_id(request_id)
        bind_contextvars(
            method=request.method,
            path=request.url.path,
            client_ip=client_ip,
        )

        if request.url.path in QUIET_PATHS:
            return await call_next(request)

        start_time = time.perf_counter()
        response = await call_next(request)
        duration_ms = int((time.perf_counter() - start_time) * 1000)

        response.headers["X-Request-ID"] = request_id
        log.info(
            "request_completed",
            status_code=response.status_code,
            duration_ms=duration_ms,
        )

        return response
