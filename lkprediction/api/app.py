"""FastAPI application factory."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from lkprediction import __version__
from lkprediction.api.config import get_settings
from lkprediction.api.middleware import RequestLoggingMiddleware
from lkprediction.api.routers import health, matches, odds, predict
from lkprediction.monitoring import configure_logging, get_logger

log = get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: startup and shutdown hooks."""
    # Validate configuration at startup (crashes if RAPIDAPI_KEY is missing)
    settings = get_settings()
    configure_logging(settings.environment)
    log.info(
        "lkprediction_started",
        version=__version__,
        environment=settings.environment,
        upstream_host=settings.rapidapi_host,
    )
    yield


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title="LKprediction API",
        description="Football fixtures proxy with odds-implied match predictions",
        version=__version__,
        lifespan=lifespan,
    )

    # Middleware runs in reverse order of registration
    app.add_middleware(RequestLoggingMiddleware)

    # Wildcard origins cannot be combined with credentials
    allow_all = "*" in settings.cors_origins
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=not allow_all,
        allow_methods=["GET", "POST"],
        allow_headers=["Content-Type", "Authorization", "X-Request-ID"],
    )

    app.include_router(health.router)
    app.include_router(matches.router)
    app.include_router(odds.router)
    app.include_router(predict.router)

    return app
