"""FastAPI application entry point.

Stella Relay - real-time English/Spanish interpreter for phone calls.
"""

import asyncio
import contextlib
from contextlib import asynccontextmanager

from fastapi import FastAPI

from relay import __version__
from relay.api.routes import health, metrics, webhook
from relay.config import Settings, get_settings
from relay.core.session import run_idle_sweeper, session_store
from relay.logging_config import get_logger, setup_logging

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler.

    Startup:
    - Initialize logging
    - Start the idle session sweeper (if enabled)

    Shutdown:
    - Stop the sweeper
    - Drop active call sessions
    - Close the translation client
    """
    settings: Settings = app.state.settings

    setup_logging(
        level=settings.log_level,
        log_dir=settings.log_dir,
        enable_file=settings.is_production,
    )
    logger.info(f"Relay listening for webhooks on port {settings.port}")

    sweeper: asyncio.Task | None = None
    if settings.session_idle_timeout_seconds > 0:
        sweeper = asyncio.create_task(run_idle_sweeper(session_store, settings))

    yield

    if sweeper is not None:
        sweeper.cancel()
        with contextlib.suppress(asyncio.CancelledError):
            await sweeper

    await session_store.close_all()

    if app.state.translator is not None:
        await app.state.translator.close()
        app.state.translator = None


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Raises:
        ConfigurationError: If required secrets or credentials are missing.
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="Stella Relay",
        description="Real-time English/Spanish interpreter for telephony webhooks",
        version=__version__,
        docs_url="/docs" if not settings.is_production else None,
        redoc_url="/redoc" if not settings.is_production else None,
        lifespan=lifespan,
    )
    app.state.settings = settings
    # Created on first webhook by get_translator
    app.state.translator = None

    # Health check routes
    app.include_router(health.router, tags=["Health"])

    # Telephony webhook
    app.include_router(webhook.router)

    # Metrics endpoint for Prometheus scraping
    app.include_router(metrics.router, tags=["Observability"])

    return app
