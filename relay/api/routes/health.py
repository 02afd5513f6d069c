"""Health check endpoints.

Provides:
- Basic health check (GET /health)
- Detailed health check with configuration status (GET /health/detailed)
"""

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from relay import __version__
from relay.api.dependencies import get_app_settings
from relay.config import Settings
from relay.core.session import SessionStore, get_session_store

router = APIRouter()


class HealthResponse(BaseModel):
    """Basic health check response."""

    status: str


class DetailedHealthResponse(BaseModel):
    """Detailed health check response."""

    status: str
    checks: dict[str, str]
    active_sessions: int
    version: str


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Basic health check endpoint."""
    return HealthResponse(status="healthy")


@router.get("/health/detailed", response_model=DetailedHealthResponse)
async def detailed_health_check(
    settings: Settings = Depends(get_app_settings),  # noqa: B008
    store: SessionStore = Depends(get_session_store),  # noqa: B008
) -> DetailedHealthResponse:
    """Report configuration status and session count.

    Does not call the translation API; only checks credentials are present.
    """
    checks = {
        "groq": "configured" if settings.groq_api_key.get_secret_value() else "missing",
        "webhook_secret": (
            "configured" if settings.webhook_shared_secret.get_secret_value() else "missing"
        ),
        "model": settings.groq_model,
    }

    status = "healthy" if "missing" not in checks.values() else "degraded"

    return DetailedHealthResponse(
        status=status,
        checks=checks,
        active_sessions=store.active_count,
        version=__version__,
    )
