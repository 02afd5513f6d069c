"""Shared pytest fixtures for relay tests."""

from __future__ import annotations

import json
from collections.abc import Callable, Generator
from typing import Any

import pytest

from relay.config import Settings
from relay.core.dispatcher import TranslationDispatcher
from relay.core.router import EventRouter
from relay.core.session import SessionStore
from relay.security.signature import compute_signature
from relay.services.translation.protocol import TranslationRequest

TEST_WEBHOOK_SECRET = "test-webhook-secret"


def build_settings(**overrides) -> Settings:
    """Create a Settings object with safe test defaults."""
    base = {
        "webhook_shared_secret": TEST_WEBHOOK_SECRET,
        "groq_api_key": "test-groq-key",
        # No background sweeper in tests
        "session_idle_timeout_seconds": 0,
    }
    base.update(overrides)
    return Settings(**base)


class FakeTranslator:
    """In-memory stand-in for the Groq translator.

    Returns ``response`` for every request, or raises ``error`` if set.
    Requests are recorded for assertions.
    """

    def __init__(self, response: str = "Hello, my son has a headache.") -> None:
        self.response = response
        self.error: BaseException | None = None
        self.requests: list[TranslationRequest] = []
        self.closed = False

    @property
    def model(self) -> str:
        return "fake-model"

    async def complete(self, request: TranslationRequest) -> str:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        return self.response

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def settings_factory() -> Callable[..., Settings]:
    """Return a factory to build Settings with overrides."""
    return build_settings


@pytest.fixture
def settings(settings_factory: Callable[..., Settings]) -> Settings:
    """Default Settings fixture."""
    return settings_factory()


@pytest.fixture
def fake_translator() -> FakeTranslator:
    return FakeTranslator()


@pytest.fixture
def session_store() -> SessionStore:
    """A fresh store per test (the global one is shared by the process)."""
    return SessionStore()


@pytest.fixture
def dispatcher(fake_translator: FakeTranslator, settings: Settings) -> TranslationDispatcher:
    return TranslationDispatcher(fake_translator, settings)


@pytest.fixture
def event_router(
    session_store: SessionStore,
    dispatcher: TranslationDispatcher,
    settings: Settings,
) -> EventRouter:
    return EventRouter(store=session_store, dispatcher=dispatcher, settings=settings)


# =============================================================================
# FastAPI Test Client Fixtures
# =============================================================================


@pytest.fixture
def sign() -> Callable[[bytes], str]:
    """Return a function that signs a raw body with the test secret."""

    def _sign(body: bytes, secret: str = TEST_WEBHOOK_SECRET) -> str:
        return compute_signature(body, secret.encode("utf-8"))

    return _sign


@pytest.fixture
def test_client(
    settings: Settings,
    fake_translator: FakeTranslator,
    session_store: SessionStore,
) -> Generator:
    """FastAPI TestClient with test settings, a fake translator and a fresh store."""
    from fastapi.testclient import TestClient

    from relay.api.dependencies import get_translator
    from relay.core.session import get_session_store
    from relay.main import create_app

    app = create_app(settings)
    app.dependency_overrides[get_translator] = lambda: fake_translator
    app.dependency_overrides[get_session_store] = lambda: session_store

    with TestClient(app) as client:
        yield client


@pytest.fixture
def post_event(test_client, sign) -> Callable[..., Any]:
    """POST a JSON event to the webhook with a valid signature."""

    def _post(event: dict[str, Any], *, signature: str | None = None):
        body = json.dumps(event).encode("utf-8")
        headers = {
            "content-type": "application/json",
            "x-signature": signature if signature is not None else sign(body),
        }
        return test_client.post("/wildix/webhook", content=body, headers=headers)

    return _post
