"""FastAPI dependencies for the relay.

Settings and the translation client live on ``app.state``, so an app built
by ``create_app(settings)`` uses those settings for every request.
"""

from fastapi import Depends, Request

from relay.config import Settings
from relay.core.dispatcher import TranslationDispatcher
from relay.core.router import EventRouter
from relay.core.session import SessionStore, get_session_store
from relay.services.translation.groq import GroqTranslator
from relay.services.translation.protocol import Translator


def get_app_settings(request: Request) -> Settings:
    """Get the settings the running app was created with."""
    return request.app.state.settings


def get_translator(
    request: Request,
    settings: Settings = Depends(get_app_settings),  # noqa: B008
) -> Translator:
    """Get the app's shared translation client, creating it on first use."""
    translator = request.app.state.translator
    if translator is None:
        translator = GroqTranslator(settings=settings)
        request.app.state.translator = translator
    return translator


def get_event_router(
    store: SessionStore = Depends(get_session_store),  # noqa: B008
    translator: Translator = Depends(get_translator),  # noqa: B008
    settings: Settings = Depends(get_app_settings),  # noqa: B008
) -> EventRouter:
    """Build the event router for a request."""
    return EventRouter(
        store=store,
        dispatcher=TranslationDispatcher(translator, settings),
        settings=settings,
    )
