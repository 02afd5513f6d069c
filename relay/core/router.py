"""Webhook event router.

Dispatches verified events by type:

| Event                   | Action                                     | Reply         |
|-------------------------|--------------------------------------------|---------------|
| call:start              | create (or reset) the call session         | {"ok": true}  |
| call:end                | remove the call session                    | {"ok": true}  |
| call:update, no text    | nothing                                    | {"ok": true}  |
| call:update, text       | detect, normalize, translate, record lang  | text reply    |
| anything else           | nothing                                    | {"ok": true}  |

A call:update is never left unanswered: any failure while handling it turns
into the fallback reply so the call keeps moving.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from relay.core.events import (
    AckResponse,
    EventType,
    InboundEvent,
    MalformedEvent,
    ReplyResponse,
    TextReply,
    parse_event,
)
from relay.core.language import detect_language
from relay.logging_config import get_logger, preview_text
from relay.observability.metrics import record_event, record_fallback
from relay.services.translation.exceptions import TranslationFailure

if TYPE_CHECKING:
    from relay.config import Settings
    from relay.core.dispatcher import TranslationDispatcher
    from relay.core.session import SessionStore

logger: Any = get_logger(__name__)


def ack() -> dict[str, Any]:
    return AckResponse().model_dump()


def text_reply(text: str) -> dict[str, Any]:
    return ReplyResponse(reply=TextReply(text=text)).model_dump()


class EventRouter:
    """Runs the per-call state machine over inbound events."""

    def __init__(
        self,
        store: SessionStore,
        dispatcher: TranslationDispatcher,
        settings: Settings,
    ) -> None:
        self._store = store
        self._dispatcher = dispatcher
        self._fallback_text = settings.fallback_reply_text

    async def handle_payload(self, payload: Any) -> dict[str, Any]:
        """Validate a decoded body and handle it.

        Malformed payloads are acknowledged so the platform does not retry.
        """
        try:
            event = parse_event(payload)
        except MalformedEvent as e:
            logger.warning(f"Ignoring malformed webhook event: {e}")
            return ack()
        return await self.handle(event)

    async def handle(self, event: InboundEvent) -> dict[str, Any]:
        """Handle one event and build the reply. Never raises."""
        record_event(event.type)

        if event.type == EventType.CALL_UPDATE:
            return await self._on_update(event)

        try:
            if event.type == EventType.CALL_START:
                await self._on_start(event)
            elif event.type == EventType.CALL_END:
                await self._on_end(event)
            else:
                logger.debug(f"Acknowledging unhandled event type: {event.type!r}")
        except Exception as e:
            logger.error(
                f"Error handling {event.type} for call {event.call_id}: "
                f"{type(e).__name__}: {e}"
            )
        return ack()

    async def _on_start(self, event: InboundEvent) -> None:
        if not event.call_id:
            logger.warning("call:start without callId, ignoring")
            return
        await self._store.create(event.call_id)

    async def _on_end(self, event: InboundEvent) -> None:
        if not event.call_id:
            logger.warning("call:end without callId, ignoring")
            return
        await self._store.remove(event.call_id)

    async def _on_update(self, event: InboundEvent) -> dict[str, Any]:
        call_id = event.call_id
        text = event.data.utterance
        if not text:
            return ack()

        try:
            language = detect_language(text)
            logger.debug(
                f"Call {call_id}: detected {language.value} for '{preview_text(text)}'"
            )

            if call_id and not await self._store.update(call_id, language):
                logger.debug(f"Call {call_id} has no session, translating without one")

            result = await self._dispatcher.translate(text, language)

        except TranslationFailure as e:
            logger.error(f"Translation failed for call {call_id}: {type(e).__name__}: {e}")
            record_fallback("translation_failure")
            return text_reply(self._fallback_text)

        except Exception as e:
            logger.opt(exception=e).error(
                f"Unexpected error handling update for call {call_id}: {type(e).__name__}"
            )
            record_fallback("internal_error")
            return text_reply(self._fallback_text)

        logger.info(
            f"Call {call_id}: translated {result.source_language.value} -> "
            f"{result.target_language.value} in {result.latency_ms or 0.0:.0f}ms"
        )
        return text_reply(result.text)
