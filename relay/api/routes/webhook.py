"""Telephony webhook for call lifecycle and transcript events.

Handles:
- call:start: opens a call session
- call:update: translates the caller's utterance and replies with text
- call:end: closes the call session

Every request must carry an ``x-signature`` header (hex HMAC-SHA256 of the
raw body). Unsigned or mis-signed requests get 401 and are not processed.
"""

from __future__ import annotations

import json
from typing import Annotated, Any

from fastapi import APIRouter, Depends, Header, Request
from fastapi.responses import JSONResponse

from relay.api.dependencies import get_app_settings, get_event_router
from relay.config import Settings
from relay.core.router import EventRouter, ack
from relay.logging_config import get_logger
from relay.observability.metrics import SIGNATURE_REJECTIONS
from relay.security.signature import SignatureInvalid, require_valid_signature

router = APIRouter(prefix="/wildix", tags=["Webhook"])
logger: Any = get_logger(__name__)


@router.post("/webhook", response_model=None)
async def wildix_webhook(
    request: Request,
    x_signature: Annotated[str | None, Header()] = None,
    settings: Settings = Depends(get_app_settings),  # noqa: B008
    event_router: EventRouter = Depends(get_event_router),  # noqa: B008
) -> JSONResponse | dict[str, Any]:
    """Handle a signed event from the telephony platform.

    Returns:
        401 on a bad signature. Otherwise always 200 with either
        ``{"ok": true}`` or ``{"reply": {"type": "text", "text": ...}}``.
    """
    # Signature covers the exact bytes, so read them before decoding
    raw_body = await request.body()

    try:
        require_valid_signature(raw_body, x_signature, settings.webhook_secret_bytes)
    except SignatureInvalid:
        SIGNATURE_REJECTIONS.inc()
        logger.warning(
            f"Rejected webhook with {'invalid' if x_signature else 'missing'} signature "
            f"from {request.client.host if request.client else 'unknown'}"
        )
        return JSONResponse(status_code=401, content={"error": "bad signature"})

    try:
        payload = json.loads(raw_body)
    except (ValueError, RecursionError) as e:
        logger.warning(f"Ignoring webhook with undecodable JSON body: {type(e).__name__}")
        return ack()

    return await event_router.handle_payload(payload)
