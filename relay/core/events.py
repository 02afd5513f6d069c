"""Webhook event and reply models.

Inbound payload shape::

    {"type": "call:update", "data": {"callId": "...", "text": "...", "stt": {"text": "..."}}}

Unknown fields are kept so platform schema additions never break parsing.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator


class EventType:
    """Known webhook event types."""

    CALL_START = "call:start"
    CALL_UPDATE = "call:update"
    CALL_END = "call:end"


class MalformedEvent(Exception):
    """Raised when a webhook body is not a recognizable event."""

    pass


class SttPayload(BaseModel):
    """Speech-to-text block attached to call updates."""

    model_config = ConfigDict(extra="allow")

    text: str | None = None


class EventData(BaseModel):
    """Event data; which fields are present depends on the event type."""

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    call_id: str | None = Field(default=None, alias="callId")
    text: str | None = None
    stt: SttPayload | None = None

    @field_validator("call_id", mode="before")
    @classmethod
    def _coerce_call_id(cls, value: Any) -> Any:
        # Some platforms send numeric call IDs
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value

    @property
    def utterance(self) -> str:
        """Transcribed text, preferring the STT block. Empty if none."""
        stt_text = self.stt.text if self.stt else None
        return (stt_text or self.text or "").strip()


class InboundEvent(BaseModel):
    """Decoded webhook payload."""

    model_config = ConfigDict(extra="allow")

    type: str | None = None
    data: EventData = Field(default_factory=EventData)

    @field_validator("data", mode="before")
    @classmethod
    def _default_data(cls, value: Any) -> Any:
        return {} if value is None else value

    @property
    def call_id(self) -> str | None:
        return self.data.call_id


class AckResponse(BaseModel):
    """Plain acknowledgement."""

    ok: Literal[True] = True


class TextReply(BaseModel):
    """Text for the platform to speak into the call."""

    type: Literal["text"] = "text"
    text: str


class ReplyResponse(BaseModel):
    """Reply carrying a translation (or the fallback phrase)."""

    reply: TextReply


def parse_event(payload: Any) -> InboundEvent:
    """Validate a decoded JSON body.

    Raises:
        MalformedEvent: If the payload is not an event object.
    """
    if not isinstance(payload, dict):
        raise MalformedEvent(f"Expected a JSON object, got {type(payload).__name__}")
    try:
        return InboundEvent.model_validate(payload)
    except ValidationError as e:
        fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in e.errors())
        raise MalformedEvent(f"Invalid event fields: {fields}") from None
