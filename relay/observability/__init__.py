"""Observability module for metrics."""

from relay.observability.metrics import (
    ACTIVE_SESSIONS,
    FALLBACK_REPLIES,
    SIGNATURE_REJECTIONS,
    TRANSLATION_LATENCY,
    TRANSLATIONS,
    WEBHOOK_EVENTS,
    record_event,
    record_fallback,
    record_translation,
)

__all__ = [
    "WEBHOOK_EVENTS",
    "SIGNATURE_REJECTIONS",
    "TRANSLATIONS",
    "FALLBACK_REPLIES",
    "ACTIVE_SESSIONS",
    "TRANSLATION_LATENCY",
    "record_event",
    "record_translation",
    "record_fallback",
]
