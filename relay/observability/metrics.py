"""Prometheus metrics for the interpreter relay.

Provides metrics for monitoring webhook traffic, translation quality of
service, and session counts.
"""

from __future__ import annotations

from prometheus_client import Counter, Gauge, Histogram, generate_latest
from prometheus_client.exposition import CONTENT_TYPE_LATEST

# =============================================================================
# Counters
# =============================================================================

WEBHOOK_EVENTS = Counter(
    "relay_webhook_events_total",
    "Verified webhook events by type",
    ["event_type"],
)

SIGNATURE_REJECTIONS = Counter(
    "relay_signature_rejections_total",
    "Webhook requests rejected for a bad or missing signature",
)

TRANSLATIONS = Counter(
    "relay_translations_total",
    "Translation attempts by source language and outcome",
    ["source_language", "outcome"],
)

FALLBACK_REPLIES = Counter(
    "relay_fallback_replies_total",
    "Fallback replies sent instead of a translation",
    ["reason"],
)

# =============================================================================
# Gauges
# =============================================================================

ACTIVE_SESSIONS = Gauge(
    "relay_active_sessions",
    "Currently tracked call sessions",
)

# =============================================================================
# Histograms
# =============================================================================

TRANSLATION_LATENCY = Histogram(
    "relay_translation_latency_seconds",
    "Round-trip latency of the translation model",
    buckets=[0.1, 0.25, 0.5, 0.75, 1.0, 1.5, 2.0, 3.0, 5.0, 8.0],
)

# =============================================================================
# Helper Functions
# =============================================================================

# Event types outside this set are counted as "unknown" to bound label values
_KNOWN_EVENT_TYPES = frozenset({"call:start", "call:update", "call:end"})


def record_event(event_type: str | None) -> None:
    """Count a verified webhook event."""
    label = event_type if event_type in _KNOWN_EVENT_TYPES else "unknown"
    WEBHOOK_EVENTS.labels(event_type=label).inc()


def record_translation(
    source_language: str,
    outcome: str,
    latency_ms: float | None = None,
) -> None:
    """Record a translation attempt.

    Args:
        source_language: Detected language tag (en, es)
        outcome: success, timeout, rate_limited, error
        latency_ms: Model latency in milliseconds (successful calls only)
    """
    TRANSLATIONS.labels(source_language=source_language, outcome=outcome).inc()

    if latency_ms is not None and latency_ms > 0:
        TRANSLATION_LATENCY.observe(latency_ms / 1000)


def record_fallback(reason: str) -> None:
    """Record a fallback reply sent to the platform."""
    FALLBACK_REPLIES.labels(reason=reason).inc()


def get_metrics() -> bytes:
    """Generate Prometheus metrics output.

    Returns:
        Metrics in Prometheus text exposition format.
    """
    return generate_latest()


def get_content_type() -> str:
    """Get the content type for Prometheus metrics."""
    return CONTENT_TYPE_LATEST
