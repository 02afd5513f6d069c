"""Per-call session state.

A session only remembers the language of the caller's most recent utterance.
It is advisory: translation direction is decided per utterance, so events for
a call the store has never seen (e.g. after a restart) are still translated.
"""

from __future__ import annotations

import asyncio
import time
from dataclasses import dataclass, field, replace
from datetime import UTC, datetime
from typing import TYPE_CHECKING, Any

from relay.core.language import DEFAULT_LANGUAGE, Language
from relay.logging_config import get_logger
from relay.observability.metrics import ACTIVE_SESSIONS

if TYPE_CHECKING:
    from relay.config import Settings

logger: Any = get_logger(__name__)


@dataclass
class CallSession:
    """State for one active phone call."""

    call_id: str
    last_detected_language: Language = DEFAULT_LANGUAGE
    utterance_count: int = 0
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    # Monotonic clock, used for idle expiry
    last_activity: float = field(default_factory=time.monotonic, repr=False)


class SessionStore:
    """In-memory registry of active call sessions.

    Mutations are serialized with a lock so concurrent webhook handlers never
    corrupt the mapping. Two updates racing on the same call resolve
    last-write-wins.
    """

    def __init__(self) -> None:
        self._sessions: dict[str, CallSession] = {}
        self._lock = asyncio.Lock()

    async def create(self, call_id: str) -> CallSession:
        """Create a session, resetting any existing one for the same call."""
        async with self._lock:
            replaced = call_id in self._sessions
            session = CallSession(call_id=call_id)
            self._sessions[call_id] = session
            self._sync_gauge()

        if replaced:
            logger.info(f"Reset existing session for call {call_id}")
        else:
            logger.info(f"Created session for call {call_id} (active: {self.active_count})")
        return replace(session)

    async def get(self, call_id: str) -> CallSession | None:
        """Get a snapshot of the session, or None if the call is unknown."""
        async with self._lock:
            session = self._sessions.get(call_id)
            return replace(session) if session else None

    async def update(self, call_id: str, language: Language) -> bool:
        """Record the language of the latest utterance.

        Returns:
            False (and does nothing) if the call has no session.
        """
        async with self._lock:
            session = self._sessions.get(call_id)
            if session is None:
                return False
            session.last_detected_language = language
            session.utterance_count += 1
            session.last_activity = time.monotonic()
            return True

    async def remove(self, call_id: str) -> CallSession | None:
        """Remove a session. Unknown calls are ignored."""
        async with self._lock:
            session = self._sessions.pop(call_id, None)
            self._sync_gauge()

        if session:
            logger.info(
                f"Removed session for call {call_id} "
                f"({session.utterance_count} utterances, last language "
                f"{session.last_detected_language.value})"
            )
        return session

    async def prune_idle(self, max_idle_seconds: float, now: float | None = None) -> list[str]:
        """Evict sessions with no activity for ``max_idle_seconds``.

        Returns:
            Call IDs that were evicted.
        """
        now = time.monotonic() if now is None else now
        async with self._lock:
            expired = [
                call_id
                for call_id, session in self._sessions.items()
                if now - session.last_activity > max_idle_seconds
            ]
            for call_id in expired:
                del self._sessions[call_id]
            self._sync_gauge()

        if expired:
            logger.info(f"Evicted {len(expired)} idle session(s)")
        return expired

    async def close_all(self) -> None:
        """Drop all sessions (for shutdown)."""
        async with self._lock:
            count = len(self._sessions)
            self._sessions.clear()
            self._sync_gauge()
        if count:
            logger.info(f"Dropped {count} active session(s) on shutdown")

    @property
    def active_count(self) -> int:
        """Number of active sessions."""
        return len(self._sessions)

    def __contains__(self, call_id: object) -> bool:
        return call_id in self._sessions

    def _sync_gauge(self) -> None:
        ACTIVE_SESSIONS.set(len(self._sessions))


async def run_idle_sweeper(store: SessionStore, settings: Settings) -> None:
    """Periodically evict idle sessions until cancelled."""
    max_idle = settings.session_idle_timeout_seconds
    interval = settings.session_sweep_interval_seconds
    logger.debug(f"Idle session sweeper started (max idle {max_idle:.0f}s)")

    while True:
        await asyncio.sleep(interval)
        try:
            await store.prune_idle(max_idle)
        except Exception as e:
            logger.error(f"Idle session sweep failed: {e}")


# Global store instance
session_store = SessionStore()


def get_session_store() -> SessionStore:
    """FastAPI dependency for the process-wide session store."""
    return session_store
