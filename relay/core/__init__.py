"""Core relay components.

- Language detection and Spanish ASR normalization
- SessionStore: per-call state keyed by call ID
- TranslationDispatcher: translates one utterance into the opposite language
- EventRouter: per-event state machine producing platform replies
"""

from relay.core.language import Language, detect_language
from relay.core.normalizer import normalize_for_language, normalize_spanish
from relay.core.session import CallSession, SessionStore

__all__ = [
    "Language",
    "detect_language",
    "normalize_spanish",
    "normalize_for_language",
    "CallSession",
    "SessionStore",
]
