"""Translation services (Groq)."""

from relay.services.translation.exceptions import (
    TranslationAuthenticationError,
    TranslationConnectionError,
    TranslationEmptyResponseError,
    TranslationFailure,
    TranslationRateLimitError,
    TranslationTimeoutError,
)
from relay.services.translation.groq import GroqTranslator
from relay.services.translation.protocol import (
    TranslationRequest,
    TranslationResult,
    Translator,
)

__all__ = [
    # Protocol and types
    "Translator",
    "TranslationRequest",
    "TranslationResult",
    # Implementation
    "GroqTranslator",
    # Exceptions
    "TranslationFailure",
    "TranslationTimeoutError",
    "TranslationRateLimitError",
    "TranslationConnectionError",
    "TranslationAuthenticationError",
    "TranslationEmptyResponseError",
]
