"""Translation service protocol and data types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from relay.core.language import Language


@dataclass(frozen=True, slots=True)
class TranslationRequest:
    """A single utterance to translate, with its instruction policy."""

    text: str
    source_language: Language
    target_language: Language
    instruction: str
    temperature: float = 0.2
    max_tokens: int = 256


@dataclass(frozen=True, slots=True)
class TranslationResult:
    """Outcome of translating one utterance."""

    source_text: str
    normalized_text: str
    source_language: Language
    target_language: Language
    text: str
    model: str = ""
    latency_ms: float | None = None


class Translator(Protocol):
    """Protocol for translation model clients."""

    @property
    def model(self) -> str:
        """Model identifier used for completions."""
        ...

    async def complete(self, request: TranslationRequest) -> str:
        """Run the request and return the raw model text.

        Raises:
            TranslationFailure: On any model or transport error.
        """
        ...

    async def close(self) -> None:
        """Release client resources."""
        ...
