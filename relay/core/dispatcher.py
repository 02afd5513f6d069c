"""Translation dispatch for a single utterance."""

from __future__ import annotations

import time
from typing import TYPE_CHECKING, Any

from relay.core.language import Language
from relay.core.normalizer import normalize_for_language
from relay.logging_config import get_logger, preview_text
from relay.observability.metrics import record_translation
from relay.prompts.interpreter import build_interpreter_prompt
from relay.services.translation.exceptions import (
    TranslationEmptyResponseError,
    TranslationFailure,
    TranslationRateLimitError,
    TranslationTimeoutError,
)
from relay.services.translation.protocol import TranslationRequest, TranslationResult

if TYPE_CHECKING:
    from relay.config import Settings
    from relay.services.translation.protocol import Translator

logger: Any = get_logger(__name__)


def _outcome_for(error: TranslationFailure) -> str:
    if isinstance(error, TranslationTimeoutError):
        return "timeout"
    if isinstance(error, TranslationRateLimitError):
        return "rate_limited"
    return "error"


class TranslationDispatcher:
    """Translates an utterance into the opposite language.

    Builds the request (target language, interpreter instruction, low
    temperature), calls the model exactly once and trims its output. The
    language of the output is not checked.
    """

    def __init__(self, translator: Translator, settings: Settings) -> None:
        self._translator = translator
        self._temperature = settings.translation_temperature
        self._max_tokens = settings.translation_max_tokens

    def build_request(self, text: str, source_language: Language) -> TranslationRequest:
        """Build the model request for an utterance."""
        target = source_language.opposite
        return TranslationRequest(
            text=normalize_for_language(text, source_language),
            source_language=source_language,
            target_language=target,
            instruction=build_interpreter_prompt(target),
            temperature=self._temperature,
            max_tokens=self._max_tokens,
        )

    async def translate(self, text: str, source_language: Language) -> TranslationResult:
        """Translate ``text`` from ``source_language`` into its opposite.

        Raises:
            TranslationFailure: If the model call fails for any reason.
        """
        request = self.build_request(text, source_language)
        if request.text != text:
            logger.debug(
                f"Normalized ASR text: '{preview_text(text)}' -> '{preview_text(request.text)}'"
            )

        start_time = time.perf_counter()
        try:
            output = await self._translator.complete(request)
        except TranslationFailure as e:
            record_translation(source_language.value, _outcome_for(e))
            raise
        except Exception as e:
            record_translation(source_language.value, "error")
            raise TranslationFailure(f"Translation failed: {type(e).__name__}") from e

        text_out = output.strip()
        if not text_out:
            record_translation(source_language.value, "error")
            raise TranslationEmptyResponseError("Translation model returned only whitespace")

        latency_ms = (time.perf_counter() - start_time) * 1000
        record_translation(source_language.value, "success", latency_ms)

        return TranslationResult(
            source_text=text,
            normalized_text=request.text,
            source_language=source_language,
            target_language=request.target_language,
            text=text_out,
            model=self._translator.model,
            latency_ms=latency_ms,
        )
