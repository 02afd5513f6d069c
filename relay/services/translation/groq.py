"""Groq-backed translation client."""

from __future__ import annotations

import asyncio
import time
from typing import Any

import groq
from groq import AsyncGroq

from relay.config import Settings, get_settings
from relay.logging_config import get_logger
from relay.services.translation.exceptions import (
    TranslationAuthenticationError,
    TranslationConnectionError,
    TranslationEmptyResponseError,
    TranslationFailure,
    TranslationRateLimitError,
    TranslationTimeoutError,
)
from relay.services.translation.protocol import TranslationRequest

logger: Any = get_logger(__name__)


class GroqTranslator:
    """Translation client using Groq chat completions.

    Retries are disabled: a failed call falls back to a spoken holding
    reply instead of keeping the caller waiting.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        model: str | None = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._model = model or self._settings.groq_model
        self._timeout = self._settings.translation_timeout_seconds
        self._client: AsyncGroq | None = None

    @property
    def model(self) -> str:
        return self._model

    @property
    def client(self) -> AsyncGroq:
        """Lazy initialization of AsyncGroq client."""
        if self._client is None:
            self._client = AsyncGroq(
                api_key=self._settings.groq_api_key.get_secret_value(),
                timeout=self._timeout,
                max_retries=0,
            )
        return self._client

    async def complete(self, request: TranslationRequest) -> str:
        """Translate one utterance.

        Args:
            request: Text, instruction and decoding settings

        Returns:
            Raw model output (untrimmed)

        Raises:
            TranslationTimeoutError: When the call exceeds the timeout
            TranslationRateLimitError: When rate limit exceeded
            TranslationConnectionError: When API unreachable
            TranslationAuthenticationError: When API key invalid
            TranslationEmptyResponseError: When the model returns no text
            TranslationFailure: For other API errors
        """
        messages = self._format_messages(request)
        start_time = time.perf_counter()

        try:
            response = await asyncio.wait_for(
                self.client.chat.completions.create(
                    messages=messages,  # type: ignore[arg-type]
                    model=self._model,
                    temperature=request.temperature,
                    max_tokens=request.max_tokens,
                ),
                timeout=self._timeout,
            )

        except (asyncio.TimeoutError, groq.APITimeoutError) as e:
            logger.warning(f"Groq translation timed out after {self._timeout:.1f}s")
            raise TranslationTimeoutError(
                f"Translation timed out after {self._timeout:.1f}s"
            ) from e

        except groq.RateLimitError as e:
            logger.warning(f"Groq rate limit hit: {e}")
            raise TranslationRateLimitError(
                "Rate limit exceeded",
                retry_after=self._extract_retry_after(e),
            ) from e

        except groq.APIConnectionError as e:
            logger.error(f"Groq connection error: {e.__cause__}")
            raise TranslationConnectionError("Failed to connect to Groq API") from e

        except groq.AuthenticationError as e:
            logger.error("Groq authentication failed")
            raise TranslationAuthenticationError("Invalid Groq API key") from e

        except groq.APIStatusError as e:
            logger.error(f"Groq API error: {e.status_code} - {e.message}")
            raise TranslationFailure(f"Groq API error: {e.status_code}") from e

        elapsed_ms = (time.perf_counter() - start_time) * 1000
        logger.debug(f"Groq translation latency: {elapsed_ms:.1f}ms")

        if not response.choices or not response.choices[0].message.content:
            raise TranslationEmptyResponseError("Empty response from Groq translation")

        return response.choices[0].message.content

    def _format_messages(self, request: TranslationRequest) -> list[dict]:
        """Format the instruction and utterance for the Groq API."""
        return [
            {"role": "system", "content": request.instruction},
            {"role": "user", "content": request.text},
        ]

    def _extract_retry_after(self, error: groq.RateLimitError) -> float:
        """Extract retry-after from rate limit error."""
        if hasattr(error, "response") and error.response:
            retry_after = error.response.headers.get("retry-after")
            if retry_after:
                try:
                    return float(retry_after)
                except ValueError:
                    pass
        return 60.0

    async def close(self) -> None:
        """Close the client connection."""
        if self._client:
            await self._client.close()
            self._client = None
