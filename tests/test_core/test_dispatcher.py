"""Tests for TranslationDispatcher."""

import pytest

from relay.core.dispatcher import TranslationDispatcher
from relay.core.language import Language
from relay.services.translation.exceptions import (
    TranslationEmptyResponseError,
    TranslationFailure,
    TranslationTimeoutError,
)


class TestBuildRequest:
    """Tests for request construction."""

    def test_spanish_targets_english(self, dispatcher) -> None:
        request = dispatcher.build_request("hola", Language.SPANISH)

        assert request.target_language is Language.ENGLISH
        assert "into English ONLY" in request.instruction

    def test_english_targets_spanish(self, dispatcher) -> None:
        request = dispatcher.build_request("hello", Language.ENGLISH)

        assert request.target_language is Language.SPANISH
        assert "into Spanish ONLY" in request.instruction

    def test_instruction_policy(self, dispatcher) -> None:
        """Test the instruction forbids commentary, greetings and quotes."""
        instruction = dispatcher.build_request("hello", Language.ENGLISH).instruction

        assert "concise, neutral, and accurate" in instruction
        assert "Do not add commentary or greetings" in instruction
        assert "no quotes" in instruction

    def test_low_temperature_from_settings(self, fake_translator, settings_factory) -> None:
        settings = settings_factory(translation_temperature=0.1, translation_max_tokens=64)
        dispatcher = TranslationDispatcher(fake_translator, settings)

        request = dispatcher.build_request("hello", Language.ENGLISH)

        assert request.temperature == 0.1
        assert request.max_tokens == 64

    def test_default_temperature(self, dispatcher) -> None:
        assert dispatcher.build_request("hello", Language.ENGLISH).temperature == 0.2

    def test_spanish_input_normalized(self, dispatcher) -> None:
        request = dispatcher.build_request("mio tienne hedga", Language.SPANISH)

        assert request.text == "mi hijo tiene cabeza"

    def test_english_input_raw(self, dispatcher) -> None:
        request = dispatcher.build_request("mio tienne hedga", Language.ENGLISH)

        assert request.text == "mio tienne hedga"


class TestTranslate:
    """Tests for TranslationDispatcher.translate()."""

    @pytest.mark.asyncio
    async def test_output_trimmed(self, dispatcher, fake_translator) -> None:
        fake_translator.response = "\n  My son has a fever.  \n"

        result = await dispatcher.translate("mio tiene fiebre", Language.SPANISH)

        assert result.text == "My son has a fever."
        assert result.source_text == "mio tiene fiebre"
        assert result.normalized_text == "mi hijo tiene fiebre"
        assert result.source_language is Language.SPANISH
        assert result.target_language is Language.ENGLISH
        assert result.model == "fake-model"
        assert result.latency_ms is not None

    @pytest.mark.asyncio
    async def test_single_call_no_retry(self, dispatcher, fake_translator) -> None:
        fake_translator.error = TranslationTimeoutError("timed out")

        with pytest.raises(TranslationTimeoutError):
            await dispatcher.translate("hello", Language.ENGLISH)

        assert len(fake_translator.requests) == 1

    @pytest.mark.asyncio
    async def test_unknown_errors_wrapped(self, dispatcher, fake_translator) -> None:
        """Test non-translation errors surface as TranslationFailure."""
        fake_translator.error = ValueError("malformed response")

        with pytest.raises(TranslationFailure) as exc_info:
            await dispatcher.translate("hello", Language.ENGLISH)

        assert isinstance(exc_info.value.__cause__, ValueError)

    @pytest.mark.asyncio
    async def test_whitespace_output_is_failure(self, dispatcher, fake_translator) -> None:
        fake_translator.response = "   "

        with pytest.raises(TranslationEmptyResponseError):
            await dispatcher.translate("hello", Language.ENGLISH)

    @pytest.mark.asyncio
    async def test_output_language_not_validated(self, dispatcher, fake_translator) -> None:
        """Test the model's output is passed through even if not in the target language."""
        fake_translator.response = "hola"

        result = await dispatcher.translate("hola", Language.SPANISH)

        assert result.text == "hola"
