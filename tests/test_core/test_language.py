"""Tests for spoken-language detection."""

import pytest

from relay.core.language import (
    SPANISH_MARKS,
    Language,
    detect_language,
    has_spanish_marks,
    has_spanish_words,
)


class TestLanguage:
    """Tests for the Language enum."""

    def test_values(self) -> None:
        assert Language.ENGLISH.value == "en"
        assert Language.SPANISH.value == "es"

    def test_opposite(self) -> None:
        assert Language.SPANISH.opposite is Language.ENGLISH
        assert Language.ENGLISH.opposite is Language.SPANISH

    def test_display_name(self) -> None:
        assert Language.ENGLISH.display_name == "English"
        assert Language.SPANISH.display_name == "Spanish"


class TestDetectLanguage:
    """Tests for detect_language()."""

    @pytest.mark.parametrize("mark", list(SPANISH_MARKS))
    def test_any_diacritic_is_spanish(self, mark: str) -> None:
        """Test a single Spanish mark wins regardless of surrounding English."""
        assert detect_language(f"the patient said {mark} okay") is Language.SPANISH

    def test_uppercase_diacritic_is_spanish(self) -> None:
        assert detect_language("ESPAÑA") is Language.SPANISH

    @pytest.mark.parametrize(
        "text",
        [
            "hola",
            "Buenos dias",
            "muchas GRACIAS",
            "por favor ayudeme",
            "senor, yo tengo fiebre",
            "mi hija tiene dolor",
            "usted puede venir",
        ],
    )
    def test_lexicon_words_are_spanish(self, text: str) -> None:
        """Test lexicon hits classify as Spanish without diacritics."""
        assert detect_language(text) is Language.SPANISH

    @pytest.mark.parametrize(
        "text",
        [
            "Hello, my son has a headache",
            "Where does it hurt?",
            "Please take two tablets every morning",
            "Thank you doctor",
        ],
    )
    def test_plain_english(self, text: str) -> None:
        assert detect_language(text) is Language.ENGLISH

    def test_lexicon_requires_whole_word(self) -> None:
        """Test lexicon words inside longer English words do not match."""
        assert detect_language("your yoga dolorous holiday") is Language.ENGLISH

    def test_bueno_singular_not_in_lexicon(self) -> None:
        """Test only the plural greeting forms (buenos/buenas) are lexicon hits."""
        assert has_spanish_words("buenos") is True
        assert has_spanish_words("bueno") is False

    def test_empty_text_is_english(self) -> None:
        assert detect_language("") is Language.ENGLISH

    def test_scenario_sentence(self) -> None:
        assert detect_language("Hola, mi hijo tiene dolor de cabeza") is Language.SPANISH

    def test_deterministic(self) -> None:
        text = "Gracias, doctor"
        assert {detect_language(text) for _ in range(10)} == {Language.SPANISH}

    def test_has_spanish_marks(self) -> None:
        assert has_spanish_marks("¿qué?") is True
        assert has_spanish_marks("what?") is False
