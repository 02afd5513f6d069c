"""Spoken-language detection for transcribed utterances.

A precision-biased heuristic: Spanish is recognized by its diacritics and
punctuation, then by a small lexicon of pronouns, greetings, family terms and
symptom words. Anything else is treated as English.
"""

from __future__ import annotations

import re
from enum import Enum


class Language(str, Enum):
    """Languages the relay interprets between."""

    ENGLISH = "en"
    SPANISH = "es"

    @property
    def opposite(self) -> Language:
        """Translation target for an utterance in this language."""
        return Language.ENGLISH if self is Language.SPANISH else Language.SPANISH

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]


_DISPLAY_NAMES = {
    Language.ENGLISH: "English",
    Language.SPANISH: "Spanish",
}

DEFAULT_LANGUAGE = Language.ENGLISH

# =============================================================================
# Detection tables
# =============================================================================

SPANISH_MARKS = "ñáéíóúü¡¿"

# Regex alternatives, each matched as a whole word
SPANISH_LEXICON: tuple[str, ...] = (
    "yo",
    "usted",
    "hola",
    "buen[oa]s",
    "gracias",
    "por favor",
    "señor[ae]?",
    "niñ[oa]",
    "dolor",
    "cabeza",
    "estómago",
    "hijo",
    "hija",
)

_SPANISH_MARKS_RE = re.compile(f"[{re.escape(SPANISH_MARKS)}]", re.IGNORECASE)
_SPANISH_LEXICON_RE = re.compile(
    r"\b(?:" + "|".join(SPANISH_LEXICON) + r")\b",
    re.IGNORECASE,
)


def has_spanish_marks(text: str) -> bool:
    """True if the text contains a Spanish-specific character."""
    return _SPANISH_MARKS_RE.search(text) is not None


def has_spanish_words(text: str) -> bool:
    """True if the text contains a whole-word lexicon hit."""
    return _SPANISH_LEXICON_RE.search(text) is not None


def detect_language(text: str) -> Language:
    """Classify an utterance as Spanish or English.

    Rules, first match wins:
    1. Any Spanish diacritic or inverted punctuation -> Spanish
    2. Any lexicon word -> Spanish
    3. Otherwise -> English

    Args:
        text: Transcribed utterance

    Returns:
        Detected language (never raises, deterministic)
    """
    if not text:
        return DEFAULT_LANGUAGE

    if has_spanish_marks(text) or has_spanish_words(text):
        return Language.SPANISH

    return Language.ENGLISH
