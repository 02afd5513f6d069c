"""Corrections for known Spanish speech-to-text mistakes.

The STT engine regularly mishears a handful of words that matter in a
clinical call ("my son", "has", "head"). Each rule is a whole-word,
case-insensitive rewrite; rules run in the order listed and every rule
rewrites all of its matches.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from relay.core.language import Language


@dataclass(frozen=True, slots=True)
class RewriteRule:
    """Replace any of ``variants`` (whole words) with ``replacement``."""

    variants: tuple[str, ...]
    replacement: str

    @property
    def pattern(self) -> re.Pattern[str]:
        return _compile(self.variants)


def _compile(variants: tuple[str, ...]) -> re.Pattern[str]:
    return re.compile(
        "|".join(rf"\b{re.escape(v)}\b" for v in variants),
        re.IGNORECASE,
    )


# Order matters: later rules see the output of earlier ones
SPANISH_ASR_CORRECTIONS: tuple[RewriteRule, ...] = (
    RewriteRule(("mio", "mi o", "miyo"), "mi hijo"),
    RewriteRule(("mia", "mi a", "mija"), "mi hija"),
    RewriteRule(("mami", "mamy"), "mamá"),
    RewriteRule(("papi", "papy"), "papá"),
    RewriteRule(("tienne", "tienee"), "tiene"),
    RewriteRule(("hedga",), "cabeza"),
)

_COMPILED_CORRECTIONS = tuple(
    (rule.pattern, rule.replacement) for rule in SPANISH_ASR_CORRECTIONS
)


def normalize_spanish(text: str) -> str:
    """Apply every Spanish ASR correction to the text, in order."""
    for pattern, replacement in _COMPILED_CORRECTIONS:
        text = pattern.sub(replacement, text)
    return text


def normalize_for_language(text: str, language: Language) -> str:
    """Normalize only Spanish utterances; other text passes through untouched."""
    if language is not Language.SPANISH:
        return text
    return normalize_spanish(text)
