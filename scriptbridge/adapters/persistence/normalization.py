# scriptbridge/adapters/persistence/normalization.py
"""
Lookup-key normalization for phrase stores.

Every store adapter normalizes both the stored values and the incoming query
with `normalize_for_lookup`, so "Thank you!", "thank  you" and "THANK YOU"
hit the same row.

Typical usage
-------------
>>> normalize_for_lookup("  Thank   You! ")
'thank you'
"""

from __future__ import annotations

import re
import unicodedata

__all__ = [
    "normalize_whitespace",
    "standardize_punctuation",
    "normalize_for_lookup",
]

# Matches any run of Unicode whitespace characters.
_WHITESPACE_RE = re.compile(r"\s+")

# Sentence punctuation that never distinguishes two phrases.
_TRAILING_PUNCT_RE = re.compile(r"[\s.!?,;:¡¿।॥。！？、]+$")
_LEADING_PUNCT_RE = re.compile(r"^[\s¡¿]+")

_CHAR_TRANSLATION_TABLE = str.maketrans(
    {
        # Apostrophes / quotes
        "’": "'",
        "‘": "'",
        "‛": "'",
        "“": '"',
        "”": '"',
        "„": '"',
        # Dashes / hyphens
        "–": "-",
        "—": "-",
        "‐": "-",
        # Full-width space and NBSP
        "\u3000": " ",
        "\u00A0": " ",
    }
)

# Copy/paste artefacts. ZWJ/ZWNJ are kept: they change Indic glyph shaping.
_STRIP_CODEPOINTS = ("\u200B", "\u2060", "\uFEFF")


def normalize_whitespace(text: str) -> str:
    """NFC, whitespace runs collapsed to one space, trimmed."""
    if not isinstance(text, str):
        return ""
    text = unicodedata.normalize("NFC", text)
    text = _WHITESPACE_RE.sub(" ", text)
    return text.strip()


def standardize_punctuation(text: str) -> str:
    if not isinstance(text, str):
        return ""
    for ch in _STRIP_CODEPOINTS:
        if ch in text:
            text = text.replace(ch, "")
    return text.translate(_CHAR_TRANSLATION_TABLE)


def normalize_for_lookup(text: str) -> str:
    """
    Canonical key for phrase lookup.

    Steps:
      * punctuation variants standardized, invisible characters removed
      * whitespace normalized
      * leading inverted marks and trailing sentence punctuation dropped
      * casefolded
    """
    text = normalize_whitespace(standardize_punctuation(text))
    text = _LEADING_PUNCT_RE.sub("", text)
    text = _TRAILING_PUNCT_RE.sub("", text)
    return text.casefold()
