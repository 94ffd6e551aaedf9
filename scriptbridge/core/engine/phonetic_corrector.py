# scriptbridge/core/engine/phonetic_corrector.py
"""
Phonetic pre-correction for Latin-typed chat input.

Three passes, in order:
  1. Known misspellings for the target language ("kaisey" -> "kaise").
  2. Common chat spellings of a few phrases ("helo" -> "hello", "thankyu"
     -> "thank you"). Short spellings must match exactly; longer ones
     tolerate one edit.
  3. Runs of three or more identical letters squeezed to two ("sooo" -> "soo").

The corrector is a best-effort cleanup: it never raises and returns the
input unchanged when nothing applies.
"""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Dict, List, Optional, Pattern, Tuple

from scriptbridge.core.engine.language_resolver import normalize_language

LANGUAGE_CORRECTIONS: Dict[str, Dict[str, str]] = {
    "hindi": {
        "kaisey": "kaise",
        "kaisay": "kaise",
        "thik": "theek",
        "tek": "theek",
        "kya hal": "kya haal",
        "achha": "accha",
        "acha": "accha",
        "bahot": "bahut",
        "bohot": "bahut",
    },
    "telugu": {
        "bagunnava": "baagunnava",
        "bagunnara": "baagunnara",
        "elunnaru": "ela unnaru",
        "chala": "chaala",
    },
    "tamil": {
        "vanakam": "vanakkam",
        "epadi": "eppadi",
        "irukkireenga": "irukkeenga",
    },
    "bengali": {
        "bhalo": "bhaalo",
        "achi": "aachi",
    },
    "marathi": {
        "kasa": "kaasa",
        "mee": "mi",
    },
    "gujarati": {
        "kem cho": "kem chho",
        "kemcho": "kem chho",
        "saru": "saaru",
    },
    "kannada": {
        "nanu": "naanu",
    },
    "malayalam": {
        "sugham": "sukham",
        "nanni": "nandri",
        "entha": "enthaa",
    },
    "punjabi": {
        "kiwe": "kive",
        "satsriakal": "sat sri akal",
    },
    "odia": {
        "bhala": "bhaala",
    },
}

# Canonical spelling -> common chat variants of it.
COMMON_PHRASE_PATTERNS: Dict[str, List[str]] = {
    "how are you": ["howareyou", "howru", "howreyou", "howareu", "hru"],
    "hello": ["helo", "hllo", "heelo", "hallo", "hellow"],
    "thank you": ["thanku", "thnku", "thankyu", "thanx", "thnx", "tnx", "thx"],
    "good": ["gud", "goood", "gooood"],
    "morning": ["mornin", "mornng", "morng"],
    "night": ["nyt", "nght", "nigt"],
    "please": ["plz", "pls", "plis", "pleez"],
    "sorry": ["sry", "sorri", "sowwy"],
    "welcome": ["welcom", "wlcm", "welcum"],
}

_CANONICAL_FORMS = frozenset(c.replace(" ", "") for c in COMMON_PHRASE_PATTERNS)

MIN_FUZZY_TOKEN_LENGTH = 3
MAX_FUZZY_DISTANCE = 1
MIN_FUZZY_REFERENCE_LENGTH = 6
_LENGTH_GAP_CUTOFF = 3

_TOKEN_RE = re.compile(r"(\s+)")
_NON_LETTERS_RE = re.compile(r"[^a-z]")
_REPEATED_RE = re.compile(r"([a-z])\1{2,}", re.IGNORECASE)


def edit_distance(a: str, b: str) -> int:
    """
    Levenshtein distance with adjacent transpositions counted as one edit
    (optimal string alignment). Strings whose lengths differ by more than
    three are not compared: the length difference is returned instead.
    """
    gap = abs(len(a) - len(b))
    if gap > _LENGTH_GAP_CUTOFF:
        return gap
    if not a:
        return len(b)
    if not b:
        return len(a)

    rows = len(a) + 1
    cols = len(b) + 1
    d = [[0] * cols for _ in range(rows)]
    for i in range(rows):
        d[i][0] = i
    for j in range(cols):
        d[0][j] = j

    for i in range(1, rows):
        for j in range(1, cols):
            cost = 0 if a[i - 1] == b[j - 1] else 1
            d[i][j] = min(
                d[i - 1][j] + 1,
                d[i][j - 1] + 1,
                d[i - 1][j - 1] + cost,
            )
            if i > 1 and j > 1 and a[i - 1] == b[j - 2] and a[i - 2] == b[j - 1]:
                d[i][j] = min(d[i][j], d[i - 2][j - 2] + 1)
    return d[-1][-1]


@lru_cache(maxsize=None)
def _correction_patterns(language: str) -> Tuple[Tuple[Pattern[str], str], ...]:
    table = LANGUAGE_CORRECTIONS.get(language, {})
    # Longer misspellings first so "kya hal" is tried before any single word.
    ordered = sorted(table.items(), key=lambda kv: len(kv[0]), reverse=True)
    return tuple(
        (re.compile(r"\b" + re.escape(wrong) + r"\b", re.IGNORECASE), right)
        for wrong, right in ordered
    )


def _apply_language_corrections(text: str, language: str) -> str:
    for pattern, right in _correction_patterns(language):
        text = pattern.sub(right, text)
    return text


def _fuzzy_canonical(token: str) -> Optional[str]:
    normalized = _NON_LETTERS_RE.sub("", token.lower())
    if len(normalized) < MIN_FUZZY_TOKEN_LENGTH or normalized in _CANONICAL_FORMS:
        return None
    for canonical, variants in COMMON_PHRASE_PATTERNS.items():
        squeezed = canonical.replace(" ", "")
        # Already right, or a word still being typed / part of the phrase.
        if squeezed.startswith(normalized):
            continue
        for reference in (squeezed, *variants):
            if normalized == reference:
                return canonical
            # Short references only match exactly: "thi" must not become "thx".
            if (
                len(reference) >= MIN_FUZZY_REFERENCE_LENGTH
                and edit_distance(normalized, reference) <= MAX_FUZZY_DISTANCE
            ):
                return canonical
    return None


def _apply_fuzzy_matching(text: str) -> str:
    parts = _TOKEN_RE.split(text)
    changed = False
    for i, part in enumerate(parts):
        if not part or part.isspace():
            continue
        canonical = _fuzzy_canonical(part)
        if canonical is not None:
            parts[i] = canonical
            changed = True
    return "".join(parts) if changed else text


def correct(text: str, language: str) -> str:
    """Clean up Latin phonetic input before transliteration or lookup."""
    if not text or not text.strip():
        return text
    canonical = normalize_language(language)
    corrected = _apply_language_corrections(text, canonical)
    corrected = _apply_fuzzy_matching(corrected)
    return _REPEATED_RE.sub(r"\1\1", corrected)
