# scriptbridge/core/engine/latin_normalizer.py
"""
Target-aware folding for Latin -> Latin language pairs.

Letters that belong to the target alphabet are kept ("ñ" survives into
Spanish); everything else is folded to a spelling the target can read
("ñ" -> "ny" for German, "ß" -> "ss" for Spanish), and remaining accents
are stripped.
"""

from __future__ import annotations

import unicodedata
from typing import Dict, FrozenSet

from scriptbridge.core.engine.language_resolver import normalize_language

# Letters that need more than accent stripping.
FOLD_RULES: Dict[str, str] = {
    "ñ": "ny",
    "ß": "ss",
    "æ": "ae",
    "œ": "oe",
    "ø": "oe",
    "å": "aa",
    "þ": "th",
    "ð": "dh",
    "ł": "l",
    "đ": "dj",
    "ı": "i",
    "ŋ": "ng",
}

TARGET_ALPHABETS: Dict[str, FrozenSet[str]] = {
    "spanish": frozenset("ñáéíóúü"),
    "french": frozenset("éèêëàâîïôûùüçœæÿ"),
    "german": frozenset("äöüß"),
    "italian": frozenset("àèéìíòóù"),
    "portuguese": frozenset("ãõáâàéêíóôúç"),
    "dutch": frozenset("ëïéèö"),
    "turkish": frozenset("çğıöşü"),
    "vietnamese": frozenset(
        "ăâđêôơưàáảãạằắẳẵặầấẩẫậèéẻẽẹềếểễệìíỉĩịòóỏõọồốổỗộờớởỡợùúủũụừứửữựỳýỷỹỵ"
    ),
    "indonesian": frozenset(),
    "swahili": frozenset(),
    "swedish": frozenset("åäö"),
    "norwegian": frozenset("æøå"),
    "danish": frozenset("æøå"),
    "finnish": frozenset("äöå"),
    "icelandic": frozenset("áðéíóúýþæö"),
    "polish": frozenset("ąćęłńóśźż"),
    "czech": frozenset("áčďéěíňóřšťúůýž"),
    "slovak": frozenset("áäčďéíĺľňóôŕšťúýž"),
    "croatian": frozenset("čćđšž"),
    "romanian": frozenset("ăâîșț"),
    "hungarian": frozenset("áéíóöőúüű"),
    "catalan": frozenset("àçèéíïòóúü"),
}


def _fold_char(ch: str) -> str:
    lower = ch.lower()
    if lower in FOLD_RULES:
        folded = FOLD_RULES[lower]
        return folded.capitalize() if ch != lower else folded
    decomposed = unicodedata.normalize("NFD", ch)
    return "".join(c for c in decomposed if not unicodedata.combining(c))


def fold_for_target(text: str, target: str) -> str:
    if not text:
        return text
    keep = TARGET_ALPHABETS.get(normalize_language(target), frozenset())
    composed = unicodedata.normalize("NFC", text)
    return "".join(
        ch if ord(ch) < 0x80 or ch.lower() in keep else _fold_char(ch)
        for ch in composed
    )
