# scriptbridge/core/engine/transliterator.py
"""
Forward transliteration: Latin phonetic input -> native script.

Words are tokenized greedily, longest pattern first (4 characters down to
1). At each length the consonant map is consulted before the vowel map, and
each map is tried with the case variants of the pattern in a fixed order:
exact, lower, upper, capitalized, first-letter-lowered. So in Telugu "N"
reaches the retroflex ణ before its lowercase form gets a chance, while "n"
stays dental న.

A matched consonant is held back ("pending") until we know what follows:
  * another consonant  -> pending emitted with the virama (conjunct)
  * the inherent vowel -> pending emitted bare
  * another vowel      -> pending + combining sign, or + full vowel glyph
                          when the script has no sign for it
  * anything else      -> pending emitted bare, character copied as is
"""

from __future__ import annotations

import re
from typing import List, Optional, Tuple

from scriptbridge.core.domain.models import ScriptBlock
from scriptbridge.core.engine import phonetic_corrector
from scriptbridge.core.engine.script_detector import is_latin_text
from scriptbridge.core.engine.script_registry import script_for

MAX_PATTERN_LENGTH = 4

_WHITESPACE_SPLIT = re.compile(r"(\s+)")


def case_variants(pattern: str) -> List[str]:
    """Ordered, de-duplicated case forms tried for a pattern."""
    candidates = (
        pattern,
        pattern.lower(),
        pattern.upper(),
        pattern.capitalize(),
        pattern[:1].lower() + pattern[1:],
    )
    seen: List[str] = []
    for c in candidates:
        if c not in seen:
            seen.append(c)
    return seen


def _match(block: ScriptBlock, pattern: str) -> Optional[Tuple[str, str, str]]:
    """Return (kind, key, glyph) for the first map hit, consonants first."""
    variants = case_variants(pattern)
    for variant in variants:
        glyph = block.consonant_map.get(variant)
        if glyph:
            return "consonant", variant, glyph
    for variant in variants:
        glyph = block.vowel_map.get(variant)
        if glyph:
            return "vowel", variant, glyph
    return None


def transliterate_word(word: str, block: ScriptBlock) -> str:
    if not word:
        return ""

    out: List[str] = []
    pending = ""
    i = 0
    n = len(word)

    while i < n:
        hit = None
        for length in range(min(MAX_PATTERN_LENGTH, n - i), 0, -1):
            hit = _match(block, word[i:i + length])
            if hit:
                break

        if hit is None:
            if pending:
                out.append(pending)
                pending = ""
            out.append(word[i])
            i += 1
            continue

        kind, key, glyph = hit
        i += length

        if kind == "consonant":
            if pending:
                out.append(pending)
                if block.virama:
                    out.append(block.virama)
            pending = glyph
            continue

        if pending:
            if key == block.inherent_vowel:
                out.append(pending)
            elif key in block.modifier_map:
                out.append(pending + block.modifier_map[key])
            else:
                out.append(pending + glyph)
            pending = ""
        else:
            out.append(glyph)

    if pending:
        out.append(pending)
    return "".join(out)


def transliterate(text: str, language: str) -> str:
    """
    Convert Latin phonetic text into the script of `language`.

    Returns the input unchanged when it is blank, when the language has no
    registered script, or when the text is already in a non-Latin script.
    Whitespace runs are preserved exactly.
    """
    if not text or not text.strip():
        return text

    block = script_for(language)
    if block is None or not is_latin_text(text):
        return text

    corrected = phonetic_corrector.correct(text, language)
    parts = _WHITESPACE_SPLIT.split(corrected)
    return "".join(
        part if not part or part.isspace() else transliterate_word(part, block)
        for part in parts
    )
