# scriptbridge/core/engine/reverse_transliterator.py
"""
Reverse transliteration: native script -> Latin approximation.

The inverse map is the union of a block's consonant, vowel and modifier
maps taken in that order, so when two spellings share a glyph the later one
is what comes back. The result is lossy: inherent vowels are not restored
("नमस्ते" reads back as "nmste").
"""

from __future__ import annotations

from functools import lru_cache
from types import MappingProxyType
from typing import Dict, Mapping, Optional

from scriptbridge.core.domain.models import ScriptBlock
from scriptbridge.core.engine.script_detector import dominant_block, is_latin_text
from scriptbridge.core.engine.script_registry import get_script_block, script_for

MAX_GLYPH_LENGTH = 4


@lru_cache(maxsize=None)
def build_reverse_map(script_key: str) -> Mapping[str, str]:
    """Glyph -> Latin map for one script, built on first use."""
    block = get_script_block(script_key)
    if block is None:
        return MappingProxyType({})
    reverse: Dict[str, str] = {}
    for table in (block.consonant_map, block.vowel_map, block.modifier_map):
        for latin, glyph in table.items():
            reverse[glyph] = latin
    return MappingProxyType(reverse)


def reverse_maps_built() -> int:
    return build_reverse_map.cache_info().currsize


def reverse_transliterate_with(text: str, block: ScriptBlock) -> str:
    reverse = build_reverse_map(block.key)
    out = []
    i = 0
    n = len(text)
    while i < n:
        if block.virama and text[i] == block.virama:
            i += 1
            continue
        for length in range(min(MAX_GLYPH_LENGTH, n - i), 0, -1):
            latin = reverse.get(text[i:i + length])
            if latin is not None:
                out.append(latin)
                i += length
                break
        else:
            out.append(text[i])
            i += 1
    return "".join(out).strip()


def reverse_transliterate(text: str, language: Optional[str] = None) -> str:
    """
    Romanize native-script text.

    The script comes from `language`; when the language is Latin or unknown
    the dominant script of the text itself is used. Latin input and blank
    input are returned unchanged.
    """
    if not text or not text.strip():
        return text
    if is_latin_text(text):
        return text

    block = script_for(language) if language else None
    if block is None:
        block = dominant_block(text)
    if block is None:
        return text
    return reverse_transliterate_with(text, block)
