# scriptbridge/core/engine/script_detector.py
from __future__ import annotations

import unicodedata
from typing import Dict, Optional

import structlog

from scriptbridge.core.domain.models import LATIN_NAME, ScriptBlock, ScriptDetection
from scriptbridge.core.engine.cache import BoundedCache
from scriptbridge.core.engine.language_resolver import DEFAULT_LANGUAGE
from scriptbridge.core.engine.script_registry import (
    all_script_blocks,
    default_language_for_script,
    range_contains,
)

logger = structlog.get_logger()

DETECTED_CONFIDENCE = 0.9
DEFAULT_CONFIDENCE = 0.5
EMPTY_CONFIDENCE = 0.0

# Latin-1 Supplement through IPA/spacing modifiers, combining diacritics,
# and Latin Extended Additional (Vietnamese).
_LATIN_RANGES = ((0x0080, 0x036F), (0x1E00, 0x1EFF))


def _is_latin_char(ch: str) -> bool:
    cp = ord(ch)
    if cp < 0x80:
        return True
    for start, end in _LATIN_RANGES:
        if start <= cp <= end:
            return True
    # Punctuation, symbols, separators, digits and invisible format marks
    # are script-neutral.
    return unicodedata.category(ch)[0] in "PSZNC"


def is_latin_text(text: str) -> bool:
    """True when every character is Latin or script-neutral."""
    return all(_is_latin_char(ch) for ch in text or "")


def dominant_block(text: str) -> Optional[ScriptBlock]:
    """
    Block with the most code points in `text`, None when nothing matches.

    Each code point counts toward the first registered block containing it;
    ties go to the earlier registration.
    """
    blocks = all_script_blocks()
    counts: Dict[str, int] = {}
    for ch in text:
        cp = ord(ch)
        for block in blocks:
            if range_contains(block, cp):
                counts[block.key] = counts.get(block.key, 0) + 1
                break
    if not counts:
        return None
    # max() keeps the first maximum; iterate in registration order.
    return max((b for b in blocks if b.key in counts), key=lambda b: counts[b.key])


class ScriptDetector:
    """Classifies text by its dominant script. No hits means Latin/English."""

    def __init__(self, cache: Optional[BoundedCache[ScriptDetection]] = None):
        self.cache = cache if cache is not None else BoundedCache(max_size=2000)

    def detect(self, text: str) -> ScriptDetection:
        if not text or not text.strip():
            return ScriptDetection(confidence=EMPTY_CONFIDENCE)

        cached = self.cache.get(text)
        if cached is not None:
            return cached

        result = self._classify(text)
        self.cache.set(text, result)
        return result

    def _classify(self, text: str) -> ScriptDetection:
        winner = dominant_block(text)
        if winner is None:
            return ScriptDetection(
                script=LATIN_NAME,
                language=DEFAULT_LANGUAGE,
                confidence=DEFAULT_CONFIDENCE,
                is_latin=True,
            )

        logger.debug("script_detected", script=winner.name)
        return ScriptDetection(
            script=winner.name,
            language=default_language_for_script(winner),
            confidence=DETECTED_CONFIDENCE,
            is_latin=False,
        )

    def clear(self) -> None:
        self.cache.clear()
