# scriptbridge/core/use_cases/translate_text.py
import asyncio
import re
import unicodedata
from typing import List, Optional, Tuple, Union

import structlog

from scriptbridge.core.domain.models import (
    LatinPairPolicy,
    PhraseRow,
    TranslationMethod,
    TranslationResult,
)
from scriptbridge.core.engine import phonetic_corrector, semantic_patterns
from scriptbridge.core.engine.cache import BoundedCache, translation_cache_key
from scriptbridge.core.engine.language_resolver import (
    DEFAULT_LANGUAGE,
    ENGLISH_COLUMN,
    is_english,
    is_latin_script_language,
    is_same_language,
    language_column,
    normalize_language,
)
from scriptbridge.core.engine.latin_normalizer import fold_for_target
from scriptbridge.core.engine.reverse_transliterator import reverse_transliterate
from scriptbridge.core.engine.script_detector import ScriptDetector, dominant_block, is_latin_text
from scriptbridge.core.engine.script_registry import script_for
from scriptbridge.core.engine.transliterator import transliterate
from scriptbridge.core.ports import PhraseRepo

logger = structlog.get_logger()

_WHITESPACE_SPLIT = re.compile(r"(\s+)")

# Source identifiers that ask for detection instead of naming a language.
AUTO_SOURCES = frozenset({"", "auto", "detect"})

SAME_LANGUAGE_CONFIDENCE = 1.0
ENGLISH_PHRASE_CONFIDENCE = 0.95
LATIN_PAIR_PHRASE_CONFIDENCE = 0.9
DIRECT_PHRASE_CONFIDENCE = 0.85
PIVOT_PHRASE_CONFIDENCE = 0.8
SEMANTIC_CONFIDENCE = 0.6
LATIN_PAIR_CONFIDENCE = 0.5
TRANSLITERATION_CONFIDENCE = 0.3


def _split_edge_punctuation(token: str) -> Tuple[str, str, str]:
    """'(water),' -> ('(', 'water', '),'). Whitespace gives an empty word."""
    if not token or token.isspace():
        return token, "", ""
    start, end = 0, len(token)
    while start < end and unicodedata.category(token[start]).startswith("P"):
        start += 1
    while end > start and unicodedata.category(token[end - 1]).startswith("P"):
        end -= 1
    return token[:start], token[start:end], token[end:]


class PivotTranslator:
    """
    Use Case: translate text between two languages, routing through English
    when no direct mapping exists.

    Routing:
    1. Same language: script conversion only.
    2. English on either side: phrase, dictionary, semantic pattern, then
       plain script conversion.
    3. Two Latin-script languages: direct phrase, then the Latin-pair policy.
    4. Anything else: direct phrase, else pivot through a romanized
       intermediate (phrase, semantic pattern, dictionary, transliteration).

    Phrase-store failures never surface: they are logged and treated as a
    miss.
    """

    def __init__(
        self,
        repo: PhraseRepo,
        result_cache: Optional[BoundedCache[TranslationResult]] = None,
        detector: Optional[ScriptDetector] = None,
        latin_pair_policy: Union[LatinPairPolicy, str] = LatinPairPolicy.NORMALIZE,
        lookup_timeout: Optional[float] = None,
    ):
        self.repo = repo
        self.cache = result_cache if result_cache is not None else BoundedCache(max_size=5000)
        self.detector = detector or ScriptDetector()
        self.latin_pair_policy = LatinPairPolicy(latin_pair_policy)
        self.lookup_timeout = lookup_timeout

    async def translate(self, text: str, source: Optional[str], target: str) -> TranslationResult:
        text = text or ""
        target_lang = normalize_language(target)

        if not text.strip():
            return TranslationResult(
                text=text,
                original_text=text,
                source_language=self._explicit_source(source) or DEFAULT_LANGUAGE,
                target_language=target_lang,
                confidence=0.0,
            )

        source_lang = self._explicit_source(source) or self.detector.detect(text).language

        key = translation_cache_key(source_lang, target_lang, text)
        cached = self.cache.get(key)
        if cached is not None:
            return cached.model_copy(update={"method": TranslationMethod.CACHED})

        result = await self._route(text, source_lang, target_lang)
        if result.text:
            self.cache.set(key, result)

        logger.info(
            "translation_routed",
            source=source_lang,
            target=target_lang,
            method=result.method.value,
            confidence=result.confidence,
        )
        return result

    def clear_cache(self) -> None:
        self.cache.clear()

    def stats(self):
        return self.cache.stats()

    # ------------------------------------------------------------------
    # Routing
    # ------------------------------------------------------------------

    @staticmethod
    def _explicit_source(source: Optional[str]) -> Optional[str]:
        if source is None or source.strip().lower() in AUTO_SOURCES:
            return None
        return normalize_language(source)

    async def _route(self, text: str, source: str, target: str) -> TranslationResult:
        if is_same_language(source, target):
            return self._same_language(text, source, target)
        if is_english(source) or is_english(target):
            return await self._via_english(text, source, target)
        if is_latin_script_language(source) and is_latin_script_language(target):
            return await self._latin_pair(text, source, target)
        return await self._via_pivot(text, source, target)

    def _same_language(self, text: str, source: str, target: str) -> TranslationResult:
        latin_input = is_latin_text(text)
        if latin_input and not is_latin_script_language(target):
            out = transliterate(text, target)
        elif not latin_input and is_latin_script_language(target):
            out = reverse_transliterate(text, source)
        else:
            out = text
        changed = out != text
        return self._result(
            text, out, source, target,
            is_transliterated=changed,
            confidence=SAME_LANGUAGE_CONFIDENCE,
            method=TranslationMethod.TRANSLITERATION if changed else TranslationMethod.PASSTHROUGH,
        )

    async def _via_english(self, text: str, source: str, target: str) -> TranslationResult:
        source_col = language_column(source)
        target_col = language_column(target)

        row, value = await self._direct_phrase(text, source, source_col, target_col)
        if value:
            return self._result(
                text, self._to_target_script(value, target), source, target,
                is_translated=True,
                english_pivot=row.english,
                confidence=ENGLISH_PHRASE_CONFIDENCE,
                method=TranslationMethod.PHRASE,
            )

        words = await self._translate_words(text, source_col, target_col)
        if words is not None:
            out, ratio = words
            out = self._to_target_script(out, target)
            return self._result(
                text, out, source, target,
                is_translated=True,
                english_pivot=text if is_english(source) else out,
                confidence=ratio,
                method=TranslationMethod.DICTIONARY,
            )

        # Patterns are matched on the romanized form.
        rendered = semantic_patterns.render(reverse_transliterate(text, source), target)
        if rendered:
            # Words no pattern covered are still romanized.
            rendered = self._to_target_script(rendered, target)
            return self._result(
                text, rendered, source, target,
                is_translated=True,
                english_pivot=text if is_english(source) else rendered,
                confidence=SEMANTIC_CONFIDENCE,
                method=TranslationMethod.SEMANTIC_PATTERN,
            )

        out = self._convert_script(text, source, target)
        return self._result(
            text, out, source, target,
            is_transliterated=out != text,
            confidence=TRANSLITERATION_CONFIDENCE,
            method=TranslationMethod.TRANSLITERATION,
        )

    async def _latin_pair(self, text: str, source: str, target: str) -> TranslationResult:
        row, value = await self._direct_phrase(
            text, source, language_column(source), language_column(target)
        )
        if value:
            return self._result(
                text, value, source, target,
                is_translated=True,
                english_pivot=row.english,
                confidence=LATIN_PAIR_PHRASE_CONFIDENCE,
                method=TranslationMethod.PHRASE,
            )

        if self.latin_pair_policy == LatinPairPolicy.NORMALIZE:
            out = fold_for_target(text, target)
        else:
            out = text
        changed = out != text
        return self._result(
            text, out, source, target,
            is_transliterated=changed,
            confidence=LATIN_PAIR_CONFIDENCE,
            method=TranslationMethod.TRANSLITERATION if changed else TranslationMethod.PASSTHROUGH,
        )

    async def _via_pivot(self, text: str, source: str, target: str) -> TranslationResult:
        target_col = language_column(target)

        row, value = await self._direct_phrase(text, source, language_column(source), target_col)
        if value:
            return self._result(
                text, self._to_target_script(value, target), source, target,
                is_translated=True,
                english_pivot=row.english,
                confidence=DIRECT_PHRASE_CONFIDENCE,
                method=TranslationMethod.PHRASE,
            )

        if is_latin_text(text):
            intermediate = phonetic_corrector.correct(text, source)
        else:
            intermediate = reverse_transliterate(text, source)

        row = await self._lookup(ENGLISH_COLUMN, intermediate)
        value = row.value_for(target_col) if row is not None and target_col else None
        if value:
            return self._result(
                text, self._to_target_script(value, target), source, target,
                is_translated=True,
                english_pivot=intermediate,
                confidence=PIVOT_PHRASE_CONFIDENCE,
                method=TranslationMethod.PHRASE,
            )

        rendered = semantic_patterns.render(intermediate, target)
        if rendered:
            return self._result(
                text, self._to_target_script(rendered, target), source, target,
                is_translated=True,
                english_pivot=intermediate,
                confidence=SEMANTIC_CONFIDENCE,
                method=TranslationMethod.SEMANTIC_PATTERN,
            )

        words = await self._translate_words(intermediate, ENGLISH_COLUMN, target_col)
        if words is not None:
            out, ratio = words
            return self._result(
                text, self._to_target_script(out, target), source, target,
                is_translated=True,
                english_pivot=intermediate,
                confidence=ratio,
                method=TranslationMethod.DICTIONARY,
            )

        out = self._to_target_script(intermediate, target)
        return self._result(
            text, out, source, target,
            is_transliterated=out != text,
            english_pivot=intermediate,
            confidence=TRANSLITERATION_CONFIDENCE,
            method=TranslationMethod.TRANSLITERATION,
        )

    # ------------------------------------------------------------------
    # Phrase store access
    # ------------------------------------------------------------------

    async def _lookup(self, column: Optional[str], text: str) -> Optional[PhraseRow]:
        if not column or not text or not text.strip():
            return None
        try:
            if self.lookup_timeout:
                return await asyncio.wait_for(self.repo.lookup(column, text), self.lookup_timeout)
            return await self.repo.lookup(column, text)
        except Exception as e:
            logger.warning("phrase_lookup_failed", column=column, error=repr(e))
            return None

    async def _direct_phrase(
        self,
        text: str,
        source: str,
        source_col: Optional[str],
        target_col: Optional[str],
    ) -> Tuple[Optional[PhraseRow], Optional[str]]:
        """Whole-text lookup in the source column, read back in the target column."""
        if not source_col or not target_col:
            return None, None
        for candidate in self._source_candidates(text, source):
            row = await self._lookup(source_col, candidate)
            if row is None:
                continue
            value = row.value_for(target_col)
            if value:
                return row, value
        return None, None

    @staticmethod
    def _source_candidates(text: str, source: str) -> List[str]:
        """The text as typed, plus its native-script form for romanized input."""
        candidates = [text]
        if is_latin_text(text) and not is_latin_script_language(source):
            native = transliterate(text, source)
            if native != text:
                candidates.append(native)
        return candidates

    async def _translate_words(
        self,
        text: str,
        source_col: Optional[str],
        target_col: Optional[str],
    ) -> Optional[Tuple[str, float]]:
        """
        Word-by-word lookup. Returns the text and the share of words found.

        Whitespace runs are kept as typed. Punctuation at either edge of a
        token is left out of the lookup and put back around the translation.
        """
        if not source_col or not target_col:
            return None

        words = 0
        found = 0
        out: List[str] = []
        for part in _WHITESPACE_SPLIT.split(text):
            lead, word, trail = _split_edge_punctuation(part)
            if not word:
                out.append(part)
                continue
            words += 1
            row = await self._lookup(source_col, word)
            value = row.value_for(target_col) if row is not None else None
            if value:
                out.append(lead + value + trail)
                found += 1
            else:
                out.append(part)

        if not found:
            return None
        return "".join(out), found / words

    # ------------------------------------------------------------------
    # Script helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _to_target_script(text: str, target: str) -> str:
        """Transliterate the Latin tokens of `text` into the target's script."""
        if is_latin_script_language(target):
            return text
        return "".join(
            transliterate(part, target) if part and not part.isspace() and is_latin_text(part) else part
            for part in _WHITESPACE_SPLIT.split(text)
        )

    @staticmethod
    def _convert_script(text: str, source: str, target: str) -> str:
        """Best-effort script conversion when nothing translated the text."""
        if is_latin_text(text):
            return transliterate(text, target)
        target_block = script_for(target)
        source_block = dominant_block(text)
        if target_block is not None and source_block is not None and target_block.key == source_block.key:
            return text
        latin = reverse_transliterate(text, source)
        if target_block is None:
            return latin
        return transliterate(latin, target)

    @staticmethod
    def _result(
        text: str,
        out: str,
        source: str,
        target: str,
        **fields,
    ) -> TranslationResult:
        return TranslationResult(
            text=out,
            original_text=text,
            source_language=source,
            target_language=target,
            **fields,
        )
