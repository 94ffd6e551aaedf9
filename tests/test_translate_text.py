# tests/test_translate_text.py
import asyncio

import pytest

from scriptbridge.core.domain.exceptions import PhraseStoreError
from scriptbridge.core.domain.models import LatinPairPolicy, PhraseRow, TranslationMethod
from scriptbridge.core.engine.cache import BoundedCache
from scriptbridge.core.engine.script_detector import is_latin_text
from scriptbridge.core.engine.transliterator import transliterate
from scriptbridge.core.use_cases.translate_text import PivotTranslator


# --- Case 1: same language ---

@pytest.mark.asyncio
async def test_same_language_transliterates_romanized_input(translator):
    result = await translator.translate("namaste", "hindi", "hindi")
    assert result.text == "नमस्ते"
    assert result.is_transliterated
    assert not result.is_translated
    assert result.confidence == 1.0
    assert result.method == TranslationMethod.TRANSLITERATION


@pytest.mark.asyncio
async def test_same_language_native_input_passes_through(translator):
    result = await translator.translate("नमस्ते", "hindi", "hi")
    assert result.text == "नमस्ते"
    assert result.method == TranslationMethod.PASSTHROUGH


@pytest.mark.asyncio
async def test_languages_sharing_data_count_as_same(translator):
    result = await translator.translate("नमस्ते", "nepali", "hindi")
    assert result.method == TranslationMethod.PASSTHROUGH
    assert result.confidence == 1.0


# --- Case 2: English on either side ---

@pytest.mark.asyncio
async def test_english_phrase_hit(translator):
    result = await translator.translate("thank you", "english", "hindi")
    assert result.text == "धन्यवाद"
    assert result.is_translated
    assert result.method == TranslationMethod.PHRASE
    assert result.confidence == 0.95
    assert result.english_pivot == "thank you"


@pytest.mark.asyncio
async def test_native_source_to_english(translator):
    result = await translator.translate("धन्यवाद", "hindi", "english")
    assert result.text == "thank you"
    assert result.method == TranslationMethod.PHRASE


@pytest.mark.asyncio
async def test_romanized_source_is_looked_up_in_native_script(translator):
    result = await translator.translate("dhanyavaad", "hindi", "english")
    assert result.text == "thank you"
    assert result.method == TranslationMethod.PHRASE


@pytest.mark.asyncio
async def test_source_detected_when_auto(translator):
    result = await translator.translate("धन्यवाद", "auto", "english")
    assert result.source_language == "hindi"
    assert result.text == "thank you"


@pytest.mark.asyncio
async def test_dictionary_word_by_word(translator):
    result = await translator.translate("water friend", "english", "spanish")
    assert result.text == "agua amigo"
    assert result.method == TranslationMethod.DICTIONARY
    assert result.confidence == 1.0

    partial = await translator.translate("cold water", "english", "spanish")
    assert partial.text == "cold agua"
    assert partial.confidence == 0.5


@pytest.mark.asyncio
async def test_dictionary_keeps_whitespace_and_punctuation(translator):
    result = await translator.translate("cold  (water),\nfriend!", "english", "spanish")
    assert result.text == "cold  (agua),\namigo!"
    assert result.method == TranslationMethod.DICTIONARY
    assert result.confidence == pytest.approx(2 / 3)


@pytest.mark.asyncio
async def test_dictionary_skips_bare_punctuation(translator):
    result = await translator.translate("water - friend", "english", "spanish")
    assert result.text == "agua - amigo"
    assert result.confidence == 1.0


@pytest.mark.asyncio
async def test_semantic_pattern_when_store_has_nothing(translator):
    result = await translator.translate("hello", "english", "hindi")
    assert result.text == "नमस्ते"
    assert result.method == TranslationMethod.SEMANTIC_PATTERN
    assert result.confidence == 0.6


@pytest.mark.asyncio
async def test_semantic_leftovers_are_transliterated(translator):
    result = await translator.translate("hello world", "english", "hindi")
    assert result.method == TranslationMethod.SEMANTIC_PATTERN
    assert result.text == "नमस्ते " + transliterate("world", "hindi")
    assert is_latin_text(result.text) is False
    assert not any(ch.isascii() and ch.isalpha() for ch in result.text)


@pytest.mark.asyncio
async def test_store_failure_is_a_miss(mock_phrase_repo, detector):
    mock_phrase_repo.lookup.side_effect = PhraseStoreError("store down")
    translator = PivotTranslator(mock_phrase_repo, result_cache=BoundedCache(max_size=10), detector=detector)

    result = await translator.translate("kitab", "english", "hindi")

    assert mock_phrase_repo.lookup.await_count >= 1
    assert result.text == transliterate("kitab", "hindi")
    assert result.method == TranslationMethod.TRANSLITERATION
    assert result.confidence == 0.3
    assert not result.is_translated


@pytest.mark.asyncio
async def test_slow_store_times_out(mock_phrase_repo, detector):
    async def slow_lookup(column, text):
        await asyncio.sleep(1)
        return PhraseRow(english="thank you", translations={"hindi": "धन्यवाद"})

    mock_phrase_repo.lookup.side_effect = slow_lookup
    translator = PivotTranslator(mock_phrase_repo, detector=detector, lookup_timeout=0.01)

    result = await translator.translate("thank you", "english", "hindi")

    assert result.method == TranslationMethod.SEMANTIC_PATTERN
    assert result.text == "धन्यवाद"


# --- Case 3: two Latin-script languages ---

@pytest.mark.asyncio
async def test_latin_pair_phrase_hit(translator):
    result = await translator.translate("gracias", "spanish", "french")
    assert result.text == "merci"
    assert result.confidence == 0.9
    assert result.method == TranslationMethod.PHRASE


@pytest.mark.asyncio
async def test_latin_pair_normalize_policy(translator):
    result = await translator.translate("mañana", "spanish", "german")
    assert result.text == "manyana"
    assert result.confidence == 0.5
    assert result.method == TranslationMethod.TRANSLITERATION


@pytest.mark.asyncio
async def test_latin_pair_passthrough_policy(memory_repo, detector):
    translator = PivotTranslator(memory_repo, detector=detector, latin_pair_policy="passthrough")
    assert translator.latin_pair_policy == LatinPairPolicy.PASSTHROUGH

    result = await translator.translate("mañana", "spanish", "german")
    assert result.text == "mañana"
    assert result.confidence == 0.5
    assert result.method == TranslationMethod.PASSTHROUGH


# --- Case 4: different scripts ---

@pytest.mark.asyncio
async def test_direct_phrase_between_scripts(translator):
    result = await translator.translate("धन्यवाद", "hindi", "tamil")
    assert result.text == "நன்றி"
    assert result.confidence == 0.85
    assert result.english_pivot == "thank you"


@pytest.mark.asyncio
async def test_pivot_through_semantic_pattern(translator):
    result = await translator.translate("नमस्ते", "hindi", "tamil")
    assert result.text == "வணக்கம்"
    assert result.method == TranslationMethod.SEMANTIC_PATTERN
    assert result.english_pivot == "nmste"


@pytest.mark.asyncio
async def test_pivot_semantic_leftovers_are_transliterated(translator):
    result = await translator.translate("namaste duniya", "hindi", "tamil")
    assert result.method == TranslationMethod.SEMANTIC_PATTERN
    assert result.text.startswith("வணக்கம் ")
    assert not any(ch.isascii() and ch.isalpha() for ch in result.text)


@pytest.mark.asyncio
async def test_pivot_falls_back_to_transliteration(translator):
    result = await translator.translate("नमक", "hindi", "russian")
    assert result.english_pivot == "nmk"
    assert result.text == "нмк"
    assert result.is_transliterated
    assert not result.is_translated
    assert result.confidence == 0.3


# --- Caching and edge cases ---

@pytest.mark.asyncio
async def test_second_call_is_cached(translator):
    first = await translator.translate("thank you", "english", "hindi")
    second = await translator.translate("thank you", "english", "hindi")
    assert second.method == TranslationMethod.CACHED
    assert second.model_copy(update={"method": first.method}) == first


@pytest.mark.asyncio
async def test_empty_input(translator):
    result = await translator.translate("", "english", "hindi")
    assert result.text == ""
    assert result.confidence == 0.0
    assert result.method == TranslationMethod.PASSTHROUGH
    assert len(translator.cache) == 0


@pytest.mark.asyncio
async def test_clear_cache(translator):
    await translator.translate("thank you", "english", "hindi")
    assert translator.stats()["size"] == 1
    translator.clear_cache()
    assert translator.stats()["size"] == 0
