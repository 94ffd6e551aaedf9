# tests/test_script_detector.py
import pytest

from scriptbridge.core.engine.cache import BoundedCache
from scriptbridge.core.engine.script_detector import (
    DEFAULT_CONFIDENCE,
    DETECTED_CONFIDENCE,
    ScriptDetector,
    dominant_block,
    is_latin_text,
)
from scriptbridge.core.engine.script_registry import script_for
from scriptbridge.core.engine.transliterator import transliterate


def test_detects_devanagari(detector):
    result = detector.detect("नमस्ते")
    assert result.script == "Devanagari"
    assert result.language == "hindi"
    assert result.is_latin is False
    assert result.confidence == DETECTED_CONFIDENCE


@pytest.mark.parametrize(
    "text, script, language",
    [
        ("வணக்கம்", "Tamil", "tamil"),
        ("నమస్కారం", "Telugu", "telugu"),
        ("привет", "Cyrillic", "russian"),
        ("مرحبا", "Arabic", "arabic"),
        ("안녕하세요", "Hangul", "korean"),
        ("你好", "Han", "chinese"),
        ("コーヒー", "Katakana", "japanese"),
        ("ሰላም", "Ethiopic", "amharic"),
        ("ខ្មែរ", "Khmer", "khmer"),
        ("བོད་སྐད", "Tibetan", "tibetan"),
        ("ދިވެހި", "Thaana", "dhivehi"),
        ("ᏣᎳᎩ", "Cherokee", "cherokee"),
        ("ᐃᓄᒃᑎᑐᑦ", "Canadian Syllabics", "inuktitut"),
        ("ꦗꦮ", "Javanese", "javanese"),
        ("ㅋㅋㅋ", "Hangul", "korean"),
        ("ݐݑ", "Arabic", "arabic"),
        ("㐀㐁", "Han", "chinese"),
    ],
)
def test_detects_other_scripts(detector, text, script, language):
    result = detector.detect(text)
    assert (result.script, result.language) == (script, language)


def test_latin_defaults_to_english(detector):
    result = detector.detect("hello there")
    assert result.is_latin
    assert result.language == "english"
    assert result.confidence == DEFAULT_CONFIDENCE


@pytest.mark.parametrize("text", ["", "   ", "\n"])
def test_blank_input_has_zero_confidence(detector, text):
    result = detector.detect(text)
    assert result.is_latin
    assert result.confidence == 0.0


def test_majority_wins():
    # Three Devanagari letters against two Tamil ones.
    assert dominant_block("नमस வண").key == "devanagari"


def test_katakana_outweighs_kanji_and_kana_particles():
    # Three katakana, one kanji, two hiragana.
    assert dominant_block("コーヒを飲む").key == "katakana"


def test_results_are_cached():
    cache = BoundedCache(max_size=10)
    detector = ScriptDetector(cache=cache)
    first = detector.detect("привет")
    assert "привет" in cache
    assert detector.detect("привет") is first
    detector.clear()
    assert len(cache) == 0


def test_is_latin_text():
    assert is_latin_text("mañana, café! 123")
    assert is_latin_text("Tiếng Việt")
    assert not is_latin_text("hello नमस्ते")


@pytest.mark.parametrize("language", ["hindi", "tamil", "telugu", "russian", "greek", "bengali"])
def test_detecting_transliterated_output_reports_language_script(detector, language):
    output = transliterate("namaste", language)
    assert detector.detect(output).script == script_for(language).name
