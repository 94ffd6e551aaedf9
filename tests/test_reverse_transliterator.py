# tests/test_reverse_transliterator.py
import pytest

from scriptbridge.core.engine.phonetic_corrector import edit_distance
from scriptbridge.core.engine.reverse_transliterator import (
    build_reverse_map,
    reverse_maps_built,
    reverse_transliterate,
)
from scriptbridge.core.engine.transliterator import transliterate


def test_namaste_back_to_latin():
    assert reverse_transliterate("नमस्ते", "hindi") == "nmste"


def test_script_detected_when_language_missing():
    assert reverse_transliterate("привет") == "privet"
    assert reverse_transliterate("привет", "english") == "privet"


def test_canonical_spelling_wins_for_aliases():
    # 'w' and 'v' both map to в; 'v' is the canonical reading.
    assert build_reverse_map("cyrillic")["в"] == "v"


def test_unmapped_glyphs_pass_through():
    assert reverse_transliterate("नमस्ते 123", "hindi") == "nmste 123"


@pytest.mark.parametrize("text", ["", "   ", "hello"])
def test_latin_and_blank_unchanged(text):
    assert reverse_transliterate(text, "hindi") == text


def test_reverse_maps_are_memoized():
    first = build_reverse_map("greek")
    assert build_reverse_map("greek") is first
    assert reverse_maps_built() >= 1


def test_reverse_map_is_read_only():
    with pytest.raises(TypeError):
        build_reverse_map("devanagari")["x"] = "y"


@pytest.mark.parametrize(
    "word, language",
    [
        ("namaste", "hindi"),
        ("dhanyavaad", "hindi"),
        ("namaste", "telugu"),
        ("privet", "russian"),
        ("kalimera", "greek"),
    ],
)
def test_round_trip_stays_close(word, language):
    back = reverse_transliterate(transliterate(word, language), language)
    assert back
    assert edit_distance(back, word) <= len(word) // 2 + 1
