# tests/test_script_registry.py
import pytest

from scriptbridge.core.domain.models import ScriptBlock
from scriptbridge.core.engine.script_registry import (
    all_script_blocks,
    get_script_block,
    range_contains,
    script_for,
    validate_registry,
)

EXPECTED_ORDER = [
    "devanagari", "bengali", "gurmukhi", "gujarati", "odia", "tamil", "telugu",
    "kannada", "malayalam", "sinhala", "thai", "arabic", "hebrew", "cyrillic",
    "greek", "georgian", "armenian", "hiragana", "hangul", "han",
    "katakana", "lao", "myanmar", "khmer", "ethiopic", "tibetan", "thaana",
    "syriac", "nko", "tifinagh", "ol_chiki", "javanese", "balinese",
    "sundanese", "buginese", "baybayin", "meetei_mayek", "mongolian",
    "cherokee", "canadian_syllabics", "bopomofo",
]


def test_registration_order():
    assert [b.key for b in all_script_blocks()] == EXPECTED_ORDER


def test_static_tables_are_consistent():
    # Raises RegistryError on any violation.
    validate_registry()


@pytest.mark.parametrize("block", all_script_blocks(), ids=lambda b: b.key)
def test_modifiers_have_standalone_vowels(block: ScriptBlock):
    for key in block.modifier_map:
        assert key == block.inherent_vowel or key in block.vowel_map


def test_more_than_forty_scripts_registered():
    assert len(all_script_blocks()) > 40


def test_ranges_do_not_overlap():
    spans = sorted((start, end, b.key) for b in all_script_blocks() for start, end in b.ranges)
    for prev, nxt in zip(spans, spans[1:]):
        assert prev[1] < nxt[0], f"{prev[2]} overlaps {nxt[2]}"


def test_maps_are_read_only():
    block = get_script_block("devanagari")
    with pytest.raises(TypeError):
        block.consonant_map["k"] = "x"


def test_range_contains():
    block = get_script_block("devanagari")
    assert range_contains(block, ord("न"))
    assert not range_contains(block, ord("a"))


@pytest.mark.parametrize(
    "key, char",
    [
        ("arabic", "\u0750"),
        ("arabic", "\u08a0"),
        ("cyrillic", "\u0501"),
        ("greek", "\u1f00"),
        ("hangul", "\u1100"),
        ("hangul", "\u314b"),
        ("han", "\u3400"),
        ("han", "\uf900"),
    ],
)
def test_supplement_ranges_belong_to_their_script(key, char):
    assert range_contains(get_script_block(key), ord(char))


@pytest.mark.parametrize(
    "language, key",
    [
        ("hindi", "devanagari"),
        ("Telugu", "telugu"),
        ("ta", "tamil"),
        ("russian", "cyrillic"),
        ("japanese", "hiragana"),
        ("korean", "hangul"),
        ("chinese", "han"),
        ("urdu", "arabic"),
        ("bhojpuri", "devanagari"),
        ("amharic", "ethiopic"),
        ("burmese", "myanmar"),
        ("dhivehi", "thaana"),
        ("cherokee", "cherokee"),
    ],
)
def test_script_for_registered_languages(language, key):
    assert script_for(language).key == key


@pytest.mark.parametrize("language", ["english", "spanish", "klingon", ""])
def test_script_for_latin_or_unknown_is_none(language):
    assert script_for(language) is None


def test_alphabets_have_no_inherent_vowel():
    for key in (
        "cyrillic", "greek", "georgian", "armenian", "hebrew", "arabic",
        "syriac", "nko", "tifinagh", "ol_chiki", "mongolian",
    ):
        assert get_script_block(key).inherent_vowel is None
