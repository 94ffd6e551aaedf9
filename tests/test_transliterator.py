# tests/test_transliterator.py
import pytest

from scriptbridge.core.engine.script_registry import all_script_blocks, get_script_block
from scriptbridge.core.engine.transliterator import case_variants, transliterate, transliterate_word
from scriptbridge.core.registry import LANGUAGE_PROFILES


def test_namaste_in_hindi():
    assert transliterate("namaste", "hindi") == "नमस्ते"


def test_language_identifiers_are_normalized():
    assert transliterate("namaste", "HI") == "नमस्ते"


def test_whitespace_is_preserved():
    assert transliterate("namaste  namaste", "hindi") == "नमस्ते  नमस्ते"


def test_case_variant_order():
    assert case_variants("n") == ["n", "N"]
    assert case_variants("Sh") == ["Sh", "sh", "SH"]


def test_telugu_capital_n_is_retroflex():
    assert transliterate_word("N", get_script_block("telugu")) == "ణ"
    assert transliterate_word("n", get_script_block("telugu")) == "న"


def test_virama_joins_consonants():
    block = get_script_block("devanagari")
    assert transliterate_word("st", block) == "स्त"


def test_inherent_vowel_leaves_bare_consonant():
    block = get_script_block("devanagari")
    assert transliterate_word("ka", block) == "क"
    assert transliterate_word("ki", block) == "कि"
    assert transliterate_word("a", block) == "अ"


def test_unmatched_characters_are_copied():
    block = get_script_block("devanagari")
    assert transliterate_word("k!", block) == "क!"


def test_alphabet_keeps_written_a():
    assert transliterate("mama", "russian") == "мама"


@pytest.mark.parametrize("block", all_script_blocks(), ids=lambda b: b.key)
def test_empty_input_for_every_script(block):
    assert transliterate_word("", block) == ""


@pytest.mark.parametrize(
    "language",
    sorted({p.canonical_name for p in LANGUAGE_PROFILES if p.is_latin}),
)
def test_latin_languages_unchanged(language):
    assert transliterate("bonjour amigo", language) == "bonjour amigo"
    assert transliterate("", language) == ""


def test_non_latin_input_unchanged():
    assert transliterate("नमस्ते", "tamil") == "नमस्ते"


@pytest.mark.parametrize("text", ["", "   "])
def test_blank_input_unchanged(text):
    assert transliterate(text, "hindi") == text


def test_unknown_language_unchanged():
    assert transliterate("namaste", "klingon") == "namaste"


@pytest.mark.parametrize(
    "word, expected",
    [
        ("dhanyavaad", "धन्यवाद"),
        ("kanya", "कन्य"),
        ("agni", "अग्नि"),
    ],
)
def test_n_before_y_stays_dental(word, expected):
    assert transliterate(word, "hindi") == expected


def test_palatal_nasal_has_its_own_key():
    block = get_script_block("devanagari")
    assert transliterate_word("pa~nch", block) == "पञ्च"
    assert transliterate_word("j~naan", block) == "ज्ञान"


@pytest.mark.parametrize(
    "key, word, expected",
    [
        ("ethiopic", "selam", "ሰላም"),
        ("cherokee", "tsalagi", "ᏣᎳᎩ"),
        ("canadian_syllabics", "inuktitut", "ᐃᓄᒃᑎᑐᑦ"),
        ("thaana", "dhivehi", "ދިވެހި"),
        ("bopomofo", "nihao", "ㄋㄧㄏㄠ"),
        ("katakana", "sushi", "スシ"),
    ],
)
def test_syllabaries_and_fili_scripts(key, word, expected):
    assert transliterate_word(word, get_script_block(key)) == expected


def test_coeng_stacks_khmer_clusters():
    # k + h is a single letter; m follows under the coeng.
    assert transliterate_word("khma", get_script_block("khmer")) == "ខ្ម"
