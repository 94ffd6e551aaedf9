# tests/test_phonetic_corrector.py
import pytest

from scriptbridge.core.engine.phonetic_corrector import correct, edit_distance


def test_known_misspelling_for_language():
    assert correct("kaisey ho", "hindi") == "kaise ho"
    assert correct("Kaisey ho", "hi") == "kaise ho"


def test_misspellings_are_language_specific():
    assert correct("kaisey ho", "tamil") == "kaisey ho"


def test_fuzzy_common_phrase():
    assert correct("helo", "english") == "hello"
    assert correct("thanx", "english") == "thank you"


@pytest.mark.parametrize("word", ["hell", "thank", "hello"])
def test_prefixes_and_canonical_forms_are_left_alone(word):
    assert correct(word, "english") == word


def test_repeated_letters_are_squeezed():
    assert correct("soooo good", "english") == "soo good"


def test_whitespace_is_preserved():
    assert correct("kaisey  ho\tji", "hindi") == "kaise  ho\tji"


@pytest.mark.parametrize("text", ["", "   "])
def test_blank_input(text):
    assert correct(text, "hindi") == text


@pytest.mark.parametrize(
    "a, b, expected",
    [
        ("kitten", "sitting", 3),
        ("abc", "acb", 1),
        ("same", "same", 0),
        ("", "abc", 3),
        ("a", "abcdefg", 6),
    ],
)
def test_edit_distance(a, b, expected):
    assert edit_distance(a, b) == expected


@pytest.mark.parametrize("word", ["thi", "the", "not", "gur", "try", "thana"])
def test_ordinary_romanized_words_are_kept(word):
    assert correct(word, "hindi") == word


def test_short_chat_spellings_match_exactly():
    assert correct("thx", "english") == "thank you"
    assert correct("nyt", "english") == "night"


def test_long_chat_spellings_tolerate_one_edit():
    assert correct("thnkyu", "english") == "thank you"
    assert correct("plesae", "english") == "please"
