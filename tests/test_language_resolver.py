# tests/test_language_resolver.py
import pytest

from scriptbridge.core.engine.language_resolver import (
    effective_language,
    fallback_edges,
    get_language_profile,
    is_english,
    is_latin_script_language,
    is_same_language,
    language_column,
    list_languages,
    normalize_language,
)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("Hindi", "hindi"),
        ("  HINDI  ", "hindi"),
        ("hi", "hindi"),
        ("hin", "hindi"),
        ("bangla", "bengali"),
        ("oriya", "odia"),
        ("farsi", "persian"),
        ("mandarin", "chinese"),
        ("pt-BR", "portuguese"),
        ("zh_TW", "chinese"),
        ("deutsch", "german"),
        ("", "english"),
        (None, "english"),
    ],
)
def test_normalize_language(raw, expected):
    assert normalize_language(raw) == expected


def test_unknown_language_is_opaque():
    assert normalize_language("Klingon") == "klingon"
    assert is_latin_script_language("klingon")


def test_every_edge_resolves_in_one_hop():
    for source, target in fallback_edges().items():
        assert effective_language(source) == target
        assert effective_language(target) == target


def test_effective_language_is_idempotent():
    for profile in list_languages():
        once = effective_language(profile.canonical_name)
        assert effective_language(once) == once


def test_latin_languages_have_no_script_fallback():
    # Latin-script languages never collapse onto English.
    assert effective_language("polish") == "polish"
    assert language_column("polish") is None


def test_script_fallback_for_non_latin_language():
    assert effective_language("nepali") == "hindi"
    assert is_same_language("nepali", "hindi")


def test_same_language_and_english():
    assert is_same_language("hi", "Hindi")
    assert not is_same_language("hindi", "tamil")
    assert is_english("EN")
    assert not is_english("spanish")


def test_language_column():
    assert language_column("bhojpuri") == "hindi"
    assert language_column("english") == "english"


def test_profiles():
    profile = get_language_profile("urdu")
    assert profile.is_rtl
    assert profile.script_key == "arabic"
    names = [p.canonical_name for p in list_languages()]
    assert names == sorted(names)
