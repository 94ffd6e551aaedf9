# tests/test_latin_normalizer.py
import pytest

from scriptbridge.core.engine.latin_normalizer import fold_for_target


@pytest.mark.parametrize(
    "text, target, expected",
    [
        ("mañana", "spanish", "mañana"),
        ("mañana", "german", "manyana"),
        ("Straße", "spanish", "Strasse"),
        ("Straße", "de", "Straße"),
        ("Ñandú", "german", "Nyandu"),
        ("café", "french", "café"),
        ("café", "german", "cafe"),
        ("smørrebrød", "danish", "smørrebrød"),
        ("smørrebrød", "italian", "smoerrebroed"),
    ],
)
def test_fold_for_target(text, target, expected):
    assert fold_for_target(text, target) == expected


def test_plain_ascii_unchanged():
    assert fold_for_target("hello world!", "klingon") == "hello world!"


def test_empty():
    assert fold_for_target("", "spanish") == ""
