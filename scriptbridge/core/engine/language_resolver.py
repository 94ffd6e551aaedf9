# scriptbridge/core/engine/language_resolver.py
"""
Language identifier resolution.

Turns whatever a caller passes as a language ("Hindi", "hi", "hin",
"Deutsch", "pt-BR", "bangla", "Bhojpuri") into a canonical lowercase name,
and routes unsupported dialects to the language whose data they borrow.

Resolution never fails: an unknown identifier becomes its own opaque
canonical name and is treated as a Latin-script language downstream.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from scriptbridge.core.domain.models import LanguageProfile, LATIN
from scriptbridge.core.registry import (
    FALLBACK_EDGES,
    LANGUAGE_ALIASES,
    LANGUAGE_PROFILES,
    PHRASE_LANGUAGES,
    SCRIPT_FALLBACK,
)

DEFAULT_LANGUAGE = "english"

# Phrase-store column holding the English gloss of every row.
ENGLISH_COLUMN = "english"

# ---------------------------------------------------------------------------
# Lookup tables (built once at import)
# ---------------------------------------------------------------------------

PROFILES_BY_NAME: Dict[str, LanguageProfile] = {
    p.canonical_name: p for p in LANGUAGE_PROFILES
}

_ISO_TO_NAME: Dict[str, str] = {}
for _p in LANGUAGE_PROFILES:
    _ISO_TO_NAME.setdefault(_p.iso_code, _p.canonical_name)
    if _p.iso3_code:
        _ISO_TO_NAME.setdefault(_p.iso3_code, _p.canonical_name)

# Native names are only useful as identifiers when they can be typed on a
# Latin keyboard ("deutsch", "español", "bahasa indonesia").
_NATIVE_TO_NAME: Dict[str, str] = {
    p.native_name.casefold(): p.canonical_name
    for p in LANGUAGE_PROFILES
    if p.is_latin
}

_EDGES: Dict[str, str] = {e.source: e.target for e in FALLBACK_EDGES}


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def normalize_language(raw: Optional[str]) -> str:
    """
    Resolve a free-form language identifier to a canonical name.

    Order: alias, canonical name, ISO code (639-1 or 639-3), Latin native
    name. Region subtags ("pt-BR", "zh_TW") fall back to their primary tag.
    Empty input resolves to english.
    """
    if not isinstance(raw, str):
        return DEFAULT_LANGUAGE
    key = " ".join(raw.strip().casefold().split())
    if not key:
        return DEFAULT_LANGUAGE

    found = _lookup(key)
    if found:
        return found

    for sep in ("-", "_"):
        if sep in key:
            primary = key.split(sep, 1)[0]
            found = _lookup(primary)
            if found:
                return found

    return key


def _lookup(key: str) -> Optional[str]:
    if key in LANGUAGE_ALIASES:
        return LANGUAGE_ALIASES[key]
    if key in PROFILES_BY_NAME:
        return key
    if key in _ISO_TO_NAME:
        return _ISO_TO_NAME[key]
    if key in _NATIVE_TO_NAME:
        return _NATIVE_TO_NAME[key]
    return None


def get_language_profile(language: str) -> Optional[LanguageProfile]:
    return PROFILES_BY_NAME.get(normalize_language(language))


def effective_language(language: str) -> str:
    """
    The language whose data `language` should use.

    A registered fallback edge wins; otherwise a language without phrase
    data borrows the default language of its (non-Latin) script. Applying
    this twice gives the same answer as applying it once.
    """
    canonical = normalize_language(language)
    if canonical in _EDGES:
        return _EDGES[canonical]
    if canonical in PHRASE_LANGUAGES:
        return canonical
    profile = PROFILES_BY_NAME.get(canonical)
    if profile is not None and not profile.is_latin:
        return SCRIPT_FALLBACK.get(profile.script_key, canonical)
    return canonical


def is_same_language(a: str, b: str) -> bool:
    ca, cb = normalize_language(a), normalize_language(b)
    if ca == cb:
        return True
    return effective_language(ca) == effective_language(cb)


def is_english(language: str) -> bool:
    return normalize_language(language) == DEFAULT_LANGUAGE


def script_key_for(language: str) -> str:
    """Script key of a language, or the Latin sentinel when it has none."""
    canonical = normalize_language(language)
    profile = PROFILES_BY_NAME.get(canonical)
    if profile is None:
        profile = PROFILES_BY_NAME.get(effective_language(canonical))
    return profile.script_key if profile is not None else LATIN


def is_latin_script_language(language: str) -> bool:
    return script_key_for(language) == LATIN


def language_column(language: str) -> Optional[str]:
    """Phrase-store column for a language, None when it has no phrase data."""
    effective = effective_language(language)
    return effective if effective in PHRASE_LANGUAGES else None


def fallback_edges() -> Dict[str, str]:
    return dict(_EDGES)


def list_languages() -> List[LanguageProfile]:
    return sorted(LANGUAGE_PROFILES, key=lambda p: p.canonical_name)
