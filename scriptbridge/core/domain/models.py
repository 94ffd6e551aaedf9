# scriptbridge/core/domain/models.py
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field

# Sentinel script key for languages written in the Latin alphabet.
LATIN = "latin"
LATIN_NAME = "Latin"


# --- Static registry entities ---

@dataclass(frozen=True)
class ScriptBlock:
    """
    A writing system: its Unicode range plus the phonetic maps used to
    convert Latin input into it.

    `start`/`end` is the main block; `extra_ranges` holds supplement and
    extension blocks (Arabic Supplement, CJK Extension A, Hangul Jamo) that
    count toward the same script during detection.

    Maps are frozen into read-only proxies on construction so a block can be
    shared across threads without copying.
    """
    key: str
    name: str
    start: int
    end: int
    vowel_map: Mapping[str, str]
    consonant_map: Mapping[str, str]
    modifier_map: Mapping[str, str] = field(default_factory=dict)
    virama: Optional[str] = None
    # Vowel a bare consonant already carries. None for alphabets and syllabaries.
    inherent_vowel: Optional[str] = None
    extra_ranges: Tuple[Tuple[int, int], ...] = ()

    def __post_init__(self):
        for name in ("vowel_map", "consonant_map", "modifier_map"):
            object.__setattr__(self, name, MappingProxyType(dict(getattr(self, name))))

    @property
    def ranges(self) -> Tuple[Tuple[int, int], ...]:
        return ((self.start, self.end),) + tuple(self.extra_ranges)

    def contains(self, codepoint: int) -> bool:
        return any(start <= codepoint <= end for start, end in self.ranges)


@dataclass(frozen=True)
class LanguageProfile:
    canonical_name: str
    iso_code: str
    native_name: str
    script_key: str = LATIN
    iso3_code: Optional[str] = None
    is_rtl: bool = False

    @property
    def is_latin(self) -> bool:
        return self.script_key == LATIN


@dataclass(frozen=True)
class FallbackEdge:
    """An unsupported dialect routed to its nearest supported language."""
    source: str
    target: str


# --- Enums ---

class TranslationMethod(str, Enum):
    """How a TranslationResult was produced."""
    PASSTHROUGH = "passthrough"
    TRANSLITERATION = "transliteration"
    PHRASE = "phrase"
    DICTIONARY = "dictionary"
    SEMANTIC_PATTERN = "semantic-pattern"
    CACHED = "cached"


class LatinPairPolicy(str, Enum):
    """What to do with a Latin-script pair that has no phrase entry."""
    NORMALIZE = "normalize"
    PASSTHROUGH = "passthrough"


class PhraseKind(str, Enum):
    PHRASE = "phrase"
    WORD = "word"


# --- Value objects ---

class ScriptDetection(BaseModel):
    """Dominant script of a piece of text and the language it implies."""
    model_config = ConfigDict(frozen=True)

    script: str = LATIN_NAME
    language: str = "english"
    confidence: float = Field(0.0, ge=0.0, le=1.0)
    is_latin: bool = True


class TranslationResult(BaseModel):
    """Outcome of a translate() call. Immutable once built."""
    model_config = ConfigDict(frozen=True, use_enum_values=False)

    text: str
    original_text: str
    source_language: str
    target_language: str
    is_translated: bool = False
    is_transliterated: bool = False
    english_pivot: Optional[str] = None
    confidence: float = Field(0.0, ge=0.0, le=1.0)
    method: TranslationMethod = TranslationMethod.PASSTHROUGH


class ChatTranslation(BaseModel):
    """Both sides of a chat message: what the sender and the receiver see."""
    model_config = ConfigDict(frozen=True)

    original_text: str
    sender_view: str
    receiver_view: str
    english_core: Optional[str] = None
    was_translated: bool = False
    was_transliterated: bool = False
    confidence: float = Field(0.0, ge=0.0, le=1.0)


class PhraseRow(BaseModel):
    """
    One row of the external phrase store: an English gloss plus
    pre-translated columns keyed by canonical language name.
    """
    english: str
    translations: Dict[str, str] = Field(default_factory=dict)
    kind: PhraseKind = PhraseKind.PHRASE

    def value_for(self, column: str) -> Optional[str]:
        if column == "english":
            return self.english
        value = self.translations.get(column)
        return value or None
