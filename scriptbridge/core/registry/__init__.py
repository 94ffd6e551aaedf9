# scriptbridge/core/registry/__init__.py
"""Static script and language tables. Pure data, no behaviour."""

from .languages import (
    FALLBACK_EDGES,
    LANGUAGE_ALIASES,
    LANGUAGE_PROFILES,
    PHRASE_LANGUAGES,
    SCRIPT_FALLBACK,
)
from .scripts import SCRIPT_BLOCKS

__all__ = [
    "SCRIPT_BLOCKS",
    "LANGUAGE_PROFILES",
    "LANGUAGE_ALIASES",
    "FALLBACK_EDGES",
    "SCRIPT_FALLBACK",
    "PHRASE_LANGUAGES",
]
