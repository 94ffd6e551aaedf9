# scriptbridge/core/engine/script_registry.py
"""
Script registry access and load-time validation.

The tables live in scriptbridge.core.registry; this module answers
questions about them ("which script does Tamil use?", "is U+0915 inside
Devanagari?") and refuses to import if they are inconsistent.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from scriptbridge.core.domain.exceptions import RegistryError
from scriptbridge.core.domain.models import LATIN, ScriptBlock
from scriptbridge.core.engine.language_resolver import (
    PROFILES_BY_NAME,
    fallback_edges,
    script_key_for,
)
from scriptbridge.core.registry import PHRASE_LANGUAGES, SCRIPT_BLOCKS, SCRIPT_FALLBACK

_BLOCKS_BY_KEY: Dict[str, ScriptBlock] = {b.key: b for b in SCRIPT_BLOCKS}


def all_script_blocks() -> Tuple[ScriptBlock, ...]:
    """Every registered block, in registration order."""
    return SCRIPT_BLOCKS


def get_script_block(key: str) -> Optional[ScriptBlock]:
    return _BLOCKS_BY_KEY.get(key)


def script_for(language: str) -> Optional[ScriptBlock]:
    """
    ScriptBlock for a language, or None when the language is written in
    Latin (or unknown, which is treated the same way).
    """
    key = script_key_for(language)
    if key == LATIN:
        return None
    return _BLOCKS_BY_KEY.get(key)


def range_contains(block: ScriptBlock, codepoint: int) -> bool:
    return block.contains(codepoint)


def default_language_for_script(block: ScriptBlock) -> str:
    return SCRIPT_FALLBACK[block.key]


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


def validate_registry() -> None:
    """
    Check the static tables. Raises RegistryError listing every problem found.
    """
    problems: List[str] = []

    seen_keys = set()
    for block in SCRIPT_BLOCKS:
        if block.key in seen_keys:
            problems.append(f"duplicate script key '{block.key}'")
        seen_keys.add(block.key)

        for start, end in block.ranges:
            if start > end:
                problems.append(f"{block.key}: empty range {start:#06x}-{end:#06x}")

        for key in block.modifier_map:
            if key != block.inherent_vowel and key not in block.vowel_map:
                problems.append(f"{block.key}: modifier '{key}' has no standalone vowel")

        if block.inherent_vowel and block.inherent_vowel not in block.vowel_map:
            problems.append(f"{block.key}: inherent vowel '{block.inherent_vowel}' not in vowel map")

        fallback = SCRIPT_FALLBACK.get(block.key)
        if fallback is None:
            problems.append(f"{block.key}: no default language")
        elif fallback not in PROFILES_BY_NAME:
            problems.append(f"{block.key}: default language '{fallback}' has no profile")

    spans = sorted((start, end, block.key) for block in SCRIPT_BLOCKS for start, end in block.ranges)
    for prev, nxt in zip(spans, spans[1:]):
        if nxt[0] <= prev[1]:
            problems.append(f"ranges overlap: {prev[2]} and {nxt[2]}")

    for profile in PROFILES_BY_NAME.values():
        if profile.script_key != LATIN and profile.script_key not in _BLOCKS_BY_KEY:
            problems.append(f"{profile.canonical_name}: unknown script '{profile.script_key}'")

    edges = fallback_edges()
    for source, target in edges.items():
        if source == target:
            problems.append(f"fallback edge '{source}' points to itself")
        if target in edges:
            problems.append(f"fallback edge '{source}' -> '{target}' is not single-hop")
        if target not in PHRASE_LANGUAGES:
            problems.append(f"fallback target '{target}' has no phrase data")

    if problems:
        raise RegistryError("; ".join(problems))


validate_registry()
