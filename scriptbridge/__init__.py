"""
ScriptBridge: script-aware transliteration and pivot translation.

Typical usage:

    import scriptbridge

    scriptbridge.transliterate("namaste", "hindi")        # 'नमस्ते'
    scriptbridge.detect_script("నమస్కారం").language       # 'telugu'
    result = await scriptbridge.translate("thank you", "english", "hindi")
"""

from scriptbridge.api import (
    ScriptBridge,
    cache_stats,
    clear_caches,
    detect_script,
    get_bridge,
    reverse_transliterate,
    set_bridge,
    translate,
    translate_for_chat,
    translate_in_background,
    transliterate,
)

__version__ = "1.0.0"

__all__ = [
    "ScriptBridge",
    "transliterate",
    "reverse_transliterate",
    "detect_script",
    "translate",
    "translate_in_background",
    "translate_for_chat",
    "clear_caches",
    "cache_stats",
    "get_bridge",
    "set_bridge",
    "__version__",
]
