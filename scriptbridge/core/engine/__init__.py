"""
Transliteration engine: script registry lookups, language resolution,
detection, forward/reverse conversion, phonetic correction and caching.

All functions here are synchronous and work over immutable registry state.
"""
