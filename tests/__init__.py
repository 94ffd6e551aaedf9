# tests\__init__.py
"""
Test Suite for ScriptBridge

- Engine modules (registry, detection, transliteration, correction) are
  tested directly; they are pure functions over static tables.
- Use cases are tested against the in-memory store or a mocked PhraseRepo.
- `test_api_smoke` drives the FastAPI app end to end.
"""
