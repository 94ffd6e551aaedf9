# tests/test_public_api.py
from unittest.mock import AsyncMock

import pytest

import scriptbridge
from scriptbridge import api
from scriptbridge.api import ScriptBridge
from scriptbridge.core.domain.models import TranslationMethod


@pytest.fixture
def bridge(translator):
    bridge = ScriptBridge(translator, background_workers=1)
    yield bridge
    bridge.shutdown()


@pytest.fixture
def installed_bridge(bridge):
    scriptbridge.set_bridge(bridge)
    yield bridge
    scriptbridge.set_bridge(None)


def test_module_level_functions(installed_bridge):
    assert scriptbridge.transliterate("namaste", "hindi") == "नमस्ते"
    assert scriptbridge.reverse_transliterate("नमस्ते", "hindi") == "nmste"

    detection = scriptbridge.detect_script("नमस्ते")
    assert detection.script == "Devanagari"
    assert detection.language == "hindi"
    assert detection.is_latin is False


@pytest.mark.asyncio
async def test_module_level_translate(installed_bridge):
    result = await scriptbridge.translate("thank you", "english", "hindi")
    assert result.text == "धन्यवाद"
    chat = await scriptbridge.translate_for_chat("धन्यवाद", "hindi", "tamil")
    assert chat.receiver_view == "நன்றி"


def test_transliterate_is_total(bridge, monkeypatch):
    def boom(text, language):
        raise RuntimeError("broken table")

    monkeypatch.setattr(api.transliterator, "transliterate", boom)
    assert bridge.transliterate("namaste", "hindi") == "namaste"


@pytest.mark.asyncio
async def test_translate_is_total(bridge, translator):
    translator.translate = AsyncMock(side_effect=RuntimeError("boom"))
    result = await bridge.translate("thank you", "english", "hindi")
    assert result.text == "thank you"
    assert result.method == TranslationMethod.PASSTHROUGH
    assert result.confidence == 0.0


@pytest.mark.asyncio
async def test_background_translation_on_running_loop(bridge):
    received = []
    task = bridge.translate_in_background("thank you", "english", "hindi", received.append)
    await task
    assert received[0].text == "धन्यवाद"


def test_background_translation_without_loop(bridge):
    received = []
    future = bridge.translate_in_background("thank you", "english", "hindi", received.append)
    future.result(timeout=5)
    assert received[0].text == "धन्यवाद"


@pytest.mark.asyncio
async def test_callback_failure_does_not_propagate(bridge):
    def bad_callback(result):
        raise ValueError("ui gone")

    task = bridge.translate_in_background("thank you", "english", "hindi", bad_callback)
    assert await task is None


@pytest.mark.asyncio
async def test_cache_stats_and_clear(bridge):
    await bridge.translate("thank you", "english", "hindi")
    bridge.detect_script("привет")

    stats = bridge.cache_stats()
    assert stats["results"] == 1
    assert stats["detections"] == 1
    assert set(stats) == {"results", "detections", "reverse_maps"}

    bridge.clear_caches()
    stats = bridge.cache_stats()
    assert stats["results"] == 0
    assert stats["detections"] == 0
