# scriptbridge/api.py
"""
Public entry points.

Every function here is total: internal failures are logged and the caller
gets its input back (or a passthrough result) instead of an exception.

    >>> from scriptbridge import transliterate, detect_script
    >>> transliterate("namaste", "hindi")
    'नमस्ते'
    >>> detect_script("नमस्ते").language
    'hindi'
"""

import asyncio
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Callable, Dict, Optional, Union

import structlog

from scriptbridge.core.domain.models import (
    ChatTranslation,
    ScriptDetection,
    TranslationMethod,
    TranslationResult,
)
from scriptbridge.core.engine import reverse_transliterator, transliterator
from scriptbridge.core.engine.language_resolver import DEFAULT_LANGUAGE, normalize_language
from scriptbridge.core.engine.script_detector import ScriptDetector
from scriptbridge.core.use_cases.chat_translation import TranslateForChat
from scriptbridge.core.use_cases.translate_text import PivotTranslator

logger = structlog.get_logger()

ResultCallback = Callable[[TranslationResult], Any]


class ScriptBridge:
    """Facade over the translator, the detector and the transliteration engine."""

    def __init__(
        self,
        translator: PivotTranslator,
        chat: Optional[TranslateForChat] = None,
        background_workers: int = 4,
    ):
        self.translator = translator
        self.detector: ScriptDetector = translator.detector
        self.chat = chat or TranslateForChat(translator)
        self.background_workers = background_workers
        self._executor: Optional[ThreadPoolExecutor] = None
        self._executor_lock = threading.Lock()

    # --- Transliteration ---

    def transliterate(self, text: str, language: str) -> str:
        try:
            return transliterator.transliterate(text, language)
        except Exception as e:
            logger.error("transliteration_failed", language=language, error=str(e), exc_info=True)
            return text

    def reverse_transliterate(self, text: str, language: Optional[str] = None) -> str:
        try:
            return reverse_transliterator.reverse_transliterate(text, language)
        except Exception as e:
            logger.error("reverse_transliteration_failed", language=language, error=str(e), exc_info=True)
            return text

    def detect_script(self, text: str) -> ScriptDetection:
        try:
            return self.detector.detect(text)
        except Exception as e:
            logger.error("script_detection_failed", error=str(e), exc_info=True)
            return ScriptDetection(confidence=0.0)

    # --- Translation ---

    async def translate(self, text: str, source: Optional[str], target: str) -> TranslationResult:
        try:
            return await self.translator.translate(text, source, target)
        except Exception as e:
            logger.error("translation_failed", source=source, target=target, error=str(e), exc_info=True)
            return TranslationResult(
                text=text or "",
                original_text=text or "",
                source_language=normalize_language(source) if source else DEFAULT_LANGUAGE,
                target_language=normalize_language(target),
                confidence=0.0,
                method=TranslationMethod.PASSTHROUGH,
            )

    def translate_in_background(
        self,
        text: str,
        source: Optional[str],
        target: str,
        callback: ResultCallback,
    ) -> Union["asyncio.Task[None]", "Future[None]"]:
        """
        Translate without blocking the caller, then hand the result to
        `callback`. Runs as a task on the current event loop, or on a small
        thread pool when no loop is running.
        """

        async def _run() -> None:
            result = await self.translate(text, source, target)
            try:
                callback(result)
            except Exception as e:
                logger.error("translation_callback_failed", error=str(e), exc_info=True)

        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            loop = None

        if loop is not None:
            return loop.create_task(_run())
        return self._get_executor().submit(asyncio.run, _run())

    async def translate_for_chat(self, text: str, sender: Optional[str], receiver: str) -> ChatTranslation:
        try:
            return await self.chat.execute(text, sender, receiver)
        except Exception as e:
            logger.error("chat_translation_failed", sender=sender, receiver=receiver, error=str(e), exc_info=True)
            return ChatTranslation(original_text=text or "", sender_view=text or "", receiver_view=text or "")

    # --- Cache administration ---

    def clear_caches(self) -> None:
        self.translator.clear_cache()
        self.detector.clear()
        logger.info("caches_cleared")

    def cache_stats(self) -> Dict[str, int]:
        return {
            "results": len(self.translator.cache),
            "detections": len(self.detector.cache),
            "reverse_maps": reverse_transliterator.reverse_maps_built(),
        }

    def shutdown(self) -> None:
        with self._executor_lock:
            if self._executor is not None:
                self._executor.shutdown(wait=True)
                self._executor = None

    def _get_executor(self) -> ThreadPoolExecutor:
        with self._executor_lock:
            if self._executor is None:
                self._executor = ThreadPoolExecutor(
                    max_workers=self.background_workers,
                    thread_name_prefix="scriptbridge-translate",
                )
            return self._executor


# ---------------------------------------------------------------------------
# Module-level API backed by the application container
# ---------------------------------------------------------------------------

_bridge: Optional[ScriptBridge] = None
_bridge_lock = threading.Lock()


def get_bridge() -> ScriptBridge:
    global _bridge
    if _bridge is None:
        with _bridge_lock:
            if _bridge is None:
                from scriptbridge.shared.config import settings
                from scriptbridge.shared.container import container

                _bridge = ScriptBridge(
                    container.translator(),
                    container.chat_translation(),
                    background_workers=settings.BACKGROUND_WORKERS,
                )
    return _bridge


def set_bridge(bridge: Optional[ScriptBridge]) -> None:
    """Replace the bridge behind the module-level functions (None resets it)."""
    global _bridge
    with _bridge_lock:
        _bridge = bridge


def transliterate(text: str, language: str) -> str:
    return get_bridge().transliterate(text, language)


def reverse_transliterate(text: str, language: Optional[str] = None) -> str:
    return get_bridge().reverse_transliterate(text, language)


def detect_script(text: str) -> ScriptDetection:
    return get_bridge().detect_script(text)


async def translate(text: str, source: Optional[str], target: str) -> TranslationResult:
    return await get_bridge().translate(text, source, target)


def translate_in_background(text: str, source: Optional[str], target: str, callback: ResultCallback):
    return get_bridge().translate_in_background(text, source, target, callback)


async def translate_for_chat(text: str, sender: Optional[str], receiver: str) -> ChatTranslation:
    return await get_bridge().translate_for_chat(text, sender, receiver)


def clear_caches() -> None:
    get_bridge().clear_caches()


def cache_stats() -> Dict[str, int]:
    return get_bridge().cache_stats()
