# scriptbridge/core/use_cases/chat_translation.py
from typing import Optional

import structlog

from scriptbridge.core.domain.models import ChatTranslation
from scriptbridge.core.engine.language_resolver import is_latin_script_language, normalize_language
from scriptbridge.core.engine.script_detector import is_latin_text
from scriptbridge.core.engine.transliterator import transliterate
from scriptbridge.core.use_cases.translate_text import PivotTranslator

logger = structlog.get_logger()


class TranslateForChat:
    """
    Use Case: prepare one chat message for both participants.

    The sender sees their message in their own script (romanized typing is
    converted), the receiver sees the pivot translation into their language.
    """

    def __init__(self, translator: PivotTranslator):
        self.translator = translator

    async def execute(self, text: str, sender: Optional[str], receiver: str) -> ChatTranslation:
        text = text or ""
        if not text.strip():
            return ChatTranslation(original_text=text, sender_view=text, receiver_view=text)

        sender_lang = normalize_language(sender) if sender else None
        result = await self.translator.translate(text, sender_lang, receiver)

        sender_view = text
        if sender_lang and is_latin_text(text) and not is_latin_script_language(sender_lang):
            sender_view = transliterate(text, sender_lang)

        logger.info(
            "chat_message_prepared",
            sender=result.source_language,
            receiver=result.target_language,
            method=result.method.value,
        )
        return ChatTranslation(
            original_text=text,
            sender_view=sender_view,
            receiver_view=result.text,
            english_core=result.english_pivot,
            was_translated=result.is_translated,
            was_transliterated=result.is_transliterated or sender_view != text,
            confidence=result.confidence,
        )
