from .chat_translation import TranslateForChat
from .translate_text import PivotTranslator

__all__ = ["PivotTranslator", "TranslateForChat"]
