# scriptbridge/core/engine/semantic_patterns.py
"""
Cross-lingual semantic patterns.

A small set of chat intents (greetings, thanks, yes/no, ...) recognised by
how they sound in many languages and rendered in the receiver's language.
Used by the pivot translator when the phrase store has nothing.

Matching works on the romanized pivot text:
  1. every trigger found on word boundaries is replaced (longest first);
  2. failing that, the whole text is compared by consonant skeleton, so a
     lossy romanization such as "nmste" still reaches "namaste".
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import lru_cache
from typing import Dict, List, Optional, Pattern, Tuple

from scriptbridge.core.engine.language_resolver import effective_language

MIN_SKELETON_LENGTH = 3

_VOWELS = frozenset("aeiou")
_NON_LETTERS_RE = re.compile(r"[^a-z]")


@dataclass(frozen=True)
class SemanticPattern:
    category: str
    triggers: Tuple[str, ...]
    renderings: Dict[str, str]


SEMANTIC_PATTERNS: Tuple[SemanticPattern, ...] = (
    SemanticPattern(
        "greeting",
        ("hello", "hi", "hey", "namaste", "namaskar", "namaskaram", "nomoskar",
         "vanakkam", "salaam", "salam", "assalam alaikum", "sat sri akal",
         "hola", "bonjour", "ciao", "konnichiwa", "annyeong", "ni hao",
         "privet", "marhaba"),
        {
            "english": "hello", "hindi": "नमस्ते", "marathi": "नमस्कार",
            "tamil": "வணக்கம்", "telugu": "నమస్కారం", "kannada": "ನಮಸ್ಕಾರ",
            "malayalam": "നമസ്കാരം", "bengali": "নমস্কার", "gujarati": "નમસ્તે",
            "punjabi": "ਸਤ ਸ੍ਰੀ ਅਕਾਲ", "urdu": "السلام علیکم", "arabic": "مرحبا",
            "russian": "привет", "japanese": "こんにちは", "korean": "안녕하세요",
            "chinese": "你好", "spanish": "hola", "french": "bonjour",
            "german": "hallo", "italian": "ciao", "portuguese": "olá",
        },
    ),
    SemanticPattern(
        "thanks",
        ("thank you", "thanks", "dhanyavad", "dhanyavaad", "dhanyavadalu",
         "shukriya", "nandri", "nanri", "dhonnobad", "abhar", "gracias",
         "merci", "danke", "grazie", "obrigado", "arigato", "spasibo",
         "shukran", "xie xie"),
        {
            "english": "thank you", "hindi": "धन्यवाद", "marathi": "धन्यवाद",
            "tamil": "நன்றி", "telugu": "ధన్యవాదాలు", "kannada": "ಧನ್ಯವಾದ",
            "malayalam": "നന്ദി", "bengali": "ধন্যবাদ", "gujarati": "આભાર",
            "punjabi": "ਧੰਨਵਾਦ", "urdu": "شکریہ", "arabic": "شكرا",
            "russian": "спасибо", "japanese": "ありがとう", "korean": "감사합니다",
            "chinese": "谢谢", "spanish": "gracias", "french": "merci",
            "german": "danke", "italian": "grazie", "portuguese": "obrigado",
        },
    ),
    SemanticPattern(
        "goodbye",
        ("goodbye", "bye", "alvida", "khuda hafiz", "adios", "au revoir",
         "tschuss", "arrivederci", "sayonara", "zaijian", "do svidaniya"),
        {
            "english": "goodbye", "hindi": "अलविदा", "bengali": "বিদায়",
            "urdu": "خدا حافظ", "arabic": "مع السلامة", "russian": "до свидания",
            "japanese": "さようなら", "korean": "안녕히 가세요", "chinese": "再见",
            "spanish": "adiós", "french": "au revoir", "german": "auf wiedersehen",
            "italian": "arrivederci", "portuguese": "adeus",
        },
    ),
    SemanticPattern(
        "yes",
        ("yes", "haan", "ji haan", "avunu", "hyan", "oui", "sim", "naam"),
        {
            "english": "yes", "hindi": "हाँ", "tamil": "ஆம்", "telugu": "అవును",
            "bengali": "হ্যাঁ", "urdu": "ہاں", "arabic": "نعم", "russian": "да",
            "japanese": "はい", "korean": "네", "chinese": "是", "spanish": "sí",
            "french": "oui", "german": "ja", "italian": "sì", "portuguese": "sim",
        },
    ),
    SemanticPattern(
        "no",
        ("no", "nahi", "nahin", "illai", "kaadu", "non", "nein", "nao",
         "nyet", "iie"),
        {
            "english": "no", "hindi": "नहीं", "tamil": "இல்லை", "telugu": "కాదు",
            "bengali": "না", "urdu": "نہیں", "arabic": "لا", "russian": "нет",
            "japanese": "いいえ", "korean": "아니요", "chinese": "不",
            "spanish": "no", "french": "non", "german": "nein", "italian": "no",
            "portuguese": "não",
        },
    ),
    SemanticPattern(
        "how_are_you",
        ("how are you", "kaise ho", "kaise hain", "aap kaise hain", "kya haal",
         "eppadi irukkeenga", "ela unnaru", "kemon acho", "kem chho",
         "como estas", "comment ca va", "wie gehts", "come stai", "como vai",
         "kak dela", "ogenki desu ka", "ni hao ma"),
        {
            "english": "how are you", "hindi": "आप कैसे हैं",
            "tamil": "எப்படி இருக்கீங்க", "telugu": "ఎలా ఉన్నారు",
            "bengali": "কেমন আছেন", "urdu": "آپ کیسے ہیں", "arabic": "كيف حالك",
            "russian": "как дела", "japanese": "お元気ですか", "korean": "잘 지내세요",
            "chinese": "你好吗", "spanish": "cómo estás", "french": "comment ça va",
            "german": "wie geht's", "italian": "come stai", "portuguese": "como vai",
        },
    ),
    SemanticPattern(
        "good_morning",
        ("good morning", "suprabhat", "shubh prabhat", "kaalai vanakkam",
         "subho sokal", "buenos dias", "guten morgen", "buongiorno", "bom dia",
         "ohayo", "dobroye utro", "sabah al khair"),
        {
            "english": "good morning", "hindi": "सुप्रभात", "tamil": "காலை வணக்கம்",
            "bengali": "সুপ্রভাত", "urdu": "صبح بخیر", "arabic": "صباح الخير",
            "russian": "доброе утро", "japanese": "おはようございます",
            "korean": "좋은 아침", "chinese": "早上好", "spanish": "buenos días",
            "french": "bonjour", "german": "guten morgen", "italian": "buongiorno",
            "portuguese": "bom dia",
        },
    ),
    SemanticPattern(
        "good_night",
        ("good night", "shubh ratri", "shab bakhair", "buenas noches",
         "bonne nuit", "gute nacht", "buona notte", "boa noite", "oyasumi",
         "spokoynoy nochi"),
        {
            "english": "good night", "hindi": "शुभ रात्रि", "urdu": "شب بخیر",
            "arabic": "تصبح على خير", "russian": "спокойной ночи",
            "japanese": "おやすみなさい", "korean": "안녕히 주무세요", "chinese": "晚安",
            "spanish": "buenas noches", "french": "bonne nuit", "german": "gute nacht",
            "italian": "buona notte", "portuguese": "boa noite",
        },
    ),
    SemanticPattern(
        "sorry",
        ("sorry", "maaf", "maaf kijiye", "mafi", "lo siento", "desole",
         "entschuldigung", "scusa", "desculpe", "gomen", "gomennasai",
         "izvinite", "aasif"),
        {
            "english": "sorry", "hindi": "माफ़ कीजिए", "urdu": "معاف کیجیے",
            "arabic": "آسف", "russian": "извините", "japanese": "ごめんなさい",
            "korean": "미안합니다", "chinese": "对不起", "spanish": "lo siento",
            "french": "désolé", "german": "entschuldigung", "italian": "scusa",
            "portuguese": "desculpe",
        },
    ),
    SemanticPattern(
        "please",
        ("please", "kripya", "meherbani", "por favor", "sil vous plait",
         "bitte", "per favore", "onegaishimasu", "pozhaluysta", "min fadlak"),
        {
            "english": "please", "hindi": "कृपया", "arabic": "من فضلك",
            "russian": "пожалуйста", "japanese": "お願いします", "korean": "부탁합니다",
            "chinese": "请", "spanish": "por favor", "french": "s'il vous plaît",
            "german": "bitte", "italian": "per favore", "portuguese": "por favor",
        },
    ),
    SemanticPattern(
        "love",
        ("love", "pyar", "pyaar", "ishq", "mohabbat", "kadhal", "prema",
         "bhalobasha", "amor", "amour", "liebe", "amore", "ai shiteru",
         "lyubov", "hubb"),
        {
            "english": "love", "hindi": "प्यार", "tamil": "காதல்", "telugu": "ప్రేమ",
            "bengali": "ভালোবাসা", "urdu": "محبت", "arabic": "حب", "russian": "любовь",
            "japanese": "愛", "korean": "사랑", "chinese": "爱", "spanish": "amor",
            "french": "amour", "german": "liebe", "italian": "amore",
            "portuguese": "amor",
        },
    ),
    SemanticPattern(
        "friend",
        ("friend", "dost", "yaar", "nanban", "snehitudu", "bondhu", "amigo",
         "freund", "amico", "tomodachi", "chingu", "sadiq"),
        {
            "english": "friend", "hindi": "दोस्त", "tamil": "நண்பன்",
            "telugu": "స్నేహితుడు", "bengali": "বন্ধু", "urdu": "دوست",
            "arabic": "صديق", "russian": "друг", "japanese": "友達", "korean": "친구",
            "chinese": "朋友", "spanish": "amigo", "french": "ami",
            "german": "freund", "italian": "amico", "portuguese": "amigo",
        },
    ),
)


def consonant_skeleton(text: str) -> str:
    """
    Letters only, vowels after the first letter dropped, doubled letters
    collapsed: "vanakkam" and "vnnkkm" both give "vnkm".
    """
    letters = _NON_LETTERS_RE.sub("", (text or "").lower())
    if not letters:
        return ""
    kept = letters[0] + "".join(c for c in letters[1:] if c not in _VOWELS)
    out = []
    for c in kept:
        if not out or out[-1] != c:
            out.append(c)
    return "".join(out)


@lru_cache(maxsize=1)
def _trigger_index() -> Tuple[Tuple[Pattern[str], SemanticPattern], ...]:
    pairs: List[Tuple[str, SemanticPattern]] = [
        (trigger, pattern) for pattern in SEMANTIC_PATTERNS for trigger in pattern.triggers
    ]
    pairs.sort(key=lambda tp: len(tp[0]), reverse=True)
    return tuple(
        (re.compile(r"\b" + re.escape(trigger) + r"\b", re.IGNORECASE), pattern)
        for trigger, pattern in pairs
    )


@lru_cache(maxsize=1)
def _skeleton_index() -> Dict[str, SemanticPattern]:
    index: Dict[str, SemanticPattern] = {}
    for pattern in SEMANTIC_PATTERNS:
        for trigger in pattern.triggers:
            skeleton = consonant_skeleton(trigger)
            if len(skeleton) >= MIN_SKELETON_LENGTH:
                index.setdefault(skeleton, pattern)
    return index


def match_category(text: str) -> Optional[str]:
    """Category of the first pattern the text triggers, if any."""
    for regex, pattern in _trigger_index():
        if regex.search(text or ""):
            return pattern.category
    pattern = _skeleton_index().get(consonant_skeleton(text))
    return pattern.category if pattern else None


def render(text: str, target: str) -> Optional[str]:
    """
    Rewrite recognised intents in `text` into the target language.

    Returns None when nothing matched or the target has no rendering for a
    matched intent.
    """
    if not text or not text.strip():
        return None
    language = effective_language(target)

    # Placeholders keep a rendering from being re-matched by a shorter trigger.
    slots: List[str] = []
    rewritten = text
    for regex, pattern in _trigger_index():
        if not regex.search(rewritten):
            continue
        rendering = pattern.renderings.get(language)
        if rendering is None:
            return None
        slots.append(rendering)
        rewritten = regex.sub(f"\x00{len(slots) - 1}\x00", rewritten)

    if slots:
        return re.sub(r"\x00(\d+)\x00", lambda m: slots[int(m.group(1))], rewritten)

    skeleton = consonant_skeleton(text)
    if len(skeleton) < MIN_SKELETON_LENGTH:
        return None
    pattern = _skeleton_index().get(skeleton)
    if pattern is None:
        return None
    return pattern.renderings.get(language)
