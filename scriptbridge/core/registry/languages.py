# scriptbridge/core/registry/languages.py
"""
Language profiles, identifier aliases and fallback routing.

Three tables drive resolution:
  * LANGUAGE_PROFILES: one entry per canonical language, with its ISO codes,
    native name and script.
  * LANGUAGE_ALIASES: alternative English spellings and exonyms.
  * FALLBACK_EDGES / SCRIPT_FALLBACK: where a language without phrase data
    borrows its nearest supported neighbour.
"""

from typing import Dict, Tuple

from scriptbridge.core.domain.models import FallbackEdge, LanguageProfile, LATIN

_P = LanguageProfile

LANGUAGE_PROFILES: Tuple[LanguageProfile, ...] = (
    _P("english", "en", "English", LATIN, "eng"),
    # Devanagari
    _P("hindi", "hi", "हिन्दी", "devanagari", "hin"),
    _P("marathi", "mr", "मराठी", "devanagari", "mar"),
    _P("nepali", "ne", "नेपाली", "devanagari", "nep"),
    _P("sanskrit", "sa", "संस्कृतम्", "devanagari", "san"),
    _P("konkani", "kok", "कोंकणी", "devanagari", "kok"),
    _P("maithili", "mai", "मैथिली", "devanagari", "mai"),
    _P("bhojpuri", "bho", "भोजपुरी", "devanagari", "bho"),
    _P("dogri", "doi", "डोगरी", "devanagari", "doi"),
    _P("bodo", "brx", "बड़ो", "devanagari", "brx"),
    _P("sindhi", "sd", "सिन्धी", "devanagari", "snd"),
    # Eastern Brahmic
    _P("bengali", "bn", "বাংলা", "bengali", "ben"),
    _P("assamese", "as", "অসমীয়া", "bengali", "asm"),
    _P("manipuri", "mni", "মৈতৈলোন্", "bengali", "mni"),
    _P("odia", "or", "ଓଡ଼ିଆ", "odia", "ori"),
    # Western Brahmic
    _P("punjabi", "pa", "ਪੰਜਾਬੀ", "gurmukhi", "pan"),
    _P("gujarati", "gu", "ગુજરાતી", "gujarati", "guj"),
    # Southern Brahmic
    _P("tamil", "ta", "தமிழ்", "tamil", "tam"),
    _P("telugu", "te", "తెలుగు", "telugu", "tel"),
    _P("kannada", "kn", "ಕನ್ನಡ", "kannada", "kan"),
    _P("tulu", "tcy", "ತುಳು", "kannada", "tcy"),
    _P("malayalam", "ml", "മലയാളം", "malayalam", "mal"),
    _P("sinhala", "si", "සිංහල", "sinhala", "sin"),
    # South-East Asia
    _P("thai", "th", "ไทย", "thai", "tha"),
    _P("lao", "lo", "ລາວ", "lao", "lao"),
    _P("burmese", "my", "မြန်မာ", "myanmar", "mya"),
    _P("khmer", "km", "ខ្មែរ", "khmer", "khm"),
    # Middle East
    _P("arabic", "ar", "العربية", "arabic", "ara", True),
    _P("urdu", "ur", "اردو", "arabic", "urd", True),
    _P("persian", "fa", "فارسی", "arabic", "fas", True),
    _P("pashto", "ps", "پښتو", "arabic", "pus", True),
    _P("hebrew", "he", "עברית", "hebrew", "heb", True),
    _P("yiddish", "yi", "ייִדיש", "hebrew", "yid", True),
    _P("assyrian", "aii", "ܣܘܪܝܝܐ", "syriac", "aii", True),
    _P("dhivehi", "dv", "ދިވެހި", "thaana", "div", True),
    # Cyrillic
    _P("russian", "ru", "Русский", "cyrillic", "rus"),
    _P("ukrainian", "uk", "Українська", "cyrillic", "ukr"),
    _P("bulgarian", "bg", "Български", "cyrillic", "bul"),
    _P("serbian", "sr", "Српски", "cyrillic", "srp"),
    _P("belarusian", "be", "Беларуская", "cyrillic", "bel"),
    _P("kazakh", "kk", "Қазақша", "cyrillic", "kaz"),
    _P("mongolian", "mn", "Монгол", "cyrillic", "mon"),
    # Other alphabets
    _P("greek", "el", "Ελληνικά", "greek", "ell"),
    _P("georgian", "ka", "ქართული", "georgian", "kat"),
    _P("armenian", "hy", "Հայերեն", "armenian", "hye"),
    # Africa
    _P("amharic", "am", "አማርኛ", "ethiopic", "amh"),
    _P("tigrinya", "ti", "ትግርኛ", "ethiopic", "tir"),
    _P("nko", "nqo", "ߒߞߏ", "nko", "nqo", True),
    _P("tamazight", "tzm", "ⵜⴰⵎⴰⵣⵉⵖⵜ", "tifinagh", "tzm"),
    # Himalaya and eastern India
    _P("tibetan", "bo", "བོད་སྐད", "tibetan", "bod"),
    _P("santali", "sat", "ᱥᱟᱱᱛᱟᱲᱤ", "ol_chiki", "sat"),
    # Americas
    _P("cherokee", "chr", "ᏣᎳᎩ", "cherokee", "chr"),
    _P("inuktitut", "iu", "ᐃᓄᒃᑎᑐᑦ", "canadian_syllabics", "iku"),
    # East Asia
    _P("japanese", "ja", "日本語", "hiragana", "jpn"),
    _P("korean", "ko", "한국어", "hangul", "kor"),
    _P("chinese", "zh", "中文", "han", "zho"),
    # Latin
    _P("spanish", "es", "Español", LATIN, "spa"),
    _P("french", "fr", "Français", LATIN, "fra"),
    _P("german", "de", "Deutsch", LATIN, "deu"),
    _P("italian", "it", "Italiano", LATIN, "ita"),
    _P("portuguese", "pt", "Português", LATIN, "por"),
    _P("dutch", "nl", "Nederlands", LATIN, "nld"),
    _P("swedish", "sv", "Svenska", LATIN, "swe"),
    _P("norwegian", "no", "Norsk", LATIN, "nor"),
    _P("danish", "da", "Dansk", LATIN, "dan"),
    _P("finnish", "fi", "Suomi", LATIN, "fin"),
    _P("icelandic", "is", "Íslenska", LATIN, "isl"),
    _P("polish", "pl", "Polski", LATIN, "pol"),
    _P("czech", "cs", "Čeština", LATIN, "ces"),
    _P("slovak", "sk", "Slovenčina", LATIN, "slk"),
    _P("croatian", "hr", "Hrvatski", LATIN, "hrv"),
    _P("romanian", "ro", "Română", LATIN, "ron"),
    _P("hungarian", "hu", "Magyar", LATIN, "hun"),
    _P("catalan", "ca", "Català", LATIN, "cat"),
    _P("latvian", "lv", "Latviešu", LATIN, "lav"),
    _P("lithuanian", "lt", "Lietuvių", LATIN, "lit"),
    _P("estonian", "et", "Eesti", LATIN, "est"),
    _P("albanian", "sq", "Shqip", LATIN, "sqi"),
    _P("turkish", "tr", "Türkçe", LATIN, "tur"),
    _P("azerbaijani", "az", "Azərbaycanca", LATIN, "aze"),
    _P("uzbek", "uz", "Oʻzbekcha", LATIN, "uzb"),
    _P("indonesian", "id", "Bahasa Indonesia", LATIN, "ind"),
    _P("malay", "ms", "Bahasa Melayu", LATIN, "msa"),
    _P("javanese", "jv", "Basa Jawa", LATIN, "jav"),
    _P("sundanese", "su", "Basa Sunda", LATIN, "sun"),
    _P("balinese", "ban", "Basa Bali", LATIN, "ban"),
    _P("buginese", "bug", "Basa Ugi", LATIN, "bug"),
    _P("vietnamese", "vi", "Tiếng Việt", LATIN, "vie"),
    _P("tagalog", "tl", "Tagalog", LATIN, "tgl"),
    _P("swahili", "sw", "Kiswahili", LATIN, "swa"),
    _P("hausa", "ha", "Hausa", LATIN, "hau"),
    _P("yoruba", "yo", "Yorùbá", LATIN, "yor"),
    _P("zulu", "zu", "isiZulu", LATIN, "zul"),
    _P("afrikaans", "af", "Afrikaans", LATIN, "afr"),
    _P("irish", "ga", "Gaeilge", LATIN, "gle"),
    _P("welsh", "cy", "Cymraeg", LATIN, "cym"),
)

LANGUAGE_ALIASES: Dict[str, str] = {
    "bangla": "bengali",
    "oriya": "odia",
    "farsi": "persian",
    "mandarin": "chinese",
    "simplified chinese": "chinese",
    "traditional chinese": "chinese",
    "hindustani": "hindi",
    "filipino": "tagalog",
    "panjabi": "punjabi",
    "gurmukhi": "punjabi",
    "sinhalese": "sinhala",
    "hangul": "korean",
    "nihongo": "japanese",
    "castilian": "spanish",
    "bokmal": "norwegian",
    "meitei": "manipuri",
    "persian farsi": "persian",
    "iw": "hebrew",
    "in": "indonesian",
    "ji": "yiddish",
    "myanmar": "burmese",
    "cambodian": "khmer",
    "laotian": "lao",
    "divehi": "dhivehi",
    "maldivian": "dhivehi",
    "syriac": "assyrian",
    "berber": "tamazight",
    "tifinagh": "tamazight",
    "santhali": "santali",
    "tigrigna": "tigrinya",
}

# Dialects without their own phrase data. Targets never have an edge of their own.
FALLBACK_EDGES: Tuple[FallbackEdge, ...] = tuple(
    FallbackEdge(source, target)
    for source, target in (
        ("bhojpuri", "hindi"),
        ("awadhi", "hindi"),
        ("magahi", "hindi"),
        ("maithili", "hindi"),
        ("haryanvi", "hindi"),
        ("rajasthani", "hindi"),
        ("marwari", "hindi"),
        ("chhattisgarhi", "hindi"),
        ("garhwali", "hindi"),
        ("kumaoni", "hindi"),
        ("dogri", "hindi"),
        ("konkani", "marathi"),
        ("tulu", "kannada"),
        ("sylheti", "bengali"),
        ("chittagonian", "bengali"),
        ("saraiki", "punjabi"),
        ("cantonese", "chinese"),
        ("hokkien", "chinese"),
        ("egyptian arabic", "arabic"),
        ("levantine arabic", "arabic"),
        ("moroccan arabic", "arabic"),
        ("gulf arabic", "arabic"),
        ("dari", "persian"),
        ("swiss german", "german"),
        ("austrian german", "german"),
        ("brazilian portuguese", "portuguese"),
        ("mexican spanish", "spanish"),
        ("flemish", "dutch"),
    )
)

# Default language for each script: what detection reports, and what a
# language without phrase data borrows. Where a script has a phrase-supported
# language that one is chosen; otherwise the script's main language stands
# for itself. Latin has no entry: Latin languages keep their own identity.
SCRIPT_FALLBACK: Dict[str, str] = {
    "devanagari": "hindi",
    "bengali": "bengali",
    "gurmukhi": "punjabi",
    "gujarati": "gujarati",
    "odia": "odia",
    "tamil": "tamil",
    "telugu": "telugu",
    "kannada": "kannada",
    "malayalam": "malayalam",
    "sinhala": "sinhala",
    "thai": "thai",
    "arabic": "arabic",
    "hebrew": "hebrew",
    "cyrillic": "russian",
    "greek": "greek",
    "georgian": "georgian",
    "armenian": "armenian",
    "hiragana": "japanese",
    "hangul": "korean",
    "han": "chinese",
    "katakana": "japanese",
    "lao": "lao",
    "myanmar": "burmese",
    "khmer": "khmer",
    "ethiopic": "amharic",
    "tibetan": "tibetan",
    "thaana": "dhivehi",
    "syriac": "assyrian",
    "nko": "nko",
    "tifinagh": "tamazight",
    "ol_chiki": "santali",
    "javanese": "javanese",
    "balinese": "balinese",
    "sundanese": "sundanese",
    "buginese": "buginese",
    "baybayin": "tagalog",
    "meetei_mayek": "manipuri",
    "mongolian": "mongolian",
    "cherokee": "cherokee",
    "canadian_syllabics": "inuktitut",
    "bopomofo": "chinese",
}

# Languages with their own column in the phrase store.
PHRASE_LANGUAGES = frozenset({
    "english",
    "hindi", "bengali", "telugu", "tamil", "kannada", "malayalam", "marathi",
    "gujarati", "punjabi", "odia", "urdu", "sinhala",
    "arabic", "persian", "hebrew", "turkish",
    "russian", "greek", "georgian", "armenian",
    "thai", "japanese", "korean", "chinese", "vietnamese", "indonesian",
    "spanish", "french", "german", "italian", "portuguese", "dutch", "swahili",
})
