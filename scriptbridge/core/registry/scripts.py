# scriptbridge/core/registry/scripts.py
"""
Declarative writing-system tables.

Each ScriptBlock pairs a Unicode range with the phonetic maps used by the
forward transliterator. The reverse transliterator inverts the union of the
consonant, vowel and modifier maps (in that order, later keys winning), so
within every map alias spellings are listed *before* the spelling we want
back on the reverse path (e.g. 'w' before 'v', 'f' before 'ph').

Conventions shared by the Brahmic tables:
  * 'rri' is vocalic r (ऋ) so that ordinary 'ri' stays r + i.
  * '.n' is the anusvara and '.h' the visarga, so 'am' / 'ah' in words such
    as "namaste" keep their consonant reading.
  * '~n' is the palatal nasal (ञ) and 'j~n' the jña conjunct (ज्ञ), so plain
    'ny' and 'gn' stay n + y ("dhanyavaad") and g + n ("agni").
"""

from typing import Dict, Mapping

from scriptbridge.core.domain.models import ScriptBlock

# Vowel keys shared by the abugida tables, in map order.
_BRAHMIC_VOWEL_KEYS = (
    "a", "aa", "i", "ii", "ee", "u", "uu", "oo",
    "e", "ai", "o", "au", "rri", ".n", ".h",
)


def _vowels(*glyphs: str) -> Dict[str, str]:
    return {k: g for k, g in zip(_BRAHMIC_VOWEL_KEYS, glyphs) if g}


def _signs(*glyphs: str) -> Dict[str, str]:
    # Same key order as _vowels minus the inherent 'a'.
    return {k: g for k, g in zip(_BRAHMIC_VOWEL_KEYS[1:], glyphs) if g}


DEVANAGARI = ScriptBlock(
    key="devanagari",
    name="Devanagari",
    start=0x0900,
    end=0x097F,
    virama="्",
    inherent_vowel="a",
    vowel_map=_vowels("अ", "आ", "इ", "ई", "ई", "उ", "ऊ", "ऊ", "ए", "ऐ", "ओ", "औ", "ऋ", "अं", "अः"),
    consonant_map={
        "q": "क़", "k": "क", "kh": "ख", "g": "ग", "gh": "घ", "ng": "ङ",
        "ch": "च", "chh": "छ", "z": "ज़", "j": "ज", "jh": "झ", "~n": "ञ",
        "tt": "ट", "tth": "ठ", "dd": "ड", "ddh": "ढ", "nn": "ण",
        "t": "त", "th": "थ", "d": "द", "dh": "ध", "n": "न",
        "p": "प", "f": "फ", "ph": "फ", "b": "ब", "bh": "भ", "m": "म",
        "y": "य", "r": "र", "l": "ल", "w": "व", "v": "व",
        "sh": "श", "shh": "ष", "s": "स", "h": "ह",
        "x": "क्ष", "tr": "त्र", "j~n": "ज्ञ",
    },
    modifier_map=_signs("ा", "ि", "ी", "ी", "ु", "ू", "ू", "े", "ै", "ो", "ौ", "ृ", "ं", "ः"),
)

BENGALI = ScriptBlock(
    key="bengali",
    name="Bengali",
    start=0x0980,
    end=0x09FF,
    virama="্",
    inherent_vowel="a",
    vowel_map=_vowels("অ", "আ", "ই", "ঈ", "ঈ", "উ", "ঊ", "ঊ", "এ", "ঐ", "ও", "ঔ", "ঋ", "অং", "অঃ"),
    consonant_map={
        "q": "ক", "k": "ক", "kh": "খ", "g": "গ", "gh": "ঘ", "ng": "ঙ",
        "ch": "চ", "chh": "ছ", "z": "জ", "j": "জ", "jh": "ঝ", "~n": "ঞ",
        "tt": "ট", "tth": "ঠ", "dd": "ড", "ddh": "ঢ", "nn": "ণ",
        "t": "ত", "th": "থ", "d": "দ", "dh": "ধ", "n": "ন",
        "p": "প", "f": "ফ", "ph": "ফ", "b": "ব", "v": "ভ", "bh": "ভ", "m": "ম",
        "y": "য", "r": "র", "l": "ল", "w": "ও",
        "sh": "শ", "shh": "ষ", "s": "স", "h": "হ",
        "x": "ক্ষ", "tr": "ত্র", "j~n": "জ্ঞ",
    },
    modifier_map=_signs("া", "ি", "ী", "ী", "ু", "ূ", "ূ", "ে", "ৈ", "ো", "ৌ", "ৃ", "ং", "ঃ"),
)

GURMUKHI = ScriptBlock(
    key="gurmukhi",
    name="Gurmukhi",
    start=0x0A00,
    end=0x0A7F,
    virama="੍",
    inherent_vowel="a",
    vowel_map=_vowels("ਅ", "ਆ", "ਇ", "ਈ", "ਈ", "ਉ", "ਊ", "ਊ", "ਏ", "ਐ", "ਓ", "ਔ", "", "ਅਂ", "ਅਃ"),
    consonant_map={
        "q": "ਕ", "k": "ਕ", "kh": "ਖ", "g": "ਗ", "gh": "ਘ", "ng": "ਙ",
        "ch": "ਚ", "chh": "ਛ", "j": "ਜ", "jh": "ਝ", "~n": "ਞ",
        "tt": "ਟ", "tth": "ਠ", "dd": "ਡ", "ddh": "ਢ", "nn": "ਣ",
        "t": "ਤ", "th": "ਥ", "d": "ਦ", "dh": "ਧ", "n": "ਨ",
        "p": "ਪ", "f": "ਫ", "ph": "ਫ", "b": "ਬ", "bh": "ਭ", "m": "ਮ",
        "y": "ਯ", "r": "ਰ", "l": "ਲ", "w": "ਵ", "v": "ਵ",
        "sh": "ਸ਼", "s": "ਸ", "h": "ਹ",
        "x": "ਕ੍ਸ਼", "z": "ਜ਼",
    },
    modifier_map=_signs("ਾ", "ਿ", "ੀ", "ੀ", "ੁ", "ੂ", "ੂ", "ੇ", "ੈ", "ੋ", "ੌ", "", "ਂ", "ਃ"),
)

GUJARATI = ScriptBlock(
    key="gujarati",
    name="Gujarati",
    start=0x0A80,
    end=0x0AFF,
    virama="્",
    inherent_vowel="a",
    vowel_map=_vowels("અ", "આ", "ઇ", "ઈ", "ઈ", "ઉ", "ઊ", "ઊ", "એ", "ઐ", "ઓ", "ઔ", "ઋ", "અં", "અઃ"),
    consonant_map={
        "q": "ક", "k": "ક", "kh": "ખ", "g": "ગ", "gh": "ઘ", "ng": "ઙ",
        "ch": "ચ", "chh": "છ", "z": "જ", "j": "જ", "jh": "ઝ", "~n": "ઞ",
        "tt": "ટ", "tth": "ઠ", "dd": "ડ", "ddh": "ઢ", "nn": "ણ",
        "t": "ત", "th": "થ", "d": "દ", "dh": "ધ", "n": "ન",
        "p": "પ", "f": "ફ", "ph": "ફ", "b": "બ", "bh": "ભ", "m": "મ",
        "y": "ય", "r": "ર", "l": "લ", "w": "વ", "v": "વ",
        "sh": "શ", "shh": "ષ", "s": "સ", "h": "હ",
        "x": "ક્ષ", "tr": "ત્ર", "j~n": "જ્ઞ",
    },
    modifier_map=_signs("ા", "િ", "ી", "ી", "ુ", "ૂ", "ૂ", "ે", "ૈ", "ો", "ૌ", "ૃ", "ં", "ઃ"),
)

ODIA = ScriptBlock(
    key="odia",
    name="Odia",
    start=0x0B00,
    end=0x0B7F,
    virama="୍",
    inherent_vowel="a",
    vowel_map=_vowels("ଅ", "ଆ", "ଇ", "ଈ", "ଈ", "ଉ", "ଊ", "ଊ", "ଏ", "ଐ", "ଓ", "ଔ", "ଋ", "ଅଂ", "ଅଃ"),
    consonant_map={
        "q": "କ", "k": "କ", "kh": "ଖ", "g": "ଗ", "gh": "ଘ", "ng": "ଙ",
        "ch": "ଚ", "chh": "ଛ", "z": "ଜ", "j": "ଜ", "jh": "ଝ", "~n": "ଞ",
        "tt": "ଟ", "tth": "ଠ", "dd": "ଡ", "ddh": "ଢ", "nn": "ଣ",
        "t": "ତ", "th": "ଥ", "d": "ଦ", "dh": "ଧ", "n": "ନ",
        "p": "ପ", "f": "ଫ", "ph": "ଫ", "b": "ବ", "bh": "ଭ", "m": "ମ",
        "y": "ଯ", "r": "ର", "l": "ଲ", "w": "ୱ", "v": "ୱ",
        "sh": "ଶ", "shh": "ଷ", "s": "ସ", "h": "ହ",
        "x": "କ୍ଷ", "tr": "ତ୍ର", "j~n": "ଜ୍ଞ",
    },
    modifier_map=_signs("ା", "ି", "ୀ", "ୀ", "ୁ", "ୂ", "ୂ", "େ", "ୈ", "ୋ", "ୌ", "ୃ", "ଂ", "ଃ"),
)

TAMIL = ScriptBlock(
    key="tamil",
    name="Tamil",
    start=0x0B80,
    end=0x0BFF,
    virama="்",
    inherent_vowel="a",
    vowel_map=_vowels("அ", "ஆ", "இ", "ஈ", "ஈ", "உ", "ஊ", "ஊ", "எ", "ஐ", "ஒ", "ஔ", "", "", "அஃ"),
    consonant_map={
        "q": "க", "g": "க", "k": "க", "ng": "ங",
        "s": "ச", "ch": "ச", "z": "ஜ", "j": "ஜ", "~n": "ஞ",
        "dd": "ட", "tt": "ட", "nn": "ண",
        "d": "த", "t": "த", "n": "ந",
        "b": "ப", "f": "ப", "p": "ப", "m": "ம",
        "y": "ய", "r": "ர", "l": "ல", "w": "வ", "v": "வ",
        "zh": "ழ", "ll": "ள", "rr": "ற", "nh": "ன", "sh": "ஷ", "h": "ஹ",
        "x": "க்ஷ",
    },
    modifier_map=_signs("ா", "ி", "ீ", "ீ", "ு", "ூ", "ூ", "ெ", "ை", "ொ", "ௌ", "", "", "ஃ"),
)

TELUGU = ScriptBlock(
    key="telugu",
    name="Telugu",
    start=0x0C00,
    end=0x0C7F,
    virama="్",
    inherent_vowel="a",
    vowel_map=_vowels("అ", "ఆ", "ఇ", "ఈ", "ఈ", "ఉ", "ఊ", "ఊ", "ఎ", "ఐ", "ఒ", "ఔ", "ఋ", "అం", "అః"),
    consonant_map={
        "q": "క", "k": "క", "kh": "ఖ", "g": "గ", "gh": "ఘ", "ng": "ఙ",
        "ch": "చ", "chh": "ఛ", "z": "జ", "j": "జ", "jh": "ఝ", "~n": "ఞ",
        "tt": "ట", "tth": "ఠ", "dd": "డ", "ddh": "ఢ",
        "t": "త", "th": "థ", "d": "ద", "dh": "ధ", "n": "న", "N": "ణ",
        "p": "ప", "f": "ఫ", "ph": "ఫ", "b": "బ", "bh": "భ", "m": "మ",
        "y": "య", "r": "ర", "l": "ల", "w": "వ", "v": "వ",
        "sh": "శ", "shh": "ష", "s": "స", "h": "హ",
        "x": "క్ష", "tr": "త్ర", "j~n": "జ్ఞ",
    },
    modifier_map=_signs("ా", "ి", "ీ", "ీ", "ు", "ూ", "ూ", "ె", "ై", "ొ", "ౌ", "ృ", "ం", "ః"),
)

KANNADA = ScriptBlock(
    key="kannada",
    name="Kannada",
    start=0x0C80,
    end=0x0CFF,
    virama="್",
    inherent_vowel="a",
    vowel_map=_vowels("ಅ", "ಆ", "ಇ", "ಈ", "ಈ", "ಉ", "ಊ", "ಊ", "ಎ", "ಐ", "ಒ", "ಔ", "ಋ", "ಅಂ", "ಅಃ"),
    consonant_map={
        "q": "ಕ", "k": "ಕ", "kh": "ಖ", "g": "ಗ", "gh": "ಘ", "ng": "ಙ",
        "ch": "ಚ", "chh": "ಛ", "z": "ಜ", "j": "ಜ", "jh": "ಝ", "~n": "ಞ",
        "tt": "ಟ", "tth": "ಠ", "dd": "ಡ", "ddh": "ಢ", "nn": "ಣ",
        "t": "ತ", "th": "ಥ", "d": "ದ", "dh": "ಧ", "n": "ನ",
        "p": "ಪ", "f": "ಫ", "ph": "ಫ", "b": "ಬ", "bh": "ಭ", "m": "ಮ",
        "y": "ಯ", "r": "ರ", "l": "ಲ", "w": "ವ", "v": "ವ",
        "sh": "ಶ", "shh": "ಷ", "s": "ಸ", "h": "ಹ",
        "x": "ಕ್ಷ", "tr": "ತ್ರ", "j~n": "ಜ್ಞ",
    },
    modifier_map=_signs("ಾ", "ಿ", "ೀ", "ೀ", "ು", "ೂ", "ೂ", "ೆ", "ೈ", "ೊ", "ೌ", "ೃ", "ಂ", "ಃ"),
)

MALAYALAM = ScriptBlock(
    key="malayalam",
    name="Malayalam",
    start=0x0D00,
    end=0x0D7F,
    virama="്",
    inherent_vowel="a",
    vowel_map=_vowels("അ", "ആ", "ഇ", "ഈ", "ഈ", "ഉ", "ഊ", "ഊ", "എ", "ഐ", "ഒ", "ഔ", "ഋ", "അം", "അഃ"),
    consonant_map={
        "q": "ക", "k": "ക", "kh": "ഖ", "g": "ഗ", "gh": "ഘ", "ng": "ങ",
        "ch": "ച", "chh": "ഛ", "z": "ജ", "j": "ജ", "jh": "ഝ", "~n": "ഞ",
        "tt": "ട", "tth": "ഠ", "dd": "ഡ", "ddh": "ഢ", "nn": "ണ",
        "t": "ത", "th": "ഥ", "d": "ദ", "dh": "ധ", "n": "ന",
        "p": "പ", "f": "ഫ", "ph": "ഫ", "b": "ബ", "bh": "ഭ", "m": "മ",
        "y": "യ", "r": "ര", "l": "ല", "w": "വ", "v": "വ",
        "sh": "ശ", "shh": "ഷ", "s": "സ", "h": "ഹ", "zh": "ഴ",
        "x": "ക്ഷ", "tr": "ത്ര", "j~n": "ജ്ഞ",
    },
    modifier_map=_signs("ാ", "ി", "ീ", "ീ", "ു", "ൂ", "ൂ", "െ", "ൈ", "ൊ", "ൌ", "ൃ", "ം", "ഃ"),
)

SINHALA = ScriptBlock(
    key="sinhala",
    name="Sinhala",
    start=0x0D80,
    end=0x0DFF,
    virama="්",
    inherent_vowel="a",
    vowel_map={
        **_vowels("අ", "ආ", "ඉ", "ඊ", "ඊ", "උ", "ඌ", "ඌ", "එ", "ඓ", "ඔ", "ඖ", "ඍ", "අං", "අඃ"),
        "ae": "ඇ",
    },
    consonant_map={
        "q": "ක", "k": "ක", "kh": "ඛ", "g": "ග", "gh": "ඝ", "ng": "ඞ",
        "ch": "ච", "chh": "ඡ", "z": "ජ", "j": "ජ", "jh": "ඣ", "~n": "ඤ",
        "tt": "ට", "tth": "ඨ", "dd": "ඩ", "ddh": "ඪ", "nn": "ණ",
        "t": "ත", "th": "ථ", "d": "ද", "dh": "ධ", "n": "න",
        "p": "ප", "ph": "ඵ", "f": "ෆ", "b": "බ", "bh": "භ", "m": "ම",
        "y": "ය", "r": "ර", "l": "ල", "w": "ව", "v": "ව",
        "sh": "ශ", "shh": "ෂ", "s": "ස", "h": "හ",
    },
    modifier_map={
        **_signs("ා", "ි", "ී", "ී", "ු", "ූ", "ූ", "ෙ", "ෛ", "ො", "ෞ", "ෘ", "ං", "ඃ"),
        "ae": "ැ",
    },
)

THAI = ScriptBlock(
    key="thai",
    name="Thai",
    start=0x0E00,
    end=0x0E7F,
    inherent_vowel="a",
    vowel_map={
        "a": "อ", "aa": "อา", "i": "อิ", "ii": "อี", "ee": "อี",
        "u": "อุ", "uu": "อู", "oo": "อู", "e": "เอ", "ai": "ไอ",
        "o": "โอ", "au": "เอา",
    },
    consonant_map={
        "q": "ก", "g": "ก", "k": "ก", "kh": "ข", "ng": "ง",
        "ch": "ช", "j": "จ", "s": "ส", "ny": "ญ",
        "t": "ต", "th": "ท", "d": "ด", "n": "น",
        "p": "ป", "ph": "พ", "f": "ฟ", "b": "บ", "m": "ม",
        "y": "ย", "r": "ร", "l": "ล", "v": "ว", "w": "ว",
        "h": "ห", "x": "กซ", "z": "ซ",
    },
    # Only the vowels written after the consonant have a combining form.
    modifier_map={
        "aa": "า", "i": "ิ", "ii": "ี", "ee": "ี", "u": "ุ", "uu": "ู", "oo": "ู",
    },
)

ARABIC = ScriptBlock(
    key="arabic",
    name="Arabic",
    start=0x0600,
    end=0x06FF,
    extra_ranges=((0x0750, 0x077F), (0x08A0, 0x08FF)),
    vowel_map={
        "a": "ا", "aa": "آ", "i": "إ", "u": "أ",
        "e": "ي", "ai": "ي", "ii": "ي", "ee": "ي",
        "o": "و", "au": "و", "uu": "و", "oo": "و",
    },
    # Chat-alphabet digits: 2 hamza, 3 ain, 7 haa.
    consonant_map={
        "p": "ب", "b": "ب", "t": "ت", "th": "ث", "j": "ج", "7": "ح", "kh": "خ",
        "d": "د", "dh": "ذ", "r": "ر", "z": "ز", "s": "س", "sh": "ش",
        "ss": "ص", "dd": "ض", "tt": "ط", "zz": "ظ", "3": "ع", "2": "ء",
        "g": "غ", "gh": "غ", "v": "ف", "f": "ف", "q": "ق", "k": "ك",
        "l": "ل", "m": "م", "n": "ن", "h": "ه", "w": "و", "y": "ي",
        "x": "كس", "ch": "تش",
    },
)

HEBREW = ScriptBlock(
    key="hebrew",
    name="Hebrew",
    start=0x0590,
    end=0x05FF,
    vowel_map={"e": "א", "a": "א", "i": "י", "u": "ו", "o": "ו"},
    consonant_map={
        "b": "ב", "j": "ג", "g": "ג", "d": "ד", "h": "ה", "w": "ו", "v": "ו",
        "z": "ז", "ch": "ח", "kh": "ח", "t": "ט", "y": "י", "k": "כ",
        "l": "ל", "m": "מ", "n": "נ", "s": "ס", "f": "פ", "p": "פ",
        "ts": "צ", "q": "ק", "r": "ר", "sh": "ש", "x": "קס",
    },
)

CYRILLIC = ScriptBlock(
    key="cyrillic",
    name="Cyrillic",
    start=0x0400,
    end=0x04FF,
    extra_ranges=((0x0500, 0x052F),),
    vowel_map={
        "a": "а", "ye": "е", "e": "е", "i": "и", "o": "о", "u": "у",
        "y": "ы", "yo": "ё", "ya": "я", "yu": "ю",
    },
    consonant_map={
        "b": "б", "w": "в", "v": "в", "g": "г", "d": "д", "zh": "ж", "z": "з",
        "q": "к", "k": "к", "l": "л", "m": "м", "n": "н", "p": "п", "r": "р",
        "s": "с", "t": "т", "f": "ф", "h": "х", "kh": "х", "c": "ц", "ts": "ц",
        "ch": "ч", "sh": "ш", "shch": "щ", "j": "й", "x": "кс",
    },
)

GREEK = ScriptBlock(
    key="greek",
    name="Greek",
    start=0x0370,
    end=0x03FF,
    extra_ranges=((0x1F00, 0x1FFF),),
    vowel_map={
        "a": "α", "e": "ε", "i": "ι", "o": "ο", "u": "υ",
        "ee": "η", "oo": "ω",
    },
    consonant_map={
        "b": "β", "v": "β", "g": "γ", "d": "δ", "z": "ζ", "th": "θ",
        "j": "ι", "q": "κ", "c": "κ", "k": "κ", "l": "λ", "m": "μ", "n": "ν",
        "x": "ξ", "p": "π", "r": "ρ", "s": "σ", "t": "τ", "f": "φ",
        "ch": "χ", "ps": "ψ", "w": "ω", "h": "η",
    },
)

GEORGIAN = ScriptBlock(
    key="georgian",
    name="Georgian",
    start=0x10A0,
    end=0x10FF,
    vowel_map={"a": "ა", "e": "ე", "i": "ი", "o": "ო", "u": "უ"},
    consonant_map={
        "b": "ბ", "g": "გ", "d": "დ", "w": "ვ", "v": "ვ", "z": "ზ",
        "t": "თ", "k": "კ", "l": "ლ", "m": "მ", "n": "ნ", "p": "პ",
        "zh": "ჟ", "r": "რ", "s": "ს", "f": "ფ", "q": "ქ", "gh": "ღ",
        "sh": "შ", "ch": "ჩ", "c": "ც", "ts": "ც", "dz": "ძ", "x": "ხ",
        "kh": "ხ", "j": "ჯ", "h": "ჰ",
    },
)

ARMENIAN = ScriptBlock(
    key="armenian",
    name="Armenian",
    start=0x0530,
    end=0x058F,
    vowel_map={"a": "ա", "e": "ե", "i": "ի", "o": "օ", "u": "ու"},
    consonant_map={
        "b": "բ", "g": "գ", "d": "դ", "z": "զ", "t": "տ", "th": "թ",
        "zh": "ժ", "l": "լ", "x": "խ", "kh": "խ", "ts": "ծ", "k": "կ",
        "h": "հ", "dz": "ձ", "gh": "ղ", "ch": "չ", "m": "մ", "y": "յ",
        "n": "ն", "sh": "շ", "p": "պ", "ph": "փ", "j": "ջ", "rr": "ռ",
        "s": "ս", "w": "վ", "v": "վ", "r": "ր", "q": "ք", "f": "ֆ",
    },
)

HIRAGANA = ScriptBlock(
    key="hiragana",
    name="Hiragana",
    start=0x3040,
    end=0x309F,
    vowel_map={"a": "あ", "i": "い", "u": "う", "e": "え", "o": "お"},
    consonant_map={
        "ka": "か", "ki": "き", "ku": "く", "ke": "け", "ko": "こ",
        "sa": "さ", "si": "し", "shi": "し", "su": "す", "se": "せ", "so": "そ",
        "ta": "た", "ti": "ち", "chi": "ち", "tu": "つ", "tsu": "つ", "te": "て", "to": "と",
        "na": "な", "ni": "に", "nu": "ぬ", "ne": "ね", "no": "の",
        "ha": "は", "hi": "ひ", "hu": "ふ", "fu": "ふ", "he": "へ", "ho": "ほ",
        "ma": "ま", "mi": "み", "mu": "む", "me": "め", "mo": "も",
        "ya": "や", "yu": "ゆ", "yo": "よ",
        "ra": "ら", "ri": "り", "ru": "る", "re": "れ", "ro": "ろ",
        "wa": "わ", "wo": "を", "n": "ん",
        "ga": "が", "gi": "ぎ", "gu": "ぐ", "ge": "げ", "go": "ご",
        "za": "ざ", "zi": "じ", "ji": "じ", "zu": "ず", "ze": "ぜ", "zo": "ぞ",
        "da": "だ", "di": "ぢ", "du": "づ", "de": "で", "do": "ど",
        "ba": "ば", "bi": "び", "bu": "ぶ", "be": "べ", "bo": "ぼ",
        "pa": "ぱ", "pi": "ぴ", "pu": "ぷ", "pe": "ぺ", "po": "ぽ",
    },
)

HANGUL = ScriptBlock(
    key="hangul",
    name="Hangul",
    start=0xAC00,
    end=0xD7AF,
    extra_ranges=((0x1100, 0x11FF), (0x3130, 0x318F)),
    vowel_map={
        "a": "아", "ae": "애", "ya": "야", "yae": "얘", "eo": "어",
        "e": "에", "yeo": "여", "ye": "예", "o": "오", "wa": "와",
        "wae": "왜", "oe": "외", "yo": "요", "u": "우", "wo": "워",
        "we": "웨", "wi": "위", "yu": "유", "eu": "으", "ui": "의",
        "i": "이",
    },
    consonant_map={
        "g": "그", "k": "크", "n": "느", "d": "드", "t": "트",
        "l": "르", "r": "르", "m": "므", "b": "브", "p": "프",
        "s": "스", "j": "즈", "ch": "츠", "h": "흐", "ng": "응",
    },
)

HAN = ScriptBlock(
    key="han",
    name="Han",
    start=0x4E00,
    end=0x9FFF,
    extra_ranges=((0x3400, 0x4DBF), (0xF900, 0xFAFF)),
    vowel_map={"a": "阿", "e": "额", "i": "一", "o": "哦", "u": "乌"},
    consonant_map={
        "b": "波", "p": "坡", "m": "摸", "f": "佛",
        "d": "的", "t": "特", "n": "呢", "l": "了",
        "g": "哥", "k": "科", "h": "喝",
        "j": "几", "q": "七", "x": "西",
        "zh": "知", "ch": "吃", "sh": "是", "r": "日",
        "z": "子", "c": "次", "s": "四",
        "y": "也", "w": "五",
    },
)


def _katakana(table: Mapping[str, str]) -> Dict[str, str]:
    # Katakana mirrors hiragana 0x60 code points higher.
    return {k: "".join(chr(ord(c) + 0x60) for c in v) for k, v in table.items()}


# Ethiopic syllables come in rows of seven vowel orders; the sixth order is
# the bare consonant.
_ETHIOPIC_ORDERS = ("e", "u", "i", "a", "ie", "", "o")
_ETHIOPIC_ROWS = {
    "h": 0x1200, "l": 0x1208, "m": 0x1218, "r": 0x1228, "s": 0x1230,
    "sh": 0x1238, "q": 0x1240, "b": 0x1260, "v": 0x1268, "t": 0x1270,
    "ch": 0x1278, "n": 0x1290, "ny": 0x1298, "k": 0x12A8, "w": 0x12C8,
    "z": 0x12D8, "zh": 0x12E0, "y": 0x12E8, "d": 0x12F0, "j": 0x1300,
    "g": 0x1308, "ts": 0x1338, "f": 0x1348, "p": 0x1350,
}


def _ethiopic_syllables() -> Dict[str, str]:
    return {
        consonant + vowel: chr(row + offset)
        for consonant, row in _ETHIOPIC_ROWS.items()
        for offset, vowel in enumerate(_ETHIOPIC_ORDERS)
    }


# Inuktitut syllabics: (i, u, a, final) code points per consonant. The long
# vowel of each syllable sits one code point after the short one.
_SYLLABICS_ROWS = {
    "p": (0x1431, 0x1433, 0x1438, 0x1449),
    "t": (0x144E, 0x1450, 0x1455, 0x1466),
    "k": (0x146D, 0x146F, 0x1472, 0x1483),
    "g": (0x148B, 0x148D, 0x1490, 0x14A1),
    "m": (0x14A5, 0x14A7, 0x14AA, 0x14BB),
    "n": (0x14C2, 0x14C4, 0x14C7, 0x14D0),
    "l": (0x14D5, 0x14D7, 0x14DA, 0x14EA),
    "s": (0x14EF, 0x14F1, 0x14F4, 0x1505),
    "j": (0x1528, 0x152A, 0x152D, 0x153E),
    "r": (0x1546, 0x1548, 0x154B, 0x1550),
    "v": (0x1555, 0x1557, 0x1559, 0x155D),
    "q": (0x157F, 0x1581, 0x1583, 0x1585),
    "ng": (0x158F, 0x1591, 0x1593, 0x1595),
}


def _syllabics() -> Dict[str, str]:
    table = {"h": chr(0x157C)}
    for consonant, (i, u, a, final) in _SYLLABICS_ROWS.items():
        for vowel, cp in (("i", i), ("u", u), ("a", a)):
            table[consonant + vowel] = chr(cp)
            table[consonant + vowel * 2] = chr(cp + 1)
        table[consonant] = chr(final)
    return table


KATAKANA = ScriptBlock(
    key="katakana",
    name="Katakana",
    start=0x30A0,
    end=0x30FF,
    vowel_map=_katakana(HIRAGANA.vowel_map),
    consonant_map=_katakana(HIRAGANA.consonant_map),
)

LAO = ScriptBlock(
    key="lao",
    name="Lao",
    start=0x0E80,
    end=0x0EFF,
    inherent_vowel="a",
    vowel_map={
        "a": "ອ", "aa": "ອາ", "i": "ອິ", "ii": "ອີ", "ee": "ອີ",
        "u": "ອຸ", "uu": "ອູ", "oo": "ອູ", "e": "ເອ", "ai": "ໄອ",
        "o": "ໂອ", "au": "ເອົາ",
    },
    consonant_map={
        "q": "ກ", "g": "ກ", "k": "ກ", "kh": "ຂ", "ng": "ງ",
        "j": "ຈ", "z": "ຊ", "ch": "ຊ", "s": "ສ", "ny": "ຍ",
        "d": "ດ", "t": "ຕ", "th": "ທ", "n": "ນ",
        "b": "ບ", "p": "ປ", "ph": "ພ", "f": "ຟ", "m": "ມ",
        "y": "ຢ", "r": "ຣ", "l": "ລ", "v": "ວ", "w": "ວ",
        "h": "ຫ", "x": "ກສ",
    },
    modifier_map={
        "aa": "າ", "i": "ິ", "ii": "ີ", "ee": "ີ", "u": "ຸ", "uu": "ູ", "oo": "ູ",
    },
)

MYANMAR = ScriptBlock(
    key="myanmar",
    name="Myanmar",
    start=0x1000,
    end=0x109F,
    # The asat kills the inherent vowel the way a virama does.
    virama="်",
    inherent_vowel="a",
    vowel_map={
        "a": "အ", "aa": "အာ", "i": "ဣ", "ii": "ဤ", "ee": "ဤ",
        "u": "ဥ", "uu": "ဦ", "oo": "ဦ", "e": "ဧ", "ai": "အဲ",
        "o": "ဩ", "au": "ဪ",
    },
    consonant_map={
        "q": "က", "k": "က", "kh": "ခ", "g": "ဂ", "gh": "ဃ", "ng": "င",
        "c": "စ", "s": "စ", "hs": "ဆ", "z": "ဇ", "j": "ဇ", "ny": "ည",
        "tt": "ဋ", "dd": "ဍ", "nn": "ဏ",
        "t": "တ", "ht": "ထ", "d": "ဒ", "dh": "ဓ", "n": "န",
        "p": "ပ", "f": "ဖ", "ph": "ဖ", "b": "ဗ", "bh": "ဘ", "m": "မ",
        "y": "ယ", "r": "ရ", "l": "လ", "v": "ဝ", "w": "ဝ",
        "th": "သ", "h": "ဟ",
    },
    modifier_map={
        "aa": "ာ", "i": "ိ", "ii": "ီ", "ee": "ီ", "u": "ု",
        "uu": "ူ", "oo": "ူ", "e": "ေ", "ai": "ဲ", "o": "ော",
        "au": "ော်",
    },
)

KHMER = ScriptBlock(
    key="khmer",
    name="Khmer",
    start=0x1780,
    end=0x17FF,
    # Coeng: the following consonant is written subscript.
    virama="្",
    inherent_vowel="a",
    vowel_map={
        "a": "អ", "aa": "អា", "i": "ឥ", "ii": "ឦ", "ee": "ឦ",
        "u": "ឧ", "uu": "ឩ", "oo": "ឩ", "e": "ឯ", "ai": "ឰ",
        "o": "ឱ", "au": "ឳ",
    },
    consonant_map={
        "q": "ក", "k": "ក", "kh": "ខ", "g": "គ", "gh": "ឃ", "ng": "ង",
        "c": "ច", "ch": "ច", "chh": "ឆ", "j": "ជ", "jh": "ឈ", "nh": "ញ",
        "d": "ដ", "nn": "ណ", "t": "ត", "th": "ថ", "dh": "ធ", "n": "ន",
        "b": "ប", "f": "ផ", "ph": "ផ", "p": "ព", "bh": "ភ", "m": "ម",
        "y": "យ", "r": "រ", "l": "ល", "w": "វ", "v": "វ",
        "s": "ស", "h": "ហ", "ll": "ឡ",
    },
    modifier_map={
        "aa": "ា", "i": "ិ", "ii": "ី", "ee": "ី", "u": "ុ",
        "uu": "ូ", "oo": "ូ", "e": "េ", "ai": "ៃ", "o": "ោ", "au": "ៅ",
    },
)

ETHIOPIC = ScriptBlock(
    key="ethiopic",
    name="Ethiopic",
    start=0x1200,
    end=0x137F,
    vowel_map={v: chr(0x12A0 + offset) for offset, v in enumerate(_ETHIOPIC_ORDERS) if v},
    consonant_map=_ethiopic_syllables(),
)

TIBETAN = ScriptBlock(
    key="tibetan",
    name="Tibetan",
    start=0x0F00,
    end=0x0FFF,
    virama="྄",
    inherent_vowel="a",
    vowel_map={
        "a": "ཨ", "aa": "ཨཱ", "i": "ཨི", "ii": "ཨཱི", "ee": "ཨཱི",
        "u": "ཨུ", "uu": "ཨཱུ", "oo": "ཨཱུ", "e": "ཨེ",
        "ai": "ཨཻ", "o": "ཨོ", "au": "ཨཽ",
    },
    consonant_map={
        "q": "ཀ", "k": "ཀ", "kh": "ཁ", "g": "ག", "ng": "ང",
        "c": "ཅ", "ch": "ཆ", "j": "ཇ", "ny": "ཉ",
        "tt": "ཊ", "dd": "ཌ", "nn": "ཎ",
        "t": "ཏ", "th": "ཐ", "d": "ད", "n": "ན",
        "p": "པ", "f": "ཕ", "ph": "ཕ", "v": "བ", "b": "བ", "m": "མ",
        "ts": "ཙ", "tsh": "ཚ", "dz": "ཛ", "w": "ཝ", "zh": "ཞ", "z": "ཟ",
        "y": "ཡ", "r": "ར", "l": "ལ", "sh": "ཤ", "s": "ས", "h": "ཧ",
    },
    modifier_map={
        "aa": "ཱ", "i": "ི", "ii": "ཱི", "ee": "ཱི", "u": "ུ",
        "uu": "ཱུ", "oo": "ཱུ", "e": "ེ", "ai": "ཻ", "o": "ོ", "au": "ཽ",
    },
)

THAANA = ScriptBlock(
    key="thaana",
    name="Thaana",
    start=0x0780,
    end=0x07BF,
    # Sukun marks a vowelless consonant; every other consonant takes a fili.
    virama="ް",
    vowel_map={
        "a": "އަ", "aa": "އާ", "i": "އި", "ii": "އީ", "ee": "އީ",
        "u": "އު", "uu": "އޫ", "oo": "އޫ", "e": "އެ", "ey": "އޭ",
        "o": "އޮ", "oa": "އޯ",
    },
    consonant_map={
        "h": "ހ", "sh": "ށ", "n": "ނ", "r": "ރ", "b": "ބ", "lh": "ޅ",
        "q": "ކ", "c": "ކ", "k": "ކ", "w": "ވ", "v": "ވ", "m": "މ",
        "f": "ފ", "dh": "ދ", "th": "ތ", "l": "ލ", "g": "ގ",
        "s": "ސ", "d": "ޑ", "z": "ޒ", "t": "ޓ", "y": "ޔ",
        "p": "ޕ", "j": "ޖ", "ch": "ޗ", "x": "ކްސ",
    },
    modifier_map={
        "a": "ަ", "aa": "ާ", "i": "ި", "ii": "ީ", "ee": "ީ", "u": "ު",
        "uu": "ޫ", "oo": "ޫ", "e": "ެ", "ey": "ޭ", "o": "ޮ", "oa": "ޯ",
    },
)

SYRIAC = ScriptBlock(
    key="syriac",
    name="Syriac",
    start=0x0700,
    end=0x074F,
    vowel_map={
        "e": "ܐ", "a": "ܐ", "ee": "ܝ", "i": "ܝ",
        "o": "ܘ", "oo": "ܘ", "u": "ܘ",
    },
    consonant_map={
        "v": "ܒ", "b": "ܒ", "j": "ܓ", "g": "ܓ", "d": "ܕ", "h": "ܗ",
        "w": "ܘ", "z": "ܙ", "kh": "ܚ", "tt": "ܛ", "y": "ܝ",
        "c": "ܟ", "k": "ܟ", "l": "ܠ", "m": "ܡ", "n": "ܢ", "s": "ܣ",
        "f": "ܦ", "p": "ܦ", "ts": "ܨ", "q": "ܩ", "r": "ܪ",
        "sh": "ܫ", "t": "ܬ", "x": "ܟܣ",
    },
)

NKO = ScriptBlock(
    key="nko",
    name="N'Ko",
    start=0x07C0,
    end=0x07FF,
    vowel_map={
        "a": "ߊ", "ee": "ߋ", "i": "ߌ", "e": "ߍ",
        "u": "ߎ", "oo": "ߏ", "o": "ߐ",
    },
    consonant_map={
        "b": "ߓ", "p": "ߔ", "t": "ߕ", "j": "ߖ", "ch": "ߗ", "c": "ߗ",
        "d": "ߘ", "r": "ߙ", "rr": "ߚ", "z": "ߛ", "s": "ߛ",
        "g": "ߜ", "gb": "ߜ", "v": "ߝ", "f": "ߝ", "q": "ߞ", "k": "ߞ",
        "l": "ߟ", "m": "ߡ", "ny": "ߢ", "n": "ߣ", "h": "ߤ",
        "w": "ߥ", "y": "ߦ", "ng": "ߒ",
    },
)

TIFINAGH = ScriptBlock(
    key="tifinagh",
    name="Tifinagh",
    start=0x2D30,
    end=0x2D7F,
    vowel_map={"a": "ⴰ", "e": "ⴻ", "i": "ⵉ", "o": "ⵓ", "u": "ⵓ"},
    consonant_map={
        "v": "ⴱ", "b": "ⴱ", "g": "ⴳ", "d": "ⴷ", "p": "ⴼ", "f": "ⴼ",
        "c": "ⴽ", "k": "ⴽ", "h": "ⵀ", "x": "ⵅ", "kh": "ⵅ", "q": "ⵇ",
        "j": "ⵊ", "l": "ⵍ", "m": "ⵎ", "n": "ⵏ", "r": "ⵔ", "gh": "ⵖ",
        "s": "ⵙ", "sh": "ⵛ", "t": "ⵜ", "w": "ⵡ", "y": "ⵢ", "z": "ⵣ",
    },
)

OL_CHIKI = ScriptBlock(
    key="ol_chiki",
    name="Ol Chiki",
    start=0x1C50,
    end=0x1C7F,
    vowel_map={
        "ao": "ᱚ", "a": "ᱟ", "i": "ᱤ", "u": "ᱩ", "e": "ᱮ", "o": "ᱳ",
    },
    consonant_map={
        "t": "ᱛ", "g": "ᱜ", "ng": "ᱝ", "l": "ᱞ", "q": "ᱠ", "k": "ᱠ",
        "j": "ᱡ", "m": "ᱢ", "w": "ᱣ", "s": "ᱥ", "h": "ᱦ", "ny": "ᱧ",
        "r": "ᱨ", "ch": "ᱪ", "c": "ᱪ", "d": "ᱫ", "nn": "ᱬ", "y": "ᱭ",
        "f": "ᱯ", "p": "ᱯ", "dd": "ᱰ", "n": "ᱱ", "rr": "ᱲ",
        "tt": "ᱴ", "b": "ᱵ", "v": "ᱶ",
    },
)

JAVANESE = ScriptBlock(
    key="javanese",
    name="Javanese",
    start=0xA980,
    end=0xA9DF,
    virama="꧀",
    inherent_vowel="a",
    vowel_map=_vowels(
        "ꦄ", "ꦄꦴ", "ꦆ", "ꦇ", "ꦇ", "ꦈ", "ꦈꦴ", "ꦈꦴ",
        "ꦌ", "ꦍ", "ꦎ", "", "ꦉ", "ꦄꦁ", "ꦄꦃ",
    ),
    consonant_map={
        "h": "ꦲ", "n": "ꦤ", "c": "ꦕ", "ch": "ꦕ", "r": "ꦫ",
        "q": "ꦏ", "k": "ꦏ", "d": "ꦢ", "t": "ꦠ", "s": "ꦱ",
        "v": "ꦮ", "w": "ꦮ", "l": "ꦭ", "f": "ꦥ", "p": "ꦥ",
        "dh": "ꦝ", "z": "ꦗ", "j": "ꦗ", "y": "ꦪ", "ny": "ꦚ",
        "m": "ꦩ", "g": "ꦒ", "b": "ꦧ", "th": "ꦛ", "ng": "ꦔ",
    },
    modifier_map=_signs(
        "ꦴ", "ꦶ", "ꦷ", "ꦷ", "ꦸ", "ꦹ", "ꦹ",
        "ꦺ", "ꦻ", "ꦺꦴ", "", "ꦽ", "ꦁ", "ꦃ",
    ),
)

BALINESE = ScriptBlock(
    key="balinese",
    name="Balinese",
    start=0x1B00,
    end=0x1B7F,
    virama="᭄",
    inherent_vowel="a",
    vowel_map=_vowels(
        "ᬅ", "ᬆ", "ᬇ", "ᬈ", "ᬈ", "ᬉ", "ᬊ", "ᬊ",
        "ᬏ", "ᬐ", "ᬑ", "ᬒ", "ᬋ", "ᬅᬂ", "ᬅᬄ",
    ),
    consonant_map={
        "q": "ᬓ", "k": "ᬓ", "kh": "ᬔ", "g": "ᬕ", "gh": "ᬖ", "ng": "ᬗ",
        "c": "ᬘ", "ch": "ᬘ", "chh": "ᬙ", "z": "ᬚ", "j": "ᬚ", "jh": "ᬛ",
        "ny": "ᬜ", "tt": "ᬝ", "dd": "ᬟ", "nn": "ᬡ",
        "t": "ᬢ", "th": "ᬣ", "d": "ᬤ", "dh": "ᬥ", "n": "ᬦ",
        "p": "ᬧ", "f": "ᬨ", "ph": "ᬨ", "b": "ᬩ", "bh": "ᬪ", "m": "ᬫ",
        "y": "ᬬ", "r": "ᬭ", "l": "ᬮ", "v": "ᬯ", "w": "ᬯ",
        "sh": "ᬰ", "shh": "ᬱ", "s": "ᬲ", "h": "ᬳ",
    },
    modifier_map=_signs(
        "ᬵ", "ᬶ", "ᬷ", "ᬷ", "ᬸ", "ᬹ", "ᬹ",
        "ᬾ", "ᬿ", "ᭀ", "ᭁ", "ᬺ", "ᬂ", "ᬄ",
    ),
)

SUNDANESE = ScriptBlock(
    key="sundanese",
    name="Sundanese",
    start=0x1B80,
    end=0x1BBF,
    virama="᮪",
    inherent_vowel="a",
    vowel_map={
        "a": "ᮃ", "i": "ᮄ", "u": "ᮅ", "ae": "ᮆ",
        "o": "ᮇ", "e": "ᮈ", "eu": "ᮉ",
    },
    consonant_map={
        "k": "ᮊ", "q": "ᮋ", "g": "ᮌ", "ng": "ᮍ", "c": "ᮎ", "j": "ᮏ",
        "z": "ᮐ", "ny": "ᮑ", "t": "ᮒ", "d": "ᮓ", "n": "ᮔ", "p": "ᮕ",
        "f": "ᮖ", "v": "ᮗ", "b": "ᮘ", "m": "ᮙ", "y": "ᮚ", "r": "ᮛ",
        "l": "ᮜ", "w": "ᮝ", "s": "ᮞ", "x": "ᮟ", "h": "ᮠ",
    },
    modifier_map={
        "i": "ᮤ", "u": "ᮥ", "ae": "ᮦ", "o": "ᮧ", "e": "ᮨ", "eu": "ᮩ",
    },
)

BUGINESE = ScriptBlock(
    key="buginese",
    name="Buginese",
    start=0x1A00,
    end=0x1A1F,
    # No vowel killer: final consonants are simply not written.
    inherent_vowel="a",
    vowel_map={
        "a": "ᨕ", "i": "ᨕᨗ", "u": "ᨕᨘ", "e": "ᨕᨙ", "o": "ᨕᨚ",
    },
    consonant_map={
        "q": "ᨀ", "k": "ᨀ", "g": "ᨁ", "ng": "ᨂ", "f": "ᨄ", "p": "ᨄ",
        "v": "ᨅ", "b": "ᨅ", "m": "ᨆ", "t": "ᨈ", "d": "ᨉ", "n": "ᨊ",
        "c": "ᨌ", "j": "ᨍ", "ny": "ᨎ", "y": "ᨐ", "r": "ᨑ",
        "l": "ᨒ", "w": "ᨓ", "s": "ᨔ", "h": "ᨖ",
    },
    modifier_map={"i": "ᨗ", "u": "ᨘ", "e": "ᨙ", "o": "ᨚ"},
)

BAYBAYIN = ScriptBlock(
    key="baybayin",
    name="Baybayin",
    start=0x1700,
    end=0x171F,
    virama="᜔",
    inherent_vowel="a",
    vowel_map={"a": "ᜀ", "e": "ᜁ", "i": "ᜁ", "o": "ᜂ", "u": "ᜂ"},
    consonant_map={
        "q": "ᜃ", "c": "ᜃ", "k": "ᜃ", "g": "ᜄ", "ng": "ᜅ",
        "t": "ᜆ", "d": "ᜇ", "n": "ᜈ", "f": "ᜉ", "p": "ᜉ",
        "v": "ᜊ", "b": "ᜊ", "m": "ᜋ", "y": "ᜌ", "r": "ᜍ",
        "l": "ᜎ", "w": "ᜏ", "z": "ᜐ", "s": "ᜐ", "h": "ᜑ",
    },
    modifier_map={"e": "ᜒ", "i": "ᜒ", "o": "ᜓ", "u": "ᜓ"},
)

MEETEI_MAYEK = ScriptBlock(
    key="meetei_mayek",
    name="Meetei Mayek",
    start=0xABC0,
    end=0xABFF,
    virama="꯭",
    inherent_vowel="a",
    vowel_map={
        "a": "ꯑ", "aa": "ꯑꯥ", "i": "ꯏ", "u": "ꯎ",
        "e": "ꯑꯦ", "ei": "ꯑꯩ", "o": "ꯑꯣ", "ou": "ꯑꯧ",
    },
    consonant_map={
        "q": "ꯀ", "k": "ꯀ", "s": "ꯁ", "l": "ꯂ", "m": "ꯃ", "p": "ꯄ",
        "n": "ꯅ", "c": "ꯆ", "ch": "ꯆ", "t": "ꯇ", "kh": "ꯈ", "ng": "ꯉ",
        "th": "ꯊ", "v": "ꯋ", "w": "ꯋ", "y": "ꯌ", "h": "ꯍ",
        "f": "ꯐ", "ph": "ꯐ", "g": "ꯒ", "jh": "ꯓ", "r": "ꯔ",
        "b": "ꯕ", "z": "ꯖ", "j": "ꯖ", "d": "ꯗ", "gh": "ꯘ",
        "dh": "ꯙ", "bh": "ꯚ",
    },
    modifier_map={
        "aa": "ꯥ", "i": "ꯤ", "u": "ꯨ", "e": "ꯦ",
        "ei": "ꯩ", "o": "ꯣ", "ou": "ꯧ",
    },
)

MONGOLIAN = ScriptBlock(
    key="mongolian",
    name="Mongolian",
    start=0x1800,
    end=0x18AF,
    vowel_map={
        "a": "ᠠ", "e": "ᠡ", "i": "ᠢ", "o": "ᠣ",
        "u": "ᠤ", "oe": "ᠥ", "ue": "ᠦ", "ee": "ᠧ",
    },
    consonant_map={
        "n": "ᠨ", "ng": "ᠩ", "b": "ᠪ", "p": "ᠫ", "q": "ᠬ", "kh": "ᠬ",
        "gh": "ᠭ", "g": "ᠭ", "m": "ᠮ", "l": "ᠯ", "s": "ᠰ", "sh": "ᠱ",
        "t": "ᠲ", "d": "ᠳ", "ch": "ᠴ", "j": "ᠵ", "y": "ᠶ", "r": "ᠷ",
        "v": "ᠸ", "w": "ᠸ", "f": "ᠹ", "k": "ᠺ", "c": "ᠼ", "ts": "ᠼ",
        "z": "ᠽ", "h": "ᠾ",
    },
)

CHEROKEE = ScriptBlock(
    key="cherokee",
    name="Cherokee",
    start=0x13A0,
    end=0x13FF,
    vowel_map={"a": "Ꭰ", "e": "Ꭱ", "i": "Ꭲ", "o": "Ꭳ", "u": "Ꭴ", "v": "Ꭵ"},
    consonant_map={
        "ga": "Ꭶ", "ka": "Ꭷ", "ge": "Ꭸ", "gi": "Ꭹ", "go": "Ꭺ", "gu": "Ꭻ", "gv": "Ꭼ",
        "ha": "Ꭽ", "he": "Ꭾ", "hi": "Ꭿ", "ho": "Ꮀ", "hu": "Ꮁ", "hv": "Ꮂ",
        "la": "Ꮃ", "le": "Ꮄ", "li": "Ꮅ", "lo": "Ꮆ", "lu": "Ꮇ", "lv": "Ꮈ",
        "ma": "Ꮉ", "me": "Ꮊ", "mi": "Ꮋ", "mo": "Ꮌ", "mu": "Ꮍ",
        "na": "Ꮎ", "ne": "Ꮑ", "ni": "Ꮒ", "no": "Ꮓ", "nu": "Ꮔ", "nv": "Ꮕ",
        "qua": "Ꮖ", "que": "Ꮗ", "qui": "Ꮘ", "quo": "Ꮙ", "quu": "Ꮚ", "quv": "Ꮛ",
        "sa": "Ꮜ", "s": "Ꮝ", "se": "Ꮞ", "si": "Ꮟ", "so": "Ꮠ", "su": "Ꮡ", "sv": "Ꮢ",
        "da": "Ꮣ", "ta": "Ꮤ", "de": "Ꮥ", "te": "Ꮦ", "di": "Ꮧ", "ti": "Ꮨ",
        "do": "Ꮩ", "du": "Ꮪ", "dv": "Ꮫ",
        "dla": "Ꮬ", "tla": "Ꮭ", "tle": "Ꮮ", "tli": "Ꮯ", "tlo": "Ꮰ", "tlu": "Ꮱ", "tlv": "Ꮲ",
        "tsa": "Ꮳ", "tse": "Ꮴ", "tsi": "Ꮵ", "tso": "Ꮶ", "tsu": "Ꮷ", "tsv": "Ꮸ",
        "wa": "Ꮹ", "we": "Ꮺ", "wi": "Ꮻ", "wo": "Ꮼ", "wu": "Ꮽ", "wv": "Ꮾ",
        "ya": "Ꮿ", "ye": "Ᏸ", "yi": "Ᏹ", "yo": "Ᏺ", "yu": "Ᏻ", "yv": "Ᏼ",
    },
)

CANADIAN_SYLLABICS = ScriptBlock(
    key="canadian_syllabics",
    name="Canadian Syllabics",
    start=0x1400,
    end=0x167F,
    vowel_map={"i": "ᐃ", "ii": "ᐄ", "u": "ᐅ", "uu": "ᐆ", "a": "ᐊ", "aa": "ᐋ"},
    consonant_map=_syllabics(),
)

BOPOMOFO = ScriptBlock(
    key="bopomofo",
    name="Bopomofo",
    start=0x3100,
    end=0x312F,
    vowel_map={
        "a": "ㄚ", "o": "ㄛ", "e": "ㄜ", "ai": "ㄞ", "ei": "ㄟ",
        "ao": "ㄠ", "ou": "ㄡ", "an": "ㄢ", "en": "ㄣ", "ang": "ㄤ",
        "eng": "ㄥ", "er": "ㄦ", "i": "ㄧ", "u": "ㄨ", "v": "ㄩ", "yu": "ㄩ",
    },
    consonant_map={
        "b": "ㄅ", "p": "ㄆ", "m": "ㄇ", "f": "ㄈ",
        "d": "ㄉ", "t": "ㄊ", "n": "ㄋ", "l": "ㄌ",
        "g": "ㄍ", "k": "ㄎ", "h": "ㄏ",
        "j": "ㄐ", "q": "ㄑ", "x": "ㄒ",
        "zh": "ㄓ", "ch": "ㄔ", "sh": "ㄕ", "r": "ㄖ",
        "z": "ㄗ", "c": "ㄘ", "s": "ㄙ",
        "y": "ㄧ", "w": "ㄨ",
    },
)

# Registration order is significant: detection ties go to the earlier block.
SCRIPT_BLOCKS = (
    DEVANAGARI,
    BENGALI,
    GURMUKHI,
    GUJARATI,
    ODIA,
    TAMIL,
    TELUGU,
    KANNADA,
    MALAYALAM,
    SINHALA,
    THAI,
    ARABIC,
    HEBREW,
    CYRILLIC,
    GREEK,
    GEORGIAN,
    ARMENIAN,
    HIRAGANA,
    HANGUL,
    HAN,
    KATAKANA,
    LAO,
    MYANMAR,
    KHMER,
    ETHIOPIC,
    TIBETAN,
    THAANA,
    SYRIAC,
    NKO,
    TIFINAGH,
    OL_CHIKI,
    JAVANESE,
    BALINESE,
    SUNDANESE,
    BUGINESE,
    BAYBAYIN,
    MEETEI_MAYEK,
    MONGOLIAN,
    CHEROKEE,
    CANADIAN_SYLLABICS,
    BOPOMOFO,
)
