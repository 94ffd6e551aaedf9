"""
API Route Definitions.

- `transliteration`: script conversion and detection.
- `translation`: pivot translation and the chat view.
- `languages`: public language listing for UI dropdowns.
- `admin`: cache inspection and reset.
- `health`: readiness check.
"""

from . import admin
from . import health
from . import languages
from . import translation
from . import transliteration

__all__ = [
    "transliteration",
    "translation",
    "languages",
    "admin",
    "health",
]
