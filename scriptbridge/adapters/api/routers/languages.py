# scriptbridge/adapters/api/routers/languages.py
from typing import List, Optional

from fastapi import APIRouter
from pydantic import BaseModel

from scriptbridge.core.engine.language_resolver import effective_language, list_languages
from scriptbridge.core.engine.script_registry import get_script_block
from scriptbridge.core.domain.models import LATIN_NAME
from scriptbridge.core.registry import PHRASE_LANGUAGES

router = APIRouter(tags=["Languages"])


# --- DTOs (Data Transfer Objects) ---
class LanguageOut(BaseModel):
    """
    Public API representation of a Language.
    Matches the frontend dropdown: { code, name, native_name, script, rtl }.
    """
    code: str
    name: str
    native_name: str
    script: str
    rtl: bool = False
    uses: Optional[str] = None
    has_phrases: bool = False


# --- Endpoints ---

@router.get("/languages", response_model=List[LanguageOut])
async def get_languages() -> List[LanguageOut]:
    """
    Every registered language, sorted by name. `uses` names the language
    whose data a dialect borrows, when it is not its own.
    """
    results = []
    for profile in list_languages():
        block = get_script_block(profile.script_key)
        effective = effective_language(profile.canonical_name)
        results.append(
            LanguageOut(
                code=profile.iso_code,
                name=profile.canonical_name,
                native_name=profile.native_name,
                script=block.name if block else LATIN_NAME,
                rtl=profile.is_rtl,
                uses=effective if effective != profile.canonical_name else None,
                has_phrases=effective in PHRASE_LANGUAGES,
            )
        )
    return results
