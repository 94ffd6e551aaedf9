# scriptbridge/adapters/api/routers/transliteration.py
from typing import Optional

import structlog
from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from scriptbridge.core.domain.exceptions import InvalidRequestError
from scriptbridge.core.domain.models import ScriptDetection
from scriptbridge.core.engine.language_resolver import normalize_language
from scriptbridge.core.engine.reverse_transliterator import reverse_transliterate
from scriptbridge.core.engine.script_detector import ScriptDetector
from scriptbridge.core.engine.transliterator import transliterate
from scriptbridge.shared.container import Container

logger = structlog.get_logger()

router = APIRouter(tags=["Transliteration"])

MAX_TEXT_LENGTH = 5000


# --- DTOs ---

class TransliterateRequest(BaseModel):
    text: str = Field(..., max_length=MAX_TEXT_LENGTH)
    language: str = Field(..., description="Target language: name, ISO code or alias")


class ReverseRequest(BaseModel):
    text: str = Field(..., max_length=MAX_TEXT_LENGTH)
    language: Optional[str] = Field(None, description="Source language; detected when omitted")


class DetectRequest(BaseModel):
    text: str = Field(..., max_length=MAX_TEXT_LENGTH)


class TransliterationOut(BaseModel):
    text: str
    original_text: str
    language: str


# --- Endpoints ---

@router.post("/transliterate", response_model=TransliterationOut, status_code=status.HTTP_200_OK)
async def transliterate_text(payload: TransliterateRequest) -> TransliterationOut:
    """Latin phonetic input to the native script of `language`."""
    if not payload.language.strip():
        logger.warning("transliteration_bad_request", field="language")
        raise InvalidRequestError("'language' must not be empty")
    language = normalize_language(payload.language)
    return TransliterationOut(
        text=transliterate(payload.text, language),
        original_text=payload.text,
        language=language,
    )


@router.post("/transliterate/reverse", response_model=TransliterationOut)
async def reverse_transliterate_text(payload: ReverseRequest) -> TransliterationOut:
    """Native-script text back to a Latin approximation."""
    language = normalize_language(payload.language) if payload.language else None
    return TransliterationOut(
        text=reverse_transliterate(payload.text, language),
        original_text=payload.text,
        language=language or "latin",
    )


@router.post("/detect", response_model=ScriptDetection)
@inject
async def detect(
    payload: DetectRequest,
    detector: ScriptDetector = Depends(Provide[Container.script_detector]),
) -> ScriptDetection:
    return detector.detect(payload.text)
