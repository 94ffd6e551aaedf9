# scriptbridge/adapters/api/routers/translation.py
from typing import Optional

import structlog
from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from scriptbridge.core.domain.exceptions import InvalidRequestError
from scriptbridge.core.domain.models import ChatTranslation, TranslationResult
from scriptbridge.core.use_cases.chat_translation import TranslateForChat
from scriptbridge.core.use_cases.translate_text import PivotTranslator
from scriptbridge.shared.container import Container

logger = structlog.get_logger()

router = APIRouter(tags=["Translation"])

MAX_TEXT_LENGTH = 5000


class TranslateRequest(BaseModel):
    text: str = Field(..., max_length=MAX_TEXT_LENGTH)
    source: Optional[str] = Field(None, description="Source language; 'auto' or omitted to detect")
    target: str


class ChatRequest(BaseModel):
    text: str = Field(..., max_length=MAX_TEXT_LENGTH)
    sender: Optional[str] = None
    receiver: str


def _require_language(value: str, field_name: str) -> None:
    if not value or not value.strip():
        logger.warning("translation_bad_request", field=field_name)
        raise InvalidRequestError(f"'{field_name}' must not be empty")


@router.post("/translate", response_model=TranslationResult)
@inject
async def translate(
    payload: TranslateRequest,
    translator: PivotTranslator = Depends(Provide[Container.translator]),
) -> TranslationResult:
    """
    Translate `text` into `target`, through English when no direct mapping
    exists. Phrase-store outages degrade to transliteration, never to an error.
    """
    _require_language(payload.target, "target")
    return await translator.translate(payload.text, payload.source, payload.target)


@router.post("/translate/chat", response_model=ChatTranslation)
@inject
async def translate_chat(
    payload: ChatRequest,
    use_case: TranslateForChat = Depends(Provide[Container.chat_translation]),
) -> ChatTranslation:
    _require_language(payload.receiver, "receiver")
    return await use_case.execute(payload.text, payload.sender, payload.receiver)
