# scriptbridge/adapters/api/routers/health.py
import structlog
from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, Response, status

from scriptbridge.core.engine.script_registry import all_script_blocks
from scriptbridge.core.ports import PhraseRepo
from scriptbridge.shared.container import Container

logger = structlog.get_logger()

router = APIRouter(prefix="/health", tags=["Health"])


@router.get("/ready")
@inject
async def readiness(
    response: Response,
    repo: PhraseRepo = Depends(Provide[Container.phrase_repo]),
):
    """
    Ready when the phrase store answers. The engine itself has no external
    dependencies, so a failing store only degrades translation quality.
    """
    try:
        store_ok = await repo.health_check()
    except Exception as e:
        logger.error("health_check_failed", error=str(e))
        store_ok = False

    if not store_ok:
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE

    return {
        "status": "ready" if store_ok else "degraded",
        "phrase_store": "up" if store_ok else "down",
        "scripts": len(all_script_blocks()),
    }
