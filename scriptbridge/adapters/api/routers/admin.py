# scriptbridge/adapters/api/routers/admin.py
from typing import Dict

import structlog
from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends

from scriptbridge.core.engine.reverse_transliterator import reverse_maps_built
from scriptbridge.core.engine.script_detector import ScriptDetector
from scriptbridge.core.use_cases.translate_text import PivotTranslator
from scriptbridge.shared.container import Container

logger = structlog.get_logger()

router = APIRouter(prefix="/admin", tags=["Admin"])


@router.get("/cache")
@inject
async def cache_stats(
    translator: PivotTranslator = Depends(Provide[Container.translator]),
    detector: ScriptDetector = Depends(Provide[Container.script_detector]),
) -> Dict[str, int]:
    return {
        "results": len(translator.cache),
        "detections": len(detector.cache),
        "reverse_maps": reverse_maps_built(),
    }


@router.delete("/cache")
@inject
async def clear_cache(
    translator: PivotTranslator = Depends(Provide[Container.translator]),
    detector: ScriptDetector = Depends(Provide[Container.script_detector]),
) -> Dict[str, str]:
    translator.clear_cache()
    detector.clear()
    logger.info("caches_cleared", via="api")
    return {"status": "cleared"}
