"""
scriptbridge/shared/logging_setup.py
------------------------------------

Central logging configuration for ScriptBridge.

Every module logs through structlog with event-style names:

    import structlog

    logger = structlog.get_logger()
    logger.info("translation_routed", source="hindi", target="tamil")

`init_logging()` wires structlog onto the standard library root logger so
that third-party libraries (uvicorn, httpx) end up in the same stream.

Settings used:
    LOG_LEVEL   (DEBUG, INFO, WARNING, ERROR)
    LOG_FORMAT  ("json" for machines, "console" for humans)

`init_logging` is idempotent; pass `force=True` to reconfigure.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

import structlog

from scriptbridge.shared.config import settings

# Internal flag to avoid re-configuring logging multiple times
_INITIALIZED = False


def _resolve_level(level: Optional[str]) -> int:
    name = (level or settings.LOG_LEVEL or "INFO").upper()
    return getattr(logging, name, logging.INFO)


def init_logging(
    level: Optional[str] = None,
    fmt: Optional[str] = None,
    *,
    force: bool = False,
) -> None:
    """
    Configure structlog and the root logger.

    Args:
        level: Level name; defaults to settings.LOG_LEVEL.
        fmt: "json" or "console"; defaults to settings.LOG_FORMAT.
        force: Reconfigure even if logging was already initialized.
    """
    global _INITIALIZED

    if _INITIALIZED and not force:
        return

    log_level = _resolve_level(level)
    renderer_name = (fmt or settings.LOG_FORMAT or "json").lower()

    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        stream=sys.stderr,
        force=True,
    )

    if renderer_name == "console":
        renderer = structlog.dev.ConsoleRenderer()
    else:
        renderer = structlog.processors.JSONRenderer(ensure_ascii=False)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=False,
    )

    _INITIALIZED = True


__all__ = ["init_logging"]
