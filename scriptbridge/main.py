# scriptbridge/main.py
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from scriptbridge import __version__
from scriptbridge.adapters.api.routers import admin, health, languages, translation, transliteration
from scriptbridge.core.domain.exceptions import DomainError, InvalidRequestError
from scriptbridge.shared.config import AppEnv, settings
from scriptbridge.shared.container import container
from scriptbridge.shared.logging_setup import init_logging

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application Lifecycle Manager."""
    init_logging()
    logger.info(
        "app_starting",
        app=settings.APP_NAME,
        env=settings.APP_ENV.value,
        storage=settings.STORAGE_BACKEND.value,
    )

    yield

    logger.info("app_stopping")


def create_app() -> FastAPI:
    """Factory function to create the FastAPI application."""
    app = FastAPI(
        title=settings.APP_NAME,
        version=__version__,
        description="Script-aware transliteration and pivot translation",
        docs_url="/docs" if settings.APP_ENV != AppEnv.PRODUCTION else None,
        redoc_url="/redoc" if settings.APP_ENV != AppEnv.PRODUCTION else None,
        lifespan=lifespan,
    )
    app.container = container

    # Routers are imported above, so every module can be wired now.
    container.wire(modules=[
        "scriptbridge.adapters.api.routers.transliteration",
        "scriptbridge.adapters.api.routers.translation",
        "scriptbridge.adapters.api.routers.admin",
        "scriptbridge.adapters.api.routers.health",
    ])

    # CORS Configuration
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.DEBUG else [],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Global Exception Handlers
    @app.exception_handler(InvalidRequestError)
    async def invalid_request_handler(request: Request, exc: InvalidRequestError):
        return JSONResponse(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            content={"status": "error", "code": 422, "message": exc.message},
        )

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError):
        logger.error("domain_error", error=exc.message, path=request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"status": "error", "code": 500, "message": exc.message},
        )

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"status": "error", "code": exc.status_code, "message": exc.detail},
        )

    @app.exception_handler(Exception)
    async def global_exception_handler(request: Request, exc: Exception):
        logger.error("unhandled_exception", error=str(exc), path=request.url.path, exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "status": "error",
                "code": 500,
                "message": str(exc) if settings.DEBUG else "Internal Server Error",
            },
        )

    # Mount V1 routers
    app.include_router(transliteration.router, prefix="/api/v1")
    app.include_router(translation.router, prefix="/api/v1")
    app.include_router(languages.router, prefix="/api/v1")
    app.include_router(admin.router, prefix="/api/v1")
    app.include_router(health.router, prefix="/api/v1")

    return app


app = create_app()


def run() -> None:
    import uvicorn

    uvicorn.run("scriptbridge.main:app", host="0.0.0.0", port=8000, reload=settings.DEBUG)


if __name__ == "__main__":
    run()
