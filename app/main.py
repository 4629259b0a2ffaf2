from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api import api_router
from app.config.settings import settings
from app.core.logging import get_logger, setup_logging
from app.core.middleware import register_exception_handlers, register_middlewares
from app.db.init_db import init_db

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Create missing tables before the first request is served."""
    init_db()
    logger.info(
        f"{settings.APP_NAME} {settings.APP_VERSION} started",
        extra={"environment": settings.ENVIRONMENT, "api_prefix": settings.API_PREFIX},
    )
    yield


def create_app() -> FastAPI:
    """
    Application factory for the FastAPI app.

    - Configures title, version, debug mode from Settings.
    - Registers CORS, core middleware, and exception handlers.
    - Includes the API router under settings.API_PREFIX.
    """
    setup_logging()

    app = FastAPI(
        title=settings.APP_NAME,
        description="API for managing workers and their vacation requests",
        debug=settings.DEBUG,
        version=settings.APP_VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    # Credentials cannot be combined with a wildcard origin
    allow_all = not settings.CORS_ORIGINS or settings.CORS_ORIGINS == ["*"]
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if allow_all else settings.CORS_ORIGINS,
        allow_credentials=not allow_all,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_middlewares(app)
    register_exception_handlers(app)

    app.include_router(api_router, prefix=settings.API_PREFIX)

    @app.get("/", tags=["System Health"])
    def index():
        """Service index listing the available endpoints."""
        prefix = settings.API_PREFIX
        return {
            "message": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "documentation": "/docs",
            "endpoints": {
                "workers": {
                    "create": f"POST {prefix}/workers",
                    "list": f"GET {prefix}/workers",
                    "get": f"GET {prefix}/workers/{{id}}",
                    "delete": f"DELETE {prefix}/workers/{{id}}",
                    "vacationBalance": f"GET {prefix}/workers/{{id}}/vacation-balance",
                    "vacationRequests": f"GET {prefix}/workers/{{id}}/vacation-requests",
                },
                "vacationRequests": {
                    "create": f"POST {prefix}/vacation-requests",
                    "list": f"GET {prefix}/vacation-requests",
                    "get": f"GET {prefix}/vacation-requests/{{id}}",
                    "approve": f"PUT {prefix}/vacation-requests/{{id}}/approve",
                    "reject": f"PUT {prefix}/vacation-requests/{{id}}/reject",
                    "delete": f"DELETE {prefix}/vacation-requests/{{id}}",
                },
            },
        }

    @app.get("/health", tags=["System Health"])
    def health_check():
        return {"status": "ok"}

    return app


app = create_app()
