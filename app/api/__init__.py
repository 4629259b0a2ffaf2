# app/api/__init__.py
"""
HTTP API package.

The aggregated router is included by the application factory:

    from app.api import api_router
    app.include_router(api_router, prefix=settings.API_PREFIX)
"""

from fastapi import APIRouter

from app.api.routes import vacation_requests, workers

api_router = APIRouter(
    responses={
        422: {"description": "Malformed request body or parameters"},
        500: {"description": "Internal Server Error"},
    }
)

api_router.include_router(workers.router)
api_router.include_router(vacation_requests.router)

__all__ = ["api_router"]
