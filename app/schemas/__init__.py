"""Pydantic request/response schemas (camelCase on the wire)."""

from app.schemas.vacation_request import (
    ApproveVacationRequest,
    RejectVacationRequest,
    VacationBalanceResponse,
    VacationRequestCreate,
    VacationRequestResponse,
    WorkerVacationBalanceResponse,
)
from app.schemas.worker import WorkerCreate, WorkerResponse

__all__ = [
    "WorkerCreate",
    "WorkerResponse",
    "VacationRequestCreate",
    "ApproveVacationRequest",
    "RejectVacationRequest",
    "VacationRequestResponse",
    "VacationBalanceResponse",
    "WorkerVacationBalanceResponse",
]
