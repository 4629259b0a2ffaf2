"""
Worker request and response schemas.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from app.domain.entities.worker import Worker
from app.schemas.common.base import BaseCreateSchema, BaseResponseSchema

__all__ = ["WorkerCreate", "WorkerResponse"]


class WorkerCreate(BaseCreateSchema):
    """
    Worker registration payload.

    Field rules (lengths, digits-only cedula, past hire date) are enforced
    by the domain so every violation is reported together.
    """

    code: str = Field(..., description="Unique worker code", examples=["EMP001"])
    cedula: str = Field(..., description="Unique national ID, digits only", examples=["12345678"])
    name: str = Field(..., description="Full name", examples=["Juan Pérez"])
    hire_date: datetime = Field(..., description="Hire date (ISO 8601)")
    area: str = Field(..., description="Organizational area", examples=["Engineering"])
    position: str = Field(..., description="Job position", examples=["Developer"])


class WorkerResponse(BaseResponseSchema):
    """Worker record as returned by the API."""

    id: str
    code: str
    cedula: str
    name: str
    hire_date: datetime
    area: str
    position: str
    seniority_years: int

    @classmethod
    def from_entity(cls, worker: Worker, now: Optional[datetime] = None) -> "WorkerResponse":
        return cls(**worker.to_dict(now))
