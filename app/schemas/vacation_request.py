"""
Vacation request and balance schemas.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from app.domain.entities.vacation_request import VacationRequest
from app.domain.services.vacation_calculation_service import VacationBalance
from app.domain.value_objects import VacationStatus, VacationType
from app.schemas.common.base import BaseCreateSchema, BaseResponseSchema, BaseSchema

__all__ = [
    "VacationRequestCreate",
    "ApproveVacationRequest",
    "RejectVacationRequest",
    "VacationRequestResponse",
    "VacationBalanceResponse",
    "WorkerVacationBalanceResponse",
]


class VacationRequestCreate(BaseCreateSchema):
    """
    Vacation request payload.

    Exactly one of ``days`` / ``hours`` is meaningful, chosen by ``type``;
    the other defaults to 0.
    """

    worker_id: str = Field(..., min_length=1, description="Requesting worker id")
    start_date: datetime = Field(..., description="First day of vacation (ISO 8601)")
    end_date: datetime = Field(..., description="Last day of vacation (ISO 8601)")
    days: int = Field(default=0, description="Requested days when type is 'days'")
    hours: int = Field(default=0, description="Requested hours when type is 'hours'")
    type: VacationType = Field(..., description="Unit of the request")
    reason: str = Field(..., description="Reason, 10 to 500 characters")


class ApproveVacationRequest(BaseSchema):
    approved_by: str = Field(..., min_length=1, max_length=100, description="Approving user")


class RejectVacationRequest(BaseSchema):
    rejected_by: str = Field(..., min_length=1, max_length=100, description="Rejecting user")


class VacationRequestResponse(BaseResponseSchema):
    """Vacation request record; unset timestamps and actor are omitted."""

    id: str
    worker_id: str
    start_date: datetime
    end_date: datetime
    days: int
    hours: int
    type: VacationType
    reason: str
    status: VacationStatus
    created_at: datetime
    approved_at: Optional[datetime] = None
    rejected_at: Optional[datetime] = None
    approved_by: Optional[str] = None
    total_time_in_days: float

    @classmethod
    def from_entity(cls, vacation_request: VacationRequest) -> "VacationRequestResponse":
        return cls(**vacation_request.to_dict())


class VacationBalanceResponse(BaseResponseSchema):
    total_days: float
    used_days: float
    available_days: float
    pending_days: float

    @classmethod
    def from_balance(cls, balance: VacationBalance) -> "VacationBalanceResponse":
        return cls(**balance.to_dict())


class WorkerVacationBalanceResponse(BaseResponseSchema):
    worker_id: str
    worker_name: str
    seniority_years: int
    vacation_balance: VacationBalanceResponse
