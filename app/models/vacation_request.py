"""
Vacation request database model.
"""

from datetime import datetime
from typing import Optional

from sqlalchemy import CheckConstraint, DateTime, Enum, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from app.domain.value_objects import VacationStatus, VacationType
from app.models.base.base_model import TimestampModel

__all__ = ["VacationRequestModel"]


class VacationRequestModel(TimestampModel):
    """
    Stored vacation request.

    ``worker_id`` is a weak reference: deleting a worker leaves its
    requests in place.
    """

    __tablename__ = "vacation_requests"
    __table_args__ = (
        CheckConstraint("days >= 0 AND days <= 365", name="ck_vacation_requests_days_range"),
        CheckConstraint("hours >= 0 AND hours <= 2920", name="ck_vacation_requests_hours_range"),
        Index("ix_vacation_requests_worker_id", "worker_id"),
        Index("ix_vacation_requests_status", "status"),
        Index("ix_vacation_requests_created_at", "created_at"),
        {"comment": "Vacation requests and their approval state"}
    )

    worker_id: Mapped[str] = mapped_column(
        String(36),
        nullable=False,
        comment="Requesting worker"
    )
    start_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        comment="Vacation start"
    )
    end_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        comment="Vacation end"
    )
    days: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        comment="Requested days"
    )
    hours: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        comment="Requested hours"
    )
    type: Mapped[VacationType] = mapped_column(
        Enum(VacationType, name="vacation_type_enum", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        comment="Unit of the request (days or hours)"
    )
    reason: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="Reason for the request"
    )
    status: Mapped[VacationStatus] = mapped_column(
        Enum(VacationStatus, name="vacation_status_enum", values_callable=lambda e: [m.value for m in e]),
        nullable=False,
        default=VacationStatus.PENDING,
        comment="Current approval status"
    )
    approved_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        comment="Approval timestamp"
    )
    rejected_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        comment="Rejection timestamp"
    )
    approved_by: Mapped[Optional[str]] = mapped_column(
        String(100),
        nullable=True,
        comment="User who approved or rejected the request"
    )
