"""Builders for test data."""

from datetime import datetime, timedelta, timezone
from typing import Optional
from uuid import uuid4

from app.domain.entities.vacation_request import VacationRequest
from app.domain.entities.worker import Worker

REASON = "Family trip to the coast"


def days_ago(days: float) -> datetime:
    return datetime.now(timezone.utc) - timedelta(days=days)


def days_ahead(days: float) -> datetime:
    return datetime.now(timezone.utc) + timedelta(days=days)


def make_worker(
    code: str = "EMP001",
    cedula: str = "12345678",
    name: str = "Ana Torres",
    hired_days_ago: float = 30,
    area: str = "Engineering",
    position: str = "Developer",
) -> Worker:
    return Worker.create(code, cedula, name, days_ago(hired_days_ago), area, position)


def make_request(
    worker: Worker,
    days: int = 5,
    hours: int = 0,
    type: str = "days",
    starts_in: int = 10,
    length: int = 7,
    reason: str = REASON,
) -> VacationRequest:
    return VacationRequest.create(
        worker.id.value,
        days_ahead(starts_in),
        days_ahead(starts_in + length),
        days,
        hours,
        type,
        reason,
    )


def restore_request(
    worker_id: str,
    status: str = "pending",
    days: int = 5,
    hours: int = 0,
    type: str = "days",
    created_at: Optional[datetime] = None,
    start: Optional[datetime] = None,
    end: Optional[datetime] = None,
    request_id: Optional[str] = None,
    **extra,
) -> VacationRequest:
    """Rebuild a request with arbitrary (possibly past) dates and status."""
    return VacationRequest.restore(
        id=request_id or str(uuid4()),
        worker_id=worker_id,
        start_date=start or days_ahead(10),
        end_date=end or days_ahead(15),
        days=days,
        hours=hours,
        type=type,
        reason=REASON,
        status=status,
        created_at=created_at or datetime.now(timezone.utc),
        **extra,
    )
