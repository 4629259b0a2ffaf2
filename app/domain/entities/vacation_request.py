"""Vacation request aggregate and its approval state machine."""

from datetime import datetime
from typing import Optional

from app.core.exceptions import InvalidStateTransitionError, ValidationError
from app.domain.entities.entity import Entity
from app.domain.value_objects import (
    HOURS_PER_VACATION_DAY,
    DateLike,
    VacationDays,
    VacationEndDate,
    VacationHours,
    VacationRequestId,
    VacationRequestReason,
    VacationRequestStatus,
    VacationRequestType,
    VacationStartDate,
    VacationStatus,
    VacationType,
    WorkerId,
    ensure_utc,
    utcnow,
)


class VacationRequest(Entity[VacationRequestId]):
    """
    A worker's request for time off.

    A request starts ``pending`` and moves exactly once to ``approved`` or
    ``rejected``. Both terminal transitions record the acting user in
    ``approved_by``.
    """

    def __init__(
        self,
        id: VacationRequestId,
        worker_id: WorkerId,
        start_date: VacationStartDate,
        end_date: VacationEndDate,
        days: VacationDays,
        hours: VacationHours,
        type: VacationRequestType,
        reason: VacationRequestReason,
        status: VacationRequestStatus,
        created_at: datetime,
        approved_at: Optional[datetime] = None,
        rejected_at: Optional[datetime] = None,
        approved_by: Optional[str] = None,
    ):
        super().__init__(id)
        self._worker_id = worker_id
        self._start_date = start_date
        self._end_date = end_date
        self._days = days
        self._hours = hours
        self._type = type
        self._reason = reason
        self._status = status
        self._created_at = ensure_utc(created_at)
        self._approved_at = ensure_utc(approved_at) if approved_at else None
        self._rejected_at = ensure_utc(rejected_at) if rejected_at else None
        self._approved_by = approved_by

    # ==================== Read-only attributes ====================

    @property
    def worker_id(self) -> WorkerId:
        return self._worker_id

    @property
    def start_date(self) -> VacationStartDate:
        return self._start_date

    @property
    def end_date(self) -> VacationEndDate:
        return self._end_date

    @property
    def days(self) -> VacationDays:
        return self._days

    @property
    def hours(self) -> VacationHours:
        return self._hours

    @property
    def type(self) -> VacationRequestType:
        return self._type

    @property
    def reason(self) -> VacationRequestReason:
        return self._reason

    @property
    def status(self) -> VacationRequestStatus:
        return self._status

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def approved_at(self) -> Optional[datetime]:
        return self._approved_at

    @property
    def rejected_at(self) -> Optional[datetime]:
        return self._rejected_at

    @property
    def approved_by(self) -> Optional[str]:
        return self._approved_by

    @property
    def total_time_in_days(self) -> float:
        """Requested time in days; hours convert at 8 hours per day."""
        if self._type.value is VacationType.DAYS:
            return self._days.value
        return self._hours.value / HOURS_PER_VACATION_DAY

    # ==================== State transitions ====================

    def approve(self, approved_by: str) -> None:
        """
        Approve a pending request.

        Raises:
            InvalidStateTransitionError: If the request is not pending.
        """
        self._transition(VacationStatus.APPROVED, approved_by, "approved")
        self._approved_at = utcnow()

    def reject(self, rejected_by: str) -> None:
        """
        Reject a pending request.

        The rejecting user is recorded in ``approved_by``.

        Raises:
            InvalidStateTransitionError: If the request is not pending.
        """
        self._transition(VacationStatus.REJECTED, rejected_by, "rejected")
        self._rejected_at = utcnow()

    def _transition(self, target: VacationStatus, actor: str, verb: str) -> None:
        if not self._status.is_pending:
            raise InvalidStateTransitionError(
                f"Only pending requests can be {verb}",
                current_status=self._status.value.value,
                target_status=target.value,
            )
        if not isinstance(actor, str) or not actor.strip():
            raise ValidationError(f"The user who {verb} the request is required", field="approved_by")

        self._status = VacationRequestStatus(target)
        self._approved_by = actor.strip()

    # ==================== Factories ====================

    @classmethod
    def create(
        cls,
        worker_id: str,
        start_date: DateLike,
        end_date: DateLike,
        days: int,
        hours: int,
        type: str,
        reason: str,
    ) -> "VacationRequest":
        """Build a new pending request; dates must not be before today."""
        return cls(
            VacationRequestId.generate(),
            WorkerId(worker_id),
            VacationStartDate(start_date),
            VacationEndDate(end_date),
            VacationDays(days),
            VacationHours(hours),
            VacationRequestType(type),
            VacationRequestReason(reason),
            VacationRequestStatus.pending(),
            utcnow(),
        )

    @classmethod
    def restore(
        cls,
        id: str,
        worker_id: str,
        start_date: DateLike,
        end_date: DateLike,
        days: int,
        hours: int,
        type: str,
        reason: str,
        status: str,
        created_at: datetime,
        approved_at: Optional[datetime] = None,
        rejected_at: Optional[datetime] = None,
        approved_by: Optional[str] = None,
    ) -> "VacationRequest":
        """Rebuild a stored request. Past start/end dates are accepted."""
        return cls(
            VacationRequestId(id),
            WorkerId(worker_id),
            VacationStartDate(start_date, validate_window=False),
            VacationEndDate(end_date, validate_window=False),
            VacationDays(days),
            VacationHours(hours),
            VacationRequestType(type),
            VacationRequestReason(reason),
            VacationRequestStatus(status),
            created_at,
            approved_at,
            rejected_at,
            approved_by,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id.value,
            "worker_id": self._worker_id.value,
            "start_date": self._start_date.value,
            "end_date": self._end_date.value,
            "days": self._days.value,
            "hours": self._hours.value,
            "type": self._type.value.value,
            "reason": self._reason.value,
            "status": self._status.value.value,
            "created_at": self._created_at,
            "approved_at": self._approved_at,
            "rejected_at": self._rejected_at,
            "approved_by": self._approved_by,
            "total_time_in_days": self.total_time_in_days,
        }
