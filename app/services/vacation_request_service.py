"""
Vacation request use cases.

Covers the request lifecycle (create, approve, reject), queries, and the
per-worker vacation balance.
"""

from dataclasses import dataclass
from typing import List, Optional, Union

from app.core.exceptions import (
    InsufficientBalanceError,
    InvalidDateRangeError,
    ValidationError,
    VacationRequestNotFoundError,
    WorkerNotFoundError,
)
from app.domain.entities.vacation_request import VacationRequest
from app.domain.entities.worker import Worker
from app.domain.repositories import VacationRequestRepository, WorkerRepository
from app.domain.services.vacation_calculation_service import (
    VacationBalance,
    VacationCalculationService,
)
from app.domain.value_objects import (
    HOURS_PER_VACATION_DAY,
    VacationRequestStatus,
    VacationRequestType,
    VacationStatus,
    VacationType,
    ensure_utc,
    utcnow,
)
from app.schemas.vacation_request import VacationRequestCreate
from app.services.base import BaseService


@dataclass(frozen=True)
class WorkerVacationBalance:
    """A worker together with their computed balance."""
    worker: Worker
    seniority_years: int
    balance: VacationBalance


class VacationRequestService(BaseService):
    """
    Orchestrates vacation requests across the worker and request stores.

    Args:
        worker_repository: Storage for Worker aggregates
        vacation_request_repository: Storage for VacationRequest aggregates
        calculation_service: Entitlement and balance policy
    """

    def __init__(
        self,
        worker_repository: WorkerRepository,
        vacation_request_repository: VacationRequestRepository,
        calculation_service: VacationCalculationService,
    ):
        super().__init__()
        self.worker_repository = worker_repository
        self.vacation_request_repository = vacation_request_repository
        self.calculation_service = calculation_service

    # ==================== Lifecycle ====================

    def create_vacation_request(self, data: VacationRequestCreate) -> VacationRequest:
        """
        Submit a new vacation request for a worker.

        Args:
            data: Request payload

        Returns:
            The stored pending request

        Raises:
            WorkerNotFoundError: The worker does not exist
            ValidationError: Amount missing for the chosen type, or a field breaks its rule
            InsufficientBalanceError: Not enough available days
            InvalidDateRangeError: Start date is not before end date
        """
        worker = self._require_worker(data.worker_id)

        request_type = VacationRequestType(data.type).value
        if request_type is VacationType.DAYS and data.days <= 0:
            raise ValidationError(
                "Days must be greater than 0 for days type vacation", field="days"
            )
        if request_type is VacationType.HOURS and data.hours <= 0:
            raise ValidationError(
                "Hours must be greater than 0 for hours type vacation", field="hours"
            )

        if request_type is VacationType.DAYS:
            requested_days = data.days
        else:
            requested_days = data.hours / HOURS_PER_VACATION_DAY

        existing = self.vacation_request_repository.find_by_worker_id(worker.id.value)
        if not self.calculation_service.can_request_vacation(worker, existing, requested_days):
            balance = self.calculation_service.calculate_vacation_balance(worker, existing)
            raise InsufficientBalanceError(
                requested_days=requested_days,
                available_days=balance.available_days,
            )

        if ensure_utc(data.start_date) >= ensure_utc(data.end_date):
            raise InvalidDateRangeError(
                start_date=data.start_date.isoformat(),
                end_date=data.end_date.isoformat(),
            )

        vacation_request = VacationRequest.create(
            worker_id=worker.id.value,
            start_date=data.start_date,
            end_date=data.end_date,
            days=data.days,
            hours=data.hours,
            type=request_type,
            reason=data.reason,
        )
        self.vacation_request_repository.save(vacation_request)

        self._record_event(
            "vacation_request_created",
            vacation_request_id=vacation_request.id.value,
            worker_id=worker.id.value,
            requested_days=requested_days,
        )
        return vacation_request

    def approve_vacation_request(self, vacation_request_id: str, approved_by: str) -> VacationRequest:
        """
        Approve a pending request.

        Raises:
            VacationRequestNotFoundError: Unknown request
            InvalidStateTransitionError: Request is no longer pending
            ConcurrentModificationError: Another request changed it first
        """
        vacation_request = self.get_vacation_request(vacation_request_id)
        previous_status = vacation_request.status.value

        vacation_request.approve(approved_by)
        self.vacation_request_repository.save(vacation_request, expected_status=previous_status)

        self._record_event(
            "vacation_request_approved",
            vacation_request_id=vacation_request.id.value,
            approved_by=vacation_request.approved_by,
        )
        return vacation_request

    def reject_vacation_request(self, vacation_request_id: str, rejected_by: str) -> VacationRequest:
        """
        Reject a pending request. The rejecting user is stored as ``approved_by``.

        Raises:
            VacationRequestNotFoundError: Unknown request
            InvalidStateTransitionError: Request is no longer pending
            ConcurrentModificationError: Another request changed it first
        """
        vacation_request = self.get_vacation_request(vacation_request_id)
        previous_status = vacation_request.status.value

        vacation_request.reject(rejected_by)
        self.vacation_request_repository.save(vacation_request, expected_status=previous_status)

        self._record_event(
            "vacation_request_rejected",
            vacation_request_id=vacation_request.id.value,
            rejected_by=vacation_request.approved_by,
        )
        return vacation_request

    def delete_vacation_request(self, vacation_request_id: str) -> None:
        """
        Raises:
            VacationRequestNotFoundError: Unknown request
        """
        if not self.vacation_request_repository.delete(vacation_request_id):
            raise VacationRequestNotFoundError(vacation_request_id)

        self._record_event("vacation_request_deleted", vacation_request_id=vacation_request_id)

    # ==================== Queries ====================

    def get_vacation_request(self, vacation_request_id: str) -> VacationRequest:
        vacation_request = self.vacation_request_repository.find_by_id(vacation_request_id)
        if vacation_request is None:
            raise VacationRequestNotFoundError(vacation_request_id)
        return vacation_request

    def list_vacation_requests(
        self, status: Optional[Union[VacationStatus, str]] = None
    ) -> List[VacationRequest]:
        """All requests newest first, optionally filtered by status."""
        if status is None:
            return self.vacation_request_repository.find_all()
        return self.vacation_request_repository.find_by_status(VacationRequestStatus(status).value)

    def list_worker_vacation_requests(self, worker_id: str) -> List[VacationRequest]:
        """A worker's requests newest first."""
        worker = self._require_worker(worker_id)
        return self.vacation_request_repository.find_by_worker_id(worker.id.value)

    def get_worker_vacation_balance(self, worker_id: str) -> WorkerVacationBalance:
        """
        Compute a worker's current balance.

        Raises:
            WorkerNotFoundError: The worker does not exist
        """
        worker = self._require_worker(worker_id)
        requests = self.vacation_request_repository.find_by_worker_id(worker.id.value)

        now = utcnow()
        return WorkerVacationBalance(
            worker=worker,
            seniority_years=worker.seniority_years_at(now),
            balance=self.calculation_service.calculate_vacation_balance(worker, requests, now),
        )

    def _require_worker(self, worker_id: str) -> Worker:
        worker = self.worker_repository.find_by_id(worker_id)
        if worker is None:
            raise WorkerNotFoundError(worker_id)
        return worker
