"""
Vacation entitlement and balance calculation.

Pure, stateless domain service: every figure is derived from a worker's
seniority and the worker's vacation requests.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, Optional

from app.domain.entities.vacation_request import VacationRequest
from app.domain.entities.worker import Worker
from app.domain.value_objects import VacationStatus, utcnow

BASE_VACATION_DAYS = 15
MAX_VACATION_DAYS = 30
SENIORITY_BONUS_DAYS = 1


@dataclass(frozen=True)
class VacationBalance:
    """Computed balance for one worker; never persisted."""
    total_days: float
    used_days: float
    pending_days: float
    available_days: float

    def to_dict(self) -> dict:
        return {
            "total_days": self.total_days,
            "used_days": self.used_days,
            "available_days": self.available_days,
            "pending_days": self.pending_days,
        }


class VacationCalculationService:
    """
    Computes vacation entitlement and balances.

    Entitlement is ``base_days`` plus ``bonus_days`` per completed year of
    seniority, capped at ``max_days``. Approved requests count as used,
    pending requests are reserved, rejected requests never count.

    Args:
        base_days: Entitlement of a worker with no seniority
        max_days: Upper bound of the entitlement
        bonus_days: Extra days per completed year of seniority
    """

    def __init__(
        self,
        base_days: int = BASE_VACATION_DAYS,
        max_days: int = MAX_VACATION_DAYS,
        bonus_days: int = SENIORITY_BONUS_DAYS,
    ):
        self.base_days = base_days
        self.max_days = max_days
        self.bonus_days = bonus_days

    def calculate_total_vacation_days(self, worker: Worker, now: Optional[datetime] = None) -> int:
        seniority_years = worker.seniority_years_at(now or utcnow())
        seniority_bonus = min(seniority_years * self.bonus_days, self.max_days - self.base_days)
        return min(self.base_days + seniority_bonus, self.max_days)

    def calculate_used_vacation_days(self, vacation_requests: Iterable[VacationRequest]) -> float:
        return self._sum_with_status(vacation_requests, VacationStatus.APPROVED)

    def calculate_pending_vacation_days(self, vacation_requests: Iterable[VacationRequest]) -> float:
        return self._sum_with_status(vacation_requests, VacationStatus.PENDING)

    def calculate_vacation_balance(
        self,
        worker: Worker,
        vacation_requests: Iterable[VacationRequest],
        now: Optional[datetime] = None,
    ) -> VacationBalance:
        requests = list(vacation_requests)
        total_days = self.calculate_total_vacation_days(worker, now)
        used_days = self.calculate_used_vacation_days(requests)
        pending_days = self.calculate_pending_vacation_days(requests)

        return VacationBalance(
            total_days=total_days,
            used_days=used_days,
            pending_days=pending_days,
            available_days=max(0, total_days - used_days - pending_days),
        )

    def can_request_vacation(
        self,
        worker: Worker,
        vacation_requests: Iterable[VacationRequest],
        requested_days: float,
        now: Optional[datetime] = None,
    ) -> bool:
        balance = self.calculate_vacation_balance(worker, vacation_requests, now)
        return balance.available_days >= requested_days

    @staticmethod
    def _sum_with_status(vacation_requests: Iterable[VacationRequest], status: VacationStatus) -> float:
        return sum(
            request.total_time_in_days
            for request in vacation_requests
            if request.status.value is status
        )
