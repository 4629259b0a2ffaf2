"""Repository interfaces consumed by the domain and use cases."""

from abc import ABC, abstractmethod
from typing import List, Optional

from app.domain.entities.vacation_request import VacationRequest
from app.domain.entities.worker import Worker
from app.domain.value_objects import VacationStatus


class WorkerRepository(ABC):
    """Storage contract for Worker aggregates."""

    @abstractmethod
    def save(self, worker: Worker) -> Worker:
        """Insert the worker, or overwrite the stored one with the same id."""
        pass

    @abstractmethod
    def find_by_id(self, worker_id: str) -> Optional[Worker]:
        pass

    @abstractmethod
    def find_by_code(self, code: str) -> Optional[Worker]:
        pass

    @abstractmethod
    def find_by_cedula(self, cedula: str) -> Optional[Worker]:
        pass

    @abstractmethod
    def find_all(self) -> List[Worker]:
        """All workers ordered by name."""
        pass

    @abstractmethod
    def delete(self, worker_id: str) -> bool:
        """Remove a worker. Returns False when nothing was stored under the id."""
        pass


class VacationRequestRepository(ABC):
    """Storage contract for VacationRequest aggregates.

    Every list operation returns requests newest first (created_at descending).
    """

    @abstractmethod
    def save(
        self,
        vacation_request: VacationRequest,
        expected_status: Optional[VacationStatus] = None,
    ) -> VacationRequest:
        """
        Upsert a request.

        When ``expected_status`` is given the write only succeeds if the
        stored request still has that status; otherwise
        ConcurrentModificationError is raised.
        """
        pass

    @abstractmethod
    def find_by_id(self, vacation_request_id: str) -> Optional[VacationRequest]:
        pass

    @abstractmethod
    def find_by_worker_id(self, worker_id: str) -> List[VacationRequest]:
        pass

    @abstractmethod
    def find_by_status(self, status: VacationStatus) -> List[VacationRequest]:
        pass

    @abstractmethod
    def find_all(self) -> List[VacationRequest]:
        pass

    @abstractmethod
    def delete(self, vacation_request_id: str) -> bool:
        """Remove a request. Returns False when nothing was stored under the id."""
        pass
