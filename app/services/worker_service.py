"""
Worker use cases: registration, lookup, listing and removal.
"""

from typing import Dict, List

from app.core.exceptions import (
    DuplicateEntryError,
    WorkerNotFoundError,
    create_validation_error,
)
from app.domain.entities.worker import Worker
from app.domain.repositories import WorkerRepository
from app.domain.value_objects import (
    HireDate,
    WorkerArea,
    WorkerCedula,
    WorkerCode,
    WorkerName,
    WorkerPosition,
)
from app.schemas.worker import WorkerCreate
from app.services.base import BaseService, parse_value


class WorkerService(BaseService):
    """
    Orchestrates worker registration on top of a WorkerRepository.

    Args:
        worker_repository: Storage for Worker aggregates
    """

    def __init__(self, worker_repository: WorkerRepository):
        super().__init__()
        self.worker_repository = worker_repository

    def create_worker(self, data: WorkerCreate) -> Worker:
        """
        Register a new worker.

        Every field is checked before anything is stored, and all invalid
        fields are reported together.

        Args:
            data: Worker registration payload

        Returns:
            The stored worker

        Raises:
            DuplicateEntryError: Code or cedula already registered
            ValidationError: One or more fields break their rule
        """
        code = data.code.strip()
        if self.worker_repository.find_by_code(code):
            raise DuplicateEntryError(
                f"Worker with code {code} already exists",
                field="code",
                value=code,
                table="workers",
            )

        cedula = data.cedula.strip()
        if self.worker_repository.find_by_cedula(cedula):
            raise DuplicateEntryError(
                f"Worker with cedula {cedula} already exists",
                field="cedula",
                value=cedula,
                table="workers",
            )

        parsed = {
            "code": parse_value(WorkerCode, data.code, "code"),
            "cedula": parse_value(WorkerCedula, data.cedula, "cedula"),
            "name": parse_value(WorkerName, data.name, "name"),
            "hireDate": parse_value(HireDate, data.hire_date, "hireDate"),
            "area": parse_value(WorkerArea, data.area, "area"),
            "position": parse_value(WorkerPosition, data.position, "position"),
        }
        field_errors: Dict[str, List[str]] = {
            field: [result.error.message]
            for field, result in parsed.items()
            if not result.is_success
        }
        if field_errors:
            raise create_validation_error(field_errors)

        worker = Worker.create(
            code=parsed["code"].data.value,
            cedula=parsed["cedula"].data.value,
            name=parsed["name"].data.value,
            hire_date=parsed["hireDate"].data.value,
            area=parsed["area"].data.value,
            position=parsed["position"].data.value,
        )
        self.worker_repository.save(worker)

        self._record_event(
            "worker_created",
            worker_id=worker.id.value,
            code=worker.code.value,
        )
        return worker

    def get_worker(self, worker_id: str) -> Worker:
        """
        Fetch one worker.

        Raises:
            WorkerNotFoundError: No worker with that id
        """
        worker = self.worker_repository.find_by_id(worker_id)
        if worker is None:
            raise WorkerNotFoundError(worker_id)
        return worker

    def list_workers(self) -> List[Worker]:
        """All workers ordered by name."""
        return self.worker_repository.find_all()

    def delete_worker(self, worker_id: str) -> None:
        """
        Remove a worker. Their vacation requests are kept.

        Raises:
            WorkerNotFoundError: No worker with that id
        """
        if not self.worker_repository.delete(worker_id):
            raise WorkerNotFoundError(worker_id)

        self._record_event("worker_deleted", worker_id=worker_id)
