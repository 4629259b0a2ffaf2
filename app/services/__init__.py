# app/services/__init__.py
"""
Service layer root package.

Use-case services orchestrate domain entities through the repository
interfaces:

- Domain entities and value objects (app.domain.*)
- Repository implementations (app.repositories.*)
- Pydantic schemas for inputs (app.schemas.*)
- Common service infrastructure (app.services.base.*)

Typical pattern for a service:

    class SomeService(BaseService):
        def __init__(self, some_repository: SomeRepository) -> None:
            super().__init__()
            self.some_repository = some_repository

        def some_use_case(...):
            entity = self.some_repository.find_by_id(...)
            ...
            self._record_event("some_event", entity_id=entity.id.value)
"""

from app.services.vacation_request_service import VacationRequestService, WorkerVacationBalance
from app.services.worker_service import WorkerService

__all__ = [
    "WorkerService",
    "VacationRequestService",
    "WorkerVacationBalance",
]
