# app/api/deps.py
"""
FastAPI dependencies: one database session per request and the services
wired on top of it.

Example usage in a router:
    from fastapi import Depends, APIRouter
    from app.api import deps

    router = APIRouter()

    @router.get("/workers")
    def list_workers(service: WorkerService = Depends(deps.get_worker_service)):
        return service.list_workers()
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from app.config.settings import Settings, get_settings
from app.db.session import get_db
from app.domain.services.vacation_calculation_service import VacationCalculationService
from app.repositories.vacation_request_repository import SqlAlchemyVacationRequestRepository
from app.repositories.worker_repository import SqlAlchemyWorkerRepository
from app.services.vacation_request_service import VacationRequestService
from app.services.worker_service import WorkerService


# --- Repositories --------------------------------------------------------------

def get_worker_repository(db: Session = Depends(get_db)) -> SqlAlchemyWorkerRepository:
    return SqlAlchemyWorkerRepository(db)


def get_vacation_request_repository(
    db: Session = Depends(get_db),
) -> SqlAlchemyVacationRequestRepository:
    return SqlAlchemyVacationRequestRepository(db)


# --- Domain services -----------------------------------------------------------

def get_calculation_service(
    settings: Settings = Depends(get_settings),
) -> VacationCalculationService:
    return VacationCalculationService(
        base_days=settings.VACATION_BASE_DAYS,
        max_days=settings.VACATION_MAX_DAYS,
        bonus_days=settings.VACATION_SENIORITY_BONUS_DAYS,
    )


# --- Use cases -----------------------------------------------------------------

def get_worker_service(
    worker_repository: SqlAlchemyWorkerRepository = Depends(get_worker_repository),
) -> WorkerService:
    return WorkerService(worker_repository)


def get_vacation_request_service(
    worker_repository: SqlAlchemyWorkerRepository = Depends(get_worker_repository),
    vacation_request_repository: SqlAlchemyVacationRequestRepository = Depends(
        get_vacation_request_repository
    ),
    calculation_service: VacationCalculationService = Depends(get_calculation_service),
) -> VacationRequestService:
    return VacationRequestService(
        worker_repository,
        vacation_request_repository,
        calculation_service,
    )


__all__ = [
    "get_db",
    "get_worker_repository",
    "get_vacation_request_repository",
    "get_calculation_service",
    "get_worker_service",
    "get_vacation_request_service",
]
