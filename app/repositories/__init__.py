"""SQLAlchemy implementations of the domain repositories."""

from app.repositories.base import BaseRepository
from app.repositories.vacation_request_repository import SqlAlchemyVacationRequestRepository
from app.repositories.worker_repository import SqlAlchemyWorkerRepository

__all__ = [
    "BaseRepository",
    "SqlAlchemyWorkerRepository",
    "SqlAlchemyVacationRequestRepository",
]
