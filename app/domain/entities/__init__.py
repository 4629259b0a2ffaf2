"""Domain entities."""

from app.domain.entities.entity import Entity
from app.domain.entities.vacation_request import VacationRequest
from app.domain.entities.worker import Worker

__all__ = ["Entity", "Worker", "VacationRequest"]
