# models/__init__.py
from .base import Base, BaseModel, TimestampModel
from .vacation_request import VacationRequestModel
from .worker import WorkerModel

__all__ = [
    "Base",
    "BaseModel",
    "TimestampModel",
    "WorkerModel",
    "VacationRequestModel",
]
