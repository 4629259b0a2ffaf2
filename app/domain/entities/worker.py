"""Worker aggregate."""

import math
from datetime import datetime
from typing import Optional

from app.domain.entities.entity import Entity
from app.domain.value_objects import (
    DateLike,
    HireDate,
    WorkerArea,
    WorkerCedula,
    WorkerCode,
    WorkerId,
    WorkerName,
    WorkerPosition,
    ensure_utc,
    utcnow,
)

SECONDS_PER_DAY = 86400
DAYS_PER_YEAR = 365


class Worker(Entity[WorkerId]):
    """
    An employee who accrues vacation entitlement with seniority.

    Workers are immutable once created. Use :meth:`create` for new workers
    and :meth:`restore` to rebuild one from storage.
    """

    def __init__(
        self,
        id: WorkerId,
        code: WorkerCode,
        cedula: WorkerCedula,
        name: WorkerName,
        hire_date: HireDate,
        area: WorkerArea,
        position: WorkerPosition,
    ):
        super().__init__(id)
        self._code = code
        self._cedula = cedula
        self._name = name
        self._hire_date = hire_date
        self._area = area
        self._position = position

    @property
    def code(self) -> WorkerCode:
        return self._code

    @property
    def cedula(self) -> WorkerCedula:
        return self._cedula

    @property
    def name(self) -> WorkerName:
        return self._name

    @property
    def hire_date(self) -> HireDate:
        return self._hire_date

    @property
    def area(self) -> WorkerArea:
        return self._area

    @property
    def position(self) -> WorkerPosition:
        return self._position

    @property
    def seniority_years(self) -> int:
        """Completed years of service as of now."""
        return self.seniority_years_at(utcnow())

    def seniority_years_at(self, moment: datetime) -> int:
        """
        Completed years of service at ``moment``.

        The elapsed time is rounded up to whole days, then divided into
        365-day years (leap days are not special-cased).
        """
        elapsed = abs((ensure_utc(moment) - self._hire_date.value).total_seconds())
        days = math.ceil(elapsed / SECONDS_PER_DAY)
        return days // DAYS_PER_YEAR

    @classmethod
    def create(
        cls,
        code: str,
        cedula: str,
        name: str,
        hire_date: DateLike,
        area: str,
        position: str,
    ) -> "Worker":
        """Build a new worker with a generated identifier, validating every field."""
        return cls(
            WorkerId.generate(),
            WorkerCode(code),
            WorkerCedula(cedula),
            WorkerName(name),
            HireDate(hire_date),
            WorkerArea(area),
            WorkerPosition(position),
        )

    @classmethod
    def restore(
        cls,
        id: str,
        code: str,
        cedula: str,
        name: str,
        hire_date: DateLike,
        area: str,
        position: str,
    ) -> "Worker":
        """Rebuild a stored worker, re-checking every field rule."""
        return cls(
            WorkerId(id),
            WorkerCode(code),
            WorkerCedula(cedula),
            WorkerName(name),
            HireDate(hire_date),
            WorkerArea(area),
            WorkerPosition(position),
        )

    def to_dict(self, now: Optional[datetime] = None) -> dict:
        return {
            "id": self.id.value,
            "code": self._code.value,
            "cedula": self._cedula.value,
            "name": self._name.value,
            "hire_date": self._hire_date.value,
            "area": self._area.value,
            "position": self._position.value,
            "seniority_years": self.seniority_years_at(now or utcnow()),
        }
