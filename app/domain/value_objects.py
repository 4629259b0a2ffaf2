"""
Domain value objects for workers and vacation requests.

Every value object is an immutable dataclass wrapping a single primitive in
``value``. Construction validates the business rule and raises
:class:`~app.core.exceptions.ValidationError` when it does not hold, so an
instance that exists is always valid.

Notes:
- No HTTP, DB, or framework imports.
- Naive datetimes are interpreted as UTC.
"""

from dataclasses import InitVar, dataclass
from datetime import date, datetime, time, timezone
from enum import Enum
from typing import Any, ClassVar, Optional, Union
from uuid import uuid4

from app.core.exceptions import ValidationError

DateLike = Union[datetime, date, str]


class VacationStatus(str, Enum):
    """Lifecycle status of a vacation request."""
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class VacationType(str, Enum):
    """Unit in which a vacation request is expressed."""
    DAYS = "days"
    HOURS = "hours"


HOURS_PER_VACATION_DAY = 8


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def start_of_today() -> datetime:
    """Midnight (UTC) of the current day."""
    return datetime.combine(utcnow().date(), time.min, tzinfo=timezone.utc)


def ensure_utc(value: datetime) -> datetime:
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _coerce_datetime(value: Any, field: str, label: str) -> datetime:
    if value is None:
        raise ValidationError(f"{label} is required", field=field)

    if isinstance(value, str):
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            value = datetime.fromisoformat(text)
        except ValueError:
            raise ValidationError(f"{label} must be a valid date", field=field) from None

    if isinstance(value, datetime):
        return ensure_utc(value)
    if isinstance(value, date):
        return datetime.combine(value, time.min, tzinfo=timezone.utc)

    raise ValidationError(f"{label} must be a valid date", field=field)


def _clean_text(
    value: Any,
    field: str,
    label: str,
    min_length: Optional[int] = None,
    max_length: Optional[int] = None,
) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{label} cannot be empty", field=field)

    text = value.strip()
    if min_length is not None and len(text) < min_length:
        raise ValidationError(
            f"{label} must be at least {min_length} characters long", field=field
        )
    if max_length is not None and len(text) > max_length:
        raise ValidationError(
            f"{label} cannot exceed {max_length} characters", field=field
        )
    return text


def _check_int(value: Any, field: str, label: str, maximum: int) -> int:
    # bool is an int subclass; a flag is never a count
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValidationError(f"{label} must be an integer", field=field)
    if value < 0:
        raise ValidationError(f"{label} cannot be negative", field=field)
    if value > maximum:
        raise ValidationError(f"{label} cannot exceed {maximum}", field=field)
    return value


# ==================== Identifiers ====================

@dataclass(frozen=True)
class _Identifier:
    value: str

    label: ClassVar[str] = "ID"
    field: ClassVar[str] = "id"

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", _clean_text(self.value, self.field, self.label))

    @classmethod
    def generate(cls):
        """Create a new random (UUID4) identifier."""
        return cls(str(uuid4()))

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class WorkerId(_Identifier):
    label: ClassVar[str] = "Worker ID"
    field: ClassVar[str] = "worker_id"


@dataclass(frozen=True)
class VacationRequestId(_Identifier):
    label: ClassVar[str] = "Vacation request ID"
    field: ClassVar[str] = "id"


# ==================== Worker Attributes ====================

@dataclass(frozen=True)
class WorkerCode:
    """Business code of a worker (at least 3 characters)."""
    value: str

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "value", _clean_text(self.value, "code", "Worker code", min_length=3)
        )

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class WorkerCedula:
    """National identity number: at least 8 characters, digits only."""
    value: str

    def __post_init__(self) -> None:
        text = _clean_text(self.value, "cedula", "Worker cedula", min_length=8)
        if not (text.isascii() and text.isdigit()):
            raise ValidationError("Worker cedula must contain only numbers", field="cedula")
        object.__setattr__(self, "value", text)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class WorkerName:
    value: str

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "value",
            _clean_text(self.value, "name", "Worker name", min_length=2, max_length=100),
        )

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class WorkerArea:
    value: str

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "value",
            _clean_text(self.value, "area", "Worker area", min_length=2, max_length=50),
        )

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class WorkerPosition:
    value: str

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "value",
            _clean_text(self.value, "position", "Worker position", min_length=2, max_length=50),
        )

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class HireDate:
    """Date the worker joined; never in the future."""
    value: datetime

    def __post_init__(self) -> None:
        moment = _coerce_datetime(self.value, "hire_date", "Hire date")
        if moment > utcnow():
            raise ValidationError("Hire date cannot be in the future", field="hire_date")
        object.__setattr__(self, "value", moment)

    def __str__(self) -> str:
        return self.value.isoformat()


# ==================== Vacation Request Attributes ====================

@dataclass(frozen=True)
class _VacationDate:
    value: datetime
    validate_window: InitVar[bool] = True

    label: ClassVar[str] = "Vacation date"
    field: ClassVar[str] = "date"

    def __post_init__(self, validate_window: bool) -> None:
        moment = _coerce_datetime(self.value, self.field, self.label)
        if validate_window and moment < start_of_today():
            raise ValidationError(f"{self.label} cannot be in the past", field=self.field)
        object.__setattr__(self, "value", moment)

    def __str__(self) -> str:
        return self.value.isoformat()


@dataclass(frozen=True)
class VacationStartDate(_VacationDate):
    """First day of a vacation; not before today when newly requested."""
    label: ClassVar[str] = "Vacation start date"
    field: ClassVar[str] = "start_date"


@dataclass(frozen=True)
class VacationEndDate(_VacationDate):
    """Last day of a vacation; not before today when newly requested."""
    label: ClassVar[str] = "Vacation end date"
    field: ClassVar[str] = "end_date"


@dataclass(frozen=True)
class VacationDays:
    """Whole vacation days, 0 to 365."""
    value: int

    MAX: ClassVar[int] = 365

    def __post_init__(self) -> None:
        _check_int(self.value, "days", "Vacation days", self.MAX)


@dataclass(frozen=True)
class VacationHours:
    """Vacation hours, 0 to 2920 (365 working days of 8 hours)."""
    value: int

    MAX: ClassVar[int] = 365 * HOURS_PER_VACATION_DAY

    def __post_init__(self) -> None:
        _check_int(self.value, "hours", "Vacation hours", self.MAX)


@dataclass(frozen=True)
class VacationRequestReason:
    value: str

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "value",
            _clean_text(
                self.value, "reason", "Vacation request reason", min_length=10, max_length=500
            ),
        )

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class VacationRequestStatus:
    value: VacationStatus

    def __post_init__(self) -> None:
        try:
            status = VacationStatus(self.value)
        except ValueError:
            raise ValidationError(
                f"Invalid vacation request status: {self.value}", field="status"
            ) from None
        object.__setattr__(self, "value", status)

    @classmethod
    def pending(cls) -> "VacationRequestStatus":
        return cls(VacationStatus.PENDING)

    @property
    def is_pending(self) -> bool:
        return self.value is VacationStatus.PENDING

    def __str__(self) -> str:
        return self.value.value


@dataclass(frozen=True)
class VacationRequestType:
    value: VacationType

    def __post_init__(self) -> None:
        try:
            kind = VacationType(self.value)
        except ValueError:
            raise ValidationError(
                f"Invalid vacation request type: {self.value}", field="type"
            ) from None
        object.__setattr__(self, "value", kind)

    def __str__(self) -> str:
        return self.value.value


__all__ = [
    "VacationStatus",
    "VacationType",
    "HOURS_PER_VACATION_DAY",
    "utcnow",
    "start_of_today",
    "ensure_utc",
    "WorkerId",
    "VacationRequestId",
    "WorkerCode",
    "WorkerCedula",
    "WorkerName",
    "WorkerArea",
    "WorkerPosition",
    "HireDate",
    "VacationStartDate",
    "VacationEndDate",
    "VacationDays",
    "VacationHours",
    "VacationRequestReason",
    "VacationRequestStatus",
    "VacationRequestType",
]
