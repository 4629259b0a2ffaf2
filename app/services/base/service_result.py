"""
Service result patterns for standardized response handling.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Generic, Optional, TypeVar

from app.core.exceptions import ErrorCode, ValidationError


@dataclass
class ServiceError:
    """Represents a service operation error with context."""

    code: ErrorCode
    message: str
    details: Optional[Dict[str, Any]] = None
    field: Optional[str] = None


TData = TypeVar("TData")


@dataclass
class ServiceResult(Generic[TData]):
    """
    Standardized operation result with success/failure pattern.

    Attributes:
        is_success: Operation success indicator
        data: Result data (if successful)
        error: Error information (if failed)
        message: Human-readable status message
    """

    is_success: bool
    data: Optional[TData] = None
    error: Optional[ServiceError] = None
    message: Optional[str] = None

    @classmethod
    def success(
        cls,
        data: Optional[TData] = None,
        message: Optional[str] = None,
    ) -> "ServiceResult[TData]":
        """Create a successful result."""
        return cls(is_success=True, data=data, message=message)

    @classmethod
    def failure(cls, error: ServiceError) -> "ServiceResult[TData]":
        """Create a failed result."""
        return cls(is_success=False, error=error, message=error.message)

    @classmethod
    def validation_failure(
        cls,
        message: str,
        field: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ) -> "ServiceResult[TData]":
        """Create a validation failure result."""
        return cls.failure(
            ServiceError(
                code=ErrorCode.VALIDATION_ERROR,
                message=message,
                field=field,
                details=details,
            )
        )

    def unwrap(self) -> TData:
        """
        Unwrap the result data or raise if failed.

        Raises:
            ValidationError: If the result is not successful
        """
        if not self.is_success:
            raise ValidationError(
                self.error.message if self.error else "Unknown error",
                field=self.error.field if self.error else None,
            )
        return self.data


    def __bool__(self) -> bool:
        """Allow boolean evaluation of the result."""
        return self.is_success

    def __repr__(self) -> str:
        status = "Success" if self.is_success else "Failure"
        if self.message:
            return f"ServiceResult({status}: {self.message})"
        return f"ServiceResult({status})"


def parse_value(
    factory: Callable[[Any], TData],
    raw: Any,
    field: str,
) -> ServiceResult[TData]:
    """
    Build a value object without raising.

    Args:
        factory: Value object class (or any callable raising ValidationError)
        raw: Raw input value
        field: Input field name reported on failure

    Returns:
        Success carrying the value object, or a validation failure
        carrying the field and the rule's message
    """
    try:
        return ServiceResult.success(factory(raw))
    except ValidationError as e:
        return ServiceResult.validation_failure(e.message, field=field)


__all__ = [
    "ServiceError",
    "ServiceResult",
    "parse_value",
]
