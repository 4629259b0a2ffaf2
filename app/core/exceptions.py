"""
Custom Exceptions for the Worker Vacation Application

This module defines custom exception classes used throughout the application
for better error handling and debugging. Every exception carries the HTTP
status the transport layer answers with.
"""

from typing import Any, Dict, List, Optional
from enum import Enum


class ErrorCode(str, Enum):
    """Standard error codes for the application"""
    # General errors
    INTERNAL_ERROR = "INTERNAL_ERROR"
    RESOURCE_NOT_FOUND = "RESOURCE_NOT_FOUND"

    # Validation errors
    VALIDATION_ERROR = "VALIDATION_ERROR"

    # Database errors
    DATABASE_ERROR = "DATABASE_ERROR"
    DUPLICATE_ENTRY = "DUPLICATE_ENTRY"
    CONCURRENT_MODIFICATION = "CONCURRENT_MODIFICATION"

    # Business logic errors
    INVALID_STATE_TRANSITION = "INVALID_STATE_TRANSITION"
    INSUFFICIENT_BALANCE = "INSUFFICIENT_BALANCE"
    INVALID_DATE_RANGE = "INVALID_DATE_RANGE"

    # Resource specific errors
    WORKER_NOT_FOUND = "WORKER_NOT_FOUND"
    VACATION_REQUEST_NOT_FOUND = "VACATION_REQUEST_NOT_FOUND"


class BaseAppException(Exception):
    """
    Base exception class for all application exceptions.

    Provides consistent error handling across the application with
    structured error information.
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.INTERNAL_ERROR,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 500
    ):
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.status_code = status_code
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary format"""
        return {
            "error": {
                "message": self.message,
                "code": self.error_code.value,
                "details": self.details,
                "type": self.__class__.__name__
            }
        }

    def __str__(self) -> str:
        return f"{self.error_code.value}: {self.message}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(message='{self.message}', error_code='{self.error_code.value}')"


# ========================================
# General Application Exceptions
# ========================================

class ValidationError(BaseAppException):
    """Exception raised when a value rule or use-case input is violated"""

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        field_errors: Optional[Dict[str, List[str]]] = None,
        error_code: ErrorCode = ErrorCode.VALIDATION_ERROR,
        status_code: int = 400
    ):
        details: Dict[str, Any] = {}
        if field:
            details["field"] = field
        if field_errors:
            details["field_errors"] = field_errors
        self.field = field
        self.field_errors = field_errors or {}
        super().__init__(message, error_code, details, status_code)


class ResourceNotFoundError(BaseAppException):
    """Exception raised when a requested resource is not found"""

    def __init__(
        self,
        resource_type: str = "Resource",
        resource_id: Optional[str] = None,
        message: Optional[str] = None
    ):
        if not message:
            message = f"{resource_type} not found"
            if resource_id:
                message = f"{resource_type} with id {resource_id} not found"

        details = {
            "resource_type": resource_type,
            "resource_id": resource_id
        }
        super().__init__(message, ErrorCode.RESOURCE_NOT_FOUND, details, 404)


class WorkerNotFoundError(ResourceNotFoundError):
    """Exception raised when a worker is not found"""

    def __init__(
        self,
        worker_id: Optional[str] = None,
        message: Optional[str] = None
    ):
        super().__init__("Worker", worker_id, message)
        self.error_code = ErrorCode.WORKER_NOT_FOUND


class VacationRequestNotFoundError(ResourceNotFoundError):
    """Exception raised when a vacation request is not found"""

    def __init__(
        self,
        vacation_request_id: Optional[str] = None,
        message: Optional[str] = None
    ):
        super().__init__("Vacation request", vacation_request_id, message)
        self.error_code = ErrorCode.VACATION_REQUEST_NOT_FOUND


# ========================================
# Database Exceptions
# ========================================

class RepositoryError(BaseAppException):
    """Exception raised when a repository operation fails"""

    def __init__(
        self,
        message: str = "Database operation failed",
        operation: Optional[str] = None,
        table: Optional[str] = None,
        error_code: ErrorCode = ErrorCode.DATABASE_ERROR,
        status_code: int = 500
    ):
        details = {
            "operation": operation,
            "table": table
        }
        super().__init__(message, error_code, details, status_code)


class DuplicateEntryError(RepositoryError):
    """Exception raised when trying to create a duplicate entry"""

    def __init__(
        self,
        message: str = "Duplicate entry",
        field: Optional[str] = None,
        value: Optional[str] = None,
        table: Optional[str] = None
    ):
        super().__init__(
            message,
            table=table,
            error_code=ErrorCode.DUPLICATE_ENTRY,
            status_code=409,
        )
        self.details.update({"field": field, "value": value})


class ConcurrentModificationError(RepositoryError):
    """Exception raised when a conditional write finds the row already changed"""

    def __init__(
        self,
        message: str = "Record was modified by another request",
        entity_id: Optional[str] = None,
        expected_state: Optional[str] = None,
        table: Optional[str] = None
    ):
        super().__init__(
            message,
            operation="conditional_update",
            table=table,
            error_code=ErrorCode.CONCURRENT_MODIFICATION,
            status_code=409,
        )
        self.details.update({"entity_id": entity_id, "expected_state": expected_state})


# ========================================
# Business Logic Exceptions
# ========================================

class InvalidStateTransitionError(BaseAppException):
    """Exception raised when a vacation request cannot move to the requested status"""

    def __init__(
        self,
        message: str = "Invalid status transition",
        current_status: Optional[str] = None,
        target_status: Optional[str] = None
    ):
        details = {
            "current_status": current_status,
            "target_status": target_status
        }
        super().__init__(message, ErrorCode.INVALID_STATE_TRANSITION, details, 400)


class InsufficientBalanceError(BaseAppException):
    """Exception raised when a request exceeds the worker's available days"""

    def __init__(
        self,
        message: str = "Worker does not have enough available vacation days",
        requested_days: Optional[float] = None,
        available_days: Optional[float] = None
    ):
        details = {
            "requested_days": requested_days,
            "available_days": available_days
        }
        super().__init__(message, ErrorCode.INSUFFICIENT_BALANCE, details, 400)


class InvalidDateRangeError(BaseAppException):
    """Exception raised when date range is invalid"""

    def __init__(
        self,
        message: str = "Start date must be before end date",
        start_date: Optional[str] = None,
        end_date: Optional[str] = None
    ):
        details = {
            "start_date": start_date,
            "end_date": end_date
        }
        super().__init__(message, ErrorCode.INVALID_DATE_RANGE, details, 400)


# ========================================
# Utility Functions
# ========================================

def create_validation_error(field_errors: Dict[str, List[str]]) -> ValidationError:
    """Create a validation error with field-specific errors"""
    total_errors = sum(len(errors) for errors in field_errors.values())
    message = f"Validation failed with {total_errors} error(s)"
    return ValidationError(message, field_errors=field_errors)


__all__ = [
    'ErrorCode',
    'BaseAppException',
    'ValidationError',
    'ResourceNotFoundError',
    'WorkerNotFoundError',
    'VacationRequestNotFoundError',
    'RepositoryError',
    'DuplicateEntryError',
    'ConcurrentModificationError',
    'InvalidStateTransitionError',
    'InsufficientBalanceError',
    'InvalidDateRangeError',
    'create_validation_error',
]
