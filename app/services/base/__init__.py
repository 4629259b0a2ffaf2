"""
Base services module.

Provides the result type used for non-raising validation and the base
class shared by the use-case services.
"""

from app.services.base.base_service import BaseService
from app.services.base.service_result import (
    ServiceError,
    ServiceResult,
    parse_value,
)

__all__ = [
    "BaseService",
    "ServiceError",
    "ServiceResult",
    "parse_value",
]
