"""
Base models package.

Provides the declarative base and abstract models for all tables.
"""

from app.models.base.base_model import (
    Base,
    BaseModel,
    TimestampModel,
)

__all__ = [
    "Base",
    "BaseModel",
    "TimestampModel",
]
