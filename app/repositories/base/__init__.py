"""
Base repositories package.

Provides the generic SQLAlchemy repository shared by all stores.
"""

from app.repositories.base.base_repository import (
    BaseRepository,
    ModelType,
)

__all__ = [
    "BaseRepository",
    "ModelType",
]
