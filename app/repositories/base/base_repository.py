"""
Base repository with standardized CRUD operations and error handling.

Provides the foundation for the SQLAlchemy repositories: every database
failure surfaces as a RepositoryError (or one of its subclasses) after the
session has been rolled back.
"""

from typing import Any, Dict, Generic, List, Optional, Type, TypeVar

from sqlalchemy import update
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.exceptions import (
    ConcurrentModificationError,
    DuplicateEntryError,
    RepositoryError,
)
from app.core.logging import get_logger
from app.models.base import BaseModel

logger = get_logger(__name__)

# Type variable for model classes
ModelType = TypeVar("ModelType", bound=BaseModel)


class BaseRepository(Generic[ModelType]):
    """
    Generic repository over one SQLAlchemy model.

    Provides upsert, conditional update, lookup, listing and delete
    operations with consistent error translation.
    """

    def __init__(self, model: Type[ModelType], db: Session):
        """
        Initialize repository.

        Args:
            model: SQLAlchemy model class
            db: Database session
        """
        self.model = model
        self.db = db

    @property
    def table_name(self) -> str:
        return self.model.__tablename__

    # ==================== Write Operations ====================

    def upsert(self, instance: ModelType) -> ModelType:
        """
        Insert the row, or overwrite the stored row with the same primary key.

        Args:
            instance: Detached model instance carrying the full row

        Returns:
            Persistent model instance

        Raises:
            DuplicateEntryError: If a unique constraint is violated
            RepositoryError: On any other database failure
        """
        try:
            merged = self.db.merge(instance)
            self.db.commit()
            self.db.refresh(merged)

            logger.info(f"Saved {self.model.__name__} with id: {merged.id}")
            return merged

        except IntegrityError as e:
            self.db.rollback()
            raise DuplicateEntryError(
                f"{self.model.__name__} violates a unique constraint",
                table=self.table_name,
            ) from e
        except SQLAlchemyError as e:
            self.db.rollback()
            raise RepositoryError(
                f"Save failed: {str(e)}", operation="upsert", table=self.table_name
            ) from e

    def update_where(
        self,
        id: str,
        guard: Dict[str, Any],
        data: Dict[str, Any],
    ) -> None:
        """
        Update one row only if its current columns match ``guard``.

        Args:
            id: Primary key of the row
            guard: Column values the stored row must still have
            data: Column values to write

        Raises:
            ConcurrentModificationError: If no row matched id and guard
            RepositoryError: On database failure
        """
        statement = update(self.model).where(self.model.id == id)
        for key, value in guard.items():
            statement = statement.where(getattr(self.model, key) == value)
        statement = statement.values(**data).execution_options(synchronize_session=False)

        try:
            result = self.db.execute(statement)
            if result.rowcount != 1:
                self.db.rollback()
                raise ConcurrentModificationError(
                    f"{self.model.__name__} {id} was modified by another request",
                    entity_id=id,
                    expected_state=", ".join(f"{k}={v}" for k, v in guard.items()),
                    table=self.table_name,
                )
            self.db.commit()
            self.db.expire_all()

            logger.info(f"Updated {self.model.__name__} with id: {id}")

        except SQLAlchemyError as e:
            self.db.rollback()
            raise RepositoryError(
                f"Update failed: {str(e)}", operation="update", table=self.table_name
            ) from e

    def delete(self, id: str) -> bool:
        """
        Hard delete a row.

        Args:
            id: Primary key

        Returns:
            True if deleted, False if not found
        """
        try:
            instance = self.db.get(self.model, id)
            if instance is None:
                return False

            self.db.delete(instance)
            self.db.commit()

            logger.info(f"Deleted {self.model.__name__} with id: {id}")
            return True

        except SQLAlchemyError as e:
            self.db.rollback()
            raise RepositoryError(
                f"Delete failed: {str(e)}", operation="delete", table=self.table_name
            ) from e

    # ==================== Read Operations ====================

    def find_model_by_id(self, id: str) -> Optional[ModelType]:
        """
        Find a row by primary key.

        Args:
            id: Primary key

        Returns:
            Model instance or None
        """
        try:
            return self.db.get(self.model, id)
        except SQLAlchemyError as e:
            raise RepositoryError(
                f"Find by ID failed: {str(e)}", operation="find_by_id", table=self.table_name
            ) from e

    def find_models(
        self,
        criteria: Optional[Dict[str, Any]] = None,
        order_by: Optional[List[str]] = None,
    ) -> List[ModelType]:
        """
        Find rows matching criteria.

        Args:
            criteria: Filter criteria as key-value pairs
            order_by: List of fields to order by (prefix with - for desc)

        Returns:
            List of matching rows
        """
        try:
            query = self.db.query(self.model)

            for key, value in (criteria or {}).items():
                column = getattr(self.model, key)
                if isinstance(value, (list, tuple)):
                    query = query.filter(column.in_(value))
                else:
                    query = query.filter(column == value)

            for field in order_by or []:
                if field.startswith('-'):
                    query = query.order_by(getattr(self.model, field[1:]).desc())
                else:
                    query = query.order_by(getattr(self.model, field))

            return query.all()

        except SQLAlchemyError as e:
            raise RepositoryError(
                f"Find by criteria failed: {str(e)}", operation="find", table=self.table_name
            ) from e

    def find_one_model(self, criteria: Dict[str, Any]) -> Optional[ModelType]:
        results = self.find_models(criteria)
        return results[0] if results else None
