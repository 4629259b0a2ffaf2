# app/db/init_db.py
"""Database initialization utilities."""
from typing import Optional

from sqlalchemy import inspect
from sqlalchemy.engine import Engine
from sqlalchemy.exc import SQLAlchemyError

from app.core.logging import get_logger
from app.db.base import Base, import_models
from app.db.session import engine as default_engine

logger = get_logger(__name__)


def init_db(engine: Optional[Engine] = None) -> None:
    """
    Initialize the database by creating any missing tables.

    Note: This is suitable for development/testing only.
    For production, manage the schema with migrations.
    """
    bind = engine or default_engine
    try:
        import_models()

        existing_tables = set(inspect(bind).get_table_names())
        expected_tables = set(Base.metadata.tables.keys())
        missing = expected_tables - existing_tables

        if missing:
            Base.metadata.create_all(bind=bind)
            logger.info(f"Database tables created: {', '.join(sorted(missing))}")
        else:
            logger.info(f"Database already initialized with {len(existing_tables)} tables")

    except SQLAlchemyError as e:
        logger.error(f"Error initializing database: {e}")
        raise


def drop_db(engine: Optional[Engine] = None) -> None:
    """
    Drop all database tables.

    WARNING: This will delete all data! Use with caution.
    Only for development/testing purposes.
    """
    bind = engine or default_engine
    try:
        import_models()
        Base.metadata.drop_all(bind=bind)
        logger.warning("All database tables dropped")
    except SQLAlchemyError as e:
        logger.error(f"Error dropping database: {e}")
        raise
