"""
Worker database model.
"""

from datetime import datetime

from sqlalchemy import DateTime, Index, String
from sqlalchemy.orm import Mapped, mapped_column

from app.models.base.base_model import TimestampModel

__all__ = ["WorkerModel"]


class WorkerModel(TimestampModel):
    """
    Stored worker record.

    Code and cedula are unique business keys.
    """

    __tablename__ = "workers"
    __table_args__ = (
        Index("ix_workers_name", "name"),
        {"comment": "Workers eligible for vacation"}
    )

    code: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        unique=True,
        index=True,
        comment="Worker business code"
    )
    cedula: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        unique=True,
        index=True,
        comment="National identity number"
    )
    name: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        comment="Full name"
    )
    hire_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        comment="Hire date"
    )
    area: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        comment="Organizational area"
    )
    position: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        comment="Job position"
    )
