"""Declarative base for the permission template schema.

Two bases:
- BaseModel: id + created_at. Used for rows that are only ever inserted or
  deleted (template entries, materialized grants, memberships).
- BaseMutableModel: adds updated_at. Used for rows edited in place
  (organizations, users, groups, templates, projects, settings).

Repositories translate these rows into domain entities; nothing outside
``infrastructure.persistence`` imports them.
"""

from datetime import datetime
from uuid import UUID as PythonUUID, uuid4

from sqlalchemy import DateTime, Uuid, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class BaseModel(DeclarativeBase):
    """Root of every table.

    The generic ``Uuid`` type keeps the schema portable: native UUID on
    PostgreSQL, CHAR(32) on SQLite.
    """

    __abstract__ = True

    id: Mapped[PythonUUID] = mapped_column(
        Uuid,
        primary_key=True,
        default=uuid4,
        nullable=False,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}(id={self.id})>"


class TimestampMixin:
    """Adds updated_at, refreshed by the database on every UPDATE."""

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
        onupdate=func.now(),
    )


class BaseMutableModel(TimestampMixin, BaseModel):
    """Base for tables whose rows are edited in place."""

    __abstract__ = True
