"""User database model.

Users are global; they join organizations through group memberships and
receive permissions through user permission rows.
"""

from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, mapped_column

from permission_templates.infrastructure.persistence.base import BaseMutableModel


class User(BaseMutableModel):
    """User model.

    Fields:
        id: UUID primary key (from BaseMutableModel)
        login: Unique login
        name: Display name
        is_active: Deactivated users keep their rows but cannot log in
    """

    __tablename__ = "users"

    login: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )
    name: Mapped[str | None] = mapped_column(
        String(255),
        nullable=True,
    )
    is_active: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=True,
    )
