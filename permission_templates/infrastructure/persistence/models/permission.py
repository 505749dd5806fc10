"""Materialized permission database models.

These rows are what the rest of the platform trusts. Applying a template
deletes every row of a project and writes the template's entries back.
"""

from uuid import UUID

from sqlalchemy import ForeignKey, Index, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from permission_templates.infrastructure.persistence.base import BaseModel


class GroupPermission(BaseModel):
    """Role granted to a group on a project (NULL group_id = anyone).

    Indexes:
        - idx_group_roles_resource: (resource_id, role)
    """

    __tablename__ = "group_roles"

    resource_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False,
    )
    role: Mapped[str] = mapped_column(
        String(64),
        nullable=False,
    )
    group_id: Mapped[UUID | None] = mapped_column(
        Uuid,
        ForeignKey("groups.id", ondelete="CASCADE"),
        nullable=True,
        comment="NULL means anyone",
    )

    __table_args__ = (Index("idx_group_roles_resource", "resource_id", "role"),)


class UserPermission(BaseModel):
    """Role granted directly to a user on a project.

    Indexes:
        - idx_user_roles_resource: (resource_id, role)
    """

    __tablename__ = "user_roles"

    resource_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("projects.id", ondelete="CASCADE"),
        nullable=False,
    )
    role: Mapped[str] = mapped_column(
        String(64),
        nullable=False,
    )
    user_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    __table_args__ = (Index("idx_user_roles_resource", "resource_id", "role"),)
