"""Group and group membership database models.

The "anyone" group has no row here: permission rows encode it as a NULL
group_id.
"""

from uuid import UUID

from sqlalchemy import ForeignKey, String, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from permission_templates.infrastructure.persistence.base import (
    BaseModel,
    BaseMutableModel,
)


class Group(BaseMutableModel):
    """User group of an organization.

    Fields:
        id: UUID primary key (from BaseMutableModel)
        organization_id: Owning organization
        name: Group name, unique within the organization
        description: Optional description

    Constraints:
        - uq_groups_organization_name: (organization_id, name)
    """

    __tablename__ = "groups"

    organization_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("organizations.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )
    description: Mapped[str | None] = mapped_column(
        String(200),
        nullable=True,
    )

    __table_args__ = (
        UniqueConstraint(
            "organization_id",
            "name",
            name="uq_groups_organization_name",
        ),
    )


class GroupMembership(BaseModel):
    """Membership of a user in a group.

    Fields:
        id: UUID primary key (from BaseModel)
        group_id: Group
        user_id: Member
    """

    __tablename__ = "groups_users"

    group_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("groups.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    user_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    __table_args__ = (
        UniqueConstraint("group_id", "user_id", name="uq_groups_users"),
    )
