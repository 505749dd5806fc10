"""Permission template database models.

A template is stored as one header row plus three entry tables:

- perm_templates_groups: (template, group or NULL for anyone, permission)
- perm_templates_users: (template, user, permission)
- perm_tpl_characteristics: (template, permission, with_project_creator)
"""

from uuid import UUID

from sqlalchemy import Boolean, ForeignKey, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from permission_templates.infrastructure.persistence.base import (
    BaseModel,
    BaseMutableModel,
)


class PermissionTemplate(BaseMutableModel):
    """Permission template header.

    Fields:
        id: UUID primary key (from BaseMutableModel)
        organization_id: Owning organization
        uuid: Public identifier (referenced by the default template setting)
        name: Display name
        description: Optional description
        key_pattern: Optional regular expression matched against project keys
    """

    __tablename__ = "permission_templates"

    organization_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("organizations.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    uuid: Mapped[str] = mapped_column(
        String(40),
        unique=True,
        nullable=False,
        comment="Public identifier, referenced by settings",
    )
    name: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
    )
    description: Mapped[str | None] = mapped_column(
        String(4000),
        nullable=True,
    )
    key_pattern: Mapped[str | None] = mapped_column(
        String(500),
        nullable=True,
        comment="Regular expression matched against project keys",
    )


class PermissionTemplateGroup(BaseModel):
    """Role granted by a template to a group (NULL group_id = anyone)."""

    __tablename__ = "perm_templates_groups"

    template_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("permission_templates.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    group_id: Mapped[UUID | None] = mapped_column(
        Uuid,
        ForeignKey("groups.id", ondelete="CASCADE"),
        nullable=True,
        comment="NULL means anyone",
    )
    permission: Mapped[str] = mapped_column(
        String(64),
        nullable=False,
    )


class PermissionTemplateUser(BaseModel):
    """Role granted by a template directly to a user."""

    __tablename__ = "perm_templates_users"

    template_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("permission_templates.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    user_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    )
    permission: Mapped[str] = mapped_column(
        String(64),
        nullable=False,
    )


class PermissionTemplateCharacteristic(BaseModel):
    """Role granted by a template to the creator of a project."""

    __tablename__ = "perm_tpl_characteristics"

    template_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("permission_templates.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    permission: Mapped[str] = mapped_column(
        String(64),
        nullable=False,
    )
    with_project_creator: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
    )
