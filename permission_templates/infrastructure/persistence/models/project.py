"""Project (resource) database model."""

from datetime import datetime
from uuid import UUID

from sqlalchemy import DateTime, ForeignKey, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from permission_templates.core.constants import PROJECT_QUALIFIER
from permission_templates.infrastructure.persistence.base import BaseMutableModel


class Project(BaseMutableModel):
    """Project model, the resource permissions are granted on.

    Fields:
        id: UUID primary key (from BaseMutableModel)
        organization_id: Owning organization
        uuid: Public identifier
        kee: Unique project key
        qualifier: Resource kind ("TRK" for projects)
        name: Display name
        authorization_updated_at: Last time permissions were rewritten
    """

    __tablename__ = "projects"

    organization_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("organizations.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    uuid: Mapped[str] = mapped_column(
        String(50),
        unique=True,
        nullable=False,
    )
    kee: Mapped[str] = mapped_column(
        String(400),
        unique=True,
        nullable=False,
    )
    qualifier: Mapped[str] = mapped_column(
        String(10),
        nullable=False,
        default=PROJECT_QUALIFIER,
    )
    name: Mapped[str] = mapped_column(
        String(2000),
        nullable=False,
    )
    authorization_updated_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        default=None,
        comment="Last time permissions of the project were rewritten",
    )
