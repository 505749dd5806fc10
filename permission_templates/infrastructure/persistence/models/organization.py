"""Organization database model.

Every template, group, project and organization setting belongs to exactly
one organization.
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from permission_templates.infrastructure.persistence.base import BaseMutableModel


class Organization(BaseMutableModel):
    """Organization (tenant) model.

    Fields:
        id: UUID primary key (from BaseMutableModel)
        key: Unique organization key
        name: Display name
    """

    __tablename__ = "organizations"

    key: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        comment="Unique organization key",
    )
    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
    )
