"""Organization-scoped setting database model."""

from uuid import UUID

from sqlalchemy import ForeignKey, String, Text, UniqueConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from permission_templates.infrastructure.persistence.base import BaseMutableModel


class OrganizationSetting(BaseMutableModel):
    """Key/value setting of an organization.

    Fields:
        organization_id: Owning organization
        key: Setting key (e.g. "permission.template.default")
        value: Setting value

    Constraints:
        - uq_organization_settings_key: (organization_id, key)
    """

    __tablename__ = "organization_settings"

    organization_id: Mapped[UUID] = mapped_column(
        Uuid,
        ForeignKey("organizations.id", ondelete="CASCADE"),
        nullable=False,
    )
    key: Mapped[str] = mapped_column(
        String(512),
        nullable=False,
    )
    value: Mapped[str | None] = mapped_column(
        Text,
        nullable=True,
    )

    __table_args__ = (
        UniqueConstraint(
            "organization_id",
            "key",
            name="uq_organization_settings_key",
        ),
    )
