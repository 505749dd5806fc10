"""OrganizationSettingRepository - SQLAlchemy implementation."""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from permission_templates.infrastructure.persistence.models.organization_setting import (
    OrganizationSetting,
)


class OrganizationSettingRepository:
    """Reads and writes organization-scoped settings.

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> async with database.get_session() as session:
        ...     repo = OrganizationSettingRepository(session)
        ...     await repo.set(org_id, "permission.template.default", template.uuid)
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def get(self, organization_id: UUID, key: str) -> str | None:
        """Get a setting of an organization.

        Args:
            organization_id: Organization scope.
            key: Setting key.

        Returns:
            The stored value, or None when the organization has none.
        """
        result = await self.session.execute(
            select(OrganizationSetting.value).where(
                OrganizationSetting.organization_id == organization_id,
                OrganizationSetting.key == key,
            )
        )
        return result.scalar_one_or_none()

    async def set(self, organization_id: UUID, key: str, value: str | None) -> None:
        """Create or replace a setting of an organization.

        Args:
            organization_id: Organization scope.
            key: Setting key.
            value: New value (None clears it).
        """
        result = await self.session.execute(
            select(OrganizationSetting).where(
                OrganizationSetting.organization_id == organization_id,
                OrganizationSetting.key == key,
            )
        )
        setting = result.scalar_one_or_none()
        if setting is None:
            self.session.add(
                OrganizationSetting(
                    organization_id=organization_id,
                    key=key,
                    value=value,
                )
            )
        else:
            setting.value = value
        await self.session.flush()
