"""Organization-scoped settings adapter.

Looks up the organization_settings table first and falls back to the
deployment-wide value when the organization defines none.
"""

from uuid import UUID

from permission_templates.domain.protocols import SettingsProtocol
from permission_templates.infrastructure.persistence.database import Database
from permission_templates.infrastructure.persistence.repositories import (
    OrganizationSettingRepository,
)


class DatabaseSettingsAdapter:
    """SettingsProtocol implementation over organization_settings.

    Reads happen in their own short session, outside any unit of work.
    """

    def __init__(self, database: Database, fallback: SettingsProtocol) -> None:
        """Initialize adapter.

        Args:
            database: Database to read organization settings from.
            fallback: Deployment-wide settings.
        """
        self._database = database
        self._fallback = fallback

    async def get(
        self,
        key: str,
        *,
        organization_id: UUID | None = None,
    ) -> str | None:
        """Get a setting, organization value first.

        Args:
            key: Setting key.
            organization_id: Organization scope, None for deployment scope.

        Returns:
            The organization value when set, the deployment value otherwise.
        """
        if organization_id is not None:
            async with self._database.get_session() as session:
                value = await OrganizationSettingRepository(session).get(
                    organization_id, key
                )
            if value:
                return value
        return await self._fallback.get(key, organization_id=organization_id)
