"""Settings lookup protocol (port).

Reads runtime settings such as the default permission template uuid.
Values can be scoped to an organization; implementations fall back to the
deployment-wide value when the organization defines none.

Implementations:
    - EnvSettingsAdapter: deployment-wide values from Settings
    - DatabaseSettingsAdapter: organization_settings table + deployment fallback
"""

from typing import Protocol
from uuid import UUID


class SettingsProtocol(Protocol):
    """Key/value settings lookup."""

    async def get(
        self,
        key: str,
        *,
        organization_id: UUID | None = None,
    ) -> str | None:
        """Get a setting value.

        Args:
            key: Setting key (e.g. "permission.template.default").
            organization_id: Organization scope, None for deployment scope.

        Returns:
            The value, or None when unset.
        """
        ...
