"""Deployment-wide settings adapter.

Serves settings from the process configuration (environment variables via
pydantic-settings). Organization scope is ignored: every organization sees
the same values.
"""

from collections.abc import Mapping
from uuid import UUID

from permission_templates.core.config import Settings
from permission_templates.core.constants import DEFAULT_TEMPLATE_SETTING_KEY


class EnvSettingsAdapter:
    """SettingsProtocol implementation backed by a static mapping.

    Attributes:
        _values: Key/value settings.
    """

    def __init__(self, values: Mapping[str, str | None]) -> None:
        """Initialize adapter.

        Args:
            values: Settings values by key.
        """
        self._values = dict(values)

    @classmethod
    def from_settings(cls, settings: Settings) -> "EnvSettingsAdapter":
        """Build the adapter from application settings.

        Args:
            settings: Application settings.

        Returns:
            EnvSettingsAdapter exposing the deployment default template.
        """
        return cls(
            {DEFAULT_TEMPLATE_SETTING_KEY: settings.default_permission_template_uuid}
        )

    async def get(
        self,
        key: str,
        *,
        organization_id: UUID | None = None,
    ) -> str | None:
        """Get a deployment-wide setting value.

        Args:
            key: Setting key.
            organization_id: Ignored.

        Returns:
            The value, or None when unset.
        """
        return self._values.get(key)
