"""Settings adapters (SettingsProtocol implementations)."""

from permission_templates.infrastructure.settings.database_adapter import (
    DatabaseSettingsAdapter,
)
from permission_templates.infrastructure.settings.env_adapter import (
    EnvSettingsAdapter,
)

__all__ = ["DatabaseSettingsAdapter", "EnvSettingsAdapter"]
