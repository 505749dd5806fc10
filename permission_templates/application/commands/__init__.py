"""Commands (CQRS write side)."""

from permission_templates.application.commands.permission_template_commands import (
    ApplyDefaultPermissionTemplate,
    ApplyPermissionTemplate,
)

__all__ = ["ApplyDefaultPermissionTemplate", "ApplyPermissionTemplate"]
