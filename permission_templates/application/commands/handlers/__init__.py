"""Command handlers."""

from permission_templates.application.commands.handlers.apply_default_permission_template_handler import (
    ApplyDefaultPermissionTemplateHandler,
)
from permission_templates.application.commands.handlers.apply_permission_template_handler import (
    ApplyPermissionTemplateHandler,
)

__all__ = [
    "ApplyDefaultPermissionTemplateHandler",
    "ApplyPermissionTemplateHandler",
]
