"""Application services shared by several handlers."""

from permission_templates.application.services.permission_template_applicator import (
    PermissionTemplateApplicator,
)

__all__ = ["PermissionTemplateApplicator"]
