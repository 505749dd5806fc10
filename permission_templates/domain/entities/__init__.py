"""Templates and the resources they are applied to."""

from permission_templates.domain.entities.permission_template import (
    PermissionTemplate,
)
from permission_templates.domain.entities.resource import Resource

__all__ = [
    "PermissionTemplate",
    "Resource",
]
