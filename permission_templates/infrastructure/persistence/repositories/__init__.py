"""Repository implementations (adapters for hexagonal architecture).

Concrete implementations of the repository protocols defined in the domain
layer.
"""

from permission_templates.infrastructure.persistence.repositories.group_repository import (
    GroupRepository,
)
from permission_templates.infrastructure.persistence.repositories.organization_setting_repository import (
    OrganizationSettingRepository,
)
from permission_templates.infrastructure.persistence.repositories.permission_template_repository import (
    PermissionTemplateRepository,
)
from permission_templates.infrastructure.persistence.repositories.resource_repository import (
    ResourceRepository,
)

__all__ = [
    "GroupRepository",
    "OrganizationSettingRepository",
    "PermissionTemplateRepository",
    "ResourceRepository",
]
