"""Database models for the persistence layer.

SQLAlchemy models mapping to database tables. Infrastructure concern only:
the domain layer never imports them, repositories map them to entities.

Models Organization:
    - organization.py: Organizations (tenants)
    - user.py: Users
    - group.py: Groups and memberships
    - permission_template.py: Templates and their entries
    - project.py: Projects (resources)
    - permission.py: Materialized group and user permissions
    - organization_setting.py: Organization-scoped settings
"""

from permission_templates.infrastructure.persistence.models.group import (
    Group,
    GroupMembership,
)
from permission_templates.infrastructure.persistence.models.organization import (
    Organization,
)
from permission_templates.infrastructure.persistence.models.organization_setting import (
    OrganizationSetting,
)
from permission_templates.infrastructure.persistence.models.permission import (
    GroupPermission,
    UserPermission,
)
from permission_templates.infrastructure.persistence.models.permission_template import (
    PermissionTemplate,
    PermissionTemplateCharacteristic,
    PermissionTemplateGroup,
    PermissionTemplateUser,
)
from permission_templates.infrastructure.persistence.models.project import Project
from permission_templates.infrastructure.persistence.models.user import User

__all__ = [
    "Group",
    "GroupMembership",
    "GroupPermission",
    "Organization",
    "OrganizationSetting",
    "PermissionTemplate",
    "PermissionTemplateCharacteristic",
    "PermissionTemplateGroup",
    "PermissionTemplateUser",
    "Project",
    "User",
    "UserPermission",
]
