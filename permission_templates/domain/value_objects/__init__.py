"""Domain value objects.

Immutable values with no identity: group principals and permission entries.
"""

from permission_templates.domain.value_objects.group_principal import (
    ANYONE,
    AnyoneGroup,
    GroupPrincipal,
    SpecificGroup,
    group_id_of,
    principal_from_group_id,
)
from permission_templates.domain.value_objects.permission_entries import (
    GroupRoleEntry,
    PermissionEntries,
    UserRoleEntry,
    has_permission,
)

__all__ = [
    "ANYONE",
    "AnyoneGroup",
    "GroupPrincipal",
    "GroupRoleEntry",
    "PermissionEntries",
    "SpecificGroup",
    "UserRoleEntry",
    "group_id_of",
    "has_permission",
    "principal_from_group_id",
]
