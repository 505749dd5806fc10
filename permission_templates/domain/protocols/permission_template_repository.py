"""Permission template repository protocol (port).

Covers both sides of the permission store: reading template snapshots and
rewriting the grant rows materialized on resources.

Implementations:
    - PermissionTemplateRepository (SQLAlchemy):
      permission_templates.infrastructure.persistence.repositories
"""

from typing import Protocol
from uuid import UUID

from permission_templates.domain.entities.permission_template import (
    PermissionTemplate,
)
from permission_templates.domain.value_objects.group_principal import (
    GroupPrincipal,
)
from permission_templates.domain.value_objects.permission_entries import (
    PermissionEntries,
)


class PermissionTemplateRepository(Protocol):
    """Permission store port.

    Reads return immutable snapshots. Writes join the caller's unit of work
    and become visible only when it commits.
    """

    async def find_by_uuid(
        self,
        template_uuid: str,
        organization_id: UUID | None = None,
    ) -> PermissionTemplate | None:
        """Load a template and all its entries.

        Args:
            template_uuid: Public template identifier.
            organization_id: When given, templates of other organizations
                are treated as missing.

        Returns:
            PermissionTemplate snapshot, or None if not found.
        """
        ...

    async def find_by_organization(
        self,
        organization_id: UUID,
    ) -> list[PermissionTemplate]:
        """Load every template of an organization, ordered by name.

        Args:
            organization_id: Owning organization.

        Returns:
            List of template snapshots (empty if none).
        """
        ...

    async def delete_group_and_user_permissions(self, resource_id: UUID) -> None:
        """Delete every group and user permission row of a resource.

        Args:
            resource_id: Resource whose grants are removed.
        """
        ...

    async def insert_group_permission(
        self,
        resource_id: UUID,
        role: str,
        principal: GroupPrincipal,
    ) -> None:
        """Grant a role to a group principal on a resource.

        Args:
            resource_id: Target resource.
            role: Role (permission) name.
            principal: ANYONE or SpecificGroup.
        """
        ...

    async def insert_user_permission(
        self,
        resource_id: UUID,
        role: str,
        user_id: UUID,
    ) -> None:
        """Grant a role directly to a user on a resource.

        Args:
            resource_id: Target resource.
            role: Role (permission) name.
            user_id: Grantee.
        """
        ...

    async def select_resource_permissions(
        self,
        resource_id: UUID,
    ) -> PermissionEntries:
        """Read the grants stored for a resource.

        Args:
            resource_id: Resource to read.

        Returns:
            PermissionEntries with group and user roles (never creator roles).
        """
        ...
