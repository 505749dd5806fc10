"""Resource repository protocol (port)."""

from collections.abc import Sequence
from datetime import datetime
from typing import Protocol
from uuid import UUID

from permission_templates.domain.entities.resource import Resource


class ResourceRepository(Protocol):
    """Resource store port.

    Writes share the unit of work of the permission store, so the timestamp
    update commits or rolls back together with the grant rows.
    """

    async def find_by_id(self, resource_id: UUID) -> Resource | None:
        """Load one resource.

        Args:
            resource_id: Resource identifier.

        Returns:
            Resource if found, None otherwise.
        """
        ...

    async def find_by_ids(self, resource_ids: Sequence[UUID]) -> list[Resource]:
        """Load several resources. Unknown ids are silently absent.

        Args:
            resource_ids: Resource identifiers.

        Returns:
            Found resources, in no particular order.
        """
        ...

    async def update_authorization_updated_at(
        self,
        resource_id: UUID,
        updated_at: datetime,
    ) -> None:
        """Record when the permissions of a resource were last rewritten.

        Args:
            resource_id: Resource identifier.
            updated_at: Timestamp to store.
        """
        ...
