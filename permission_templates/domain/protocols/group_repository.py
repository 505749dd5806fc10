"""Group repository protocol (port)."""

from typing import Protocol
from uuid import UUID


class GroupRepository(Protocol):
    """Group membership lookups."""

    async def select_group_ids_of_user(
        self,
        organization_id: UUID,
        user_id: UUID,
    ) -> list[UUID]:
        """List the groups of an organization a user belongs to.

        Args:
            organization_id: Organization whose groups are considered.
            user_id: Member.

        Returns:
            Group ids (empty when the user is in no group of the organization).
        """
        ...
