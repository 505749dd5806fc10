"""GroupRepository - SQLAlchemy implementation."""

from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from permission_templates.infrastructure.persistence.models.group import (
    Group,
    GroupMembership,
)


class GroupRepository:
    """SQLAlchemy implementation of the GroupRepository protocol.

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

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
            Group ids ordered by group name.
        """
        stmt = (
            select(Group.id)
            .join(GroupMembership, GroupMembership.group_id == Group.id)
            .where(
                Group.organization_id == organization_id,
                GroupMembership.user_id == user_id,
            )
            .order_by(Group.name)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())
