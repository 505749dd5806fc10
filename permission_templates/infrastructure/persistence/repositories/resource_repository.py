"""ResourceRepository - SQLAlchemy implementation.

Maps between the domain Resource entity and the projects table.
"""

from collections.abc import Sequence
from datetime import UTC, datetime
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from permission_templates.domain.entities.resource import Resource
from permission_templates.infrastructure.persistence.models.project import Project


class ResourceRepository:
    """SQLAlchemy implementation of the ResourceRepository protocol.

    Attributes:
        session: SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def find_by_id(self, resource_id: UUID) -> Resource | None:
        """Load one resource.

        Args:
            resource_id: Resource identifier.

        Returns:
            Resource if found, None otherwise.
        """
        result = await self.session.execute(
            select(Project).where(Project.id == resource_id)
        )
        project = result.scalar_one_or_none()
        if project is None:
            return None
        return self._to_domain(project)

    async def find_by_ids(self, resource_ids: Sequence[UUID]) -> list[Resource]:
        """Load several resources. Unknown ids are silently absent.

        Args:
            resource_ids: Resource identifiers.

        Returns:
            Found resources.
        """
        if not resource_ids:
            return []
        result = await self.session.execute(
            select(Project).where(Project.id.in_(list(resource_ids)))
        )
        return [self._to_domain(project) for project in result.scalars().all()]

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
        await self.session.execute(
            update(Project)
            .where(Project.id == resource_id)
            .values(authorization_updated_at=updated_at)
        )

    def _to_domain(self, project: Project) -> Resource:
        """Convert database model to domain entity.

        Args:
            project: SQLAlchemy Project model instance.

        Returns:
            Domain Resource entity.
        """
        updated_at = project.authorization_updated_at
        # Backends without timezone support (SQLite) return naive UTC values
        if updated_at is not None and updated_at.tzinfo is None:
            updated_at = updated_at.replace(tzinfo=UTC)

        return Resource(
            id=project.id,
            uuid=project.uuid,
            organization_id=project.organization_id,
            key=project.kee,
            qualifier=project.qualifier,
            name=project.name,
            authorization_updated_at=updated_at,
        )
