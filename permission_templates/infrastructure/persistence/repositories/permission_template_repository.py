"""PermissionTemplateRepository - SQLAlchemy implementation.

Adapter for hexagonal architecture. Maps template tables to immutable
PermissionTemplate snapshots and writes materialized permission rows.

The NULL group_id of the "anyone" group is translated to ``ANYONE`` here and
nowhere else.
"""

from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from uuid_extensions import uuid7

from permission_templates.domain.entities.permission_template import (
    PermissionTemplate,
)
from permission_templates.domain.value_objects import (
    GroupPrincipal,
    GroupRoleEntry,
    PermissionEntries,
    UserRoleEntry,
    group_id_of,
    principal_from_group_id,
)
from permission_templates.infrastructure.persistence.models.permission import (
    GroupPermission,
    UserPermission,
)
from permission_templates.infrastructure.persistence.models.permission_template import (
    PermissionTemplate as PermissionTemplateModel,
    PermissionTemplateCharacteristic,
    PermissionTemplateGroup,
    PermissionTemplateUser,
)


class PermissionTemplateRepository:
    """SQLAlchemy implementation of the PermissionTemplateRepository protocol.

    Materialized rows get time-ordered UUIDv7 ids. Writes are flushed to the
    session but never committed here; the unit of work owning the session
    decides.

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> async with uow:
        ...     template = await uow.templates.find_by_uuid("default_template")
        ...     print(template.entries.group_roles)
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session.
        """
        self.session = session

    async def find_by_uuid(
        self,
        template_uuid: str,
        organization_id: UUID | None = None,
    ) -> PermissionTemplate | None:
        """Load a template and all its entries.

        Args:
            template_uuid: Public template identifier.
            organization_id: Restrict the lookup to this organization.

        Returns:
            PermissionTemplate snapshot, or None if not found.
        """
        stmt = select(PermissionTemplateModel).where(
            PermissionTemplateModel.uuid == template_uuid
        )
        if organization_id is not None:
            stmt = stmt.where(PermissionTemplateModel.organization_id == organization_id)
        result = await self.session.execute(stmt)
        template_model = result.scalar_one_or_none()

        if template_model is None:
            return None

        return await self._to_domain(template_model)

    async def find_by_organization(
        self,
        organization_id: UUID,
    ) -> list[PermissionTemplate]:
        """Load every template of an organization, ordered by name.

        Args:
            organization_id: Owning organization.

        Returns:
            List of template snapshots.
        """
        stmt = (
            select(PermissionTemplateModel)
            .where(PermissionTemplateModel.organization_id == organization_id)
            .order_by(PermissionTemplateModel.name)
        )
        result = await self.session.execute(stmt)
        return [await self._to_domain(model) for model in result.scalars().all()]

    async def delete_group_and_user_permissions(self, resource_id: UUID) -> None:
        """Delete every group and user permission row of a resource.

        Args:
            resource_id: Resource whose grants are removed.
        """
        await self.session.execute(
            delete(GroupPermission).where(GroupPermission.resource_id == resource_id)
        )
        await self.session.execute(
            delete(UserPermission).where(UserPermission.resource_id == resource_id)
        )

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
        self.session.add(
            GroupPermission(
                id=uuid7(),
                resource_id=resource_id,
                role=role,
                group_id=group_id_of(principal),
            )
        )
        await self.session.flush()

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
        self.session.add(
            UserPermission(
                id=uuid7(),
                resource_id=resource_id,
                role=role,
                user_id=user_id,
            )
        )
        await self.session.flush()

    async def select_resource_permissions(
        self,
        resource_id: UUID,
    ) -> PermissionEntries:
        """Read the grants stored for a resource.

        Args:
            resource_id: Resource to read.

        Returns:
            PermissionEntries with group and user roles.
        """
        group_rows = await self.session.execute(
            select(GroupPermission.group_id, GroupPermission.role)
            .where(GroupPermission.resource_id == resource_id)
            .order_by(GroupPermission.role)
        )
        user_rows = await self.session.execute(
            select(UserPermission.user_id, UserPermission.role)
            .where(UserPermission.resource_id == resource_id)
            .order_by(UserPermission.role)
        )
        return PermissionEntries(
            group_roles=tuple(
                GroupRoleEntry(principal=principal_from_group_id(group_id), role=role)
                for group_id, role in group_rows.all()
            ),
            user_roles=tuple(
                UserRoleEntry(user_id=user_id, role=role)
                for user_id, role in user_rows.all()
            ),
        )

    async def _to_domain(
        self, template_model: PermissionTemplateModel
    ) -> PermissionTemplate:
        """Load the entries of a template and build its snapshot.

        Args:
            template_model: SQLAlchemy PermissionTemplate model instance.

        Returns:
            Domain PermissionTemplate entity.
        """
        template_id = template_model.id

        group_rows = await self.session.execute(
            select(PermissionTemplateGroup.group_id, PermissionTemplateGroup.permission)
            .where(PermissionTemplateGroup.template_id == template_id)
            .order_by(PermissionTemplateGroup.created_at, PermissionTemplateGroup.permission)
        )
        user_rows = await self.session.execute(
            select(PermissionTemplateUser.user_id, PermissionTemplateUser.permission)
            .where(PermissionTemplateUser.template_id == template_id)
            .order_by(PermissionTemplateUser.created_at, PermissionTemplateUser.permission)
        )
        creator_rows = await self.session.execute(
            select(PermissionTemplateCharacteristic.permission)
            .where(
                PermissionTemplateCharacteristic.template_id == template_id,
                PermissionTemplateCharacteristic.with_project_creator.is_(True),
            )
            .order_by(PermissionTemplateCharacteristic.permission)
        )

        return PermissionTemplate(
            id=template_id,
            uuid=template_model.uuid,
            organization_id=template_model.organization_id,
            name=template_model.name,
            description=template_model.description,
            key_pattern=template_model.key_pattern,
            entries=PermissionEntries(
                group_roles=tuple(
                    GroupRoleEntry(
                        principal=principal_from_group_id(group_id), role=permission
                    )
                    for group_id, permission in group_rows.all()
                ),
                user_roles=tuple(
                    UserRoleEntry(user_id=user_id, role=permission)
                    for user_id, permission in user_rows.all()
                ),
                creator_roles=tuple(creator_rows.scalars().all()),
            ),
        )
