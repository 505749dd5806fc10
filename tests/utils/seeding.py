"""Database seeding helpers for integration tests."""

from uuid import UUID

from uuid_extensions import uuid7

from permission_templates.infrastructure.persistence.models import (
    PermissionTemplate,
    PermissionTemplateCharacteristic,
    PermissionTemplateGroup,
    PermissionTemplateUser,
    Project,
)


async def add_template(
    session,
    organization_id: UUID,
    uuid: str,
    name: str,
    *,
    groups: tuple[tuple[UUID | None, str], ...] = (),
    users: tuple[tuple[UUID, str], ...] = (),
    creator_roles: tuple[str, ...] = (),
    key_pattern: str | None = None,
) -> UUID:
    """Insert a template with its entries and return its id."""
    template = PermissionTemplate(
        id=uuid7(),
        organization_id=organization_id,
        uuid=uuid,
        name=name,
        key_pattern=key_pattern,
    )
    session.add(template)
    await session.flush()
    for group_id, permission in groups:
        session.add(
            PermissionTemplateGroup(
                template_id=template.id, group_id=group_id, permission=permission
            )
        )
    for user_id, permission in users:
        session.add(
            PermissionTemplateUser(
                template_id=template.id, user_id=user_id, permission=permission
            )
        )
    for permission in creator_roles:
        session.add(
            PermissionTemplateCharacteristic(
                template_id=template.id,
                permission=permission,
                with_project_creator=True,
            )
        )
    await session.flush()
    return template.id


async def add_project(session, organization_id: UUID, key: str) -> UUID:
    """Insert a project and return its id."""
    project = Project(
        id=uuid7(),
        organization_id=organization_id,
        uuid=str(uuid7()),
        kee=key,
        name=key,
    )
    session.add(project)
    await session.flush()
    return project.id
