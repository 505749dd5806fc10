"""Permission template commands (CQRS write operations).

Commands are immutable data containers; handlers hold the logic and return
Result types.
"""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class ApplyPermissionTemplate:
    """Replace the permissions of resources with those of a template.

    Attributes:
        template_uuid: Template to materialize.
        resource_ids: Target resources. All of them are rewritten in one
            transaction, or none is.
        project_creator_id: When set, the template's project-creator roles
            are granted directly to this user.

    Example:
        >>> command = ApplyPermissionTemplate(
        ...     template_uuid="default_20130101_010203",
        ...     resource_ids=(project.id,),
        ... )
        >>> result = await handler.handle(command)
    """

    template_uuid: str
    resource_ids: tuple[UUID, ...]
    project_creator_id: UUID | None = None


@dataclass(frozen=True, kw_only=True)
class ApplyDefaultPermissionTemplate:
    """Apply the template an organization uses for a new resource.

    A template whose key pattern matches the resource key wins over the
    configured default template.

    Attributes:
        organization_id: Organization the resource belongs to.
        resource_id: Newly created resource.
        project_creator_id: User who created the resource, if any.
    """

    organization_id: UUID
    resource_id: UUID
    project_creator_id: UUID | None = None
