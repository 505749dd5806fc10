"""Permission template queries (CQRS read operations)."""

from dataclasses import dataclass
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class WouldUserHavePermission:
    """Would a user hold a permission on a resource created right now?

    Answers for the organization's default template, without creating the
    resource.

    Attributes:
        organization_id: Organization the resource would belong to.
        user_id: Caller, None for anonymous callers.
        permission: Role (permission) name.
        project_key: Key of the would-be resource (logging context only).
        qualifier: Qualifier of the would-be resource (logging context only).
        as_project_creator: Count the template's project-creator roles, as
            the caller would be the creator of the resource.

    Example:
        >>> query = WouldUserHavePermission(
        ...     organization_id=org.id,
        ...     user_id=user.id,
        ...     permission="codeviewer",
        ...     project_key="PROJECT_KEY",
        ...     qualifier="TRK",
        ... )
        >>> await handler.handle(query)
        True
    """

    organization_id: UUID
    user_id: UUID | None
    permission: str
    project_key: str | None = None
    qualifier: str | None = None
    as_project_creator: bool = False
