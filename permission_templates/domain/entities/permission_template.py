"""PermissionTemplate domain entity.

Pure business logic, no framework dependencies.

A template is a named bundle of role grants owned by one organization. The
entity is an immutable snapshot: repositories load the template and all its
entries once, and every check made during a single apply or prediction reads
that same snapshot even if the stored template changes meanwhile.
"""

import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from uuid import UUID

from permission_templates.domain.value_objects.permission_entries import (
    PermissionEntries,
    has_permission,
)


@dataclass(frozen=True, kw_only=True)
class PermissionTemplate:
    """Permission template snapshot.

    Attributes:
        id: Internal identifier.
        uuid: Public identifier, referenced by the default template setting.
        organization_id: Owning organization.
        name: Display name.
        entries: Group, user and project-creator role entries.
        description: Optional description.
        key_pattern: Optional regular expression. Resources whose key fully
            matches it get this template when the default one is applied.

    Example:
        >>> template.grants("admin", user_id=user.id, user_group_ids={group.id})
        True
    """

    id: UUID
    uuid: str
    organization_id: UUID
    name: str
    entries: PermissionEntries = field(default_factory=PermissionEntries)
    description: str | None = None
    key_pattern: str | None = None

    @property
    def is_empty(self) -> bool:
        """True when the template grants nothing to anyone."""
        return self.entries.is_empty

    def grants(
        self,
        role: str,
        *,
        user_id: UUID | None,
        user_group_ids: Iterable[UUID] = (),
        as_project_creator: bool = False,
    ) -> bool:
        """Check whether applying this template would give ``role`` to a caller.

        Args:
            role: Role (permission) name.
            user_id: Caller identity, None for anonymous callers.
            user_group_ids: Groups the caller belongs to in the organization.
            as_project_creator: Treat the caller as the resource creator.

        Returns:
            bool: Result of the resolution rule over the template entries.
        """
        return has_permission(
            self.entries,
            role,
            user_id=user_id,
            user_group_ids=user_group_ids,
            as_project_creator=as_project_creator,
        )

    def matches_key(self, resource_key: str) -> bool:
        """Check whether a resource key fully matches the key pattern.

        Args:
            resource_key: Key of the resource (e.g. project key).

        Returns:
            bool: False when the template has no key pattern or the pattern
                is not a valid regular expression.
        """
        if not self.key_pattern:
            return False
        try:
            return re.fullmatch(self.key_pattern, resource_key) is not None
        except re.error:
            return False
