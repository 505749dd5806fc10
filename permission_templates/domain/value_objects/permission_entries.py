"""Permission entries and the resolution rule.

``PermissionEntries`` is the shared shape of two things:

- the entries of a permission template (what *would* be granted), and
- the grants stored for a resource (what *is* granted).

Both are evaluated by the same ``has_permission`` function, so predicting the
effect of a template and checking the rows it materialized cannot drift apart.

Resolution Rule:
    A caller holds ``role`` when any of these entries exist:
    - a user-role entry for (caller, role)
    - a group-role entry for (role, SpecificGroup(g)) with g among the
      caller's groups
    - a group-role entry for (role, ANYONE)

    Anonymous callers (no user id) only match ANYONE entries. Named groups
    and direct user grants require an authenticated identity.

Usage:
    entries = PermissionEntries(
        group_roles=(GroupRoleEntry(principal=ANYONE, role="user"),),
        user_roles=(UserRoleEntry(user_id=admin_id, role="admin"),),
    )
    has_permission(entries, "admin", user_id=admin_id, user_group_ids=frozenset())
"""

from collections.abc import Iterable
from dataclasses import dataclass
from uuid import UUID

from permission_templates.domain.value_objects.group_principal import (
    AnyoneGroup,
    GroupPrincipal,
    SpecificGroup,
)


@dataclass(frozen=True, slots=True, kw_only=True)
class GroupRoleEntry:
    """Role granted to a group principal.

    Attributes:
        principal: ANYONE or SpecificGroup.
        role: Role (permission) name.
    """

    principal: GroupPrincipal
    role: str


@dataclass(frozen=True, slots=True, kw_only=True)
class UserRoleEntry:
    """Role granted directly to a user.

    Attributes:
        user_id: User identifier.
        role: Role (permission) name.
    """

    user_id: UUID
    role: str


@dataclass(frozen=True, slots=True, kw_only=True)
class PermissionEntries:
    """Immutable collection of group, user and project-creator role entries.

    Attributes:
        group_roles: Roles granted to groups (or to anyone).
        user_roles: Roles granted directly to users.
        creator_roles: Roles granted to whoever creates the resource. Only
            templates carry these; materialized grants never do.
    """

    group_roles: tuple[GroupRoleEntry, ...] = ()
    user_roles: tuple[UserRoleEntry, ...] = ()
    creator_roles: tuple[str, ...] = ()

    @property
    def is_empty(self) -> bool:
        """True when no entry of any kind exists."""
        return not (self.group_roles or self.user_roles or self.creator_roles)

    def roles_of_principal(self, principal: GroupPrincipal) -> frozenset[str]:
        """Roles granted to exactly this group principal (no inheritance)."""
        return frozenset(
            entry.role for entry in self.group_roles if entry.principal == principal
        )

    def roles_of_user(self, user_id: UUID) -> frozenset[str]:
        """Roles granted directly to this user (no group resolution)."""
        return frozenset(
            entry.role for entry in self.user_roles if entry.user_id == user_id
        )

    def with_creator(self, creator_id: UUID) -> "PermissionEntries":
        """Return entries where the creator roles became user-role entries.

        Mirrors what materializing the template for ``creator_id`` writes:
        one user-role entry per creator role, skipping roles the creator
        already holds directly.

        Args:
            creator_id: User who creates the resource.

        Returns:
            PermissionEntries: New entries without creator roles.
        """
        existing = self.roles_of_user(creator_id)
        extra = tuple(
            UserRoleEntry(user_id=creator_id, role=role)
            for role in dict.fromkeys(self.creator_roles)
            if role not in existing
        )
        return PermissionEntries(
            group_roles=self.group_roles,
            user_roles=self.user_roles + extra,
        )


def has_permission(
    entries: PermissionEntries,
    role: str,
    *,
    user_id: UUID | None,
    user_group_ids: Iterable[UUID] = (),
    as_project_creator: bool = False,
) -> bool:
    """Apply the resolution rule.

    Args:
        entries: Template entries or stored grants.
        role: Role (permission) name being checked.
        user_id: Caller identity, None for anonymous callers.
        user_group_ids: Groups the caller belongs to. Ignored for anonymous
            callers.
        as_project_creator: Evaluate the caller as the creator of the
            resource, so creator roles count as direct grants.

    Returns:
        bool: True if any entry grants ``role`` to the caller.
    """
    if user_id is not None:
        if as_project_creator:
            entries = entries.with_creator(user_id)
        if any(e.user_id == user_id and e.role == role for e in entries.user_roles):
            return True

    group_ids = frozenset(user_group_ids) if user_id is not None else frozenset()
    for entry in entries.group_roles:
        if entry.role != role:
            continue
        match entry.principal:
            case AnyoneGroup():
                return True
            case SpecificGroup(group_id=group_id) if group_id in group_ids:
                return True
    return False
