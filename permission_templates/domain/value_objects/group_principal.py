"""Group principal value objects.

A group-role entry grants a role either to a concrete group or to the
"anyone" group. The "anyone" group is not a stored group: storage encodes it
as a NULL group id, and repositories translate that NULL into ``ANYONE`` at
the boundary so domain code never has to null-check a group id.

Usage:
    from permission_templates.domain.value_objects import ANYONE, SpecificGroup

    principal = SpecificGroup(group_id=group.id)
    match principal:
        case AnyoneGroup():
            ...
        case SpecificGroup(group_id=group_id):
            ...
"""

from dataclasses import dataclass
from typing import TypeAlias
from uuid import UUID


@dataclass(frozen=True, slots=True)
class AnyoneGroup:
    """Every user of the organization, regardless of group membership."""

    def __str__(self) -> str:
        return "Anyone"


@dataclass(frozen=True, slots=True)
class SpecificGroup:
    """A stored group of the organization.

    Attributes:
        group_id: Identifier of the group.
    """

    group_id: UUID

    def __str__(self) -> str:
        return str(self.group_id)


ANYONE = AnyoneGroup()
"""Shared instance of the "anyone" sentinel."""

GroupPrincipal: TypeAlias = AnyoneGroup | SpecificGroup


def principal_from_group_id(group_id: UUID | None) -> GroupPrincipal:
    """Map a nullable stored group id to a principal.

    Args:
        group_id: Group id read from storage, None for the "anyone" group.

    Returns:
        GroupPrincipal: ``ANYONE`` for None, SpecificGroup otherwise.
    """
    if group_id is None:
        return ANYONE
    return SpecificGroup(group_id=group_id)


def group_id_of(principal: GroupPrincipal) -> UUID | None:
    """Map a principal back to its nullable storage representation.

    Args:
        principal: Group principal.

    Returns:
        UUID | None: The group id, or None for the "anyone" group.
    """
    match principal:
        case SpecificGroup(group_id=group_id):
            return group_id
        case _:
            return None
