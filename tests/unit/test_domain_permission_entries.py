"""Unit tests for group principals, permission entries and the resolution rule.

Tests cover:
- Principal mapping to and from nullable storage ids
- has_permission for direct grants, named groups and the anyone group
- Anonymous callers only match anyone entries
- Project-creator roles (with_creator and as_project_creator)
"""

import pytest
from uuid_extensions import uuid7

from permission_templates.domain.value_objects import (
    ANYONE,
    AnyoneGroup,
    GroupRoleEntry,
    PermissionEntries,
    SpecificGroup,
    UserRoleEntry,
    group_id_of,
    has_permission,
    principal_from_group_id,
)


@pytest.mark.unit
class TestGroupPrincipal:
    """Test the anyone / specific group tagged union."""

    def test_null_group_id_maps_to_anyone(self):
        assert principal_from_group_id(None) is ANYONE

    def test_group_id_maps_to_specific_group(self):
        group_id = uuid7()

        principal = principal_from_group_id(group_id)

        assert principal == SpecificGroup(group_id=group_id)
        assert group_id_of(principal) == group_id

    def test_anyone_maps_back_to_null(self):
        assert group_id_of(ANYONE) is None

    def test_anyone_instances_are_equal(self):
        assert AnyoneGroup() == ANYONE
        assert str(ANYONE) == "Anyone"


@pytest.mark.unit
class TestPermissionEntries:
    """Test PermissionEntries helpers."""

    def test_default_entries_are_empty(self):
        assert PermissionEntries().is_empty

    def test_creator_roles_alone_are_not_empty(self):
        assert not PermissionEntries(creator_roles=("scan",)).is_empty

    def test_roles_of_principal_does_not_mix_principals(self):
        group_id = uuid7()
        entries = PermissionEntries(
            group_roles=(
                GroupRoleEntry(principal=SpecificGroup(group_id=group_id), role="admin"),
                GroupRoleEntry(principal=ANYONE, role="user"),
            )
        )

        assert entries.roles_of_principal(SpecificGroup(group_id=group_id)) == {
            "admin"
        }
        assert entries.roles_of_principal(ANYONE) == {"user"}

    def test_with_creator_converts_creator_roles(self):
        creator_id = uuid7()
        entries = PermissionEntries(creator_roles=("scan", "admin"))

        result = entries.with_creator(creator_id)

        assert result.creator_roles == ()
        assert result.roles_of_user(creator_id) == {"scan", "admin"}

    def test_with_creator_skips_roles_already_granted(self):
        creator_id = uuid7()
        entries = PermissionEntries(
            user_roles=(UserRoleEntry(user_id=creator_id, role="admin"),),
            creator_roles=("admin", "admin", "scan"),
        )

        result = entries.with_creator(creator_id)

        assert [(e.user_id, e.role) for e in result.user_roles] == [
            (creator_id, "admin"),
            (creator_id, "scan"),
        ]


@pytest.mark.unit
class TestHasPermission:
    """Test the resolution rule."""

    @pytest.fixture
    def ids(self):
        return {
            "group_a": uuid7(),
            "group_b": uuid7(),
            "user_x": uuid7(),
            "member_a": uuid7(),
        }

    @pytest.fixture
    def entries(self, ids):
        return PermissionEntries(
            group_roles=(
                GroupRoleEntry(
                    principal=SpecificGroup(group_id=ids["group_a"]), role="admin"
                ),
                GroupRoleEntry(
                    principal=SpecificGroup(group_id=ids["group_a"]),
                    role="issueadmin",
                ),
                GroupRoleEntry(
                    principal=SpecificGroup(group_id=ids["group_b"]), role="user"
                ),
                GroupRoleEntry(
                    principal=SpecificGroup(group_id=ids["group_b"]),
                    role="codeviewer",
                ),
                GroupRoleEntry(principal=ANYONE, role="user"),
                GroupRoleEntry(principal=ANYONE, role="codeviewer"),
            ),
            user_roles=(UserRoleEntry(user_id=ids["user_x"], role="admin"),),
        )

    def test_direct_user_grant(self, entries, ids):
        assert has_permission(entries, "admin", user_id=ids["user_x"])
        assert not has_permission(entries, "issueadmin", user_id=ids["user_x"])

    def test_named_group_grant(self, entries, ids):
        assert has_permission(
            entries,
            "issueadmin",
            user_id=ids["member_a"],
            user_group_ids=[ids["group_a"]],
        )

    def test_anyone_grant_reaches_user_without_groups(self, entries):
        assert has_permission(entries, "codeviewer", user_id=uuid7())

    def test_unrelated_role_is_denied(self, entries, ids):
        assert not has_permission(
            entries,
            "scan",
            user_id=ids["member_a"],
            user_group_ids=[ids["group_a"], ids["group_b"]],
        )

    def test_anonymous_caller_matches_anyone_entries(self, entries):
        assert has_permission(entries, "user", user_id=None)

    def test_anonymous_caller_ignores_group_ids(self, entries, ids):
        assert not has_permission(
            entries, "admin", user_id=None, user_group_ids=[ids["group_a"]]
        )

    def test_anonymous_caller_gets_nothing_without_anyone_entry(self, ids):
        entries = PermissionEntries(
            group_roles=(
                GroupRoleEntry(
                    principal=SpecificGroup(group_id=ids["group_a"]), role="user"
                ),
            ),
            user_roles=(UserRoleEntry(user_id=ids["user_x"], role="user"),),
        )

        assert not has_permission(entries, "user", user_id=None)

    def test_empty_entries_grant_nothing(self, ids):
        assert not has_permission(
            PermissionEntries(),
            "user",
            user_id=ids["user_x"],
            user_group_ids=[ids["group_a"]],
        )

    def test_creator_roles_only_count_as_project_creator(self):
        user_id = uuid7()
        entries = PermissionEntries(creator_roles=("scan",))

        assert not has_permission(entries, "scan", user_id=user_id)
        assert has_permission(entries, "scan", user_id=user_id, as_project_creator=True)

    def test_anonymous_caller_is_never_project_creator(self):
        entries = PermissionEntries(creator_roles=("scan",))

        assert not has_permission(
            entries, "scan", user_id=None, as_project_creator=True
        )
