"""Integration test fixtures.

Each test gets its own SQLite file database (aiosqlite) with every table
created from the models, plus a seeded organization:

- group A: admin, issueadmin
- group B: user, codeviewer
- anyone: user, codeviewer
- user X: admin (direct)
"""

from dataclasses import dataclass
from uuid import UUID

import pytest_asyncio
from uuid_extensions import uuid7

from permission_templates.infrastructure.persistence.database import Database
from permission_templates.infrastructure.persistence.models import (
    Group,
    GroupMembership,
    Organization,
    User,
)
from tests.utils.seeding import add_project, add_template


@dataclass(frozen=True, kw_only=True)
class Scenario:
    """Identifiers of the seeded rows."""

    organization_id: UUID
    other_organization_id: UUID
    group_a_id: UUID
    group_b_id: UUID
    user_x_id: UUID
    member_a_id: UUID
    member_b_id: UUID
    member_ab_id: UUID
    outsider_id: UUID
    project_id: UUID
    second_project_id: UUID
    foreign_project_id: UUID
    template_uuid: str
    replacement_template_uuid: str
    empty_template_uuid: str
    creator_template_uuid: str

    @property
    def user_ids(self) -> tuple[UUID, ...]:
        return (
            self.user_x_id,
            self.member_a_id,
            self.member_b_id,
            self.member_ab_id,
            self.outsider_id,
        )


@pytest_asyncio.fixture
async def test_database(tmp_path):
    """Provide a fresh database with all tables created."""
    db = Database(database_url=f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    await db.create_all()
    yield db
    await db.close()


@pytest_asyncio.fixture
async def scenario(test_database) -> Scenario:
    """Seed the reference organization, groups, users, templates and projects."""
    async with test_database.get_session() as session:
        organization = Organization(id=uuid7(), key="org1", name="Organization 1")
        other_organization = Organization(id=uuid7(), key="org2", name="Organization 2")
        session.add_all([organization, other_organization])
        await session.flush()

        group_a = Group(id=uuid7(), organization_id=organization.id, name="group-a")
        group_b = Group(id=uuid7(), organization_id=organization.id, name="group-b")
        session.add_all([group_a, group_b])

        users = {
            login: User(id=uuid7(), login=login, name=login)
            for login in ("user-x", "member-a", "member-b", "member-ab", "outsider")
        }
        session.add_all(users.values())
        await session.flush()

        session.add_all(
            [
                GroupMembership(group_id=group_a.id, user_id=users["member-a"].id),
                GroupMembership(group_id=group_b.id, user_id=users["member-b"].id),
                GroupMembership(group_id=group_a.id, user_id=users["member-ab"].id),
                GroupMembership(group_id=group_b.id, user_id=users["member-ab"].id),
            ]
        )

        await add_template(
            session,
            organization.id,
            "default_20130101_010203",
            "Default template",
            groups=(
                (group_a.id, "admin"),
                (group_a.id, "issueadmin"),
                (group_b.id, "user"),
                (group_b.id, "codeviewer"),
                (None, "user"),
                (None, "codeviewer"),
            ),
            users=((users["user-x"].id, "admin"),),
        )
        await add_template(
            session,
            organization.id,
            "replacement_template",
            "Replacement template",
            groups=((group_b.id, "admin"),),
            users=((users["member-a"].id, "codeviewer"),),
        )
        await add_template(session, organization.id, "empty_template", "Empty")
        await add_template(
            session,
            organization.id,
            "creator_template",
            "Creator template",
            groups=((None, "user"),),
            creator_roles=("admin", "scan"),
        )

        project_id = await add_project(session, organization.id, "PROJECT_KEY")
        second_project_id = await add_project(session, organization.id, "SECOND_KEY")
        foreign_project_id = await add_project(
            session, other_organization.id, "FOREIGN_KEY"
        )

        return Scenario(
            organization_id=organization.id,
            other_organization_id=other_organization.id,
            group_a_id=group_a.id,
            group_b_id=group_b.id,
            user_x_id=users["user-x"].id,
            member_a_id=users["member-a"].id,
            member_b_id=users["member-b"].id,
            member_ab_id=users["member-ab"].id,
            outsider_id=users["outsider"].id,
            project_id=project_id,
            second_project_id=second_project_id,
            foreign_project_id=foreign_project_id,
            template_uuid="default_20130101_010203",
            replacement_template_uuid="replacement_template",
            empty_template_uuid="empty_template",
            creator_template_uuid="creator_template",
        )
