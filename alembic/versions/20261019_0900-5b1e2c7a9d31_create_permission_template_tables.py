"""create_permission_template_tables

Revision ID: 5b1e2c7a9d31
Revises:
Create Date: 2026-10-19 09:00:00.000000+00:00

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "5b1e2c7a9d31"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _base_columns(mutable: bool = True) -> list[sa.Column]:
    """Primary key and timestamps from BaseModel / BaseMutableModel."""
    columns = [
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
    ]
    if mutable:
        columns.append(
            sa.Column(
                "updated_at",
                sa.DateTime(timezone=True),
                server_default=sa.text("now()"),
                nullable=False,
            )
        )
    return columns


def upgrade() -> None:
    """Create organizations, users, groups, templates, projects, roles."""
    op.create_table(
        "organizations",
        *_base_columns(),
        sa.Column(
            "key",
            sa.String(length=255),
            nullable=False,
            comment="Unique organization key",
        ),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("key"),
    )

    op.create_table(
        "users",
        *_base_columns(),
        sa.Column("login", sa.String(length=255), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=True),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_users_login", "users", ["login"], unique=True)

    op.create_table(
        "groups",
        *_base_columns(),
        sa.Column("organization_id", sa.Uuid(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("description", sa.String(length=200), nullable=True),
        sa.ForeignKeyConstraint(
            ["organization_id"], ["organizations.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "organization_id", "name", name="uq_groups_organization_name"
        ),
    )
    op.create_index("ix_groups_organization_id", "groups", ["organization_id"])

    op.create_table(
        "groups_users",
        *_base_columns(mutable=False),
        sa.Column("group_id", sa.Uuid(), nullable=False),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.ForeignKeyConstraint(["group_id"], ["groups.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("group_id", "user_id", name="uq_groups_users"),
    )
    op.create_index("ix_groups_users_group_id", "groups_users", ["group_id"])
    op.create_index("ix_groups_users_user_id", "groups_users", ["user_id"])

    op.create_table(
        "permission_templates",
        *_base_columns(),
        sa.Column("organization_id", sa.Uuid(), nullable=False),
        sa.Column(
            "uuid",
            sa.String(length=40),
            nullable=False,
            comment="Public identifier, referenced by settings",
        ),
        sa.Column("name", sa.String(length=100), nullable=False),
        sa.Column("description", sa.String(length=4000), nullable=True),
        sa.Column(
            "key_pattern",
            sa.String(length=500),
            nullable=True,
            comment="Regular expression matched against project keys",
        ),
        sa.ForeignKeyConstraint(
            ["organization_id"], ["organizations.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("uuid"),
    )
    op.create_index(
        "ix_permission_templates_organization_id",
        "permission_templates",
        ["organization_id"],
    )

    op.create_table(
        "perm_templates_groups",
        *_base_columns(mutable=False),
        sa.Column("template_id", sa.Uuid(), nullable=False),
        sa.Column(
            "group_id", sa.Uuid(), nullable=True, comment="NULL means anyone"
        ),
        sa.Column("permission", sa.String(length=64), nullable=False),
        sa.ForeignKeyConstraint(
            ["template_id"], ["permission_templates.id"], ondelete="CASCADE"
        ),
        sa.ForeignKeyConstraint(["group_id"], ["groups.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_perm_templates_groups_template_id",
        "perm_templates_groups",
        ["template_id"],
    )

    op.create_table(
        "perm_templates_users",
        *_base_columns(mutable=False),
        sa.Column("template_id", sa.Uuid(), nullable=False),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("permission", sa.String(length=64), nullable=False),
        sa.ForeignKeyConstraint(
            ["template_id"], ["permission_templates.id"], ondelete="CASCADE"
        ),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_perm_templates_users_template_id",
        "perm_templates_users",
        ["template_id"],
    )

    op.create_table(
        "perm_tpl_characteristics",
        *_base_columns(mutable=False),
        sa.Column("template_id", sa.Uuid(), nullable=False),
        sa.Column("permission", sa.String(length=64), nullable=False),
        sa.Column("with_project_creator", sa.Boolean(), nullable=False),
        sa.ForeignKeyConstraint(
            ["template_id"], ["permission_templates.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "ix_perm_tpl_characteristics_template_id",
        "perm_tpl_characteristics",
        ["template_id"],
    )

    op.create_table(
        "projects",
        *_base_columns(),
        sa.Column("organization_id", sa.Uuid(), nullable=False),
        sa.Column("uuid", sa.String(length=50), nullable=False),
        sa.Column("kee", sa.String(length=400), nullable=False),
        sa.Column("qualifier", sa.String(length=10), nullable=False),
        sa.Column("name", sa.String(length=2000), nullable=False),
        sa.Column(
            "authorization_updated_at",
            sa.DateTime(timezone=True),
            nullable=True,
            comment="Last time permissions of the project were rewritten",
        ),
        sa.ForeignKeyConstraint(
            ["organization_id"], ["organizations.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("uuid"),
        sa.UniqueConstraint("kee"),
    )
    op.create_index("ix_projects_organization_id", "projects", ["organization_id"])

    op.create_table(
        "group_roles",
        *_base_columns(mutable=False),
        sa.Column("resource_id", sa.Uuid(), nullable=False),
        sa.Column("role", sa.String(length=64), nullable=False),
        sa.Column(
            "group_id", sa.Uuid(), nullable=True, comment="NULL means anyone"
        ),
        sa.ForeignKeyConstraint(["resource_id"], ["projects.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["group_id"], ["groups.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_group_roles_resource", "group_roles", ["resource_id", "role"]
    )

    op.create_table(
        "user_roles",
        *_base_columns(mutable=False),
        sa.Column("resource_id", sa.Uuid(), nullable=False),
        sa.Column("role", sa.String(length=64), nullable=False),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.ForeignKeyConstraint(["resource_id"], ["projects.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_user_roles_resource", "user_roles", ["resource_id", "role"])
    op.create_index("ix_user_roles_user_id", "user_roles", ["user_id"])

    op.create_table(
        "organization_settings",
        *_base_columns(),
        sa.Column("organization_id", sa.Uuid(), nullable=False),
        sa.Column("key", sa.String(length=512), nullable=False),
        sa.Column("value", sa.Text(), nullable=True),
        sa.ForeignKeyConstraint(
            ["organization_id"], ["organizations.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint(
            "organization_id", "key", name="uq_organization_settings_key"
        ),
    )


def downgrade() -> None:
    """Drop every table in reverse dependency order."""
    op.drop_table("organization_settings")
    op.drop_index("ix_user_roles_user_id", table_name="user_roles")
    op.drop_index("idx_user_roles_resource", table_name="user_roles")
    op.drop_table("user_roles")
    op.drop_index("idx_group_roles_resource", table_name="group_roles")
    op.drop_table("group_roles")
    op.drop_index("ix_projects_organization_id", table_name="projects")
    op.drop_table("projects")
    op.drop_index(
        "ix_perm_tpl_characteristics_template_id",
        table_name="perm_tpl_characteristics",
    )
    op.drop_table("perm_tpl_characteristics")
    op.drop_index(
        "ix_perm_templates_users_template_id", table_name="perm_templates_users"
    )
    op.drop_table("perm_templates_users")
    op.drop_index(
        "ix_perm_templates_groups_template_id", table_name="perm_templates_groups"
    )
    op.drop_table("perm_templates_groups")
    op.drop_index(
        "ix_permission_templates_organization_id",
        table_name="permission_templates",
    )
    op.drop_table("permission_templates")
    op.drop_index("ix_groups_users_user_id", table_name="groups_users")
    op.drop_index("ix_groups_users_group_id", table_name="groups_users")
    op.drop_table("groups_users")
    op.drop_index("ix_groups_organization_id", table_name="groups")
    op.drop_table("groups")
    op.drop_index("ix_users_login", table_name="users")
    op.drop_table("users")
    op.drop_table("organizations")
