"""Unit tests for ApplyDefaultPermissionTemplateHandler.

Tests cover:
- Key pattern match wins over the configured default
- Several matching key patterns are a conflict
- Fallback to the organization default template
- No template at all (NotFoundError)
- Unknown or foreign resource (ValidationError)
"""

from unittest.mock import AsyncMock

import pytest
from uuid_extensions import uuid7

from permission_templates.application.commands import ApplyDefaultPermissionTemplate
from permission_templates.application.commands.handlers import (
    ApplyDefaultPermissionTemplateHandler,
)
from permission_templates.application.services import PermissionTemplateApplicator
from permission_templates.core.constants import DEFAULT_TEMPLATE_SETTING_KEY
from permission_templates.core.enums import ErrorCode
from permission_templates.core.errors import (
    ConflictError,
    NotFoundError,
    ValidationError,
)
from permission_templates.core.result import Failure, Success
from permission_templates.domain.entities import PermissionTemplate, Resource
from permission_templates.domain.protocols import SettingsProtocol
from permission_templates.domain.value_objects import (
    ANYONE,
    GroupRoleEntry,
    PermissionEntries,
)
from tests.utils.doubles import FakeUnitOfWork


ORGANIZATION_ID = uuid7()


def create_template(
    uuid: str, name: str, key_pattern: str | None = None
) -> PermissionTemplate:
    """Create a test template granting 'user' to anyone."""
    return PermissionTemplate(
        id=uuid7(),
        uuid=uuid,
        organization_id=ORGANIZATION_ID,
        name=name,
        entries=PermissionEntries(
            group_roles=(GroupRoleEntry(principal=ANYONE, role="user"),)
        ),
        key_pattern=key_pattern,
    )


def create_resource(key: str = "mobile.android", organization_id=ORGANIZATION_ID):
    """Create a test resource."""
    return Resource(
        id=uuid7(),
        uuid=str(uuid7()),
        organization_id=organization_id,
        key=key,
        qualifier="TRK",
        name=key,
    )


@pytest.fixture
def settings():
    lookup = AsyncMock(spec=SettingsProtocol)
    lookup.get.return_value = "default_template"
    return lookup


@pytest.fixture
def uow():
    return FakeUnitOfWork()


@pytest.fixture
def handler(uow, settings, clock, indexer, mock_logger):
    applicator = PermissionTemplateApplicator(
        clock=clock, indexer=indexer, logger=mock_logger
    )
    return ApplyDefaultPermissionTemplateHandler(
        uow=uow, settings=settings, applicator=applicator, logger=mock_logger
    )


@pytest.mark.unit
class TestTemplateSelection:
    """Test which template is applied."""

    async def test_key_pattern_match_wins_over_default(self, handler, uow, settings):
        resource = create_resource("mobile.android")
        mobile = create_template("mobile_template", "Mobile", key_pattern="mobile\\..*")
        uow.resources.find_by_id.return_value = resource
        uow.resources.find_by_ids.return_value = [resource]
        uow.templates.find_by_organization.return_value = [
            create_template("web_template", "Web", key_pattern="web\\..*"),
            mobile,
        ]

        result = await handler.handle(
            ApplyDefaultPermissionTemplate(
                organization_id=ORGANIZATION_ID, resource_id=resource.id
            )
        )

        assert isinstance(result, Success)
        assert result.value.template_uuid == "mobile_template"
        settings.get.assert_not_called()
        uow.templates.find_by_uuid.assert_not_called()

    async def test_several_matches_are_a_conflict(self, handler, uow):
        resource = create_resource("mobile.android")
        uow.resources.find_by_id.return_value = resource
        uow.templates.find_by_organization.return_value = [
            create_template("mobile_template", "Mobile", key_pattern="mobile\\..*"),
            create_template("all_template", "All", key_pattern=".*"),
        ]

        result = await handler.handle(
            ApplyDefaultPermissionTemplate(
                organization_id=ORGANIZATION_ID, resource_id=resource.id
            )
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, ConflictError)
        assert result.error.code == ErrorCode.PERMISSION_TEMPLATE_CONFLICT
        assert result.error.details["templates"] == "Mobile,All"
        uow.templates.delete_group_and_user_permissions.assert_not_called()
        uow.commit.assert_not_called()

    async def test_falls_back_to_default_template(self, handler, uow, settings):
        resource = create_resource("backend")
        default = create_template("default_template", "Default")
        uow.resources.find_by_id.return_value = resource
        uow.resources.find_by_ids.return_value = [resource]
        uow.templates.find_by_organization.return_value = [
            create_template("mobile_template", "Mobile", key_pattern="mobile\\..*"),
            default,
        ]
        uow.templates.find_by_uuid.return_value = default

        result = await handler.handle(
            ApplyDefaultPermissionTemplate(
                organization_id=ORGANIZATION_ID, resource_id=resource.id
            )
        )

        assert isinstance(result, Success)
        assert result.value.template_uuid == "default_template"
        settings.get.assert_awaited_once_with(
            DEFAULT_TEMPLATE_SETTING_KEY, organization_id=ORGANIZATION_ID
        )
        uow.templates.find_by_uuid.assert_awaited_once_with(
            "default_template", organization_id=ORGANIZATION_ID
        )
        uow.templates.insert_group_permission.assert_awaited_once_with(
            resource.id, "user", ANYONE
        )

    async def test_project_creator_is_forwarded(self, handler, uow):
        resource = create_resource("backend")
        creator_id = uuid7()
        template = PermissionTemplate(
            id=uuid7(),
            uuid="default_template",
            organization_id=ORGANIZATION_ID,
            name="Default",
            entries=PermissionEntries(creator_roles=("admin",)),
        )
        uow.resources.find_by_id.return_value = resource
        uow.resources.find_by_ids.return_value = [resource]
        uow.templates.find_by_organization.return_value = [template]
        uow.templates.find_by_uuid.return_value = template

        result = await handler.handle(
            ApplyDefaultPermissionTemplate(
                organization_id=ORGANIZATION_ID,
                resource_id=resource.id,
                project_creator_id=creator_id,
            )
        )

        assert isinstance(result, Success)
        uow.templates.insert_user_permission.assert_awaited_once_with(
            resource.id, "admin", creator_id
        )


@pytest.mark.unit
class TestApplyDefaultPermissionTemplateFailure:
    """Test failure paths."""

    async def test_no_default_configured_returns_not_found(
        self, handler, uow, settings
    ):
        resource = create_resource("backend")
        uow.resources.find_by_id.return_value = resource
        uow.templates.find_by_organization.return_value = []
        settings.get.return_value = None

        result = await handler.handle(
            ApplyDefaultPermissionTemplate(
                organization_id=ORGANIZATION_ID, resource_id=resource.id
            )
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, NotFoundError)
        assert result.error.code == ErrorCode.PERMISSION_TEMPLATE_NOT_FOUND
        uow.templates.find_by_uuid.assert_not_called()
        uow.commit.assert_not_called()

    async def test_dangling_default_returns_not_found(self, handler, uow):
        resource = create_resource("backend")
        uow.resources.find_by_id.return_value = resource
        uow.templates.find_by_organization.return_value = []
        uow.templates.find_by_uuid.return_value = None

        result = await handler.handle(
            ApplyDefaultPermissionTemplate(
                organization_id=ORGANIZATION_ID, resource_id=resource.id
            )
        )

        assert isinstance(result, Failure)
        assert result.error.resource_id == "default_template"
        uow.commit.assert_not_called()

    async def test_unknown_resource_returns_validation_error(self, handler, uow):
        uow.resources.find_by_id.return_value = None

        result = await handler.handle(
            ApplyDefaultPermissionTemplate(
                organization_id=ORGANIZATION_ID, resource_id=uuid7()
            )
        )

        assert isinstance(result, Failure)
        assert isinstance(result.error, ValidationError)
        assert result.error.field == "resource_id"
        uow.templates.find_by_organization.assert_not_called()

    async def test_resource_of_other_organization_is_rejected(self, handler, uow):
        resource = create_resource("backend", organization_id=uuid7())
        uow.resources.find_by_id.return_value = resource

        result = await handler.handle(
            ApplyDefaultPermissionTemplate(
                organization_id=ORGANIZATION_ID, resource_id=resource.id
            )
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.INVALID_RESOURCE
        uow.commit.assert_not_called()
