"""Apply default permission template handler.

Picks the template a new resource should get and materializes it.

Template selection:
1. Templates of the organization whose key pattern fully matches the
   resource key. Exactly one match wins; several matches are a conflict.
2. Otherwise the organization's default template (settings).
3. Otherwise the call fails with NotFoundError.
"""

from permission_templates.application.commands.permission_template_commands import (
    ApplyDefaultPermissionTemplate,
)
from permission_templates.application.dtos import AppliedTemplate
from permission_templates.application.services import PermissionTemplateApplicator
from permission_templates.core.constants import DEFAULT_TEMPLATE_SETTING_KEY
from permission_templates.core.enums import ErrorCode
from permission_templates.core.errors import (
    ConflictError,
    DomainError,
    NotFoundError,
    ValidationError,
)
from permission_templates.core.result import Failure, Result, Success
from permission_templates.domain.entities import PermissionTemplate, Resource
from permission_templates.domain.protocols import (
    LoggerProtocol,
    SettingsProtocol,
    UnitOfWorkProtocol,
)


class ApplyDefaultPermissionTemplateHandler:
    """Handler for ApplyDefaultPermissionTemplate commands."""

    def __init__(
        self,
        uow: UnitOfWorkProtocol,
        settings: SettingsProtocol,
        applicator: PermissionTemplateApplicator,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            uow: Transaction boundary.
            settings: Source of the default template uuid.
            applicator: Writes the template grants.
            logger: Structured logger.
        """
        self._uow = uow
        self._settings = settings
        self._applicator = applicator
        self._logger = logger

    async def handle(
        self, cmd: ApplyDefaultPermissionTemplate
    ) -> Result[AppliedTemplate, DomainError]:
        """Handle apply default permission template command.

        Args:
            cmd: ApplyDefaultPermissionTemplate command.

        Returns:
            Success(AppliedTemplate) when the resource was rewritten.
            Failure(ValidationError) if the resource does not exist in the
            organization.
            Failure(ConflictError) if several key patterns match.
            Failure(NotFoundError) if no template applies.
        """
        async with self._uow as uow:
            resource = await uow.resources.find_by_id(cmd.resource_id)
            if resource is None or resource.organization_id != cmd.organization_id:
                return Failure(
                    error=ValidationError(
                        code=ErrorCode.INVALID_RESOURCE,
                        message="Resource not found in organization",
                        field="resource_id",
                        details={"resource_id": str(cmd.resource_id)},
                    )
                )

            selection = await self._select_template(uow, cmd, resource)
            if isinstance(selection, Failure):
                return selection

            return await self._applicator.apply(
                uow,
                selection.value,
                (resource.id,),
                project_creator_id=cmd.project_creator_id,
            )

    async def _select_template(
        self,
        uow: UnitOfWorkProtocol,
        cmd: ApplyDefaultPermissionTemplate,
        resource: Resource,
    ) -> Result[PermissionTemplate, DomainError]:
        templates = await uow.templates.find_by_organization(cmd.organization_id)
        matching = [t for t in templates if t.matches_key(resource.key)]
        if len(matching) > 1:
            return Failure(
                error=ConflictError(
                    code=ErrorCode.PERMISSION_TEMPLATE_CONFLICT,
                    message="Several permission templates match the resource key",
                    resource_type="PermissionTemplate",
                    conflicting_field="key_pattern",
                    details={
                        "resource_key": resource.key,
                        "templates": ",".join(t.name for t in matching),
                    },
                )
            )
        if matching:
            self._logger.debug(
                "permission_template_matched_key",
                template_uuid=matching[0].uuid,
                resource_key=resource.key,
            )
            return Success(value=matching[0])

        default_uuid = await self._settings.get(
            DEFAULT_TEMPLATE_SETTING_KEY, organization_id=cmd.organization_id
        )
        template = None
        if default_uuid:
            template = await uow.templates.find_by_uuid(
                default_uuid, organization_id=cmd.organization_id
            )
        if template is None:
            return Failure(
                error=NotFoundError(
                    code=ErrorCode.PERMISSION_TEMPLATE_NOT_FOUND,
                    message="No permission template applies to the resource",
                    resource_type="PermissionTemplate",
                    resource_id=default_uuid or "",
                )
            )
        return Success(value=template)
