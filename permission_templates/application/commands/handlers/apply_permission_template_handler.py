"""Apply permission template handler.

Flow:
1. Open the unit of work
2. Load the template snapshot by uuid (missing => NotFoundError, no writes)
3. Materialize it on every target resource (see PermissionTemplateApplicator)

Architecture:
- Application layer ONLY imports from domain and core layers
- Repositories are reached through the injected unit of work
"""

from permission_templates.application.commands.permission_template_commands import (
    ApplyPermissionTemplate,
)
from permission_templates.application.dtos import AppliedTemplate
from permission_templates.application.services import PermissionTemplateApplicator
from permission_templates.core.enums import ErrorCode
from permission_templates.core.errors import DomainError, NotFoundError
from permission_templates.core.result import Failure, Result
from permission_templates.domain.protocols import LoggerProtocol, UnitOfWorkProtocol


class ApplyPermissionTemplateHandler:
    """Handler for ApplyPermissionTemplate commands."""

    def __init__(
        self,
        uow: UnitOfWorkProtocol,
        applicator: PermissionTemplateApplicator,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            uow: Transaction boundary for the whole batch.
            applicator: Writes the template grants.
            logger: Structured logger.
        """
        self._uow = uow
        self._applicator = applicator
        self._logger = logger

    async def handle(
        self, cmd: ApplyPermissionTemplate
    ) -> Result[AppliedTemplate, DomainError]:
        """Handle apply permission template command.

        Args:
            cmd: ApplyPermissionTemplate command.

        Returns:
            Success(AppliedTemplate) when every resource was rewritten.
            Failure(NotFoundError) if the template does not exist.
            Failure(ValidationError) if a resource is invalid.

        Raises:
            Exception: Store failures propagate after rollback.
        """
        async with self._uow as uow:
            template = await uow.templates.find_by_uuid(cmd.template_uuid)
            if template is None:
                self._logger.warning(
                    "permission_template_not_found",
                    template_uuid=cmd.template_uuid,
                )
                return Failure(
                    error=NotFoundError(
                        code=ErrorCode.PERMISSION_TEMPLATE_NOT_FOUND,
                        message="Permission template not found",
                        resource_type="PermissionTemplate",
                        resource_id=cmd.template_uuid,
                    )
                )

            return await self._applicator.apply(
                uow,
                template,
                cmd.resource_ids,
                project_creator_id=cmd.project_creator_id,
            )
