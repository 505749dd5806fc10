"""Permission template applicator.

Materializes a template snapshot onto resources inside a unit of work the
caller has already opened. Used by both apply handlers (explicit template and
default template) so the two paths write exactly the same rows.

Flow:
1. Validate every target resource (exists, same organization as template)
2. For each resource: delete its group/user grants, insert the template's
   group and user grants, stamp authorization_updated_at
3. Commit the unit of work (all resources at once)
4. Notify the permission indexer (best-effort, after commit)

Nothing is written when validation fails. Store exceptions propagate and the
unit of work rolls back on exit.

Usage:
    applicator = PermissionTemplateApplicator(clock, indexer, logger)
    async with uow:
        result = await applicator.apply(uow, template, (project.id,))
"""

from collections.abc import Sequence
from uuid import UUID

from permission_templates.application.dtos import AppliedTemplate
from permission_templates.core.enums import ErrorCode
from permission_templates.core.errors import DomainError, ValidationError
from permission_templates.core.result import Failure, Result, Success
from permission_templates.domain.entities import PermissionTemplate
from permission_templates.domain.protocols import (
    ClockProtocol,
    LoggerProtocol,
    PermissionIndexerProtocol,
    UnitOfWorkProtocol,
)


class PermissionTemplateApplicator:
    """Writes template grants onto resources.

    Stateless between calls; every call reads the template snapshot it is
    given and nothing else.
    """

    def __init__(
        self,
        clock: ClockProtocol,
        indexer: PermissionIndexerProtocol,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize applicator with dependencies.

        Args:
            clock: Source of the authorization_updated_at timestamp.
            indexer: Notified once per successful apply.
            logger: Structured logger.
        """
        self._clock = clock
        self._indexer = indexer
        self._logger = logger

    async def apply(
        self,
        uow: UnitOfWorkProtocol,
        template: PermissionTemplate,
        resource_ids: Sequence[UUID],
        *,
        project_creator_id: UUID | None = None,
    ) -> Result[AppliedTemplate, DomainError]:
        """Replace the permissions of resources with the template's entries.

        Args:
            uow: Open unit of work. Committed here on success.
            template: Template snapshot to materialize.
            resource_ids: Target resources (duplicates are ignored).
            project_creator_id: User receiving the project-creator roles.

        Returns:
            Success(AppliedTemplate) once committed.
            Failure(ValidationError) if a resource is unknown or belongs to
            another organization. Nothing is written in that case.

        Side Effects:
            - Deletes and inserts group/user permission rows.
            - Updates authorization_updated_at of every resource.
            - Notifies the permission indexer.
        """
        target_ids = tuple(dict.fromkeys(resource_ids))
        validation = await self._validate_targets(uow, template, target_ids)
        if validation is not None:
            return Failure(error=validation)

        entries = template.entries
        if project_creator_id is not None:
            entries = entries.with_creator(project_creator_id)
        group_roles = tuple(dict.fromkeys(entries.group_roles))
        user_roles = tuple(dict.fromkeys(entries.user_roles))

        now = self._clock.now()
        for resource_id in target_ids:
            await uow.templates.delete_group_and_user_permissions(resource_id)
            for group_entry in group_roles:
                await uow.templates.insert_group_permission(
                    resource_id, group_entry.role, group_entry.principal
                )
            for user_entry in user_roles:
                await uow.templates.insert_user_permission(
                    resource_id, user_entry.role, user_entry.user_id
                )
            await uow.resources.update_authorization_updated_at(resource_id, now)

        await uow.commit()

        self._logger.info(
            "permission_template_applied",
            template_uuid=template.uuid,
            organization_id=str(template.organization_id),
            resource_count=len(target_ids),
            group_grants=len(group_roles),
            user_grants=len(user_roles),
        )

        await self._notify_indexer(target_ids)

        return Success(
            value=AppliedTemplate(
                template_uuid=template.uuid,
                resource_ids=target_ids,
                authorization_updated_at=now,
            )
        )

    async def _validate_targets(
        self,
        uow: UnitOfWorkProtocol,
        template: PermissionTemplate,
        target_ids: tuple[UUID, ...],
    ) -> ValidationError | None:
        if not target_ids:
            return ValidationError(
                code=ErrorCode.INVALID_RESOURCE,
                message="At least one resource is required",
                field="resource_ids",
            )

        resources = {r.id: r for r in await uow.resources.find_by_ids(target_ids)}
        missing = [rid for rid in target_ids if rid not in resources]
        if missing:
            return ValidationError(
                code=ErrorCode.INVALID_RESOURCE,
                message="Resource not found",
                field="resource_ids",
                details={"resource_ids": ",".join(str(rid) for rid in missing)},
            )

        foreign = [
            rid
            for rid in target_ids
            if resources[rid].organization_id != template.organization_id
        ]
        if foreign:
            return ValidationError(
                code=ErrorCode.INVALID_RESOURCE,
                message="Resource belongs to another organization than the template",
                field="resource_ids",
                details={"resource_ids": ",".join(str(rid) for rid in foreign)},
            )
        return None

    async def _notify_indexer(self, resource_ids: tuple[UUID, ...]) -> None:
        # Grants are committed at this point; indexing is eventually consistent.
        try:
            await self._indexer.on_permission_change(resource_ids)
        except Exception as e:
            self._logger.warning(
                "permission_index_notification_failed",
                resource_count=len(resource_ids),
                error_type=type(e).__name__,
                error_message=str(e),
            )
