"""Would-user-have-permission query handler (default template predictor).

Predicts whether a user would hold a permission on a resource created now,
i.e. after the organization's default template is applied to it, without
creating the resource or writing anything.

Flow:
1. Read the default template uuid from settings (unset => False, no store access)
2. Load the template snapshot in the organization (unknown => False)
3. Empty template => False
4. Load the user's groups in the organization (anonymous => no groups)
5. Apply the resolution rule to the snapshot

Misconfiguration fails closed: a missing or dangling default template means
no permission, never an error. Store failures still raise.
"""

from uuid import UUID

from permission_templates.application.queries.permission_template_queries import (
    WouldUserHavePermission,
)
from permission_templates.core.constants import DEFAULT_TEMPLATE_SETTING_KEY
from permission_templates.domain.protocols import (
    LoggerProtocol,
    SettingsProtocol,
    UnitOfWorkProtocol,
)


class WouldUserHavePermissionHandler:
    """Handler for WouldUserHavePermission queries.

    Read-only: the unit of work is never committed.
    """

    def __init__(
        self,
        uow: UnitOfWorkProtocol,
        settings: SettingsProtocol,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            uow: Read-only access to templates and groups.
            settings: Source of the default template uuid.
            logger: Structured logger.
        """
        self._uow = uow
        self._settings = settings
        self._logger = logger

    async def handle(self, query: WouldUserHavePermission) -> bool:
        """Handle would-user-have-permission query.

        Args:
            query: WouldUserHavePermission query.

        Returns:
            bool: True if the default template would grant the permission.
        """
        log = self._logger.bind(
            organization_id=str(query.organization_id),
            permission=query.permission,
            project_key=query.project_key,
            qualifier=query.qualifier,
        )

        template_uuid = await self._settings.get(
            DEFAULT_TEMPLATE_SETTING_KEY, organization_id=query.organization_id
        )
        if not template_uuid:
            log.debug("default_permission_template_not_configured")
            return False

        async with self._uow as uow:
            template = await uow.templates.find_by_uuid(
                template_uuid, organization_id=query.organization_id
            )
            if template is None:
                log.warning(
                    "default_permission_template_missing",
                    template_uuid=template_uuid,
                )
                return False
            if template.is_empty:
                return False

            group_ids: list[UUID] = []
            if query.user_id is not None:
                group_ids = await uow.groups.select_group_ids_of_user(
                    query.organization_id, query.user_id
                )

        allowed = template.grants(
            query.permission,
            user_id=query.user_id,
            user_group_ids=group_ids,
            as_project_creator=query.as_project_creator,
        )
        log.debug(
            "default_permission_template_evaluated",
            template_uuid=template.uuid,
            anonymous=query.user_id is None,
            allowed=allowed,
        )
        return allowed
