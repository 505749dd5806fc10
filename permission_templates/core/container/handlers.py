"""Handler factories.

Each call builds a handler around a new unit of work (request-scoped); the
collaborators behind it are the application-scoped singletons.

Usage:
    handler = get_apply_permission_template_handler()
    result = await handler.handle(
        ApplyPermissionTemplate(template_uuid=uuid, resource_ids=(project_id,))
    )
"""

from permission_templates.application.commands.handlers import (
    ApplyDefaultPermissionTemplateHandler,
    ApplyPermissionTemplateHandler,
)
from permission_templates.application.queries.handlers import (
    WouldUserHavePermissionHandler,
)
from permission_templates.application.services import PermissionTemplateApplicator
from permission_templates.core.container.infrastructure import (
    get_clock,
    get_database,
    get_logger,
    get_permission_indexer,
    get_settings_lookup,
)
from permission_templates.infrastructure.persistence.unit_of_work import (
    SQLAlchemyUnitOfWork,
)


def get_unit_of_work() -> SQLAlchemyUnitOfWork:
    """Create a unit of work bound to the application database.

    Returns:
        New SQLAlchemyUnitOfWork.
    """
    return SQLAlchemyUnitOfWork(get_database().async_session)


def get_permission_template_applicator() -> PermissionTemplateApplicator:
    """Create the applicator shared by both apply handlers.

    Returns:
        PermissionTemplateApplicator wired to clock, indexer and logger.
    """
    return PermissionTemplateApplicator(
        clock=get_clock(),
        indexer=get_permission_indexer(),
        logger=get_logger(),
    )


def get_apply_permission_template_handler() -> ApplyPermissionTemplateHandler:
    """Create ApplyPermissionTemplateHandler.

    Returns:
        Handler for ApplyPermissionTemplate commands.
    """
    return ApplyPermissionTemplateHandler(
        uow=get_unit_of_work(),
        applicator=get_permission_template_applicator(),
        logger=get_logger(),
    )


def get_apply_default_permission_template_handler() -> (
    ApplyDefaultPermissionTemplateHandler
):
    """Create ApplyDefaultPermissionTemplateHandler.

    Returns:
        Handler for ApplyDefaultPermissionTemplate commands.
    """
    return ApplyDefaultPermissionTemplateHandler(
        uow=get_unit_of_work(),
        settings=get_settings_lookup(),
        applicator=get_permission_template_applicator(),
        logger=get_logger(),
    )


def get_would_user_have_permission_handler() -> WouldUserHavePermissionHandler:
    """Create WouldUserHavePermissionHandler.

    Returns:
        Handler for WouldUserHavePermission queries.
    """
    return WouldUserHavePermissionHandler(
        uow=get_unit_of_work(),
        settings=get_settings_lookup(),
        logger=get_logger(),
    )
