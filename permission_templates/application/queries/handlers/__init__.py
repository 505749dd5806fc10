"""Query handlers."""

from permission_templates.application.queries.handlers.would_user_have_permission_handler import (
    WouldUserHavePermissionHandler,
)

__all__ = ["WouldUserHavePermissionHandler"]
