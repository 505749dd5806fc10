"""Queries (CQRS read side)."""

from permission_templates.application.queries.permission_template_queries import (
    WouldUserHavePermission,
)

__all__ = ["WouldUserHavePermission"]
