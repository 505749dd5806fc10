"""Common error classes shared by every handler.

Error Types:
- ValidationError: invalid input (unknown or foreign target resource)
- NotFoundError: a referenced template does not exist
- ConflictError: the request is ambiguous (several templates match)

Usage:
    from permission_templates.core.enums import ErrorCode
    from permission_templates.core.errors import NotFoundError
    from permission_templates.core.result import Failure

    return Failure(
        error=NotFoundError(
            code=ErrorCode.PERMISSION_TEMPLATE_NOT_FOUND,
            message="Permission template not found",
            resource_type="PermissionTemplate",
            resource_id=template_uuid,
        )
    )
"""

from dataclasses import dataclass

from permission_templates.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        field: Field name that failed validation.
        details: Additional context.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Referenced entity not found.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        resource_type: Type of entity (PermissionTemplate, Resource).
        resource_id: Identifier that did not resolve.
        details: Additional context.
    """

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictError(DomainError):
    """Conflicting state that prevents a deterministic answer.

    Attributes:
        code: ErrorCode enum.
        message: Human-readable message.
        resource_type: Type of entity in conflict.
        conflicting_field: Field that has the conflict.
        details: Additional context.
    """

    resource_type: str
    conflicting_field: str | None = None
