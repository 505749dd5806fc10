"""Machine-readable codes carried by DomainError.

Handlers return them inside ``Failure``; callers branch on the code, never on
the message text.
"""

from enum import Enum


class ErrorCode(Enum):
    """Why a permission template operation was refused."""

    # Target resources unknown or outside the template's organization
    INVALID_RESOURCE = "invalid_resource"

    # Explicit or default template does not exist
    PERMISSION_TEMPLATE_NOT_FOUND = "permission_template_not_found"

    # Several key patterns match one resource
    PERMISSION_TEMPLATE_CONFLICT = "permission_template_conflict"
