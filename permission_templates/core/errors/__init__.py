"""Core errors package.

Usage:
    from permission_templates.core.errors import DomainError, NotFoundError
"""

from permission_templates.core.errors.common_errors import (
    ConflictError,
    NotFoundError,
    ValidationError,
)
from permission_templates.core.errors.domain_error import DomainError

__all__ = [
    "DomainError",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
]
