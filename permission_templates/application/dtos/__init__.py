"""Data Transfer Objects returned by command and query handlers."""

from permission_templates.application.dtos.permission_template_dtos import (
    AppliedTemplate,
)

__all__ = ["AppliedTemplate"]
