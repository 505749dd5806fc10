"""Core enums package.

Usage:
    from permission_templates.core.enums import ErrorCode, Environment
"""

from permission_templates.core.enums.environment import Environment
from permission_templates.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
