"""Centralized constants for internal implementation details.

Environment-specific values live in ``permission_templates.core.config``.
"""

DEFAULT_TEMPLATE_SETTING_KEY: str = "permission.template.default"
"""Settings key holding the uuid of the default permission template."""

PROJECT_QUALIFIER: str = "TRK"
"""Qualifier of top-level projects."""
