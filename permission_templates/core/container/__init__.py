"""Container module - Centralized dependency injection.

Re-exports every factory so callers import from one place:

    from permission_templates.core.container import get_logger, get_unit_of_work

Organization:
- infrastructure: logger, database, clock, indexer, settings lookup
- handlers: unit of work, applicator, command and query handlers
"""

from permission_templates.core.container.handlers import (
    get_apply_default_permission_template_handler,
    get_apply_permission_template_handler,
    get_permission_template_applicator,
    get_unit_of_work,
    get_would_user_have_permission_handler,
)
from permission_templates.core.container.infrastructure import (
    get_clock,
    get_database,
    get_logger,
    get_permission_indexer,
    get_settings_lookup,
)

__all__ = [
    # Infrastructure
    "get_clock",
    "get_database",
    "get_logger",
    "get_permission_indexer",
    "get_settings_lookup",
    # Handlers
    "get_apply_default_permission_template_handler",
    "get_apply_permission_template_handler",
    "get_permission_template_applicator",
    "get_unit_of_work",
    "get_would_user_have_permission_handler",
]
