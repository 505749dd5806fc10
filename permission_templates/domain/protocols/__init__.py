"""Domain protocols (ports) package.

Protocol definitions the domain and application layers depend on.
Infrastructure adapters implement them by structural typing (no inheritance).

Usage:
    from permission_templates.domain.protocols import UnitOfWorkProtocol
"""

# Service protocols
from permission_templates.domain.protocols.clock_protocol import ClockProtocol
from permission_templates.domain.protocols.logger_protocol import LoggerProtocol
from permission_templates.domain.protocols.permission_indexer_protocol import (
    PermissionIndexerProtocol,
)
from permission_templates.domain.protocols.settings_protocol import SettingsProtocol

# Repository protocols
from permission_templates.domain.protocols.group_repository import GroupRepository
from permission_templates.domain.protocols.permission_template_repository import (
    PermissionTemplateRepository,
)
from permission_templates.domain.protocols.resource_repository import (
    ResourceRepository,
)
from permission_templates.domain.protocols.unit_of_work_protocol import (
    UnitOfWorkProtocol,
)

__all__ = [
    # Services
    "ClockProtocol",
    "LoggerProtocol",
    "PermissionIndexerProtocol",
    "SettingsProtocol",
    # Repositories
    "GroupRepository",
    "PermissionTemplateRepository",
    "ResourceRepository",
    "UnitOfWorkProtocol",
]
