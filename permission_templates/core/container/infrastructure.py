"""Infrastructure dependency factories.

Application-scoped singletons:
- Logging (console, human-readable or JSON)
- Database (async SQLAlchemy engine)
- Clock (system time)
- Permission indexer (logging)
- Settings lookup (organization settings + deployment fallback)
"""

from functools import lru_cache
from typing import TYPE_CHECKING

from permission_templates.core.config import get_settings
from permission_templates.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from permission_templates.domain.protocols import (
        ClockProtocol,
        LoggerProtocol,
        PermissionIndexerProtocol,
        SettingsProtocol,
    )


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    Adapter selection is centralized here (composition root):
    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)

    Returns:
        LoggerProtocol: Logger instance implementing the protocol.
    """
    from permission_templates.infrastructure.logging.console_adapter import (
        ConsoleAdapter,
    )

    settings = get_settings()
    return ConsoleAdapter(
        use_json=not settings.is_development,
        level=settings.log_level,
    )


@lru_cache()
def get_database() -> Database:
    """Get database manager singleton (app-scoped).

    Returns:
        Database manager instance with connection pool.
    """
    settings = get_settings()
    return Database(
        database_url=settings.database_url,
        echo=settings.db_echo,
    )


@lru_cache()
def get_clock() -> "ClockProtocol":
    """Get the system clock singleton.

    Returns:
        Clock implementing ClockProtocol.
    """
    from permission_templates.infrastructure.clock import SystemClock

    return SystemClock()


@lru_cache()
def get_permission_indexer() -> "PermissionIndexerProtocol":
    """Get the permission indexer singleton.

    Returns:
        Indexer implementing PermissionIndexerProtocol.
    """
    from permission_templates.infrastructure.indexing import LoggingPermissionIndexer

    return LoggingPermissionIndexer(logger=get_logger())


@lru_cache()
def get_settings_lookup() -> "SettingsProtocol":
    """Get the settings lookup singleton.

    Organization settings stored in the database win over the deployment-wide
    values from the environment.

    Returns:
        Settings lookup implementing SettingsProtocol.
    """
    from permission_templates.infrastructure.settings import (
        DatabaseSettingsAdapter,
        EnvSettingsAdapter,
    )

    return DatabaseSettingsAdapter(
        database=get_database(),
        fallback=EnvSettingsAdapter.from_settings(get_settings()),
    )
