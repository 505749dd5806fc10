"""Logging permission indexer.

Default PermissionIndexerProtocol adapter when no search index is wired:
records each permission change as a structured log event so downstream
consumers (log shippers, audit) can pick it up.
"""

from collections.abc import Sequence
from uuid import UUID

from permission_templates.domain.protocols import LoggerProtocol


class LoggingPermissionIndexer:
    """PermissionIndexerProtocol implementation writing to the log."""

    def __init__(self, logger: LoggerProtocol) -> None:
        """Initialize indexer.

        Args:
            logger: Structured logger.
        """
        self._logger = logger

    async def on_permission_change(self, resource_ids: Sequence[UUID]) -> None:
        """Log a permission change.

        Args:
            resource_ids: Resources whose permissions changed.
        """
        self._logger.info(
            "resource_permissions_changed",
            resource_ids=[str(rid) for rid in resource_ids],
            resource_count=len(resource_ids),
        )
