"""Permission indexer protocol (port).

Notified after permissions of resources were rewritten so search indexes and
caches can refresh. Notification is best-effort: the permission write is
already committed when it happens, and a failing indexer never undoes it.

Implementations:
    - LoggingPermissionIndexer: records notifications in the structured log
"""

from collections.abc import Sequence
from typing import Protocol
from uuid import UUID


class PermissionIndexerProtocol(Protocol):
    """Receiver of permission change notifications."""

    async def on_permission_change(self, resource_ids: Sequence[UUID]) -> None:
        """Handle a permission change on a set of resources.

        Args:
            resource_ids: Every resource touched by one apply call.
        """
        ...
