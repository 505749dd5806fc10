"""Hand-written test doubles for the clock, indexer and unit of work ports."""

from collections.abc import Sequence
from datetime import UTC, datetime
from unittest.mock import AsyncMock
from uuid import UUID

from permission_templates.domain.protocols import (
    GroupRepository,
    PermissionTemplateRepository,
    ResourceRepository,
)

NOW = datetime(2026, 1, 15, 10, 30, tzinfo=UTC)


class FixedClock:
    """ClockProtocol double returning a fixed instant."""

    def __init__(self, now: datetime = NOW) -> None:
        self._now = now

    def now(self) -> datetime:
        return self._now


class RecordingIndexer:
    """PermissionIndexerProtocol double recording every notification."""

    def __init__(self, fail_with: Exception | None = None) -> None:
        self.calls: list[tuple[UUID, ...]] = []
        self._fail_with = fail_with

    async def on_permission_change(self, resource_ids: Sequence[UUID]) -> None:
        self.calls.append(tuple(resource_ids))
        if self._fail_with is not None:
            raise self._fail_with


class FakeUnitOfWork:
    """UnitOfWorkProtocol double with AsyncMock repositories.

    Counts context entries and exits; commit and rollback are AsyncMocks.
    """

    def __init__(self) -> None:
        self.templates = AsyncMock(spec=PermissionTemplateRepository)
        self.resources = AsyncMock(spec=ResourceRepository)
        self.groups = AsyncMock(spec=GroupRepository)
        self.commit = AsyncMock()
        self.rollback = AsyncMock()
        self.entered = 0
        self.exited = 0

    async def __aenter__(self) -> "FakeUnitOfWork":
        self.entered += 1
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        self.exited += 1
