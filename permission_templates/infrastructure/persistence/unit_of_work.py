"""SQLAlchemy unit of work.

One unit of work = one AsyncSession = one transaction. Repositories are bound
to the session on ``__aenter__``; leaving the context rolls back whatever was
not committed and closes the session.

Usage:
    uow = SQLAlchemyUnitOfWork(database.async_session)
    async with uow:
        await uow.templates.delete_group_and_user_permissions(resource_id)
        await uow.commit()
"""

from types import TracebackType
from typing import Self

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from permission_templates.infrastructure.persistence.repositories import (
    GroupRepository,
    PermissionTemplateRepository,
    ResourceRepository,
)


class SQLAlchemyUnitOfWork:
    """UnitOfWorkProtocol implementation over an async session factory.

    A fresh session is opened on every ``async with``, so one instance can be
    reused for successive operations but not nested.
    """

    templates: PermissionTemplateRepository
    resources: ResourceRepository
    groups: GroupRepository

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        """Initialize unit of work.

        Args:
            session_factory: Factory producing AsyncSession instances.
        """
        self._session_factory = session_factory
        self._session: AsyncSession | None = None

    async def __aenter__(self) -> Self:
        if self._session is not None:
            raise RuntimeError("Unit of work is already in progress")
        self._session = self._session_factory()
        self.templates = PermissionTemplateRepository(self._session)
        self.resources = ResourceRepository(self._session)
        self.groups = GroupRepository(self._session)
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        session = self._session
        self._session = None
        if session is None:
            return
        try:
            await session.rollback()
        finally:
            await session.close()

    async def commit(self) -> None:
        """Commit every write made through the repositories."""
        await self._active_session().commit()

    async def rollback(self) -> None:
        """Discard every uncommitted write."""
        await self._active_session().rollback()

    def _active_session(self) -> AsyncSession:
        if self._session is None:
            raise RuntimeError("Unit of work is not in progress")
        return self._session
