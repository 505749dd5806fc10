"""Unit of work protocol (port).

The unit of work is the explicit transaction boundary handed to handlers.
Everything done through its repositories between ``__aenter__`` and
``commit()`` becomes visible atomically; leaving the context without a
commit (or with an exception) rolls everything back.

Usage:
    async with uow:
        await uow.templates.delete_group_and_user_permissions(resource.id)
        await uow.resources.update_authorization_updated_at(resource.id, now)
        await uow.commit()
"""

from types import TracebackType
from typing import Protocol, Self

from permission_templates.domain.protocols.group_repository import GroupRepository
from permission_templates.domain.protocols.permission_template_repository import (
    PermissionTemplateRepository,
)
from permission_templates.domain.protocols.resource_repository import (
    ResourceRepository,
)


class UnitOfWorkProtocol(Protocol):
    """Transactional boundary over the permission and resource stores.

    Attributes:
        templates: Permission store (templates and grant rows).
        resources: Resource store.
        groups: Group membership lookups.
    """

    templates: PermissionTemplateRepository
    resources: ResourceRepository
    groups: GroupRepository

    async def __aenter__(self) -> Self:
        """Open the transaction and bind repositories to it."""
        ...

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        """Roll back anything not committed and release the connection."""
        ...

    async def commit(self) -> None:
        """Make every write of this unit of work visible at once."""
        ...

    async def rollback(self) -> None:
        """Discard every uncommitted write of this unit of work."""
        ...
