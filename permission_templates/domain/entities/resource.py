"""Resource domain entity.

A resource is what permissions are granted on (typically a project).
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass
class Resource:
    """Resource (project) domain entity.

    Attributes:
        id: Internal identifier, used by permission rows.
        uuid: Public identifier.
        organization_id: Owning organization.
        key: Unique key (matched against template key patterns).
        qualifier: Kind of resource ("TRK" for projects).
        name: Display name.
        authorization_updated_at: When permissions were last rewritten.
            Downstream caches and indexes compare against it.
    """

    id: UUID
    uuid: str
    organization_id: UUID
    key: str
    qualifier: str
    name: str
    authorization_updated_at: datetime | None = None
