"""Permission template handler results."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class AppliedTemplate:
    """Outcome of a successful template application.

    Attributes:
        template_uuid: Template that was materialized.
        resource_ids: Resources whose permissions were rewritten.
        authorization_updated_at: Timestamp written on every resource.
    """

    template_uuid: str
    resource_ids: tuple[UUID, ...]
    authorization_updated_at: datetime
