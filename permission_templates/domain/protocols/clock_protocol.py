"""Clock protocol (port).

Handlers take the current time from an injected clock instead of calling
``datetime.now`` so tests can pin it.
"""

from datetime import datetime
from typing import Protocol


class ClockProtocol(Protocol):
    """Source of the current time."""

    def now(self) -> datetime:
        """Return the current timezone-aware UTC time."""
        ...
