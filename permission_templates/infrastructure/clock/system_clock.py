"""System clock adapter."""

from datetime import UTC, datetime


class SystemClock:
    """ClockProtocol implementation reading the system time."""

    def now(self) -> datetime:
        """Return the current UTC time (timezone-aware)."""
        return datetime.now(UTC)
