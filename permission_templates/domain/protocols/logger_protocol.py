"""Logging port.

Handlers and services log events, not sentences: a snake_case event name
plus keyword context. Levels used in this package:

    debug    why a template or default was (not) picked
    info     a template was applied
    warning  the indexer failed, or a default setting points nowhere
    error    an apply operation failed

Example:
    logger.info("permission_template_applied", template_uuid=template.uuid)
    logger.bind(organization_id=str(organization_id)).debug(
        "default_permission_template_missing"
    )
"""

from __future__ import annotations

from typing import Any, Protocol


class LoggerProtocol(Protocol):
    """Structured logger. Implemented by ConsoleAdapter."""

    def debug(self, message: str, /, **context: Any) -> None: ...

    def info(self, message: str, /, **context: Any) -> None: ...

    def warning(self, message: str, /, **context: Any) -> None: ...

    def error(
        self, message: str, /, *, error: Exception | None = None, **context: Any
    ) -> None:
        """Log a failure.

        Args:
            message: Event name.
            error: Exception that caused the failure; adapters flatten it
                into ``error_type`` and ``error_message`` fields.
            **context: Extra fields.
        """
        ...

    def bind(self, **context: Any) -> LoggerProtocol:
        """Return a new logger carrying ``context`` on every event.

        The receiver is left unchanged.
        """
        ...
