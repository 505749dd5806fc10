"""Business failures carried inside ``Failure`` values.

These are plain dataclasses, not exceptions; handlers return them and callers
match on the subclass or on ``code``.
"""

from dataclasses import dataclass

from permission_templates.core.enums import ErrorCode


@dataclass(frozen=True, slots=True, kw_only=True)
class DomainError:
    """A refused operation.

    Attributes:
        code: Stable machine-readable code.
        message: Explanation for humans.
        details: Identifiers involved (template uuid, resource ids).
    """

    code: ErrorCode
    message: str
    details: dict[str, str] | None = None

    def __str__(self) -> str:
        return f"{self.code.value}: {self.message}"
