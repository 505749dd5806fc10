"""Success / Failure return values for command and query handlers.

Operations that can fail for business reasons (unknown template, invalid
target resource) return a Result instead of raising. Infrastructure failures
(database unreachable, constraint violations) still raise.

Usage:
    result = await handler.handle(command)
    match result:
        case Success(value=applied):
            print(applied.resource_ids)
        case Failure(error=error):
            print(error.code)
"""

from dataclasses import dataclass
from typing import Generic, TypeAlias, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Operation completed; ``value`` holds its output."""

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Operation refused; ``error`` is usually a DomainError."""

    error: E


Result: TypeAlias = Success[T] | Failure[E]
