"""Result types for railway-oriented programming.

Operations that can fail return a Result instead of raising. Callers are
forced to branch on the outcome, which keeps "not found" and "failed" as
separate, explicit cases.

Usage:
    result = await client.get_session(42)
    match result:
        case Success(value=None):
            print("Session does not exist")
        case Success(value=session):
            print(session.title)
        case Failure(error=error):
            print(f"Error: {error}")
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value. ``None`` means "absent" for
            single-resource lookups.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Represents a failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


# Type alias for Result union
type Result[T, E] = Success[T] | Failure[E]
