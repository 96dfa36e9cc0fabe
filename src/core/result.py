"""Result types for railway-oriented programming.

Operations that can fail for expected reasons (unknown agreement, store
outage, malformed payload) return a Result instead of raising, so callers
handle every outcome explicitly with structural pattern matching.

Usage:
    result = await handler.handle(command)
    match result:
        case Success(value=outcome):
            ...
        case Failure(error=error):
            ...
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Successful operation result.

    Attributes:
        value: The successful result value.
    """

    value: T


@dataclass(frozen=True, slots=True, kw_only=True)
class Failure(Generic[E]):
    """Failed operation result.

    Attributes:
        error: The error that occurred.
    """

    error: E


type Result[T, E] = Success[T] | Failure[E]
