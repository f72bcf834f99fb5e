"""Result types for railway-oriented programming.

Every API client operation returns a Result instead of raising. Callers
pattern-match on the two variants:

Usage:
    result = await api.login(request)
    match result:
        case Success(value=response):
            await tokens.store_authentication_token(response.authentication_token)
        case Failure(error=LoginError.INVALID_PASSWORD):
            ...
        case Failure(error=error):
            logger.warning("login_failed", error=error.name)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type


@dataclass(frozen=True, slots=True, kw_only=True)
class Success(Generic[T]):
    """Represents a successful operation result.

    Attributes:
        value: The successful result value.
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
