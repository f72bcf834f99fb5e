"""UserRepository protocol for user record lookup.

Port used by account maintenance jobs and availability checks. The record
store itself lives outside this package.
"""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID


@dataclass(frozen=True, kw_only=True)
class UserRecord:
    """Minimal view of a stored user.

    Attributes:
        id: User's unique identifier.
        username: Username as registered (original casing).
        email: Email address, if any.
    """

    id: UUID
    username: str
    email: str | None = None


class UserRepository(Protocol):
    """User repository protocol (port).

    This is a Protocol (not ABC) for structural typing.
    Implementations don't need to inherit from this.
    """

    async def find_by_username(self, username: str) -> UserRecord | None:
        """Find user by username.

        Username comparison must be case-insensitive.

        Args:
            username: Username (any casing).

        Returns:
            UserRecord if found, None otherwise.
        """
        ...

    async def find_by_email(self, email: str) -> UserRecord | None:
        """Find user by email address (case-insensitive)."""
        ...

    async def delete(self, user_id: UUID) -> None:
        """Delete user by ID."""
        ...
