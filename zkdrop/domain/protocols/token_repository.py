"""TokenRepository protocol (port) for client-side token storage.

The token store is the single source of truth for the current access and
refresh tokens. Nothing else in the client keeps a token beyond one request
attempt; callers always re-read through the store.

Concurrency:
    The store is shared mutable state for one logical user session.
    Implementations must provide read-after-write consistency for a single
    caller. Racing refreshes from concurrent requests are the store's
    concern, not the authentication middleware's.

Implementations:
    - InMemoryTokenRepository: zkdrop/infrastructure/persistence/
    - FileTokenRepository: zkdrop/infrastructure/persistence/
"""

from typing import Protocol


class TokenRepository(Protocol):
    """Protocol for access/refresh token persistence.

    Token Lifecycle:
        1. Stored after a successful login
        2. Replaced after a successful refresh (access first, then refresh)
        3. Cleared on logout
    """

    async def get_authentication_token(self) -> str | None:
        """Return the current access token, or None when logged out."""
        ...

    async def get_refresh_token(self) -> str | None:
        """Return the current refresh token, or None when logged out."""
        ...

    async def store_authentication_token(self, token: str) -> None:
        """Replace the current access token."""
        ...

    async def store_refresh_token(self, token: str) -> None:
        """Replace the current refresh token."""
        ...

    async def clear(self) -> None:
        """Forget both tokens."""
        ...
