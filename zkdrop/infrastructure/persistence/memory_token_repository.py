"""In-memory token storage.

Holds the tokens of one browser-style session. Lost when the process exits.
"""

import asyncio


class InMemoryTokenRepository:
    """Per-instance token store.

    Each instance is an independent session; create one per logical user
    session instead of sharing a module-level singleton.

    Usage:
        ```python
        tokens = InMemoryTokenRepository()
        await tokens.store_authentication_token("A1")
        ```
    """

    def __init__(
        self,
        *,
        authentication_token: str | None = None,
        refresh_token: str | None = None,
    ) -> None:
        self._authentication_token = authentication_token
        self._refresh_token = refresh_token
        self._lock = asyncio.Lock()

    async def get_authentication_token(self) -> str | None:
        return self._authentication_token

    async def get_refresh_token(self) -> str | None:
        return self._refresh_token

    async def store_authentication_token(self, token: str) -> None:
        async with self._lock:
            self._authentication_token = token

    async def store_refresh_token(self, token: str) -> None:
        async with self._lock:
            self._refresh_token = token

    async def clear(self) -> None:
        async with self._lock:
            self._authentication_token = None
            self._refresh_token = None
