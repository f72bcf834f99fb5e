"""File-backed token storage for device-persistent sessions.

Tokens are kept in a small JSON document so a refresh token of type
``TokenType.DEVICE`` survives process restarts.

Format:
    {"authenticationToken": "...", "refreshToken": "..."}

The file is rewritten atomically (write to a sibling temp file, then
replace) and created with owner-only permissions.
"""

import asyncio
import json
import os
from pathlib import Path

import structlog

_AUTHENTICATION_KEY = "authenticationToken"
_REFRESH_KEY = "refreshToken"


class FileTokenRepository:
    """JSON file token store.

    Reads always go to disk so two clients sharing a file see each other's
    writes. A missing or unreadable file reads as "no tokens".

    Args:
        path: Location of the token file. Parent directories are created.
    """

    def __init__(self, path: Path) -> None:
        self._path = path
        self._lock = asyncio.Lock()
        self._logger = structlog.get_logger("zkdrop.tokens")

    async def get_authentication_token(self) -> str | None:
        return (await asyncio.to_thread(self._read)).get(_AUTHENTICATION_KEY)

    async def get_refresh_token(self) -> str | None:
        return (await asyncio.to_thread(self._read)).get(_REFRESH_KEY)

    async def store_authentication_token(self, token: str) -> None:
        await self._update(_AUTHENTICATION_KEY, token)

    async def store_refresh_token(self, token: str) -> None:
        await self._update(_REFRESH_KEY, token)

    async def clear(self) -> None:
        async with self._lock:
            await asyncio.to_thread(self._path.unlink, missing_ok=True)

    async def _update(self, key: str, token: str) -> None:
        async with self._lock:
            data = await asyncio.to_thread(self._read)
            data[key] = token
            await asyncio.to_thread(self._write, data)

    def _read(self) -> dict[str, str]:
        try:
            raw = self._path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}

        try:
            data = json.loads(raw)
        except json.JSONDecodeError:
            self._logger.warning("token_file_corrupt", path=str(self._path))
            return {}

        if not isinstance(data, dict):
            self._logger.warning("token_file_corrupt", path=str(self._path))
            return {}
        return {k: v for k, v in data.items() if isinstance(v, str)}

    def _write(self, data: dict[str, str]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self._path.with_suffix(self._path.suffix + ".tmp")
        fd = os.open(tmp_path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                # O_CREAT keeps the mode of a leftover temp file
                os.fchmod(fh.fileno(), 0o600)
                json.dump(data, fh)
            os.replace(tmp_path, self._path)
        except Exception:
            tmp_path.unlink(missing_ok=True)
            raise
