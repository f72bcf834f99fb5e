"""Dependency factories (composition root).

Application-scoped singletons built from Settings:
- Logging (structlog console adapter)
- Token storage (memory or file, by refresh token type)
- HTTP transport (httpx)
- API client
- Authentication service

Usage:
    from zkdrop.core.container import get_authentication_service

    auth = get_authentication_service()
    result = await auth.login(Username("alice"), Password("secret1"))

Call ``cache_clear()`` on a factory to rebuild it (tests, config reload).
"""

from functools import lru_cache
from pathlib import Path
from typing import TYPE_CHECKING

from zkdrop.core.config import get_settings
from zkdrop.domain.enums import TokenType

if TYPE_CHECKING:
    from zkdrop.application.services.authentication_service import (
        AuthenticationService,
    )
    from zkdrop.domain.protocols import (
        HttpServiceProtocol,
        LoggerProtocol,
        TokenRepository,
    )
    from zkdrop.infrastructure.api.api_service import ZkDropApiService

DEFAULT_TOKEN_FILE = Path.home() / ".zkdrop" / "tokens.json"


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Get logger singleton (app-scoped).

    JSON output in testing and production, or whenever ``log_json`` is set.
    """
    from zkdrop.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    use_json = settings.log_json or settings.is_production or settings.is_testing
    return ConsoleAdapter(use_json=use_json, level=settings.log_level)


@lru_cache()
def get_token_repository() -> "TokenRepository":
    """Get token store singleton (app-scoped).

    Returns:
        InMemoryTokenRepository for ``session`` refresh tokens.
        FileTokenRepository for ``device`` refresh tokens, at
        ``token_file_path`` or ``~/.zkdrop/tokens.json``.
    """
    settings = get_settings()

    if settings.refresh_token_type == TokenType.DEVICE:
        from zkdrop.infrastructure.persistence.file_token_repository import (
            FileTokenRepository,
        )

        return FileTokenRepository(settings.token_file_path or DEFAULT_TOKEN_FILE)

    from zkdrop.infrastructure.persistence.memory_token_repository import (
        InMemoryTokenRepository,
    )

    return InMemoryTokenRepository()


@lru_cache()
def get_http_service() -> "HttpServiceProtocol":
    """Get HTTP transport singleton (app-scoped)."""
    from zkdrop.infrastructure.http.http_service import HttpxHttpService

    return HttpxHttpService(timeout=get_settings().http_timeout_seconds)


@lru_cache()
def get_api_service() -> "ZkDropApiService":
    """Get API client singleton (app-scoped)."""
    from zkdrop.infrastructure.api.api_service import ZkDropApiService

    return ZkDropApiService(
        http_service=get_http_service(),
        token_repository=get_token_repository(),
        api_base_url=get_settings().api_base_url,
        logger=get_logger(),
    )


@lru_cache()
def get_authentication_service() -> "AuthenticationService":
    """Get authentication service singleton (app-scoped)."""
    from zkdrop.application.services.authentication_service import (
        AuthenticationService,
    )

    return AuthenticationService(
        api=get_api_service(),
        token_repository=get_token_repository(),
        logger=get_logger(),
        token_type=get_settings().refresh_token_type,
    )
