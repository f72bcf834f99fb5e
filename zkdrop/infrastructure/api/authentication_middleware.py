"""Authenticated request middleware.

Wraps an authenticated API call and recovers from an expired access token
exactly once.

Flow:
    1. Read the access token from the token store.
    2. Run the operation with it.
    3. Anything other than 401 is returned unchanged.
    4. On 401, run the refresh call.
       - Refresh failed: return the ORIGINAL 401 result. The store is not
         touched.
       - Refresh succeeded: store the new access token, then the new
         refresh token, re-read the access token and run the operation
         once more. Whatever that second attempt returns is final.

The middleware keeps no token between calls and does not lock across
concurrent calls. Racing refreshes are resolved by the TokenRepository
implementation.
"""

from collections.abc import Awaitable, Callable
from http import HTTPStatus

from zkdrop.core.result import Failure, Result, Success
from zkdrop.domain.enums import RefreshError
from zkdrop.domain.protocols import LoggerProtocol, TokenRepository
from zkdrop.schemas.auth_schemas import RefreshResponse

type AuthenticatedOperation[R] = Callable[[str | None], Awaitable[tuple[HTTPStatus, R]]]
type RefreshCall = Callable[[], Awaitable[Result[RefreshResponse, RefreshError]]]


class AuthenticationMiddleware:
    """Single-retry access token recovery.

    Dependencies (injected via constructor):
        - TokenRepository: Source of truth for current tokens
        - RefreshCall: Performs the refresh endpoint call
        - LoggerProtocol: Structured logging (never logs token values)

    Example:
        >>> middleware = AuthenticationMiddleware(
        ...     token_repository=tokens,
        ...     refresh=api.refresh,
        ...     logger=logger,
        ... )
        >>> status, result = await middleware.execute(
        ...     lambda token: http.get(url, UserSettingsResponse, token)
        ... )
    """

    def __init__(
        self,
        *,
        token_repository: TokenRepository,
        refresh: RefreshCall,
        logger: LoggerProtocol,
    ) -> None:
        self._token_repository = token_repository
        self._refresh = refresh
        self._logger = logger

    async def execute[R](
        self, operation: AuthenticatedOperation[R]
    ) -> tuple[HTTPStatus, R]:
        """Run an authenticated operation with one refresh-and-retry cycle.

        Args:
            operation: Async callable taking the access token and returning
                (status, result).

        Returns:
            The first attempt's (status, result) unless it was a 401 and
            the refresh succeeded, in which case the retry's.
        """
        initial_attempt = await self._attempt(operation)
        if initial_attempt[0] != HTTPStatus.UNAUTHORIZED:
            return initial_attempt

        self._logger.info("authentication_token_rejected")

        match await self._refresh():
            case Success(value=tokens):
                await self._token_repository.store_authentication_token(
                    tokens.authentication_token
                )
                await self._token_repository.store_refresh_token(tokens.refresh_token)
                self._logger.info("token_refresh_succeeded")
                return await self._attempt(operation)
            case Failure(error=error):
                self._logger.warning("token_refresh_failed", error=error.name)
                return initial_attempt

    async def _attempt[R](
        self, operation: AuthenticatedOperation[R]
    ) -> tuple[HTTPStatus, R]:
        token = await self._token_repository.get_authentication_token()
        return await operation(token)
