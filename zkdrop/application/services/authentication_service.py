"""Account session service.

Flow (login):
1. Derive the authentication secret and the symmetric key seed
2. Send LoginRequest carrying only the derived secret
3. Store the access token, then the refresh token
4. Return Success(UserSession) holding the seed for client-side encryption

The real password never reaches the API client. Only the derived
AuthenticationPassword is placed in a request schema.
"""

from dataclasses import dataclass, field

from zkdrop.core.result import Failure, Result, Success
from zkdrop.domain.enums import LoginError, LogoutError, TokenType, UserRegisterError
from zkdrop.domain.protocols import (
    AuthenticationApiProtocol,
    LoggerProtocol,
    TokenRepository,
)
from zkdrop.domain.value_objects import EmailAddress, Password, Username
from zkdrop.infrastructure.security.credential_derivation import (
    derive_authentication_password,
    derive_symmetric_key,
    to_authentication_password,
)
from zkdrop.schemas.auth_schemas import LoginRequest, LogoutRequest
from zkdrop.schemas.user_schemas import UserRegisterRequest


@dataclass(frozen=True, kw_only=True)
class UserSession:
    """Result of a successful login.

    Attributes:
        username: Username as returned by the server.
        symmetric_key: 32-byte client-only key seed.
    """

    username: str
    symmetric_key: bytes = field(repr=False)


class AuthenticationService:
    """Login, registration and logout on top of the API client.

    Dependencies (injected via constructor):
        - AuthenticationApiProtocol: Account endpoints
        - TokenRepository: Where issued tokens are kept
        - LoggerProtocol: Structured logging

    Args:
        token_type: Refresh token lifetime requested on login and named on
            logout when the caller does not pass one. Must match the token
            store (memory for session, file for device).
    """

    def __init__(
        self,
        *,
        api: AuthenticationApiProtocol,
        token_repository: TokenRepository,
        logger: LoggerProtocol,
        token_type: TokenType = TokenType.SESSION,
    ) -> None:
        self._api = api
        self._token_repository = token_repository
        self._logger = logger
        self._token_type = token_type

    async def login(
        self,
        username: Username,
        password: Password,
        token_type: TokenType | None = None,
    ) -> Result[UserSession, LoginError]:
        """Log in and keep the issued tokens.

        Args:
            username: Validated username.
            password: The user's real password. Only its derivation is sent.
            token_type: Lifetime class of the refresh token. Defaults to the
                service's configured type.

        Returns:
            Success(UserSession) on login.
            Failure(LoginError) as reported by the server.
        """
        token_type = token_type or self._token_type
        secret = derive_authentication_password(username, password)
        request = LoginRequest.from_credentials(
            username, to_authentication_password(secret), token_type
        )

        match await self._api.login(request):
            case Success(value=response):
                await self._token_repository.store_authentication_token(
                    response.authentication_token
                )
                await self._token_repository.store_refresh_token(response.refresh_token)
                self._logger.info(
                    "user_logged_in",
                    username=response.username,
                    token_type=token_type.value,
                )
                return Success(
                    value=UserSession(
                        username=response.username,
                        symmetric_key=derive_symmetric_key(username, password),
                    )
                )
            case Failure(error=error):
                self._logger.warning(
                    "user_login_failed", username=username.value, error=error.name
                )
                return Failure(error=error)

    async def register(
        self,
        username: Username,
        password: Password,
        email_address: EmailAddress | None = None,
    ) -> Result[None, UserRegisterError]:
        """Create an account. Does not log in."""
        secret = derive_authentication_password(username, password)
        request = UserRegisterRequest.from_credentials(
            username, to_authentication_password(secret), email_address
        )

        match await self._api.register_user(request):
            case Success():
                self._logger.info("user_registered", username=username.value)
                return Success(value=None)
            case Failure(error=error):
                self._logger.warning(
                    "user_registration_failed",
                    username=username.value,
                    error=error.name,
                )
                return Failure(error=error)

    async def logout(
        self, token_type: TokenType | None = None
    ) -> Result[None, LogoutError]:
        """Revoke the refresh token and forget local tokens.

        The token store is only cleared once the server accepted the logout.
        """
        token_type = token_type or self._token_type
        match await self._api.logout(LogoutRequest(refresh_token_type=token_type)):
            case Success():
                await self._token_repository.clear()
                self._logger.info("user_logged_out")
                return Success(value=None)
            case Failure(error=error):
                self._logger.warning("user_logout_failed", error=error.name)
                return Failure(error=error)
