"""Authentication request/response schemas.

Endpoints:
    POST   {api}/authentication/login    - Exchange credentials for tokens
    GET    {api}/authentication/refresh  - Exchange refresh token for new tokens
    POST   {api}/authentication/logout   - Revoke the refresh token

Only an AuthenticationPassword can populate the password field through the
``from_credentials`` constructor. There is no constructor that accepts a
raw Password.
"""

from pydantic import Field

from zkdrop.domain.enums import TokenType
from zkdrop.domain.value_objects import AuthenticationPassword, Username
from zkdrop.schemas.common import ApiModel, EmptyResponse


class LoginRequest(ApiModel):
    """Request schema for login."""

    username: str = Field(..., min_length=1, description="Username")
    password: str = Field(
        ...,
        min_length=1,
        description="Derived authentication password (never the real password)",
    )
    refresh_token_type: TokenType = Field(
        ...,
        description="Lifetime class of the refresh token to issue",
    )

    @classmethod
    def from_credentials(
        cls,
        username: Username,
        password: AuthenticationPassword,
        refresh_token_type: TokenType,
    ) -> "LoginRequest":
        """Build a login request from validated credentials."""
        return cls(
            username=username.value,
            password=password.value,
            refresh_token_type=refresh_token_type,
        )


class LoginResponse(ApiModel):
    """Response schema for a successful login."""

    username: str
    authentication_token: str
    refresh_token: str


class RefreshResponse(ApiModel):
    """Response schema for a successful token refresh."""

    authentication_token: str
    refresh_token: str


class LogoutRequest(ApiModel):
    """Request schema for logout.

    The refresh token itself travels as the bearer credential.
    """

    refresh_token_type: TokenType


class LogoutResponse(EmptyResponse):
    """Acknowledgement for logout."""

    pass
