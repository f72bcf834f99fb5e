"""AuthenticationApiProtocol for the account endpoints.

The subset of the API client the authentication service needs. The
concrete client is zkdrop.infrastructure.api.api_service.ZkDropApiService.
"""

from typing import Protocol

from zkdrop.core.result import Result
from zkdrop.domain.enums import LoginError, LogoutError, UserRegisterError
from zkdrop.schemas.auth_schemas import (
    LoginRequest,
    LoginResponse,
    LogoutRequest,
    LogoutResponse,
)
from zkdrop.schemas.user_schemas import UserRegisterRequest, UserRegisterResponse


class AuthenticationApiProtocol(Protocol):
    """Account endpoints (port)."""

    async def login(self, request: LoginRequest) -> Result[LoginResponse, LoginError]:
        ...

    async def register_user(
        self, request: UserRegisterRequest
    ) -> Result[UserRegisterResponse, UserRegisterError]:
        ...

    async def logout(
        self, request: LogoutRequest
    ) -> Result[LogoutResponse, LogoutError]:
        ...
