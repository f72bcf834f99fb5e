"""Typed client for the transfer API.

Every public method returns ``Result[Response, EndpointError]``. Endpoints
that require authentication go through AuthenticationMiddleware; endpoints
with a ``with_authentication`` flag let the caller choose; public endpoints
call the transport directly.

Architecture:
    - Infrastructure layer (adapter for the remote API)
    - Transport and token store injected (HttpServiceProtocol, TokenRepository)
    - Error envelopes projected per endpoint (extract_error_code)
"""

from uuid import UUID

from httpx import QueryParams
from pydantic import BaseModel

from zkdrop.core.constants import (
    AUTHENTICATION_ROUTE,
    METRICS_ROUTE,
    TRANSFER_ROUTE,
    USER_ROUTE,
)
from zkdrop.core.result import Result
from zkdrop.domain.enums import (
    ApiErrorCode,
    DownloadTransferCiphertextError,
    DownloadTransferPreviewError,
    DownloadTransferSignatureError,
    DummyError,
    GetUserPublicProfileError,
    LoginError,
    LogoutError,
    RefreshError,
    UpdateContactInfoError,
    UpdateKeysError,
    UpdateNotificationSettingsError,
    UpdatePrivacySettingsError,
    UpdateProfileError,
    UploadTransferError,
    UserRegisterError,
    VerifyEmailAddressError,
)
from zkdrop.domain.protocols import (
    HttpServiceProtocol,
    LoggerProtocol,
    TokenRepository,
)
from zkdrop.domain.value_objects import Username
from zkdrop.infrastructure.api.authentication_middleware import (
    AuthenticationMiddleware,
)
from zkdrop.infrastructure.api.error_projection import extract_error_code
from zkdrop.schemas.auth_schemas import (
    LoginRequest,
    LoginResponse,
    LogoutRequest,
    LogoutResponse,
    RefreshResponse,
)
from zkdrop.schemas.metrics_schemas import DiskMetricsResponse
from zkdrop.schemas.transfer_schemas import (
    DownloadTransferCiphertextRequest,
    DownloadTransferCiphertextResponse,
    DownloadTransferFilePreviewResponse,
    DownloadTransferMessagePreviewResponse,
    DownloadTransferPreviewRequest,
    DownloadTransferSignatureRequest,
    DownloadTransferSignatureResponse,
    UploadFileTransferRequest,
    UploadMessageTransferRequest,
    UploadTransferResponse,
)
from zkdrop.schemas.user_schemas import (
    GetUserPublicProfileResponse,
    UpdateContactInfoRequest,
    UpdateContactInfoResponse,
    UpdateKeysRequest,
    UpdateKeysResponse,
    UpdateNotificationSettingsRequest,
    UpdateNotificationSettingsResponse,
    UpdatePrivacySettingsRequest,
    UpdatePrivacySettingsResponse,
    UpdateProfileRequest,
    UpdateProfileResponse,
    UserReceivedFilesResponse,
    UserReceivedMessagesResponse,
    UserRegisterRequest,
    UserRegisterResponse,
    UserSearchParameters,
    UserSearchResponse,
    UserSentFilesResponse,
    UserSentMessagesResponse,
    UserSettingsResponse,
    VerifyEmailAddressRequest,
    VerifyEmailAddressResponse,
)


class ZkDropApiService:
    """Client for every transfer API endpoint.

    Attributes:
        _http: Transport.
        _tokens: Token store (source of truth for bearer tokens).
        _middleware: Refresh-and-retry wrapper for authenticated calls.

    Example:
        >>> api = ZkDropApiService(
        ...     http_service=HttpxHttpService(),
        ...     token_repository=InMemoryTokenRepository(),
        ...     api_base_url="https://transfer.example.com/api",
        ...     logger=logger,
        ... )
        >>> match await api.get_user_settings():
        ...     case Success(value=settings):
        ...         print(settings.username)
    """

    def __init__(
        self,
        *,
        http_service: HttpServiceProtocol,
        token_repository: TokenRepository,
        api_base_url: str,
        logger: LoggerProtocol,
    ) -> None:
        self._http = http_service
        self._tokens = token_repository
        self._logger = logger
        self._middleware = AuthenticationMiddleware(
            token_repository=token_repository,
            refresh=self.refresh,
            logger=logger,
        )

        base_url = api_base_url.rstrip("/")
        self._base_authentication_url = f"{base_url}/{AUTHENTICATION_ROUTE}"
        self._base_metrics_url = f"{base_url}/{METRICS_ROUTE}"
        self._base_user_url = f"{base_url}/{USER_ROUTE}"
        self._base_transfer_url = f"{base_url}/{TRANSFER_ROUTE}"

    # =========================================================================
    # Request helpers
    # =========================================================================

    async def _get[T: BaseModel, E: ApiErrorCode](
        self,
        url: str,
        response_model: type[T],
        error_enum: type[E],
        *,
        with_authentication: bool,
    ) -> Result[T, E]:
        if with_authentication:
            status, response = await self._middleware.execute(
                lambda token: self._http.get(url, response_model, token)
            )
        else:
            status, response = await self._http.get(url, response_model)

        self._logger.debug("api_call_completed", method="GET", url=url, status=int(status))
        return extract_error_code(response, error_enum)

    async def _post[T: BaseModel, E: ApiErrorCode](
        self,
        url: str,
        payload: BaseModel,
        response_model: type[T],
        error_enum: type[E],
        *,
        with_authentication: bool,
    ) -> Result[T, E]:
        if with_authentication:
            status, response = await self._middleware.execute(
                lambda token: self._http.post(url, payload, response_model, token)
            )
        else:
            status, response = await self._http.post(url, payload, response_model)

        self._logger.debug("api_call_completed", method="POST", url=url, status=int(status))
        return extract_error_code(response, error_enum)

    # =========================================================================
    # Authentication
    # =========================================================================

    async def login(self, request: LoginRequest) -> Result[LoginResponse, LoginError]:
        """Exchange a username and authentication password for tokens."""
        url = f"{self._base_authentication_url}/login"
        return await self._post(
            url, request, LoginResponse, LoginError, with_authentication=False
        )

    async def refresh(self) -> Result[RefreshResponse, RefreshError]:
        """Exchange the stored refresh token for a new token pair.

        The refresh token is sent as the bearer credential. Does not write
        to the token store; callers decide what to persist.
        """
        refresh_token = await self._tokens.get_refresh_token()
        url = f"{self._base_authentication_url}/refresh"
        _, response = await self._http.get(url, RefreshResponse, refresh_token)
        return extract_error_code(response, RefreshError)

    async def logout(self, request: LogoutRequest) -> Result[LogoutResponse, LogoutError]:
        """Revoke the stored refresh token on the server."""
        refresh_token = await self._tokens.get_refresh_token()
        url = f"{self._base_authentication_url}/logout"
        _, response = await self._http.post(url, request, LogoutResponse, refresh_token)
        return extract_error_code(response, LogoutError)

    # =========================================================================
    # Metrics
    # =========================================================================

    async def get_disk_metrics(self) -> Result[DiskMetricsResponse, DummyError]:
        url = f"{self._base_metrics_url}/disk"
        return await self._get(
            url, DiskMetricsResponse, DummyError, with_authentication=False
        )

    # =========================================================================
    # User
    # =========================================================================

    async def register_user(
        self, request: UserRegisterRequest
    ) -> Result[UserRegisterResponse, UserRegisterError]:
        url = f"{self._base_user_url}/register"
        return await self._post(
            url,
            request,
            UserRegisterResponse,
            UserRegisterError,
            with_authentication=False,
        )

    async def get_user_public_profile(
        self, username: Username, with_authentication: bool
    ) -> Result[GetUserPublicProfileResponse, GetUserPublicProfileError]:
        """Look up another user's profile.

        Authenticated lookups can see profiles restricted to contacts or
        signed-in users.
        Username validation keeps the path segment free of "/" and "?".
        """
        url = f"{self._base_user_url}/profile/{username.value}"
        return await self._get(
            url,
            GetUserPublicProfileResponse,
            GetUserPublicProfileError,
            with_authentication=with_authentication,
        )

    async def get_user_settings(self) -> Result[UserSettingsResponse, DummyError]:
        url = f"{self._base_user_url}/settings"
        return await self._get(
            url, UserSettingsResponse, DummyError, with_authentication=True
        )

    async def update_user_profile_info(
        self, request: UpdateProfileRequest
    ) -> Result[UpdateProfileResponse, UpdateProfileError]:
        url = f"{self._base_user_url}/settings/profile"
        return await self._post(
            url,
            request,
            UpdateProfileResponse,
            UpdateProfileError,
            with_authentication=True,
        )

    async def update_user_contact_info(
        self, request: UpdateContactInfoRequest
    ) -> Result[UpdateContactInfoResponse, UpdateContactInfoError]:
        url = f"{self._base_user_url}/settings/contact"
        return await self._post(
            url,
            request,
            UpdateContactInfoResponse,
            UpdateContactInfoError,
            with_authentication=True,
        )

    async def update_user_privacy(
        self, request: UpdatePrivacySettingsRequest
    ) -> Result[UpdatePrivacySettingsResponse, UpdatePrivacySettingsError]:
        url = f"{self._base_user_url}/settings/privacy"
        return await self._post(
            url,
            request,
            UpdatePrivacySettingsResponse,
            UpdatePrivacySettingsError,
            with_authentication=True,
        )

    async def update_user_notification(
        self, request: UpdateNotificationSettingsRequest
    ) -> Result[UpdateNotificationSettingsResponse, UpdateNotificationSettingsError]:
        url = f"{self._base_user_url}/settings/notification"
        return await self._post(
            url,
            request,
            UpdateNotificationSettingsResponse,
            UpdateNotificationSettingsError,
            with_authentication=True,
        )

    async def insert_user_x25519_keys(
        self, request: UpdateKeysRequest
    ) -> Result[UpdateKeysResponse, UpdateKeysError]:
        url = f"{self._base_user_url}/settings/keys/x25519"
        return await self._post(
            url, request, UpdateKeysResponse, UpdateKeysError, with_authentication=True
        )

    async def insert_user_ed25519_keys(
        self, request: UpdateKeysRequest
    ) -> Result[UpdateKeysResponse, UpdateKeysError]:
        url = f"{self._base_user_url}/settings/keys/ed25519"
        return await self._post(
            url, request, UpdateKeysResponse, UpdateKeysError, with_authentication=True
        )

    async def get_user_sent_messages(
        self,
    ) -> Result[UserSentMessagesResponse, DummyError]:
        url = f"{self._base_user_url}/sent/messages"
        return await self._get(
            url, UserSentMessagesResponse, DummyError, with_authentication=True
        )

    async def get_user_sent_files(self) -> Result[UserSentFilesResponse, DummyError]:
        url = f"{self._base_user_url}/sent/files"
        return await self._get(
            url, UserSentFilesResponse, DummyError, with_authentication=True
        )

    async def get_user_received_messages(
        self,
    ) -> Result[UserReceivedMessagesResponse, DummyError]:
        url = f"{self._base_user_url}/received/messages"
        return await self._get(
            url, UserReceivedMessagesResponse, DummyError, with_authentication=True
        )

    async def get_user_received_files(
        self,
    ) -> Result[UserReceivedFilesResponse, DummyError]:
        url = f"{self._base_user_url}/received/files"
        return await self._get(
            url, UserReceivedFilesResponse, DummyError, with_authentication=True
        )

    async def get_user_search_results(
        self, search: UserSearchParameters
    ) -> Result[UserSearchResponse, DummyError]:
        query = QueryParams(
            {"value": search.keyword, "index": search.index, "count": search.count}
        )
        url = f"{self._base_user_url}/search?{query}"
        return await self._get(
            url, UserSearchResponse, DummyError, with_authentication=True
        )

    async def verify_user_email_address(
        self, request: VerifyEmailAddressRequest
    ) -> Result[VerifyEmailAddressResponse, VerifyEmailAddressError]:
        url = f"{self._base_user_url}/verify"
        return await self._post(
            url,
            request,
            VerifyEmailAddressResponse,
            VerifyEmailAddressError,
            with_authentication=False,
        )

    # =========================================================================
    # Transfer
    # =========================================================================

    def _upload_url(self, kind: str, recipient: UUID | None) -> str:
        if recipient is None:
            return f"{self._base_transfer_url}/{kind}"
        return f"{self._base_transfer_url}/{kind}/{recipient}"

    async def upload_message_transfer(
        self,
        request: UploadMessageTransferRequest,
        recipient: UUID | None,
        with_authentication: bool,
    ) -> Result[UploadTransferResponse, UploadTransferError]:
        """Upload an encrypted message.

        Args:
            request: Encrypted payload.
            recipient: Recipient user id, or None for an anonymous recipient.
            with_authentication: Send as the signed-in user.
        """
        return await self._post(
            self._upload_url("message", recipient),
            request,
            UploadTransferResponse,
            UploadTransferError,
            with_authentication=with_authentication,
        )

    async def upload_file_transfer(
        self,
        request: UploadFileTransferRequest,
        recipient: UUID | None,
        with_authentication: bool,
    ) -> Result[UploadTransferResponse, UploadTransferError]:
        return await self._post(
            self._upload_url("file", recipient),
            request,
            UploadTransferResponse,
            UploadTransferError,
            with_authentication=with_authentication,
        )

    async def download_message_preview(
        self, request: DownloadTransferPreviewRequest, with_authentication: bool
    ) -> Result[DownloadTransferMessagePreviewResponse, DownloadTransferPreviewError]:
        url = f"{self._base_transfer_url}/message/preview"
        return await self._post(
            url,
            request,
            DownloadTransferMessagePreviewResponse,
            DownloadTransferPreviewError,
            with_authentication=with_authentication,
        )

    async def download_message_signature(
        self, request: DownloadTransferSignatureRequest, with_authentication: bool
    ) -> Result[DownloadTransferSignatureResponse, DownloadTransferSignatureError]:
        url = f"{self._base_transfer_url}/message/signature"
        return await self._post(
            url,
            request,
            DownloadTransferSignatureResponse,
            DownloadTransferSignatureError,
            with_authentication=with_authentication,
        )

    async def download_message_ciphertext(
        self, request: DownloadTransferCiphertextRequest, with_authentication: bool
    ) -> Result[DownloadTransferCiphertextResponse, DownloadTransferCiphertextError]:
        url = f"{self._base_transfer_url}/message/ciphertext"
        return await self._post(
            url,
            request,
            DownloadTransferCiphertextResponse,
            DownloadTransferCiphertextError,
            with_authentication=with_authentication,
        )

    async def download_file_preview(
        self, request: DownloadTransferPreviewRequest, with_authentication: bool
    ) -> Result[DownloadTransferFilePreviewResponse, DownloadTransferPreviewError]:
        url = f"{self._base_transfer_url}/file/preview"
        return await self._post(
            url,
            request,
            DownloadTransferFilePreviewResponse,
            DownloadTransferPreviewError,
            with_authentication=with_authentication,
        )

    async def download_file_signature(
        self, request: DownloadTransferSignatureRequest, with_authentication: bool
    ) -> Result[DownloadTransferSignatureResponse, DownloadTransferSignatureError]:
        url = f"{self._base_transfer_url}/file/signature"
        return await self._post(
            url,
            request,
            DownloadTransferSignatureResponse,
            DownloadTransferSignatureError,
            with_authentication=with_authentication,
        )

    async def download_file_ciphertext(
        self, request: DownloadTransferCiphertextRequest, with_authentication: bool
    ) -> Result[DownloadTransferCiphertextResponse, DownloadTransferCiphertextError]:
        url = f"{self._base_transfer_url}/file/ciphertext"
        return await self._post(
            url,
            request,
            DownloadTransferCiphertextResponse,
            DownloadTransferCiphertextError,
            with_authentication=with_authentication,
        )
