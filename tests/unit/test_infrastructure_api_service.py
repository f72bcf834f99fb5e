"""Tests for zkdrop/infrastructure/api/api_service.py.

Verifies URL construction, which token each endpoint sends, middleware use
for authenticated endpoints, and error projection. The transport is an
AsyncMock; see tests/integration for the httpx-backed flow.
"""

from http import HTTPStatus
from unittest.mock import AsyncMock, MagicMock
from uuid import UUID

import pytest

from zkdrop.core.result import Failure, Success
from zkdrop.domain.enums import (
    DummyError,
    GetUserPublicProfileError,
    LoginError,
    LogoutError,
    RefreshError,
    TokenType,
    UploadTransferError,
)
from zkdrop.domain.value_objects import Username
from zkdrop.infrastructure.api.api_service import ZkDropApiService
from zkdrop.infrastructure.persistence.memory_token_repository import (
    InMemoryTokenRepository,
)
from zkdrop.schemas.auth_schemas import (
    LoginRequest,
    LoginResponse,
    LogoutRequest,
    LogoutResponse,
    RefreshResponse,
)
from zkdrop.schemas.common import ErrorResponse
from zkdrop.schemas.metrics_schemas import DiskMetricsResponse
from zkdrop.schemas.transfer_schemas import (
    DownloadTransferCiphertextRequest,
    DownloadTransferCiphertextResponse,
    DownloadTransferPreviewRequest,
    UploadMessageTransferRequest,
)
from zkdrop.schemas.user_schemas import (
    GetUserPublicProfileResponse,
    UpdateProfileRequest,
    UserSearchParameters,
    UserSearchResponse,
    UserSettingsResponse,
)

API = "https://transfer.test/api"
TRANSFER_ID = UUID("6f1c1b8e-4a43-4b57-9a4e-0c2f5a1d9e11")
RECIPIENT = UUID("0b9f0e36-1d0c-4c3e-8a9b-4a8f0f5b2d77")


def _failure(status: HTTPStatus, code: int = 0):
    return status, Failure(error=ErrorResponse(error_code=code))


def _upload_request() -> UploadMessageTransferRequest:
    return UploadMessageTransferRequest(
        ciphertext=["Y2lwaGVy"],
        signature="c2ln",
        client_encryption_iv="aXY=",
        server_encryption_key="a2V5",
        x25519_public_key="x25519-pem",
        ed25519_public_key="ed25519-pem",
    )


@pytest.fixture
def http() -> MagicMock:
    service = MagicMock()
    service.get = AsyncMock()
    service.post = AsyncMock()
    return service


@pytest.fixture
def tokens() -> InMemoryTokenRepository:
    return InMemoryTokenRepository(authentication_token="A1", refresh_token="R1")


@pytest.fixture
def api(http, tokens) -> ZkDropApiService:
    return ZkDropApiService(
        http_service=http,
        token_repository=tokens,
        api_base_url=f"{API}/",
        logger=MagicMock(),
    )


@pytest.mark.unit
class TestAuthenticationEndpoints:
    @pytest.mark.asyncio
    async def test_login_posts_without_token(self, api, http) -> None:
        response = LoginResponse(
            username="alice", authentication_token="A1", refresh_token="R1"
        )
        http.post.return_value = (HTTPStatus.OK, Success(value=response))
        request = LoginRequest(
            username="alice", password="ZGVyaXZlZA==", refresh_token_type=TokenType.SESSION
        )

        result = await api.login(request)

        assert result == Success(value=response)
        http.post.assert_awaited_once_with(
            f"{API}/authentication/login", request, LoginResponse
        )

    @pytest.mark.asyncio
    async def test_login_401_is_not_refreshed(self, api, http) -> None:
        http.post.return_value = _failure(HTTPStatus.UNAUTHORIZED, 2)
        request = LoginRequest(
            username="alice", password="ZGVyaXZlZA==", refresh_token_type=TokenType.SESSION
        )

        result = await api.login(request)

        assert result == Failure(error=LoginError.INVALID_PASSWORD)
        http.get.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_refresh_sends_refresh_token(self, api, http, tokens) -> None:
        response = RefreshResponse(authentication_token="A2", refresh_token="R2")
        http.get.return_value = (HTTPStatus.OK, Success(value=response))

        result = await api.refresh()

        assert result == Success(value=response)
        http.get.assert_awaited_once_with(
            f"{API}/authentication/refresh", RefreshResponse, "R1"
        )
        assert await tokens.get_authentication_token() == "A1"

    @pytest.mark.asyncio
    async def test_refresh_failure_is_projected(self, api, http) -> None:
        http.get.return_value = _failure(HTTPStatus.UNAUTHORIZED, 1)

        assert await api.refresh() == Failure(error=RefreshError.INVALID_TOKEN)

    @pytest.mark.asyncio
    async def test_logout_sends_refresh_token(self, api, http) -> None:
        http.post.return_value = (HTTPStatus.OK, Success(value=LogoutResponse()))
        request = LogoutRequest(refresh_token_type=TokenType.DEVICE)

        await api.logout(request)

        http.post.assert_awaited_once_with(
            f"{API}/authentication/logout", request, LogoutResponse, "R1"
        )

    @pytest.mark.asyncio
    async def test_logout_failure_is_projected(self, api, http) -> None:
        http.post.return_value = _failure(HTTPStatus.BAD_REQUEST, 1)

        result = await api.logout(LogoutRequest(refresh_token_type=TokenType.SESSION))

        assert result == Failure(error=LogoutError.INVALID_TOKEN)


@pytest.mark.unit
class TestAuthenticatedEndpoints:
    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("method", "path"),
        [
            ("get_user_settings", "/user/settings"),
            ("get_user_sent_messages", "/user/sent/messages"),
            ("get_user_sent_files", "/user/sent/files"),
            ("get_user_received_messages", "/user/received/messages"),
            ("get_user_received_files", "/user/received/files"),
        ],
    )
    async def test_get_sends_access_token(self, api, http, method, path) -> None:
        http.get.return_value = _failure(HTTPStatus.FORBIDDEN)

        result = await getattr(api, method)()

        assert result == Failure(error=DummyError.UNKNOWN_ERROR)
        http.get.assert_awaited_once()
        url, _, token = http.get.await_args.args
        assert url == f"{API}{path}"
        assert token == "A1"

    @pytest.mark.asyncio
    async def test_expired_token_is_refreshed_and_retried(
        self, api, http, tokens
    ) -> None:
        settings = UserSettingsResponse(username="alice")
        refreshed = RefreshResponse(authentication_token="A2", refresh_token="R2")
        http.get.side_effect = [
            _failure(HTTPStatus.UNAUTHORIZED),
            (HTTPStatus.OK, Success(value=refreshed)),
            (HTTPStatus.OK, Success(value=settings)),
        ]

        result = await api.get_user_settings()

        assert result == Success(value=settings)
        assert [c.args[2] for c in http.get.await_args_list] == ["A1", "R1", "A2"]
        assert await tokens.get_authentication_token() == "A2"
        assert await tokens.get_refresh_token() == "R2"

    @pytest.mark.asyncio
    async def test_post_sends_access_token(self, api, http) -> None:
        http.post.return_value = _failure(HTTPStatus.BAD_REQUEST)
        request = UpdateProfileRequest(alias="Al")

        await api.update_user_profile_info(request)

        url, payload, _, token = http.post.await_args.args
        assert url == f"{API}/user/settings/profile"
        assert payload is request
        assert token == "A1"

    @pytest.mark.asyncio
    async def test_search_encodes_query(self, api, http) -> None:
        http.get.return_value = (HTTPStatus.OK, Success(value=UserSearchResponse()))

        await api.get_user_search_results(
            UserSearchParameters(keyword="al ice", index=20, count=10)
        )

        url = http.get.await_args.args[0]
        assert url == f"{API}/user/search?value=al+ice&index=20&count=10"


@pytest.mark.unit
class TestOptionalAuthentication:
    @pytest.mark.asyncio
    async def test_public_profile_without_authentication(self, api, http) -> None:
        http.get.return_value = _failure(HTTPStatus.NOT_FOUND, 1)

        result = await api.get_user_public_profile(
            Username("bob"), with_authentication=False
        )

        assert result == Failure(error=GetUserPublicProfileError.NOT_FOUND)
        http.get.assert_awaited_once_with(
            f"{API}/user/profile/bob", GetUserPublicProfileResponse
        )

    @pytest.mark.asyncio
    async def test_public_profile_with_authentication(self, api, http) -> None:
        http.get.return_value = (
            HTTPStatus.OK,
            Success(value=GetUserPublicProfileResponse(username="bob")),
        )

        await api.get_user_public_profile(Username("bob"), with_authentication=True)

        http.get.assert_awaited_once_with(
            f"{API}/user/profile/bob", GetUserPublicProfileResponse, "A1"
        )

    @pytest.mark.asyncio
    async def test_anonymous_upload_omits_recipient(self, api, http) -> None:
        http.post.return_value = _failure(HTTPStatus.BAD_REQUEST, 2)

        result = await api.upload_message_transfer(
            _upload_request(), recipient=None, with_authentication=False
        )

        assert result == Failure(error=UploadTransferError.OUT_OF_SPACE)
        assert http.post.await_args.args[0] == f"{API}/transfer/message"
        assert len(http.post.await_args.args) == 3

    @pytest.mark.asyncio
    async def test_upload_to_recipient(self, api, http) -> None:
        http.post.return_value = _failure(HTTPStatus.BAD_REQUEST, 1)

        result = await api.upload_file_transfer(
            _upload_request(), recipient=RECIPIENT, with_authentication=True
        )

        assert result == Failure(error=UploadTransferError.BLOCKED_BY_USER_PRIVACY)
        assert http.post.await_args.args[0] == f"{API}/transfer/file/{RECIPIENT}"
        assert http.post.await_args.args[3] == "A1"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        ("method", "path"),
        [
            ("download_message_preview", "/transfer/message/preview"),
            ("download_message_signature", "/transfer/message/signature"),
            ("download_file_preview", "/transfer/file/preview"),
            ("download_file_signature", "/transfer/file/signature"),
        ],
    )
    async def test_download_urls(self, api, http, method, path) -> None:
        http.post.return_value = _failure(HTTPStatus.NOT_FOUND, 1)

        result = await getattr(api, method)(
            DownloadTransferPreviewRequest(id=TRANSFER_ID), with_authentication=False
        )

        assert isinstance(result, Failure)
        assert result.error.name == "NOT_FOUND"
        assert http.post.await_args.args[0] == f"{API}{path}"

    @pytest.mark.asyncio
    async def test_download_ciphertext(self, api, http) -> None:
        response = DownloadTransferCiphertextResponse(
            ciphertext=["Y2lwaGVy"], client_encryption_iv="aXY="
        )
        http.post.return_value = (HTTPStatus.OK, Success(value=response))
        request = DownloadTransferCiphertextRequest(
            id=TRANSFER_ID, server_decryption_key="a2V5"
        )

        result = await api.download_file_ciphertext(request, with_authentication=True)

        assert result == Success(value=response)
        assert http.post.await_args.args[0] == f"{API}/transfer/file/ciphertext"


@pytest.mark.unit
class TestPublicEndpoints:
    @pytest.mark.asyncio
    async def test_disk_metrics(self, api, http) -> None:
        metrics = DiskMetricsResponse(allocated=100, available=40)
        http.get.return_value = (HTTPStatus.OK, Success(value=metrics))

        assert await api.get_disk_metrics() == Success(value=metrics)
        http.get.assert_awaited_once_with(f"{API}/metrics/disk", DiskMetricsResponse)

    @pytest.mark.asyncio
    async def test_transport_failure_is_unknown_error(self, api, http) -> None:
        http.get.return_value = _failure(HTTPStatus.SERVICE_UNAVAILABLE)

        assert await api.get_disk_metrics() == Failure(error=DummyError.UNKNOWN_ERROR)
