"""HTTP transport for the transfer API.

Implements HttpServiceProtocol on top of httpx:
- Request execution with timeout/connection error handling
- Bearer authentication when a token is supplied
- Body decoding into the caller's response model (2xx) or the generic
  ErrorResponse envelope (everything else)

Architecture:
    - Infrastructure layer (adapter for the remote API)
    - Never raises for HTTP or network failures
    - Network failures are reported as 503 so they never look like an
      expired access token
"""

from http import HTTPStatus
from typing import Any

import httpx
import structlog
from pydantic import BaseModel, ValidationError

from zkdrop.core.constants import (
    BEARER_PREFIX,
    HTTP_TIMEOUT_DEFAULT,
    RESPONSE_BODY_MAX_LENGTH,
)
from zkdrop.core.result import Failure, Result, Success
from zkdrop.domain.protocols import TransportResponse
from zkdrop.schemas.common import ErrorResponse

_UNKNOWN_ERROR = ErrorResponse(error_code=0)


class HttpxHttpService:
    """httpx-backed API transport.

    A client may be injected so tests (or a host application) can share
    connection pools; otherwise a short-lived AsyncClient is opened per
    request. The timeout applies to every request either way.

    Attributes:
        _timeout: HTTP request timeout in seconds.
        _client: Optional shared AsyncClient.
        _logger: Structured logger.

    Example:
        >>> service = HttpxHttpService(timeout=10.0)
        >>> status, result = await service.get(
        ...     "https://transfer.example.com/api/metrics/disk",
        ...     DiskMetricsResponse,
        ... )
    """

    def __init__(
        self,
        *,
        timeout: float = HTTP_TIMEOUT_DEFAULT,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._timeout = timeout
        self._client = client
        self._logger = structlog.get_logger("zkdrop.http")

    async def get[T: BaseModel](
        self,
        url: str,
        response_model: type[T],
        token: str | None = None,
    ) -> TransportResponse[T]:
        return await self._send(
            method="GET",
            url=url,
            json_data=None,
            response_model=response_model,
            token=token,
        )

    async def post[T: BaseModel](
        self,
        url: str,
        payload: BaseModel,
        response_model: type[T],
        token: str | None = None,
    ) -> TransportResponse[T]:
        return await self._send(
            method="POST",
            url=url,
            json_data=payload.model_dump(mode="json", by_alias=True),
            response_model=response_model,
            token=token,
        )

    def _build_headers(self, token: str | None) -> dict[str, str]:
        headers = {"Accept": "application/json"}
        if token:
            headers["Authorization"] = f"{BEARER_PREFIX}{token}"
        return headers

    async def _execute_request(
        self,
        *,
        method: str,
        url: str,
        headers: dict[str, str],
        json_data: dict[str, Any] | None,
    ) -> httpx.Response | None:
        """Execute HTTP request, returning None when no response arrived."""
        try:
            if self._client is not None:
                return await self._client.request(
                    method=method,
                    url=url,
                    headers=headers,
                    json=json_data,
                    timeout=self._timeout,
                )
            async with httpx.AsyncClient(timeout=self._timeout) as client:
                return await client.request(
                    method=method, url=url, headers=headers, json=json_data
                )

        except httpx.TimeoutException as e:
            self._logger.warning("http_timeout", method=method, url=url, error=str(e))
            return None

        except httpx.RequestError as e:
            self._logger.warning(
                "http_connection_error", method=method, url=url, error=str(e)
            )
            return None

    async def _send[T: BaseModel](
        self,
        *,
        method: str,
        url: str,
        json_data: dict[str, Any] | None,
        response_model: type[T],
        token: str | None,
    ) -> TransportResponse[T]:
        response = await self._execute_request(
            method=method,
            url=url,
            headers=self._build_headers(token),
            json_data=json_data,
        )

        if response is None:
            return HTTPStatus.SERVICE_UNAVAILABLE, Failure(error=_UNKNOWN_ERROR)

        status = self._to_status(response.status_code)

        if response.is_success:
            return status, self._parse_success(response, response_model, url)

        self._logger.debug(
            "http_error_response",
            method=method,
            url=url,
            status_code=response.status_code,
        )
        return status, Failure(error=self._parse_error(response, url))

    @staticmethod
    def _to_status(code: int) -> HTTPStatus:
        try:
            return HTTPStatus(code)
        except ValueError:
            # Non-standard codes are treated as a generic server error
            return HTTPStatus.INTERNAL_SERVER_ERROR

    def _parse_success[T: BaseModel](
        self,
        response: httpx.Response,
        response_model: type[T],
        url: str,
    ) -> Result[T, ErrorResponse]:
        content = response.content or b"{}"
        try:
            return Success(value=response_model.model_validate_json(content))
        except ValidationError as e:
            self._logger.error(
                "http_invalid_response_body",
                url=url,
                model=response_model.__name__,
                error_count=e.error_count(),
            )
            return Failure(error=_UNKNOWN_ERROR)

    def _parse_error(self, response: httpx.Response, url: str) -> ErrorResponse:
        if not response.content:
            return _UNKNOWN_ERROR
        try:
            return ErrorResponse.model_validate_json(response.content)
        except ValidationError:
            self._logger.warning(
                "http_invalid_error_body",
                url=url,
                status_code=response.status_code,
                body=response.text[:RESPONSE_BODY_MAX_LENGTH],
            )
            return _UNKNOWN_ERROR
