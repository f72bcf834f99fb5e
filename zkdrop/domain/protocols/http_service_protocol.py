"""HttpServiceProtocol (port) for the API transport.

The transport performs one HTTP call and reports both the status and the
decoded body. It never raises for HTTP or network failures: a request that
never got a response is reported with a non-401 status so callers treat it
as an ordinary failure.

Implementations:
    - HttpxHttpService: zkdrop/infrastructure/http/http_service.py
"""

from http import HTTPStatus
from typing import Protocol

from pydantic import BaseModel

from zkdrop.core.result import Result
from zkdrop.schemas.common import ErrorResponse

type TransportResponse[T] = tuple[HTTPStatus, Result[T, ErrorResponse]]


class HttpServiceProtocol(Protocol):
    """Protocol for HTTP request execution."""

    async def get[T: BaseModel](
        self,
        url: str,
        response_model: type[T],
        token: str | None = None,
    ) -> TransportResponse[T]:
        """Perform a GET request.

        Args:
            url: Absolute URL.
            response_model: Model used to decode a 2xx body.
            token: Bearer token, if the request is authenticated.

        Returns:
            (status, Success(model)) for 2xx responses.
            (status, Failure(ErrorResponse)) otherwise.
        """
        ...

    async def post[T: BaseModel](
        self,
        url: str,
        payload: BaseModel,
        response_model: type[T],
        token: str | None = None,
    ) -> TransportResponse[T]:
        """Perform a POST request with a JSON body.

        Args:
            url: Absolute URL.
            payload: Request body, serialized by alias.
            response_model: Model used to decode a 2xx body.
            token: Bearer token, if the request is authenticated.

        Returns:
            Same shape as ``get``.
        """
        ...
