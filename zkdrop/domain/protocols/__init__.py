"""Domain protocols (ports).

Structural interfaces for the collaborators the client depends on.
Infrastructure provides the adapters.
"""

from zkdrop.domain.protocols.authentication_api_protocol import (
    AuthenticationApiProtocol,
)
from zkdrop.domain.protocols.http_service_protocol import (
    HttpServiceProtocol,
    TransportResponse,
)
from zkdrop.domain.protocols.logger_protocol import LoggerProtocol
from zkdrop.domain.protocols.token_repository import TokenRepository
from zkdrop.domain.protocols.user_repository import UserRecord, UserRepository

__all__ = [
    "AuthenticationApiProtocol",
    "HttpServiceProtocol",
    "LoggerProtocol",
    "TokenRepository",
    "TransportResponse",
    "UserRecord",
    "UserRepository",
]
