"""Refresh token persistence types."""

from enum import Enum


class TokenType(str, Enum):
    """How a refresh token is persisted on the client.

    Sent with login and logout requests so the server issues a refresh
    token with the matching lifetime. Opaque to the authentication
    middleware.
    """

    SESSION = "session"
    DEVICE = "device"
