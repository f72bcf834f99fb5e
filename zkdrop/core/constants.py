"""Centralized constants for internal implementation details.

This module contains constants that are fixed by the protocol, NOT
environment-specific configuration. For environment-specific settings,
use `zkdrop/core/config.py` instead.

Categories:
- Derived secret lengths
- Credential limits
- Timeouts
- Prefixes
- API route segments
"""

# =============================================================================
# Derived Secret Lengths
# =============================================================================

AUTHENTICATION_SECRET_BYTES: int = 64
"""Length of the server-facing authentication secret (SHA-512 digest)."""

SYMMETRIC_KEY_SEED_BYTES: int = 32
"""Length of the client-only symmetric key seed (SHA-256 digest)."""


# =============================================================================
# Credential Limits
# =============================================================================

USERNAME_MAX_LENGTH: int = 64
"""Maximum number of characters in a username."""


# =============================================================================
# Timeouts
# =============================================================================

HTTP_TIMEOUT_DEFAULT: float = 30.0
"""Default timeout for API calls in seconds."""


# =============================================================================
# Prefixes
# =============================================================================

BEARER_PREFIX: str = "Bearer "
"""HTTP Authorization header prefix for Bearer tokens."""


# =============================================================================
# API Route Segments
# =============================================================================

AUTHENTICATION_ROUTE: str = "authentication"
METRICS_ROUTE: str = "metrics"
USER_ROUTE: str = "user"
TRANSFER_ROUTE: str = "transfer"


# =============================================================================
# Response Limits
# =============================================================================

RESPONSE_BODY_MAX_LENGTH: int = 500
"""Maximum length for response body in log entries (truncation limit)."""
