"""Client-side error codes (machine-readable).

These cover failures that originate in the client itself. Failures reported
by the server are carried as per-endpoint IntEnums instead
(see zkdrop.domain.enums.api_errors).

Error codes follow ENTITY_ACTION_REASON naming convention.
"""

from enum import Enum


class ErrorCode(Enum):
    """Client-side error codes."""

    # Validation errors
    INVALID_USERNAME = "invalid_username"
    INVALID_PASSWORD = "invalid_password"
    INVALID_EMAIL = "invalid_email"

    # Key material errors
    KEY_DECODING_FAILED = "key_decoding_failed"
