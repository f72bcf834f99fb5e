"""Per-endpoint error codes returned by the transfer API.

The server reports failures as a generic envelope carrying an integer
``errorCode``. Each endpoint interprets that integer against its own enum
(see zkdrop.infrastructure.api.error_projection).

Every enum reserves 0 for UNKNOWN_ERROR. Codes the client does not know
resolve to UNKNOWN_ERROR through ``_missing_`` rather than raising.
"""

from enum import IntEnum


class ApiErrorCode(IntEnum):
    """Base for endpoint error enums.

    Subclasses must define ``UNKNOWN_ERROR = 0``.
    """

    @classmethod
    def _missing_(cls, value: object) -> "ApiErrorCode":
        return cls(0)


class DummyError(ApiErrorCode):
    """Endpoints with no application-level failure modes."""

    UNKNOWN_ERROR = 0


class LoginError(ApiErrorCode):
    UNKNOWN_ERROR = 0
    INVALID_USERNAME = 1
    INVALID_PASSWORD = 2
    INVALID_TOKEN_TYPE_REQUESTED = 3
    EXCESSIVE_FAILED_LOGIN_ATTEMPTS = 4


class RefreshError(ApiErrorCode):
    UNKNOWN_ERROR = 0
    INVALID_TOKEN = 1


class LogoutError(ApiErrorCode):
    UNKNOWN_ERROR = 0
    INVALID_TOKEN = 1


class UserRegisterError(ApiErrorCode):
    UNKNOWN_ERROR = 0
    INVALID_USERNAME = 1
    INVALID_PASSWORD = 2
    INVALID_EMAIL_ADDRESS = 3
    USERNAME_TAKEN = 4
    EMAIL_ADDRESS_TAKEN = 5


class GetUserPublicProfileError(ApiErrorCode):
    UNKNOWN_ERROR = 0
    NOT_FOUND = 1


class UpdateProfileError(ApiErrorCode):
    UNKNOWN_ERROR = 0


class UpdateContactInfoError(ApiErrorCode):
    UNKNOWN_ERROR = 0
    USER_NOT_FOUND = 1
    INVALID_EMAIL_ADDRESS = 2
    INVALID_PASSWORD = 3
    EMAIL_ADDRESS_UNAVAILABLE = 4


class UpdatePrivacySettingsError(ApiErrorCode):
    UNKNOWN_ERROR = 0
    USER_NOT_FOUND = 1


class UpdateNotificationSettingsError(ApiErrorCode):
    UNKNOWN_ERROR = 0
    EMAIL_ADDRESS_NOT_VERIFIED = 1


class UpdateKeysError(ApiErrorCode):
    UNKNOWN_ERROR = 0
    KEY_ALREADY_EXISTS = 1


class VerifyEmailAddressError(ApiErrorCode):
    UNKNOWN_ERROR = 0
    NOT_FOUND = 1


class UploadTransferError(ApiErrorCode):
    UNKNOWN_ERROR = 0
    BLOCKED_BY_USER_PRIVACY = 1
    OUT_OF_SPACE = 2
    USER_NOT_FOUND = 3
    INVALID_REQUESTED_EXPIRATION = 4


class DownloadTransferPreviewError(ApiErrorCode):
    UNKNOWN_ERROR = 0
    NOT_FOUND = 1


class DownloadTransferSignatureError(ApiErrorCode):
    UNKNOWN_ERROR = 0
    NOT_FOUND = 1


class DownloadTransferCiphertextError(ApiErrorCode):
    UNKNOWN_ERROR = 0
    NOT_FOUND = 1
    SERVER_DECRYPTION_FAILED = 2
