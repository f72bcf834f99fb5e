"""Domain enums package.

Usage:
    from zkdrop.domain.enums import TokenType, LoginError
"""

from zkdrop.domain.enums.api_errors import (
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
from zkdrop.domain.enums.privacy import UserItemTransferPermission, UserVisibilityLevel
from zkdrop.domain.enums.token_type import TokenType

__all__ = [
    "ApiErrorCode",
    "DownloadTransferCiphertextError",
    "DownloadTransferPreviewError",
    "DownloadTransferSignatureError",
    "DummyError",
    "GetUserPublicProfileError",
    "LoginError",
    "LogoutError",
    "RefreshError",
    "TokenType",
    "UpdateContactInfoError",
    "UpdateKeysError",
    "UpdateNotificationSettingsError",
    "UpdatePrivacySettingsError",
    "UpdateProfileError",
    "UploadTransferError",
    "UserItemTransferPermission",
    "UserRegisterError",
    "UserVisibilityLevel",
    "VerifyEmailAddressError",
]
