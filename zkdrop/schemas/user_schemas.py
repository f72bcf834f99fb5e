"""User request/response schemas.

Endpoints:
    POST   {api}/user/register                     - Create account (public)
    GET    {api}/user/profile/{username}           - Public profile
    GET    {api}/user/settings                     - Own settings
    POST   {api}/user/settings/profile             - Update alias/about
    POST   {api}/user/settings/contact             - Update email address
    POST   {api}/user/settings/privacy             - Update privacy settings
    POST   {api}/user/settings/notification        - Update notification settings
    POST   {api}/user/settings/keys/x25519         - Upload X25519 key pair
    POST   {api}/user/settings/keys/ed25519        - Upload Ed25519 key pair
    GET    {api}/user/sent/{messages,files}        - Sent transfers
    GET    {api}/user/received/{messages,files}    - Received transfers
    GET    {api}/user/search?value=&index=&count=  - User search
    POST   {api}/user/verify                       - Email verification (public)
"""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from pydantic import Field

from zkdrop.domain.enums import UserItemTransferPermission, UserVisibilityLevel
from zkdrop.domain.value_objects import AuthenticationPassword, EmailAddress, Username
from zkdrop.schemas.common import ApiModel, EmptyResponse


# =============================================================================
# Registration
# =============================================================================


class UserRegisterRequest(ApiModel):
    """Request schema for registration."""

    username: str = Field(..., min_length=1)
    password: str = Field(
        ...,
        min_length=1,
        description="Derived authentication password (never the real password)",
    )
    email: str | None = Field(default=None, description="Optional email address")

    @classmethod
    def from_credentials(
        cls,
        username: Username,
        password: AuthenticationPassword,
        email_address: EmailAddress | None = None,
    ) -> "UserRegisterRequest":
        """Build a registration request from validated credentials."""
        return cls(
            username=username.value,
            password=password.value,
            email=email_address.value if email_address is not None else None,
        )


class UserRegisterResponse(EmptyResponse):
    pass


# =============================================================================
# Profile and settings
# =============================================================================


class GetUserPublicProfileResponse(ApiModel):
    """Public profile of another user."""

    username: str
    alias: str | None = None
    about: str | None = None
    allow_key_exchange_requests: bool = False
    received_messages_visible: bool = False
    received_files_visible: bool = False
    x25519_public_key: str | None = None
    ed25519_public_key: str | None = None


class UserSettingsResponse(ApiModel):
    """Settings of the authenticated user."""

    username: str
    email_address: str | None = None
    email_verified: bool = False
    alias: str | None = None
    about: str | None = None
    visibility: UserVisibilityLevel = UserVisibilityLevel.NONE
    allow_key_exchange_requests: bool = False
    message_transfer_permission: UserItemTransferPermission = (
        UserItemTransferPermission.NONE
    )
    file_transfer_permission: UserItemTransferPermission = (
        UserItemTransferPermission.NONE
    )
    enable_transfer_notifications: bool = False
    email_notifications: bool = False
    creation_utc: datetime | None = None


class UpdateProfileRequest(ApiModel):
    alias: str | None = None
    about: str | None = None


class UpdateProfileResponse(EmptyResponse):
    pass


class UpdateContactInfoRequest(ApiModel):
    """Change the email address; requires the current authentication password."""

    email: str | None = None
    current_password: str = Field(..., min_length=1)

    @classmethod
    def from_credentials(
        cls,
        email_address: EmailAddress | None,
        current_password: AuthenticationPassword,
    ) -> "UpdateContactInfoRequest":
        return cls(
            email=email_address.value if email_address is not None else None,
            current_password=current_password.value,
        )


class UpdateContactInfoResponse(EmptyResponse):
    pass


class UpdatePrivacySettingsRequest(ApiModel):
    allow_key_exchange_requests: bool
    visibility: UserVisibilityLevel
    message_transfer_permission: UserItemTransferPermission
    file_transfer_permission: UserItemTransferPermission


class UpdatePrivacySettingsResponse(EmptyResponse):
    pass


class UpdateNotificationSettingsRequest(ApiModel):
    enable_transfer_notifications: bool
    email_notifications: bool


class UpdateNotificationSettingsResponse(EmptyResponse):
    pass


class UpdateKeysRequest(ApiModel):
    """Upload an asymmetric key pair.

    The private key arrives already encrypted client-side with the symmetric
    key; the server only stores it.
    """

    encrypted_private_key: str = Field(..., min_length=1)
    public_key: str = Field(..., min_length=1, description="PEM-encoded public key")
    client_iv: str = Field(..., min_length=1)


class UpdateKeysResponse(EmptyResponse):
    pass


# =============================================================================
# Transfer listings
# =============================================================================


class UserSentMessageDTO(ApiModel):
    id: UUID
    subject: str
    recipient_username: str | None = None
    recipient_alias: str | None = None
    expiration_utc: datetime


class UserSentFileDTO(ApiModel):
    id: UUID
    file_name: str
    content_type: str
    recipient_username: str | None = None
    recipient_alias: str | None = None
    expiration_utc: datetime


class UserReceivedMessageDTO(ApiModel):
    id: UUID
    subject: str
    sender_username: str | None = None
    sender_alias: str | None = None
    expiration_utc: datetime


class UserReceivedFileDTO(ApiModel):
    id: UUID
    file_name: str
    content_type: str
    sender_username: str | None = None
    sender_alias: str | None = None
    expiration_utc: datetime


class UserSentMessagesResponse(ApiModel):
    messages: list[UserSentMessageDTO] = Field(default_factory=list)


class UserSentFilesResponse(ApiModel):
    files: list[UserSentFileDTO] = Field(default_factory=list)


class UserReceivedMessagesResponse(ApiModel):
    messages: list[UserReceivedMessageDTO] = Field(default_factory=list)


class UserReceivedFilesResponse(ApiModel):
    files: list[UserReceivedFileDTO] = Field(default_factory=list)


# =============================================================================
# Search
# =============================================================================


@dataclass(frozen=True, kw_only=True)
class UserSearchParameters:
    """Query parameters for user search (sent in the URL, not as a body).

    Attributes:
        keyword: Username or alias prefix to search for.
        index: Offset of the first result.
        count: Maximum number of results.
    """

    keyword: str
    index: int = 0
    count: int = 20


class UserSearchResultDTO(ApiModel):
    username: str
    alias: str | None = None


class UserSearchResponse(ApiModel):
    result: list[UserSearchResultDTO] = Field(default_factory=list)


# =============================================================================
# Email verification
# =============================================================================


class VerifyEmailAddressRequest(ApiModel):
    code: str = Field(..., min_length=1)
    signature: str = Field(..., min_length=1)


class VerifyEmailAddressResponse(EmptyResponse):
    pass
