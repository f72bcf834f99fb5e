"""Transfer request/response schemas.

Endpoints:
    POST   {api}/transfer/message[/{recipient}]          - Upload message
    POST   {api}/transfer/file[/{recipient}]             - Upload file
    POST   {api}/transfer/{message,file}/preview         - Download preview
    POST   {api}/transfer/{message,file}/signature       - Download signature
    POST   {api}/transfer/{message,file}/ciphertext      - Download ciphertext

Without a recipient segment the upload goes to an anonymous recipient and
is retrieved by transfer id.
"""

from datetime import datetime
from uuid import UUID

from pydantic import Field

from zkdrop.schemas.common import ApiModel


# =============================================================================
# Upload
# =============================================================================


class _UploadTransferRequest(ApiModel):
    ciphertext: list[str] = Field(..., min_length=1, description="Base64 ciphertext parts")
    signature: str
    client_encryption_iv: str
    server_encryption_key: str
    x25519_public_key: str
    ed25519_public_key: str
    requested_expiration_hours: int = Field(default=24, gt=0)


class UploadMessageTransferRequest(_UploadTransferRequest):
    subject: str = ""


class UploadFileTransferRequest(_UploadTransferRequest):
    file_name: str = Field(..., min_length=1)
    content_type: str = "application/octet-stream"


class UploadTransferResponse(ApiModel):
    id: UUID
    expiration_utc: datetime


# =============================================================================
# Download
# =============================================================================


class DownloadTransferPreviewRequest(ApiModel):
    id: UUID


class _TransferPreviewResponse(ApiModel):
    size: int
    sender_username: str | None = None
    sender_alias: str | None = None
    recipient_username: str | None = None
    x25519_public_key: str
    creation_utc: datetime
    expiration_utc: datetime


class DownloadTransferMessagePreviewResponse(_TransferPreviewResponse):
    subject: str = ""


class DownloadTransferFilePreviewResponse(_TransferPreviewResponse):
    file_name: str
    content_type: str


class DownloadTransferSignatureRequest(ApiModel):
    id: UUID


class DownloadTransferSignatureResponse(ApiModel):
    signature: str
    ed25519_public_key: str


class DownloadTransferCiphertextRequest(ApiModel):
    id: UUID
    server_decryption_key: str = Field(..., min_length=1)


class DownloadTransferCiphertextResponse(ApiModel):
    ciphertext: list[str]
    client_encryption_iv: str
