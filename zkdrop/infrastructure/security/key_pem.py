"""PEM conversion for asymmetric key material.

X25519 (key exchange) and Ed25519 (signing) keys cross the API boundary as
PEM text. This module only converts formats; it performs no encryption.

Architecture:
    - Infrastructure adapter around the ``cryptography`` package
    - Returns Result types for decoding (malformed PEM is expected input)
"""

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ed25519, x25519

from zkdrop.core.enums import ErrorCode
from zkdrop.core.errors import KeyMaterialError
from zkdrop.core.result import Failure, Result, Success
from zkdrop.schemas.user_schemas import UpdateKeysRequest

type PrivateKey = x25519.X25519PrivateKey | ed25519.Ed25519PrivateKey
type PublicKey = x25519.X25519PublicKey | ed25519.Ed25519PublicKey


def key_to_pem(key: PrivateKey | PublicKey) -> str:
    """Encode a key as PEM text.

    Private keys use unencrypted PKCS#8; public keys use SubjectPublicKeyInfo.

    Args:
        key: X25519 or Ed25519 key, private or public.

    Returns:
        PEM string including BEGIN/END lines.
    """
    if isinstance(key, (x25519.X25519PrivateKey, ed25519.Ed25519PrivateKey)):
        data = key.private_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PrivateFormat.PKCS8,
            encryption_algorithm=serialization.NoEncryption(),
        )
    else:
        data = key.public_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PublicFormat.SubjectPublicKeyInfo,
        )
    return data.decode("ascii")


def key_pair_from_pem(
    pem: str,
) -> Result[tuple[PrivateKey, PublicKey], KeyMaterialError]:
    """Decode a PEM private key into its key pair.

    Args:
        pem: PKCS#8 PEM text of an X25519 or Ed25519 private key.

    Returns:
        Success((private_key, public_key)): Key decoded.
        Failure(KeyMaterialError): Malformed PEM or unsupported key type.
    """
    try:
        private_key = serialization.load_pem_private_key(
            pem.encode("ascii"), password=None
        )
    except (ValueError, TypeError, UnsupportedAlgorithm) as e:
        return Failure(
            error=KeyMaterialError(
                code=ErrorCode.KEY_DECODING_FAILED,
                message=f"Invalid PEM private key: {e}",
            )
        )

    if not isinstance(
        private_key, (x25519.X25519PrivateKey, ed25519.Ed25519PrivateKey)
    ):
        return Failure(
            error=KeyMaterialError(
                code=ErrorCode.KEY_DECODING_FAILED,
                message=f"Unsupported key type: {type(private_key).__name__}",
            )
        )

    return Success(value=(private_key, private_key.public_key()))


def build_update_keys_request(
    public_key: PublicKey,
    encrypted_private_key: str,
    client_iv: str,
) -> UpdateKeysRequest:
    """Build the key upload payload.

    Args:
        public_key: Public half of the pair, sent as PEM.
        encrypted_private_key: Private key already encrypted client-side.
        client_iv: IV used for that encryption.
    """
    return UpdateKeysRequest(
        encrypted_private_key=encrypted_private_key,
        public_key=key_to_pem(public_key),
        client_iv=client_iv,
    )
