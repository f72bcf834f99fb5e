"""Credential derivation for the zero-knowledge boundary.

Turns a (username, password) pair into two independent secrets:

- Authentication password: SHA-512 over password bytes, then lowercased
  username bytes. 64 bytes. Sent to the server in place of the real
  password.
- Symmetric key: SHA-256 over lowercased username bytes, then password
  bytes. 32 bytes. Never leaves the client.

The two digests use different hash widths AND opposite feed order. Each is
computed by its own function with its own pair of update() calls; they do
not share a helper.

Both functions are pure and thread-safe.
"""

import base64
import hashlib

from zkdrop.domain.value_objects import AuthenticationPassword, Password, Username


def derive_authentication_password(username: Username, password: Password) -> bytes:
    """Digest the user's credentials into the server-facing secret.

    Args:
        username: Validated username. Lowercased here.
        password: Validated real password.

    Returns:
        64-byte SHA-512 digest.

    Example:
        >>> a = derive_authentication_password(Username("Alice"), Password("secret1"))
        >>> b = derive_authentication_password(Username("alice"), Password("secret1"))
        >>> a == b, len(a)
        (True, 64)
    """
    digest = hashlib.sha512()
    digest.update(password.value.encode("utf-8"))
    digest.update(username.lowercase.encode("utf-8"))
    return digest.digest()


def derive_symmetric_key(username: Username, password: Password) -> bytes:
    """Digest the user's credentials into the client-only key seed.

    Args:
        username: Validated username. Lowercased here.
        password: Validated real password.

    Returns:
        32-byte SHA-256 digest.
    """
    digest = hashlib.sha256()
    digest.update(username.lowercase.encode("utf-8"))
    digest.update(password.value.encode("utf-8"))
    return digest.digest()


def to_authentication_password(secret: bytes) -> AuthenticationPassword:
    """Encode a derived authentication secret for transmission.

    Args:
        secret: Output of derive_authentication_password.

    Returns:
        AuthenticationPassword holding the standard base64 encoding.
    """
    return AuthenticationPassword(base64.b64encode(secret).decode("ascii"))
