"""Password value objects.

Two distinct, unrelated types:

- Password: the user's real secret. Never serialized, logged, or sent.
- AuthenticationPassword: derived from a Password and safe to transmit.

AuthenticationPassword is deliberately not a subclass of Password, so a
type checker rejects one where the other is expected.
"""

from dataclasses import dataclass

from zkdrop.core.enums import ErrorCode
from zkdrop.core.errors import ValidationError
from zkdrop.core.result import Failure, Result, Success


@dataclass(frozen=True)
class Password:
    """The user's real password.

    Attributes:
        value: The password string (validated)

    Raises:
        ValueError: If password is empty

    Example:
        >>> password = Password("secret1")
        >>> str(password)
        '*******'
    """

    value: str

    def __post_init__(self) -> None:
        """Validate password after initialization.

        Raises:
            ValueError: If password is empty.
        """
        if not self.value:
            raise ValueError("Password must not be empty")

    @classmethod
    def from_string(cls, value: str) -> Result["Password", ValidationError]:
        """Build a Password without raising."""
        try:
            return Success(value=cls(value))
        except ValueError as e:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.INVALID_PASSWORD,
                    message=str(e),
                    field="password",
                )
            )

    def __str__(self) -> str:
        """Return masked password for security.

        Note:
            Never return plaintext password in logs or output.
        """
        return "*" * len(self.value)

    def __repr__(self) -> str:
        """Return repr for debugging (masked)."""
        return f"Password('{'*' * len(self.value)}')"


@dataclass(frozen=True)
class AuthenticationPassword:
    """Derived authentication secret in its transmittable string form.

    Built by zkdrop.infrastructure.security.credential_derivation; the
    server only ever sees this value.

    Attributes:
        value: Base64 encoding of the 64-byte authentication secret.
    """

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("Authentication password must not be empty")

    def __repr__(self) -> str:
        return "AuthenticationPassword('***')"
