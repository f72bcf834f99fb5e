"""Email address value object with validation.

Immutable value object that validates email format.
"""

from dataclasses import dataclass

from email_validator import EmailNotValidError, validate_email

from zkdrop.core.enums import ErrorCode
from zkdrop.core.errors import ValidationError
from zkdrop.core.result import Failure, Result, Success


@dataclass(frozen=True)
class EmailAddress:
    """Email value object with format validation.

    Uses email-validator library for RFC-compliant validation.

    Attributes:
        value: The email address string (validated, normalized)

    Raises:
        ValueError: If email format is invalid

    Example:
        >>> EmailAddress("user@example.com").value
        'user@example.com'
    """

    value: str

    def __post_init__(self) -> None:
        """Validate email format after initialization.

        Raises:
            ValueError: If email format is invalid.
        """
        try:
            # No deliverability check: the client must work offline
            validated = validate_email(self.value, check_deliverability=False)
            # Use object.__setattr__ because dataclass is frozen
            object.__setattr__(self, "value", validated.normalized)
        except EmailNotValidError as e:
            raise ValueError(f"Invalid email: {e}") from e

    @classmethod
    def from_string(cls, value: str) -> Result["EmailAddress", ValidationError]:
        try:
            return Success(value=cls(value))
        except ValueError as e:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.INVALID_EMAIL,
                    message=str(e),
                    field="email_address",
                )
            )

    @property
    def lowercase(self) -> str:
        """Lowercased address used for availability checks."""
        return self.value.lower()

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"EmailAddress('{self.value}')"
