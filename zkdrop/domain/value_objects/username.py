"""Username value object.

Immutable value object that validates username format.
"""

import re
from dataclasses import dataclass

from zkdrop.core.constants import USERNAME_MAX_LENGTH
from zkdrop.core.enums import ErrorCode
from zkdrop.core.errors import ValidationError
from zkdrop.core.result import Failure, Result, Success

_USERNAME_PATTERN = re.compile(r"^[A-Za-z0-9_\-]+$")


@dataclass(frozen=True)
class Username:
    """Username value object with format validation.

    The original casing is preserved for display. Lookups and credential
    derivation use ``lowercase``.

    Attributes:
        value: The username string (validated)

    Raises:
        ValueError: If username format is invalid

    Example:
        >>> Username("Alice").lowercase
        'alice'
        >>> Username("")
        Traceback (most recent call last):
        ...
        ValueError: Username must not be empty
    """

    value: str

    def __post_init__(self) -> None:
        """Validate username format after initialization.

        Raises:
            ValueError: If username does not meet requirements.
        """
        if not self.value:
            raise ValueError("Username must not be empty")

        if len(self.value) > USERNAME_MAX_LENGTH:
            raise ValueError(
                f"Username must be at most {USERNAME_MAX_LENGTH} characters"
            )

        if not _USERNAME_PATTERN.fullmatch(self.value):
            raise ValueError(
                "Username may only contain letters, digits, '_' and '-'"
            )

    @property
    def lowercase(self) -> str:
        """Lowercased username used for comparison and derivation."""
        return self.value.lower()

    @classmethod
    def from_string(cls, value: str) -> Result["Username", ValidationError]:
        """Build a Username without raising.

        Args:
            value: Raw username input.

        Returns:
            Success(Username): Input is valid.
            Failure(ValidationError): Input is rejected.
        """
        try:
            return Success(value=cls(value))
        except ValueError as e:
            return Failure(
                error=ValidationError(
                    code=ErrorCode.INVALID_USERNAME,
                    message=str(e),
                    field="username",
                )
            )

    def __str__(self) -> str:
        return self.value
