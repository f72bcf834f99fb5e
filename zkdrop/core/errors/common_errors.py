"""Common error classes shared across layers.

Error Types:
- ValidationError: Credential or input validation failures
- KeyMaterialError: PEM encoding/decoding failures

Usage:
    from zkdrop.core.errors import ValidationError
    from zkdrop.core.enums import ErrorCode
    from zkdrop.core.result import Failure

    return Failure(error=ValidationError(
        code=ErrorCode.INVALID_USERNAME,
        message="Username must not be empty",
        field="username",
    ))
"""

from dataclasses import dataclass

from zkdrop.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        field: Field name that failed validation.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class KeyMaterialError(DomainError):
    """Asymmetric key material could not be converted."""

    pass
