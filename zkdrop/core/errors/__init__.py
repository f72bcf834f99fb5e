"""Core errors package.

Usage:
    from zkdrop.core.errors import DomainError, ValidationError
"""

from zkdrop.core.errors.common_errors import (
    KeyMaterialError,
    ValidationError,
)
from zkdrop.core.errors.domain_error import DomainError

__all__ = [
    "DomainError",
    "KeyMaterialError",
    "ValidationError",
]
