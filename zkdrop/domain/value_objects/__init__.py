"""Domain value objects with validation.

Immutable value objects that enforce credential constraints.
"""

from zkdrop.domain.value_objects.email_address import EmailAddress
from zkdrop.domain.value_objects.password import AuthenticationPassword, Password
from zkdrop.domain.value_objects.username import Username

__all__ = [
    "AuthenticationPassword",
    "EmailAddress",
    "Password",
    "Username",
]
