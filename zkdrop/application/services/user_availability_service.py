"""Username and email availability checks.

Both checks are case-insensitive: "Alice" is taken if "alice" exists.
"""

from zkdrop.domain.protocols import UserRepository
from zkdrop.domain.value_objects import EmailAddress, Username


class UserAvailabilityService:
    def __init__(self, user_repository: UserRepository) -> None:
        self._user_repository = user_repository

    async def is_username_available(self, username: Username) -> bool:
        return await self._user_repository.find_by_username(username.lowercase) is None

    async def is_email_address_available(self, email_address: EmailAddress) -> bool:
        return await self._user_repository.find_by_email(email_address.lowercase) is None
