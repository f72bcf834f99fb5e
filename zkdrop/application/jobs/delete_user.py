"""Account deletion job.

Flow:
1. Look the user up by username
2. Missing user: return False
3. Delete by id and return True
"""

from zkdrop.domain.protocols import LoggerProtocol, UserRepository
from zkdrop.domain.value_objects import Username


class DeleteUserJob:
    """Delete a user account by username.

    Dependencies (injected via constructor):
        - UserRepository: Record lookup and deletion
        - LoggerProtocol: Structured logging
    """

    def __init__(self, user_repository: UserRepository, logger: LoggerProtocol) -> None:
        self._user_repository = user_repository
        self._logger = logger

    async def run(self, username: Username) -> bool:
        """Delete the named user.

        Returns:
            True if a user was deleted, False if none matched.
        """
        user = await self._user_repository.find_by_username(username.lowercase)
        if user is None:
            self._logger.info("user_delete_skipped", username=username.value)
            return False

        await self._user_repository.delete(user.id)
        self._logger.info("user_deleted", user_id=str(user.id))
        return True
