"""Tests for UserAvailabilityService and DeleteUserJob."""

from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from zkdrop.application.jobs import DeleteUserJob
from zkdrop.application.services import UserAvailabilityService
from zkdrop.domain.protocols import UserRecord
from zkdrop.domain.value_objects import EmailAddress, Username


@pytest.fixture
def user_repository() -> MagicMock:
    repository = MagicMock()
    repository.find_by_username = AsyncMock(return_value=None)
    repository.find_by_email = AsyncMock(return_value=None)
    repository.delete = AsyncMock()
    return repository


@pytest.mark.unit
class TestUserAvailabilityService:
    @pytest.mark.asyncio
    async def test_username_available(self, user_repository) -> None:
        service = UserAvailabilityService(user_repository)

        assert await service.is_username_available(Username("Alice")) is True
        user_repository.find_by_username.assert_awaited_once_with("alice")

    @pytest.mark.asyncio
    async def test_username_taken(self, user_repository) -> None:
        user_repository.find_by_username.return_value = UserRecord(
            id=uuid4(), username="alice"
        )
        service = UserAvailabilityService(user_repository)

        assert await service.is_username_available(Username("ALICE")) is False

    @pytest.mark.asyncio
    async def test_email_lookup_is_lowercased(self, user_repository) -> None:
        user_repository.find_by_email.return_value = UserRecord(
            id=uuid4(), username="alice", email="alice@example.com"
        )
        service = UserAvailabilityService(user_repository)

        result = await service.is_email_address_available(
            EmailAddress("Alice@Example.com")
        )

        assert result is False
        user_repository.find_by_email.assert_awaited_once_with("alice@example.com")


@pytest.mark.unit
class TestDeleteUserJob:
    @pytest.mark.asyncio
    async def test_missing_user_returns_false(self, user_repository) -> None:
        job = DeleteUserJob(user_repository, MagicMock())

        assert await job.run(Username("ghost")) is False
        user_repository.delete.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_deletes_by_id(self, user_repository) -> None:
        user_id = uuid4()
        user_repository.find_by_username.return_value = UserRecord(
            id=user_id, username="Alice"
        )
        job = DeleteUserJob(user_repository, MagicMock())

        assert await job.run(Username("Alice")) is True
        user_repository.delete.assert_awaited_once_with(user_id)
