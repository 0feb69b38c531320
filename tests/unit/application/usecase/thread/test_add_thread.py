"""Unit tests for AddThreadUseCase."""

from unittest.mock import AsyncMock

import pytest

from forum.application.usecase.thread import AddThreadRequest, AddThreadUseCase
from forum.domain.error import ValidationError
from forum.domain.model import AddedThread, NewThread
from forum.domain.repository import ThreadRepository


class TestAddThreadUseCase:
    """Tests for AddThreadUseCase."""

    @pytest.mark.asyncio
    async def test_add_thread_passes_validated_payload(self):
        """The repository receives the payload and its result is returned."""
        # Arrange
        thread_repo = AsyncMock(spec=ThreadRepository)
        expected = AddedThread(id="thread-123", title="sebuah thread", owner="user-123")
        thread_repo.add_thread.return_value = expected

        use_case = AddThreadUseCase(thread_repository=thread_repo)
        request = AddThreadRequest(
            owner="user-123", title="sebuah thread", body="sebuah body thread"
        )

        # Act
        result = await use_case.execute(request)

        # Assert
        assert result == expected
        thread_repo.add_thread.assert_awaited_once_with(
            NewThread(title="sebuah thread", body="sebuah body thread", owner="user-123")
        )

    @pytest.mark.asyncio
    async def test_add_thread_without_title_never_writes(self):
        thread_repo = AsyncMock(spec=ThreadRepository)
        use_case = AddThreadUseCase(thread_repository=thread_repo)

        with pytest.raises(ValidationError, match="title"):
            await use_case.execute(AddThreadRequest(owner="user-123", body="body"))

        thread_repo.add_thread.assert_not_awaited()
