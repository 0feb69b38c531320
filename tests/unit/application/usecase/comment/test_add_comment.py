"""Unit tests for AddCommentUseCase."""

from unittest.mock import AsyncMock, Mock, call

import pytest

from forum.application.usecase.comment import AddCommentRequest, AddCommentUseCase
from forum.domain.error import NotFoundError, ValidationError
from forum.domain.model import AddedComment, NewComment
from forum.domain.repository import CommentRepository, ThreadRepository


@pytest.fixture
def repos():
    parent = Mock()
    parent.attach_mock(AsyncMock(spec=ThreadRepository), "thread")
    parent.attach_mock(AsyncMock(spec=CommentRepository), "comment")
    return parent


def _use_case(repos) -> AddCommentUseCase:
    return AddCommentUseCase(
        comment_repository=repos.comment, thread_repository=repos.thread
    )


class TestAddCommentUseCase:
    """Tests for AddCommentUseCase."""

    @pytest.mark.asyncio
    async def test_add_comment_after_thread_check(self, repos):
        """Thread is verified first, then the normalized payload is inserted."""
        # Arrange
        expected = AddedComment(id="comment-123", content="sebuah comment", owner="user-123")
        repos.comment.add_comment.return_value = expected
        request = AddCommentRequest(
            thread_id="thread-123", owner="user-123", content="sebuah comment"
        )

        # Act
        result = await _use_case(repos).execute(request)

        # Assert
        assert result == expected
        assert repos.mock_calls == [
            call.thread.verify_available_thread("thread-123"),
            call.comment.add_comment(
                NewComment(
                    content="sebuah comment", owner="user-123", thread="thread-123"
                )
            ),
        ]

    @pytest.mark.asyncio
    async def test_unknown_thread_stops_before_insert(self, repos):
        repos.thread.verify_available_thread.side_effect = NotFoundError(
            "Thread", "thread-x"
        )
        request = AddCommentRequest(thread_id="thread-x", owner="user-123", content="a")

        with pytest.raises(NotFoundError, match="thread-x"):
            await _use_case(repos).execute(request)

        repos.comment.add_comment.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_invalid_content_raises_validation_error(self, repos):
        request = AddCommentRequest(thread_id="thread-123", owner="user-123", content=123)

        with pytest.raises(ValidationError, match="content"):
            await _use_case(repos).execute(request)

        repos.comment.add_comment.assert_not_awaited()
