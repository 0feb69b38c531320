"""Unit tests for AddReplyUseCase."""

from unittest.mock import AsyncMock, Mock, call

import pytest

from forum.application.usecase.reply import AddReplyRequest, AddReplyUseCase
from forum.domain.error import NotFoundError
from forum.domain.model import AddedReply, NewReply
from forum.domain.repository import CommentRepository, ReplyRepository, ThreadRepository


@pytest.fixture
def repos():
    parent = Mock()
    parent.attach_mock(AsyncMock(spec=ThreadRepository), "thread")
    parent.attach_mock(AsyncMock(spec=CommentRepository), "comment")
    parent.attach_mock(AsyncMock(spec=ReplyRepository), "reply")
    return parent


def _use_case(repos) -> AddReplyUseCase:
    return AddReplyUseCase(
        reply_repository=repos.reply,
        comment_repository=repos.comment,
        thread_repository=repos.thread,
    )


def _request(content="sebuah balasan") -> AddReplyRequest:
    return AddReplyRequest(
        thread_id="thread-123",
        comment_id="comment-123",
        owner="user-123",
        content=content,
    )


class TestAddReplyUseCase:
    """Tests for AddReplyUseCase."""

    @pytest.mark.asyncio
    async def test_add_reply_after_thread_and_comment_checks(self, repos):
        expected = AddedReply(id="reply-123", content="sebuah balasan", owner="user-123")
        repos.reply.add_reply.return_value = expected

        result = await _use_case(repos).execute(_request())

        assert result == expected
        assert repos.mock_calls == [
            call.thread.verify_available_thread("thread-123"),
            call.comment.verify_available_comment("thread-123", "comment-123"),
            call.reply.add_reply(
                NewReply(
                    content="sebuah balasan", owner="user-123", comment="comment-123"
                )
            ),
        ]

    @pytest.mark.asyncio
    async def test_deleted_comment_cannot_be_replied_to(self, repos):
        repos.comment.verify_available_comment.side_effect = NotFoundError(
            "Comment", "comment-123"
        )

        with pytest.raises(NotFoundError):
            await _use_case(repos).execute(_request())

        repos.reply.add_reply.assert_not_awaited()
