"""Unit tests for the in-memory thread, comment and reply repositories."""

import pytest

from forum.domain.error import AuthorizationError, NotFoundError
from forum.domain.model import NewComment, NewReply, NewThread
from forum.domain.repository import (
    CommentRepository,
    ReplyRepository,
    ThreadRepository,
    UserRepository,
)
from tests.conftest import make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _seed(unit_env):
    """Create a user, a thread and a comment; return their IDs."""
    await (await unit_env.get(UserRepository)).add_user(make_user())
    thread = await (await unit_env.get(ThreadRepository)).add_thread(
        NewThread(title="sebuah thread", body="sebuah body", owner="user-123")
    )
    comment = await (await unit_env.get(CommentRepository)).add_comment(
        NewComment(content="sebuah comment", owner="user-123", thread=thread.id)
    )
    return thread.id, comment.id


class TestThreadRepository:
    """Tests for InMemoryThreadRepository."""

    @pytest.mark.asyncio
    async def test_add_and_get_thread(self, unit_env):
        await (await unit_env.get(UserRepository)).add_user(make_user())
        thread_repo = await unit_env.get(ThreadRepository)

        added = await thread_repo.add_thread(
            NewThread(title="sebuah thread", body="sebuah body", owner="user-123")
        )
        record = await thread_repo.get_thread_by_id(added.id)

        assert added.id.startswith("thread-")
        assert added.owner == "user-123"
        assert record.title == "sebuah thread"
        assert record.username == "dicoding"

    @pytest.mark.asyncio
    async def test_unknown_thread_is_not_available(self, unit_env):
        thread_repo = await unit_env.get(ThreadRepository)

        with pytest.raises(NotFoundError, match="thread-x"):
            await thread_repo.verify_available_thread("thread-x")
        with pytest.raises(NotFoundError):
            await thread_repo.get_thread_by_id("thread-x")


class TestCommentRepository:
    """Tests for InMemoryCommentRepository."""

    @pytest.mark.asyncio
    async def test_comment_must_belong_to_thread(self, unit_env):
        thread_id, comment_id = await _seed(unit_env)
        comment_repo = await unit_env.get(CommentRepository)

        await comment_repo.verify_available_comment(thread_id, comment_id)
        with pytest.raises(NotFoundError):
            await comment_repo.verify_available_comment("thread-other", comment_id)

    @pytest.mark.asyncio
    async def test_owner_check(self, unit_env):
        _, comment_id = await _seed(unit_env)
        comment_repo = await unit_env.get(CommentRepository)

        await comment_repo.verify_comment_owner(comment_id, "user-123")
        with pytest.raises(AuthorizationError):
            await comment_repo.verify_comment_owner(comment_id, "user-456")

    @pytest.mark.asyncio
    async def test_soft_delete_keeps_record(self, unit_env):
        thread_id, comment_id = await _seed(unit_env)
        comment_repo = await unit_env.get(CommentRepository)

        await comment_repo.delete_comment_by_id(comment_id, thread_id)

        records = await comment_repo.get_comments_by_thread_id(thread_id)
        assert [r.id for r in records] == [comment_id]
        assert records[0].is_deleted is True
        assert records[0].content == "sebuah comment"
        with pytest.raises(NotFoundError):
            await comment_repo.verify_available_comment(thread_id, comment_id)
        await comment_repo.verify_available_comment(
            thread_id, comment_id, include_deleted=True
        )


class TestReplyRepository:
    """Tests for InMemoryReplyRepository."""

    @pytest.mark.asyncio
    async def test_replies_are_scoped_to_their_comment(self, unit_env):
        thread_id, comment_id = await _seed(unit_env)
        comment_repo = await unit_env.get(CommentRepository)
        reply_repo = await unit_env.get(ReplyRepository)
        other = await comment_repo.add_comment(
            NewComment(content="lainnya", owner="user-123", thread=thread_id)
        )

        first = await reply_repo.add_reply(
            NewReply(content="satu", owner="user-123", comment=comment_id)
        )
        await reply_repo.add_reply(
            NewReply(content="dua", owner="user-123", comment=other.id)
        )

        records = await reply_repo.get_replies_by_comment_id(comment_id)
        assert [r.id for r in records] == [first.id]
        assert records[0].username == "dicoding"

    @pytest.mark.asyncio
    async def test_reply_availability_follows_the_path(self, unit_env):
        thread_id, comment_id = await _seed(unit_env)
        reply_repo = await unit_env.get(ReplyRepository)
        reply = await reply_repo.add_reply(
            NewReply(content="satu", owner="user-123", comment=comment_id)
        )

        await reply_repo.verify_available_reply(thread_id, comment_id, reply.id)
        with pytest.raises(NotFoundError):
            await reply_repo.verify_available_reply("thread-other", comment_id, reply.id)
        with pytest.raises(NotFoundError):
            await reply_repo.verify_available_reply(thread_id, "comment-other", reply.id)

        await reply_repo.delete_reply_by_id(reply.id)
        with pytest.raises(NotFoundError):
            await reply_repo.verify_available_reply(thread_id, comment_id, reply.id)

    @pytest.mark.asyncio
    async def test_reply_owner_check(self, unit_env):
        _, comment_id = await _seed(unit_env)
        reply_repo = await unit_env.get(ReplyRepository)
        reply = await reply_repo.add_reply(
            NewReply(content="satu", owner="user-123", comment=comment_id)
        )

        with pytest.raises(AuthorizationError):
            await reply_repo.verify_reply_owner(reply.id, "user-456")


class TestUserRepository:
    """Tests for InMemoryUserRepository."""

    @pytest.mark.asyncio
    async def test_added_user_names_their_threads(self, unit_env):
        await (await unit_env.get(UserRepository)).add_user(
            make_user("user-456", "johndoe")
        )
        thread_repo = await unit_env.get(ThreadRepository)

        added = await thread_repo.add_thread(
            NewThread(title="sebuah thread", body="sebuah body", owner="user-456")
        )

        assert (await thread_repo.get_thread_by_id(added.id)).username == "johndoe"

    @pytest.mark.asyncio
    async def test_unregistered_owner_cannot_be_resolved(self, unit_env):
        thread_repo = await unit_env.get(ThreadRepository)
        added = await thread_repo.add_thread(
            NewThread(title="sebuah thread", body="sebuah body", owner="user-x")
        )

        with pytest.raises(NotFoundError, match="User"):
            await thread_repo.get_thread_by_id(added.id)
