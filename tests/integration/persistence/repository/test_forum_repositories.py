"""Integration tests for the PostgreSQL repositories.

Require a migrated database at DATABASE__URL; run with ``pytest -m integration``.
"""

from uuid import uuid4

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.error import AuthorizationError, NotFoundError
from forum.domain.model import NewComment, NewReply, NewThread
from forum.domain.repository import (
    CommentRepository,
    LikeRepository,
    ReplyRepository,
    ThreadRepository,
)
from forum.persistence.tables import users_table
from tests.conftest import make_user
from tests.harness import create_env_fixture

pytestmark = pytest.mark.integration

# Integration test fixture - real persistence
integration_env = create_env_fixture(unmock={"persistence"})


async def _seed_comment(env):
    """Insert a fresh user, thread and comment; return (user, thread, comment) IDs."""
    suffix = uuid4().hex[:12]
    user = make_user(f"user-{suffix}", f"user_{suffix}")
    session = await env.get(AsyncSession)
    await session.execute(
        users_table.insert().values(
            id=user.id,
            username=user.username.root,
            fullname=user.fullname,
            created_at=user.created_at,
        )
    )
    thread = await (await env.get(ThreadRepository)).add_thread(
        NewThread(title="sebuah thread", body="sebuah body", owner=user.id)
    )
    comment = await (await env.get(CommentRepository)).add_comment(
        NewComment(content="sebuah comment", owner=user.id, thread=thread.id)
    )
    return user.id, thread.id, comment.id


class TestPostgresLikeRepository:
    """Integration tests for PostgresLikeRepository."""

    @pytest.mark.asyncio
    async def test_upsert_toggle_alternates(self, integration_env):
        user_id, _, comment_id = await _seed_comment(integration_env)
        like_repo = await integration_env.get(LikeRepository)

        assert await like_repo.toggle_comment_like(user_id, comment_id) is True
        assert await like_repo.count_comment_likes(comment_id) == 1
        assert await like_repo.toggle_comment_like(user_id, comment_id) is False
        assert await like_repo.count_comment_likes(comment_id) == 0
        assert await like_repo.toggle_comment_like(user_id, comment_id) is True


class TestPostgresCommentRepository:
    """Integration tests for PostgresCommentRepository."""

    @pytest.mark.asyncio
    async def test_soft_delete(self, integration_env):
        user_id, thread_id, comment_id = await _seed_comment(integration_env)
        comment_repo = await integration_env.get(CommentRepository)

        await comment_repo.verify_comment_owner(comment_id, user_id)
        with pytest.raises(AuthorizationError):
            await comment_repo.verify_comment_owner(comment_id, "user-someone-else")

        await comment_repo.delete_comment_by_id(comment_id, thread_id)

        records = await comment_repo.get_comments_by_thread_id(thread_id)
        assert [(r.id, r.is_deleted) for r in records] == [(comment_id, True)]
        with pytest.raises(NotFoundError):
            await comment_repo.verify_available_comment(thread_id, comment_id)
        await comment_repo.verify_available_comment(
            thread_id, comment_id, include_deleted=True
        )


class TestPostgresReplyRepository:
    """Integration tests for PostgresReplyRepository."""

    @pytest.mark.asyncio
    async def test_reply_lifecycle(self, integration_env):
        user_id, thread_id, comment_id = await _seed_comment(integration_env)
        reply_repo = await integration_env.get(ReplyRepository)

        added = await reply_repo.add_reply(
            NewReply(content="sebuah balasan", owner=user_id, comment=comment_id)
        )
        await reply_repo.verify_available_reply(thread_id, comment_id, added.id)
        await reply_repo.delete_reply_by_id(added.id)

        records = await reply_repo.get_replies_by_comment_id(comment_id)
        assert records[0].id == added.id
        assert records[0].is_deleted is True
