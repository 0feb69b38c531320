"""PostgreSQL implementation of Reply repository."""

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.error import AuthorizationError, NotFoundError
from forum.domain.model import AddedReply, NewReply, ReplyRecord
from forum.domain.repository import ReplyRepository
from forum.domain.value import (
    CommentId,
    IdGenerator,
    ReplyId,
    ThreadId,
    UserId,
    default_id_generator,
)
from forum.persistence.mappers import row_to_reply_record
from forum.persistence.tables import comments_table, replies_table, users_table


class PostgresReplyRepository(ReplyRepository):
    """PostgreSQL implementation of ReplyRepository."""

    def __init__(
        self, session: AsyncSession, id_generator: IdGenerator = default_id_generator
    ) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
            id_generator: Source of the random part of new reply IDs
        """
        self.session = session
        self.id_generator = id_generator

    async def verify_available_reply(
        self, thread_id: ThreadId, comment_id: CommentId, reply_id: ReplyId
    ) -> None:
        """Raise NotFoundError unless a live reply exists under the comment."""
        stmt = (
            select(replies_table.c.id)
            .join(comments_table, comments_table.c.id == replies_table.c.comment)
            .where(
                replies_table.c.id == reply_id,
                replies_table.c.comment == comment_id,
                comments_table.c.thread == thread_id,
                replies_table.c.is_deleted.is_(False),
            )
        )
        result = await self.session.execute(stmt)
        if result.first() is None:
            raise NotFoundError("Reply", reply_id)

    async def verify_reply_owner(self, reply_id: ReplyId, owner_id: UserId) -> None:
        """Raise unless owner_id wrote the reply."""
        stmt = select(replies_table.c.owner).where(replies_table.c.id == reply_id)
        result = await self.session.execute(stmt)
        owner = result.scalar_one_or_none()
        if owner is None:
            raise NotFoundError("Reply", reply_id)
        if owner != owner_id:
            raise AuthorizationError("reply", reply_id, owner_id)

    async def add_reply(self, new_reply: NewReply) -> AddedReply:
        """Insert a reply and return its ID, content and owner."""
        stmt = (
            replies_table.insert()
            .values(
                id=f"reply-{self.id_generator()}",
                comment=new_reply.comment,
                owner=new_reply.owner,
                content=new_reply.content,
            )
            .returning(replies_table.c.id, replies_table.c.content, replies_table.c.owner)
        )
        result = await self.session.execute(stmt)
        return AddedReply(**result.mappings().one())

    async def delete_reply_by_id(self, reply_id: ReplyId) -> None:
        """Soft delete a reply."""
        stmt = (
            update(replies_table)
            .where(replies_table.c.id == reply_id)
            .values(is_deleted=True)
        )
        result = await self.session.execute(stmt)
        if result.rowcount == 0:
            raise NotFoundError("Reply", reply_id)

    async def get_replies_by_comment_id(self, comment_id: CommentId) -> list[ReplyRecord]:
        """Get every reply of a comment, oldest first."""
        stmt = (
            select(
                replies_table.c.id,
                replies_table.c.comment,
                users_table.c.username,
                replies_table.c.date,
                replies_table.c.content,
                replies_table.c.is_deleted,
            )
            .join(users_table, users_table.c.id == replies_table.c.owner)
            .where(replies_table.c.comment == comment_id)
            .order_by(replies_table.c.date, replies_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_reply_record(dict(row)) for row in result.mappings().all()]
