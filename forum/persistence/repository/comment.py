"""PostgreSQL implementation of Comment repository."""

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from forum.domain.error import AuthorizationError, NotFoundError
from forum.domain.model import AddedComment, CommentRecord, NewComment
from forum.domain.repository import CommentRepository
from forum.domain.value import (
    CommentId,
    IdGenerator,
    ThreadId,
    UserId,
    default_id_generator,
)
from forum.persistence.mappers import row_to_comment_record
from forum.persistence.tables import comments_table, users_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(
        self, session: AsyncSession, id_generator: IdGenerator = default_id_generator
    ) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
            id_generator: Source of the random part of new comment IDs
        """
        self.session = session
        self.id_generator = id_generator

    async def verify_available_comment(
        self,
        thread_id: ThreadId,
        comment_id: CommentId,
        *,
        include_deleted: bool = False,
    ) -> None:
        """Raise NotFoundError unless the comment exists in the thread."""
        stmt = select(comments_table.c.id).where(
            comments_table.c.id == comment_id,
            comments_table.c.thread == thread_id,
        )
        if not include_deleted:
            stmt = stmt.where(comments_table.c.is_deleted.is_(False))
        result = await self.session.execute(stmt)
        if result.first() is None:
            raise NotFoundError("Comment", comment_id)

    async def verify_comment_owner(self, comment_id: CommentId, owner_id: UserId) -> None:
        """Raise unless owner_id wrote the comment."""
        stmt = select(comments_table.c.owner).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        owner = result.scalar_one_or_none()
        if owner is None:
            raise NotFoundError("Comment", comment_id)
        if owner != owner_id:
            raise AuthorizationError("comment", comment_id, owner_id)

    async def add_comment(self, new_comment: NewComment) -> AddedComment:
        """Insert a comment and return its ID, content and owner."""
        stmt = (
            comments_table.insert()
            .values(
                id=f"comment-{self.id_generator()}",
                thread=new_comment.thread,
                owner=new_comment.owner,
                content=new_comment.content,
            )
            .returning(
                comments_table.c.id, comments_table.c.content, comments_table.c.owner
            )
        )
        result = await self.session.execute(stmt)
        return AddedComment(**result.mappings().one())

    async def delete_comment_by_id(
        self, comment_id: CommentId, thread_id: ThreadId
    ) -> None:
        """Soft delete a comment; the row stays so its replies keep rendering."""
        stmt = (
            update(comments_table)
            .where(
                comments_table.c.id == comment_id,
                comments_table.c.thread == thread_id,
            )
            .values(is_deleted=True)
        )
        result = await self.session.execute(stmt)
        if result.rowcount == 0:
            raise NotFoundError("Comment", comment_id)

    async def get_comments_by_thread_id(self, thread_id: ThreadId) -> list[CommentRecord]:
        """Get every comment of a thread, oldest first."""
        stmt = (
            select(
                comments_table.c.id,
                users_table.c.username,
                comments_table.c.date,
                comments_table.c.content,
                comments_table.c.is_deleted,
            )
            .join(users_table, users_table.c.id == comments_table.c.owner)
            .where(comments_table.c.thread == thread_id)
            .order_by(comments_table.c.date, comments_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment_record(dict(row)) for row in result.mappings().all()]
